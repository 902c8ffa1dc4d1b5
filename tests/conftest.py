"""Shared fixtures for building temporary configs and content trees."""

from __future__ import annotations

import shutil
import sys
import textwrap
from pathlib import Path

import pytest

# Ensure the repository's src/ directory is importable without installation.
REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = REPO_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

FIXTURE_CONTENT = Path(__file__).resolve().parent / "fixtures" / "content"

_DEFAULT_CHECKS = (
    '  future_dates: "warn"\n'
    '  unknown_keys: "ignore"\n'
    '  image_exists: false\n'
)


@pytest.fixture(autouse=True)
def isolated_data_dir(tmp_path, monkeypatch):
    """Keep every test's runtime data dir inside its own tmp_path."""
    data_dir = tmp_path / "data"
    monkeypatch.setenv("FRONTMATTER_LINT_DATA_DIR", str(data_dir))
    return data_dir


@pytest.fixture
def content_root(tmp_path):
    """A copy of the sample content tree."""
    root = tmp_path / "content"
    shutil.copytree(FIXTURE_CONTENT, root)
    return root


@pytest.fixture
def make_config(tmp_path):
    """Factory writing a config.yaml that points at a content root."""

    def _make(root: Path, checks: str = _DEFAULT_CHECKS) -> Path:
        config_path = tmp_path / "config" / "config.yaml"
        config_path.parent.mkdir(parents=True, exist_ok=True)
        body = textwrap.dedent(
            f"""\
            content:
              root: "{root.as_posix()}"
              patterns: ["**/*.md", "**/*.mdx"]
              public_dir: "{(tmp_path / 'public').as_posix()}"
            frontmatter:
              required_keys: ["title", "publishedAt", "summary", "image"]
              allowed_keys: ["draft", "tags"]
              date_key: "publishedAt"
              date_formats: ["%Y-%m-%d"]
            index:
              filename: "content_index.json"
              words_per_minute: 200
            """
        )
        config_path.write_text(body + "checks:\n" + checks, encoding="utf-8")
        return config_path

    return _make
