"""Tests for configuration management defaults and validation."""

from __future__ import annotations

import textwrap

import pytest

from frontmatter_lint.core.config import ConfigManager


def test_config_manager_creates_defaults(tmp_path):
    """When pointed at an empty directory, a default config file is created."""

    config_path = tmp_path / "config.yaml"
    assert not config_path.exists()

    cfg = ConfigManager(str(config_path))

    assert config_path.exists(), "config.yaml should be created on first run"
    data = cfg.load_config()
    assert isinstance(data, dict)
    assert cfg.validate_config() is True
    assert cfg.get_setting("frontmatter", "required_keys") == ["title", "publishedAt", "summary", "image"]


def test_existing_config_is_not_overwritten(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("content:\n  root: posts\nfrontmatter: {}\n", encoding="utf-8")

    cfg = ConfigManager(str(config_path))

    assert "posts" in config_path.read_text(encoding="utf-8")
    assert cfg.get_content_root() == (tmp_path / "posts").resolve()


def test_missing_keys_fall_back_to_defaults(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("content:\n  root: posts\nfrontmatter: {}\n", encoding="utf-8")

    cfg = ConfigManager(str(config_path))

    assert cfg.validate_config() is True
    assert cfg.get_patterns() == ["**/*.md", "**/*.mdx"]
    assert cfg.get_setting("frontmatter", "date_key") == "publishedAt"
    assert cfg.get_setting("checks", "future_dates") == "warn"
    assert cfg.get_public_dir() == (tmp_path / "public").resolve()


@pytest.mark.parametrize(
    "body",
    [
        # missing frontmatter section
        """
        content:
          root: posts
        """,
        # date key not required
        """
        content:
          root: posts
        frontmatter:
          required_keys: [title]
          date_key: publishedAt
        """,
        # bad enum
        """
        content:
          root: posts
        frontmatter: {}
        checks:
          future_dates: sometimes
        """,
        # patterns not a list
        """
        content:
          root: posts
          patterns: "*.md"
        frontmatter: {}
        """,
        # format without directives
        """
        content:
          root: posts
        frontmatter:
          date_formats: ["YYYY-MM-DD"]
        """,
        # non-positive summary length
        """
        content:
          root: posts
        frontmatter: {}
        checks:
          summary_max_length: 0
        """,
    ],
)
def test_validate_config_rejects_bad_settings(tmp_path, body):
    config_path = tmp_path / "config.yaml"
    config_path.write_text(textwrap.dedent(body), encoding="utf-8")

    assert ConfigManager(str(config_path)).validate_config() is False
