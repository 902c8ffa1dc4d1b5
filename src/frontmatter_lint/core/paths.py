"""Utilities for locating runtime data and built-in system assets."""

from __future__ import annotations

import os
from pathlib import Path

_ENV_VAR = "FRONTMATTER_LINT_DATA_DIR"
_DEFAULT_DIRNAME = ".frontmatter_lint"
_SYSTEM_DIR = Path(__file__).resolve().parents[1] / "system"


def get_data_dir() -> Path:
    """Return the configured runtime data directory.

    Honors the FRONTMATTER_LINT_DATA_DIR environment variable (relative values
    resolve against the working directory); otherwise ~/.frontmatter_lint.
    """
    override = (os.getenv(_ENV_VAR) or "").strip()
    if override:
        return Path(override).expanduser().resolve()
    return (Path.home() / _DEFAULT_DIRNAME).resolve()


def ensure_data_dir() -> Path:
    """Ensure the data directory exists on disk and return it."""
    data_dir = get_data_dir()
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir


def resolve_data_path(*relative: str, ensure_parent: bool = False) -> Path:
    """Resolve a path underneath the runtime data directory."""
    full_path = ensure_data_dir().joinpath(*relative)
    if ensure_parent:
        full_path.parent.mkdir(parents=True, exist_ok=True)
    return full_path


def resolve_data_file(path: str, ensure_parent: bool = False) -> Path:
    """Resolve a configured file path against the data directory.

    Absolute paths are used as-is. Relative paths are interpreted relative to
    the runtime data dir.
    """
    candidate = Path(path).expanduser()
    if candidate.is_absolute():
        if ensure_parent:
            candidate.parent.mkdir(parents=True, exist_ok=True)
        return candidate
    return resolve_data_path(*candidate.parts, ensure_parent=ensure_parent)


def get_system_path(*relative: str) -> Path:
    """Return a path inside the package's bundled system directory."""
    return _SYSTEM_DIR.joinpath(*relative)


__all__ = [
    "get_data_dir",
    "ensure_data_dir",
    "resolve_data_path",
    "resolve_data_file",
    "get_system_path",
]
