from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

from .commands import export_index as index_cmd
from .commands import validate as validate_cmd
from .core.config import ConfigManager, DEFAULT_CONFIG_PATH
from .core.frontmatter import FrontMatterError, load_document, parse_document
from .core.models import Document, ValidationIssue, ValidationReport

_DEFAULT_CONFIG = str(DEFAULT_CONFIG_PATH)

__all__ = [
    'validate',
    'index',
    'status',
    'Document',
    'FrontMatterError',
    'ValidationIssue',
    'ValidationReport',
    'load_document',
    'parse_document',
]


def validate(
    paths: Optional[Iterable[str]] = None,
    *,
    strict: bool = False,
    config_path: Optional[str] = None,
) -> ValidationReport:
    """Validate front-matter programmatically.

    Args:
        paths: Files or directories to check; defaults to the configured content root.
        strict: Treat warnings as failures in the logged summary.
        config_path: Path to main YAML config; defaults to the data-dir config.
    """
    cfg_path = config_path or _DEFAULT_CONFIG
    return validate_cmd.run(cfg_path, paths, strict=strict)


def index(
    output_path: Optional[str] = None,
    *,
    include_drafts: bool = False,
    config_path: Optional[str] = None,
) -> Path:
    """Write the JSON content index and return its path."""
    cfg_path = config_path or _DEFAULT_CONFIG
    return index_cmd.run(cfg_path, output_path, include_drafts=include_drafts)


def status(config_path: Optional[str] = None) -> Dict[str, Any]:
    """Return configuration and content status for programmatic use."""
    cfg_path = config_path or _DEFAULT_CONFIG
    info: Dict[str, Any] = {'config_path': cfg_path}
    if not os.path.exists(cfg_path):
        info.update({'valid': False, 'error': f'Config file not found: {cfg_path}'})
        return info
    try:
        cm = ConfigManager(cfg_path)
        valid = cm.validate_config()
        info['valid'] = bool(valid)
        if valid:
            root = cm.get_content_root()
            info.update({
                'content_root': str(root),
                'content_root_exists': root.is_dir(),
                'patterns': cm.get_patterns(),
                'required_keys': cm.get_setting('frontmatter', 'required_keys'),
            })
        return info
    except Exception as e:
        info.update({'valid': False, 'error': str(e)})
        return info
