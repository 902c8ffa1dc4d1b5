"""
Command context for shared initialization across CLI commands.

Loads and validates the config, builds the validator and resolves which
content files a command should operate on.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional

from .config import ConfigManager
from ..processors.content_scanner import discover_content, resolve_targets
from ..processors.validator import FrontMatterValidator


logger = logging.getLogger(__name__)


class CommandContext:
    """Encapsulates shared initialization logic for CLI commands.

    Example:
        ```python
        ctx = CommandContext(config_path)
        for path in ctx.get_documents():
            issues = ctx.validator.validate_path(path)
        ```
    """

    def __init__(self, config_path: Optional[str] = None):
        """Initialize command context with config and validator.

        Args:
            config_path: Path to main config file (None = use default)

        Raises:
            ValueError: If configuration is invalid
        """
        self.config_manager = ConfigManager(config_path)

        if not self.config_manager.validate_config():
            raise ValueError("Invalid configuration. Run 'frontmatter-lint status' for details.")

        self.config = self.config_manager.load_config()
        self.validator = FrontMatterValidator.from_config(self.config_manager)

        logger.debug(f"CommandContext initialized with config from {self.config_manager.config_path}")

    def get_documents(self, paths: Optional[Iterable[str]] = None) -> List[Path]:
        """Resolve explicit paths, or scan the configured content root when none are given."""
        patterns = self.config_manager.get_patterns()
        exclude = self.config_manager.get_exclude_patterns()
        if paths:
            return resolve_targets([Path(p) for p in paths], patterns, exclude)
        return discover_content(self.config_manager.get_content_root(), patterns, exclude)

    def get_setting(self, section: str, key: str, default=None):
        return self.config_manager.get_setting(section, key, default)
