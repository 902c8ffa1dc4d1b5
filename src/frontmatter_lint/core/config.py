"""Configuration management for YAML-based config files."""

import copy
import logging
import shutil
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .paths import get_data_dir, get_system_path

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_DIR = get_data_dir()
DEFAULT_CONFIG_PATH = DEFAULT_CONFIG_DIR / "config.yaml"
_TEMPLATE_CONFIG = get_system_path("config", "config.yaml")

SEVERITY_CHOICES = {"warn", "error", "ignore"}
UNKNOWN_KEY_CHOICES = {"warn", "ignore"}

DEFAULTS: Dict[str, Dict[str, Any]] = {
    "content": {
        "root": "content",
        "patterns": ["**/*.md", "**/*.mdx"],
        "exclude": [],
        "public_dir": "public",
    },
    "frontmatter": {
        "required_keys": ["title", "publishedAt", "summary", "image"],
        "allowed_keys": ["draft", "tags"],
        "date_key": "publishedAt",
        "date_formats": ["%Y-%m-%d"],
    },
    "checks": {
        "future_dates": "warn",
        "unknown_keys": "ignore",
        "image_exists": False,
        "summary_max_length": None,
    },
    "index": {
        "filename": "content_index.json",
        "words_per_minute": 200,
    },
}

_DEFAULT_CONFIG_TEMPLATE = """# Auto-generated default configuration for frontmatter-lint
content:
  root: "content"
  patterns: ["**/*.md", "**/*.mdx"]
  exclude: []
  public_dir: "public"

frontmatter:
  required_keys: ["title", "publishedAt", "summary", "image"]
  allowed_keys: ["draft", "tags"]
  date_key: "publishedAt"
  date_formats: ["%Y-%m-%d"]

checks:
  future_dates: "warn"
  unknown_keys: "ignore"
  image_exists: false
  summary_max_length: null

index:
  filename: "content_index.json"
  words_per_minute: 200
"""


def _write_template(path: Path, content: str) -> None:
    """Write templated YAML content to disk with a trailing newline."""
    path.write_text(content.strip() + "\n", encoding="utf-8")


def _is_str_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(x, str) and x.strip() for x in value)


class ConfigManager:
    """Manages loading and validation of the YAML configuration file."""

    def __init__(self, config_path: Optional[str] = None):
        """Initialize the manager and ensure a baseline config file exists."""
        path = Path(config_path or DEFAULT_CONFIG_PATH).expanduser()
        if not path.is_absolute():
            path = path.resolve()
        self.config_path = str(path)
        self.base_dir = str(path.parent)
        self._config = None
        self._ensure_default_config()

    def load_config(self) -> Dict[str, Any]:
        """Load the main configuration file."""
        if self._config is None:
            try:
                with open(self.config_path, 'r', encoding='utf-8') as f:
                    self._config = yaml.safe_load(f) or {}
                logger.info(f"Loaded configuration from {self.config_path}")
            except Exception as e:
                logger.error(f"Failed to load config from {self.config_path}: {e}")
                raise

        return self._config

    def _ensure_default_config(self) -> None:
        """Create the default configuration file if it is missing."""
        config_file = Path(self.config_path)
        config_file.parent.mkdir(parents=True, exist_ok=True)
        if config_file.exists():
            return

        if _TEMPLATE_CONFIG.exists():
            try:
                shutil.copyfile(_TEMPLATE_CONFIG, config_file)
                logger.info("Created default config.yaml at %s", config_file)
                return
            except OSError as exc:
                logger.warning("Failed to copy template config: %s", exc)
        _write_template(config_file, _DEFAULT_CONFIG_TEMPLATE)
        logger.info("Created fallback default config.yaml at %s", config_file)

    def get_section(self, name: str) -> Dict[str, Any]:
        """Return a config section with unset keys filled from the defaults."""
        merged = copy.deepcopy(DEFAULTS.get(name, {}))
        section = self.load_config().get(name) or {}
        if isinstance(section, dict):
            merged.update(section)
        return merged

    def get_setting(self, section: str, key: str, default: Any = None) -> Any:
        """Get a single value from a section, falling back to the defaults."""
        value = self.get_section(section).get(key)
        return default if value is None else value

    def _resolve_relative(self, value: str) -> Path:
        path = Path(value).expanduser()
        if not path.is_absolute():
            path = Path(self.base_dir) / path
        return path.resolve()

    def get_content_root(self) -> Path:
        """Return the content root, resolved against the config directory."""
        return self._resolve_relative(self.get_setting('content', 'root'))

    def get_public_dir(self) -> Path:
        """Return the static asset directory used for image checks."""
        return self._resolve_relative(self.get_setting('content', 'public_dir'))

    def get_patterns(self) -> List[str]:
        return list(self.get_setting('content', 'patterns'))

    def get_exclude_patterns(self) -> List[str]:
        return list(self.get_setting('content', 'exclude', []))

    def validate_config(self) -> bool:
        """Validate the configuration file."""
        try:
            config = self.load_config()
            if not isinstance(config, dict):
                logger.error("Top level of config must be a mapping")
                return False

            for section in ('content', 'frontmatter'):
                if section not in config:
                    logger.error(f"Missing required section '{section}' in main config")
                    return False
            for section in DEFAULTS:
                value = config.get(section)
                if value is not None and not isinstance(value, dict):
                    logger.error(f"Section '{section}' must be a mapping")
                    return False

            content = self.get_section('content')
            if not isinstance(content.get('root'), str) or not content['root'].strip():
                logger.error("content.root must be a non-empty string")
                return False
            if not _is_str_list(content.get('patterns')) or not content['patterns']:
                logger.error("content.patterns must be a non-empty list of strings")
                return False
            if content.get('exclude') and not _is_str_list(content['exclude']):
                logger.error("content.exclude must be a list of strings")
                return False

            frontmatter = self.get_section('frontmatter')
            required = frontmatter.get('required_keys')
            if not _is_str_list(required) or not required:
                logger.error("frontmatter.required_keys must be a non-empty list of strings")
                return False
            allowed = frontmatter.get('allowed_keys')
            if allowed and not _is_str_list(allowed):
                logger.error("frontmatter.allowed_keys must be a list of strings")
                return False
            date_key = frontmatter.get('date_key')
            if date_key not in required:
                logger.error(f"frontmatter.date_key '{date_key}' must be one of the required keys")
                return False
            formats = frontmatter.get('date_formats')
            if not _is_str_list(formats) or not formats:
                logger.error("frontmatter.date_formats must be a non-empty list of strings")
                return False
            for fmt in formats:
                if '%' not in fmt:
                    logger.error(f"Date format '{fmt}' has no strftime directives")
                    return False

            checks = self.get_section('checks')
            if checks.get('future_dates') not in SEVERITY_CHOICES:
                logger.error(f"checks.future_dates must be one of {sorted(SEVERITY_CHOICES)}")
                return False
            if checks.get('unknown_keys') not in UNKNOWN_KEY_CHOICES:
                logger.error(f"checks.unknown_keys must be one of {sorted(UNKNOWN_KEY_CHOICES)}")
                return False
            if not isinstance(checks.get('image_exists'), bool):
                logger.error("checks.image_exists must be true or false")
                return False
            max_len = checks.get('summary_max_length')
            if max_len is not None and (isinstance(max_len, bool) or not isinstance(max_len, int) or max_len <= 0):
                logger.error("checks.summary_max_length must be a positive integer or null")
                return False

            wpm = self.get_setting('index', 'words_per_minute')
            if isinstance(wpm, bool) or not isinstance(wpm, (int, float)) or wpm <= 0:
                logger.error("index.words_per_minute must be a positive number")
                return False

            logger.info("Configuration validation passed")
            return True

        except Exception as e:
            logger.error(f"Configuration validation failed: {e}")
            return False


__all__ = [
    "ConfigManager",
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_CONFIG_DIR",
    "DEFAULTS",
]
