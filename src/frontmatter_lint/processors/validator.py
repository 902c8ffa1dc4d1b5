"""
Front-matter validation.

Checks that every required key is present with a non-empty string value and
that the publication date parses as a real calendar date. Optional checks
(future dates, unknown keys, image paths, summary length) are driven by the
``checks`` section of the config.
"""

import datetime
import logging
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from ..core.config import ConfigManager
from ..core.frontmatter import FrontMatterError, load_document
from ..core.models import DEFAULT_DATE_KEY, Document, ValidationIssue, ERROR, WARNING

logger = logging.getLogger(__name__)

DEFAULT_REQUIRED_KEYS = ("title", "publishedAt", "summary", "image")
DEFAULT_DATE_FORMATS = ("%Y-%m-%d",)
IMAGE_KEY = "image"
SUMMARY_KEY = "summary"
_REMOTE_PREFIXES = ("http://", "https://", "//", "data:")


def parse_date(value: str, formats: Iterable[str] = DEFAULT_DATE_FORMATS) -> Optional[datetime.date]:
    """Parse *value* with the first matching format, or as an ISO 8601 timestamp.

    Returns None when nothing matches or the date does not exist on the
    calendar (e.g. 2021-02-30).
    """
    text = value.strip()
    for fmt in formats:
        try:
            return datetime.datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    if "T" in text:
        try:
            return datetime.datetime.fromisoformat(text.replace("Z", "+00:00")).date()
        except ValueError:
            return None
    return None


class FrontMatterValidator:
    """Validates document front-matter against the required schema."""

    def __init__(
        self,
        required_keys: Sequence[str] = DEFAULT_REQUIRED_KEYS,
        date_key: str = DEFAULT_DATE_KEY,
        date_formats: Sequence[str] = DEFAULT_DATE_FORMATS,
        *,
        allowed_keys: Sequence[str] = (),
        future_dates: str = "warn",
        unknown_keys: str = "ignore",
        image_exists: bool = False,
        public_dir: Optional[Path] = None,
        summary_max_length: Optional[int] = None,
        today: Optional[datetime.date] = None,
    ):
        self.required_keys = list(required_keys)
        self.date_key = date_key
        self.date_formats = list(date_formats)
        self.allowed_keys = set(allowed_keys)
        self.future_dates = future_dates
        self.unknown_keys = unknown_keys
        self.image_exists = image_exists
        self.public_dir = Path(public_dir) if public_dir else None
        self.summary_max_length = summary_max_length
        self.today = today

    @classmethod
    def from_config(cls, config_manager: ConfigManager) -> "FrontMatterValidator":
        """Build a validator from the ``frontmatter`` and ``checks`` sections."""
        fm = config_manager.get_section('frontmatter')
        checks = config_manager.get_section('checks')
        return cls(
            required_keys=fm['required_keys'],
            date_key=fm['date_key'],
            date_formats=fm['date_formats'],
            allowed_keys=fm.get('allowed_keys') or (),
            future_dates=checks['future_dates'],
            unknown_keys=checks['unknown_keys'],
            image_exists=bool(checks['image_exists']),
            public_dir=config_manager.get_public_dir(),
            summary_max_length=checks.get('summary_max_length'),
        )

    def validate(self, document: Document) -> List[ValidationIssue]:
        """Return every issue found in *document*'s front-matter."""
        path = document.path
        metadata = document.metadata
        issues: List[ValidationIssue] = []

        valid_strings = {}
        for key in self.required_keys:
            if key not in metadata:
                issues.append(ValidationIssue(path, key, "missing required key"))
                continue
            value = metadata[key]
            if not isinstance(value, str):
                issues.append(ValidationIssue(
                    path, key, f"must be a string, got {type(value).__name__}"
                ))
                continue
            if not value.strip():
                issues.append(ValidationIssue(path, key, "must not be empty"))
                continue
            valid_strings[key] = value

        if self.date_key in valid_strings:
            issues.extend(self._check_date(path, valid_strings[self.date_key]))

        if self.unknown_keys == "warn":
            known = set(self.required_keys) | self.allowed_keys
            for key in metadata:
                if key not in known:
                    issues.append(ValidationIssue(path, str(key), "unknown front-matter key", WARNING))

        if self.image_exists and IMAGE_KEY in valid_strings:
            issue = self._check_image(path, valid_strings[IMAGE_KEY])
            if issue:
                issues.append(issue)

        if self.summary_max_length and SUMMARY_KEY in valid_strings:
            length = len(valid_strings[SUMMARY_KEY].strip())
            if length > self.summary_max_length:
                issues.append(ValidationIssue(
                    path, SUMMARY_KEY,
                    f"is {length} characters, longer than {self.summary_max_length}",
                    WARNING,
                ))

        for issue in issues:
            log = logger.error if issue.is_error else logger.warning
            log(issue.format())
        return issues

    def validate_path(self, path: Path) -> List[ValidationIssue]:
        """Load and validate a single file; unreadable documents yield one error."""
        try:
            document = load_document(path, self.date_key)
        except FrontMatterError as exc:
            issue = ValidationIssue(Path(path), None, str(exc))
        except UnicodeDecodeError as exc:
            issue = ValidationIssue(Path(path), None, f"file is not valid UTF-8: {exc.reason}")
        except OSError as exc:
            issue = ValidationIssue(Path(path), None, f"cannot read file: {exc.strerror or exc}")
        else:
            return self.validate(document)
        logger.error(issue.format())
        return [issue]

    def _check_date(self, path: Optional[Path], value: str) -> List[ValidationIssue]:
        parsed = parse_date(value, self.date_formats)
        if parsed is None:
            return [ValidationIssue(
                path, self.date_key,
                f"'{value}' is not a valid date (expected {', '.join(self.date_formats)})",
            )]
        if self.future_dates == "ignore":
            return []
        today = self.today or datetime.date.today()
        if parsed > today:
            severity = ERROR if self.future_dates == "error" else WARNING
            return [ValidationIssue(path, self.date_key, f"{parsed.isoformat()} is in the future", severity)]
        return []

    def _check_image(self, path: Optional[Path], value: str) -> Optional[ValidationIssue]:
        image = value.strip()
        if image.startswith(_REMOTE_PREFIXES):
            return None
        if image.startswith("/"):
            if self.public_dir is None:
                return None
            target = self.public_dir / image.lstrip("/")
        elif path is not None:
            target = path.parent / image
        else:
            return None
        if not target.is_file():
            return ValidationIssue(path, IMAGE_KEY, f"image not found: {target}")
        return None


__all__ = ["FrontMatterValidator", "parse_date", "DEFAULT_REQUIRED_KEYS"]
