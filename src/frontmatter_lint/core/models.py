"""
Data models for parsed content documents and validation results.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

ERROR = "error"
WARNING = "warning"
DEFAULT_DATE_KEY = "publishedAt"

_INDEX_STEMS = {"index", "readme"}


@dataclass
class Document:
    path: Optional[Path]
    metadata: Dict[str, Any]
    body: str
    date_key: str = DEFAULT_DATE_KEY

    @property
    def slug(self) -> str:
        """Stem of the file name; `posts/foo/index.mdx` yields `foo`."""
        if self.path is None:
            return ""
        if self.path.stem.lower() in _INDEX_STEMS and self.path.parent.name:
            return self.path.parent.name
        return self.path.stem

    @property
    def title(self) -> Optional[str]:
        return self.metadata.get("title")

    @property
    def published_at(self) -> Any:
        """Raw, unparsed value of the publication date key."""
        return self.metadata.get(self.date_key)

    def get(self, key: str, default: Any = None) -> Any:
        return self.metadata.get(key, default)


@dataclass
class ValidationIssue:
    path: Optional[Path]
    key: Optional[str]
    message: str
    severity: str = ERROR

    @property
    def is_error(self) -> bool:
        return self.severity == ERROR

    def format(self) -> str:
        location = str(self.path) if self.path else "<string>"
        if self.key:
            return f"{location}: {self.severity}: {self.key}: {self.message}"
        return f"{location}: {self.severity}: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "path": str(self.path) if self.path else None,
            "key": self.key,
            "message": self.message,
            "severity": self.severity,
        }


@dataclass
class ValidationReport:
    """Collects issues across every document checked in one run."""

    documents: List[Path] = field(default_factory=list)
    issues: List[ValidationIssue] = field(default_factory=list)

    def add(self, issue: ValidationIssue) -> None:
        self.issues.append(issue)

    def extend(self, issues: List[ValidationIssue]) -> None:
        self.issues.extend(issues)

    @property
    def errors(self) -> List[ValidationIssue]:
        return [i for i in self.issues if i.is_error]

    @property
    def warnings(self) -> List[ValidationIssue]:
        return [i for i in self.issues if not i.is_error]

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def ok_strict(self) -> bool:
        return not self.issues

    def issues_for(self, path: Path) -> List[ValidationIssue]:
        return [i for i in self.issues if i.path == path]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "documents": len(self.documents),
            "errors": len(self.errors),
            "warnings": len(self.warnings),
            "issues": [i.to_dict() for i in self.issues],
        }


__all__ = ["Document", "ValidationIssue", "ValidationReport", "ERROR", "WARNING", "DEFAULT_DATE_KEY"]
