"""
Front-matter parsing for Markdown and MDX content files.

A document starts with a ``---`` fence, followed by a YAML mapping, closed by
another ``---`` (or ``...``) fence. Everything after the closing fence is the
body and is returned untouched.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import yaml

from .models import DEFAULT_DATE_KEY, Document

logger = logging.getLogger(__name__)

OPEN_FENCE = "---"
CLOSE_FENCES = ("---", "...")
_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class FrontMatterError(ValueError):
    """Raised when a document's front-matter block cannot be read."""

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path


class _StringDateLoader(yaml.SafeLoader):
    """SafeLoader that leaves date-like scalars as plain strings."""


_StringDateLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _TIMESTAMP_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def split_frontmatter(text: str) -> Tuple[str, str]:
    """Split *text* into its raw YAML block and the remaining body.

    Raises:
        FrontMatterError: If the opening or closing fence is missing.
    """
    if text.startswith("\ufeff"):
        text = text[1:]
    lines = text.splitlines(keepends=True)
    if not lines or lines[0].rstrip() != OPEN_FENCE:
        raise FrontMatterError("document does not start with a '---' front-matter fence")

    for index in range(1, len(lines)):
        if lines[index].rstrip() in CLOSE_FENCES:
            raw = "".join(lines[1:index])
            body = "".join(lines[index + 1:])
            return raw, body

    raise FrontMatterError("front-matter block is not closed with '---'")


def parse_frontmatter(raw: str) -> Dict[str, Any]:
    """Parse a raw YAML block into a mapping of front-matter fields."""
    try:
        data = yaml.load(raw, Loader=_StringDateLoader)
    except yaml.YAMLError as exc:
        raise FrontMatterError(f"front-matter is not valid YAML: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise FrontMatterError(
            f"front-matter must be a mapping, got {type(data).__name__}"
        )
    return data
def parse_document(
    text: str,
    path: Optional[Union[str, Path]] = None,
    date_key: str = DEFAULT_DATE_KEY,
) -> Document:
    """Parse a full document string into a :class:`Document`."""
    doc_path = Path(path) if path is not None else None
    try:
        raw, body = split_frontmatter(text)
        metadata = parse_frontmatter(raw)
    except FrontMatterError as exc:
        if exc.path is None:
            exc.path = doc_path
        raise
    return Document(path=doc_path, metadata=metadata, body=body, date_key=date_key)


def load_document(path: Union[str, Path], date_key: str = DEFAULT_DATE_KEY) -> Document:
    """Read *path* as UTF-8 and parse it."""
    doc_path = Path(path)
    text = doc_path.read_text(encoding="utf-8")
    logger.debug("Parsing front-matter from %s", doc_path)
    return parse_document(text, doc_path, date_key)


__all__ = [
    "FrontMatterError",
    "split_frontmatter",
    "parse_frontmatter",
    "parse_document",
    "load_document",
]
