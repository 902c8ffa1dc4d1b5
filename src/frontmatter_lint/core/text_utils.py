"""Shared text processing utilities.

Helpers for turning Markdown/MDX bodies into plain text, counting words and
normalizing slugs.
"""

import math
import re
import html as htmllib
import unicodedata
from typing import Optional

_FENCED_CODE = re.compile(r"^(```|~~~).*?^\1[^\n]*$", re.MULTILINE | re.DOTALL)
_MDX_IMPORT_EXPORT = re.compile(r"^(?:import|export)\s.*$", re.MULTILINE)
_IMAGE = re.compile(r"!\[([^\]]*)\]\([^)]*\)")
_LINK = re.compile(r"\[([^\]]*)\]\([^)]*\)")
_TAG = re.compile(r"</?[A-Za-z][^>]*?/?>")
_INLINE_CODE = re.compile(r"`([^`]*)`")
_EMPHASIS = re.compile(r"(\*\*|\*|~~)(?=\S)(.+?)(?<=\S)\1")
_HEADING = re.compile(r"^\s{0,3}#{1,6}\s*", re.MULTILINE)
_BLOCKQUOTE = re.compile(r"^\s{0,3}>\s?", re.MULTILINE)
_WORD = re.compile(r"[\w'’-]+", re.UNICODE)


def strip_markup(text: Optional[str]) -> str:
    """Reduce a Markdown/MDX body to readable plain text.

    Fenced code blocks, MDX import/export lines and JSX/HTML tags are dropped;
    links and images keep their visible text.

    Examples:
        >>> strip_markup("# Hello [world](https://example.com)")
        'Hello world'
        >>> strip_markup("Use <Tweet id='1' /> here")
        'Use here'
    """
    if not text:
        return ""

    s = _FENCED_CODE.sub("", text)
    s = _MDX_IMPORT_EXPORT.sub("", s)
    s = _IMAGE.sub(r"\1", s)
    s = _LINK.sub(r"\1", s)
    s = _TAG.sub("", s)
    s = _INLINE_CODE.sub(r"\1", s)
    s = _EMPHASIS.sub(r"\2", s)
    s = _HEADING.sub("", s)
    s = _BLOCKQUOTE.sub("", s)
    s = htmllib.unescape(s)

    s = re.sub(r"[ \t\r\xa0]+", " ", s)
    s = re.sub(r" *\n *", "\n", s)
    s = re.sub(r"\n{3,}", "\n\n", s)
    return s.strip()


def word_count(text: Optional[str]) -> int:
    """Count the words of a Markdown/MDX body after stripping markup."""
    return len(_WORD.findall(strip_markup(text)))


def reading_time(words: int, words_per_minute: float = 200) -> int:
    """Estimated reading time in whole minutes, never less than one."""
    if words_per_minute <= 0:
        raise ValueError("words_per_minute must be positive")
    return max(1, math.ceil(words / words_per_minute))


def strip_accents(text: str) -> str:
    """Return ASCII-ish text by removing accent marks via Unicode normalization.

    Examples:
        >>> strip_accents("José García")
        'Jose Garcia'
    """
    return "".join(
        c for c in unicodedata.normalize("NFKD", text)
        if not unicodedata.combining(c)
    )


def slugify(text: str) -> str:
    """Lowercase, accent-free, hyphen-separated form of *text*.

    Examples:
        >>> slugify("Data Fetching in Next.js")
        'data-fetching-in-next-js'
    """
    t = strip_accents(text or "").lower()
    t = re.sub(r"[^a-z0-9]+", "-", t)
    return t.strip("-")
