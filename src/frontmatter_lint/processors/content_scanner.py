"""
Content discovery: find Markdown/MDX files under a content root.
"""

import fnmatch
import logging
from pathlib import Path
from typing import Iterable, List, Sequence

logger = logging.getLogger(__name__)


def _is_hidden(path: Path, root: Path) -> bool:
    """Files or directories starting with '_' or '.' are partials or hidden."""
    try:
        parts = path.relative_to(root).parts
    except ValueError:
        parts = (path.name,)
    return any(part.startswith(("_", ".")) for part in parts)


def _is_excluded(path: Path, root: Path, exclude: Sequence[str]) -> bool:
    try:
        relative = path.relative_to(root).as_posix()
    except ValueError:
        relative = path.as_posix()
    return any(fnmatch.fnmatch(relative, pattern) for pattern in exclude)


def discover_content(root: Path, patterns: Iterable[str], exclude: Sequence[str] = ()) -> List[Path]:
    """Return the sorted, de-duplicated content files below *root*.

    Raises:
        FileNotFoundError: If *root* does not exist.
    """
    root = Path(root)
    if not root.is_dir():
        raise FileNotFoundError(f"Content root not found: {root}")

    found = set()
    for pattern in patterns:
        for candidate in root.glob(pattern):
            if not candidate.is_file():
                continue
            if _is_hidden(candidate, root) or _is_excluded(candidate, root, exclude):
                logger.debug(f"Skipping {candidate}")
                continue
            found.add(candidate)

    files = sorted(found)
    logger.info(f"Discovered {len(files)} content files under {root}")
    return files


def resolve_targets(
    targets: Iterable[Path],
    patterns: Iterable[str],
    exclude: Sequence[str] = (),
) -> List[Path]:
    """Expand command-line targets: files are kept as given, directories are scanned."""
    patterns = list(patterns)
    resolved: List[Path] = []
    seen = set()
    for target in targets:
        target = Path(target)
        if target.is_dir():
            candidates = discover_content(target, patterns, exclude)
        elif target.is_file():
            candidates = [target]
        else:
            raise FileNotFoundError(f"No such file or directory: {target}")
        for candidate in candidates:
            if candidate not in seen:
                seen.add(candidate)
                resolved.append(candidate)
    return resolved


__all__ = ["discover_content", "resolve_targets"]
