"""
Export a JSON index of document metadata for a site renderer.

Only documents whose front-matter validates without errors are exported,
newest first.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..core.command_context import CommandContext
from ..core.frontmatter import FrontMatterError, load_document
from ..core.paths import resolve_data_file, resolve_data_path
from ..core.text_utils import reading_time, slugify, word_count
from ..processors.validator import parse_date

logger = logging.getLogger(__name__)


def _relative_to(path: Path, root: Path) -> str:
    try:
        return path.resolve().relative_to(root).as_posix()
    except ValueError:
        return path.as_posix()


def build_index(ctx: CommandContext, include_drafts: bool = False) -> List[Dict[str, Any]]:
    """Collect index entries for every valid document under the content root."""
    root = ctx.config_manager.get_content_root()
    wpm = ctx.get_setting('index', 'words_per_minute', 200)
    date_key = ctx.validator.date_key

    entries = []
    seen_slugs: Dict[str, Path] = {}
    for path in ctx.get_documents():
        try:
            document = load_document(path, date_key)
        except (FrontMatterError, UnicodeDecodeError, OSError) as e:
            logger.error(f"Skipping {path}: {e}")
            continue

        issues = ctx.validator.validate(document)
        if any(issue.is_error for issue in issues):
            logger.warning(f"Skipping {path}: front-matter has errors")
            continue
        if document.get('draft') is True and not include_drafts:
            logger.info(f"Skipping draft {path}")
            continue

        # Non-Latin file names slugify to nothing; keep the stem as written.
        slug = slugify(document.slug) or document.slug
        if slug in seen_slugs:
            logger.warning(f"Skipping {path}: slug '{slug}' already used by {seen_slugs[slug]}")
            continue
        seen_slugs[slug] = path

        words = word_count(document.body)
        published = parse_date(document.published_at, ctx.validator.date_formats)
        entries.append({
            'slug': slug,
            'title': document.title,
            'publishedAt': document.published_at,
            'summary': document.metadata.get('summary'),
            'image': document.metadata.get('image'),
            'path': _relative_to(path, root),
            'wordCount': words,
            'readingTime': reading_time(words, wpm),
            '_sort': published,
        })

    entries.sort(key=lambda e: e['slug'])
    entries.sort(key=lambda e: e['_sort'], reverse=True)
    for entry in entries:
        del entry['_sort']
    return entries


def run(config_path: Optional[str] = None, output: Optional[str] = None, include_drafts: bool = False) -> Path:
    """
    Write the content index as JSON.

    Args:
        config_path: Path to the main configuration file
        output: Optional output path; relative paths resolve under the data dir
        include_drafts: Also export documents marked ``draft: true``

    Returns:
        Path of the written index file
    """
    logger.info("Starting content index export")
    ctx = CommandContext(config_path)

    entries = build_index(ctx, include_drafts=include_drafts)

    if output:
        output_path = resolve_data_file(output, ensure_parent=True)
    else:
        filename = ctx.get_setting('index', 'filename', 'content_index.json')
        output_path = resolve_data_path('index', filename, ensure_parent=True)

    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(entries, f, indent=2, ensure_ascii=False)
        f.write('\n')

    logger.info(f"Wrote {len(entries)} entries to {output_path}")
    return output_path
