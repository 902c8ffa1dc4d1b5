"""
Validate command: check the front-matter of every content document.

Each document's issues are collected into one report; a broken document never
stops the run.
"""

import logging
from typing import Iterable, Optional

from ..core.command_context import CommandContext
from ..core.models import ValidationReport

logger = logging.getLogger(__name__)


def run(config_path: Optional[str] = None, paths: Optional[Iterable[str]] = None, strict: bool = False) -> ValidationReport:
    """
    Validate the given paths, or the whole configured content root.

    Args:
        config_path: Path to the main configuration file
        paths: Optional files or directories to check instead of the content root
        strict: When True, the summary treats warnings as failures

    Returns:
        The collected validation report
    """
    logger.info("Starting front-matter validation")
    ctx = CommandContext(config_path)

    report = ValidationReport()
    for path in ctx.get_documents(paths):
        report.documents.append(path)
        report.extend(ctx.validator.validate_path(path))

    passed = report.ok_strict if strict else report.ok
    logger.info(
        f"Checked {len(report.documents)} documents: "
        f"{len(report.errors)} errors, {len(report.warnings)} warnings"
    )
    if passed:
        logger.info("Validation passed")
    else:
        logger.warning("Validation failed")
    return report
