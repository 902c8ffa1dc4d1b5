"""Command-line entry point for frontmatter-lint."""

from __future__ import annotations

import json
import logging
import sys

import click

from .commands import export_index as index_cmd
from .commands import validate as validate_cmd
from .core.config import ConfigManager, DEFAULT_CONFIG_PATH

# Setup logging early so submodules inherit sane defaults
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)


@click.group()
@click.option(
    "--config",
    default=str(DEFAULT_CONFIG_PATH),
    show_default=True,
    help="Path to config file (defaults to data_dir/config.yaml)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.pass_context
def cli(ctx: click.Context, config: str, verbose: bool) -> None:
    """frontmatter-lint - validate newsletter front-matter and export a content index."""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config


@cli.command("validate")
@click.argument("paths", nargs=-1, type=click.Path(exists=True))
@click.option("--strict", is_flag=True, help="Treat warnings as failures")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Report format (default: text)",
)
@click.pass_context
def validate(ctx: click.Context, paths: tuple[str, ...], strict: bool, output_format: str) -> None:
    """Check front-matter of PATHS (default: the configured content root)."""
    try:
        report = validate_cmd.run(ctx.obj["config_path"], list(paths) or None, strict=strict)
    except Exception as exc:  # pragma: no cover - click echoes the message
        click.echo(f"❌ Validate command failed: {exc}", err=True)
        sys.exit(1)

    if output_format == "json":
        click.echo(json.dumps(report.to_dict(), indent=2))
    else:
        for issue in report.issues:
            click.echo(issue.format())
        click.echo(
            f"Checked {len(report.documents)} documents: "
            f"{len(report.errors)} errors, {len(report.warnings)} warnings"
        )

    passed = report.ok_strict if strict else report.ok
    if not passed:
        if output_format == "text":
            click.echo("❌ Front-matter validation failed", err=True)
        sys.exit(1)
    if output_format == "text":
        click.echo("✅ Front-matter validation passed")


@cli.command("index")
@click.option("--output", default=None, help="Output path (default: data_dir/index/<index.filename>)")
@click.option("--include-drafts", is_flag=True, help="Also export documents marked draft: true")
@click.pass_context
def index(ctx: click.Context, output: str | None, include_drafts: bool) -> None:
    """Export a JSON index of valid documents, newest first."""
    try:
        output_path = index_cmd.run(ctx.obj["config_path"], output, include_drafts=include_drafts)
        click.echo(f"✅ Content index written to {output_path}")
    except Exception as exc:  # pragma: no cover - click echoes the message
        click.echo(f"❌ Index command failed: {exc}", err=True)
        sys.exit(1)


@cli.command("status")
@click.pass_context
def status(ctx: click.Context) -> None:
    """Show configuration and content root status."""
    try:
        config_manager = ConfigManager(ctx.obj["config_path"])
        click.echo(f"📄 Config file: {config_manager.config_path}")

        if config_manager.validate_config():
            click.echo("✅ Configuration is valid")
        else:
            click.echo("❌ Configuration validation failed")
            return

        root = config_manager.get_content_root()
        marker = "✅" if root.is_dir() else "❌ (missing)"
        click.echo(f"📚 Content root: {root} {marker}")
        click.echo(f"🔎 Patterns: {', '.join(config_manager.get_patterns())}")
        required = config_manager.get_setting('frontmatter', 'required_keys')
        click.echo(f"🔑 Required keys: {', '.join(required)}")

    except Exception as exc:  # pragma: no cover - click echoes the message
        click.echo(f"❌ Error checking status: {exc}", err=True)


def main() -> None:
    cli()


if __name__ == "__main__":  # pragma: no cover - script entry
    cli()
