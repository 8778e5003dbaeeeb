"""jsgettext CLI — extract translatable strings from the command line."""

import json
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from jsgettext import __version__
from jsgettext.config import (
    DEFAULT_COMMENT_PREFIX,
    ExtractorConfig,
    load_config,
    parse_keyword_options,
)
from jsgettext.errors import ConfigurationError
from jsgettext.extractor import XGettext
from jsgettext.models import ExtractedRecord
from jsgettext.utils.file_scanner import expand_paths
from jsgettext.utils.log import setup_logging

console = Console()


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(verbose: bool):
    """jsgettext — find translatable strings in JavaScript sources."""
    setup_logging(verbose)


@main.command()
@click.argument("paths", nargs=-1, required=True, type=click.Path(exists=True, path_type=Path))
@click.option("--keyword", "-k", multiple=True, help="Keyword as NAME or NAME:N[,M] (replaces the defaults)")
@click.option("--comment-prefix", default=None, help=f"Translator comment prefix [default: {DEFAULT_COMMENT_PREFIX}]")
@click.option("--no-comments", is_flag=True, help="Do not collect translator comments")
@click.option("--config", "-c", "config_path", default=None, type=click.Path(exists=True), help="YAML config file")
@click.option("--format", "output_format", default="table", type=click.Choice(["table", "json"]))
def extract(
    paths: tuple,
    keyword: tuple,
    comment_prefix: str | None,
    no_comments: bool,
    config_path: str | None,
    output_format: str,
):
    """Extract translatable strings from PATHS (files or directories)."""
    try:
        engine = XGettext.from_config(_build_config(keyword, comment_prefix, no_comments, config_path))
    except ConfigurationError as e:
        raise click.UsageError(str(e)) from e

    results = [engine.extract_file(path) for path in expand_paths(list(paths))]

    if output_format == "json":
        click.echo(json.dumps([_result_to_dict(r) for r in results], indent=2, ensure_ascii=False))
    else:
        _print_table(results)

    failed = [r for r in results if not r.ok]
    if failed:
        for r in failed:
            click.echo(f"error: {r.path}: {r.error}", err=True)
        sys.exit(1)


def _build_config(
    keyword: tuple, comment_prefix: str | None, no_comments: bool, config_path: str | None
) -> ExtractorConfig:
    base = load_config(config_path) if config_path else ExtractorConfig.create()

    keywords = parse_keyword_options(keyword) if keyword else dict(base.keywords)
    prefix = base.comment_prefix if comment_prefix is None else comment_prefix
    if no_comments:
        prefix = None

    return ExtractorConfig.create(keywords=keywords, comment_prefix=prefix, language=base.language)


def _entry_to_dict(entry) -> object:
    return entry.to_dict() if isinstance(entry, ExtractedRecord) else entry


def _result_to_dict(result) -> dict:
    data = {"path": result.path, "records": [_entry_to_dict(e) for e in result.records]}
    if result.error:
        data["error"] = result.error
    return data


def _print_table(results) -> None:
    total = sum(len(r.records) for r in results)
    if not total:
        console.print("[yellow]No translatable strings found.[/]")
        return

    table = Table(title=f"Translatable Strings ({total} found)")
    table.add_column("File", style="dim")
    table.add_column("Line", justify="right")
    table.add_column("String", style="cyan")
    table.add_column("Comment", style="green")

    for result in results:
        for entry in result.records:
            if isinstance(entry, ExtractedRecord):
                table.add_row(
                    escape(result.path), str(entry.line), escape(entry.string), escape(entry.comment or "")
                )
            else:
                table.add_row(escape(result.path), "", escape(repr(entry)), "")

    console.print(table)


if __name__ == "__main__":
    main()
