"""Click-based CLI entry point for mudlog."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from mudlog.config import DEFAULT_MAX_DEPTH, DEFAULT_MIN_DEPTH
from mudlog.errors import MudlogError


class DefaultCleanGroup(click.Group):
    """Group that treats `mudlog INPUT ...` as `mudlog clean INPUT ...`."""

    def resolve_command(self, ctx, args):
        if args and args[0] not in self.commands:
            args.insert(0, "clean")
        return super().resolve_command(ctx, args)


@click.group(cls=DefaultCleanGroup)
@click.version_option(version="0.1.0")
@click.option("-v", "--verbose", count=True, help="Log progress to stderr (-vv for debug).")
def cli(verbose: int):
    """Clean Bloodhound drilling-log exports.

    `mudlog INPUT` is shorthand for `mudlog clean INPUT`.
    """
    level = {0: logging.WARNING, 1: logging.INFO}.get(verbose, logging.DEBUG)
    logging.basicConfig(
        stream=sys.stderr,
        level=level,
        format="[%(levelname)s] %(name)s: %(message)s",
        force=True,
    )


@cli.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--min-depth", default=DEFAULT_MIN_DEPTH, show_default=True, help="Shallowest depth to keep.")
@click.option("--max-depth", default=DEFAULT_MAX_DEPTH, show_default=True, help="Deepest depth to keep.")
@click.option("-o", "--output", type=click.File("w"), default="-", help="Write the table here instead of stdout.")
def clean(input_path: Path, min_depth: int, max_depth: int, output):
    """Trim, de-duplicate and gap-fill an export; print it tab-delimited."""
    from mudlog.parsers.bloodhound_parser import parse_bloodhound_file

    try:
        ws = parse_bloodhound_file(input_path)
        report = ws.clean(min_depth, max_depth)
    except MudlogError as e:
        raise click.ClickException(str(e)) from e

    logging.getLogger(__name__).info(
        "Cleaned %s: %d trimmed, %d duplicates removed, %d rows filled",
        input_path.name, report.trimmed, report.duplicates_removed, report.rows_filled,
    )
    output.write(ws.to_text())


@cli.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def info(input_path: Path):
    """Show row count, depth range, duplicates and gaps of a raw export."""
    from mudlog.parsers.bloodhound_parser import parse_bloodhound_file

    try:
        ws = parse_bloodhound_file(input_path)
    except MudlogError as e:
        raise click.ClickException(str(e)) from e

    click.echo(ws.summarize().as_text())


if __name__ == "__main__":
    cli()
