"""Command-line interface for risio.

Provides CLI commands to check, reformat and export RIS files.
"""

import importlib.metadata
import logging
import sys
from collections.abc import Callable
from pathlib import Path
from typing import NoReturn

import click

from risio.errors import RISError
from risio.models import Document

__all__ = ["cli"]

try:
    __version__ = importlib.metadata.version("risio")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.1.0"  # Fallback for development


def _load(input_path: str, strict: bool, allow_empty_records: bool, verbose: bool) -> Document:
    """Parse INPUT_PATH with the options shared by all commands."""
    from risio import ParserConfig, parse_file

    config = ParserConfig(
        mode="strict" if strict else "lenient",
        allow_empty_records=allow_empty_records,
    )
    if verbose:
        click.echo(f"Parsing: {input_path} (mode={config.mode})", err=True)

    return parse_file(Path(input_path), config)


def _fail(error: RISError) -> NoReturn:
    click.secho(f"✗ Error: {error}", fg="red", err=True)
    sys.exit(1)


def parser_options(func: Callable[..., None]) -> Callable[..., None]:
    """Attach the parser options shared by all commands."""
    func = click.option(
        "--verbose",
        "-v",
        is_flag=True,
        help="Enable verbose output",
    )(func)
    func = click.option(
        "--allow-empty-records",
        is_flag=True,
        help="Accept a stray ER as a record of its own",
    )(func)
    func = click.option(
        "--strict",
        is_flag=True,
        help="Reject any deviation from the canonical '  - ' separator",
    )(func)
    return func


@click.group()
@click.version_option(version=__version__, prog_name="risio")
def cli() -> None:
    """Parse, check and write RIS bibliographic citation files.

    Use 'risio COMMAND --help' for command-specific help.
    """


@cli.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False))
@parser_options
def check(input_path: str, strict: bool, allow_empty_records: bool, verbose: bool) -> None:
    """Check that INPUT_PATH is well-formed RIS.

    Exits with status 1 and reports the offending line on failure.

    Examples
    --------
        risio check references.ris
        risio check references.ris --strict
    """
    _configure_logging(verbose)
    try:
        document = _load(input_path, strict, allow_empty_records, verbose)
    except RISError as e:
        _fail(e)

    click.secho(f"✓ {input_path}: {len(document)} records", fg="green")


@cli.command(name="format")
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--output",
    "-o",
    type=click.Path(),
    required=True,
    help="Output RIS file path",
)
@click.option(
    "--crlf",
    is_flag=True,
    help="Terminate lines with CRLF instead of LF",
)
@parser_options
def format_(
    input_path: str,
    output: str,
    crlf: bool,
    strict: bool,
    allow_empty_records: bool,
    verbose: bool,
) -> None:
    """Rewrite INPUT_PATH in canonical RIS form.

    Examples
    --------
        risio format export.ris -o clean.ris
        risio format export.ris -o clean.ris --crlf
    """
    from risio import WriterConfig, write_file

    _configure_logging(verbose)
    try:
        document = _load(input_path, strict, allow_empty_records, verbose)
        if verbose:
            click.echo(f"Writing to: {output}", err=True)
        write_file(document, output, WriterConfig(line_ending="\r\n" if crlf else "\n"))
    except RISError as e:
        _fail(e)

    click.secho(f"✓ Successfully wrote {len(document)} records to {output}", fg="green")


@cli.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--output",
    "-o",
    type=click.Path(),
    required=True,
    help="Output JSONL file path",
)
@parser_options
def export(
    input_path: str,
    output: str,
    strict: bool,
    allow_empty_records: bool,
    verbose: bool,
) -> None:
    """Export INPUT_PATH records to JSONL, one record per line.

    Examples
    --------
        risio export references.ris -o records.jsonl
    """
    from risio import write_jsonl

    _configure_logging(verbose)
    try:
        document = _load(input_path, strict, allow_empty_records, verbose)
        if verbose:
            click.echo(f"Writing to: {output}", err=True)
        write_jsonl(document, output)
    except RISError as e:
        _fail(e)

    click.secho(f"✓ Successfully wrote {len(document)} records to {output}", fg="green")


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


if __name__ == "__main__":
    cli()
