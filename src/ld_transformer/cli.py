"""Command-line interface for the LD Transformer."""

import io
import logging
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Optional

import click

from . import __version__
from .config import ConverterConfig
from .ld_transformer import LDTransformer


def _print_help(ctx: click.Context, param: click.Parameter, value: bool) -> None:
    """Write usage to stderr and exit successfully."""
    if not value or ctx.resilient_parsing:
        return
    click.echo(ctx.get_help(), err=True)
    ctx.exit()


help_option = click.option(
    "-h", "--help", is_flag=True, expose_value=False, is_eager=True,
    callback=_print_help, help="Show this message and exit."
)
input_argument = click.argument(
    "input_file", required=False, type=click.Path(dir_okay=False, path_type=Path)
)
verbose_option = click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
profile_option = click.option("--profile", is_flag=True, help="Log timing and memory use")


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s"
        )


@contextmanager
def _open_input(input_file: Optional[Path]):
    """
    Yield the input file, or stdin when no file is given, as a text stream.

    Lines end only at ``\\n``; a carriage return inside a line is data.
    """
    if input_file is None:
        stream = io.TextIOWrapper(sys.stdin.buffer, encoding="utf-8", newline="\n")
        try:
            yield stream
        finally:
            stream.detach()
        return

    try:
        stream = open(input_file, "r", encoding="utf-8", newline="\n")
    except OSError:
        raise click.ClickException(f'Unable to open file "{input_file}"')
    with stream:
        yield stream


def _finish(result) -> None:
    if not result.success:
        for error in result.errors:
            click.echo(error, err=True)
        sys.exit(result.exit_code)


@click.command("ld2json", add_help_option=False)
@help_option
@input_argument
@click.option("--indent", type=click.IntRange(min=0), default=None,
              help="Pretty-print single-document output with this indent")
@verbose_option
@profile_option
def ld2json(input_file: Optional[Path], indent: Optional[int], verbose: bool, profile: bool):
    """Convert LD text from INPUT_FILE (or stdin) to JSON on stdout."""
    _configure_logging(verbose)
    config = ConverterConfig(json_indent=indent, enable_profiling=profile)
    transformer = LDTransformer(config)

    with _open_input(input_file) as stream:
        result = transformer.ld_to_json(stream, sys.stdout)
    _finish(result)


@click.command("json2ld", add_help_option=False)
@help_option
@input_argument
@click.option("--width", "-w", type=click.IntRange(min=1), default=80,
              help="Wrap string data at this column (default: 80)")
@click.option("--indent-step", type=click.IntRange(min=1), default=4,
              help="Spaces per nesting level (default: 4)")
@verbose_option
@profile_option
def json2ld(input_file: Optional[Path], width: int, indent_step: int, verbose: bool, profile: bool):
    """Convert JSON values from INPUT_FILE (or stdin) to LD text on stdout."""
    _configure_logging(verbose)
    config = ConverterConfig(wrap_width=width, indent_step=indent_step, enable_profiling=profile)
    transformer = LDTransformer(config)

    with _open_input(input_file) as stream:
        result = transformer.json_to_ld(stream, sys.stdout)
    _finish(result)


@click.group(add_help_option=False)
@help_option
@click.version_option(version=__version__)
def main():
    """LD Transformer - Convert between LD text and JSON."""
    pass


main.add_command(ld2json, "to-json")
main.add_command(json2ld, "to-ld")


if __name__ == '__main__':
    main()
