"""Command-line interface for colalign."""

from __future__ import annotations

import logging
import sys
from typing import NoReturn, TextIO

import click

from .align import Align
from .bench import MODES, run_benchmark
from .config import DriverConfig
from .demo import multiplication_table
from .driver import align_stream
from .exceptions import ColAlignError


def _setup_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(message)s",
            stream=sys.stderr,
        )


def _fail(message: str) -> NoReturn:
    click.echo(f"✗ {message}", err=True)
    sys.exit(1)


@click.group()
@click.version_option()
def cli() -> None:
    """colalign: streaming column alignment for text tables."""
    pass


@cli.command("format")
@click.argument("input_file", type=click.File("r"), default="-")
@click.option(
    "--output",
    "-o",
    type=click.File("w"),
    default="-",
    help="Output file (default: stdout)",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML configuration file",
)
@click.option("--fill", help="Padding character (default: space)")
@click.option("--sep", help="Column separator character (default: space)")
@click.option("--rule", help="Horizontal rule character (default: -)")
@click.option("--header-prefix", help="Prefix of header declaration lines (default: ;)")
@click.option("--rule-prefix", help="Prefix of horizontal rule lines (default: --)")
@click.option(
    "--paginate/--no-paginate",
    default=None,
    help="Repeat headers every page (default: on when writing to a terminal)",
)
@click.option(
    "--page-lines",
    type=click.IntRange(min=0),
    help="Lines per page (default: terminal height, 0 disables paging)",
)
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr")
def format_cmd(
    input_file: TextIO,
    output: TextIO,
    config_path: str | None,
    fill: str | None,
    sep: str | None,
    rule: str | None,
    header_prefix: str | None,
    rule_prefix: str | None,
    paginate: bool | None,
    page_lines: int | None,
    verbose: bool,
) -> None:
    """Align tab-separated input into columns.

    Each input line becomes a row and each tab starts a new column.
    Lines starting with the header prefix declare column headers; lines
    starting with the rule prefix print a horizontal rule.
    """
    _setup_logging(verbose)
    try:
        base = (
            DriverConfig.from_file(config_path)
            if config_path
            else DriverConfig.from_environment()
        )
        config = base.merge(
            fill=fill,
            sep=sep,
            rule=rule,
            header_prefix=header_prefix,
            rule_prefix=rule_prefix,
            paginate=paginate,
            page_lines=page_lines,
        )
        align_stream(input_file, output, config)
    except ColAlignError as e:
        _fail(str(e))


@cli.command()
@click.argument("seconds", type=click.FloatRange(min=0, min_open=True))
@click.argument("mode", type=click.Choice(MODES), default="align")
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr")
def bench(seconds: float, mode: str, verbose: bool) -> None:
    """Measure formatting throughput for SECONDS seconds.

    MODE is "align" (through an alignment proxy) or "plain"
    (space-separated, no alignment).
    """
    _setup_logging(verbose)
    try:
        result = run_benchmark(seconds, mode)
    except ColAlignError as e:
        _fail(str(e))
    click.echo(result.summary())


@cli.command()
@click.option(
    "--modulus",
    "-m",
    type=click.IntRange(min=3),
    default=11,
    show_default=True,
    help="Modulus of the multiplication table",
)
def demo(modulus: int) -> None:
    """Print a multiplication table modulo N."""
    click.echo(f"Multiplication table modulo {modulus}:")
    try:
        with Align().attach(sys.stdout) as proxy:
            multiplication_table(proxy, modulus)
    except ColAlignError as e:
        _fail(str(e))


if __name__ == "__main__":
    cli()
