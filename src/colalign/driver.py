"""
Line driver: align tab-separated input line by line.

Each input line becomes one table row. Two line prefixes are special:

- a header prefix (default ``;``) declares the column headers from the
  rest of the line and prints the header row;
- a rule prefix (default ``--``) prints a horizontal rule.

With pagination on, the header row and a rule are repeated every page.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TextIO

from .align import Align
from .config import DriverConfig
from .proxy import AlignProxy

logger = logging.getLogger(__name__)


def _strip_newline(line: str) -> str:
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line


def align_lines(
    lines: Iterable[str],
    proxy: AlignProxy,
    config: DriverConfig | None = None,
    page_lines: int | None = None,
) -> int:
    """
    Write input lines to a proxy as aligned rows.

    Args:
        lines: Input lines, with or without trailing newlines
        proxy: Proxy to write to
        config: Driver settings (prefixes); defaults to DriverConfig()
        page_lines: Lines per page, or None to disable pagination

    Returns:
        Number of input lines consumed
    """
    config = config or DriverConfig()
    consumed = 0
    line_num = 0

    for line in lines:
        line = _strip_newline(line)
        consumed += 1
        line_num += 1

        if line.startswith(config.header_prefix):
            proxy.reset_headers()
            proxy.raw(line[len(config.header_prefix) :], as_headers=True)
            proxy.end_row()
            proxy.header_row()
            continue

        if page_lines and line_num >= page_lines:
            logger.debug("Page break after %d lines", consumed - 1)
            proxy.write(" ")
            proxy.end_row()
            proxy.header_row()
            proxy.horizontal_rule()
            line_num = 2

        if line.startswith(config.rule_prefix):
            proxy.horizontal_rule()
        else:
            proxy.raw(line)
            proxy.end_row()

    return consumed


def align_stream(
    infile: TextIO,
    outfile: TextIO,
    config: DriverConfig | None = None,
) -> int:
    """
    Align every line of infile into outfile.

    A fresh alignment state is used, so column widths start from zero.

    Returns:
        Number of input lines consumed
    """
    config = config or DriverConfig()
    page_lines = config.resolve_page_lines(outfile)
    table = Align(config.format.copy())
    with table.attach(outfile) as proxy:
        count = align_lines(infile, proxy, config, page_lines=page_lines)
    logger.debug("Aligned %d lines into %d columns", count, len(table.widths))
    return count
