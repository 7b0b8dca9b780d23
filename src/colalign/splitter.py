"""
Splitter turning tab/newline-delimited text into proxy operations.

The splitter is stateless: it only describes the calls an alignment proxy
should make, and ``AlignProxy.raw`` applies them in order.
"""

from __future__ import annotations

from collections.abc import Iterator

from .operations import END_ROW, TAB, Operation, SetHeader

_CONTROL = ("\t", "\n")


def _segments(text: str) -> Iterator[tuple[str, str | None]]:
    """Yield (segment, terminator) pairs; the last terminator may be None."""
    start = 0
    for i, ch in enumerate(text):
        if ch in _CONTROL:
            yield text[start:i], ch
            start = i + 1
    if start < len(text):
        yield text[start:], None


def split_row(text: str, as_headers: bool = False) -> Iterator[str | Operation]:
    """
    Split text into cell writes and structural operations.

    Data mode yields each non-empty segment as text, followed by ``TAB`` for
    a tab and ``END_ROW`` for a newline. Header mode yields a ``SetHeader``
    per segment and a single ``END_ROW`` at the first newline; anything after
    that newline is ignored. A trailing segment with no terminator is
    written (or declared) without an implicit tab or end of row.

    Args:
        text: Text to split
        as_headers: Declare column headers instead of writing cells

    Yields:
        Text to write through, or operations to apply
    """
    for segment, terminator in _segments(text):
        if as_headers:
            yield SetHeader(segment)
            if terminator == "\n":
                yield END_ROW
                return
            continue

        if segment:
            yield segment
        if terminator == "\t":
            yield TAB
        elif terminator == "\n":
            yield END_ROW
