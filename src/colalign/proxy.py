"""
Row/column controller bound to one alignment state and one sink.

The proxy never buffers a cell. It writes values straight to a counting
sink and, at every column boundary, derives the cell width from how far
the character count moved since the cell started. Padding is then emitted
up to the widest cell seen so far in that column.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .exceptions import DetachedProxyError
from .operations import Operation
from .splitter import split_row
from .sink import CountingSink

if TYPE_CHECKING:
    from .align import Align
    from .sink import TextSink

logger = logging.getLogger(__name__)


class AlignProxy:
    """
    Output proxy between an alignment state and a sink.

    Obtain one with ``Align.attach``. Values that are not structural
    operations pass through to the sink and are counted toward the width of
    the current cell.

    Example:
        with Align().attach(sys.stdout) as out:
            out << "some" << TAB << "data" << END_ROW
            out << "some" << TAB << "longer" << TAB << "third" << END_ROW
    """

    def __init__(self, align: Align, sink: TextSink) -> None:
        self._align = align
        self._out: CountingSink | None = CountingSink(sink)
        self._col = 0
        self._last_pos = 0
        self._at_begin = True

    # -------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------

    @property
    def align(self) -> Align:
        return self._align

    @property
    def cursor(self) -> int:
        """Characters written to the sink since this proxy was attached."""
        return self._sink().count

    @property
    def column(self) -> int:
        """Zero-based index of the current column."""
        return self._col

    @property
    def at_row_start(self) -> bool:
        """True if nothing was written since the last row boundary."""
        return self._at_begin and self._at_column_start()

    @property
    def detached(self) -> bool:
        return self._out is None

    def _sink(self) -> CountingSink:
        if self._out is None:
            raise DetachedProxyError()
        return self._out

    def _emit(self, text: str) -> None:
        self._sink().write(text)

    def _at_column_start(self) -> bool:
        return self.cursor == self._last_pos

    # -------------------------------------------------------------------
    # Pass-through and dispatch
    # -------------------------------------------------------------------

    def write(self, value: Any, format_spec: str = "") -> AlignProxy:
        """
        Write a value through to the sink.

        Args:
            value: Any value; rendered with ``format(value, format_spec)``
            format_spec: Optional format spec, e.g. ``"<10"`` or ``"x"``

        Returns:
            The proxy, for chaining
        """
        self._emit(format(value, format_spec))
        return self

    def apply(self, *items: Any) -> AlignProxy:
        """Apply operations and write everything else through, in order."""
        for item in items:
            if isinstance(item, Operation):
                item.apply(self)
            else:
                self.write(item)
        return self

    def __lshift__(self, item: Any) -> AlignProxy:
        return self.apply(item)

    # -------------------------------------------------------------------
    # Cell and row boundaries
    # -------------------------------------------------------------------

    def _pre_tab(self) -> int:
        """Account for the current cell's width; return the padding it needs."""
        w = max(self.cursor - self._last_pos, 0)
        width = self._align.grow(self._col, w)
        return width - w

    def _complete_column(self) -> None:
        fmt = self._align.format
        remainder = self._pre_tab()
        self._emit(fmt.fill * remainder + fmt.sep)
        self._col += 1

    def _start_row(self) -> None:
        self._col = 0
        self._last_pos = self.cursor
        self._at_begin = True

    def _complete_row(self) -> None:
        self._emit("\n")
        self._start_row()

    def tab(self) -> None:
        """Complete the current cell: pad it to its column width, then separate."""
        self._complete_column()
        self._at_begin = False
        self._last_pos = self.cursor

    def end_row(self) -> None:
        """
        Complete the current row and start a new one.

        If nothing was written since the last row boundary, no newline is
        emitted; back-to-back calls produce a single line break.
        """
        if not (self._at_begin and self._at_column_start()):
            self._pre_tab()
            self._emit("\n")
        self._start_row()

    def next_cell(self) -> None:
        """Move to the next column, or end the row after the last known column."""
        if self._col + 1 >= len(self._align.widths):
            self.end_row()
        else:
            self.tab()

    def _spans_columns(self) -> bool:
        return self._col + 1 < len(self._align.widths)

    def header_row(self) -> None:
        """
        Complete the row with the declared column headers.

        Labels are padded to their column widths. Degrades to ``end_row``
        when no known column lies beyond the current one.
        """
        if not self._spans_columns():
            self.end_row()
            return

        if not self._at_column_start():
            self._complete_column()

        fmt = self._align.format
        headers = self._align.headers
        for i in range(self._col, len(headers)):
            label = headers[i]
            self._emit(label)
            if i + 1 < len(headers):
                pad = max(self._align.width(i) - len(label), 0)
                self._emit(fmt.fill * pad + fmt.sep)
        self._complete_row()

    def horizontal_rule(self) -> None:
        """
        Complete the row with a horizontal rule spanning every known column.

        Degrades to ``end_row`` when no known column lies beyond the current one.
        """
        if not self._spans_columns():
            self.end_row()
            return

        if not self._at_column_start():
            self._complete_column()

        fmt = self._align.format
        widths = self._align.widths
        parts = [fmt.rule * widths[i] for i in range(self._col, len(widths))]
        self._emit(fmt.sep.join(parts))
        self._complete_row()

    # -------------------------------------------------------------------
    # Headers and raw text
    # -------------------------------------------------------------------

    def set_header(self, text: str, min_width: int = 0) -> None:
        """
        Declare the header of the current column and advance to the next.

        Nothing is written to the sink. The column becomes at least as wide
        as the label and ``min_width``.

        Args:
            text: Header label
            min_width: Minimum column width
        """
        self._sink()
        label = str(text)
        col = self._col
        self._align.ensure_columns(col)
        self._align.headers[col] = label
        self._align.grow(col, max(min_width, len(label)))
        self._col += 1

    def raw(self, text: str, as_headers: bool = False) -> None:
        """
        Interpret tabs and newlines in text as table control.

        ``raw("hello\\tworld\\n")`` is equivalent to writing ``"hello"``,
        ``tab()``, ``"world"``, ``end_row()``. With ``as_headers`` the first
        line declares column headers instead and the rest is ignored.
        """
        for item in split_row(text, as_headers=as_headers):
            if isinstance(item, Operation):
                item.apply(self)
            else:
                self._emit(item)

    # -------------------------------------------------------------------
    # Configuration and reset
    # -------------------------------------------------------------------

    def reset(self) -> None:
        """Forget column widths and headers."""
        logger.debug("Resetting column widths and headers")
        self._align.reset()

    def reset_headers(self) -> None:
        """Forget column headers."""
        logger.debug("Resetting column headers")
        self._align.reset_headers()

    def set_fill(self, fill: str = " ") -> None:
        self._align.format.fill = fill

    def set_separator(self, sep: str = " ") -> None:
        self._align.format.sep = sep

    def set_rule(self, rule: str = "-") -> None:
        self._align.format.rule = rule

    def configure(
        self,
        fill: str | None = None,
        sep: str | None = None,
        rule: str | None = None,
    ) -> None:
        """Change several formatting characters at once."""
        self._align.format.update(fill=fill, sep=sep, rule=rule)

    # -------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------

    def flush(self) -> None:
        self._sink().flush()

    def detach(self) -> None:
        """
        Flush and release the sink, and free the alignment state.

        Further operations raise ``DetachedProxyError``. Detaching twice
        is a no-op.
        """
        if self._out is None:
            return
        out = self._out
        self._out = None
        self._align._release(self)
        logger.debug("Detached alignment state after %d chars", out.count)
        out.flush()

    def __enter__(self) -> AlignProxy:
        return self

    def __exit__(self, *args: Any) -> None:
        self.detach()
