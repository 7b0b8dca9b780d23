"""Alignment state shared by every row of a logical table."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .exceptions import StateInUseError
from .models import AlignFormat

if TYPE_CHECKING:
    from .proxy import AlignProxy
    from .sink import TextSink

logger = logging.getLogger(__name__)


class Align:
    """
    Column widths, column headers and formatting for one logical table.

    The state outlives the proxies attached to it: it can be attached to
    several sinks one after the other, and every attachment reuses the
    widths discovered so far.

    Attributes:
        widths: Widest cell seen (or declared) per column index
        headers: Header label per column index
        format: Fill, separator and rule characters

    Example:
        table = Align()
        with table.attach(sys.stdout) as out:
            out.raw("name\\tsize\\n")
            out.raw("README.md\\t1024\\n")
    """

    def __init__(self, fmt: AlignFormat | None = None) -> None:
        self.widths: list[int] = []
        self.headers: list[str] = []
        self.format = fmt if fmt is not None else AlignFormat()
        self._proxy: AlignProxy | None = None

    @property
    def attached(self) -> bool:
        """True while a live proxy is bound to this state."""
        return self._proxy is not None

    def attach(self, sink: TextSink) -> AlignProxy:
        """
        Bind a proxy to this state and the given sink.

        Args:
            sink: Object with a text ``write`` method

        Returns:
            The proxy; use it directly or as a context manager

        Raises:
            StateInUseError: If another proxy is still attached
        """
        from .proxy import AlignProxy

        if self._proxy is not None:
            raise StateInUseError()
        proxy = AlignProxy(self, sink)
        self._proxy = proxy
        logger.debug("Attached alignment state to %r", sink)
        return proxy

    def detach(self, proxy: AlignProxy) -> None:
        """Release the proxy and the sink it wraps."""
        proxy.detach()

    def _release(self, proxy: AlignProxy) -> None:
        if self._proxy is proxy:
            self._proxy = None

    def ensure_width(self, col: int) -> None:
        """Grow ``widths`` so that column ``col`` exists."""
        if col >= len(self.widths):
            self.widths.extend([0] * (col + 1 - len(self.widths)))

    def ensure_header(self, col: int) -> None:
        """Grow ``headers`` so that column ``col`` exists."""
        if col >= len(self.headers):
            self.headers.extend([""] * (col + 1 - len(self.headers)))

    def ensure_columns(self, col: int) -> None:
        """Grow both ``widths`` and ``headers`` so that column ``col`` exists."""
        self.ensure_width(col)
        self.ensure_header(col)

    def width(self, col: int) -> int:
        """Known width of a column, 0 if the column is unknown."""
        return self.widths[col] if col < len(self.widths) else 0

    def grow(self, col: int, width: int) -> int:
        """
        Raise the width of a column to at least ``width``.

        Widths never shrink; a smaller value leaves the column unchanged.

        Returns:
            The resulting column width
        """
        self.ensure_width(col)
        if width > self.widths[col]:
            logger.debug("Column %d width %d -> %d", col, self.widths[col], width)
            self.widths[col] = width
        return self.widths[col]

    def reset(self) -> None:
        """Forget column widths and headers."""
        self.widths.clear()
        self.headers.clear()

    def reset_headers(self) -> None:
        """Forget column headers, keeping widths."""
        self.headers.clear()
