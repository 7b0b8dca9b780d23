"""
Position-counting wrapper around an output sink.

Every write that reaches the sink through the wrapper advances a running
character count. The alignment proxy derives cell widths from that count,
so values of any type can be written straight through and still be
measured, without buffering the cell.
"""

from __future__ import annotations

from typing import Protocol

from .exceptions import SinkWriteError


class TextSink(Protocol):
    """Anything accepting text through ``write``."""

    def write(self, s: str, /) -> int | None: ...


class CountingSink:
    """
    Decorate a sink's write primitive with a character counter.

    The counter only grows by what the sink reports as accepted. A sink
    returning ``None`` from ``write`` is assumed to accept the whole string.
    """

    def __init__(self, sink: TextSink) -> None:
        self._sink = sink
        self._count = 0

    @property
    def sink(self) -> TextSink:
        """The wrapped sink."""
        return self._sink

    @property
    def count(self) -> int:
        """Characters written to the sink since the wrapper was created."""
        return self._count

    def write(self, text: str) -> int:
        """
        Write text to the sink and count it.

        Args:
            text: Text to write

        Returns:
            Number of characters written

        Raises:
            SinkWriteError: If the sink raised an I/O error or accepted fewer
                characters than offered
        """
        if not text:
            return 0

        try:
            written = self._sink.write(text)
        except OSError as e:
            raise SinkWriteError(
                f"Write to sink failed: {e}", requested=len(text), cause=e
            ) from e

        if written is None:
            written = len(text)
        self._count += written

        if written < len(text):
            raise SinkWriteError("Short write to sink", written=written, requested=len(text))
        return written

    def flush(self) -> None:
        """Flush the sink if it supports flushing."""
        flush = getattr(self._sink, "flush", None)
        if flush is None:
            return
        try:
            flush()
        except OSError as e:
            raise SinkWriteError(f"Flush of sink failed: {e}", cause=e) from e
