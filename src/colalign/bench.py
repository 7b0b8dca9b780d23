"""
Throughput benchmark: aligned output versus plain space-separated output.

Both modes render the same 10x10 grid of ``(j * k) % 11`` values to an
in-memory sink until the time budget runs out.
"""

from __future__ import annotations

import io
import logging
import time
from collections.abc import Callable
from dataclasses import dataclass

from .align import Align
from .exceptions import ValidationError

logger = logging.getLogger(__name__)

MODES = ("align", "plain")
GRID = 10


@dataclass(frozen=True)
class BenchResult:
    """Outcome of a benchmark run."""

    mode: str
    rows: int
    size: int
    seconds: float

    @property
    def rows_per_second(self) -> float:
        return self.rows / self.seconds if self.seconds > 0 else 0.0

    def summary(self) -> str:
        return (
            f"{self.rows} rows formatted ({self.size} bytes) in {self.seconds:g}s"
            f" = {self.rows_per_second:.1f} rows/s"
        )


def _run_align(sink: io.StringIO, expired: Callable[[], bool]) -> int:
    rows = 0
    with Align().attach(sink) as out:
        for _ in range(GRID):
            out.set_header("", 2)
        out.end_row()
        while not expired():
            for j in range(1, GRID + 1):
                for k in range(1, GRID + 1):
                    out.write(j * k % 11)
                    out.next_cell()
                rows += 1
    return rows


def _run_plain(sink: io.StringIO, expired: Callable[[], bool]) -> int:
    sink.write("  " * GRID + "\n")
    rows = 1
    while not expired():
        for j in range(1, GRID + 1):
            for k in range(1, GRID + 1):
                sink.write(f"{j * k % 11} ")
            sink.write("\n")
            rows += 1
    return rows


def run_benchmark(
    seconds: float,
    mode: str = "align",
    clock: Callable[[], float] = time.monotonic,
) -> BenchResult:
    """
    Format rows for the given number of seconds.

    Args:
        seconds: Time budget
        mode: "align" to go through an alignment proxy, "plain" to write
            space-separated values directly
        clock: Monotonic clock, in seconds

    Returns:
        BenchResult with the number of rows and bytes produced

    Raises:
        ValidationError: If mode is unknown or seconds is not positive
    """
    if mode not in MODES:
        raise ValidationError(f"Unknown benchmark mode: {mode!r} (expected one of {MODES})")
    if seconds <= 0:
        raise ValidationError(f"seconds must be positive, got {seconds}")

    deadline = clock() + seconds

    def expired() -> bool:
        return clock() >= deadline

    sink = io.StringIO()
    runner = _run_align if mode == "align" else _run_plain
    rows = runner(sink, expired)
    result = BenchResult(mode=mode, rows=rows, size=len(sink.getvalue()), seconds=seconds)
    logger.debug("Benchmark %s: %s", mode, result.summary())
    return result
