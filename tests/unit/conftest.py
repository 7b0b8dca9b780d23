"""Unit test fixtures."""

import io
from collections.abc import Iterator

import pytest

from colalign import Align, AlignProxy
from tests.fixtures.sinks import FailingSink


@pytest.fixture
def sink() -> io.StringIO:
    """In-memory text sink."""
    return io.StringIO()


@pytest.fixture
def table() -> Align:
    """Fresh alignment state with default formatting."""
    return Align()


@pytest.fixture
def proxy(table: Align, sink: io.StringIO) -> Iterator[AlignProxy]:
    """Proxy attached to the in-memory sink, detached after the test."""
    p = table.attach(sink)
    yield p
    p.detach()


@pytest.fixture
def failing_sink() -> FailingSink:
    """Sink that fails on the first write."""
    return FailingSink()
