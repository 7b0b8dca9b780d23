"""
Structural operations understood by an alignment proxy.

Operations are small value objects. Passing one to ``AlignProxy.apply``
(or shifting it into the proxy with ``<<``) runs the matching proxy method;
anything that is not an operation is written through to the sink.

Example:
    from colalign import Align, TAB, END_ROW, head

    with Align().attach(sys.stdout) as out:
        out << head("Name") << head("Age") << END_ROW
        out << "Al" << TAB << 30 << END_ROW
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .proxy import AlignProxy


class Operation:
    """Base class for structural operations."""

    def apply(self, proxy: AlignProxy) -> None:
        raise NotImplementedError


@dataclass(frozen=True)
class Tab(Operation):
    """Complete the current cell and move to the next column."""

    def apply(self, proxy: AlignProxy) -> None:
        proxy.tab()


@dataclass(frozen=True)
class EndRow(Operation):
    """Complete the current row."""

    def apply(self, proxy: AlignProxy) -> None:
        proxy.end_row()


@dataclass(frozen=True)
class NextCell(Operation):
    """Move to the next column, wrapping to a new row after the last known one."""

    def apply(self, proxy: AlignProxy) -> None:
        proxy.next_cell()


@dataclass(frozen=True)
class HeaderRow(Operation):
    """Complete the row with the declared column headers."""

    def apply(self, proxy: AlignProxy) -> None:
        proxy.header_row()


@dataclass(frozen=True)
class HorizontalRule(Operation):
    """Complete the row with a horizontal rule."""

    def apply(self, proxy: AlignProxy) -> None:
        proxy.horizontal_rule()


@dataclass(frozen=True)
class Reset(Operation):
    """Forget column widths and headers."""

    def apply(self, proxy: AlignProxy) -> None:
        proxy.reset()


@dataclass(frozen=True)
class ResetHeaders(Operation):
    """Forget column headers."""

    def apply(self, proxy: AlignProxy) -> None:
        proxy.reset_headers()


@dataclass(frozen=True)
class SetHeader(Operation):
    """Declare the header of the current column and advance."""

    text: str
    min_width: int = 0

    def apply(self, proxy: AlignProxy) -> None:
        proxy.set_header(self.text, self.min_width)


@dataclass(frozen=True)
class Raw(Operation):
    """Write tab/newline-delimited text as cells and rows."""

    text: str
    as_headers: bool = False

    def apply(self, proxy: AlignProxy) -> None:
        proxy.raw(self.text, as_headers=self.as_headers)


@dataclass(frozen=True)
class Configure(Operation):
    """Change formatting characters; ``None`` leaves a character unchanged."""

    fill: str | None = None
    sep: str | None = None
    rule: str | None = None

    def apply(self, proxy: AlignProxy) -> None:
        proxy.configure(fill=self.fill, sep=self.sep, rule=self.rule)


TAB = Tab()
END_ROW = EndRow()
NEXT = NextCell()
HEADER_ROW = HeaderRow()
HRULE = HorizontalRule()
RESET = Reset()
RESET_HEADERS = ResetHeaders()


def head(text: str, min_width: int = 0) -> SetHeader:
    return SetHeader(text, min_width)


def raw(text: str) -> Raw:
    return Raw(text)


def raw_headers(text: str) -> Raw:
    return Raw(text, as_headers=True)


def configure(
    fill: str | None = None,
    sep: str | None = None,
    rule: str | None = None,
) -> Configure:
    return Configure(fill=fill, sep=sep, rule=rule)
