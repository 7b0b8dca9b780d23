"""
colalign: streaming column alignment for text output.

Column widths are discovered while rows are written: every value goes
straight to the output, and each column boundary pads the cell to the
widest value seen so far in that column. Nothing is buffered per row.

Example:
    import sys
    from colalign import Align, END_ROW, HRULE, TAB, head

    table = Align()
    with table.attach(sys.stdout) as out:
        out << head("Name") << head("Age") << END_ROW
        out.header_row()
        out << HRULE
        out << "Alice" << TAB << 30 << END_ROW
        out.raw("Bob\\t4\\n")
"""

from .align import Align
from .exceptions import (
    ColAlignError,
    ConfigError,
    DetachedProxyError,
    InvalidFormatCharError,
    ProxyError,
    SinkError,
    SinkWriteError,
    StateInUseError,
    ValidationError,
)
from .models import AlignFormat
from .operations import (
    END_ROW,
    HEADER_ROW,
    HRULE,
    NEXT,
    RESET,
    RESET_HEADERS,
    TAB,
    Configure,
    EndRow,
    HeaderRow,
    HorizontalRule,
    NextCell,
    Operation,
    Raw,
    Reset,
    ResetHeaders,
    SetHeader,
    Tab,
    configure,
    head,
    raw,
    raw_headers,
)
from .proxy import AlignProxy
from .splitter import split_row
from .sink import CountingSink

try:
    from ._version import __version__
except ImportError:
    __version__ = "0.0.0+unknown"

__all__ = [
    # Version
    "__version__",
    # Main classes
    "Align",
    "AlignProxy",
    "AlignFormat",
    "CountingSink",
    "split_row",
    # Operations
    "Operation",
    "Tab",
    "EndRow",
    "NextCell",
    "HeaderRow",
    "HorizontalRule",
    "Reset",
    "ResetHeaders",
    "SetHeader",
    "Raw",
    "Configure",
    "TAB",
    "END_ROW",
    "NEXT",
    "HEADER_ROW",
    "HRULE",
    "RESET",
    "RESET_HEADERS",
    "head",
    "raw",
    "raw_headers",
    "configure",
    # Exceptions - Base
    "ColAlignError",
    # Exceptions - Categories
    "SinkError",
    "ProxyError",
    "ValidationError",
    "ConfigError",
    # Exceptions - Concrete
    "SinkWriteError",
    "DetachedProxyError",
    "StateInUseError",
    "InvalidFormatCharError",
]
