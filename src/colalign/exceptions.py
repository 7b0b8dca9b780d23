"""Exceptions for colalign."""

# ---------------------------------------------------------------------------
# Base Exception
# ---------------------------------------------------------------------------


class ColAlignError(Exception):
    """
    Base exception for all colalign errors.

    All exceptions raised by this library inherit from this class,
    allowing callers to catch all library-specific errors with a single
    except clause.
    """

    pass


# ---------------------------------------------------------------------------
# Category Exceptions
# ---------------------------------------------------------------------------


class SinkError(ColAlignError):
    """
    Base exception for output sink errors.

    Raised when the underlying sink could not accept data. The table is
    not renderable correctly after such a failure.
    """

    pass


class ProxyError(ColAlignError):
    """
    Base exception for proxy lifecycle errors.

    This includes using a detached proxy and attaching a second proxy
    to an alignment state that already has a live one.
    """

    pass


class ValidationError(ColAlignError):
    """Base exception for invalid arguments or formatting settings."""

    pass


class ConfigError(ColAlignError):
    """Raised when a configuration file or environment value is invalid."""

    def __init__(self, message: str, source: str | None = None) -> None:
        self.source = source
        if source:
            message = f"{message} (source: {source})"
        super().__init__(message)


# ---------------------------------------------------------------------------
# Sink Exceptions
# ---------------------------------------------------------------------------


class SinkWriteError(SinkError, OSError):
    """
    Raised when a write to the underlying sink fails.

    Also an ``OSError`` so that callers handling I/O errors generically
    keep working.

    Attributes:
        written: Characters the sink accepted before failing
        requested: Characters that were offered to the sink
        cause: The underlying exception, if the sink raised one
    """

    def __init__(
        self,
        message: str,
        *,
        written: int = 0,
        requested: int = 0,
        cause: Exception | None = None,
    ) -> None:
        self.written = written
        self.requested = requested
        self.cause = cause
        super().__init__(self._format_message(message))

    def _format_message(self, message: str) -> str:
        if self.requested:
            return f"{message} [{self.written}/{self.requested} chars written]"
        return message


# ---------------------------------------------------------------------------
# Proxy Exceptions
# ---------------------------------------------------------------------------


class DetachedProxyError(ProxyError):
    """Raised when an operation is issued on a proxy after detach()."""

    def __init__(self) -> None:
        super().__init__("Proxy is detached from its sink")


class StateInUseError(ProxyError):
    """
    Raised when attaching to an alignment state that already has a live proxy.

    An alignment state tracks a single current column per row; two live
    proxies would interleave their column bookkeeping.
    """

    def __init__(self) -> None:
        super().__init__(
            "Alignment state is already attached; detach the live proxy first"
        )


# ---------------------------------------------------------------------------
# Validation Exceptions
# ---------------------------------------------------------------------------


class InvalidFormatCharError(ValidationError):
    """Raised when a fill, separator or rule setting is not a single character."""

    def __init__(self, field: str, value: object) -> None:
        self.field = field
        self.value = value
        super().__init__(f"Invalid {field} character: {value!r}. Must be exactly one character")
