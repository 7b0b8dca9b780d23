"""Test sinks with controllable failure behavior."""


class FailingSink:
    """Sink whose writes fail after a number of successful ones."""

    def __init__(self, fail_after: int = 0) -> None:
        self.fail_after = fail_after
        self.data: list[str] = []

    def write(self, s: str) -> int:
        if len(self.data) >= self.fail_after:
            raise OSError(28, "No space left on device")
        self.data.append(s)
        return len(s)

    def getvalue(self) -> str:
        return "".join(self.data)


class RecordingSink:
    """Sink recording every write and flush call."""

    def __init__(self) -> None:
        self.writes: list[str] = []
        self.flushes = 0

    def write(self, s: str) -> int:
        self.writes.append(s)
        return len(s)

    def flush(self) -> None:
        self.flushes += 1

    def getvalue(self) -> str:
        return "".join(self.writes)
