"""Log sink interface (adapter pattern)."""

from typing import Protocol


class ILogSink(Protocol):
    """Interface for raw text output."""

    def write(self, text: str) -> None:
        """Append text, never raising on bad input."""
        ...

    def close(self) -> None:
        """Release the underlying resource."""
        ...
