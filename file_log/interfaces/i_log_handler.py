"""Log handler interface (adapter pattern)."""

from enum import IntEnum
from typing import Optional, Protocol


# Metadata values only need a str() rendering
Metadata = dict[str, object]


class Level(IntEnum):
    """Log severity, numbered like the stdlib logging levels."""
    TRACE = 5
    DEBUG = 10
    INFO = 20
    NOTICE = 25
    WARNING = 30
    ERROR = 40
    CRITICAL = 50

    def __str__(self) -> str:
        return self.name.lower()

    @classmethod
    def parse(cls, name: str) -> "Level":
        """Level from its name (case-insensitive, 'warn' accepted)."""
        key = name.strip().upper()
        if key == "WARN":
            key = "WARNING"
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"unknown log level: {name!r}") from None

    @classmethod
    def from_logging(cls, levelno: int) -> "Level":
        """Highest level not above a stdlib logging number."""
        result = cls.TRACE
        for level in cls:
            if level <= levelno:
                result = level
        return result


class ILogHandler(Protocol):
    """Interface for the handler a logging facade dispatches to."""

    log_level: Level

    @property
    def metadata(self) -> Metadata:
        """Handler-wide metadata."""
        ...

    def __getitem__(self, key: str) -> Optional[object]:
        ...

    def __setitem__(self, key: str, value: Optional[object]) -> None:
        ...

    def log(
        self,
        level: Level,
        message: str,
        metadata: Optional[Metadata] = None,
        source: str = "",
        file: str = "",
        function: str = "",
        line: int = 0
    ) -> None:
        """Write one log entry."""
        ...
