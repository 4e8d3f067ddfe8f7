"""Logger facade.

Application code talks to ``Logger``; it filters by level and hands
the call to whatever handler its factory produced.
"""

import sys
from typing import Callable, Optional
from .adapters import FileLogHandler
from .interfaces import ILogHandler, Level, Metadata


class Logger:
    """Front end for a single handler."""

    def __init__(self, label: str, factory: Callable[[str], ILogHandler]):
        self.label = label
        self.handler = factory(label)

    @property
    def log_level(self) -> Level:
        return self.handler.log_level

    @log_level.setter
    def log_level(self, level: Level) -> None:
        self.handler.log_level = level

    def __getitem__(self, key: str) -> Optional[object]:
        return self.handler[key]

    def __setitem__(self, key: str, value: Optional[object]) -> None:
        self.handler[key] = value

    def log(
        self,
        level: Level,
        message: str,
        metadata: Optional[Metadata] = None,
        source: Optional[str] = None,
        _depth: int = 1
    ) -> None:
        """Dispatch to the handler unless level is below log_level."""
        if level < self.handler.log_level:
            return

        frame = sys._getframe(_depth)
        self.handler.log(
            level,
            message,
            metadata=metadata,
            source=source or frame.f_globals.get("__name__", ""),
            file=frame.f_code.co_filename,
            function=frame.f_code.co_name,
            line=frame.f_lineno
        )

    def trace(self, message: str, metadata: Optional[Metadata] = None) -> None:
        self.log(Level.TRACE, message, metadata, _depth=2)

    def debug(self, message: str, metadata: Optional[Metadata] = None) -> None:
        self.log(Level.DEBUG, message, metadata, _depth=2)

    def info(self, message: str, metadata: Optional[Metadata] = None) -> None:
        self.log(Level.INFO, message, metadata, _depth=2)

    def notice(self, message: str, metadata: Optional[Metadata] = None) -> None:
        self.log(Level.NOTICE, message, metadata, _depth=2)

    def warning(self, message: str, metadata: Optional[Metadata] = None) -> None:
        self.log(Level.WARNING, message, metadata, _depth=2)

    def error(self, message: str, metadata: Optional[Metadata] = None) -> None:
        self.log(Level.ERROR, message, metadata, _depth=2)

    def critical(
        self, message: str, metadata: Optional[Metadata] = None
    ) -> None:
        self.log(Level.CRITICAL, message, metadata, _depth=2)


def file_logger(label: str, local_file: str, encoding: str = "utf-8") -> Logger:
    """Logger appending to local_file.

    Opening the file may raise CannotCreateFile; binding the label to
    the already-built handler cannot fail.
    """
    handler = FileLogHandler(label, local_file, encoding=encoding)
    return Logger(label, factory=handler.bind)
