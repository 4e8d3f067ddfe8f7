"""Stdlib logging adapter.

Lets the standard ``logging`` module act as the facade for an
``ILogHandler``. Call metadata travels in ``extra={"metadata": {...}}``.
"""

import logging
from ..interfaces import ILogHandler, Level


def register_level_names() -> None:
    """Teach stdlib logging the TRACE and NOTICE names."""
    logging.addLevelName(Level.TRACE.value, "TRACE")
    logging.addLevelName(Level.NOTICE.value, "NOTICE")


class LoggingBridge(logging.Handler):
    """logging.Handler forwarding records to an ILogHandler."""

    def __init__(self, handler: ILogHandler):
        super().__init__()
        self.handler = handler

    def emit(self, record: logging.LogRecord) -> None:
        level = Level.from_logging(record.levelno)
        if level < self.handler.log_level:
            return

        try:
            self.handler.log(
                level,
                record.getMessage(),
                metadata=getattr(record, "metadata", None),
                source=record.name,
                file=record.pathname,
                function=record.funcName,
                line=record.lineno
            )
        except Exception:
            self.handleError(record)
