"""Interface definitions for log adapters."""

from .i_log_sink import ILogSink
from .i_log_handler import ILogHandler, Level, Metadata

__all__ = [
    'ILogSink',
    'ILogHandler',
    'Level',
    'Metadata',
]
