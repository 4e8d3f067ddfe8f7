"""file-log: append structured log lines to a local file."""

from .adapters import (
    FileSinkAdapter,
    FileLogHandler,
    LoggingBridge,
    register_level_names
)
from .errors import CannotCreateFile, FileLogError
from .interfaces import ILogHandler, ILogSink, Level, Metadata
from .logger import Logger, file_logger

__all__ = [
    'CannotCreateFile',
    'FileLogError',
    'FileLogHandler',
    'FileSinkAdapter',
    'ILogHandler',
    'ILogSink',
    'Level',
    'Logger',
    'LoggingBridge',
    'Metadata',
    'file_logger',
    'register_level_names',
]
