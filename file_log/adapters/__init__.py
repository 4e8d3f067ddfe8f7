"""Adapter implementations for file-log."""

from .file_sink_adapter import FileSinkAdapter
from .file_log_handler import FileLogHandler
from .logging_bridge import LoggingBridge, register_level_names

__all__ = [
    'FileSinkAdapter',
    'FileLogHandler',
    'LoggingBridge',
    'register_level_names',
]
