"""Errors raised by file-log adapters."""


class FileLogError(Exception):
    """Base error for file-log."""


class CannotCreateFile(FileLogError):
    """Log file is missing and could not be created."""

    def __init__(self, path: str):
        super().__init__(f"cannot create log file: {path}")
        self.path = path
