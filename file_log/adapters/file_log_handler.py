"""File log handler adapter.

Routes facade log calls to a local file, appending across restarts.
Lines look like:

    2024-05-01T12:00:00+0200 info svc : user=42 request served
"""

import threading
from datetime import datetime
from typing import Optional
from ..interfaces import ILogHandler, ILogSink, Level, Metadata
from .file_sink_adapter import FileSinkAdapter


class FileLogHandler:
    """Handler writing one formatted line per log call to a file sink."""

    def __init__(
        self, label: str, local_file: str, encoding: str = "utf-8"
    ):
        self.label = label
        self.log_level = Level.INFO
        self._metadata: Metadata = {}
        self._pretty_metadata: Optional[str] = None
        self._lock = threading.Lock()
        self.sink: ILogSink = FileSinkAdapter(local_file, encoding=encoding)

    def bind(self, label: str) -> "FileLogHandler":
        """Re-bind the label; usable as a non-failing facade factory."""
        self.label = label
        return self

    @property
    def metadata(self) -> Metadata:
        """Copy of the handler metadata."""
        return dict(self._metadata)

    @metadata.setter
    def metadata(self, value: Metadata) -> None:
        with self._lock:
            self._metadata = dict(value)
            self._pretty_metadata = self._prettify(self._metadata)

    def __getitem__(self, key: str) -> Optional[object]:
        return self._metadata.get(key)

    def __setitem__(self, key: str, value: Optional[object]) -> None:
        """Upsert a metadata entry; None removes it."""
        with self._lock:
            if value is None:
                self._metadata.pop(key, None)
            else:
                self._metadata[key] = value
            self._pretty_metadata = self._prettify(self._metadata)

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
        """Write one line. Level filtering is left to the facade."""
        with self._lock:
            if metadata:
                pretty = self._prettify({**self._metadata, **metadata})
            else:
                pretty = self._pretty_metadata
            label = self.label

        meta_block = f" {pretty}" if pretty is not None else ""
        self.sink.write(
            f"{self._timestamp()} {level!s} {label} :{meta_block} {message}\n"
        )

    def close(self) -> None:
        self.sink.close()

    def __enter__(self) -> "FileLogHandler":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    @staticmethod
    def _prettify(metadata: Metadata) -> Optional[str]:
        if not metadata:
            return None
        return " ".join(f"{k}={v}" for k, v in metadata.items())

    @staticmethod
    def _timestamp() -> str:
        return datetime.now().astimezone().strftime("%Y-%m-%dT%H:%M:%S%z")
