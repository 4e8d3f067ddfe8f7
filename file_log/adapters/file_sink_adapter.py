"""Local file sink adapter."""

import sys
import threading
from pathlib import Path
from typing import BinaryIO, Optional
from ..errors import CannotCreateFile
from ..interfaces import ILogSink


class FileSinkAdapter:
    """Append-only sink over one open file handle."""

    def __init__(self, local_file: str, encoding: str = "utf-8"):
        self.path = Path(local_file)
        self.encoding = encoding
        self.dropped_writes = 0
        self._lock = threading.Lock()

        # Unknown encodings fail here, not on every write
        "".encode(encoding)

        # Unbuffered binary append: every write lands at end-of-file.
        # Only a missing file that cannot be created is CannotCreateFile;
        # errors on an existing path propagate unchanged.
        existed = self.path.exists()
        try:
            self._fh: Optional[BinaryIO] = open(self.path, "ab", buffering=0)
        except OSError as e:
            if existed:
                raise
            print(
                f"ERROR: cannot create log file {self.path}: {e}",
                file=sys.stderr
            )
            raise CannotCreateFile(str(self.path)) from e

    def write(self, text: str) -> None:
        """Append encoded text; unencodable text is dropped."""
        try:
            data = text.encode(self.encoding)
        except UnicodeEncodeError:
            data = None

        with self._lock:
            if data is None or self._fh is None:
                self.dropped_writes += 1
                return
            self._fh.write(data)

    def close(self) -> None:
        """Close the file handle (idempotent)."""
        with self._lock:
            if self._fh is None:
                return
            self._fh.close()
            self._fh = None

    @property
    def closed(self) -> bool:
        return self._fh is None

    def __enter__(self) -> "FileSinkAdapter":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
