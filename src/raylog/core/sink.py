from __future__ import annotations
import sys
from pathlib import Path
from typing import IO, Optional, TextIO

from raylog.core.errors import InvalidSinkError

DEFAULT_LOG_FILENAME = "Log.log"


class SinkManager:
    """Owns the destination every log fragment is written to.

    With no explicit target, output goes to whatever ``sys.stdout`` is at
    the time of the write. Redirected streams are borrowed, never closed;
    only a file opened through ``open_file`` is owned and closed here.
    """

    def __init__(self):
        self._target: Optional[IO[str]] = None
        self._file: Optional[TextIO] = None

    @property
    def stream(self) -> IO[str]:
        return self._target if self._target is not None else sys.stdout

    @property
    def file(self) -> Optional[TextIO]:
        return self._file

    def redirect(self, stream: IO[str]):
        if not callable(getattr(stream, "write", None)):
            raise InvalidSinkError(stream)
        self._target = stream

    def restore_console(self):
        self._target = None

    def write(self, text: str):
        self.stream.write(text)

    def flush(self):
        flush = getattr(self.stream, "flush", None)
        if callable(flush):
            flush()

    def open_file(self, directory: str | Path, filename: str = DEFAULT_LOG_FILENAME) -> Path:
        """Create ``directory`` if needed, open ``directory/filename`` fresh and redirect to it.

        Raises ``OSError`` when the directory or file cannot be created;
        the current target is left untouched in that case.
        """
        folder = Path(directory) if directory else Path()
        if directory:
            folder.mkdir(parents=True, exist_ok=True)
        if self._file is not None:
            self.close_file()
        path = folder / filename
        handle = open(path, "w", encoding="utf-8")
        self._file = handle
        self._target = handle
        return path

    def close_file(self) -> bool:
        """Close the owned log file, falling back to the console if it was the target."""
        if self._file is None:
            return False
        handle, self._file = self._file, None
        if self._target is handle:
            self._target = None
        handle.close()
        return True
