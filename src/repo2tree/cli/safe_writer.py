"""Signal-aware output writing for the repo2tree CLI.

The report goes either to an already open file descriptor (stdout) or to a file.
Failing to create the output file is the one error that aborts a run, and it is
reported as an OutputDestinationError.
"""

import errno
import os
import types
from pathlib import Path
from typing import Optional, Type, Union

from repo2tree.cli.signal_handler import signal_handler
from repo2tree.exceptions import OutputDestinationError


class SafeWriter:
    """Writer for the tree report that stops cleanly on SIGPIPE or SIGINT.

    Attributes:
        file: The file descriptor or path given at construction.
        fd: The file descriptor being written to.
    """

    def __init__(self, file: Union[int, str, os.PathLike]):
        """Open the output.

        Args:
            file: A file descriptor, or a path whose missing parent directories are created.

        Raises:
            TypeError: If ``file`` is neither a file descriptor nor a path.
            OutputDestinationError: If the output file cannot be created.
        """
        self.file = file
        self._closed = False

        if isinstance(file, int):
            self.fd = file
            self._file_obj = None
        elif isinstance(file, (str, os.PathLike)):
            path = Path(file)
            try:
                path.parent.mkdir(parents=True, exist_ok=True)
                self._file_obj = path.open("w", encoding="utf-8")
            except OSError as e:
                raise OutputDestinationError(str(path), e.strerror or str(e)) from e
            self.fd = self._file_obj.fileno()
        else:
            raise TypeError(f"Expected int, str, or PathLike, got {type(file).__name__}")

    def write(self, data: str) -> None:
        """Write data unless an interrupting signal has been received.

        Raises:
            BrokenPipeError: If SIGPIPE or SIGINT was received, or the pipe is closed.
            OSError: If another I/O error occurs.
            ValueError: If the writer is closed.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")

        if signal_handler.interrupted:
            raise BrokenPipeError()

        payload = data.encode("utf-8")
        try:
            while payload:
                written = os.write(self.fd, payload)
                payload = payload[written:]
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError()
            raise

    def close(self) -> None:
        """Close the output file if this writer opened it; closing twice is a no-op."""
        if self._closed:
            return

        if self._file_obj is not None:
            try:
                self._file_obj.close()
            except OSError as e:
                if e.errno != errno.EPIPE:
                    raise

        self._closed = True

    def __enter__(self) -> "SafeWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        try:
            self.close()
        except OSError:
            # An exception from the with block takes priority over a failed close
            if exc_type is None:
                raise
