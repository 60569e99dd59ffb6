"""
File Sink
=========

Appends records to <path>/<name>.log. The file is created when missing and
existing content is never truncated.
"""

import logging
from pathlib import Path

from ..errors import ConfigurationError, SinkWriteError

logger = logging.getLogger(__name__)

LOG_EXTENSION = ".log"


def resolve_log_file(name: str, path: str | Path = ".", extension: str = LOG_EXTENSION) -> Path:
    """
    Validate the log directory and build the log file path.

    Raises:
        ConfigurationError: If name is empty or path is not a directory
    """
    if not name:
        raise ConfigurationError("A log file name is required.")
    directory = Path(path)
    if not directory.is_dir():
        raise ConfigurationError(
            "The path provided does not lead to a directory.",
            details={"path": str(directory)},
        )
    return directory / f"{name}{extension}"


class FileSink:
    """
    Sink owning an append-mode file handle.

    The directory check happens before anything is created, so a bad path
    leaves the filesystem untouched.
    """

    def __init__(self, name: str, path: str | Path = ".", extension: str = LOG_EXTENSION):
        """
        Open the log file.

        Args:
            name: Log name, without extension
            path: Existing directory holding the log file (default: cwd)
            extension: File extension (default: ".log")

        Raises:
            ConfigurationError: If path is not a directory or the log file
                cannot be opened (e.g. it is a directory itself)
            PermissionError: If access to the file is denied
        """
        self.file_path = resolve_log_file(name, path, extension)
        try:
            # Binary append: line separators are written exactly as formatted
            self._file = open(self.file_path, "ab")
        except PermissionError:
            raise
        except OSError as e:
            raise ConfigurationError(
                f"Cannot open log file: {e}",
                details={"file": str(self.file_path)},
            ) from e
        logger.debug("Opened log file %s", self.file_path)

    def write(self, data: bytes) -> None:
        try:
            self._file.write(data)
            self._file.flush()
        except (OSError, ValueError) as e:
            raise SinkWriteError(
                f"Failed to write to log file: {e}",
                details={"file": str(self.file_path)},
            ) from e

    def close(self) -> None:
        self._file.close()
        logger.debug("Closed log file %s", self.file_path)
