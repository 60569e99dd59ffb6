"""
Core Logger Implementation
==========================

Leveled, line-oriented logging to a stream or an append-mode file.
Format: [LEVEL]: Message

Every logger starts with a header line holding the current date and time
and, once closed, ends with an end-of-log marker:

    Mon Oct 19 14:02:11 2026
    [INFO]: Indexed 150 documents
    [ERROR]: Embedding request failed
             ValueError: boom
             	at embed (client.py:42)
    =====end=====

Writes are synchronous: each record is formatted, written and flushed before
the call returns, so records appear in call order. The logger holds no lock;
callers sharing one logger between threads must serialize the calls
themselves.
"""

import logging
from pathlib import Path
import sys
from typing import IO, Any, Optional

from .config import LoggerConfig
from .errors import ClosedLoggerError, ConfigurationError, SinkWriteError
from .formatter import MessageFormatter
from .levels import Severity, prefix_for
from .render import render
from .sinks import FileSink, Sink, StreamSink
from .timestamp import TimestampFormatter

logger = logging.getLogger(__name__)

END_OF_LOG = "=====end====="


class Logger:
    """
    Leveled logger bound to exactly one destination.

    Usage:
        with Logger.to_file("app", path="logs") as log:
            log.info("Processing...")
            log.error(exc)

        log = Logger(sys.stderr, ansi_enabled=True)
        log.warning("Disk almost full")
        log.close()
    """

    def __init__(
        self,
        stream: Optional[IO[Any]] = None,
        *,
        sink: Optional[Sink] = None,
        locale: Optional[str] = None,
        ansi_enabled: bool = False,
        line_separator: Optional[str] = None,
        encoding: str = "utf-8",
        close_stream: bool = False,
        timestamps: Optional[TimestampFormatter] = None,
    ):
        """Open the logger and write the header line.

        Args:
            stream: Caller-owned stream to write to (e.g. sys.stdout)
            sink: Ready-made sink, instead of a stream
            locale: Locale of the header timestamp (default: current LC_TIME)
            ansi_enabled: Color the level prefixes with ANSI escapes
            line_separator: Line terminator (default: os.linesep)
            encoding: Output encoding
            close_stream: Close the stream on close() instead of only flushing it
            timestamps: Formatter for the header timestamp (overrides locale)

        Raises:
            ConfigurationError: If not exactly one of stream/sink is given, or
                the locale or encoding is unavailable
            SinkWriteError: If the header cannot be written
        """
        if (stream is None) == (sink is None):
            raise ConfigurationError("Logger needs exactly one of stream or sink.")

        self._timestamps = timestamps or TimestampFormatter(locale)
        if sink is None:
            sink = StreamSink(stream, encoding=encoding, close_stream=close_stream)

        self._sink = sink
        self._ansi_enabled = ansi_enabled
        self._closed = False

        try:
            self._formatter = MessageFormatter(line_separator, encoding)
            self.log(Severity.GENERIC, self._timestamps.format())
        except Exception:
            # No logger is returned, so nothing else can release the sink
            self._closed = True
            self._release()
            raise

    @classmethod
    def to_file(
        cls,
        name: str,
        *,
        path: str | Path = ".",
        locale: Optional[str] = None,
        ansi_enabled: bool = False,
        line_separator: Optional[str] = None,
        encoding: str = "utf-8",
        timestamps: Optional[TimestampFormatter] = None,
        exit_on_permission_error: bool = True,
    ) -> "Logger":
        """
        Open a logger appending to <path>/<name>.log.

        The file is created when missing; existing content is kept.

        Args:
            name: Log name without extension
            path: Existing directory (default: current working directory)
            exit_on_permission_error: Exit the process when the file cannot
                be opened for lack of permissions; re-raise when False

        Raises:
            ConfigurationError: If path is not a directory, the log file cannot
                be opened, or the locale is unavailable. Nothing is created
                when the path or locale check fails.
        """
        timestamps = timestamps or TimestampFormatter(locale)
        try:
            sink = FileSink(name, path)
        except PermissionError as e:
            if not exit_on_permission_error:
                raise
            logger.critical("Cannot open log file %s in %s: %s", name, path, e)
            raise SystemExit(1) from e

        return cls(
            sink=sink,
            ansi_enabled=ansi_enabled,
            line_separator=line_separator,
            encoding=encoding,
            timestamps=timestamps,
        )

    @classmethod
    def from_config(cls, config: LoggerConfig, stream: Optional[IO[Any]] = None) -> "Logger":
        """
        Open a logger described by a LoggerConfig.

        An explicit stream takes precedence over the configured destination.
        """
        if stream is None and config.stream is not None:
            stream = getattr(sys, config.stream)
        if stream is not None:
            return cls(
                stream,
                locale=config.locale,
                ansi_enabled=config.ansi_enabled,
                line_separator=config.line_separator,
                encoding=config.encoding,
            )
        if config.name:
            return cls.to_file(
                config.name,
                path=config.path,
                locale=config.locale,
                ansi_enabled=config.ansi_enabled,
                line_separator=config.line_separator,
                encoding=config.encoding,
            )
        raise ConfigurationError("No log destination configured: set a name or a stream.")

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def ansi_enabled(self) -> bool:
        return self._ansi_enabled

    @property
    def line_separator(self) -> str:
        return self._formatter.line_separator

    @property
    def sink(self) -> Sink:
        return self._sink

    def log(self, level: Severity | str, message: str) -> None:
        """
        Write one record.

        Args:
            level: Severity (or its name)
            message: Record text; line breaks are re-indented under the prefix

        Raises:
            ClosedLoggerError: If the logger was closed
            SinkWriteError: If the destination rejects the write
        """
        if self._closed:
            raise ClosedLoggerError()

        level = Severity.parse(level)
        # Framing lines stay colorless
        ansi = self._ansi_enabled and level is not Severity.GENERIC
        prefix = prefix_for(level, ansi)
        self._sink.write(self._formatter.format_record(prefix, message, ansi))

    # Standard logging methods
    def info(self, value: Any, type_name: Optional[str] = None) -> None:
        """Info level log [INFO]"""
        self.log(Severity.INFO, render(value, type_name=type_name))

    def debug(self, value: Any, type_name: Optional[str] = None) -> None:
        """Debug level log [DEBUG]"""
        self.log(Severity.DEBUG, render(value, type_name=type_name))

    def warning(self, value: Any, type_name: Optional[str] = None) -> None:
        """Warning level log [WARN]"""
        self.log(Severity.WARN, render(value, type_name=type_name))

    warn = warning

    def error(self, value: Any, type_name: Optional[str] = None) -> None:
        """Error level log [ERROR]"""
        self.log(Severity.ERROR, render(value, type_name=type_name))

    def _release(self) -> Optional[Exception]:
        try:
            self._sink.close()
        except (OSError, ValueError) as e:
            logger.warning("Failed to release log destination %r: %s", self._sink, e)
            return e
        return None

    def close(self) -> Optional[Exception]:
        """
        Write the end-of-log marker and release the destination.

        Closing twice is a no-op. The logger ends up closed even when the
        marker or the release fails; that failure is returned (and reported
        on the "linelog" stdlib logger) instead of raised.

        Returns:
            The failure encountered while closing, or None
        """
        if self._closed:
            return None

        error: Optional[Exception] = None
        try:
            self.log(Severity.GENERIC, END_OF_LOG)
        except SinkWriteError as e:
            logger.warning("Failed to write end-of-log marker: %s", e)
            error = e
        finally:
            self._closed = True
            release_error = self._release()
        return error or release_error

    def __enter__(self) -> "Logger":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        self.close()
        return False  # Do not suppress the exception
