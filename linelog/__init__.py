"""
linelog
=======

Small leveled logging for single-process applications:
- Timestamped header, end-of-log footer
- Optional ANSI-colored level prefixes
- Multi-line messages aligned under the prefix
- Stream or append-mode file destinations

Usage:
    from linelog import Logger

    with Logger.to_file("app", path="logs") as log:
        log.info("Processing started")
        log.info([1, 2, 3])          # [INFO]: int[] {1, 2, 3}
        log.error(exc)               # description plus one "at" line per frame
"""

import logging

# Configuration
from .config import LoggerConfig, load_logger_config

# Errors
from .errors import (
    ClosedLoggerError,
    ConfigurationError,
    LineLogError,
    SinkWriteError,
)
from .formatter import MessageFormatter

# Core logging
from .levels import RESET, Severity, color_for, prefix_for
from .logger import END_OF_LOG, Logger
from .render import render

# Sinks
from .sinks import FileSink, Sink, StreamSink
from .timestamp import TimestampFormatter

# Library diagnostics are silent unless the application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Core
    "Logger",
    "Severity",
    "END_OF_LOG",
    "prefix_for",
    "color_for",
    "RESET",
    "MessageFormatter",
    "render",
    "TimestampFormatter",
    # Sinks
    "Sink",
    "StreamSink",
    "FileSink",
    # Configuration
    "LoggerConfig",
    "load_logger_config",
    # Errors
    "LineLogError",
    "ConfigurationError",
    "ClosedLoggerError",
    "SinkWriteError",
]
