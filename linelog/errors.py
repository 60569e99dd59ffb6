"""
Exception classes raised by linelog.
Separates programming errors (bad configuration, writing to a closed
logger) from recoverable I/O failures on the destination.
"""

from typing import Any, Dict, Optional


class LineLogError(Exception):
    """Base class for all errors raised by linelog."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (details: {self.details})"
        return self.message


class ConfigurationError(LineLogError):
    """Raised when a logger is constructed with an unusable configuration."""

    pass


class ClosedLoggerError(LineLogError):
    """Raised when a record is written to a logger that was already closed."""

    def __init__(self, message: str = "The logger is closed.", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class SinkWriteError(LineLogError):
    """Raised when the destination rejects a write or flush."""

    pass
