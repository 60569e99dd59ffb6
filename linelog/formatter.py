"""
Record Formatter
================

Turns a prefix and a raw (possibly multi-line) message into the bytes of
one record. Continuation lines are indented by the visible width of the
prefix so they line up under the first character of the message:

    [ERROR]: Traceback follows
             ValueError: boom
"""

import codecs
import os
import re

from .errors import ConfigurationError
from .levels import RESET

# Matches SGR escape sequences such as "\033[31;1m" and "\033[0m"
ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")
LINE_BREAK = re.compile(r"\r\n|\r|\n")
# Unencodable characters (lone surrogates, non-ASCII under "ascii") are escaped
ENCODE_ERRORS = "backslashreplace"


def visible_width(text: str) -> int:
    """Length of text once ANSI escape sequences are removed."""
    return len(ANSI_ESCAPE.sub("", text))


class MessageFormatter:
    """
    Formats records for a sink.

    The line separator is fixed at construction so output does not depend on
    the platform the tests or the application run on.
    """

    def __init__(self, line_separator: str | None = None, encoding: str = "utf-8"):
        """
        Args:
            line_separator: Terminator written between lines (default: os.linesep)
            encoding: Text encoding of the produced bytes

        Raises:
            ConfigurationError: If the encoding is unknown
        """
        try:
            codecs.lookup(encoding)
        except LookupError:
            raise ConfigurationError(f"Unknown encoding: {encoding}", details={"encoding": encoding}) from None
        self.line_separator = os.linesep if line_separator is None else line_separator
        self.encoding = encoding

    def indent_width(self, prefix: str, ansi_enabled: bool) -> int:
        if ansi_enabled:
            return visible_width(prefix)
        return len(prefix)

    def format_text(self, prefix: str, message: str, ansi_enabled: bool) -> str:
        """
        Build the text of a record without its terminating line separator.

        Args:
            prefix: Level prefix (may start with a color escape)
            message: Raw message text
            ansi_enabled: Whether escapes are in use; appends the reset code

        Returns:
            prefix + message with every line break replaced by the line
            separator followed by the indentation run
        """
        indent = " " * self.indent_width(prefix, ansi_enabled)
        continuation = self.line_separator + indent
        body = LINE_BREAK.sub(lambda _: continuation, message)
        reset = RESET if ansi_enabled else ""
        return f"{prefix}{body}{reset}"

    def format(self, prefix: str, message: str, ansi_enabled: bool) -> bytes:
        """Encoded record without a trailing line separator."""
        return self.format_text(prefix, message, ansi_enabled).encode(self.encoding, ENCODE_ERRORS)

    def format_record(self, prefix: str, message: str, ansi_enabled: bool) -> bytes:
        """Encoded record terminated by exactly one line separator."""
        text = self.format_text(prefix, message, ansi_enabled) + self.line_separator
        return text.encode(self.encoding, ENCODE_ERRORS)
