"""
Severity levels and their display prefixes.
"""

from enum import Enum
from typing import Optional


class Severity(Enum):
    """Severity of a log record"""

    GENERIC = "GENERIC"  # Framing lines (header/footer), no prefix
    INFO = "INFO"
    DEBUG = "DEBUG"
    WARN = "WARN"
    ERROR = "ERROR"

    @classmethod
    def parse(cls, value: "Severity | str") -> "Severity":
        """
        Resolve a Severity from a member or a case-insensitive name.

        Args:
            value: Severity member or name ("info", "WARN", "warning", ...)

        Raises:
            ValueError: If the name is not a known severity
        """
        if isinstance(value, cls):
            return value
        name = str(value).strip().upper()
        if name == "WARNING":
            name = "WARN"
        try:
            return cls[name]
        except KeyError:
            raise ValueError(f"Unknown severity: {value!r}") from None


# ANSI color codes
COLORS = {
    Severity.INFO: "\033[36;1m",  # Cyan
    Severity.DEBUG: "\033[32;1m",  # Green
    Severity.WARN: "\033[33;1m",  # Yellow
    Severity.ERROR: "\033[31;1m",  # Red
}
RESET = "\033[0m"


def color_for(level: Severity) -> Optional[str]:
    """Color-start escape for a level, or None for GENERIC."""
    return COLORS.get(level)


def prefix_for(level: Severity, ansi_enabled: bool = False) -> str:
    """
    Display prefix for a level.

    GENERIC always maps to the empty string. Other levels map to
    "[LEVEL]: ", preceded by the level color when ANSI output is enabled.
    """
    if level is Severity.GENERIC:
        return ""
    color = COLORS[level] if ansi_enabled else ""
    return f"{color}[{level.value}]: "
