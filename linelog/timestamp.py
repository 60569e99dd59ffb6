"""
Locale-aware timestamps for the header line of a log.
"""

from contextlib import contextmanager
from datetime import datetime
import locale
from typing import Iterator, Optional

from .errors import ConfigurationError

DEFAULT_PATTERN = "%c"


class TimestampFormatter:
    """
    Formats the current date and time using a locale's conventions.

    A named locale is switched in only for the duration of format() and the
    previous LC_TIME setting is restored afterwards. None keeps whatever
    LC_TIME the process already uses.
    """

    def __init__(self, locale_name: Optional[str] = None, pattern: str = DEFAULT_PATTERN):
        """
        Args:
            locale_name: Locale such as "de_DE.UTF-8", or None for the current one
            pattern: strftime pattern (default: the locale's date and time, "%c")

        Raises:
            ConfigurationError: If the locale is not available on this system
        """
        self.locale_name = locale_name
        self.pattern = pattern
        # Fail at construction rather than on the first header write
        with self._time_locale():
            pass

    @contextmanager
    def _time_locale(self) -> Iterator[None]:
        if self.locale_name is None:
            yield
            return
        previous = locale.setlocale(locale.LC_TIME)
        try:
            locale.setlocale(locale.LC_TIME, self.locale_name)
        except locale.Error as e:
            raise ConfigurationError(
                f"Unsupported locale: {self.locale_name}",
                details={"locale": self.locale_name},
            ) from e
        try:
            yield
        finally:
            locale.setlocale(locale.LC_TIME, previous)

    def format(self, moment: Optional[datetime] = None) -> str:
        """Format moment (default: now, local time zone)."""
        if moment is None:
            moment = datetime.now().astimezone()
        with self._time_locale():
            return moment.strftime(self.pattern)
