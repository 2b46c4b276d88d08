"""
Base interface for database date/time formats.
"""

from abc import ABC, abstractmethod
from datetime import datetime


class DatabaseFormat(ABC):
    """
    Grammar and output format for one database engine's date types.

    parse_* methods raise ValueError for input the database would reject
    (including impossible calendar dates); format_* methods never fail
    for a valid datetime.
    """

    name: str = ""

    @abstractmethod
    def parse_datetime(self, value: str) -> datetime:
        """Parse the engine's DATETIME/TIMESTAMP text."""

    @abstractmethod
    def parse_date(self, value: str) -> datetime:
        """Parse the engine's DATE text (midnight)."""

    @abstractmethod
    def format_datetime(self, value: datetime) -> str:
        """Render a datetime as the engine's DATETIME/TIMESTAMP text."""

    @abstractmethod
    def format_date(self, value: datetime) -> str:
        """Render the date part as the engine's DATE text."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name})"


def ymd(value: datetime, sep: str = "-") -> str:
    return f"{value.year:04d}{sep}{value.month:02d}{sep}{value.day:02d}"


def hms(value: datetime, sep: str = ":") -> str:
    return f"{value.hour:02d}{sep}{value.minute:02d}{sep}{value.second:02d}"


def ascii_text(value) -> str:
    """Return ``value`` stripped, or raise ValueError if it is not ASCII text."""
    if not isinstance(value, str):
        raise ValueError(f"expected text, got {type(value).__name__}")
    if not value.isascii():
        raise ValueError(f"'{value}' contains non-ASCII characters")
    return value.strip()
