"""
MySQL DATETIME / DATE formats.
"""

from datetime import datetime

from .base import DatabaseFormat, ascii_text, hms, ymd

DATETIME_PATTERN = "%Y-%m-%d %H:%M:%S"
DATE_PATTERN = "%Y-%m-%d"


class MySQLFormat(DatabaseFormat):
    """
    MySQL canonical forms: DATETIME is 'YYYY-MM-DD HH:MM:SS', DATE is
    'YYYY-MM-DD'. Like MySQL, single-digit month and day are read too.
    """

    name = "mysql"

    def parse_datetime(self, value: str) -> datetime:
        return datetime.strptime(ascii_text(value), DATETIME_PATTERN)

    def parse_date(self, value: str) -> datetime:
        return datetime.strptime(ascii_text(value), DATE_PATTERN)

    def format_datetime(self, value: datetime) -> str:
        return f"{ymd(value)} {hms(value)}"

    def format_date(self, value: datetime) -> str:
        return ymd(value)
