"""
PostgreSQL timestamp format (ISO DateStyle).
"""

from datetime import datetime, time, timedelta

from dateutil.parser import isoparser

from .base import DatabaseFormat, ascii_text, hms, ymd

# isoparser takes a single separator character, so one parser per form
_SPACE_PARSER = isoparser(sep=" ")
_T_PARSER = isoparser(sep="T")


def _format_zone(value: datetime) -> str:
    offset = value.utcoffset()
    if offset is None:
        return ""
    sign = "-" if offset < timedelta(0) else "+"
    minutes = abs(int(offset.total_seconds())) // 60
    hours, minutes = divmod(minutes, 60)
    if minutes:
        return f"{sign}{hours:02d}:{minutes:02d}"
    return f"{sign}{hours:02d}"


class PgFormat(DatabaseFormat):
    """
    PostgreSQL ISO forms, as psql prints them:

        2005-02-17 14:06:14
        2005-02-17 14:06:14.25+05:30

    Input also accepts a 'T' separator, a 'Z' zone and a bare date.
    Fractions beyond microseconds are truncated.
    """

    name = "pg"

    def parse_datetime(self, value: str) -> datetime:
        text = ascii_text(value)
        parser = _T_PARSER if "T" in text else _SPACE_PARSER
        return parser.isoparse(text)

    def parse_date(self, value: str) -> datetime:
        return datetime.combine(_SPACE_PARSER.parse_isodate(ascii_text(value)), time.min)

    def format_datetime(self, value: datetime) -> str:
        text = f"{ymd(value)} {hms(value)}"
        if value.microsecond:
            text += f".{value.microsecond:06d}".rstrip("0")
        return text + _format_zone(value)

    def format_date(self, value: datetime) -> str:
        return ymd(value)
