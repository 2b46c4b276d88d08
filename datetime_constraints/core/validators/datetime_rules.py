"""
The date/time rule set.

Every rule takes already-resolved raw values and returns either the
coerced value or None. None is the ordinary "invalid" outcome; the only
exception a rule raises is ConfigurationError, when a database rule has no
usable format.

    >>> str(to_datetime("02-17-2005", "%m-%d-%Y"))
    '02-17-2005'
    >>> to_datetime("02-31-2005", "%m-%d-%Y") is None
    True
    >>> to_mysql_timestamp("2005-02-17 00:00:00")
    '20050217000000'
"""

import re
from datetime import date, datetime, time
from typing import Any, Callable

from datetime_constraints.core.formats import DatabaseFormat, get_format
from datetime_constraints.core.formats.base import hms, ymd
from datetime_constraints.core.models import CalendarInstant
from datetime_constraints.observability.logger import get_logger

from .strptime import strict_parse

logger = get_logger(__name__)

# YYYYMMDDHHMMSS, with any run of non-digits allowed between the groups
LOOSE_TIMESTAMP_RE = re.compile(
    r"(\d{4})\D*(\d{2})\D*(\d{2})\D*(\d{2})\D*(\d{2})\D*(\d{2})", re.ASCII
)

CALENDAR_FIELD_RE = re.compile(r"^[+-]?\d+$", re.ASCII)


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value.strip() == "")


def _to_int(value: Any) -> int:
    if isinstance(value, bool):
        raise TypeError("booleans are not calendar fields")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        if not CALENDAR_FIELD_RE.match(value.strip()):
            raise ValueError(f"'{value}' is not a whole number")
        return int(value.strip())
    raise TypeError(f"cannot use {type(value).__name__} as a calendar field")


def _midnight(today: date | None, tzinfo) -> datetime:
    if today is None:
        today = datetime.now(tzinfo).date()
    return datetime.combine(today, time.min, tzinfo=tzinfo)


def _parse_with(parser: Callable[[str], datetime], value: str) -> datetime | None:
    try:
        return parser(value)
    except (ValueError, TypeError) as e:
        logger.debug("Value rejected by database grammar", extra={"value": repr(value), "reason": str(e)})
        return None


# =======================
# STRUCTURED RESULTS
# =======================

def to_datetime(value: str, pattern: str) -> CalendarInstant | None:
    """Parse ``value`` with ``pattern``. The pattern is mandatory."""
    return strict_parse(value, pattern)


def ymd_to_datetime(
    year: Any,
    month: Any,
    day: Any,
    hour: Any = None,
    minute: Any = None,
    second: Any = None,
) -> CalendarInstant | None:
    """
    Combine separate calendar fields into one instant.

    Year, month and day are required and may not be empty. Missing or empty
    time parts default to 0. The datetime constructor decides whether the
    combination is a real date.

    Returns:
        CalendarInstant (no pattern), or None
    """
    if _is_blank(year) or _is_blank(month) or _is_blank(day):
        logger.debug("Year, month and day are all required")
        return None

    try:
        return CalendarInstant(
            _to_int(year),
            _to_int(month),
            _to_int(day),
            0 if _is_blank(hour) else _to_int(hour),
            0 if _is_blank(minute) else _to_int(minute),
            0 if _is_blank(second) else _to_int(second),
        )
    except (ValueError, TypeError, OverflowError) as e:
        logger.debug("Not a valid calendar date", extra={"reason": str(e)})
        return None


def before_today(value: str, pattern: str, today: date | None = None) -> CalendarInstant | None:
    """
    Accept a date on or before today.

    Args:
        today: The current date; defaults to today's local date
    """
    instant = strict_parse(value, pattern)
    if instant is None:
        return None
    if instant > _midnight(today, instant.tzinfo):
        logger.debug("Date is after today", extra={"value": value})
        return None
    return instant


def after_today(value: str, pattern: str, today: date | None = None) -> CalendarInstant | None:
    """
    Accept a date on or after today.

    Args:
        today: The current date; defaults to today's local date
    """
    instant = strict_parse(value, pattern)
    if instant is None:
        return None
    if instant < _midnight(today, instant.tzinfo):
        logger.debug("Date is before today", extra={"value": value})
        return None
    return instant


def before_datetime(value: str, pattern: str, target: str) -> CalendarInstant | None:
    """Accept ``value`` only if it is strictly earlier than ``target`` (same pattern)."""
    instant = strict_parse(value, pattern)
    bound = strict_parse(target, pattern)
    if instant is None or bound is None:
        return None
    if not instant < bound:
        logger.debug("Date is not before target", extra={"value": value, "target": target})
        return None
    return instant


def after_datetime(value: str, pattern: str, target: str) -> CalendarInstant | None:
    """Accept ``value`` only if it is strictly later than ``target`` (same pattern)."""
    instant = strict_parse(value, pattern)
    bound = strict_parse(target, pattern)
    if instant is None or bound is None:
        return None
    if not instant > bound:
        logger.debug("Date is not after target", extra={"value": value, "target": target})
        return None
    return instant


def between_datetimes(value: str, pattern: str, target1: str, target2: str) -> CalendarInstant | None:
    """Accept ``value`` only if target1 < value < target2. Boundaries are excluded."""
    instant = strict_parse(value, pattern)
    lower = strict_parse(target1, pattern)
    upper = strict_parse(target2, pattern)
    if instant is None or lower is None or upper is None:
        return None
    if not lower < instant < upper:
        logger.debug(
            "Date is not between targets",
            extra={"value": value, "target1": target1, "target2": target2},
        )
        return None
    return instant


# =======================
# DATABASE STRINGS
# =======================
#
# With a pattern the value is always strict-parsed against it. Without one,
# the value must already be in the database's own format.

def to_mysql_datetime(
    value: str,
    pattern: str | None = None,
    formatter: DatabaseFormat | None = None,
) -> str | None:
    """Return 'YYYY-MM-DD HH:MM:SS' or None."""
    formatter = formatter or get_format("mysql")
    if pattern is not None:
        parsed = strict_parse(value, pattern)
    else:
        parsed = _parse_with(formatter.parse_datetime, value)
    return formatter.format_datetime(parsed) if parsed is not None else None


def to_mysql_date(
    value: str,
    pattern: str | None = None,
    formatter: DatabaseFormat | None = None,
) -> str | None:
    """Return 'YYYY-MM-DD' or None."""
    formatter = formatter or get_format("mysql")
    if pattern is not None:
        parsed = strict_parse(value, pattern)
    else:
        parsed = _parse_with(formatter.parse_date, value)
    return formatter.format_date(parsed) if parsed is not None else None


def to_mysql_timestamp(value: str, pattern: str | None = None) -> str | None:
    """
    Return 'YYYYMMDDHHMMSS' or None.

    Without a pattern the value only has to contain a year followed by five
    two-digit fields, so '20050217000000' and '2005-02-17 00:00:00' both
    pass. No database format is needed for this rule.
    """
    if pattern is not None:
        parsed = strict_parse(value, pattern)
    else:
        parsed = None
        match = LOOSE_TIMESTAMP_RE.search(value) if isinstance(value, str) else None
        if match:
            try:
                parsed = datetime(*(int(part) for part in match.groups()))
            except ValueError as e:
                logger.debug("Not a valid calendar date", extra={"value": value, "reason": str(e)})
        else:
            logger.debug("Value is not a timestamp", extra={"value": repr(value)})

    if parsed is None:
        return None
    return ymd(parsed, "") + hms(parsed, "")


def to_pg_datetime(
    value: str,
    pattern: str | None = None,
    formatter: DatabaseFormat | None = None,
) -> str | None:
    """Return PostgreSQL timestamp text ('2005-02-17 00:00:00') or None."""
    formatter = formatter or get_format("pg")
    if pattern is not None:
        parsed = strict_parse(value, pattern)
    else:
        parsed = _parse_with(formatter.parse_datetime, value)
    return formatter.format_datetime(parsed) if parsed is not None else None


RULES: dict[str, Callable[..., Any]] = {
    "to_datetime": to_datetime,
    "ymd_to_datetime": ymd_to_datetime,
    "before_today": before_today,
    "after_today": after_today,
    "before_datetime": before_datetime,
    "after_datetime": after_datetime,
    "between_datetimes": between_datetimes,
    "to_mysql_datetime": to_mysql_datetime,
    "to_mysql_date": to_mysql_date,
    "to_mysql_timestamp": to_mysql_timestamp,
    "to_pg_datetime": to_pg_datetime,
}
