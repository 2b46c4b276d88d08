"""
Strict strptime parsing into CalendarInstant values.
"""

from datetime import datetime

from datetime_constraints.core.models import CalendarInstant
from datetime_constraints.core.patterns import expand_pattern
from datetime_constraints.observability.logger import get_logger

logger = get_logger(__name__)


def strict_parse(value: str, pattern: str) -> CalendarInstant | None:
    """
    Parse ``value`` with ``pattern``, returning None when it does not fit.

    The whole string must match the pattern and the fields must form a real
    calendar date: "02-31-2005" with "%m-%d-%Y" is rejected by the datetime
    constructor, not by anything here.

    Args:
        value: Raw field value
        pattern: strptime(3) pattern

    Returns:
        CalendarInstant that prints back with ``pattern``, or None
    """
    try:
        parsed = datetime.strptime(value, expand_pattern(pattern))
    except (ValueError, TypeError) as e:
        logger.debug(
            "Value does not match pattern",
            extra={"value": repr(value), "pattern": pattern, "reason": str(e)},
        )
        return None

    return CalendarInstant.from_datetime(parsed, pattern)
