"""
Date/time rule set and the validators that bind it to form fields.

The plain functions in ``datetime_rules`` take resolved values directly;
the validator classes resolve sibling-field parameters from a submission
and raise ValidationError instead of returning None.
"""

from datetime_constraints.core.errors import ConfigurationError

from .base_validator import BaseValidator, ValidationError
from .datetime_rules import (
    RULES,
    after_datetime,
    after_today,
    before_datetime,
    before_today,
    between_datetimes,
    to_datetime,
    to_mysql_date,
    to_mysql_datetime,
    to_mysql_timestamp,
    to_pg_datetime,
    ymd_to_datetime,
)
from .datetime_validator import (
    AfterDatetimeValidator,
    AfterTodayValidator,
    BeforeDatetimeValidator,
    BeforeTodayValidator,
    BetweenDatetimesValidator,
    DateRuleValidator,
    ToDatetimeValidator,
    ToMySQLDatetimeValidator,
    ToMySQLDateValidator,
    ToMySQLTimestampValidator,
    ToPgDatetimeValidator,
    YmdToDatetimeValidator,
)
from .params import resolve_parameter
from .strptime import strict_parse

__all__ = [
    "BaseValidator",
    "ValidationError",
    "ConfigurationError",
    "DateRuleValidator",
    "ToDatetimeValidator",
    "YmdToDatetimeValidator",
    "BeforeTodayValidator",
    "AfterTodayValidator",
    "BeforeDatetimeValidator",
    "AfterDatetimeValidator",
    "BetweenDatetimesValidator",
    "ToMySQLDatetimeValidator",
    "ToMySQLDateValidator",
    "ToMySQLTimestampValidator",
    "ToPgDatetimeValidator",
    "RULES",
    "strict_parse",
    "resolve_parameter",
    "to_datetime",
    "ymd_to_datetime",
    "before_today",
    "after_today",
    "before_datetime",
    "after_datetime",
    "between_datetimes",
    "to_mysql_datetime",
    "to_mysql_date",
    "to_mysql_timestamp",
    "to_pg_datetime",
]
