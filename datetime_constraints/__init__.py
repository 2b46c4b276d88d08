"""
Date and time validation rules for form fields.

Each rule either rejects a raw string or turns it into a datetime value
(CalendarInstant) or a MySQL/PostgreSQL date string.
"""

from datetime_constraints.core.errors import ConfigurationError, ValidationError
from datetime_constraints.core.models import CalendarInstant, FormSubmission, ValidationResult
from datetime_constraints.core.rules import RuleConfigBuilder, RuleConfigLoader, RuleEngine, field_ref
from datetime_constraints.core.validators import (
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

__version__ = "0.1.0"

__all__ = [
    "CalendarInstant",
    "ConfigurationError",
    "FormSubmission",
    "RULES",
    "RuleConfigBuilder",
    "RuleConfigLoader",
    "RuleEngine",
    "ValidationError",
    "ValidationResult",
    "after_datetime",
    "after_today",
    "before_datetime",
    "before_today",
    "between_datetimes",
    "field_ref",
    "to_datetime",
    "to_mysql_date",
    "to_mysql_datetime",
    "to_mysql_timestamp",
    "to_pg_datetime",
    "ymd_to_datetime",
]
