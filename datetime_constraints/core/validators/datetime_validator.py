"""
Validators binding each date/time rule to a form field.
"""

from datetime import date
from typing import Any

from datetime_constraints.core.formats import FormatRegistry, get_format

from . import datetime_rules
from .base_validator import BaseValidator, ValidationError
from .params import resolve_parameter


class DateRuleValidator(BaseValidator):
    """
    Runs one function from the rule set against a field value.

    Subclasses declare the rule, which parameters it needs and, for database
    rules, which database format must be available. A missing format raises
    ConfigurationError here, when the validator is built, rather than on
    the first submission.

    Args:
        field_name: Name of the field to validate
        parameters: Literal values or {"field": name} references
        formats: Registry to take database formats from (default registry if None)
    """

    rule = None
    required_params: tuple[str, ...] = ()
    optional_params: tuple[str, ...] = ()
    database_format: str | None = None

    def __init__(
        self,
        field_name: str,
        parameters: dict[str, Any] | None = None,
        formats: FormatRegistry | None = None,
    ):
        super().__init__(field_name, parameters)

        missing = [name for name in self.required_params if self.parameters.get(name) in (None, "")]
        if missing:
            raise ValueError(
                f"{self.__class__.__name__} requires parameter(s): {', '.join(missing)}"
            )

        pattern = self.parameters.get("pattern")
        if pattern is not None and not isinstance(pattern, str):
            raise ValueError("'pattern' must be a strptime pattern string")

        self.formatter = get_format(self.database_format, formats) if self.database_format else None

    def resolve_arguments(self, record: dict[str, Any]) -> dict[str, Any]:
        names = self.required_params + self.optional_params
        return {
            name: resolve_parameter(self.parameters[name], record)
            for name in names
            if name in self.parameters
        }

    def apply(self, value: Any, arguments: dict[str, Any]) -> Any:
        if self.formatter is not None:
            arguments["formatter"] = self.formatter
        return self.rule(value, **arguments)

    def validate(self, value: Any, record: dict[str, Any]) -> Any:
        """
        Validate the value and return what the rule produced.

        Raises:
            ValidationError: If the rule rejects the value
        """
        arguments = self.resolve_arguments(record)
        if value is not None and not isinstance(value, str):
            value = str(value)

        result = self.apply(value, arguments)
        if result is None:
            raise ValidationError(
                rule_name=self.rule_type,
                field_name=self.field_name,
                message=f"Value '{value}' rejected with {self.describe(arguments)}"
            )
        return result

    def describe(self, arguments: dict[str, Any]) -> str:
        shown = {k: v for k, v in arguments.items() if k != "formatter"}
        return ", ".join(f"{k}={v!r}" for k, v in shown.items()) or "no parameters"


class ToDatetimeValidator(DateRuleValidator):
    """Parse with a mandatory pattern into a CalendarInstant."""

    rule = staticmethod(datetime_rules.to_datetime)
    required_params = ("pattern",)
    rule_type = "to_datetime"


class YmdToDatetimeValidator(DateRuleValidator):
    """
    Combine year/month/day (and optional hour/minute/second) fields.

    ``year`` defaults to the validated field itself, so a rule on
    ``birth_year`` only has to reference the month and day fields.
    """

    rule = staticmethod(datetime_rules.ymd_to_datetime)
    required_params = ("month", "day")
    optional_params = ("year", "hour", "minute", "second")
    rule_type = "ymd_to_datetime"

    def apply(self, value: Any, arguments: dict[str, Any]) -> Any:
        arguments.setdefault("year", value)
        return self.rule(**arguments)


class _RelativeToTodayValidator(DateRuleValidator):
    required_params = ("pattern",)

    def __init__(self, field_name, parameters=None, formats=None):
        super().__init__(field_name, parameters, formats)
        today = self.parameters.get("today")
        if isinstance(today, str):
            today = date.fromisoformat(today)
        if today is not None and not isinstance(today, date):
            raise ValueError("'today' must be an ISO date")
        self.today = today

    def resolve_arguments(self, record: dict[str, Any]) -> dict[str, Any]:
        arguments = super().resolve_arguments(record)
        arguments["today"] = self.today
        return arguments


class BeforeTodayValidator(_RelativeToTodayValidator):
    """Date on or before today."""

    rule = staticmethod(datetime_rules.before_today)
    rule_type = "before_today"


class AfterTodayValidator(_RelativeToTodayValidator):
    """Date on or after today."""

    rule = staticmethod(datetime_rules.after_today)
    rule_type = "after_today"


class BeforeDatetimeValidator(DateRuleValidator):
    """Strictly earlier than ``target``."""

    rule = staticmethod(datetime_rules.before_datetime)
    required_params = ("pattern", "target")
    rule_type = "before_datetime"


class AfterDatetimeValidator(DateRuleValidator):
    """Strictly later than ``target``."""

    rule = staticmethod(datetime_rules.after_datetime)
    required_params = ("pattern", "target")
    rule_type = "after_datetime"


class BetweenDatetimesValidator(DateRuleValidator):
    """Strictly between ``target1`` and ``target2``."""

    rule = staticmethod(datetime_rules.between_datetimes)
    required_params = ("pattern", "target1", "target2")
    rule_type = "between_datetimes"


class ToMySQLDatetimeValidator(DateRuleValidator):
    rule = staticmethod(datetime_rules.to_mysql_datetime)
    optional_params = ("pattern",)
    database_format = "mysql"
    rule_type = "to_mysql_datetime"


class ToMySQLDateValidator(DateRuleValidator):
    rule = staticmethod(datetime_rules.to_mysql_date)
    optional_params = ("pattern",)
    database_format = "mysql"
    rule_type = "to_mysql_date"


class ToMySQLTimestampValidator(DateRuleValidator):
    rule = staticmethod(datetime_rules.to_mysql_timestamp)
    optional_params = ("pattern",)
    rule_type = "to_mysql_timestamp"


class ToPgDatetimeValidator(DateRuleValidator):
    rule = staticmethod(datetime_rules.to_pg_datetime)
    optional_params = ("pattern",)
    database_format = "pg"
    rule_type = "to_pg_datetime"
