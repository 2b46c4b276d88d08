"""
Exception types shared by validators, formats and the rule engine.
"""


class ValidationError(Exception):
    """Raised when a value fails a date/time rule."""

    def __init__(self, rule_name: str, field_name: str, message: str):
        self.rule_name = rule_name
        self.field_name = field_name
        self.message = message
        super().__init__(f"[{rule_name}] {field_name}: {message}")


class ConfigurationError(ValueError):
    """
    Raised when a rule cannot run in this environment at all.

    Distinct from ValidationError: bad input never raises this, a missing
    or disabled database format does.
    """
