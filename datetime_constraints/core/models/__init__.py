"""
Data models for date/time rule validation.

Rule configuration, submissions and results are Pydantic models;
CalendarInstant is the datetime value the rules produce.
"""

from .calendar_instant import CalendarInstant
from .constraint_rule import ConstraintRule, RuleType
from .form_submission import FormSubmission
from .validation_result import ValidationResult

__all__ = [
    "CalendarInstant",
    "ConstraintRule",
    "RuleType",
    "FormSubmission",
    "ValidationResult",
]
