"""
Base validator interface for all date/time rules.

All validators inherit from BaseValidator and implement validate(), which
returns the coerced value for the field or raises ValidationError.
"""

from abc import ABC, abstractmethod
from typing import Any

from datetime_constraints.core.errors import ValidationError

__all__ = ["BaseValidator", "ValidationError"]


class BaseValidator(ABC):
    """
    Abstract base class for all validators.

    A validator binds one catalog rule to a field and its configured
    parameters.
    """

    def __init__(self, field_name: str, parameters: dict[str, Any] | None = None):
        """
        Initialize validator.

        Args:
            field_name: Name of the field to validate
            parameters: Rule-specific parameters (pattern, targets, ...)
        """
        self.field_name = field_name
        self.parameters = parameters or {}

    @abstractmethod
    def validate(self, value: Any, record: dict[str, Any]) -> Any:
        """
        Validate a value against this rule.

        Args:
            value: The raw field value
            record: All raw values of the submission, for sibling references

        Returns:
            The coerced value to store for the field

        Raises:
            ValidationError: If validation fails
        """
        pass

    @property
    @abstractmethod
    def rule_type(self) -> str:
        """Return the rule type identifier."""
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(field={self.field_name}, params={self.parameters})"
