"""
ValidationResult model representing the outcome of validating a submission (ephemeral).
"""

from typing import Any, List

from pydantic import BaseModel, Field, field_validator


class ValidationResult(BaseModel):
    """
    Outcome of validating a form submission.

    Attributes:
        submission_id: Which submission was validated
        passed: Overall validation status
        valid: Field values that passed, coerced where a rule produced a value
        invalid: Fields that failed at least one error-severity rule
        missing: Required fields that had no value
        passed_rules: Rules that succeeded
        failed_rules: Error-severity rules that failed
        warnings: Warning-severity rules that failed
    """

    submission_id: str
    passed: bool
    valid: dict[str, Any] = Field(default_factory=dict)
    invalid: List[str] = Field(default_factory=list)
    missing: List[str] = Field(default_factory=list)
    passed_rules: List[str] = Field(default_factory=list)
    failed_rules: List[str] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)

    @field_validator('failed_rules', 'missing')
    @classmethod
    def check_passed_consistency(cls, v, info):
        """Validate that passed=True implies no failed rules and no missing fields."""
        if info.data.get('passed') and len(v) > 0:
            raise ValueError(f"passed=True but {info.field_name} is not empty")
        return v

    def has_invalid(self) -> bool:
        return bool(self.invalid)

    def has_missing(self) -> bool:
        return bool(self.missing)

    class Config:
        json_schema_extra = {
            "example": {
                "submission_id": "signup-0001",
                "passed": False,
                "valid": {"start_date": "2005-02-17 00:00:00"},
                "invalid": ["end_date"],
                "missing": [],
                "passed_rules": ["start_date_to_mysql_datetime"],
                "failed_rules": ["end_date_after_datetime"],
                "warnings": []
            }
        }
