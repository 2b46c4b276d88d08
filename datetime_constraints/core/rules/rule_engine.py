"""
Rule engine for applying date/time rules to form submissions.

The engine builds one validator per configured rule, runs them against the
raw values of a submission and reports which fields are valid (with their
coerced values), invalid or missing.
"""

from typing import Any

from pydantic import ValidationError as ModelValidationError

from datetime_constraints.core.errors import ConfigurationError
from datetime_constraints.core.formats import FormatRegistry
from datetime_constraints.core.models import ConstraintRule, FormSubmission, ValidationResult
from datetime_constraints.core.validators import (
    AfterDatetimeValidator,
    AfterTodayValidator,
    BaseValidator,
    BeforeDatetimeValidator,
    BeforeTodayValidator,
    BetweenDatetimesValidator,
    ToDatetimeValidator,
    ToMySQLDatetimeValidator,
    ToMySQLDateValidator,
    ToMySQLTimestampValidator,
    ToPgDatetimeValidator,
    ValidationError,
    YmdToDatetimeValidator,
)
from datetime_constraints.core.validators.params import referenced_fields
from datetime_constraints.observability.logger import get_logger, log_operation

logger = get_logger(__name__)


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value.strip() == "")


class RuleEngine:
    """
    Orchestrates date/time rules on form submissions.

    Rules run in configuration order against the raw submitted values, so a
    rule comparing against a sibling field sees what was submitted, not the
    sibling's coerced value.
    """

    VALIDATOR_REGISTRY = {
        "to_datetime": ToDatetimeValidator,
        "ymd_to_datetime": YmdToDatetimeValidator,
        "before_today": BeforeTodayValidator,
        "after_today": AfterTodayValidator,
        "before_datetime": BeforeDatetimeValidator,
        "after_datetime": AfterDatetimeValidator,
        "between_datetimes": BetweenDatetimesValidator,
        "to_mysql_datetime": ToMySQLDatetimeValidator,
        "to_mysql_date": ToMySQLDateValidator,
        "to_mysql_timestamp": ToMySQLTimestampValidator,
        "to_pg_datetime": ToPgDatetimeValidator,
    }

    def __init__(
        self,
        rules: list[dict[str, Any]],
        required: list[str] | None = None,
        formats: FormatRegistry | None = None,
    ):
        """
        Initialize the rule engine.

        Args:
            rules: Rule configurations, each containing:
                   - rule_name: str
                   - rule_type: str (one of VALIDATOR_REGISTRY)
                   - field_name: str
                   - parameters: Dict[str, Any] (optional)
                   - severity: str (error or warning)
                   - enabled: bool (default True)
            required: Fields that must have a value
            formats: Database formats for the database rules (default registry if None)

        Raises:
            ValueError: If a rule is malformed
            ConfigurationError: If a rule needs a database format that is not enabled
        """
        self.rules = rules
        self.required = list(required or [])
        self.formats = formats
        self.validators: list[tuple[str, str, BaseValidator]] = []
        self._build_validators()

    def _build_validators(self) -> None:
        """Build validator instances from rule configurations."""
        for rule in self.rules:
            if not rule.get("enabled", True):
                continue

            rule_type = rule.get("rule_type")
            validator_class = self.VALIDATOR_REGISTRY.get(rule_type)
            if not validator_class:
                raise ValueError(f"Unknown rule type: {rule_type}")

            try:
                config = ConstraintRule(**rule)
            except ModelValidationError as e:
                raise ValueError(f"Invalid configuration for rule '{rule.get('rule_name')}': {e}")

            try:
                validator = validator_class(config.field_name, config.parameters, formats=self.formats)
            except ConfigurationError:
                logger.error(
                    "Rule cannot run in this environment",
                    extra={"rule_name": config.rule_name, "rule_type": rule_type},
                )
                raise
            except Exception as e:
                raise ValueError(f"Failed to create validator for rule '{config.rule_name}': {e}")

            self.validators.append((config.rule_name, config.severity, validator))

    def validate_submission(self, submission: FormSubmission) -> ValidationResult:
        """
        Validate a form submission against all rules.

        Args:
            submission: The FormSubmission to validate

        Returns:
            ValidationResult with coerced valid values and per-rule outcomes
        """
        fields = submission.fields
        passed_rules = []
        failed_rules = []
        warnings = []
        invalid: list[str] = []

        with log_operation("Validating submission", logger=logger, submission_id=submission.submission_id):
            missing = [name for name in self.required if _is_blank(fields.get(name))]
            valid = {name: value for name, value in fields.items() if not _is_blank(value)}

            for rule_name, severity, validator in self.validators:
                field_name = validator.field_name
                value = fields.get(field_name)

                # Empty optional fields are not constrained
                if _is_blank(value):
                    continue

                try:
                    coerced = validator.validate(value, fields)
                except ValidationError as e:
                    logger.debug(
                        "Rule failed",
                        extra={
                            "submission_id": submission.submission_id,
                            "rule_name": rule_name,
                            "field_name": field_name,
                            "severity": severity,
                            "reason": e.message,
                        },
                    )
                    if severity == "error":
                        failed_rules.append(rule_name)
                        if field_name not in invalid:
                            invalid.append(field_name)
                        valid.pop(field_name, None)
                    else:
                        warnings.append(rule_name)
                    continue

                passed_rules.append(rule_name)
                if field_name not in invalid:
                    valid[field_name] = coerced

        return ValidationResult(
            submission_id=submission.submission_id,
            passed=not failed_rules and not missing,
            valid=valid,
            invalid=invalid,
            missing=missing,
            passed_rules=passed_rules,
            failed_rules=failed_rules,
            warnings=warnings,
        )

    def validate_batch(self, submissions: list[FormSubmission]) -> list[ValidationResult]:
        """Validate several submissions, one result per submission."""
        return [self.validate_submission(submission) for submission in submissions]

    def get_rule_summary(self) -> dict[str, Any]:
        """
        Get summary of loaded rules.

        Returns:
            Dictionary with rule counts, required fields and referenced sibling fields
        """
        referenced = sorted({
            name
            for _, _, validator in self.validators
            for name in referenced_fields(validator.parameters)
        })
        return {
            "total_rules": len(self.validators),
            "rules_by_type": self._count_by_type(),
            "rules_by_severity": self._count_by_severity(),
            "required_fields": list(self.required),
            "referenced_fields": referenced,
        }

    def _count_by_type(self) -> dict[str, int]:
        counts: dict[str, int] = {}
        for _, _, validator in self.validators:
            rule_type = validator.rule_type
            counts[rule_type] = counts.get(rule_type, 0) + 1
        return counts

    def _count_by_severity(self) -> dict[str, int]:
        counts: dict[str, int] = {}
        for _, severity, _ in self.validators:
            counts[severity] = counts.get(severity, 0) + 1
        return counts
