"""
ConstraintRule model representing one configured date/time rule on a field.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Literal

from pydantic import BaseModel, Field

RuleType = Literal[
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


class ConstraintRule(BaseModel):
    """
    A date/time rule attached to a form field.

    Attributes:
        rule_name: Human-readable name ("start_date_to_datetime")
        rule_type: Catalog rule to apply
        field_name: Which field this rule applies to
        parameters: Rule parameters; {"field": name} values refer to sibling fields
        enabled: Whether rule is active
        severity: "error" (field invalid) or "warning" (log only)
        created_at: Rule creation timestamp
    """

    rule_name: str = Field(..., min_length=1)
    rule_type: RuleType
    field_name: str = Field(..., min_length=1)
    parameters: Dict[str, Any] | None = None
    enabled: bool = True
    severity: Literal["error", "warning"] = "error"
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    class Config:
        json_schema_extra = {
            "example": {
                "rule_name": "end_date_after_start",
                "rule_type": "after_datetime",
                "field_name": "end_date",
                "parameters": {
                    "pattern": "%m/%d/%Y",
                    "target": {"field": "start_date"}
                },
                "enabled": True,
                "severity": "error"
            }
        }
