"""
FormSubmission model representing one set of raw field values (ephemeral).
"""

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, Field


class FormSubmission(BaseModel):
    """
    Raw field values submitted together and validated as a unit.

    Attributes:
        submission_id: Identifier used in results and logs
        fields: Raw values by field name, exactly as submitted
        received_at: When the submission was received
    """

    submission_id: str = Field(..., min_length=1)
    fields: dict[str, Any] = Field(default_factory=dict)
    received_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    class Config:
        json_schema_extra = {
            "example": {
                "submission_id": "signup-0001",
                "fields": {
                    "start_date": "02/17/2005",
                    "end_date": "03/01/2005",
                    "birth_year": "1980",
                    "birth_month": "7",
                    "birth_day": "4"
                }
            }
        }
