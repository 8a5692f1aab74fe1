"""
Daily pushup record entity.

One row per user per day in the `pushup_records` table, holding the
cumulative count for that date. The day is the UTC date prefix of
`created_at`, which the data service sets on insert.
"""

from typing import Optional, Union

from pydantic import BaseModel, Field, field_validator


class PushupRecord(BaseModel):
    """
    A user's cumulative pushup count for one day.

    Examples:
        >>> record = PushupRecord(id=7, count=25, created_at="2026-10-19T08:30:00+00:00")
        >>> record.day
        '2026-10-19'
    """

    id: Optional[Union[int, str]] = Field(default=None, description="Row id")
    user_id: Optional[str] = Field(default=None, description="Owner id")
    count: int = Field(default=0, ge=0, description="Cumulative pushups for the day")
    created_at: str = Field(..., description="ISO-8601 timestamp set by the data service")

    @field_validator("created_at")
    @classmethod
    def validate_created_at(cls, v: str) -> str:
        """Require at least a YYYY-MM-DD prefix."""
        if len(v) < 10 or v[4] != "-" or v[7] != "-":
            raise ValueError(f"created_at must start with YYYY-MM-DD, got '{v}'")
        return v

    @property
    def day(self) -> str:
        """UTC calendar day this record belongs to (YYYY-MM-DD)."""
        return self.created_at[:10]
