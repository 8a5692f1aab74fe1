"""
Per-user daily goal.

Stored in the `goals` table, at most one row per user.
"""

from typing import Optional, Union

from pydantic import BaseModel, Field

# Target used when the user has never set one.
DEFAULT_DAILY_TARGET = 50


class Goal(BaseModel):
    """Daily pushup target used to compute progress percentage."""

    id: Optional[Union[int, str]] = Field(default=None, description="Row id")
    user_id: Optional[str] = Field(default=None, description="Owner id")
    daily_target: int = Field(default=DEFAULT_DAILY_TARGET, gt=0, description="Daily pushup target")
