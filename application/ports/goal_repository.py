"""
Goal Repository Interface (Port).

This module defines the abstract interface for the per-user daily target.
"""
from typing import Optional, Protocol, Union

from domain.models import Goal


class GoalRepository(Protocol):
    """Abstract interface for the `goals` table (at most one row per user)."""

    def get(self, user_id: str) -> Optional[Goal]:
        """Get the user's goal row, or None if they never set one."""
        ...

    def insert(self, user_id: str, daily_target: int) -> Goal:
        """Create the user's goal row."""
        ...

    def update(self, goal_id: Union[int, str], daily_target: int) -> Goal:
        """Change the target of an existing goal row."""
        ...
