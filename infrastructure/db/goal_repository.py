"""
Supabase Goal Repository Implementation.

This module implements the GoalRepository protocol against the `goals` table.
"""
from typing import Any, Dict, Optional, Union
from supabase import Client
import logging

from application.exceptions import DataServiceError
from domain.models import Goal

logger = logging.getLogger(__name__)

TABLE = "goals"


def _to_goal(row: Dict[str, Any]) -> Goal:
    return Goal(
        id=row.get("id"),
        user_id=row.get("user_id"),
        daily_target=row["daily_target"],
    )


class SupabaseGoalRepository:
    """Supabase implementation of GoalRepository."""

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected)
        """
        self._client = client

    def get(self, user_id: str) -> Optional[Goal]:
        """Get the user's goal, or None when unset or unreadable."""
        try:
            result = self._client.table(TABLE) \
                .select("id, user_id, daily_target") \
                .eq("user_id", user_id) \
                .limit(1) \
                .execute()

            if result.data:
                return _to_goal(result.data[0])
            return None

        except Exception as e:
            logger.error(f"Error fetching goal for {user_id}: {e}")
            return None

    def insert(self, user_id: str, daily_target: int) -> Goal:
        try:
            result = self._client.table(TABLE) \
                .insert({"user_id": user_id, "daily_target": daily_target}) \
                .execute()
        except Exception as e:
            logger.error(f"Error inserting goal for {user_id}: {e}")
            raise DataServiceError(f"Failed to save goal: {e}") from e

        if not result.data:
            raise DataServiceError("Insert returned no row")
        return _to_goal(result.data[0])

    def update(self, goal_id: Union[int, str], daily_target: int) -> Goal:
        try:
            result = self._client.table(TABLE) \
                .update({"daily_target": daily_target}) \
                .eq("id", goal_id) \
                .execute()
        except Exception as e:
            logger.error(f"Error updating goal {goal_id}: {e}")
            raise DataServiceError(f"Failed to update goal: {e}") from e

        if not result.data:
            raise DataServiceError(f"Goal {goal_id} not found for update")
        return _to_goal(result.data[0])
