"""
Dashboard Service for daily pushup tracking.

This module provides the business logic behind the dashboard screen:
- Loading today's count, goal, 7-day chart and streak
- Adding, incrementing and resetting today's count
- Setting the daily goal

Every mutation is a read-modify-write against the data service followed by
a full reload, so the returned view always reflects stored state.
"""
from datetime import date, datetime, timedelta, timezone
from typing import Any, Optional, Union
import logging
import math
import re

from application.exceptions import InvalidAmountError, InvalidGoalError
from application.ports import GoalRepository, PushupRecordRepository
from backend.core import stats
from domain.models import DEFAULT_DAILY_TARGET, DashboardView

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def utc_today() -> date:
    """Current UTC calendar day."""
    return datetime.now(timezone.utc).date()


def parse_count(value: Any) -> Optional[int]:
    """
    Read an integer from form or JSON input.

    Accepts ints, finite floats (truncated) and strings with a leading
    integer ("12", " 12 ", "12.5"); anything else, including booleans,
    gives None.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if not isinstance(value, str):
        return None
    match = _LEADING_INT.match(value)
    if not match:
        return None
    return int(match.group(1))


class DashboardService:
    """
    Service for the dashboard screen.

    Combines the record and goal repositories with the pure aggregation
    functions in backend.core.stats.
    """

    def __init__(
        self,
        record_repo: PushupRecordRepository,
        goal_repo: GoalRepository,
        *,
        default_goal: int = DEFAULT_DAILY_TARGET,
        streak_lookback_days: int = stats.DEFAULT_STREAK_LOOKBACK_DAYS,
    ):
        """
        Initialize the dashboard service.

        Args:
            record_repo: Repository for daily pushup records
            goal_repo: Repository for the per-user goal
            default_goal: Target used when the user has no goal row
            streak_lookback_days: Upper bound on the streak walk
        """
        self._records = record_repo
        self._goals = goal_repo
        self._default_goal = default_goal
        self._streak_lookback_days = streak_lookback_days

    # =========================================================================
    # Reads
    # =========================================================================

    def get_goal(self, user_id: str) -> int:
        goal = self._goals.get(user_id)
        return goal.daily_target if goal else self._default_goal

    def load(self, user_id: str, today: Optional[date] = None) -> DashboardView:
        """
        Build the dashboard view for a user.

        Args:
            user_id: Authenticated user id
            today: Reference day (defaults to the current UTC day)

        Returns:
            DashboardView with count, goal, message, progress, streak and chart
        """
        today = today or utc_today()
        goal = self.get_goal(user_id)

        todays_record = self._records.get_for_day(user_id, today)
        count = todays_record.count if todays_record else 0

        # One fetch covers both the chart week and the streak window
        window_days = max(self._streak_lookback_days, stats.WEEK_DAYS)
        history = self._records.list_between(
            user_id,
            today - timedelta(days=window_days - 1),
            today + timedelta(days=1),
        )

        return DashboardView(
            count=count,
            goal=goal,
            message=stats.motivation_message(count, goal),
            progress_percent=stats.progress_percent(count, goal),
            progress_width=stats.progress_width(count, goal),
            streak=stats.compute_streak(history, today, self._streak_lookback_days),
            chart=stats.build_week_series(history, today),
        )

    # =========================================================================
    # Mutations
    # =========================================================================

    def add_pushups(
        self,
        user_id: str,
        amount: Union[int, str, None],
        today: Optional[date] = None,
    ) -> DashboardView:
        """
        Add pushups to today's record, creating it if needed.

        Raises:
            InvalidAmountError: amount is not a positive integer
        """
        parsed = parse_count(amount)
        if parsed is None or parsed <= 0:
            raise InvalidAmountError(f"Pushup amount must be a positive integer, got {amount!r}")

        today = today or utc_today()
        existing = self._records.get_for_day(user_id, today)
        if existing:
            new_count = existing.count + parsed
            self._records.update_count(existing.id, new_count)
        else:
            new_count = parsed
            self._records.insert(user_id, parsed)

        logger.info(f"Added {parsed} pushups for {user_id} on {today} (total {new_count})")
        return self.load(user_id, today)

    def increment(self, user_id: str, today: Optional[date] = None) -> DashboardView:
        """Add a single pushup."""
        return self.add_pushups(user_id, 1, today)

    def reset_today(self, user_id: str, today: Optional[date] = None) -> DashboardView:
        """Delete today's record so the count reads 0."""
        today = today or utc_today()
        existing = self._records.get_for_day(user_id, today)
        if existing:
            self._records.delete(existing.id)
            logger.info(f"Reset pushups for {user_id} on {today}")
        return self.load(user_id, today)

    def set_goal(
        self,
        user_id: str,
        daily_target: Union[int, str, None],
        today: Optional[date] = None,
    ) -> DashboardView:
        """
        Update the user's goal row, or create it.

        Raises:
            InvalidGoalError: daily_target is not a positive integer
        """
        parsed = parse_count(daily_target)
        if parsed is None or parsed <= 0:
            raise InvalidGoalError(f"Daily goal must be a positive integer, got {daily_target!r}")

        existing = self._goals.get(user_id)
        if existing:
            self._goals.update(existing.id, parsed)
        else:
            self._goals.insert(user_id, parsed)

        logger.info(f"Set daily goal for {user_id} to {parsed}")
        return self.load(user_id, today)
