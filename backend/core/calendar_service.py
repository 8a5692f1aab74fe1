"""
Calendar Service for the heatmap screen.

Fetches a month or a year of records and buckets them into day cells.
"""
from datetime import date
from typing import Optional
import logging

from application.exceptions import InvalidAnchorError
from application.ports import PushupRecordRepository
from backend.core import stats
from backend.core.dashboard_service import utc_today
from domain.models import CalendarView, CalendarViewType

logger = logging.getLogger(__name__)


class CalendarService:
    """Service for the month/year heatmap views."""

    def __init__(self, record_repo: PushupRecordRepository):
        self._records = record_repo

    def load(
        self,
        user_id: str,
        view: CalendarViewType = "month",
        anchor: Optional[date] = None,
    ) -> CalendarView:
        """
        Build the calendar view around an anchor date.

        Args:
            user_id: Authenticated user id
            view: "month" or "year"
            anchor: Any date inside the period to show (defaults to today)

        Returns:
            CalendarView with the grid for the chosen view, legend and the
            anchors for previous/next navigation

        Raises:
            InvalidAnchorError: the period or its neighbours fall outside
                the supported date range
        """
        anchor = anchor or utc_today()
        if not stats.anchor_in_range(anchor, view):
            low, high = stats.ANCHOR_BOUNDS[view]
            raise InvalidAnchorError(
                f"Anchor for the {view} view must be between {low} and {high}, got {anchor}"
            )
        start, end = stats.view_range(anchor, view)
        records = self._records.list_between(user_id, start, end)
        counts = stats.index_by_day(records)
        logger.debug(f"Calendar {view} for {user_id}: {len(records)} records in [{start}, {end})")

        month_grid = stats.build_month_grid(anchor, counts) if view == "month" else None
        year_grid = stats.build_year_grid(anchor.year, counts) if view == "year" else None

        return CalendarView(
            view=view,
            anchor=anchor.isoformat(),
            title=stats.period_title(anchor, view),
            previous=stats.shift_period(anchor, view, -1).isoformat(),
            next=stats.shift_period(anchor, view, 1).isoformat(),
            month=month_grid,
            year=year_grid,
            legend=list(stats.HEATMAP_LEGEND),
        )
