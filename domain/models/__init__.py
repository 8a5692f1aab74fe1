"""
Domain models for the Pushup Tracker.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).

These models represent the core business concepts:
- PushupRecord: A user's cumulative pushup count for one day
- Goal: The per-user daily target
- DashboardView / CalendarView: What each screen renders

Usage:
    >>> from domain.models import PushupRecord

    >>> record = PushupRecord(count=30, created_at="2026-10-19T07:12:00+00:00")
    >>> record.day
    '2026-10-19'
"""

from domain.models.goal import DEFAULT_DAILY_TARGET, Goal
from domain.models.pushup_record import PushupRecord
from domain.models.views import (
    CalendarView,
    CalendarViewType,
    ChartData,
    DashboardView,
    DayCell,
    LegendEntry,
    MonthBlock,
    MonthGrid,
    YearGrid,
)

__all__ = [
    # Entities
    "PushupRecord",
    "Goal",
    "DEFAULT_DAILY_TARGET",
    # Views
    "CalendarView",
    "CalendarViewType",
    "ChartData",
    "DashboardView",
    "DayCell",
    "LegendEntry",
    "MonthBlock",
    "MonthGrid",
    "YearGrid",
]
