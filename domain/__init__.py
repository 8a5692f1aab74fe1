"""
Domain layer for the Pushup Tracker.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).
"""

from domain.models import (
    CalendarView,
    ChartData,
    DashboardView,
    Goal,
    PushupRecord,
)

__all__ = [
    "CalendarView",
    "ChartData",
    "DashboardView",
    "Goal",
    "PushupRecord",
]
