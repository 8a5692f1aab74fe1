"""
Router package for the Pushup Tracker.

This package contains all API routers organized by screen:
- health: Liveness and app metadata
- dashboard: Dashboard screen plus the add/increment/reset/goal mutations
- calendar: Month/year heatmap screen
"""

from api.routers.health import router as health_router
from api.routers.dashboard import router as dashboard_router
from api.routers.calendar import router as calendar_router

__all__ = [
    "health_router",
    "dashboard_router",
    "calendar_router",
]
