"""
Dashboard router.

This router contains endpoints for:
- GET /dashboard - Today's count, goal, 7-day chart, streak and progress
- POST /pushups - Add a number of pushups to today's record
- POST /pushups/increment - Add a single pushup
- DELETE /pushups/today - Reset today's count
- PUT /goal - Set the daily goal

Every mutation answers with the reloaded dashboard view.
"""
import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from api.deps import (
    get_current_user,
    get_dashboard_service,
    get_screen_user,
)
from application.exceptions import (
    DataServiceError,
    InvalidAmountError,
    InvalidGoalError,
)
from backend.core.dashboard_service import DashboardService
from domain.models import DashboardView

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Dashboard"],
)


# =============================================================================
# Request Models
# =============================================================================


class AddPushupsRequest(BaseModel):
    """
    Request model for adding pushups.

    Any JSON value is accepted; the service reads a leading integer from it
    and answers 400 for anything else.
    """
    count: Any = Field(None, description="Pushups to add (> 0)")


class SetGoalRequest(BaseModel):
    """Request model for setting the daily goal."""
    daily_target: Any = Field(None, description="New daily target (> 0)")


def _raise_for_service_error(e: Exception, action: str) -> None:
    """Translate application errors into HTTP errors."""
    if isinstance(e, (InvalidAmountError, InvalidGoalError)):
        raise HTTPException(status_code=400, detail=str(e))
    if isinstance(e, DataServiceError):
        logger.error(f"Data service failure while trying to {action}: {e}")
        raise HTTPException(status_code=502, detail=str(e))
    raise e


# =============================================================================
# Screen
# =============================================================================


@router.get("/dashboard", response_model=DashboardView)
def get_dashboard(
    user_id: str = Depends(get_screen_user),
    service: DashboardService = Depends(get_dashboard_service),
):
    """
    Dashboard screen.

    Anonymous visitors are redirected to the sign-in screen.
    """
    return service.load(user_id)


# =============================================================================
# Mutations
# =============================================================================


@router.post("/pushups", response_model=DashboardView)
def add_pushups(
    request: AddPushupsRequest,
    user_id: str = Depends(get_current_user),
    service: DashboardService = Depends(get_dashboard_service),
):
    """Add pushups to today's record, creating it if needed."""
    try:
        return service.add_pushups(user_id, request.count)
    except (InvalidAmountError, DataServiceError) as e:
        _raise_for_service_error(e, "add pushups")


@router.post("/pushups/increment", response_model=DashboardView)
def increment_pushups(
    user_id: str = Depends(get_current_user),
    service: DashboardService = Depends(get_dashboard_service),
):
    """Add one pushup to today's record."""
    try:
        return service.increment(user_id)
    except DataServiceError as e:
        _raise_for_service_error(e, "increment pushups")


@router.delete("/pushups/today", response_model=DashboardView)
def reset_today(
    user_id: str = Depends(get_current_user),
    service: DashboardService = Depends(get_dashboard_service),
):
    """Delete today's record."""
    try:
        return service.reset_today(user_id)
    except DataServiceError as e:
        _raise_for_service_error(e, "reset pushups")


@router.put("/goal", response_model=DashboardView)
def set_goal(
    request: SetGoalRequest,
    user_id: str = Depends(get_current_user),
    service: DashboardService = Depends(get_dashboard_service),
):
    """Set the daily goal."""
    try:
        return service.set_goal(user_id, request.daily_target)
    except (InvalidGoalError, DataServiceError) as e:
        _raise_for_service_error(e, "set goal")
