"""
Calendar router.

This router contains endpoints for:
- GET /calendar - Month or year heatmap of daily pushup counts
"""
from datetime import date
from typing import Literal, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from api.deps import get_calendar_service, get_screen_user
from application.exceptions import InvalidAnchorError
from backend.core.calendar_service import CalendarService
from domain.models import CalendarView

router = APIRouter(
    tags=["Calendar"],
)


@router.get("/calendar", response_model=CalendarView)
def get_calendar(
    user_id: str = Depends(get_screen_user),
    view: Literal["month", "year"] = Query("month", description="Heatmap granularity"),
    anchor: Optional[date] = Query(None, description="Any date inside the period (YYYY-MM-DD); defaults to today"),
    service: CalendarService = Depends(get_calendar_service),
):
    """
    Calendar screen.

    Use the `previous` / `next` anchors from the response to navigate.
    Anonymous visitors are redirected to the sign-in screen.
    """
    try:
        return service.load(user_id, view=view, anchor=anchor)
    except InvalidAnchorError as e:
        raise HTTPException(status_code=400, detail=str(e))
