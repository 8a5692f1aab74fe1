"""
Health check router.

This router provides the liveness endpoint for monitoring and load balancers,
plus the app metadata shown in page titles.
"""

from fastapi import APIRouter

router = APIRouter(
    tags=["Health"],
)

APP_TITLE = "Pushup Tracker"
APP_DESCRIPTION = "Track your daily pushup progress"


@router.get("/health")
def health():
    """
    Simple liveness endpoint.

    Returns:
        dict: Status indicator for health checks
    """
    return {"status": "ok"}


@router.get("/meta")
def meta():
    """Title and description for the client shell."""
    return {"title": APP_TITLE, "description": APP_DESCRIPTION}
