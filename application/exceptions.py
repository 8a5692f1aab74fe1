"""
Application-layer exceptions.

These exceptions are used across application and infrastructure layers.
Routers translate them into HTTP responses.
"""


class PushupTrackerError(Exception):
    """Base class for tracker errors."""

    pass


class DataServiceError(PushupTrackerError):
    """A call to the hosted data service failed.

    Raised by the Supabase repositories when a write fails or returns no row.
    Read failures are logged and surface as absent data instead.
    """

    pass


class InvalidAmountError(PushupTrackerError, ValueError):
    """A pushup amount was missing, non-numeric, or not positive."""

    pass


class InvalidGoalError(PushupTrackerError, ValueError):
    """A daily target was missing, non-numeric, or not positive."""

    pass


class InvalidAnchorError(PushupTrackerError, ValueError):
    """A calendar anchor too close to the ends of the supported date range."""

    pass
