"""
Screen view models.

Serialized as-is by the dashboard and calendar endpoints. The chart shape
is the `{labels, series}` pair a line-chart widget consumes directly.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

CalendarViewType = Literal["month", "year"]


class ChartData(BaseModel):
    """Trailing 7-day series, oldest first."""

    label: str = "Daily Pushups"
    labels: List[str] = Field(default_factory=list)
    series: List[int] = Field(default_factory=list)


class DashboardView(BaseModel):
    """Everything the dashboard screen renders."""

    count: int = Field(..., ge=0, description="Today's total")
    goal: int = Field(..., gt=0, description="Daily target")
    message: str = Field(..., description="Motivation message for current progress")
    progress_percent: int = Field(..., ge=0, description="Rounded count/goal percentage, may exceed 100")
    progress_width: str = Field(..., description="Progress bar width, capped at 100%")
    streak: int = Field(..., ge=0, description="Consecutive active days ending today")
    chart: ChartData


class DayCell(BaseModel):
    """One day in a heatmap grid."""

    date: str
    day: int
    count: int = 0
    level: int = Field(0, ge=0, le=4, description="Heatmap intensity bucket")
    title: Optional[str] = None


class MonthGrid(BaseModel):
    """Month view: weekday headers, blank cells before the 1st, then the days."""

    year: int
    month: int
    name: str
    weekdays: List[str]
    leading_blanks: int = Field(..., ge=0, le=6)
    days: List[DayCell]


class MonthBlock(BaseModel):
    """One month inside the year view."""

    month: int
    name: str
    days: List[DayCell]


class YearGrid(BaseModel):
    year: int
    months: List[MonthBlock]


class LegendEntry(BaseModel):
    level: int
    label: str


class CalendarView(BaseModel):
    """Everything the calendar screen renders."""

    view: CalendarViewType
    anchor: str = Field(..., description="Date the view is centred on (YYYY-MM-DD)")
    title: str
    previous: str = Field(..., description="Anchor for the previous period")
    next: str = Field(..., description="Anchor for the next period")
    month: Optional[MonthGrid] = None
    year: Optional[YearGrid] = None
    legend: List[LegendEntry]
