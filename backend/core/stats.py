"""
Date-bucketed aggregation for the dashboard and calendar screens.

All functions here are pure: they take records already fetched from the
data service plus a reference date, and return plain values or view models.
Days are UTC calendar dates; a record belongs to the day given by the
YYYY-MM-DD prefix of its created_at timestamp.
"""
import calendar
import math
from datetime import date, datetime, timedelta
from typing import Dict, Iterable, List, Tuple, Union

from domain.models import (
    CalendarViewType,
    ChartData,
    DayCell,
    LegendEntry,
    MonthBlock,
    MonthGrid,
    PushupRecord,
    YearGrid,
)

WEEK_DAYS = 7
DEFAULT_STREAK_LOOKBACK_DAYS = 366

WEEKDAY_HEADERS = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]

# (upper bound exclusive, level); anything at or above the last bound is level 4
HEATMAP_THRESHOLDS = [(1, 0), (20, 1), (40, 2), (60, 3)]
HEATMAP_LEGEND = [
    LegendEntry(level=0, label="No activity"),
    LegendEntry(level=1, label="1-19 pushups"),
    LegendEntry(level=2, label="20-39 pushups"),
    LegendEntry(level=3, label="40-59 pushups"),
    LegendEntry(level=4, label="60+ pushups"),
]

MOTIVATION_MESSAGES = [
    (25, "Great start! Keep pushing! 🚀"),
    (50, "You're making progress! 🔥"),
    (75, "More than halfway there! 🌟"),
    (100, "Almost there! Finish strong! ✨"),
]
START_MESSAGE = "Ready to start? Let's crush it! 💪"

# Inclusive anchor bounds per view; outside them a range end or the
# previous/next anchor would leave date.min..date.max
ANCHOR_BOUNDS = {
    "month": (date(1, 2, 1), date(9999, 11, 30)),
    "year": (date(2, 1, 1), date(9998, 12, 31)),
}
GOAL_REACHED_MESSAGE = "Daily goal achieved! You're amazing! 🏆"


# =============================================================================
# Day keys
# =============================================================================


def day_key(value: Union[str, date, datetime]) -> str:
    """
    Return the YYYY-MM-DD key for a timestamp string, date or datetime.

    Strings are cut at their first 10 characters, matching how the data
    service serializes timestamptz columns.
    """
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return value[:10]


def index_by_day(records: Iterable[PushupRecord]) -> Dict[str, int]:
    """Map day -> count. When two records share a day the first one wins."""
    counts: Dict[str, int] = {}
    for record in records:
        counts.setdefault(record.day, record.count)
    return counts


# =============================================================================
# Dashboard stats
# =============================================================================


def compute_streak(
    records: Iterable[PushupRecord],
    today: date,
    max_days: int = DEFAULT_STREAK_LOOKBACK_DAYS,
) -> int:
    """
    Count consecutive days, ending with today, that have a non-zero record.

    The walk stops at the first day with no record or a zero count, so a
    missing today means a streak of 0. It never looks further back than
    max_days.
    """
    counts = index_by_day(records)
    streak = 0
    current = today
    while streak < max_days:
        if not counts.get(current.isoformat()):
            break
        streak += 1
        current -= timedelta(days=1)
    return streak


def week_labels() -> List[str]:
    """Labels for the trailing week, oldest first."""
    return [
        "Today" if offset == 0 else f"{offset} days ago"
        for offset in range(WEEK_DAYS - 1, -1, -1)
    ]


def build_week_series(records: Iterable[PushupRecord], today: date) -> ChartData:
    """Seven daily totals for today-6 .. today; days without a record are 0."""
    counts = index_by_day(records)
    series = []
    for offset in range(WEEK_DAYS - 1, -1, -1):
        day = today - timedelta(days=offset)
        series.append(counts.get(day.isoformat(), 0))
    return ChartData(labels=week_labels(), series=series)


def _ratio_percent(count: int, goal: int) -> float:
    if goal <= 0:
        return 0.0
    return count / goal * 100


def progress_percent(count: int, goal: int) -> int:
    """Goal progress rounded half-up to an integer. Not capped at 100."""
    return int(math.floor(_ratio_percent(count, goal) + 0.5))


def progress_width(count: int, goal: int) -> str:
    """CSS-style width for the progress bar, capped at 100%."""
    capped = min(_ratio_percent(count, goal), 100.0)
    return f"{round(capped, 2):g}%"


def motivation_message(count: int, goal: int) -> str:
    """Pick the encouragement line for the current progress."""
    if count == 0:
        return START_MESSAGE
    percent = _ratio_percent(count, goal)
    for upper, message in MOTIVATION_MESSAGES:
        if percent < upper:
            return message
    return GOAL_REACHED_MESSAGE


# =============================================================================
# Calendar
# =============================================================================


def heatmap_level(count: int) -> int:
    """Bucket a daily count into heatmap intensity 0-4."""
    for upper, level in HEATMAP_THRESHOLDS:
        if count < upper:
            return level
    return 4


def month_range(anchor: date) -> Tuple[date, date]:
    """Half-open [first of month, first of next month)."""
    start = anchor.replace(day=1)
    return start, shift_period(start, "month", 1)


def year_range(anchor: date) -> Tuple[date, date]:
    """Half-open [Jan 1, Jan 1 of next year)."""
    return date(anchor.year, 1, 1), date(anchor.year + 1, 1, 1)


def anchor_in_range(anchor: date, view: CalendarViewType) -> bool:
    """True when the anchor's period and both neighbours fit in the date type."""
    low, high = ANCHOR_BOUNDS[view]
    return low <= anchor <= high


def view_range(anchor: date, view: CalendarViewType) -> Tuple[date, date]:
    if view == "year":
        return year_range(anchor)
    return month_range(anchor)


def shift_period(anchor: date, view: CalendarViewType, delta: int) -> date:
    """
    Move the calendar anchor by delta months (month view) or years (year view).

    Month view lands on the first of the target month; year view lands on
    January 1st of the target year.
    """
    if view == "year":
        return date(anchor.year + delta, 1, 1)
    month_index = anchor.year * 12 + (anchor.month - 1) + delta
    return date(month_index // 12, month_index % 12 + 1, 1)


def period_title(anchor: date, view: CalendarViewType) -> str:
    if view == "year":
        return str(anchor.year)
    return f"{calendar.month_name[anchor.month]} {anchor.year}"


def days_in_month(year: int, month: int) -> List[date]:
    _, last = calendar.monthrange(year, month)
    return [date(year, month, d) for d in range(1, last + 1)]


def _day_cell(day: date, counts: Dict[str, int], with_title: bool) -> DayCell:
    key = day.isoformat()
    count = counts.get(key, 0)
    return DayCell(
        date=key,
        day=day.day,
        count=count,
        level=heatmap_level(count),
        title=f"{key}: {count} pushups" if with_title else None,
    )


def build_month_grid(anchor: date, counts: Dict[str, int]) -> MonthGrid:
    """
    Month heatmap for the anchor's month.

    leading_blanks is the weekday of the 1st with Sunday as 0, the number of
    empty cells before day 1 in a Sunday-first grid.
    """
    first = anchor.replace(day=1)
    return MonthGrid(
        year=first.year,
        month=first.month,
        name=calendar.month_name[first.month],
        weekdays=list(WEEKDAY_HEADERS),
        leading_blanks=(first.weekday() + 1) % 7,
        days=[_day_cell(d, counts, with_title=False) for d in days_in_month(first.year, first.month)],
    )


def build_year_grid(year: int, counts: Dict[str, int]) -> YearGrid:
    """Twelve month blocks; every cell carries a hover title."""
    months = []
    for month in range(1, 13):
        months.append(
            MonthBlock(
                month=month,
                name=calendar.month_name[month],
                days=[_day_cell(d, counts, with_title=True) for d in days_in_month(year, month)],
            )
        )
    return YearGrid(year=year, months=months)
