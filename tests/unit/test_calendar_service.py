"""
Unit tests for the Calendar Service.
"""
from datetime import date
from unittest.mock import patch

import pytest

from application.exceptions import InvalidAnchorError
from backend.core.calendar_service import CalendarService
from tests.fakes import FakePushupRecordRepository

USER = "user-1"


@pytest.fixture
def records():
    repo = FakePushupRecordRepository()
    repo.seed_days(USER, {
        date(2026, 9, 30): 70,
        date(2026, 10, 1): 5,
        date(2026, 10, 19): 45,
        date(2026, 12, 31): 20,
    })
    # Late on the last day of the month; must land in October
    repo.seed([{"user_id": USER, "count": 33, "created_at": "2026-10-31T23:30:00+00:00"}])
    return repo


@pytest.fixture
def service(records):
    return CalendarService(records)


@pytest.mark.unit
class TestMonthView:

    def test_month_view_shape(self, service):
        view = service.load(USER, view="month", anchor=date(2026, 10, 19))
        assert view.view == "month"
        assert view.title == "October 2026"
        assert view.previous == "2026-09-01"
        assert view.next == "2026-11-01"
        assert view.year is None
        assert len(view.legend) == 5

    def test_month_view_counts_only_that_month(self, service):
        grid = service.load(USER, view="month", anchor=date(2026, 10, 19)).month
        counts = {cell.date: cell.count for cell in grid.days if cell.count}
        assert counts == {"2026-10-01": 5, "2026-10-19": 45, "2026-10-31": 33}

    def test_last_day_of_month_included(self, service):
        grid = service.load(USER, view="month", anchor=date(2026, 10, 1)).month
        assert grid.days[-1].count == 33
        assert grid.days[-1].level == 2

    def test_empty_month(self, service):
        grid = service.load(USER, view="month", anchor=date(2026, 6, 1)).month
        assert all(cell.count == 0 and cell.level == 0 for cell in grid.days)


@pytest.mark.unit
class TestYearView:

    def test_year_view_shape(self, service):
        view = service.load(USER, view="year", anchor=date(2026, 10, 19))
        assert view.title == "2026"
        assert view.previous == "2025-01-01"
        assert view.next == "2027-01-01"
        assert view.month is None
        assert len(view.year.months) == 12

    def test_year_view_includes_december_31(self, service):
        year = service.load(USER, view="year", anchor=date(2026, 10, 19)).year
        assert year.months[11].days[30].count == 20
        assert year.months[8].days[29].count == 70
        assert year.months[8].days[29].level == 4

    def test_anchor_defaults_to_today(self, service):
        with patch("backend.core.calendar_service.utc_today", return_value=date(2026, 10, 19)):
            view = service.load(USER)
        assert view.view == "month"
        assert view.anchor == "2026-10-19"
        assert view.month.days[18].count == 45


@pytest.mark.unit
class TestAnchorBounds:

    @pytest.mark.parametrize(
        "view,anchor",
        [("month", date(9999, 12, 1)), ("month", date(1, 1, 31)), ("year", date(9999, 1, 1)), ("year", date(1, 12, 31))],
    )
    def test_out_of_range_anchor_raises(self, service, view, anchor):
        with pytest.raises(InvalidAnchorError):
            service.load(USER, view=view, anchor=anchor)

    def test_last_month_before_date_max(self, service):
        view = service.load(USER, view="month", anchor=date(9999, 11, 15))
        assert view.next == "9999-12-01"
        assert len(view.month.days) == 30
