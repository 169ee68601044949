from datetime import date

import pytest

from alquiler.availability import AvailabilityEntry
from alquiler.booking_calendar import (
    NO_PRICE,
    CalendarView,
    DayState,
    Selection,
    apply_day_click,
    build_month_grid,
    day_state,
    month_cells,
    price_label,
)


def test_click_protocol_forms_forward_range_then_restarts():
    selection = Selection()
    selection = selection.click("2024-07-10")
    assert selection == Selection("2024-07-10", None)

    selection = selection.click("2024-07-12")
    assert selection == Selection("2024-07-10", "2024-07-12")

    selection = selection.click("2024-07-11")
    assert selection == Selection("2024-07-11", None)


def test_click_before_start_restarts_selection():
    selection = Selection("2024-07-10").click("2024-07-05")
    assert selection == Selection("2024-07-05", None)


def test_click_on_start_forms_single_day_range():
    assert Selection("2024-07-10").click("2024-07-10") == Selection("2024-07-10", "2024-07-10")


def test_selection_rejects_invalid_ranges():
    with pytest.raises(ValueError):
        Selection(start=None, end="2024-07-10")
    with pytest.raises(ValueError):
        Selection(start="2024-07-10", end="2024-07-09")


def test_selection_contains_is_strict():
    selection = Selection("2024-07-10", "2024-07-12")
    assert selection.contains("2024-07-11")
    assert not selection.contains("2024-07-10")
    assert not selection.contains("2024-07-12")
    assert not Selection("2024-07-10").contains("2024-07-11")


def test_calendar_view_shift_wraps_years():
    view = CalendarView(2024, 12)
    assert view.shift(1) == CalendarView(2025, 1)
    assert view.shift(-12) == CalendarView(2023, 12)
    assert view.months(2) == [(2024, 12), (2025, 1)]


def test_calendar_view_rejects_bad_month():
    with pytest.raises(ValueError):
        CalendarView(2024, 13)


def test_follow_end_advances_when_end_is_beyond_second_month():
    view = CalendarView(2024, 7)
    assert view.follow_end("2024-08-20") == view
    assert view.follow_end("2024-07-20") == view
    assert view.follow_end("2024-09-02") == CalendarView(2024, 8)
    assert view.follow_end("2025-01-15") == CalendarView(2024, 12)


def test_apply_day_click_focuses_start_month():
    selection, view = apply_day_click(Selection(), CalendarView(2024, 1), "2024-07-10")
    assert selection == Selection("2024-07-10")
    assert view == CalendarView(2024, 7)


def test_apply_day_click_scrolls_to_far_end():
    selection, view = apply_day_click(Selection("2024-07-30"), CalendarView(2024, 7), "2024-09-02")
    assert selection == Selection("2024-07-30", "2024-09-02")
    assert view == CalendarView(2024, 8)


def test_apply_day_click_keeps_view_for_near_end():
    selection, view = apply_day_click(Selection("2024-07-30"), CalendarView(2024, 6), "2024-07-31")
    assert selection == Selection("2024-07-30", "2024-07-31")
    assert view == CalendarView(2024, 6)


def test_build_month_grid_starts_on_sunday():
    grid = build_month_grid(2024, 7)
    # 1 July 2024 is a Monday: one blank cell before it
    assert grid[0][0] is None
    assert grid[0][1] == date(2024, 7, 1)
    assert all(len(week) == 7 for week in grid)
    days = [d for week in grid for d in week if d is not None]
    assert days[0] == date(2024, 7, 1)
    assert days[-1] == date(2024, 7, 31)
    assert len(days) == 31


def test_build_month_grid_no_padding_when_first_is_sunday():
    grid = build_month_grid(2024, 9)
    assert grid[0][0] == date(2024, 9, 1)


def test_day_state_priorities():
    available = AvailabilityEntry(price=50, available=True)
    blocked = AvailabilityEntry(price=50, available=False)
    selection = Selection("2024-07-10", "2024-07-12")

    assert day_state("2024-07-10", selection, blocked) is DayState.SELECTED
    assert day_state("2024-07-12", selection, None) is DayState.SELECTED
    assert day_state("2024-07-11", selection, blocked) is DayState.IN_RANGE
    assert day_state("2024-07-13", selection, available) is DayState.AVAILABLE
    assert day_state("2024-07-13", selection, blocked) is DayState.UNAVAILABLE
    assert day_state("2024-07-13", selection, None) is DayState.UNAVAILABLE


def test_in_range_requires_closed_range():
    entry = AvailabilityEntry(price=50, available=True)
    assert day_state("2024-07-11", Selection("2024-07-10"), entry) is DayState.AVAILABLE


def test_price_label():
    assert price_label(AvailabilityEntry(price=50, available=True)) == "50€"
    assert price_label(AvailabilityEntry(price=49.5, available=True), currency=" EUR") == "49.5 EUR"
    assert price_label(AvailabilityEntry(price=None, available=True)) == NO_PRICE
    assert price_label(None) == NO_PRICE


def test_month_cells_resolve_entries_and_states():
    unit_days = {"2024-07-01": AvailabilityEntry(price=50, available=True)}
    weeks = month_cells(2024, 7, unit_days, Selection("2024-07-02"))
    cells = [cell for week in weeks for cell in week if cell is not None]

    first, second, third = cells[:3]
    assert first.iso == "2024-07-01"
    assert first.entry.price == 50
    assert first.state is DayState.AVAILABLE
    assert second.state is DayState.SELECTED
    assert third.entry is None
    assert third.state is DayState.UNAVAILABLE


def test_calendar_view_stays_within_supported_years():
    first = CalendarView(1, 1)
    assert first.shift(-1) == first
    assert build_month_grid(1, 1)[0][0] is None

    last = CalendarView(9998, 12)
    assert last.shift(1) == last
    assert last.months(2) == [(9998, 12), (9999, 1)]
    for year, month in last.months(2):
        assert build_month_grid(year, month)

    with pytest.raises(ValueError):
        CalendarView(9999, 1)
    with pytest.raises(ValueError):
        CalendarView(0, 12)


def test_focus_on_last_supported_month_clamps():
    assert CalendarView.focus("9999-03-10") == CalendarView(9998, 12)
