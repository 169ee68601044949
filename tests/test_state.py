from datetime import date

import pytest

from alquiler.booking_calendar import CalendarView, Selection
from alquiler.state import AppState


def test_defaults():
    state = AppState()
    assert state.lang == "es"
    assert state.tab == "home"
    assert state.selected_unit is None
    assert state.selection == Selection()
    assert state.photo_index == {"El camion": 0, "El apartamento": 0, "El aula": 0}


def test_toggle_lang_cycles():
    state = AppState()
    state.toggle_lang()
    assert state.lang == "en"
    state.toggle_lang()
    assert state.lang == "es"
    with pytest.raises(ValueError):
        state.set_lang("fr")


def test_go_validates_tabs():
    state = AppState()
    state.go("contact")
    assert state.tab == "contact"
    with pytest.raises(ValueError):
        state.go("admin")
    with pytest.raises(ValueError):
        state.go("apartment")


def test_open_unit_resets_selection():
    state = AppState()
    state.open_unit("El camion", today=date(2024, 7, 15))
    state.click_day("2024-07-20")
    state.click_day("2024-07-22")
    assert state.selection == Selection("2024-07-20", "2024-07-22")

    state.open_unit("El aula", today=date(2024, 7, 15))
    assert state.tab == "apartment"
    assert state.selected_unit == "El aula"
    assert state.selection == Selection()
    assert state.calendar == CalendarView(2024, 7)

    with pytest.raises(ValueError):
        state.open_unit("La casa")


def test_close_unit_returns_home():
    state = AppState()
    state.open_unit("El camion")
    state.click_day("2024-07-20")
    state.close_unit()
    assert state.tab == "home"
    assert state.selected_unit is None
    assert state.selection == Selection()


def test_three_clicks_never_make_a_three_date_range():
    state = AppState()
    state.open_unit("El camion", today=date(2024, 7, 1))
    for day in ("2024-07-05", "2024-07-08", "2024-07-06"):
        state.click_day(day)
    assert state.selection == Selection("2024-07-06", None)


def test_calendar_navigation():
    state = AppState(calendar=CalendarView(2024, 11))
    state.shift_calendar(2)
    assert state.calendar == CalendarView(2025, 1)
    state.set_calendar_month(6)
    assert state.calendar == CalendarView(2025, 6)
    state.set_calendar_year(2026)
    assert state.calendar == CalendarView(2026, 6)
    state.set_calendar_year(0)
    assert state.calendar == CalendarView(2026, 6)


def test_reset_booking():
    state = AppState()
    state.open_unit("El camion")
    state.click_day("2024-07-20")
    state.guest_name = "Ana"
    state.guests = 5
    state.reset_booking()
    assert state.selection == Selection()
    assert state.guest_name == ""
    assert state.guests == 2


def test_photo_carousel_wraps():
    state = AppState()
    state.prev_photo("El camion")
    assert state.current_photo("El camion") == 2
    state.next_photo("El camion")
    assert state.current_photo("El camion") == 0
    state.next_photo("El aula")
    state.next_photo("El aula")
    assert state.current_photo("El aula") == 0


def test_lightbox_steps_and_closes():
    state = AppState()
    state.open_lightbox(["a.jpg", "b.jpg", "c.jpg"], 2)
    state.step_lightbox(1)
    assert state.lightbox.current == "a.jpg"
    state.step_lightbox(-1)
    assert state.lightbox.current == "c.jpg"
    state.close_lightbox()
    assert state.lightbox is None


def test_calendar_year_out_of_range_is_ignored():
    state = AppState(calendar=CalendarView(2024, 12))
    state.set_calendar_year(9999)
    assert state.calendar == CalendarView(2024, 12)
    state.set_calendar_year(9998)
    state.set_calendar_month(12)
    assert state.calendar.months(2) == [(9998, 12), (9999, 1)]

    state = AppState(calendar=CalendarView(1, 1))
    state.shift_calendar(-1)
    assert state.calendar == CalendarView(1, 1)
