"""Apartment rental booking-inquiry site."""

from .availability import (
    AvailabilityEntry,
    all_days_available,
    build_availability,
    calc_total,
    date_range,
)
from .booking_calendar import CalendarView, DayState, Selection, apply_day_click
from .catalog import ACTIVITIES, APARTMENTS, UnitDefinition
from .feed import fetch_sheet, parse_csv
from .inquiry import booking_link, compose_booking_message
from .poller import FeedSnapshot, SheetPoller
from .state import AppState

__all__ = [
    "ACTIVITIES",
    "APARTMENTS",
    "AppState",
    "AvailabilityEntry",
    "CalendarView",
    "DayState",
    "FeedSnapshot",
    "Selection",
    "SheetPoller",
    "UnitDefinition",
    "all_days_available",
    "apply_day_click",
    "booking_link",
    "build_availability",
    "calc_total",
    "compose_booking_message",
    "date_range",
    "fetch_sheet",
    "parse_csv",
]
