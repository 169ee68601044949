"""
Date-range selection and the two-month calendar model.

Selection follows a click protocol: the first click sets the start, a click
on or after the start closes the range, and any click on a closed range
starts over. Ranges only grow forward in time from the first click.
"""

import calendar
from dataclasses import dataclass, replace
from datetime import date
from enum import Enum
from typing import Mapping, Optional

from . import config
from .availability import AvailabilityEntry, format_price

NO_PRICE = "—"


# =============================================================================
# SELECTION
# =============================================================================

@dataclass(frozen=True)
class Selection:
    """Visitor's in-progress date range, as ISO date strings."""

    start: Optional[str] = None
    end: Optional[str] = None

    def __post_init__(self):
        if self.end and not self.start:
            raise ValueError("Selection end requires a start date")
        if self.start and self.end and self.end < self.start:
            raise ValueError(f"Selection end {self.end} is before start {self.start}")

    @property
    def is_empty(self) -> bool:
        return not self.start

    @property
    def is_range(self) -> bool:
        return bool(self.start and self.end)

    def click(self, day: str) -> "Selection":
        """Apply a day click and return the new selection."""
        if self.start and not self.end and day >= self.start:
            return Selection(start=self.start, end=day)
        return Selection(start=day)

    def contains(self, day: str) -> bool:
        """True when day lies strictly between start and end."""
        return self.is_range and self.start < day < self.end


# =============================================================================
# CALENDAR VIEW
# =============================================================================

# Base-month year bounds; the second displayed month must still be a valid date
MIN_YEAR = 1
MAX_YEAR = 9998


@dataclass(frozen=True)
class CalendarView:
    """Base month of the two-month calendar."""

    year: int
    month: int

    def __post_init__(self):
        if not 1 <= self.month <= 12:
            raise ValueError(f"Invalid month: {self.month}")
        if not MIN_YEAR <= self.year <= MAX_YEAR:
            raise ValueError(f"Year out of range: {self.year}")

    @classmethod
    def today(cls, today: Optional[date] = None) -> "CalendarView":
        today = today or date.today()
        return cls._from_index(today.year * 12 + today.month - 1)

    @classmethod
    def focus(cls, day: str) -> "CalendarView":
        """View whose base month contains the given ISO date."""
        parsed = date.fromisoformat(day)
        return cls._from_index(parsed.year * 12 + parsed.month - 1)

    def _index(self) -> int:
        return self.year * 12 + (self.month - 1)

    @classmethod
    def _from_index(cls, index: int) -> "CalendarView":
        """View for a month index, clamped to the supported years."""
        index = min(max(index, MIN_YEAR * 12), MAX_YEAR * 12 + 11)
        return cls(index // 12, index % 12 + 1)

    def shift(self, months: int) -> "CalendarView":
        return self._from_index(self._index() + months)

    def with_month(self, month: int) -> "CalendarView":
        return replace(self, month=month)

    def with_year(self, year: int) -> "CalendarView":
        return replace(self, year=year)

    def months(self, count: int = 2) -> list[tuple[int, int]]:
        """(year, month) pairs for the displayed months."""
        start = self._index()
        return [(index // 12, index % 12 + 1) for index in range(start, start + count)]

    def follow_end(self, day: str) -> "CalendarView":
        """
        Keep a newly chosen end date visible.

        If the end falls more than one month past the base month, the base
        advances so the end's month becomes the second displayed month.
        """
        parsed = date.fromisoformat(day)
        end_index = parsed.year * 12 + parsed.month - 1
        if end_index > self._index() + 1:
            return self._from_index(end_index - 1)
        return self


def apply_day_click(selection: Selection, view: CalendarView,
                    day: str) -> tuple[Selection, CalendarView]:
    """Apply a day click to both the selection and the displayed months."""
    updated = selection.click(day)
    if updated.start != selection.start:
        view = CalendarView.focus(updated.start)
    if updated.end and updated.end != selection.end:
        view = view.follow_end(updated.end)
    return updated, view


# =============================================================================
# MONTH GRID
# =============================================================================

class DayState(Enum):
    SELECTED = "selected"
    IN_RANGE = "in_range"
    AVAILABLE = "available"
    UNAVAILABLE = "unavailable"


@dataclass(frozen=True)
class DayCell:
    day: date
    entry: Optional[AvailabilityEntry]
    state: DayState

    @property
    def iso(self) -> str:
        return self.day.isoformat()


def build_month_grid(year: int, month: int, firstweekday: int = 6) -> list[list[Optional[date]]]:
    """
    Build a month grid structure for calendar rendering.
    Returns a list of weeks, each week is a list of 7 dates (or None for empty cells).
    Week starts on Sunday by default.
    """
    cal = calendar.Calendar(firstweekday=firstweekday)
    return [
        [date(year, month, d) if d else None for d in week]
        for week in cal.monthdayscalendar(year, month)
    ]


def day_state(day: str, selection: Selection, entry: Optional[AvailabilityEntry]) -> DayState:
    if day in (selection.start, selection.end):
        return DayState.SELECTED
    if selection.contains(day):
        return DayState.IN_RANGE
    if entry is not None and entry.available:
        return DayState.AVAILABLE
    return DayState.UNAVAILABLE


def price_label(entry: Optional[AvailabilityEntry], currency: str = config.CURRENCY) -> str:
    if entry is None or entry.price is None:
        return NO_PRICE
    return f"{format_price(entry.price)}{currency}"


def month_cells(year: int, month: int, unit_days: Mapping[str, AvailabilityEntry],
                selection: Selection, firstweekday: int = 6) -> list[list[Optional[DayCell]]]:
    """Month grid with availability and selection state resolved per day."""
    weeks = []
    for week in build_month_grid(year, month, firstweekday):
        cells = []
        for day in week:
            if day is None:
                cells.append(None)
                continue
            entry = unit_days.get(day.isoformat())
            cells.append(DayCell(day=day, entry=entry,
                                 state=day_state(day.isoformat(), selection, entry)))
        weeks.append(cells)
    return weeks
