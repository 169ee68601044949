"""
Application state for one visitor session.

The top-level view owns a single AppState and hands it to every section;
nested views never reach for globals. All transitions live here so they can
be exercised without Streamlit.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from . import config
from .booking_calendar import MAX_YEAR, MIN_YEAR, CalendarView, Selection, apply_day_click
from .catalog import APARTMENTS, apartment_by_key
from .i18n import LANGS

TABS = ("home", "activities", "contact", "howto", "apartment")


def initial_photo_index() -> dict[str, int]:
    return {unit.key: 0 for unit in APARTMENTS}


@dataclass
class Lightbox:
    images: list[str]
    index: int = 0

    @property
    def current(self) -> Optional[str]:
        if not self.images:
            return None
        return self.images[self.index]


@dataclass
class AppState:
    lang: str = config.DEFAULT_LANG
    tab: str = "home"
    selected_unit: Optional[str] = None
    selection: Selection = field(default_factory=Selection)
    calendar: CalendarView = field(default_factory=CalendarView.today)
    guest_name: str = ""
    guests: int = config.DEFAULT_GUESTS
    photo_index: dict[str, int] = field(default_factory=initial_photo_index)
    lightbox: Optional[Lightbox] = None

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def toggle_lang(self) -> None:
        self.lang = LANGS[(LANGS.index(self.lang) + 1) % len(LANGS)]

    def set_lang(self, lang: str) -> None:
        if lang not in LANGS:
            raise ValueError(f"Unsupported language: {lang!r}")
        self.lang = lang

    def go(self, tab: str) -> None:
        if tab not in TABS:
            raise ValueError(f"Unknown tab: {tab!r}")
        if tab == "apartment" and self.selected_unit is None:
            raise ValueError("No unit selected")
        self.tab = tab

    def open_unit(self, key: str, today: Optional[date] = None) -> None:
        """Show a unit's detail view with a fresh selection."""
        if apartment_by_key(key) is None:
            raise ValueError(f"Unknown unit: {key!r}")
        self.selected_unit = key
        self.selection = Selection()
        self.calendar = CalendarView.today(today)
        self.tab = "apartment"

    def close_unit(self) -> None:
        self.selected_unit = None
        self.selection = Selection()
        self.tab = "home"

    # -------------------------------------------------------------------------
    # Calendar
    # -------------------------------------------------------------------------

    def click_day(self, day: str) -> None:
        self.selection, self.calendar = apply_day_click(self.selection, self.calendar, day)

    def shift_calendar(self, months: int) -> None:
        self.calendar = self.calendar.shift(months)

    def set_calendar_month(self, month: int) -> None:
        self.calendar = self.calendar.with_month(month)

    def set_calendar_year(self, year: int) -> None:
        if MIN_YEAR <= year <= MAX_YEAR:
            self.calendar = self.calendar.with_year(year)

    def reset_booking(self) -> None:
        self.selection = Selection()
        self.guest_name = ""
        self.guests = config.DEFAULT_GUESTS

    # -------------------------------------------------------------------------
    # Photos
    # -------------------------------------------------------------------------

    def current_photo(self, key: str) -> int:
        return self.photo_index.get(key, 0)

    def _step_photo(self, key: str, delta: int) -> None:
        unit = apartment_by_key(key)
        count = max(1, unit.photo_count if unit else 0)
        self.photo_index[key] = (self.current_photo(key) + delta) % count

    def next_photo(self, key: str) -> None:
        self._step_photo(key, 1)

    def prev_photo(self, key: str) -> None:
        self._step_photo(key, -1)

    def open_lightbox(self, images: list[str], index: int = 0) -> None:
        self.lightbox = Lightbox(images=list(images), index=index or 0)

    def step_lightbox(self, delta: int) -> None:
        if self.lightbox and self.lightbox.images:
            count = len(self.lightbox.images)
            self.lightbox.index = (self.lightbox.index + delta) % count

    def close_lightbox(self) -> None:
        self.lightbox = None
