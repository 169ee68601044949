"""
Availability index.

Turns raw feed records into {unit_key: {'YYYY-MM-DD': AvailabilityEntry}}
and answers range questions (total price, all days available) against it.
The index is rebuilt from scratch on every fetch; nothing here keeps state.
"""

import logging
import math
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable, Mapping, Optional, Sequence

from .catalog import UnitDefinition

logger = logging.getLogger(__name__)

# Column aliases, tried in priority order
DATE_FIELDS = ("date", "Date")
UNIT_FIELDS = ("apartment", "Apartment", "apartmentName")
PRICE_FIELDS = ("price", "Price")
AVAILABLE_FIELDS = ("available", "Available")

TRUTHY = {"true", "yes", "1"}


@dataclass(frozen=True)
class AvailabilityEntry:
    price: Optional[float]
    available: bool


AvailabilityIndex = dict[str, dict[str, AvailabilityEntry]]


# =============================================================================
# FIELD PARSING
# =============================================================================

def resolve_field(record: Mapping[str, str], candidates: Sequence[str]) -> Optional[str]:
    """
    Return the value of the first matching column.

    Exact column names win over case-insensitive matches; within each pass the
    candidates are tried in order.
    """
    for name in candidates:
        if name in record:
            return record[name]

    folded = {}
    for column, value in record.items():
        folded.setdefault(str(column).lower(), value)
    for name in candidates:
        if name.lower() in folded:
            return folded[name.lower()]
    return None


def parse_price(raw) -> Optional[float]:
    """Parse a price cell; empty or non-numeric values mean no price."""
    if raw is None:
        return None
    text = str(raw).strip()
    if not text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def parse_available(raw) -> bool:
    if raw is None:
        return False
    return str(raw).strip().lower() in TRUTHY


def format_price(value: float) -> str:
    """Render a price without a trailing .0 for whole amounts."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.2f}".rstrip("0").rstrip(".")


# =============================================================================
# INDEX BUILDING
# =============================================================================

def build_unit_lookup(units: Iterable[UnitDefinition]) -> dict[str, str]:
    """Map unit keys and ids (as written and lowercased) to the canonical key."""
    lookup: dict[str, str] = {}
    for unit in units:
        for name in (unit.key, unit.id):
            if not name:
                continue
            lookup[name] = unit.key
            lookup[name.lower()] = unit.key
    return lookup


def resolve_unit(raw: Optional[str], lookup: Mapping[str, str]) -> Optional[str]:
    if raw is None:
        return None
    name = str(raw).strip()
    if not name:
        return None
    return lookup.get(name) or lookup.get(name.lower())


def build_availability(units: Sequence[UnitDefinition],
                       records: Iterable[Mapping[str, str]]) -> AvailabilityIndex:
    """
    Build the per-unit, per-date availability index.

    Rows whose unit cannot be resolved (or that carry no date) are skipped.
    When several rows share a (unit, date) pair the last one wins.
    """
    lookup = build_unit_lookup(units)
    index: AvailabilityIndex = {unit.key: {} for unit in units}
    skipped = 0

    for record in records:
        unit_key = resolve_unit(resolve_field(record, UNIT_FIELDS), lookup)
        day = (resolve_field(record, DATE_FIELDS) or "").strip()
        if not unit_key or not day:
            skipped += 1
            continue
        index[unit_key][day] = AvailabilityEntry(
            price=parse_price(resolve_field(record, PRICE_FIELDS)),
            available=parse_available(resolve_field(record, AVAILABLE_FIELDS)),
        )

    if skipped:
        logger.debug("Skipped %d feed rows without a known unit or date", skipped)
    return index


# =============================================================================
# RANGE QUERIES
# =============================================================================

def date_range(start: str, end: str) -> list[str]:
    """Every ISO date from start to end inclusive (empty when end < start)."""
    first = date.fromisoformat(start)
    last = date.fromisoformat(end)
    days = []
    current = first
    while current <= last:
        days.append(current.isoformat())
        current += timedelta(days=1)
    return days


def calc_total(index: Mapping[str, Mapping[str, AvailabilityEntry]], unit_key: str,
               start: Optional[str], end: Optional[str]) -> Optional[float]:
    """
    Sum the nightly prices over the range.

    Returns None when either endpoint is missing or any day has no price.
    """
    if not start or not end:
        return None
    unit_days = index.get(unit_key, {})
    total = 0.0
    for day in date_range(start, end):
        entry = unit_days.get(day)
        if entry is None or entry.price is None:
            return None
        total += entry.price
    return total


def all_days_available(index: Mapping[str, Mapping[str, AvailabilityEntry]], unit_key: str,
                       start: Optional[str], end: Optional[str]) -> bool:
    if not start or not end:
        return False
    unit_days = index.get(unit_key, {})
    for day in date_range(start, end):
        entry = unit_days.get(day)
        if entry is None or not entry.available:
            return False
    return True
