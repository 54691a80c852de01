"""
Holiday provider for availability analysis.

Produces the holidays deducted from working time for a year and region:
- US fixed and floating national holidays
- India national holidays and movable religious feasts (table lookups)
- Company observances shared by every region (wellness days, year-end slowdown)
"""

from datetime import date, timedelta
from typing import Callable

import structlog

from capacity_planner.config.movable_feasts import (
    DIWALI,
    FIRST_TABLE_YEAR,
    INDIA_FEASTS,
    LAST_TABLE_YEAR,
    MovableFeast,
)
from capacity_planner.domain.enums import HolidayKind
from capacity_planner.domain.models import HolidayEntry
from capacity_planner.utils.calendar import last_weekday_of_month, nth_weekday_of_month
from capacity_planner.utils.time_conversion import to_date, years_in_range

logger = structlog.get_logger()

MONDAY = 0
THURSDAY = 3

UNIVERSAL_REGION = "*"


# (name, month, day)
US_FIXED = (
    ("New Year's Day", 1, 1),
    ("Independence Day", 7, 4),
    ("Veterans Day", 11, 11),
    ("Christmas Day", 12, 25),
)

# (name, rule(year) -> date)
US_FLOATING: tuple[tuple[str, Callable[[int], date]], ...] = (
    ("Martin Luther King Jr. Day", lambda y: nth_weekday_of_month(y, 1, MONDAY, 3)),
    ("Presidents' Day", lambda y: nth_weekday_of_month(y, 2, MONDAY, 3)),
    ("Memorial Day", lambda y: last_weekday_of_month(y, 5, MONDAY)),
    ("Labor Day", lambda y: nth_weekday_of_month(y, 9, MONDAY, 1)),
    ("Columbus Day", lambda y: nth_weekday_of_month(y, 10, MONDAY, 2)),
    ("Thanksgiving Day", lambda y: nth_weekday_of_month(y, 11, THURSDAY, 4)),
)

INDIA_FIXED = (
    ("Republic Day", 1, 26),
    ("Independence Day", 8, 15),
)

WELLNESS_DAYS = (
    ("Wellness Day - March", 3, 15),
    ("Wellness Day - June", 6, 15),
    ("Wellness Day - September", 9, 15),
)

YEAR_END_OBSERVANCES = (
    ("Year-end Slowdown Start", 12, 20),
    ("Christmas Eve", 12, 24),
    ("Boxing Day", 12, 26),
    ("New Year's Eve / Year-end Slowdown End", 12, 31),
)


def _feast_date(feast: MovableFeast, year: int) -> date:
    if not feast.covers(year) and feast.days_by_year:
        logger.debug(
            "movable_feast_fallback",
            feast=feast.name,
            year=year,
            table_years=f"{FIRST_TABLE_YEAR}-{LAST_TABLE_YEAR}",
            fallback_day=feast.fallback_day,
        )
    base = date(year, feast.month, feast.day_for_year(year))
    return base + timedelta(days=feast.offset_days)


def _us_holidays(year: int) -> list[HolidayEntry]:
    entries = [
        HolidayEntry(name=name, date=date(year, month, day), kind=HolidayKind.FIXED_NATIONAL, region="US")
        for name, month, day in US_FIXED
    ]
    entries.extend(
        HolidayEntry(name=name, date=rule(year), kind=HolidayKind.FIXED_NATIONAL, region="US")
        for name, rule in US_FLOATING
    )
    return entries


def _india_holidays(year: int) -> list[HolidayEntry]:
    entries = [
        HolidayEntry(name=name, date=date(year, month, day), kind=HolidayKind.FIXED_NATIONAL, region="IN")
        for name, month, day in INDIA_FIXED
    ]
    entries.extend(
        HolidayEntry(
            name=feast.name,
            date=_feast_date(feast, year),
            kind=HolidayKind.MOVABLE_RELIGIOUS,
            region="IN",
        )
        for feast in INDIA_FEASTS
    )

    diwali = _feast_date(DIWALI, year)
    entries.append(
        HolidayEntry(
            name="Bhai Dooj",
            date=diwali + timedelta(days=2),
            kind=HolidayKind.MOVABLE_RELIGIOUS,
            region="IN",
        )
    )
    entries.extend(
        [
            HolidayEntry(
                name="Diwali Eve",
                date=diwali - timedelta(days=1),
                kind=HolidayKind.COMPANY_OBSERVANCE,
                region="IN",
            ),
            HolidayEntry(
                name="Diwali Day 2",
                date=diwali + timedelta(days=1),
                kind=HolidayKind.COMPANY_OBSERVANCE,
                region="IN",
            ),
        ]
    )
    return entries


def _company_observances(year: int) -> list[HolidayEntry]:
    return [
        HolidayEntry(
            name=name,
            date=date(year, month, day),
            kind=HolidayKind.COMPANY_OBSERVANCE,
            region=UNIVERSAL_REGION,
        )
        for name, month, day in WELLNESS_DAYS + YEAR_END_OBSERVANCES
    ]


REGION_TABLES: dict[str, Callable[[int], list[HolidayEntry]]] = {
    "US": _us_holidays,
    "IN": _india_holidays,
}


def supported_regions() -> list[str]:
    """Regions with a national holiday table."""
    return list(REGION_TABLES)


def holidays_for_year(year: int, region: str = "US") -> list[HolidayEntry]:
    """
    Get all holidays for a year and region.

    Region matching is case-insensitive. An unknown region is not an error:
    only the company observances shared by every region are returned.

    Each date appears at most once; when two entries share a date the
    regional one wins over the company observance.

    Args:
        year: Calendar year
        region: Region code (e.g. "US", "IN")

    Returns:
        Holiday entries sorted by date
    """
    table = REGION_TABLES.get(region.upper())
    entries = table(year) if table else []
    entries.extend(_company_observances(year))

    by_date: dict[date, HolidayEntry] = {}
    for entry in entries:
        by_date.setdefault(entry.date, entry)

    return sorted(by_date.values(), key=lambda e: e.date)


def holidays_in_range(start: date, end: date, region: str = "US") -> list[HolidayEntry]:
    """
    Get holidays falling inside [start, end], across every year the range touches.

    Args:
        start: First day of the range
        end: Last day of the range
        region: Region code

    Returns:
        Holiday entries sorted by date
    """
    start, end = to_date(start), to_date(end)
    return [
        entry
        for year in years_in_range(start, end)
        for entry in holidays_for_year(year, region)
        if start <= entry.date <= end
    ]


def count_holidays_in_range(start: date, end: date, region: str = "US") -> int:
    """Count holidays inside [start, end]. Weekend holidays are counted too."""
    return len(holidays_in_range(start, end, region))


class HolidayProvider:
    """
    Holiday lookups with a per-year cache.

    Results are pure functions of (year, region); the cache only avoids
    rebuilding tables when the analyzer asks for the same year repeatedly.
    """

    def __init__(self, region: str = "US"):
        """
        Initialize the provider.

        Args:
            region: Default region for lookups
        """
        self.region = region
        self._cache: dict[tuple[int, str], list[HolidayEntry]] = {}

    def for_year(self, year: int, region: str | None = None) -> list[HolidayEntry]:
        """Holidays for a year (cached)."""
        key = (year, (region or self.region).upper())
        if key not in self._cache:
            self._cache[key] = holidays_for_year(year, key[1])
        return list(self._cache[key])

    def in_range(self, start: date, end: date, region: str | None = None) -> list[HolidayEntry]:
        """Holidays inside [start, end]."""
        start, end = to_date(start), to_date(end)
        return [
            entry
            for year in years_in_range(start, end)
            for entry in self.for_year(year, region)
            if start <= entry.date <= end
        ]

    def count_in_range(self, start: date, end: date, region: str | None = None) -> int:
        """Number of holidays inside [start, end]."""
        return len(self.in_range(start, end, region))
