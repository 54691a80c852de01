"""
Approximate movable-feast dates.

Movable religious holidays follow lunar or ecclesiastical calendars. Rather
than computing them, the planner reads the day of month from a per-year
lookup table. The tables cover FIRST_TABLE_YEAR..LAST_TABLE_YEAR; any other
year uses the feast's ``fallback_day`` in the same month. Both are
approximations, not astronomically correct dates.

Extend a table by adding ``year: day`` pairs.
"""

from dataclasses import dataclass, field

FIRST_TABLE_YEAR = 2024
LAST_TABLE_YEAR = 2030


@dataclass(frozen=True)
class MovableFeast:
    """A movable feast: month, per-year day lookup and fallback day."""

    name: str
    month: int
    fallback_day: int
    days_by_year: dict[int, int] = field(default_factory=dict)
    offset_days: int = 0  # shift applied after lookup (e.g. Good Friday = Easter - 2)

    def day_for_year(self, year: int) -> int:
        return self.days_by_year.get(year, self.fallback_day)

    def covers(self, year: int) -> bool:
        return year in self.days_by_year


HOLI = MovableFeast(
    name="Holi",
    month=3,
    fallback_day=14,
    days_by_year={2024: 25, 2025: 14, 2026: 3, 2027: 22, 2028: 11, 2029: 1, 2030: 20},
)

# Easter Sunday in March; Good Friday is two days earlier
EASTER = MovableFeast(
    name="Good Friday",
    month=3,
    fallback_day=20,
    days_by_year={2024: 31, 2025: 20, 2026: 5, 2027: 28, 2028: 16, 2029: 1, 2030: 21},
    offset_days=-2,
)

EID_AL_FITR = MovableFeast(
    name="Eid al-Fitr",
    month=4,
    fallback_day=10,
    days_by_year={2024: 10, 2025: 30, 2026: 20, 2027: 9, 2028: 28, 2029: 17, 2030: 6},
)

JANMASHTAMI = MovableFeast(
    name="Janmashtami",
    month=8,
    fallback_day=15,
    days_by_year={2024: 26, 2025: 15, 2026: 4, 2027: 24, 2028: 12, 2029: 1, 2030: 20},
)

GANESH_CHATURTHI = MovableFeast(
    name="Ganesh Chaturthi",
    month=9,
    fallback_day=7,
    days_by_year={2024: 7, 2025: 26, 2026: 15, 2027: 4, 2028: 23, 2029: 12, 2030: 1},
)

DUSSEHRA = MovableFeast(
    name="Dussehra",
    month=10,
    fallback_day=12,
    days_by_year={2024: 12, 2025: 2, 2026: 21, 2027: 10, 2028: 28, 2029: 17, 2030: 6},
)

DIWALI = MovableFeast(
    name="Diwali",
    month=11,
    fallback_day=1,
    days_by_year={2024: 1, 2025: 20, 2026: 8, 2027: 28, 2028: 17, 2029: 5, 2030: 25},
)

GURU_NANAK_JAYANTI = MovableFeast(
    name="Guru Nanak Jayanti",
    month=11,
    fallback_day=15,
    days_by_year={2024: 15, 2025: 5, 2026: 24, 2027: 13, 2028: 2, 2029: 21, 2030: 10},
)

# Makar Sankranti is solar and lands on January 14 in practice
MAKAR_SANKRANTI = MovableFeast(name="Makar Sankranti/Pongal", month=1, fallback_day=14)

INDIA_FEASTS: tuple[MovableFeast, ...] = (
    MAKAR_SANKRANTI,
    HOLI,
    EASTER,
    EID_AL_FITR,
    JANMASHTAMI,
    GANESH_CHATURTHI,
    DUSSEHRA,
    DIWALI,
    GURU_NANAK_JAYANTI,
)
