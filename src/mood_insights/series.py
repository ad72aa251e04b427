"""Per-weekday chart series for a single week bucket."""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Optional, Tuple

from .calendar_buckets import weekday_index
from .entries import JournalEntry, energy_scale

# Slot order is Sunday..Saturday (index 0..6)
DAY_NAMES = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")


def round_one(value: float) -> float:
    """Round to one decimal, halves away from zero (2.25 -> 2.3)."""
    return float(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class DaySeriesPoint:
    """Average mood and energy for one weekday of a week.

    avg_mood and avg_energy are None when there are no entries for the day;
    charts should skip the point rather than plot zero.
    """

    weekday: int
    day: str
    avg_mood: Optional[float]
    avg_energy: Optional[float]
    sample_count: int

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "weekday": self.weekday,
            "day": self.day,
            "avgMood": self.avg_mood,
            "avgEnergy": self.avg_energy,
            "sampleCount": self.sample_count,
        }


def build_week_series(week_entries: Iterable[JournalEntry]) -> Tuple[DaySeriesPoint, ...]:
    """
    Build the 7-point Sunday..Saturday series for a week's entries.

    Args:
        week_entries: Entries falling in one week bucket

    Returns:
        Tuple of exactly seven DaySeriesPoint
    """
    mood_sums = [0] * 7
    energy_sums = [0] * 7
    counts = [0] * 7

    for entry in week_entries:
        slot = weekday_index(entry.created_at)
        mood_sums[slot] += entry.mood
        energy_sums[slot] += energy_scale(entry.energy_impact)
        counts[slot] += 1

    return tuple(
        DaySeriesPoint(
            weekday=i,
            day=DAY_NAMES[i],
            avg_mood=round_one(mood_sums[i] / counts[i]) if counts[i] else None,
            avg_energy=round_one(energy_sums[i] / counts[i]) if counts[i] else None,
            sample_count=counts[i],
        )
        for i in range(7)
    )
