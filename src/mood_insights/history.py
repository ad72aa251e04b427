"""
Insight Orchestrator.

Builds the history view: months newest first, each with its top activity
rankings and its weeks (newest first), each week carrying a 7-day chart
series.
"""

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Callable, Iterable, List, Optional, Tuple

from .calendar_buckets import MonthKey, WeekKey, bucket_entries
from .entries import JournalEntry
from .impact import ActivityRanking, rank_activities
from .labels import translator
from .series import DaySeriesPoint, build_week_series

logger = logging.getLogger(__name__)

DEFAULT_TOP_LIMIT = 3


@dataclass(frozen=True)
class WeekBucket:
    """One ISO week of a month with its chart series."""

    week_key: WeekKey
    label: str
    date_range: str
    start: date
    end: date
    entries: Tuple[JournalEntry, ...] = field(default_factory=tuple)
    series: Tuple[DaySeriesPoint, ...] = field(default_factory=tuple)

    @property
    def week_number(self) -> int:
        return self.week_key.week

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "weekKey": str(self.week_key),
            "weekNumber": self.week_number,
            "label": self.label,
            "dateRange": self.date_range,
            "start": self.start.isoformat(),
            "end": self.end.isoformat(),
            "entries": [e.to_dict() for e in self.entries],
            "series": [p.to_dict() for p in self.series],
        }


@dataclass(frozen=True)
class MonthBucket:
    """One calendar month of the history view."""

    month_key: MonthKey
    label: str
    entries: Tuple[JournalEntry, ...] = field(default_factory=tuple)
    activity_stats: ActivityRanking = field(default_factory=ActivityRanking)
    weeks: Tuple[WeekBucket, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "monthKey": str(self.month_key),
            "label": self.label,
            "entries": [e.to_dict() for e in self.entries],
            "activityStats": self.activity_stats.to_dict(),
            "weeks": [w.to_dict() for w in self.weeks],
        }


def build_history(
    entries: Iterable[JournalEntry],
    language: Optional[str] = None,
    translate: Optional[Callable[[str], str]] = None,
    top_limit: int = DEFAULT_TOP_LIMIT,
) -> List[MonthBucket]:
    """
    Build the month -> week history structure.

    Args:
        entries: Journal entries in any order (not modified)
        language: Language tag for month labels and date ranges
        translate: Key -> display string lookup for the week label and
            activity names; defaults to the built-in UI strings
        top_limit: Number of energizers and drainers kept per month

    Returns:
        MonthBucket list, newest month first; empty for no entries
    """
    builtin = translator(language)
    if translate is None:
        translate = builtin

    ordered = sorted(entries, key=lambda e: e.created_at, reverse=True)
    if not ordered:
        return []

    week_word = translate("week") or builtin("week")
    history = []

    for month in bucket_entries(ordered, language).values():
        weeks = [
            WeekBucket(
                week_key=week.key,
                label=f"{week_word} {week.key.week}",
                date_range=week.date_range,
                start=week.start,
                end=week.end,
                entries=week.entries,
                series=build_week_series(week.entries),
            )
            for week in month.weeks.values()
        ]
        weeks.sort(key=lambda w: w.week_key, reverse=True)

        history.append(
            MonthBucket(
                month_key=month.key,
                label=month.label,
                entries=month.entries,
                activity_stats=rank_activities(month.entries, limit=top_limit, translate=translate),
                weeks=tuple(weeks),
            )
        )

    logger.debug(
        f"[HISTORY] Built {len(history)} months / "
        f"{sum(len(m.weeks) for m in history)} weeks from {len(ordered)} entries"
    )
    return history
