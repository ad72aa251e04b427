"""
Mood Insights.

Turns mood/energy journal entries into dashboard statistics, month/week
history buckets with daily chart series, and ranked activity impact.
"""

from .entries import EnergyImpact, JournalEntry
from .tags import PresetTag, normalize_tag, normalize_activities
from .impact import (
    ActivityStat,
    ActivityRanking,
    compute_activity_stats,
    rank_energizers,
    rank_drainers,
    rank_activities,
)
from .recent import RecentSummary, summarize_recent
from .calendar_buckets import (
    MonthKey,
    WeekKey,
    bucket_entries,
    iso_week_key,
    week_bounds,
    weekday_index,
)
from .series import DaySeriesPoint, build_week_series
from .history import MonthBucket, WeekBucket, build_history
from .store import EntryRecord, JournalStore

__all__ = [
    "EnergyImpact",
    "JournalEntry",
    "PresetTag",
    "normalize_tag",
    "normalize_activities",
    "ActivityStat",
    "ActivityRanking",
    "compute_activity_stats",
    "rank_energizers",
    "rank_drainers",
    "rank_activities",
    "RecentSummary",
    "summarize_recent",
    "MonthKey",
    "WeekKey",
    "bucket_entries",
    "iso_week_key",
    "week_bounds",
    "weekday_index",
    "DaySeriesPoint",
    "build_week_series",
    "MonthBucket",
    "WeekBucket",
    "build_history",
    "EntryRecord",
    "JournalStore",
]
