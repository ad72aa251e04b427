"""
Recent-Window Summarizer.

Produces the dashboard numbers: entries from the trailing window, their
energizer/drainer rankings and the window's average mood.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Optional, Sequence, Tuple

from .entries import JournalEntry
from .impact import ActivityStat, compute_activity_stats, rank_drainers, rank_energizers
from .series import round_one

logger = logging.getLogger(__name__)

DEFAULT_WINDOW_DAYS = 7


@dataclass(frozen=True)
class RecentSummary:
    """Statistics for the trailing window."""

    recent_entries: Tuple[JournalEntry, ...] = field(default_factory=tuple)
    energizers: Tuple[ActivityStat, ...] = field(default_factory=tuple)
    drainers: Tuple[ActivityStat, ...] = field(default_factory=tuple)
    average_mood: float = 0.0  # 0.0 when the window is empty

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "recentEntries": [e.to_dict() for e in self.recent_entries],
            "energizers": [s.to_dict() for s in self.energizers],
            "drainers": [s.to_dict() for s in self.drainers],
            "averageMood": self.average_mood,
        }


def _default_now(entries: Sequence[JournalEntry]) -> datetime:
    """Current time, timezone-aware if the entries are."""
    if entries and entries[0].created_at.tzinfo is not None:
        return datetime.now(entries[0].created_at.tzinfo)
    return datetime.now()


def summarize_recent(
    entries: Sequence[JournalEntry],
    now: Optional[datetime] = None,
    window_days: int = DEFAULT_WINDOW_DAYS,
    include_future: bool = False,
) -> RecentSummary:
    """
    Summarize the entries in the trailing window.

    Args:
        entries: All journal entries
        now: Reference time (defaults to the current time)
        window_days: Window length in days; the lower bound is inclusive
        include_future: Keep entries timestamped after now

    Returns:
        RecentSummary with unbounded energizer and drainer rankings
    """
    if now is None:
        now = _default_now(entries)
    cutoff = now - timedelta(days=window_days)

    recent = tuple(
        e for e in entries
        if e.created_at >= cutoff and (include_future or e.created_at <= now)
    )

    stats = compute_activity_stats(recent)
    average = round_one(sum(e.mood for e in recent) / len(recent)) if recent else 0.0

    logger.debug(
        f"[RECENT] {len(recent)}/{len(entries)} entries since {cutoff.isoformat()}, "
        f"avg_mood={average}"
    )

    return RecentSummary(
        recent_entries=recent,
        energizers=tuple(rank_energizers(stats)),
        drainers=tuple(rank_drainers(stats)),
        average_mood=average,
    )
