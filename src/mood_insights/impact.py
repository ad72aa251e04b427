"""
Activity Impact Calculator.

Aggregates journal entries per activity tag: how often the tag appears, the
average mood when it does, and its net energy (+1 per energizing entry, -1
per draining entry). Ranking into energizers and drainers is a separate step
so callers can choose whether to truncate.
"""

from dataclasses import dataclass, field, replace
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from .entries import JournalEntry, impact_value


@dataclass(frozen=True)
class ActivityStat:
    """Aggregate impact of one activity tag."""

    name: str
    avg_mood: float
    net_energy: int
    count: int
    label: Optional[str] = None  # Display string, defaults to name

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "name": self.name,
            "label": self.label or self.name,
            "avgMood": self.avg_mood,
            "netEnergy": self.net_energy,
            "count": self.count,
        }


@dataclass(frozen=True)
class ActivityRanking:
    """Ranked energizers and drainers for a set of entries."""

    energizers: Tuple[ActivityStat, ...] = field(default_factory=tuple)
    drainers: Tuple[ActivityStat, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "energizers": [s.to_dict() for s in self.energizers],
            "drainers": [s.to_dict() for s in self.drainers],
        }


def compute_activity_stats(entries: Iterable[JournalEntry]) -> List[ActivityStat]:
    """
    Compute one ActivityStat per distinct tag.

    Stats are returned in the order each tag is first encountered, which is
    what makes ranking ties deterministic.

    Args:
        entries: Journal entries in any order

    Returns:
        List of ActivityStat, empty for empty input
    """
    # tag -> [count, mood_sum, energy_score]
    totals: Dict[str, List[int]] = {}

    for entry in entries:
        for activity in entry.activities:
            acc = totals.setdefault(activity, [0, 0, 0])
            acc[0] += 1
            acc[1] += entry.mood
            acc[2] += impact_value(entry.energy_impact)

    return [
        ActivityStat(name=name, avg_mood=mood_sum / count, net_energy=score, count=count)
        for name, (count, mood_sum, score) in totals.items()
    ]


def rank_energizers(stats: Iterable[ActivityStat], limit: Optional[int] = None) -> List[ActivityStat]:
    """Activities with positive net energy, strongest first. Ties keep input order."""
    ranked = sorted((s for s in stats if s.net_energy > 0), key=lambda s: s.net_energy, reverse=True)
    return ranked if limit is None else ranked[:limit]


def rank_drainers(stats: Iterable[ActivityStat], limit: Optional[int] = None) -> List[ActivityStat]:
    """Activities with negative net energy, most draining first. Ties keep input order."""
    ranked = sorted((s for s in stats if s.net_energy < 0), key=lambda s: s.net_energy)
    return ranked if limit is None else ranked[:limit]


def rank_activities(
    entries: Iterable[JournalEntry],
    limit: Optional[int] = None,
    translate: Optional[Callable[[str], str]] = None,
) -> ActivityRanking:
    """
    Compute and rank activity stats in one step.

    Args:
        entries: Journal entries to aggregate
        limit: Keep at most this many energizers and drainers (None = all)
        translate: Optional tag -> display string lookup used for labels

    Returns:
        ActivityRanking with energizers and drainers
    """
    stats = compute_activity_stats(entries)
    if translate is not None:
        stats = [replace(s, label=translate(s.name) or s.name) for s in stats]

    return ActivityRanking(
        energizers=tuple(rank_energizers(stats, limit)),
        drainers=tuple(rank_drainers(stats, limit)),
    )
