"""
Journal entry model shared by the insight engine.

Entries are immutable once created. The engine trusts the values it is
given: range checks on mood and energy happen at ingestion (see store.py).
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Tuple


class EnergyImpact(str, Enum):
    """How the logged activities affected energy."""

    DRAINING = "draining"
    NEUTRAL = "neutral"
    ENERGIZING = "energizing"


def impact_value(energy) -> int:
    """Per-entry contribution to an activity's net energy (+1/0/-1)."""
    if energy == EnergyImpact.ENERGIZING:
        return 1
    if energy == EnergyImpact.DRAINING:
        return -1
    return 0


def energy_scale(energy) -> int:
    """Map energy impact onto the 1-5 mood scale for charting."""
    if energy == EnergyImpact.DRAINING:
        return 1
    if energy == EnergyImpact.ENERGIZING:
        return 5
    return 3


@dataclass(frozen=True)
class JournalEntry:
    """One journaled mood/energy observation."""

    id: str
    mood: int  # 1 = worst, 5 = best
    energy_impact: EnergyImpact
    created_at: datetime
    activities: Tuple[str, ...] = field(default_factory=tuple)
    note: str = ""

    def to_dict(self) -> dict:
        """Convert to the flat persistence record."""
        return {
            "id": self.id,
            "mood": self.mood,
            "energy": getattr(self.energy_impact, "value", self.energy_impact),
            "activities": list(self.activities),
            "note": self.note,
            "createdAt": self.created_at.isoformat(),
        }
