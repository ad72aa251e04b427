"""
Pytest fixtures for Mood Insights tests.
"""
import sys
import itertools
import pytest
from pathlib import Path
from datetime import datetime
from dotenv import load_dotenv

# Ensure src/ is on sys.path so tests can import mood_insights without installing.
ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

# Load environment variables
load_dotenv()

from mood_insights.config import Settings
from mood_insights.entries import EnergyImpact, JournalEntry
from mood_insights.store import JournalStore


# ============================================================================
# Entry Fixtures
# ============================================================================

@pytest.fixture
def make_entry():
    """
    Factory fixture building JournalEntry objects with sequential ids.

    Usage:
        make_entry(datetime(2024, 3, 4, 9), mood=5, energy="energizing",
                   activities=["Exercise"])
    """
    counter = itertools.count(1)

    def _make_entry(
        created_at: datetime,
        mood: int = 3,
        energy: str = "neutral",
        activities=(),
        note: str = "",
    ) -> JournalEntry:
        return JournalEntry(
            id=f"entry-{next(counter)}",
            mood=mood,
            energy_impact=EnergyImpact(energy),
            created_at=created_at,
            activities=tuple(activities),
            note=note,
        )

    return _make_entry


@pytest.fixture
def scenario_entries(make_entry):
    """
    Three entries from the reference scenario.

    Monday 2024-03-04 09:00 Exercise (5, energizing), Monday 14:00 Work
    (1, draining), Tuesday 09:00 Exercise + Work (3, neutral).
    """
    return [
        make_entry(datetime(2024, 3, 4, 9, 0), mood=5, energy="energizing", activities=["Exercise"]),
        make_entry(datetime(2024, 3, 4, 14, 0), mood=1, energy="draining", activities=["Work"]),
        make_entry(datetime(2024, 3, 5, 9, 0), mood=3, energy="neutral", activities=["Exercise", "Work"]),
    ]


# ============================================================================
# Store Fixtures
# ============================================================================

@pytest.fixture
def settings(tmp_path):
    """Settings pointing at a temporary data directory."""
    return Settings(data_path=str(tmp_path))


@pytest.fixture
def store(settings):
    """Empty journal store in a temporary directory."""
    return JournalStore(settings=settings)
