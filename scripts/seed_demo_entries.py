#!/usr/bin/env python3
"""
Seed the journal with demo entries.

Generates a couple of months of plausible mood/energy entries so the
dashboard and history views have something to show. Energy is correlated
with mood: low moods are mostly draining, high moods mostly energizing.

Usage:
    python scripts/seed_demo_entries.py
    python scripts/seed_demo_entries.py --count 120 --days 90 --seed 42
    python scripts/seed_demo_entries.py --path /tmp/journal.json
"""

import sys
import uuid
import random
import argparse
from pathlib import Path
from datetime import datetime, timedelta
from typing import List, Optional
from dotenv import load_dotenv

# Allow running from a checkout without installing the package
SRC = Path(__file__).resolve().parent.parent / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from mood_insights.entries import EnergyImpact, JournalEntry
from mood_insights.store import JournalStore
from mood_insights.tags import PresetTag


# Load environment variables
load_dotenv()

DEMO_ACTIVITIES = [tag.value for tag in PresetTag]
DEMO_NOTE = "Demo entry"

# Entries are logged between 08:00 and 21:59
FIRST_HOUR = 8
LAST_HOUR = 21


def pick_energy(mood: int, rng: random.Random) -> EnergyImpact:
    """Energy impact correlated with mood."""
    if mood <= 2:
        return EnergyImpact.DRAINING if rng.random() > 0.3 else EnergyImpact.NEUTRAL
    if mood >= 4:
        return EnergyImpact.ENERGIZING if rng.random() > 0.3 else EnergyImpact.NEUTRAL
    return EnergyImpact.NEUTRAL


def pick_activities(rng: random.Random) -> List[str]:
    """One to three distinct preset activities."""
    picks = [rng.choice(DEMO_ACTIVITIES) for _ in range(rng.randint(1, 3))]
    return list(dict.fromkeys(picks))


def generate_demo_entries(
    count: int = 60,
    days: int = 60,
    now: Optional[datetime] = None,
    rng: Optional[random.Random] = None,
) -> List[JournalEntry]:
    """
    Generate demo entries spread over the last `days` days.

    Args:
        count: Number of entries
        days: How far back entries may go
        now: Reference time (defaults to local now)
        rng: Random source, pass a seeded one for repeatable output

    Returns:
        Entries sorted newest first
    """
    now = now or datetime.now().astimezone()
    rng = rng or random.Random()

    entries = []
    for _ in range(count):
        day = now - timedelta(days=rng.randrange(days))
        created_at = day.replace(
            hour=rng.randint(FIRST_HOUR, LAST_HOUR),
            minute=rng.randrange(60),
            second=0,
            microsecond=0,
        )
        mood = rng.randint(1, 5)
        entries.append(
            JournalEntry(
                id=f"demo-{uuid.UUID(int=rng.getrandbits(128)).hex[:9]}",
                mood=mood,
                energy_impact=pick_energy(mood, rng),
                created_at=created_at,
                activities=tuple(pick_activities(rng)),
                note=DEMO_NOTE,
            )
        )

    entries.sort(key=lambda e: e.created_at, reverse=True)
    return entries


def main(argv: Optional[List[str]] = None) -> int:
    """Generate demo entries and merge them into the journal."""
    parser = argparse.ArgumentParser(description="Seed the mood journal with demo entries")
    parser.add_argument("--count", type=int, default=60, help="Number of entries to generate")
    parser.add_argument("--days", type=int, default=60, help="Spread entries over this many days")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for repeatable data")
    parser.add_argument("--path", default=None, help="Journal file (defaults to configured path)")
    args = parser.parse_args(argv)

    if args.count < 0 or args.days < 1:
        parser.error("--count must be >= 0 and --days >= 1")

    store = JournalStore(path=args.path)
    entries = generate_demo_entries(args.count, args.days, rng=random.Random(args.seed))
    added = store.merge(entries)

    print("=" * 60)
    print("Mood Journal Demo Seeder")
    print("=" * 60)
    print(f"Journal: {store.path}")
    print(f"Generated: {len(entries)} entries over {args.days} days")
    print(f"Added: {added} new entries")
    return 0


if __name__ == "__main__":
    sys.exit(main())
