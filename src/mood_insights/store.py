"""
JSON-file journal store.

The store owns persistence and validation: entries are checked and their
tags canonicalized here, once, so the insight engine can trust what it gets.
On disk the journal is a JSON array of flat records with createdAt as an
ISO-8601 string.
"""

import json
import logging
import uuid
from datetime import datetime
from pathlib import Path
from typing import Callable, Iterable, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .config import Settings, get_settings
from .entries import EnergyImpact, JournalEntry
from .history import MonthBucket, build_history
from .recent import RecentSummary, summarize_recent
from .tags import normalize_activities

logger = logging.getLogger(__name__)

EnergyValue = Literal["draining", "neutral", "energizing"]


class EntryRecord(BaseModel):
    """Validated journal entry as stored on disk."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    mood: int = Field(ge=1, le=5)
    energy: EnergyValue
    activities: List[str] = Field(default_factory=list)
    note: str = ""
    created_at: datetime = Field(alias="createdAt")

    @field_validator("activities")
    @classmethod
    def _canonical_tags(cls, value: List[str]) -> List[str]:
        return normalize_activities(value)

    @field_validator("created_at")
    @classmethod
    def _local_time(cls, value: datetime) -> datetime:
        # Naive timestamps are taken as local time; aware ones are converted to it
        return value.astimezone()

    def to_entry(self) -> JournalEntry:
        """Convert to the engine's immutable entry."""
        return JournalEntry(
            id=self.id,
            mood=self.mood,
            energy_impact=EnergyImpact(self.energy),
            created_at=self.created_at,
            activities=tuple(self.activities),
            note=self.note,
        )


class JournalStore:
    """
    Journal persisted as a single JSON file.

    Every call reads the file afresh; there is no in-memory cache to go
    stale between calls.
    """

    def __init__(self, path: Optional[str] = None, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.path = Path(path or self.settings.journal_path)

    def load(self) -> List[JournalEntry]:
        """
        Load all valid entries, newest first.

        Returns:
            Entries sorted descending by created_at; empty if the file is
            missing or unreadable
        """
        if not self.path.exists():
            return []

        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"[STORE] Could not read journal {self.path}: {e}")
            return []

        if not isinstance(raw, list):
            logger.error(f"[STORE] Journal {self.path} is not a list of entries")
            return []

        entries = []
        for item in raw:
            try:
                entries.append(EntryRecord.model_validate(item).to_entry())
            except ValidationError as e:
                record_id = item.get("id") if isinstance(item, dict) else None
                logger.warning(f"[STORE] Skipping invalid record {record_id}: {e.error_count()} error(s)")

        entries.sort(key=lambda e: e.created_at, reverse=True)
        return entries

    def save(self, entries: Iterable[JournalEntry]) -> None:
        """Write entries to disk, newest first."""
        ordered = sorted(entries, key=lambda e: e.created_at, reverse=True)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            json.dumps([e.to_dict() for e in ordered], ensure_ascii=False, indent=2),
            encoding="utf-8",
        )
        logger.info(f"[STORE] Saved {len(ordered)} entries to {self.path}")

    def add(
        self,
        mood: int,
        energy: str,
        activities: Iterable[str] = (),
        note: str = "",
        created_at: Optional[datetime] = None,
    ) -> JournalEntry:
        """
        Validate and append a new entry.

        Raises:
            pydantic.ValidationError: If mood or energy are out of range
        """
        entry = EntryRecord(
            id=uuid.uuid4().hex,
            mood=mood,
            energy=getattr(energy, "value", energy),
            activities=list(activities),
            note=note,
            created_at=created_at or datetime.now().astimezone(),
        ).to_entry()

        self.save([entry, *self.load()])
        logger.info(f"[STORE] Added entry {entry.id} (mood={entry.mood}, energy={entry.energy_impact.value})")
        return entry

    def delete(self, entry_id: str) -> bool:
        """Remove an entry by id. Returns False if no such entry exists."""
        entries = self.load()
        remaining = [e for e in entries if e.id != entry_id]
        if len(remaining) == len(entries):
            logger.debug(f"[STORE] No entry {entry_id} to delete")
            return False

        self.save(remaining)
        logger.info(f"[STORE] Deleted entry {entry_id}")
        return True

    def merge(self, entries: Iterable[JournalEntry]) -> int:
        """Validate and add entries whose ids are not stored yet. Returns how many were added."""
        existing = self.load()
        known = {e.id for e in existing}
        new = []
        for entry in entries:
            if entry.id in known:
                continue
            try:
                new.append(EntryRecord.model_validate(entry.to_dict()).to_entry())
            except ValidationError as e:
                logger.warning(f"[STORE] Skipping invalid entry {entry.id}: {e.error_count()} error(s)")
                continue
            known.add(entry.id)
        if new:
            self.save(existing + new)
        return len(new)

    def dashboard(self, now: Optional[datetime] = None) -> RecentSummary:
        """Recent-window summary using the configured window."""
        return summarize_recent(
            self.load(),
            now=now,
            window_days=self.settings.recent_window_days,
            include_future=self.settings.include_future_entries,
        )

    def history(
        self,
        language: Optional[str] = None,
        translate: Optional[Callable[[str], str]] = None,
    ) -> List[MonthBucket]:
        """History view in the given (or configured) language."""
        return build_history(
            self.load(),
            language=language or self.settings.default_language,
            translate=translate,
            top_limit=self.settings.top_activity_limit,
        )
