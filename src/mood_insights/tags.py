"""
Activity tag canonicalization.

Tags come in two tiers: presets (a closed set offered by the entry form) and
custom free-text tags. A custom tag that matches a preset case-insensitively
is folded into the preset spelling. Normalization runs once, when an entry is
ingested; aggregation code compares tags as plain strings.
"""

from enum import Enum
from typing import Dict, Iterable, List, Optional


class PresetTag(str, Enum):
    """Activities offered out of the box."""

    WORK = "Work"
    MEETING = "Meeting"
    EXERCISE = "Exercise"
    GAMING = "Gaming"
    READING = "Reading"
    SOCIALIZING = "Socializing"
    COOKING = "Cooking"
    COMMUTE = "Commute"
    CHORES = "Chores"
    SLEEP = "Sleep"
    MUSIC = "Music"
    CODING = "Coding"
    TV_MOVIES = "TV/Movies"
    MEDITATION = "Meditation"


_PRESETS_BY_FOLDED: Dict[str, str] = {p.value.casefold(): p.value for p in PresetTag}


def is_preset(tag: str) -> bool:
    """Return True if tag is spelled exactly like a preset."""
    return _PRESETS_BY_FOLDED.get(tag.casefold()) == tag


def normalize_tag(tag: Optional[str]) -> Optional[str]:
    """
    Canonicalize a single tag.

    Args:
        tag: Raw tag text from the user

    Returns:
        The preset spelling for a case-insensitive preset match, the stripped
        text for a custom tag, or None if the tag is blank
    """
    if tag is None:
        return None
    text = tag.strip()
    if not text:
        return None
    return _PRESETS_BY_FOLDED.get(text.casefold(), text)


def normalize_activities(tags: Iterable[Optional[str]]) -> List[str]:
    """Normalize tags and drop blanks and duplicates, keeping first-seen order."""
    seen = []
    for tag in tags:
        canonical = normalize_tag(tag)
        if canonical is not None and canonical not in seen:
            seen.append(canonical)
    return seen
