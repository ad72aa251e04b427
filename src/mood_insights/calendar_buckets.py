"""
Calendar Bucketer.

Groups entries by calendar month and, within each month, by ISO-8601 week.

Conventions:
    - Week numbers follow ISO-8601: weeks start on Monday and belong to the
      year that contains their Thursday. Dec 31 can fall in week 1 of the
      next year and Jan 1 in week 52/53 of the previous one.
    - Week date ranges run Monday..Sunday of that ISO week, so a Sunday is
      the last day of its range.
    - Chart slots use weekday_index(), where Sunday is 0 and Saturday is 6.
    - Dates are taken from created_at as given (the entry's local time).

A week that straddles a month boundary yields one bucket in each month, each
holding only that month's entries.
"""

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Dict, Iterable, NamedTuple, Optional, Tuple, Union

from .entries import JournalEntry
from .labels import date_range_label, month_label


class MonthKey(NamedTuple):
    year: int
    month: int

    def __str__(self) -> str:
        return f"{self.year}-{self.month:02d}"


class WeekKey(NamedTuple):
    """(iso_year, iso_week); compares numerically, so W10 sorts after W2."""

    year: int
    week: int

    def __str__(self) -> str:
        return f"{self.year}-W{self.week:02d}"


def _as_date(value: Union[date, datetime]) -> date:
    return value.date() if isinstance(value, datetime) else value


def iso_week_key(value: Union[date, datetime]) -> WeekKey:
    """ISO year and week number of a date."""
    iso = _as_date(value).isocalendar()
    return WeekKey(iso[0], iso[1])


def week_bounds(value: Union[date, datetime]) -> Tuple[date, date]:
    """Monday and Sunday of the ISO week containing the date."""
    d = _as_date(value)
    monday = d - timedelta(days=d.isoweekday() - 1)
    return monday, monday + timedelta(days=6)


def weekday_index(value: Union[date, datetime]) -> int:
    """Chart slot for a date: Sunday = 0 .. Saturday = 6."""
    return _as_date(value).isoweekday() % 7


def month_key(value: Union[date, datetime]) -> MonthKey:
    return MonthKey(value.year, value.month)


@dataclass(frozen=True)
class CalendarWeek:
    """Entries of one ISO week within one month."""

    key: WeekKey
    start: date
    end: date
    date_range: str
    entries: Tuple[JournalEntry, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class CalendarMonth:
    """Entries of one calendar month, split into weeks."""

    key: MonthKey
    label: str
    entries: Tuple[JournalEntry, ...] = field(default_factory=tuple)
    weeks: Dict[WeekKey, CalendarWeek] = field(default_factory=dict)


def bucket_entries(
    entries: Iterable[JournalEntry],
    language: Optional[str] = None,
) -> Dict[MonthKey, CalendarMonth]:
    """
    Partition entries into month and week buckets.

    Months and weeks appear in the order they are first encountered, so pass
    entries sorted newest first to get newest-first months. Within a bucket,
    entries keep input order.

    Args:
        entries: Journal entries
        language: Language tag for labels

    Returns:
        Dict of MonthKey -> CalendarMonth
    """
    month_entries: Dict[MonthKey, list] = {}
    week_entries: Dict[MonthKey, Dict[WeekKey, list]] = {}

    for entry in entries:
        mkey = month_key(entry.created_at)
        wkey = iso_week_key(entry.created_at)
        month_entries.setdefault(mkey, []).append(entry)
        week_entries.setdefault(mkey, {}).setdefault(wkey, []).append(entry)

    months = {}
    for mkey, items in month_entries.items():
        weeks = {}
        for wkey, week_items in week_entries[mkey].items():
            start, end = week_bounds(week_items[0].created_at)
            weeks[wkey] = CalendarWeek(
                key=wkey,
                start=start,
                end=end,
                date_range=date_range_label(start, end, language),
                entries=tuple(week_items),
            )
        months[mkey] = CalendarMonth(
            key=mkey,
            label=month_label(mkey.year, mkey.month, language),
            entries=tuple(items),
            weeks=weeks,
        )

    return months
