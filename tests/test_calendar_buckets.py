"""
Unit tests for calendar bucketing and locale labels.

These tests verify:
1. ISO week numbers at year boundaries
2. Monday..Sunday week ranges (Sundays close their own week)
3. Sunday = 0 chart slot numbering
4. Month/week partitioning and encounter ordering
5. Localized month headers and date ranges with English fallback

Usage:
    pytest tests/test_calendar_buckets.py -v
"""
import pytest
from datetime import date, datetime

from mood_insights.calendar_buckets import (
    MonthKey,
    WeekKey,
    bucket_entries,
    iso_week_key,
    month_key,
    week_bounds,
    weekday_index,
)
from mood_insights.labels import (
    date_range_label,
    month_label,
    resolve_language,
    short_date,
    translator,
)


class TestIsoWeekKey:
    """Test ISO-8601 week numbering."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (date(2024, 3, 4), (2024, 10)),
            (date(2024, 1, 1), (2024, 1)),
            (date(2023, 12, 31), (2023, 52)),  # Sunday closing the last 2023 week
            (date(2024, 12, 30), (2025, 1)),   # Monday already in 2025-W01
            (date(2021, 1, 1), (2020, 53)),    # Friday still in 2020-W53
            (date(2027, 1, 3), (2026, 53)),
        ],
    )
    def test_year_boundaries(self, value, expected):
        assert iso_week_key(value) == expected

    def test_accepts_datetime(self):
        assert iso_week_key(datetime(2023, 12, 31, 23, 59)) == WeekKey(2023, 52)

    def test_keys_compare_numerically(self):
        assert WeekKey(2024, 10) > WeekKey(2024, 9)
        assert WeekKey(2025, 1) > WeekKey(2024, 52)

    def test_string_forms_are_zero_padded(self):
        assert str(WeekKey(2024, 2)) == "2024-W02"
        assert str(MonthKey(2024, 3)) == "2024-03"


class TestWeekBounds:
    """Test Monday..Sunday week ranges."""

    def test_midweek(self):
        assert week_bounds(date(2024, 3, 6)) == (date(2024, 3, 4), date(2024, 3, 10))

    def test_sunday_belongs_to_preceding_monday(self):
        assert week_bounds(date(2023, 12, 31)) == (date(2023, 12, 25), date(2023, 12, 31))

    def test_monday_starts_its_own_week(self):
        assert week_bounds(datetime(2024, 3, 4, 0, 0)) == (date(2024, 3, 4), date(2024, 3, 10))

    def test_bounds_agree_with_iso_week(self):
        for day in range(1, 32):
            d = date(2024, 3, day)
            start, end = week_bounds(d)
            assert iso_week_key(start) == iso_week_key(d) == iso_week_key(end)


class TestWeekdayIndex:
    """Sunday is slot 0, Saturday slot 6."""

    def test_full_week(self):
        # 2024-03-03 is a Sunday
        assert [weekday_index(date(2024, 3, d)) for d in range(3, 10)] == [0, 1, 2, 3, 4, 5, 6]


class TestLabels:
    """Test locale handling for month headers and date ranges."""

    @pytest.mark.parametrize(
        "tag, expected",
        [
            ("en", "en"),
            ("de-AT", "de"),
            ("pt_BR", "en"),
            ("FR", "fr"),
            ("", "en"),
            (None, "en"),
            ("not a locale!", "en"),
        ],
    )
    def test_resolve_language(self, tag, expected):
        assert resolve_language(tag) == expected

    def test_month_labels(self):
        assert month_label(2024, 3, "en") == "March 2024"
        assert month_label(2024, 3, "es") == "marzo de 2024"
        assert month_label(2024, 3, "de-DE") == "März 2024"
        assert month_label(2024, 3, "xx") == "March 2024"

    def test_short_dates(self):
        assert short_date(date(2024, 3, 4), "en") == "Mar 4"
        assert short_date(date(2024, 3, 4), "de") == "4. März"
        assert short_date(date(2024, 3, 4), "fr") == "4 mars"

    def test_date_range(self):
        label = date_range_label(date(2024, 2, 26), date(2024, 3, 3), "en")
        assert label == "Feb 26 – Mar 3"

    def test_translator(self):
        assert translator("pl")("week") == "Tydzień"
        assert translator("zz")("week") == "Week"
        assert translator("en")("Exercise") == "Exercise"


class TestBucketEntries:
    """Test month/week partitioning."""

    def test_empty(self):
        assert bucket_entries([]) == {}

    def test_month_keys(self):
        assert month_key(datetime(2024, 3, 31, 23, 0)) == MonthKey(2024, 3)

    def test_week_crossing_month_boundary_splits(self, make_entry):
        """Thu Feb 29 and Fri Mar 1 2024 share W09 but land in different months."""
        mar = make_entry(datetime(2024, 3, 1, 10, 0))
        feb = make_entry(datetime(2024, 2, 29, 10, 0))

        months = bucket_entries([mar, feb], "en")

        assert list(months) == [MonthKey(2024, 3), MonthKey(2024, 2)]
        assert list(months[MonthKey(2024, 3)].weeks) == [WeekKey(2024, 9)]
        assert list(months[MonthKey(2024, 2)].weeks) == [WeekKey(2024, 9)]
        assert months[MonthKey(2024, 3)].weeks[WeekKey(2024, 9)].entries == (mar,)
        assert months[MonthKey(2024, 2)].weeks[WeekKey(2024, 9)].entries == (feb,)
        assert months[MonthKey(2024, 2)].weeks[WeekKey(2024, 9)].date_range == "Feb 26 – Mar 3"

    def test_sunday_at_year_boundary(self, make_entry):
        """Sunday 2023-12-31 stays in 2023-W52 with a Dec 25 – Dec 31 range."""
        entry = make_entry(datetime(2023, 12, 31, 20, 0))

        months = bucket_entries([entry], "en")
        week = months[MonthKey(2023, 12)].weeks[WeekKey(2023, 52)]

        assert week.start == date(2023, 12, 25)
        assert week.end == date(2023, 12, 31)
        assert week.date_range == "Dec 25 – Dec 31"

    def test_labels_follow_language(self, make_entry):
        months = bucket_entries([make_entry(datetime(2024, 3, 4, 9))], "da")
        month = months[MonthKey(2024, 3)]
        assert month.label == "marts 2024"
        assert month.weeks[WeekKey(2024, 10)].date_range == "4. mar. – 10. mar."

    def test_partition(self, make_entry):
        entries = [make_entry(datetime(2024, m, d, 12)) for m in (1, 2, 3) for d in (1, 9, 17, 28)]
        months = bucket_entries(entries)

        bucketed = [e.id for m in months.values() for w in m.weeks.values() for e in w.entries]
        assert sorted(bucketed) == sorted(e.id for e in entries)
        assert sum(len(m.entries) for m in months.values()) == len(entries)
