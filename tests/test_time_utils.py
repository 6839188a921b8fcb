"""Tests for relative time formatting."""

from unittest.mock import patch

import pytest

from platform_utils.utils.time_utils import (
    JUST_NOW,
    compute_future_relative_time,
    compute_past_relative_time,
    to_plural_form,
    to_relative_time,
)

SECOND = 1000
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE
DAY = 24 * HOUR


class TestPastRelativeTime:
    """Test compute_past_relative_time bucket lookup."""

    @pytest.mark.parametrize(
        "diff_ms,expected",
        [
            (0, JUST_NOW),
            (999, JUST_NOW),
            (SECOND, "1 second ago"),
            (59 * SECOND, "59 seconds ago"),
            (90 * SECOND, "1 minute ago"),
            (2 * HOUR + 5 * MINUTE, "2 hours ago"),
            (3 * DAY, "3 days ago"),
            (14 * DAY, "2 weeks ago"),
            (60 * DAY, "2 months ago"),
            (364 * DAY, "12 months ago"),
            (365 * DAY, "1 year ago"),
            (25 * 365 * DAY, "2 decades ago"),
            (300 * 365 * DAY, "3 centuries ago"),
        ],
    )
    def test_buckets(self, diff_ms, expected):
        assert compute_past_relative_time(diff_ms) == expected

    def test_bucket_upper_bound_is_exclusive(self):
        """Exactly one week is reported in weeks, not days."""
        assert compute_past_relative_time(7 * DAY) == "1 week ago"
        assert compute_past_relative_time(7 * DAY - 1) == "6 days ago"


class TestFutureRelativeTime:
    """Test compute_future_relative_time with negative differences."""

    def test_minutes_from_now(self):
        assert compute_future_relative_time(-5 * MINUTE) == "5 minutes from now"

    def test_single_unit(self):
        assert compute_future_relative_time(-DAY) == "1 day from now"

    def test_sub_second(self):
        assert compute_future_relative_time(-500) == JUST_NOW


class TestToRelativeTime:
    """Test to_relative_time with explicit and implicit now."""

    def test_past(self):
        now = 1_700_000_000_000
        assert to_relative_time(now - 3 * HOUR, now_ms=now) == "3 hours ago"

    def test_future(self):
        now = 1_700_000_000_000
        assert to_relative_time(now + 6 * 365 * DAY, now_ms=now) == "6 years from now"

    def test_same_instant(self):
        now = 1_700_000_000_000
        assert to_relative_time(now, now_ms=now) == JUST_NOW

    def test_uses_current_time_by_default(self):
        with patch(
            "platform_utils.utils.time_utils.current_time_millis",
            return_value=10 * DAY,
        ):
            assert to_relative_time(DAY) == "1 week ago"


class TestToPluralForm:
    """Test to_plural_form rules."""

    @pytest.mark.parametrize(
        "word,expected",
        [
            ("second", "seconds"),
            ("century", "centuries"),
            ("day", "days"),
            ("box", "boxes"),
            ("church", "churches"),
            ("hero", "heroes"),
            ("leaf", "leaves"),
            ("Bus", "Buses"),
        ],
    )
    def test_rules(self, word, expected):
        assert to_plural_form(word) == expected
