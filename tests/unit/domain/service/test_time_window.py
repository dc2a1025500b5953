"""Unit tests for TimeWindowPolicy."""

from datetime import datetime, timedelta, timezone

from tymer.domain.model import TimeWindow
from tymer.domain.service import TimeWindowPolicy

TZ = timezone(timedelta(hours=1))
MATIN = TimeWindow(label="Matin", start=8, end=9)
MIDI = TimeWindow(label="Midi", start=12, end=13)
SOIR = TimeWindow(label="Soir", start=19, end=20)
WINDOWS = [SOIR, MATIN, MIDI]


def at(hour: int, minute: int = 0) -> datetime:
    return datetime(2026, 3, 14, hour, minute, tzinfo=TZ)


class TestOpenWindows:
    """Tests for open_windows and current_window."""

    def test_window_open_inside_hour_range(self):
        policy = TimeWindowPolicy()
        assert policy.open_windows(at(12, 30), WINDOWS) == [MIDI]
        assert policy.current_window(at(12, 30), WINDOWS) == MIDI

    def test_end_hour_is_exclusive(self):
        policy = TimeWindowPolicy()
        assert policy.open_windows(at(13, 0), WINDOWS) == []
        assert policy.current_window(at(13, 1), WINDOWS) is None

    def test_start_hour_is_inclusive(self):
        assert TimeWindowPolicy().open_windows(at(8, 0), WINDOWS) == [MATIN]

    def test_empty_window_never_opens(self):
        empty = TimeWindow(label="Jamais", start=10, end=10)
        assert TimeWindowPolicy().open_windows(at(10, 15), [empty]) == []

    def test_overlapping_windows_in_start_order_without_duplicates(self):
        long = TimeWindow(label="Journée", start=9, end=17)
        opened = TimeWindowPolicy().open_windows(at(12, 10), [MIDI, long, MIDI])
        assert opened == [long, MIDI]

    def test_no_windows(self):
        policy = TimeWindowPolicy()
        assert policy.open_windows(at(12), []) == []
        assert policy.next_window(at(12), []) is None
        assert policy.next_opening(at(12), []) is None


class TestNextWindow:
    """Tests for next_window and next_opening."""

    def test_next_window_later_today(self):
        policy = TimeWindowPolicy()
        assert policy.next_window(at(10), WINDOWS) == MIDI
        assert policy.next_opening(at(10), WINDOWS) == at(12)

    def test_next_window_skips_current_hour(self):
        # 12:30 is inside Midi; the next opening is Soir
        assert TimeWindowPolicy().next_window(at(12, 30), WINDOWS) == SOIR

    def test_wraps_to_tomorrow_after_last_window(self):
        policy = TimeWindowPolicy()
        assert policy.next_window(at(21), WINDOWS) == MATIN
        assert policy.next_opening(at(21), WINDOWS) == at(8) + timedelta(days=1)


class TestRemaining:
    """Tests for closes_at and remaining."""

    def test_remaining_in_open_window(self):
        policy = TimeWindowPolicy()
        assert policy.closes_at(at(12, 30), MIDI) == at(13)
        assert policy.remaining(at(12, 30), MIDI) == timedelta(minutes=30)

    def test_remaining_is_none_when_closed(self):
        policy = TimeWindowPolicy()
        assert policy.closes_at(at(14), MIDI) is None
        assert policy.remaining(at(14), MIDI) is None


def test_display_time():
    assert MATIN.display_time == "08H-09H"
    assert SOIR.display_time == "19H-20H"
