"""
Tests for datetime utilities
"""
from datetime import datetime, timezone
from app.utils.datetime_utils import to_local, format_datetime_br


def test_to_local_naive_is_utc():
    """Test naive datetimes are treated as UTC"""
    local = to_local(datetime(2026, 7, 1, 12, 0))
    assert local.hour == 9
    assert to_local(None) is None


def test_format_datetime_br():
    """Test Brazilian datetime format"""
    assert format_datetime_br(datetime(2026, 3, 5, 3, 7, tzinfo=timezone.utc)) == "05/03/2026 00:07"
    assert format_datetime_br(None) == ""


def test_format_datetime_br_across_midnight():
    """Test that the date follows the local timezone"""
    assert format_datetime_br(datetime(2026, 3, 5, 1, 0)) == "04/03/2026 22:00"
