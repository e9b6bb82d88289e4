"""Tests for format_local_datetime — zone-naive timestamp strings."""

from datetime import datetime

from app.core.local_time import format_local_datetime


def test_formats_without_offset():
    assert format_local_datetime(datetime(2026, 1, 16, 13, 0)) == "2026-01-16T13:00:00"


def test_pads_every_component():
    assert format_local_datetime(datetime(987, 2, 3, 4, 5, 6)) == "0987-02-03T04:05:06"


def test_ignores_microseconds():
    moment = datetime(2026, 1, 16, 13, 0, 7, 999_999)
    assert format_local_datetime(moment) == "2026-01-16T13:00:07"
