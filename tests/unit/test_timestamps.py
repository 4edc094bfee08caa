from __future__ import annotations

from datetime import datetime, timezone

from linkrelay.relay.timestamps import parse_timestamp, format_timestamp


def test_format_timestamp_is_iso_with_microseconds_and_z_suffix() -> None:
    moment = datetime(2026, 10, 18, 12, 30, 5, 123456, tzinfo=timezone.utc)
    assert format_timestamp(moment) == "2026-10-18T12:30:05.123456Z"


def test_parse_timestamp_reads_formatted_value() -> None:
    moment = datetime(2026, 10, 18, 12, 30, 5, 123000, tzinfo=timezone.utc)
    assert parse_timestamp(format_timestamp(moment)) == moment
    assert parse_timestamp(format_timestamp(moment).encode("utf-8")) == moment


def test_parse_timestamp_assumes_utc_for_naive_values() -> None:
    parsed = parse_timestamp("2026-10-18T12:30:05")
    assert parsed == datetime(2026, 10, 18, 12, 30, 5, tzinfo=timezone.utc)


def test_parse_timestamp_rejects_garbage() -> None:
    assert parse_timestamp("not-a-date") is None
    assert parse_timestamp("") is None
    assert parse_timestamp(b"\xff\xfe") is None
