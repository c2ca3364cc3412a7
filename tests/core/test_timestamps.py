from __future__ import annotations

from datetime import UTC, datetime

from log_sentinel.core.timestamps import extract_timestamp

NOW = datetime(2024, 6, 1, 12, 0, 0, tzinfo=UTC)


def _now() -> datetime:
    return NOW


def test_iso_with_zulu() -> None:
    ts = extract_timestamp("2024-01-15T10:30:00Z CRITICAL auth login failed", now=_now)
    assert ts == datetime(2024, 1, 15, 10, 30, 0, tzinfo=UTC)


def test_iso_space_separator_and_offset_is_normalized_to_utc() -> None:
    assert extract_timestamp("2024-01-15 12:30:00+02:00 boot", now=_now) == datetime(
        2024, 1, 15, 10, 30, 0, tzinfo=UTC
    )
    assert extract_timestamp("2024-01-15T05:30:00-0500 boot", now=_now) == datetime(
        2024, 1, 15, 10, 30, 0, tzinfo=UTC
    )


def test_iso_fraction_and_naive_value() -> None:
    ts = extract_timestamp("[2024-01-15 10:30:00.123] started", now=_now)
    assert ts == datetime(2024, 1, 15, 10, 30, 0, 123000, tzinfo=UTC)


def test_syslog_uses_current_year() -> None:
    ts = extract_timestamp("Jan 15 10:32:00 db01 postgres[311]: ready", now=_now)
    assert ts == datetime(2024, 1, 15, 10, 32, 0, tzinfo=UTC)


def test_syslog_in_the_future_rolls_back_a_year() -> None:
    early_january = datetime(2024, 1, 2, 0, 0, 0, tzinfo=UTC)
    ts = extract_timestamp("Dec 31 23:59:59 gw kernel: eth0 down", now=lambda: early_january)
    assert ts == datetime(2023, 12, 31, 23, 59, 59, tzinfo=UTC)


def test_us_slash_date() -> None:
    ts = extract_timestamp("01/15/2024 10:33:45 disk write failed", now=_now)
    assert ts == datetime(2024, 1, 15, 10, 33, 45, tzinfo=UTC)


def test_epoch_seconds_and_milliseconds() -> None:
    expected = datetime(2024, 1, 15, 10, 30, 0, tzinfo=UTC)
    assert extract_timestamp("ts=1705314600 login ok", now=_now) == expected
    assert extract_timestamp("ts=1705314600000 login ok", now=_now) == expected


def test_unparseable_match_falls_through_to_next_pattern() -> None:
    ts = extract_timestamp("2024-13-45T10:30:00Z rotated at 1705314600", now=_now)
    assert ts == datetime(2024, 1, 15, 10, 30, 0, tzinfo=UTC)


def test_invalid_date_without_other_candidates_returns_now() -> None:
    assert extract_timestamp("2024-13-45T10:30:00Z bad clock", now=_now) == NOW


def test_unknown_month_name_returns_now() -> None:
    assert extract_timestamp("Foo 15 10:30:00 something", now=_now) == NOW


def test_no_timestamp_returns_now() -> None:
    assert extract_timestamp("just some text", now=_now) == NOW


def test_default_clock_is_aware_utc() -> None:
    ts = extract_timestamp("no time here")
    assert ts.tzinfo is not None
    assert ts.utcoffset() == UTC.utcoffset(None)
