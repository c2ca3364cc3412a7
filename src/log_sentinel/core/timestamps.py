"""Best-effort timestamp recovery from free-form log lines.

Patterns are tried in order and the first one whose match parses wins:

1. ISO-8601-like: ``YYYY-MM-DD[T ]HH:MM:SS[.fff][Z|+HH:MM]``
2. syslog: ``Mon D HH:MM:SS`` (year inferred)
3. US slash date: ``MM/DD/YYYY HH:MM:SS``
4. bare 10-13 digit epoch, seconds or milliseconds by magnitude

A match that does not parse falls through to the next pattern. When nothing
parses, the processing time is returned instead, so the extractor never fails.
Naive values are taken as UTC; results are always timezone-aware UTC.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from datetime import UTC, datetime, timedelta, timezone

Clock = Callable[[], datetime]

_ISO_RE = re.compile(
    r"(?P<date>\d{4}-\d{2}-\d{2})[T ](?P<time>\d{2}:\d{2}:\d{2})"
    r"(?:\.(?P<frac>\d+))?"
    r"(?P<tz>Z|[+-]\d{2}:?\d{2})?"
)
_SYSLOG_RE = re.compile(r"\w{3}\s+\d{1,2}\s+\d{2}:\d{2}:\d{2}")
_US_RE = re.compile(r"\d{2}/\d{2}/\d{4}\s+\d{2}:\d{2}:\d{2}")
_EPOCH_RE = re.compile(r"(?<!\d)\d{10,13}(?!\d)")

_EPOCH_SECONDS_MIN = 1e9
_EPOCH_MILLIS_MIN = 1e12


def _utc_now() -> datetime:
    return datetime.now(UTC)


def _parse_iso(m: re.Match[str], now: datetime) -> datetime | None:
    try:
        ts = datetime.strptime(f"{m.group('date')} {m.group('time')}", "%Y-%m-%d %H:%M:%S")
    except ValueError:
        return None

    frac = m.group("frac")
    if frac:
        ts = ts.replace(microsecond=int(frac[:6].ljust(6, "0")))

    tz = m.group("tz")
    if not tz or tz == "Z":
        return ts.replace(tzinfo=UTC)

    sign = -1 if tz[0] == "-" else 1
    digits = tz[1:].replace(":", "")
    try:
        offset = timezone(sign * timedelta(hours=int(digits[:2]), minutes=int(digits[2:])))
    except ValueError:
        return None
    return ts.replace(tzinfo=offset).astimezone(UTC)


def _parse_syslog(m: re.Match[str], now: datetime) -> datetime | None:
    text = " ".join(m.group(0).split())
    try:
        ts = datetime.strptime(f"{now.year} {text}", "%Y %b %d %H:%M:%S").replace(tzinfo=UTC)
    except ValueError:
        return None

    # No year on the wire: a stamp far in the future belongs to last year.
    if ts > now + timedelta(days=1):
        try:
            ts = ts.replace(year=now.year - 1)
        except ValueError:
            return None
    return ts


def _parse_us(m: re.Match[str], now: datetime) -> datetime | None:
    text = " ".join(m.group(0).split())
    try:
        return datetime.strptime(text, "%m/%d/%Y %H:%M:%S").replace(tzinfo=UTC)
    except ValueError:
        return None


def _parse_epoch(m: re.Match[str], now: datetime) -> datetime | None:
    value = int(m.group(0))
    if value > _EPOCH_MILLIS_MIN:
        seconds = value / 1000
    elif value > _EPOCH_SECONDS_MIN:
        seconds = float(value)
    else:
        return None
    try:
        return datetime.fromtimestamp(seconds, UTC)
    except (OverflowError, OSError, ValueError):
        return None


TIMESTAMP_RULES: Sequence[
    tuple[re.Pattern[str], Callable[[re.Match[str], datetime], datetime | None]]
] = (
    (_ISO_RE, _parse_iso),
    (_SYSLOG_RE, _parse_syslog),
    (_US_RE, _parse_us),
    (_EPOCH_RE, _parse_epoch),
)


def extract_timestamp(line: str, *, now: Clock | None = None) -> datetime:
    """Return the first parseable timestamp in ``line``, or the current time."""
    current = (now or _utc_now)()
    for pattern, parse in TIMESTAMP_RULES:
        m = pattern.search(line)
        if m is None:
            continue
        ts = parse(m, current)
        if ts is not None:
            return ts
    return current
