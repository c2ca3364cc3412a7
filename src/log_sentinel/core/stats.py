"""Aggregation of an entry set into LogStats.

Health score::

    100 - (critical*10 + warning*3 + suspicious*5) / total * 100

rounded half-up and floored at 0; an empty set scores 100.

Timeline buckets are keyed ``"{month}/{day} {HH}:00"`` (month and day not
zero-padded) and, by default, ordered by plain string comparison of that key,
so "12/31 23:00" sorts after "1/1 00:00" across a year boundary. Burst buckets are
keyed ``"{hour}:{MM}"`` with no date, so one minute-of-day on several days
shares a bucket. Both behaviors can be switched via AnalysisConfig.
"""

from __future__ import annotations

import logging
import math
from collections import Counter
from collections.abc import Sequence
from datetime import datetime

from .config import AnalysisConfig
from .models import BurstBucket, LogEntry, LogStats, Severity, TimelineBucket

logger = logging.getLogger(__name__)

_HEALTH_WEIGHTS = {
    Severity.CRITICAL: 10,
    Severity.WARNING: 3,
    Severity.SUSPICIOUS: 5,
}


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def health_score(severity_counts: Counter[Severity], total: int) -> int:
    """Weighted severity penalty rescaled to a 0-100 figure."""
    if total == 0:
        return 100
    penalty = sum(severity_counts[sev] * w for sev, w in _HEALTH_WEIGHTS.items())
    return max(0, _round_half_up(100 - penalty / total * 100))


def hour_key(ts: datetime) -> str:
    return f"{ts.month}/{ts.day} {ts.hour:02d}:00"


def minute_key(ts: datetime, *, with_date: bool = False) -> str:
    key = f"{ts.hour}:{ts.minute:02d}"
    if with_date:
        return f"{ts.month}/{ts.day} {key}"
    return key


def aggregate(entries: Sequence[LogEntry], *, config: AnalysisConfig | None = None) -> LogStats:
    """Reduce entries to counts, an hourly timeline and per-minute burst flags."""
    cfg = config or AnalysisConfig()

    severities: Counter[Severity] = Counter()
    categories: Counter[str] = Counter()
    sources: Counter[str] = Counter()
    hours: dict[str, Counter[Severity]] = {}
    hour_start: dict[str, datetime] = {}
    minutes: Counter[str] = Counter()
    minute_start: dict[str, datetime] = {}

    for e in entries:
        severities[e.severity] += 1
        categories[e.category.value] += 1
        sources[e.source] += 1

        hkey = hour_key(e.timestamp)
        hours.setdefault(hkey, Counter())[e.severity] += 1
        bucket_start = e.timestamp.replace(minute=0, second=0, microsecond=0)
        if hkey not in hour_start or bucket_start < hour_start[hkey]:
            hour_start[hkey] = bucket_start

        mkey = minute_key(e.timestamp, with_date=cfg.date_qualified_bursts)
        minutes[mkey] += 1
        if mkey not in minute_start or e.timestamp < minute_start[mkey]:
            minute_start[mkey] = e.timestamp

    total = len(entries)

    if cfg.chronological_timeline:
        hour_order = sorted(hours, key=lambda k: hour_start[k])
    else:
        hour_order = sorted(hours)
    timeline = [
        TimelineBucket(
            time=key,
            critical=hours[key][Severity.CRITICAL],
            warning=hours[key][Severity.WARNING],
            suspicious=hours[key][Severity.SUSPICIOUS],
            info=hours[key][Severity.INFO],
        )
        for key in hour_order
    ]

    avg_per_minute = total / max(len(minutes), 1)
    threshold = avg_per_minute * cfg.burst_factor
    if cfg.chronological_timeline and cfg.date_qualified_bursts:
        minute_order = sorted(minutes, key=lambda k: minute_start[k])
    elif cfg.chronological_timeline:
        minute_order = sorted(minutes, key=lambda k: (minute_start[k].hour, minute_start[k].minute))
    else:
        minute_order = sorted(minutes)
    bursts = [
        BurstBucket(time=key, count=minutes[key], is_burst=minutes[key] > threshold)
        for key in minute_order
    ]

    logger.debug(
        "Aggregated %d entries into %d hour and %d minute buckets",
        total,
        len(timeline),
        len(bursts),
    )

    return LogStats(
        total=total,
        critical=severities[Severity.CRITICAL],
        warning=severities[Severity.WARNING],
        suspicious=severities[Severity.SUSPICIOUS],
        info=severities[Severity.INFO],
        health_score=health_score(severities, total),
        categories=dict(categories),
        sources=dict(sources),
        timeline=timeline,
        burst_detection=bursts,
    )
