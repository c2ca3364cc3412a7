"""Filtering and ranking over an already-built entry list."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import UTC, date as date_cls, datetime, timedelta
from typing import Literal

from .models import Category, LogEntry, Severity
from .remediation import remediation_for

SortKey = Literal["line", "timestamp", "priority"]
SORT_KEYS: tuple[str, ...] = ("line", "timestamp", "priority")

# Severities that get remediation guidance, in report order.
ACTIONABLE_SEVERITIES: tuple[Severity, ...] = (
    Severity.CRITICAL,
    Severity.WARNING,
    Severity.SUSPICIOUS,
)


def range_for_date(s: str) -> tuple[datetime, datetime]:
    """Return the UTC day window for a YYYY-MM-DD selector."""
    try:
        d = date_cls.fromisoformat(s)
    except ValueError as exc:
        raise ValueError("date must look like YYYY-MM-DD (e.g., 2024-01-15)") from exc
    start = datetime(d.year, d.month, d.day, tzinfo=UTC)
    return start, start + timedelta(days=1)


def _as_utc(ts: datetime) -> datetime:
    if ts.tzinfo is None:
        return ts.replace(tzinfo=UTC)
    return ts.astimezone(UTC)


def filter_entries(
    entries: Iterable[LogEntry],
    *,
    severities: Iterable[Severity] | None = None,
    categories: Iterable[Category] | None = None,
    contains: str | None = None,
    date: str | None = None,
    since: datetime | None = None,
    until: datetime | None = None,
    sort_by: SortKey = "line",
    descending: bool = False,
    limit: int | None = None,
) -> list[LogEntry]:
    """Filter entries, then sort and truncate.

    ``contains`` is a case-insensitive message search. ``date`` selects one UTC
    day and takes precedence over ``since``/``until`` (a ``[since, until)``
    window). Sorting is stable, so equal keys keep line order.
    """
    if sort_by not in SORT_KEYS:
        raise ValueError(f"sort_by must be one of: {', '.join(SORT_KEYS)}")
    if limit is not None and limit < 0:
        raise ValueError("limit must be >= 0")

    if date:
        since, until = range_for_date(date)
    else:
        since = _as_utc(since) if since is not None else None
        until = _as_utc(until) if until is not None else None
    if since is not None and until is not None and since >= until:
        raise ValueError("since must be < until")

    allowed_sev = set(severities) if severities is not None else None
    allowed_cat = set(categories) if categories is not None else None
    needle = contains.lower() if contains else None

    out: list[LogEntry] = []
    for e in entries:
        if allowed_sev is not None and e.severity not in allowed_sev:
            continue
        if allowed_cat is not None and e.category not in allowed_cat:
            continue
        if needle is not None and needle not in e.message.lower():
            continue
        if since is not None and e.timestamp < since:
            continue
        if until is not None and e.timestamp >= until:
            continue
        out.append(e)

    if sort_by == "timestamp":
        out.sort(key=lambda e: e.timestamp, reverse=descending)
    elif sort_by == "priority":
        out.sort(key=lambda e: e.priority_score, reverse=descending)
    elif descending:
        out.reverse()

    if limit is not None:
        out = out[:limit]
    return out


def top_alerts(
    entries: Iterable[LogEntry],
    *,
    severity: Severity | None = None,
    limit: int = 100,
) -> list[LogEntry]:
    """Highest-priority entries first, optionally for one severity."""
    return filter_entries(
        entries,
        severities=[severity] if severity is not None else None,
        sort_by="priority",
        descending=True,
        limit=limit,
    )


@dataclass(frozen=True, slots=True)
class RemediationItem:
    severity: Severity
    category: Category
    guidance: str


def remediation_plan(entries: Sequence[LogEntry]) -> list[RemediationItem]:
    """Guidance for each actionable (severity, category) pair present."""
    plan: list[RemediationItem] = []
    for sev in ACTIONABLE_SEVERITIES:
        seen: dict[Category, None] = {}
        for e in entries:
            if e.severity is sev:
                seen.setdefault(e.category, None)
        plan.extend(
            RemediationItem(severity=sev, category=cat, guidance=remediation_for(sev, cat))
            for cat in seen
        )
    return plan
