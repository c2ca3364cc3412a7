"""Core data models for log classification and aggregation."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class Severity(str, Enum):
    """Closed set of severity levels assigned to each log line."""

    CRITICAL = "CRITICAL"
    WARNING = "WARNING"
    SUSPICIOUS = "SUSPICIOUS"
    INFO = "INFO"


class Category(str, Enum):
    """Topical categories; GENERAL is the fallback when no rule matches."""

    AUTHENTICATION = "Authentication"
    FIREWALL = "Firewall"
    NETWORK = "Network"
    FILE_SYSTEM = "File System"
    SYSTEM = "System"
    DATABASE = "Database"
    PERFORMANCE = "Performance"
    MALWARE = "Malware"
    ERROR = "Error"
    GENERAL = "General"


@dataclass(frozen=True, slots=True)
class LogEntry:
    """One classified log line."""

    id: str
    line_no: int
    timestamp: datetime  # best-effort; "now" when the line carries no usable time
    severity: Severity
    category: Category
    source: str
    message: str
    raw: str
    priority_score: int


@dataclass(frozen=True, slots=True)
class TimelineBucket:
    """Per-hour severity counts."""

    time: str
    critical: int = 0
    warning: int = 0
    suspicious: int = 0
    info: int = 0


@dataclass(frozen=True, slots=True)
class BurstBucket:
    """Per-minute event count with its anomaly flag."""

    time: str
    count: int
    is_burst: bool


@dataclass(frozen=True, slots=True)
class LogStats:
    """Summary of a whole entry set, recomputed from scratch on every load."""

    total: int
    critical: int
    warning: int
    suspicious: int
    info: int
    health_score: int
    categories: dict[str, int]
    sources: dict[str, int]
    timeline: list[TimelineBucket]
    burst_detection: list[BurstBucket]


@dataclass(frozen=True, slots=True)
class IOC:
    """Indicator of compromise seen in non-informational messages."""

    type: str
    value: str
    severity: Severity
    count: int


def coerce_severity(value: Severity | str) -> Severity | None:
    """Return the matching Severity (case-insensitive), or None."""
    if isinstance(value, Severity):
        return value
    try:
        return Severity(str(value).strip().upper())
    except ValueError:
        return None


def coerce_category(value: Category | str) -> Category | None:
    """Return the matching Category (case-insensitive), or None."""
    if isinstance(value, Category):
        return value
    name = str(value).strip().lower()
    for cat in Category:
        if cat.value.lower() == name:
            return cat
    return None
