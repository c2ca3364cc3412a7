"""JSON response models for the tool surface."""

from __future__ import annotations

from pydantic import BaseModel, Field

from log_sentinel.core.models import IOC, LogEntry, LogStats
from log_sentinel.core.query import RemediationItem


class EntryOut(BaseModel):
    id: str = Field(description="Identifier, unique within one analysis.")
    line_no: int = Field(description="1-based line number in the source file.")
    timestamp: str = Field(description="ISO-8601 UTC timestamp (processing time if none found).")
    severity: str = Field(description="CRITICAL, WARNING, SUSPICIOUS or INFO.")
    category: str = Field(description="Topical category, General when none matched.")
    source: str = Field(description="Originating host/identifier, Unknown when none found.")
    message: str = Field(description="Trimmed log line.")
    priority_score: int = Field(ge=0, description="Severity base plus category bonus (20..105).")
    raw: str | None = Field(default=None, description="Original untrimmed line.")


class TimelineBucketOut(BaseModel):
    time: str
    critical: int = 0
    warning: int = 0
    suspicious: int = 0
    info: int = 0


class BurstBucketOut(BaseModel):
    time: str
    count: int
    is_burst: bool


class StatsOut(BaseModel):
    total: int
    critical: int
    warning: int
    suspicious: int
    info: int
    health_score: int = Field(ge=0, le=100)
    categories: dict[str, int] = Field(default_factory=dict)
    sources: dict[str, int] = Field(default_factory=dict)
    timeline: list[TimelineBucketOut] = Field(default_factory=list)
    burst_detection: list[BurstBucketOut] = Field(default_factory=list)


class IOCOut(BaseModel):
    type: str
    value: str
    severity: str
    count: int = Field(ge=1)


class RemediationOut(BaseModel):
    severity: str
    category: str
    guidance: str


class AnalysisResponse(BaseModel):
    file: str = Field(default="", description="Name of the analyzed file.")
    count: int = Field(description="Number of entries returned after filtering.")
    entries: list[EntryOut] = Field(default_factory=list)
    stats: StatsOut
    iocs: list[IOCOut] | None = None
    remediation: list[RemediationOut] | None = None


def entry_out(entry: LogEntry, *, include_raw: bool) -> EntryOut:
    return EntryOut(
        id=entry.id,
        line_no=entry.line_no,
        timestamp=entry.timestamp.isoformat(),
        severity=entry.severity.value,
        category=entry.category.value,
        source=entry.source,
        message=entry.message,
        priority_score=entry.priority_score,
        raw=entry.raw if include_raw else None,
    )


def stats_out(stats: LogStats) -> StatsOut:
    return StatsOut(
        total=stats.total,
        critical=stats.critical,
        warning=stats.warning,
        suspicious=stats.suspicious,
        info=stats.info,
        health_score=stats.health_score,
        categories=dict(stats.categories),
        sources=dict(stats.sources),
        timeline=[
            TimelineBucketOut(
                time=b.time,
                critical=b.critical,
                warning=b.warning,
                suspicious=b.suspicious,
                info=b.info,
            )
            for b in stats.timeline
        ],
        burst_detection=[
            BurstBucketOut(time=b.time, count=b.count, is_burst=b.is_burst)
            for b in stats.burst_detection
        ],
    )


def ioc_out(ioc: IOC) -> IOCOut:
    return IOCOut(type=ioc.type, value=ioc.value, severity=ioc.severity.value, count=ioc.count)


def remediation_out(item: RemediationItem) -> RemediationOut:
    return RemediationOut(
        severity=item.severity.value,
        category=item.category.value,
        guidance=item.guidance,
    )
