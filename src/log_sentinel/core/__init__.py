"""Log classification and aggregation core.

Library boundary:

- ``parse(raw_text) -> list[LogEntry]``
- ``aggregate(entries) -> LogStats``
- ``extract_iocs(entries) -> list[IOC]``
- ``remediation_for(severity, category) -> str``
"""

from __future__ import annotations

from .builder import EntryBuilder, parse
from .config import AnalysisConfig, resolve_analysis_config
from .iocs import extract_iocs
from .models import IOC, BurstBucket, Category, LogEntry, LogStats, Severity, TimelineBucket
from .remediation import remediation_for
from .scoring import priority_score
from .stats import aggregate
from .workspace import LogWorkspace

__all__ = [
    "AnalysisConfig",
    "BurstBucket",
    "Category",
    "EntryBuilder",
    "IOC",
    "LogEntry",
    "LogStats",
    "LogWorkspace",
    "Severity",
    "TimelineBucket",
    "aggregate",
    "extract_iocs",
    "parse",
    "priority_score",
    "remediation_for",
    "resolve_analysis_config",
]
