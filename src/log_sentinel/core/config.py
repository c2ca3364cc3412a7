"""Analysis configuration and environment overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Literal

IocSeverityPolicy = Literal["first", "worst"]

MAX_WORKERS_ENV = "LOG_SENTINEL_MAX_WORKERS"
CHRONOLOGICAL_TIMELINE_ENV = "LOG_SENTINEL_CHRONOLOGICAL_TIMELINE"
DATE_QUALIFIED_BURSTS_ENV = "LOG_SENTINEL_DATE_QUALIFIED_BURSTS"
IOC_SEVERITY_ENV = "LOG_SENTINEL_IOC_SEVERITY"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True, slots=True)
class AnalysisConfig:
    # Per-line classification fan-out; 1 keeps everything on the calling thread.
    max_workers: int = 1

    # Timeline buckets sort by their "M/D HH:00" key unless this is set.
    chronological_timeline: bool = False

    # Burst buckets are minute-of-day only unless this is set.
    date_qualified_bursts: bool = False
    burst_factor: float = 3.0

    ioc_severity: IocSeverityPolicy = "first"


def _env_bool(name: str) -> bool | None:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return None
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean (true/false)")


def env_max_workers() -> int | None:
    raw = os.getenv(MAX_WORKERS_ENV)
    if raw is None or raw == "":
        return None
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(f"{MAX_WORKERS_ENV} must be an integer") from exc
    if value < 1:
        raise ValueError(f"{MAX_WORKERS_ENV} must be >= 1")
    return value


def _env_ioc_severity() -> IocSeverityPolicy | None:
    raw = os.getenv(IOC_SEVERITY_ENV)
    if raw is None or raw == "":
        return None
    value = raw.strip().lower()
    if value not in ("first", "worst"):
        raise ValueError(f"{IOC_SEVERITY_ENV} must be 'first' or 'worst'")
    return value  # type: ignore[return-value]


def resolve_analysis_config(cfg: AnalysisConfig | None = None) -> AnalysisConfig:
    """Return config with optional env overrides applied."""
    if cfg is None:
        cfg = AnalysisConfig()

    overrides: dict[str, object] = {}

    workers = env_max_workers()
    if workers is not None:
        overrides["max_workers"] = workers

    chrono = _env_bool(CHRONOLOGICAL_TIMELINE_ENV)
    if chrono is not None:
        overrides["chronological_timeline"] = chrono

    dated = _env_bool(DATE_QUALIFIED_BURSTS_ENV)
    if dated is not None:
        overrides["date_qualified_bursts"] = dated

    policy = _env_ioc_severity()
    if policy is not None:
        overrides["ioc_severity"] = policy

    if not overrides:
        return cfg
    return replace(cfg, **overrides)
