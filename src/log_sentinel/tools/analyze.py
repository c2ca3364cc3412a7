"""Tool implementations.

This module contains the *implementation* behind the exposed MCP tools and the
CLI. Keep this layer thin: validate inputs, translate them into core calls,
and return JSON-serializable data structures.
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from log_sentinel.core.config import AnalysisConfig
from log_sentinel.core.loader import read_log_text
from log_sentinel.core.models import Category, Severity, coerce_category, coerce_severity
from log_sentinel.core.query import SORT_KEYS, filter_entries, remediation_plan
from log_sentinel.core.remediation import remediation_for
from log_sentinel.core.timestamps import Clock
from log_sentinel.core.workspace import LogWorkspace

from .schemas import AnalysisResponse, entry_out, ioc_out, remediation_out, stats_out

DEFAULT_LIMIT = 200
HARD_LIMIT = 5000
ALL_SEVERITIES = [s.value for s in Severity]
ALL_CATEGORIES = [c.value for c in Category]


def _parse_severities(names: Sequence[str] | None) -> list[Severity] | None:
    """Parse user-supplied severity names (case-insensitive)."""
    if not names:
        return None
    out: list[Severity] = []
    for s in names:
        if not s.strip():
            continue
        sev = coerce_severity(s)
        if sev is None:
            valid = ", ".join(ALL_SEVERITIES)
            raise ValueError(
                f"Unknown severity '{s}'. Valid values: {valid}. "
                "Tip: severities are case-insensitive (e.g., 'critical', 'WARNING')."
            )
        out.append(sev)
    return out or None


def _parse_categories(names: Sequence[str] | None) -> list[Category] | None:
    """Parse user-supplied category names (case-insensitive)."""
    if not names:
        return None
    out: list[Category] = []
    for s in names:
        if not s.strip():
            continue
        cat = coerce_category(s)
        if cat is None:
            valid = ", ".join(ALL_CATEGORIES)
            raise ValueError(f"Unknown category '{s}'. Valid values: {valid}.")
        out.append(cat)
    return out or None


def _resolve_limit(limit: int | None) -> int:
    if limit is None:
        return DEFAULT_LIMIT
    if limit <= 0:
        raise ValueError("limit must be > 0")
    return min(limit, HARD_LIMIT)


def analyze_text_impl(
    text: str,
    *,
    file_name: str = "",
    severities: Sequence[str] | None = None,
    categories: Sequence[str] | None = None,
    contains: str | None = None,
    date: str | None = None,
    sort_by: str = "line",
    descending: bool = False,
    limit: int | None = None,
    include_raw: bool = False,
    include_iocs: bool = True,
    include_remediation: bool = True,
    config: AnalysisConfig | None = None,
    now: Clock | None = None,
) -> dict[str, Any]:
    """Analyze a text blob.

    Notes
    -----
    - stats, IOCs and remediation always cover every parsed entry;
      the filters only narrow the returned ``entries`` list
    - ``limit`` defaults to DEFAULT_LIMIT and is capped at HARD_LIMIT
    """
    if sort_by not in SORT_KEYS:
        raise ValueError(f"sort_by must be one of: {', '.join(SORT_KEYS)}")
    sev = _parse_severities(severities)
    cats = _parse_categories(categories)
    limit = _resolve_limit(limit)

    workspace = LogWorkspace(config=config, now=now)
    stats = workspace.load(text, file_name=file_name)
    all_entries = workspace.entries

    selected = filter_entries(
        all_entries,
        severities=sev,
        categories=cats,
        contains=contains,
        date=date,
        sort_by=sort_by,  # type: ignore[arg-type]
        descending=descending,
        limit=limit,
    )

    response = AnalysisResponse(
        file=file_name,
        count=len(selected),
        entries=[entry_out(e, include_raw=include_raw) for e in selected],
        stats=stats_out(stats),
        iocs=[ioc_out(i) for i in workspace.iocs()] if include_iocs else None,
        remediation=(
            [remediation_out(r) for r in remediation_plan(all_entries)]
            if include_remediation
            else None
        ),
    )
    return response.model_dump(exclude_none=True)


async def analyze_log_file_impl(
    *,
    log_path: str,
    encoding: str = "utf-8",
    **kwargs: Any,
) -> dict[str, Any]:
    """Implementation for the `analyze_log_file` MCP tool."""
    text = await read_log_text(log_path, encoding=encoding)
    return await asyncio.to_thread(
        analyze_text_impl, text, file_name=Path(log_path).name, **kwargs
    )


def remediation_impl(*, severity: str, category: str) -> dict[str, str]:
    """Implementation for the `get_remediation` MCP tool."""
    return {
        "severity": severity,
        "category": category,
        "guidance": remediation_for(severity, category),
    }
