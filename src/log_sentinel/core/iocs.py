"""Indicator-of-compromise extraction."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

from .models import IOC, LogEntry, Severity
from .scoring import SEVERITY_BASE

IP_ADDRESS = "IP Address"

# Shape only; 999.999.999.999 is accepted.
_IPV4_RE = re.compile(r"\b\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3}\b")

_SEVERITY_POLICIES = ("first", "worst")


@dataclass(slots=True)
class _Tally:
    severity: Severity
    count: int


def extract_iocs(entries: Iterable[LogEntry], *, severity_policy: str = "first") -> list[IOC]:
    """Collect IPv4 indicators from non-INFO messages, most frequent first.

    ``severity_policy`` selects which severity an indicator reports: the one
    of the entry it was first seen in ("first") or the highest-priority one
    across all occurrences ("worst"). Ties in count keep first-seen order.
    """
    if severity_policy not in _SEVERITY_POLICIES:
        raise ValueError("severity_policy must be 'first' or 'worst'")

    seen: dict[str, _Tally] = {}
    for e in entries:
        if e.severity is Severity.INFO:
            continue
        for ip in _IPV4_RE.findall(e.message):
            tally = seen.get(ip)
            if tally is None:
                seen[ip] = _Tally(severity=e.severity, count=1)
                continue
            tally.count += 1
            if severity_policy == "worst" and SEVERITY_BASE[e.severity] > SEVERITY_BASE[tally.severity]:
                tally.severity = e.severity

    iocs = [
        IOC(type=IP_ADDRESS, value=ip, severity=t.severity, count=t.count) for ip, t in seen.items()
    ]
    return sorted(iocs, key=lambda ioc: ioc.count, reverse=True)
