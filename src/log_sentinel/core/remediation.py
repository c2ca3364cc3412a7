"""Remediation guidance lookup.

Lookup falls back in a fixed chain:
category-specific guidance -> severity default -> global default.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from .models import Category, Severity, coerce_category, coerce_severity

GLOBAL_DEFAULT = "Review and assess based on context."


@dataclass(frozen=True, slots=True)
class SeverityGuidance:
    """Guidance for one severity: per-category overrides plus a default."""

    default: str
    by_category: Mapping[Category, str]

    def get(self, category: Category | None) -> str:
        if category is not None and category in self.by_category:
            return self.by_category[category]
        return self.default


REMEDIATIONS: Mapping[Severity, SeverityGuidance] = {
    Severity.CRITICAL: SeverityGuidance(
        default=(
            "Escalate to senior security analyst. Isolate affected systems and begin "
            "incident response procedures."
        ),
        by_category={
            Category.AUTHENTICATION: (
                "Immediately lock affected accounts, rotate credentials, and review access "
                "logs for lateral movement."
            ),
            Category.MALWARE: (
                "Isolate affected systems, run full AV scan, check for persistence "
                "mechanisms, and notify incident response team."
            ),
            Category.FIREWALL: (
                "Block source IPs immediately, review firewall rules, check for rule tampering."
            ),
        },
    ),
    Severity.WARNING: SeverityGuidance(
        default="Monitor closely for escalation. Review related logs within the same time window.",
        by_category={
            Category.AUTHENTICATION: (
                "Review failed login patterns, consider temporary account lockout, notify "
                "user if legitimate."
            ),
            Category.NETWORK: (
                "Monitor connection patterns, verify source legitimacy, update network ACLs "
                "if needed."
            ),
        },
    ),
    Severity.SUSPICIOUS: SeverityGuidance(
        default=(
            "Investigate source and pattern. Correlate with other events. Consider adding "
            "to watchlist."
        ),
        by_category={},
    ),
    Severity.INFO: SeverityGuidance(
        default="No action required. Log retained for audit and correlation purposes.",
        by_category={},
    ),
}


def remediation_for(severity: Severity | str, category: Category | str) -> str:
    """Return guidance text for a (severity, category) pair. Never fails."""
    sev = coerce_severity(severity)
    if sev is None:
        return GLOBAL_DEFAULT
    return REMEDIATIONS[sev].get(coerce_category(category))
