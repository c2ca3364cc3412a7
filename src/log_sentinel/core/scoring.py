"""Priority scoring."""

from __future__ import annotations

from collections.abc import Mapping

from .models import Category, Severity, coerce_category, coerce_severity

SEVERITY_BASE: Mapping[Severity, int] = {
    Severity.CRITICAL: 90,
    Severity.SUSPICIOUS: 75,
    Severity.WARNING: 60,
    Severity.INFO: 20,
}
CATEGORY_BONUS: Mapping[Category, int] = {
    Category.MALWARE: 15,
    Category.AUTHENTICATION: 10,
    Category.FIREWALL: 5,
}
DEFAULT_BASE = 20

# Not clamped: scores run from 20 (INFO/General) to 105 (CRITICAL/Malware).
MIN_SCORE = DEFAULT_BASE
MAX_SCORE = max(SEVERITY_BASE.values()) + max(CATEGORY_BONUS.values())


def priority_score(severity: Severity | str, category: Category | str) -> int:
    """Severity base weight plus category bonus."""
    sev = coerce_severity(severity)
    cat = coerce_category(category)
    base = SEVERITY_BASE[sev] if sev is not None else DEFAULT_BASE
    bonus = CATEGORY_BONUS.get(cat, 0) if cat is not None else 0
    return base + bonus
