"""Keyword rule tables for severity and category classification.

Each table is an ordered sequence of ``(pattern, label)`` pairs evaluated
top to bottom; the first matching pattern wins. Append new rules where their
precedence belongs, not at the end by habit.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from .models import Category, Severity

L = TypeVar("L")


def _words(*words: str) -> re.Pattern[str]:
    return re.compile(r"\b(?:" + "|".join(words) + r")\b", re.IGNORECASE)


@dataclass(frozen=True)
class RuleTable(Generic[L]):
    """Ordered first-match-wins keyword rules with a fallback label."""

    rules: Sequence[tuple[re.Pattern[str], L]]
    default: L

    def match(self, line: str) -> L | None:
        """Return the label of the first matching rule, or None."""
        for pattern, label in self.rules:
            if pattern.search(line):
                return label
        return None

    def classify(self, line: str) -> L:
        """Return the first matching label, or the table default."""
        label = self.match(line)
        return self.default if label is None else label


SEVERITY_RULES: RuleTable[Severity] = RuleTable(
    rules=(
        (_words("CRITICAL", "CRIT", "FATAL", "EMERGENCY", "EMERG"), Severity.CRITICAL),
        (_words("WARNING", "WARN"), Severity.WARNING),
        (_words("SUSPICIOUS", "SUSPECT", "ALERT", "THREAT"), Severity.SUSPICIOUS),
        (_words("INFO", "INFORMATION", "NOTICE", "DEBUG", "TRACE"), Severity.INFO),
    ),
    default=Severity.INFO,
)

# Applied only when no explicit level keyword is present; not word-bounded,
# so "failed" and "errors" count too.
_ERROR_HINT = re.compile(r"error|fail|crash", re.IGNORECASE)

CATEGORY_RULES: RuleTable[Category] = RuleTable(
    rules=(
        (
            _words(
                "auth",
                "login",
                "logout",
                "password",
                "credential",
                "access denied",
                "unauthorized",
            ),
            Category.AUTHENTICATION,
        ),
        (
            _words("firewall", "blocked", "denied", "drop", "reject", "iptables"),
            Category.FIREWALL,
        ),
        (
            _words("network", "connection", "socket", "tcp", "udp", "dns", "http", "https"),
            Category.NETWORK,
        ),
        (
            _words("file", "disk", "storage", "write", "read", "permission", "chmod"),
            Category.FILE_SYSTEM,
        ),
        (
            _words("process", "service", "daemon", "systemd", "cron", "pid"),
            Category.SYSTEM,
        ),
        (
            _words("database", "sql", "query", "table", "insert", "update", "delete"),
            Category.DATABASE,
        ),
        (
            _words("memory", "cpu", "load", "performance", "swap", "oom"),
            Category.PERFORMANCE,
        ),
        (
            _words("malware", "virus", "trojan", "ransomware", "exploit", "vulnerability"),
            Category.MALWARE,
        ),
        (
            _words("error", "exception", "fail", "crash", "panic", "abort"),
            Category.ERROR,
        ),
    ),
    default=Category.GENERAL,
)


def classify_severity(line: str) -> Severity:
    """Assign a severity: explicit keywords first, then the error heuristic, then INFO."""
    level = SEVERITY_RULES.match(line)
    if level is not None:
        return level
    if _ERROR_HINT.search(line):
        return Severity.WARNING
    return SEVERITY_RULES.default


def classify_category(line: str) -> Category:
    """Assign the first matching category, or General."""
    return CATEGORY_RULES.classify(line)
