from __future__ import annotations

import pytest

from log_sentinel.core.classify import (
    CATEGORY_RULES,
    SEVERITY_RULES,
    classify_category,
    classify_severity,
)
from log_sentinel.core.models import Category, Severity
from log_sentinel.core.scoring import MAX_SCORE, MIN_SCORE, priority_score
from log_sentinel.core.source import extract_source


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("CRITICAL disk warning", Severity.CRITICAL),
        ("kernel: EMERG panic", Severity.CRITICAL),
        ("fatal: out of memory", Severity.CRITICAL),
        ("warn: retrying", Severity.WARNING),
        ("Warning: alert raised", Severity.WARNING),
        ("ALERT suspicious binary", Severity.SUSPICIOUS),
        ("possible threat actor", Severity.SUSPICIOUS),
        ("notice: user logged in", Severity.INFO),
        ("debug payload", Severity.INFO),
    ],
)
def test_severity_keywords_first_match_wins(line: str, expected: Severity) -> None:
    assert classify_severity(line) is expected


def test_severity_keywords_are_word_bounded() -> None:
    assert classify_severity("CRITICALITY assessment done") is Severity.INFO


def test_error_heuristic_promotes_to_warning() -> None:
    assert classify_severity("connection failed") is Severity.WARNING
    assert classify_severity("3 errors detected") is Severity.WARNING
    assert classify_severity("worker crashed") is Severity.WARNING


def test_explicit_keyword_beats_error_heuristic() -> None:
    assert classify_severity("INFO job failed, retrying") is Severity.INFO


def test_unmatched_severity_defaults_to_info() -> None:
    assert classify_severity("all good") is Severity.INFO


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("auth login failed", Category.AUTHENTICATION),
        ("Access Denied for admin", Category.AUTHENTICATION),
        ("firewall blocked packet", Category.FIREWALL),
        ("tcp connection reset", Category.NETWORK),
        ("disk full", Category.FILE_SYSTEM),
        ("systemd service restarted", Category.SYSTEM),
        ("slow query on orders", Category.DATABASE),
        ("cpu load high", Category.PERFORMANCE),
        ("trojan quarantined", Category.MALWARE),
        ("unhandled exception", Category.ERROR),
        ("hello world", Category.GENERAL),
    ],
)
def test_category_rules(line: str, expected: Category) -> None:
    assert classify_category(line) is expected


def test_category_order_decides_overlaps() -> None:
    # Malware is listed before Error.
    assert classify_category("malware scan error") is Category.MALWARE
    # Authentication is listed before Database.
    assert classify_category("login to database refused") is Category.AUTHENTICATION


def test_rule_tables_cover_closed_sets() -> None:
    assert [label for _, label in SEVERITY_RULES.rules] == [
        Severity.CRITICAL,
        Severity.WARNING,
        Severity.SUSPICIOUS,
        Severity.INFO,
    ]
    assert len(CATEGORY_RULES.rules) == 9
    assert CATEGORY_RULES.default is Category.GENERAL


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("auth failed from=10.0.0.5", "10.0.0.5"),
        ("accepted connection from 192.168.1.7, port 22", "192.168.1.7"),
        ("HOST: web-01; status ok", "web-01"),
        ("src = gw.local blocked", "gw.local"),
        ("[fw-edge] dropped packet", "fw-edge"),
        ("[gw] client=laptop-3 connected", "laptop-3"),
        ("nothing to see", "Unknown"),
    ],
)
def test_extract_source(line: str, expected: str) -> None:
    assert extract_source(line) == expected


def test_priority_score() -> None:
    assert priority_score(Severity.CRITICAL, Category.MALWARE) == 105
    assert priority_score(Severity.INFO, Category.GENERAL) == 20
    assert priority_score(Severity.CRITICAL, Category.AUTHENTICATION) == 100
    assert priority_score(Severity.SUSPICIOUS, Category.FIREWALL) == 80
    assert priority_score(Severity.WARNING, Category.NETWORK) == 60


def test_priority_score_accepts_names_and_defaults_unknowns() -> None:
    assert priority_score("critical", "malware") == 105
    assert priority_score("BOGUS", "Nope") == 20
    assert (MIN_SCORE, MAX_SCORE) == (20, 105)
