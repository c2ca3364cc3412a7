from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

import pytest

from log_sentinel.resources.registry import SAMPLE_LOG, describe_rules
from log_sentinel.tools import analyze
from log_sentinel.tools.analyze import (
    HARD_LIMIT,
    analyze_log_file_impl,
    analyze_text_impl,
    remediation_impl,
)
from log_sentinel.tools.schemas import AnalysisResponse


def test_analyze_text_impl_full_response(security_log_text: str) -> None:
    out = analyze_text_impl(security_log_text, file_name="app.log")

    assert out["file"] == "app.log"
    assert out["count"] == 5
    first = out["entries"][0]
    assert first == {
        "id": "log-1",
        "line_no": 1,
        "timestamp": "2024-01-15T10:30:00+00:00",
        "severity": "CRITICAL",
        "category": "Authentication",
        "source": "10.0.0.5",
        "message": "2024-01-15T10:30:00Z CRITICAL auth login failed from=10.0.0.5",
        "priority_score": 100,
    }
    assert out["stats"]["total"] == 5
    assert out["stats"]["health_score"] == 0
    assert out["iocs"][0] == {
        "type": "IP Address",
        "value": "203.0.113.9",
        "severity": "WARNING",
        "count": 2,
    }
    assert out["remediation"][0]["severity"] == "CRITICAL"
    AnalysisResponse.model_validate(out)


def test_filters_narrow_entries_but_not_stats(security_log_text: str) -> None:
    out = analyze_text_impl(
        security_log_text,
        severities=["critical"],
        sort_by="priority",
        descending=True,
        include_raw=True,
        include_iocs=False,
        include_remediation=False,
    )

    assert out["count"] == 2
    assert [e["line_no"] for e in out["entries"]] == [5, 1]
    assert all("raw" in e for e in out["entries"])
    assert out["stats"]["total"] == 5
    assert "iocs" not in out
    assert "remediation" not in out


def test_category_filter_and_contains(security_log_text: str) -> None:
    out = analyze_text_impl(security_log_text, categories=["malware"], contains="trojan")
    assert [e["line_no"] for e in out["entries"]] == [3]


def test_unknown_severity_raises(security_log_text: str) -> None:
    with pytest.raises(ValueError, match="Unknown severity 'loud'"):
        analyze_text_impl(security_log_text, severities=["loud"])


def test_unknown_category_raises(security_log_text: str) -> None:
    with pytest.raises(ValueError, match="Unknown category"):
        analyze_text_impl(security_log_text, categories=["Spam"])


@pytest.mark.parametrize("limit", [0, -3])
def test_non_positive_limit_raises(security_log_text: str, limit: int) -> None:
    with pytest.raises(ValueError, match="limit"):
        analyze_text_impl(security_log_text, limit=limit)


def test_limit_is_hard_capped(fixed_now) -> None:
    text = "INFO tick\n" * (HARD_LIMIT + 10)
    out = analyze_text_impl(text, limit=HARD_LIMIT * 2, include_iocs=False, now=fixed_now)
    assert out["count"] == HARD_LIMIT
    assert out["stats"]["total"] == HARD_LIMIT + 10


def test_empty_text(fixed_now) -> None:
    out = analyze_text_impl("", now=fixed_now)
    assert out["count"] == 0
    assert out["entries"] == []
    assert out["stats"]["health_score"] == 100
    assert out["iocs"] == []
    assert out["remediation"] == []


@pytest.mark.asyncio
async def test_analyze_log_file_impl(tmp_path: Path, write_log) -> None:
    path = tmp_path / "app.log"
    write_log(path)

    out = await analyze_log_file_impl(log_path=str(path), severities=["warning"])

    assert out["file"] == "app.log"
    assert out["count"] == 1
    assert out["entries"][0]["category"] == "Firewall"


@pytest.mark.asyncio
async def test_analyze_log_file_impl_runs_analysis_off_the_event_loop(
    tmp_path: Path, write_log, monkeypatch: pytest.MonkeyPatch
) -> None:
    path = tmp_path / "app.log"
    write_log(path)
    threads: list[int] = []
    real_impl = analyze.analyze_text_impl

    def recording_impl(text: str, **kwargs: Any) -> dict[str, Any]:
        threads.append(threading.get_ident())
        return real_impl(text, **kwargs)

    monkeypatch.setattr(analyze, "analyze_text_impl", recording_impl)

    out = await analyze_log_file_impl(log_path=str(path))

    assert out["count"] == 5
    assert threads and threads[0] != threading.get_ident()


@pytest.mark.asyncio
async def test_analyze_log_file_impl_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        await analyze_log_file_impl(log_path=str(tmp_path / "nope.log"))


def test_remediation_impl() -> None:
    out = remediation_impl(severity="CRITICAL", category="Malware")
    assert out["guidance"].startswith("Isolate affected systems")
    assert remediation_impl(severity="?", category="?")["guidance"] == (
        "Review and assess based on context."
    )


def test_sample_log_and_rules_resource() -> None:
    out = analyze_text_impl(SAMPLE_LOG)
    assert out["stats"]["total"] == 5

    rules = describe_rules()
    assert [r["label"] for r in rules["severity"]] == ["CRITICAL", "WARNING", "SUSPICIOUS", "INFO"]
    assert rules["category"][0]["label"] == "Authentication"
    assert rules["category_bonus"]["Malware"] == 15
