from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime
from pathlib import Path

import pytest

FIXED_NOW = datetime(2024, 6, 1, 12, 0, 0, tzinfo=UTC)

SECURITY_LOG_LINES = [
    "2024-01-15T10:30:00Z CRITICAL auth login failed from=10.0.0.5",
    "2024-01-15T10:30:05Z WARN [fw-edge] firewall blocked inbound tcp from 203.0.113.9",
    "2024-01-15T10:31:12Z ALERT possible trojan beacon host=ws-042 to 198.51.100.23",
    "2024-01-15T10:32:00Z INFO query completed in 12ms server=db01",
    "2024-01-15T11:02:45Z CRITICAL ransomware signature matched on 203.0.113.9",
]


@pytest.fixture
def fixed_now() -> Callable[[], datetime]:
    return lambda: FIXED_NOW


@pytest.fixture
def security_log_text() -> str:
    return "\n".join(SECURITY_LOG_LINES) + "\n"


@pytest.fixture
def write_log(security_log_text: str) -> Callable[[Path], None]:
    def _write(path: Path) -> None:
        path.write_text(security_log_text, encoding="utf-8")

    return _write
