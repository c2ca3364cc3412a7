"""Raw text -> LogEntry composition.

This is the only place raw text becomes domain records: every non-blank line
produces exactly one entry, in source line order.
"""

from __future__ import annotations

import itertools
import logging
import re
from collections.abc import Iterator
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from datetime import datetime

from .classify import classify_category, classify_severity
from .config import env_max_workers
from .models import Category, LogEntry, Severity
from .scoring import priority_score
from .source import extract_source
from .timestamps import Clock, extract_timestamp

logger = logging.getLogger(__name__)

ID_PREFIX = "log-"

# Inputs shorter than this are classified on the calling thread.
_MIN_PARALLEL_LINES = 2048

# Only LF, CRLF and CR end a line; form feeds, NEL and the like stay inline.
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True, slots=True)
class LineFeatures:
    """Everything derived from one line except its id."""

    line_no: int
    timestamp: datetime
    severity: Severity
    category: Category
    source: str
    message: str
    raw: str
    priority_score: int


def iter_lines(text: str) -> Iterator[tuple[int, str]]:
    """Yield ``(line_no, line)`` for non-blank lines split on LF, CRLF or CR."""
    for line_no, line in enumerate(_LINE_BREAK.split(text), start=1):
        if line.strip():
            yield line_no, line


def classify_line(line_no: int, line: str, *, now: Clock | None = None) -> LineFeatures:
    """Run every extractor over one line. Pure apart from the fallback clock."""
    severity = classify_severity(line)
    category = classify_category(line)
    return LineFeatures(
        line_no=line_no,
        timestamp=extract_timestamp(line, now=now),
        severity=severity,
        category=category,
        source=extract_source(line),
        message=line.strip(),
        raw=line,
        priority_score=priority_score(severity, category),
    )


def _resolve_max_workers(max_workers: int | None) -> int:
    if max_workers is not None:
        if max_workers < 1:
            raise ValueError("max_workers must be >= 1")
        return max_workers

    env = env_max_workers()
    return env if env is not None else 1


class EntryBuilder:
    """Turns text into entries and owns the id sequence for them.

    Ids are ``log-1``, ``log-2``, ... and keep counting across ``build`` calls
    on the same builder. Separate builders never share a counter.
    """

    def __init__(
        self,
        *,
        start: int = 1,
        now: Clock | None = None,
        max_workers: int | None = None,
    ) -> None:
        self._ids = itertools.count(start)
        self._now = now
        self._max_workers = _resolve_max_workers(max_workers)

    def next_id(self) -> str:
        return f"{ID_PREFIX}{next(self._ids)}"

    def _classify_all(self, lines: list[tuple[int, str]]) -> list[LineFeatures]:
        workers = self._max_workers
        if workers <= 1 or len(lines) < _MIN_PARALLEL_LINES:
            return [classify_line(n, line, now=self._now) for n, line in lines]

        logger.debug("Classifying %d lines on %d workers", len(lines), workers)
        chunk = max(1, len(lines) // (workers * 4))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            # map() yields in submission order, so line order survives.
            return list(
                executor.map(
                    lambda item: classify_line(item[0], item[1], now=self._now),
                    lines,
                    chunksize=chunk,
                )
            )

    def build(self, text: str) -> list[LogEntry]:
        """Classify every non-blank line of ``text`` into a LogEntry."""
        features = self._classify_all(list(iter_lines(text)))
        # Ids are handed out only after classification, in line order.
        entries = [
            LogEntry(
                id=self.next_id(),
                line_no=f.line_no,
                timestamp=f.timestamp,
                severity=f.severity,
                category=f.category,
                source=f.source,
                message=f.message,
                raw=f.raw,
                priority_score=f.priority_score,
            )
            for f in features
        ]
        logger.debug("Built %d entries", len(entries))
        return entries


def parse(raw_text: str, *, now: Clock | None = None, max_workers: int | None = None) -> list[LogEntry]:
    """Parse a text blob into entries using a fresh id sequence."""
    return EntryBuilder(now=now, max_workers=max_workers).build(raw_text)
