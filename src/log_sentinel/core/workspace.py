"""Single loaded-file working set.

Loading replaces everything: entries and stats are rebuilt from the new text
and nothing from the previous load survives. Ids keep counting within one
workspace so a consumer never sees an id reused for a different line.
"""

from __future__ import annotations

import logging

from .builder import EntryBuilder
from .config import AnalysisConfig, resolve_analysis_config
from .iocs import extract_iocs
from .models import IOC, LogEntry, LogStats
from .stats import aggregate
from .timestamps import Clock

logger = logging.getLogger(__name__)


class LogWorkspace:
    def __init__(self, *, config: AnalysisConfig | None = None, now: Clock | None = None) -> None:
        self._config = resolve_analysis_config(config)
        self._builder = EntryBuilder(now=now, max_workers=self._config.max_workers)
        self._entries: list[LogEntry] = []
        self._stats: LogStats | None = None
        self._file_name = ""

    @property
    def config(self) -> AnalysisConfig:
        return self._config

    @property
    def entries(self) -> list[LogEntry]:
        return list(self._entries)

    @property
    def stats(self) -> LogStats | None:
        """Stats of the current load, or None when nothing is loaded."""
        return self._stats

    @property
    def file_name(self) -> str:
        return self._file_name

    @property
    def is_loaded(self) -> bool:
        return self._stats is not None

    def load(self, text: str, file_name: str = "") -> LogStats:
        """Replace the working set with the entries parsed from ``text``."""
        entries = self._builder.build(text)
        stats = aggregate(entries, config=self._config)
        self._entries = entries
        self._stats = stats
        self._file_name = file_name
        logger.debug("Loaded %d entries from %r", stats.total, file_name or "<text>")
        return stats

    def clear(self) -> None:
        self._entries = []
        self._stats = None
        self._file_name = ""

    def iocs(self) -> list[IOC]:
        return extract_iocs(self._entries, severity_policy=self._config.ioc_severity)
