"""Originating host/identifier extraction."""

from __future__ import annotations

import re

UNKNOWN_SOURCE = "Unknown"

_KEYED_SOURCE_RE = re.compile(
    r"\b(?:from|src|source|host|server|client)[=: ]+([^\s,;]+)", re.IGNORECASE
)
_BRACKET_SOURCE_RE = re.compile(r"\[([a-zA-Z0-9._-]+)\]")


def extract_source(line: str) -> str:
    """Return the source token of a line.

    ``host=web-1`` / ``from 10.0.0.5`` style keys win over a bracketed
    ``[hostname]`` token; lines with neither yield ``"Unknown"``.
    """
    m = _KEYED_SOURCE_RE.search(line)
    if m:
        return m.group(1)
    m = _BRACKET_SOURCE_RE.search(line)
    if m:
        return m.group(1)
    return UNKNOWN_SOURCE
