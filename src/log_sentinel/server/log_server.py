"""MCP server entrypoint (stdio transport).

This module wires together:
- Tools: callable actions (analyze a log file, look up remediation)
- Resources: addressable data blobs (rule tables, response schema, sample log)
- Prompts: reusable conversation templates that clients can invoke

Run locally (stdio):
    python -m log_sentinel.server.log_server
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from typing import Any

from mcp.server.fastmcp import FastMCP

from log_sentinel.logging_setup import configure_logging
from log_sentinel.prompts.registry import register_prompts
from log_sentinel.resources.registry import register_resources
from log_sentinel.tools.analyze import analyze_log_file_impl, remediation_impl

LOGGER = logging.getLogger(__name__)

mcp = FastMCP("log-sentinel", json_response=True)

register_resources(mcp)
register_prompts(mcp)


@mcp.tool()
async def analyze_log_file(
    log_path: str,
    severities: Sequence[str] | None = None,
    categories: Sequence[str] | None = None,
    contains: str | None = None,
    date: str | None = None,
    sort_by: str = "line",
    descending: bool = False,
    limit: int | None = None,
    include_raw: bool = False,
    include_iocs: bool = True,
    include_remediation: bool = True,
) -> dict[str, Any]:
    """Classify every line of a log file and summarize it.

    Parameters
    ----------
    log_path:
        Path to a local log file. Supports plain text and .gz.
    severities:
        Filter returned entries by severity (CRITICAL, WARNING, SUSPICIOUS, INFO).
        Case-insensitive.
    categories:
        Filter returned entries by category (e.g., ["Authentication", "Malware"]).
    contains:
        Case-insensitive substring filter on the message.
    date:
        YYYY-MM-DD; only entries from that UTC day are returned.
    sort_by:
        "line" (source order), "timestamp" or "priority".
    descending:
        Reverse the sort order.
    limit:
        Maximum number of entries returned (hard-capped in the implementation).
    include_raw:
        Whether to include the original raw log line in each entry.
    include_iocs / include_remediation:
        Whether to include IOC and remediation sections.

    Returns
    -------
    dict:
        {"file", "count", "entries", "stats", "iocs"?, "remediation"?}.
        Stats, IOCs and remediation always cover the whole file.
    """
    return await analyze_log_file_impl(
        log_path=log_path,
        severities=severities,
        categories=categories,
        contains=contains,
        date=date,
        sort_by=sort_by,
        descending=descending,
        limit=limit,
        include_raw=include_raw,
        include_iocs=include_iocs,
        include_remediation=include_remediation,
    )


@mcp.tool()
def get_remediation(severity: str, category: str) -> dict[str, str]:
    """Return remediation guidance for a severity/category pair."""
    return remediation_impl(severity=severity, category=category)


def main(argv: Sequence[str] | None = None) -> None:
    """Start the MCP server over stdio."""
    configure_logging()
    LOGGER.debug("Starting MCP server (transport=stdio)")
    _ = argv or sys.argv[1:]
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
