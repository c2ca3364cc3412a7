"""MCP prompt registry.

Prompts are predefined conversation/workflow templates that the client can invoke explicitly.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from mcp.server.fastmcp import FastMCP


def _format_list(values: Sequence[str] | str) -> str:
    """Return values as a JSON array literal for prompt display."""
    if isinstance(values, str):
        items = [s.strip().upper() for s in values.split(",") if s.strip()]
    else:
        items = [str(s).strip().upper() for s in values if str(s).strip()]
    if not items:
        return "[]"
    quoted = ", ".join(f'"{item}"' for item in items)
    return f"[{quoted}]"


def register_prompts(mcp: FastMCP) -> None:
    """Register prompt templates on the MCP server."""

    @mcp.prompt()
    def triage_log_file(
        log_path: str,
        severities: Sequence[str] | str = ("CRITICAL", "WARNING", "SUSPICIOUS"),
        date: str | None = None,
        limit: int = 50,
    ) -> list[dict[str, Any]]:
        """Build a prompt for security-focused log triage."""
        call_lines = [
            f"- log_path: {log_path}",
            f"- severities: {_format_list(severities)}",
            "- sort_by: priority",
            "- descending: true",
            f"- limit: {limit}",
            "- include_raw: true",
        ]
        if date is not None:
            call_lines.insert(1, f"- date: {date}")
        call_block = "\n".join(call_lines)
        return [
            {
                "role": "system",
                "content": (
                    "You are a security operations analyst. Provide concise, evidence-based "
                    "summaries from classified log data. Do not invent details; if the "
                    "evidence is insufficient, say so."
                ),
            },
            {
                "role": "user",
                "content": (
                    "Triage the log file using analyze_log_file. Follow this workflow:\n"
                    "- Always call analyze_log_file first with the parameters below.\n"
                    "- Severities must be a list of strings, e.g., [\"CRITICAL\", \"WARNING\"].\n"
                    "- Read stats.health_score and stats.burst_detection (is_burst=true) "
                    "before looking at individual entries.\n"
                    "- Use the iocs list for repeated IP addresses and the remediation list "
                    "for next steps; do not write your own guidance when one is given.\n"
                    "- If no entries are returned, state that clearly.\n\n"
                    "Call analyze_log_file with:\n"
                    f"{call_block}\n\n"
                    "Return this structure:\n"
                    "1) Overall posture (health score, totals, bursts)\n"
                    "2) Top incidents (2-5 entries; include line_no, severity, category and raw line)\n"
                    "3) Indicators of compromise (value, severity, count)\n"
                    "4) Remediation (from the tool output)\n"
                ),
            },
        ]
