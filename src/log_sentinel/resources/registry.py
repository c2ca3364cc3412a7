"""MCP resource registry.

Resources are addressable by URI and can be fetched by the MCP client on demand.
"""

from __future__ import annotations

from typing import Any

from mcp.server.fastmcp import FastMCP

from log_sentinel.core.classify import CATEGORY_RULES, SEVERITY_RULES
from log_sentinel.core.scoring import CATEGORY_BONUS, SEVERITY_BASE
from log_sentinel.tools.schemas import AnalysisResponse

SAMPLE_LOG = (
    "2024-01-15T10:30:00Z CRITICAL auth login failed from=10.0.0.5\n"
    "2024-01-15T10:30:05Z WARN [fw-edge] firewall blocked inbound tcp from 203.0.113.9\n"
    "2024-01-15T10:31:12Z ALERT possible trojan beacon host=ws-042 to 198.51.100.23\n"
    "Jan 15 10:32:00 db01 postgres[311]: INFO query completed in 12ms\n"
    "01/15/2024 10:33:45 disk write failed on /var/lib/data\n"
)


def describe_rules() -> dict[str, Any]:
    """Return the classification and scoring tables as plain data."""
    return {
        "severity": [
            {"label": label.value, "pattern": pattern.pattern} for pattern, label in SEVERITY_RULES.rules
        ],
        "category": [
            {"label": label.value, "pattern": pattern.pattern} for pattern, label in CATEGORY_RULES.rules
        ],
        "severity_base": {sev.value: score for sev, score in SEVERITY_BASE.items()},
        "category_bonus": {cat.value: bonus for cat, bonus in CATEGORY_BONUS.items()},
    }


def register_resources(mcp: FastMCP) -> None:
    """Register resource handlers on the MCP server."""

    @mcp.resource("app://log-sentinel/help")
    def help_resource() -> str:
        """Return a short list of available resource URIs."""
        return (
            "Resources:\n"
            "- app://log-sentinel/help\n"
            "- app://log-sentinel/config/rules\n"
            "- app://log-sentinel/schemas/analysis-response\n"
            "- app://log-sentinel/examples/sample-log\n"
            "\nTools:\n"
            "- analyze_log_file(log_path, ...)\n"
            "- get_remediation(severity, category)\n"
        )

    @mcp.resource("app://log-sentinel/examples/sample-log")
    def sample_log() -> str:
        """Return a tiny mixed-format sample log for demos and tests."""
        return SAMPLE_LOG

    @mcp.resource("app://log-sentinel/config/rules")
    def rules() -> dict[str, Any]:
        """Return the ordered severity/category rules and score weights."""
        return describe_rules()

    @mcp.resource("app://log-sentinel/schemas/analysis-response")
    def analysis_schema() -> dict[str, Any]:
        """Return the JSON schema for analyze_log_file responses."""
        return AnalysisResponse.model_json_schema()
