"""Process-wide logging setup shared by the MCP server and the CLI."""

from __future__ import annotations

import logging
import os
import sys

LOG_LEVEL_ENV = "LOG_SENTINEL_LOG_LEVEL"


def configure_logging() -> None:
    """Configure a reasonable default logging setup.

    The MCP client typically captures stderr; keeping logs concise makes them easier to consume.
    Set ``LOG_SENTINEL_LOG_LEVEL`` (e.g. DEBUG) to change the level; unknown names fall back to INFO.
    """
    level_name = os.getenv(LOG_LEVEL_ENV, "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
