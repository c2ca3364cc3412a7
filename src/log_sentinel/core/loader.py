"""Async log file reading for the tool and CLI layers.

The classification core works on text; this module only gets text out of a
local file (plain or gzip).
"""

from __future__ import annotations

import gzip
from contextlib import asynccontextmanager
from pathlib import Path

import aiofiles
from aiofiles.threadpool import wrap


@asynccontextmanager
async def _open_text(path: Path, *, encoding: str, decode_errors: str):
    """Open a log file for async text reading (plain or gzip)."""
    if path.suffix.lower() == ".gz":
        f = gzip.open(path, mode="rt", encoding=encoding, errors=decode_errors)
        af = wrap(f)
        try:
            yield af
        finally:
            await af.close()
    else:
        async with aiofiles.open(path, encoding=encoding, errors=decode_errors) as f:
            yield f


async def read_log_text(
    log_path: str | Path,
    *,
    encoding: str = "utf-8",
    decode_errors: str = "replace",
) -> str:
    """Return the whole decoded contents of a log file."""
    path = Path(log_path).expanduser()
    if not path.is_file():
        raise FileNotFoundError(f"Log file not found: {path}")

    async with _open_text(path, encoding=encoding, decode_errors=decode_errors) as f:
        return await f.read()
