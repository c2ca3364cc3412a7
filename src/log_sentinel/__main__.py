"""Module entrypoint.

Allows:
    python -m log_sentinel
"""

from __future__ import annotations

from log_sentinel.server.log_server import main

if __name__ == "__main__":
    main()
