from __future__ import annotations

import argparse
import asyncio
import json
import sys
from collections.abc import Sequence

from log_sentinel.core.query import SORT_KEYS
from log_sentinel.logging_setup import configure_logging
from log_sentinel.tools.analyze import analyze_log_file_impl


def _split_csv(s: str) -> list[str]:
    out = [part.strip() for part in s.split(",") if part.strip()]
    if not out:
        raise argparse.ArgumentTypeError("At least one value must be provided")
    return out


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="log-sentinel",
        description="Classify log lines by severity and category, then summarize them.",
    )
    p.add_argument("log_path")
    p.add_argument(
        "--severity",
        dest="severities",
        type=_split_csv,
        default=None,
        help="Comma-separated (e.g., CRITICAL,WARNING). Default: all",
    )
    p.add_argument(
        "--category",
        dest="categories",
        type=_split_csv,
        default=None,
        help="Comma-separated categories (e.g., Authentication,Malware). Default: all",
    )
    p.add_argument("--contains", default=None, help="Case-insensitive message substring")
    p.add_argument("--date", default=None, help="YYYY-MM-DD (UTC day)")
    p.add_argument("--sort", dest="sort_by", choices=list(SORT_KEYS), default="line")
    p.add_argument("--desc", dest="descending", action="store_true", help="Reverse sort order")
    p.add_argument("--limit", type=int, default=None, help="Max entries to print (default: 200)")
    p.add_argument("--raw", dest="include_raw", action="store_true", help="Include raw line in JSON")
    p.add_argument("--json", dest="as_json", action="store_true", help="Print the full JSON response")
    return p


def main(argv: Sequence[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    configure_logging()

    try:
        result = asyncio.run(
            analyze_log_file_impl(
                log_path=args.log_path,
                severities=args.severities,
                categories=args.categories,
                contains=args.contains,
                date=args.date,
                sort_by=args.sort_by,
                descending=args.descending,
                limit=args.limit,
                include_raw=args.include_raw,
            )
        )
    except FileNotFoundError as e:
        print(str(e), file=sys.stderr)
        raise SystemExit(2)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        raise SystemExit(2)

    if args.as_json:
        print(json.dumps(result, indent=2))
        return

    for e in result["entries"]:
        print(
            f"{e['line_no']} {e['timestamp']} [{e['severity']}] "
            f"({e['category']}, {e['source']}, p={e['priority_score']}) {e['message']}"
        )

    stats = result["stats"]
    bursts = sum(1 for b in stats["burst_detection"] if b["is_burst"])
    print(
        f"\nShowing {result['count']} of {stats['total']} entries. "
        f"critical={stats['critical']} warning={stats['warning']} "
        f"suspicious={stats['suspicious']} info={stats['info']} "
        f"health={stats['health_score']} bursts={bursts}"
    )


if __name__ == "__main__":
    main()
