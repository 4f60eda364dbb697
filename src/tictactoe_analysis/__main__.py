from __future__ import annotations

import sys

from .cli.analyze_csv import main as analyze_main

COMMANDS = ("analyze", "analysis")
USAGE = "usage: tictactoe-analysis [analyze] [--csv FILE | --results-dir DIR] [--metric ppg] [--outdir figures]"


def main(argv: list[str] | None = None) -> int:
    """`analyze` is the only command and may be left out."""
    args = list(sys.argv[1:] if argv is None else argv)
    if args and args[0].lower() in COMMANDS:
        args = args[1:]
    elif args and not args[0].startswith("-"):
        print(f"Unknown command: {args[0]}", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        return 2
    return analyze_main(args)


if __name__ == "__main__":
    raise SystemExit(main())
