from __future__ import annotations

import argparse

from tictactoe.config import MAX_DEPTH, setup_logging
from tictactoe.ui.menu import run_menu


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Play Tic Tac Toe on a 3x3 or 4x4 board.")
    ap.add_argument("--depth", type=int, default=MAX_DEPTH, help="Search depth limit for the computer and hints")
    ap.add_argument("--log-level", type=str, default=None, help="Logging level (overrides TICTACTOE_LOG_LEVEL)")
    ap.add_argument("--no-thinking", action="store_true", help="Skip the AI thinking delay")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)
    if args.depth < 1:
        raise SystemExit("--depth must be at least 1")

    setup_logging(args.log_level)
    try:
        run_menu(depth=args.depth, show_thinking=not args.no_thinking)
    except (KeyboardInterrupt, EOFError):
        print("\nBye.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
