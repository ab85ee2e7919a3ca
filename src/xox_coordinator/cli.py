# Area: Shared
"""
xox_coordinator.cli — Command-line interface
============================================

Runs one action against the configured store and prints the result
as JSON.

Usage:
    python -m xox_coordinator start --user alice --mark X
    python -m xox_coordinator join --session 1 --user bob --mark O
    python -m xox_coordinator move --session 1 --user alice --x 0 --y 0
    python -m xox_coordinator resign --session 1 --user bob
    python -m xox_coordinator show --session 1

Configuration comes from --config, environment variables (XOX_*) and a
.env file; --db overrides the database path.
"""

import argparse
import json
import sys
from typing import Any, Dict, List, Optional

from ._config import load_config
from ._shared.logging_config import setup_logging
from .coordinator import SessionCoordinator, build_coordinator
from .views import ActionResult


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="xox_coordinator",
        description="XOX session coordinator - run a single session action",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m xox_coordinator start --user alice
  python -m xox_coordinator join --session 1 --user bob --mark O
  python -m xox_coordinator move --session 1 --user alice --x 1 --y 1
  XOX_DB_PATH=/tmp/xox.db python -m xox_coordinator show --session 1
        """,
    )
    parser.add_argument("--config", type=str, help="Path to JSON config file")
    parser.add_argument("--db", type=str, help="Path to the SQLite database")

    sub = parser.add_subparsers(dest="command", required=True)

    start = sub.add_parser("start", help="Create a session as player 1")
    start.add_argument("--user", required=True)
    start.add_argument("--mark", help="Mark for a first-time user")

    join = sub.add_parser("join", help="Take a free seat in a session")
    join.add_argument("--session", type=int, required=True)
    join.add_argument("--user", required=True)
    join.add_argument("--mark", help="Mark for a first-time user")

    move = sub.add_parser("move", help="Place your mark")
    move.add_argument("--session", type=int, required=True)
    move.add_argument("--user", required=True)
    move.add_argument("--x", type=int, required=True, help="Column, zero-based")
    move.add_argument("--y", type=int, required=True, help="Row, zero-based")

    resign = sub.add_parser("resign", help="Forfeit the game")
    resign.add_argument("--session", type=int, required=True)
    resign.add_argument("--user", required=True)

    show = sub.add_parser("show", help="Print a session")
    show.add_argument("--session", type=int, required=True)

    return parser.parse_args(argv)


def run_command(coordinator: SessionCoordinator, args: argparse.Namespace) -> ActionResult:
    """Dispatch the parsed command to the coordinator."""
    if args.command == "start":
        return coordinator.start(args.user, mark=args.mark)
    if args.command == "join":
        return coordinator.join(args.session, args.user, mark=args.mark)
    if args.command == "move":
        return coordinator.move(args.session, args.user, args.x, args.y)
    if args.command == "resign":
        return coordinator.resign(args.session, args.user)
    return coordinator.view(args.session)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)
    try:
        config: Dict[str, Any] = load_config(args.config)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    if args.db:
        config["db_path"] = args.db

    setup_logging(config["log_file"], config["log_level"])
    coordinator = build_coordinator(config)

    result = run_command(coordinator, args)
    print(json.dumps(result.to_dict(), indent=2))
    return 0 if result.ok else 1
