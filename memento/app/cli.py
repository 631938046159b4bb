"""Memento CLI.

`memento` (or `memento demo`) runs the scripted walkthrough,
`memento repl` drives the same pair by hand.
"""

from __future__ import annotations

import argparse
import sys

from .. import __version__
from ..config import DemoConfig, load_config
from ..core.caretaker import Caretaker
from ..core.originator import Originator
from ..errors import ConfigError
from .console import ConsoleObserver, DebugLog
from .demo import make_pair, run_demo


REPL_HELP = "m = mutate, b = backup, u = undo, h = history, s = state, q = quit"


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="memento",
        description="Memento - snapshot, back up and undo a stateful object",
    )
    parser.add_argument(
        "--version",
        "-v",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug output",
    )
    parser.add_argument(
        "--initial-state",
        default=None,
        help="Starting state of the originator (default: initial_state)",
    )
    parser.add_argument(
        "--token-length",
        type=int,
        default=None,
        help="Characters kept from each generated state (default: 5)",
    )

    subparsers = parser.add_subparsers(dest="command")
    subparsers.add_parser("demo", help="Run the scripted walkthrough (default)")
    subparsers.add_parser("repl", help="Mutate, back up and undo interactively")

    return parser


def main(args: list[str] | None = None) -> int:
    parser = create_parser()
    parsed = parser.parse_args(args)

    try:
        config = load_config({
            "initialState": parsed.initial_state,
            "tokenLength": parsed.token_length,
            "debug": True if parsed.debug else None,
        })
        originator, caretaker = _build(config)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    log_debug = DebugLog(config.debug)
    command = parsed.command or "demo"
    log_debug(f"command={command} config={config.to_dict()}")

    if command == "demo":
        return run_demo(originator, caretaker)
    if command == "repl":
        return cmd_repl(originator, caretaker)

    parser.print_help()
    return 1


def _build(config: DemoConfig) -> tuple[Originator, Caretaker]:
    return make_pair(
        config.initial_state,
        observer=ConsoleObserver(),
        token_length=config.token_length,
    )


def cmd_repl(originator: Originator, caretaker: Caretaker) -> int:
    print(REPL_HELP)
    while True:
        try:
            raw = input("> ").strip().lower()
        except EOFError:
            print("")
            return 0

        if not raw:
            continue
        if raw in {"q", "quit", "exit"}:
            return 0

        if raw in {"m", "mutate"}:
            originator.mutate()
        elif raw in {"b", "backup"}:
            caretaker.backup()
        elif raw in {"u", "undo"}:
            caretaker.undo()
        elif raw in {"h", "history"}:
            caretaker.show_history()
        elif raw in {"s", "state"}:
            print(f"state: {originator.state}  (history: {caretaker.history_size})")
        else:
            print(f"Unknown command. {REPL_HELP}")


if __name__ == "__main__":
    sys.exit(main())
