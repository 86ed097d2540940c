#!/usr/bin/env python3
"""
Augmentation tools CLI.

Usage:
    python -m augment_tools <command> [options]

Commands:
    augment     Add future and pager types and write the augmented model
    check       Run the pass without writing, reporting type name collisions

Examples:
    python -m augment_tools augment specs/ --output-dir generated/models --summary
    python -m augment_tools augment widgets.yaml --package-version 1.2.0
    python -m augment_tools check specs/ --strict
"""

from __future__ import annotations

import sys


def cmd_augment(args: list[str]) -> int:
    """Augment service descriptions."""
    from augment_tools.augment import main as augment_main
    try:
        augment_main.main(args)
        return 0
    except SystemExit as e:
        return _exit_code(e)


def cmd_check(args: list[str]) -> int:
    """Check service descriptions without writing output."""
    from augment_tools.augment import main as augment_main
    try:
        augment_main.check_main(args)
        return 0
    except SystemExit as e:
        return _exit_code(e)


def _exit_code(e: SystemExit) -> int:
    if isinstance(e.code, int):
        return e.code
    if e.code:
        print(e.code, file=sys.stderr)
        return 1
    return 0


COMMANDS = {
    "augment": (cmd_augment, "Add future and pager types and write the augmented model"),
    "check": (cmd_check, "Run the pass without writing, reporting name collisions"),
}


def main() -> int:
    if len(sys.argv) < 2 or sys.argv[1] in ("-h", "--help"):
        print(__doc__)
        print("Available commands:")
        for name, (_, desc) in COMMANDS.items():
            print(f"  {name:12} {desc}")
        print("\nUse '<command> --help' for command-specific options.")
        return 0

    command = sys.argv[1]
    args = sys.argv[2:]

    if command not in COMMANDS:
        print(f"Unknown command: {command}")
        print(f"Available commands: {', '.join(COMMANDS.keys())}")
        return 1

    handler, _ = COMMANDS[command]
    return handler(args)


if __name__ == "__main__":
    sys.exit(main())
