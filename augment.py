#!/usr/bin/env python3
"""
Convenience wrapper for the augmentation tools.

Forwards to the augment_tools module. Run with --help to see available commands.

Usage:
    python augment.py <command> [options]

Commands:
    augment     Add future and pager types and write the augmented model
    check       Run the pass without writing, reporting type name collisions

Examples:
    python augment.py augment specs/ --summary
    python augment.py check specs/ --strict
"""

import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent


def main() -> int:
    """Forward all arguments to the augment_tools module."""
    return subprocess.call(
        [sys.executable, "-m", "augment_tools"] + sys.argv[1:],
        cwd=ROOT,
    )


if __name__ == "__main__":
    sys.exit(main())
