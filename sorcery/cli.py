"""Command-line entry point."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .engine import GameEngine

_VALUE_OPTIONS = {"-init": "init_file", "-deck1": "deck1_file", "-deck2": "deck2_file"}


@dataclass
class Options:
    """Settings taken from the command line."""

    testing: bool = False
    graphics: bool = False
    init_file: str = ""
    deck1_file: str = ""
    deck2_file: str = ""


def parse_args(argv: Sequence[str]) -> Options:
    """Read the options; unknown arguments are reported and skipped."""
    options = Options()
    args = iter(argv)
    for arg in args:
        if arg in _VALUE_OPTIONS:
            value = next(args, None)
            if value is None:
                print(f"Unknown argument: {arg}", file=sys.stderr)
            else:
                setattr(options, _VALUE_OPTIONS[arg], value)
        elif arg == "-testing":
            options.testing = True
        elif arg == "-graphics":
            options.graphics = True
        else:
            print(f"Unknown argument: {arg}", file=sys.stderr)
    return options


def main(argv: Optional[List[str]] = None) -> int:
    options = parse_args(sys.argv[1:] if argv is None else argv)
    try:
        engine = GameEngine(
            options.testing,
            options.graphics,
            options.init_file,
            options.deck1_file,
            options.deck2_file,
        )
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    engine.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())