"""
Main entry point for playing math scrabble.

Usage:
    python -m src.main 12+ 34*
    python -m src.main --config game.yaml --verbose
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO

import yaml
from pydantic import ValidationError

from .engine import Game, GameConfig, QuitCommand, ScrabbleError, parse_command


def load_config(config_path: str) -> dict:
    """Load raw game settings from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {config_path}")
    return data


def build_config(args: argparse.Namespace) -> GameConfig:
    """Merge the config file (if any) with command line overrides."""
    data = load_config(args.config) if args.config else {}

    if args.bags:
        data["players"] = args.bags
    if args.board_size is not None:
        data["board_size"] = args.board_size

    return GameConfig(**data)


def run(game: Game, stdin: TextIO, stdout: TextIO) -> None:
    """Read commands line by line until 'quit' or end of input."""
    for line in stdin:
        line = line.rstrip("\r\n")

        try:
            command = parse_command(line)
            if isinstance(command, QuitCommand):
                break
            output = game.execute_command(command)
        except ScrabbleError as e:
            print(e, file=stdout)
            continue

        if output is not None:
            print(output, end="" if output.endswith("\n") else "\n", file=stdout)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Play math scrabble on the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  quit
  print
  score P<n>
  bag P<n>
  place <letters>;<x>;<y>;<H|V>     (e.g. place 12+;0;0;H)

Example game.yaml:
  board_size: 10
  players:
    - "12+"
    - "34*"
        """
    )
    parser.add_argument(
        "bags",
        nargs="*",
        help="Initial letter bag for each player (digits and + - *)"
    )
    parser.add_argument(
        "--config", "-c",
        help="Path to YAML game configuration"
    )
    parser.add_argument(
        "--board-size",
        type=int,
        help="Width and height of the board (default: 10)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log every placement transaction to stderr"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = build_config(args)
    except ValidationError as e:
        for err in e.errors():
            message = err["msg"].removeprefix("Value error, ")
            print(message)
        return 1
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"Error loading config: {e}")
        return 1

    game = Game.from_config(config)
    run(game, sys.stdin, sys.stdout)

    if args.verbose:
        logging.getLogger(__name__).debug("Final state: %s", game.get_state())

    return 0


if __name__ == "__main__":
    sys.exit(main())
