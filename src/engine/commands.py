"""
Command parsing for the text interface.

One command per line, arguments separated by single spaces:

    quit
    print
    score P<n>
    bag P<n>
    place <letters>;<x>;<y>;<H|V>
"""

import re
from typing import Literal, Union
from pydantic import BaseModel, Field

from ..terms.letters import ScrabbleLetter
from .errors import (
    UnknownCommandError,
    InvalidPlayerIdError,
    PlacementSyntaxError,
    InvalidLettersError,
    InvalidArgumentCountError,
)
from .models import Direction, Placement, Position


class QuitCommand(BaseModel):
    kind: Literal["quit"] = "quit"


class PrintCommand(BaseModel):
    kind: Literal["print"] = "print"


class ScoreCommand(BaseModel):
    kind: Literal["score"] = "score"
    player_id: int = Field(..., ge=0)  # 0-based


class BagCommand(BaseModel):
    kind: Literal["bag"] = "bag"
    player_id: int = Field(..., ge=0)  # 0-based


class PlaceCommand(BaseModel):
    kind: Literal["place"] = "place"
    placement: Placement


Command = Union[QuitCommand, PrintCommand, ScoreCommand, BagCommand, PlaceCommand]

# Number of arguments each command takes
ARGUMENT_COUNTS = {
    "quit": 0,
    "print": 0,
    "score": 1,
    "bag": 1,
    "place": 1,
}

PLAYER_ID_PATTERN = r"P([1-9][0-9]*)"
COORDINATE_PATTERN = r"[+-]?[0-9]+"


def parse_player_id(id_str: str) -> int:
    """Turn a user-facing id like 'P2' into a 0-based index."""
    match = re.fullmatch(PLAYER_ID_PATTERN, id_str)
    if not match:
        raise InvalidPlayerIdError(id_str)
    return int(match.group(1)) - 1


def parse_placement(placement_str: str) -> Placement:
    """
    Parse a placement of the form 'letters;x;y;direction'.

    Coordinates are checked first, then the letter count, then the
    direction, and finally the letters themselves.
    """
    fields = placement_str.split(';')
    if len(fields) != 4:
        raise PlacementSyntaxError(placement_str)

    letters, start_x, start_y, direction = fields

    if not re.fullmatch(COORDINATE_PATTERN, start_x) or not re.fullmatch(COORDINATE_PATTERN, start_y):
        raise PlacementSyntaxError(placement_str)

    if not 1 <= len(letters) <= 3:
        raise PlacementSyntaxError(placement_str)

    if direction not in (Direction.HORIZONTAL.value, Direction.VERTICAL.value):
        raise PlacementSyntaxError(placement_str)

    parsed_letters = ScrabbleLetter.from_string(letters)
    if parsed_letters is None:
        raise InvalidLettersError(letters)

    return Placement(
        letters=parsed_letters,
        start=Position(int(start_x), int(start_y)),
        direction=Direction(direction),
    )


def parse_command(line: str) -> Command:
    """
    Parse a single input line into a command.

    Raises:
        CommandParseError: If the line is not a valid command
    """
    name, *args = line.split(' ')

    if name not in ARGUMENT_COUNTS:
        raise UnknownCommandError(line)

    expected = ARGUMENT_COUNTS[name]
    if len(args) != expected:
        raise InvalidArgumentCountError(name, expected, len(args))

    if name == "quit":
        return QuitCommand()
    if name == "print":
        return PrintCommand()
    if name == "score":
        return ScoreCommand(player_id=parse_player_id(args[0]))
    if name == "bag":
        return BagCommand(player_id=parse_player_id(args[0]))
    return PlaceCommand(placement=parse_placement(args[0]))
