"""
Pydantic models and value types for the game engine.

Contains the placement primitives (Direction, Position, Placement, Cell),
the game configuration, and the records kept for committed placements.
The main logic classes (Board, Player, Game) live in their own files.
"""

from enum import Enum
from typing import List, Optional, NamedTuple, Tuple
from pydantic import BaseModel, Field, field_validator

from ..terms.letters import ScrabbleLetter, letters_to_string


DEFAULT_BOARD_SIZE = 10
MIN_PLAYERS = 2


class Direction(str, Enum):
    """The two placement axes, keyed by their command code."""
    HORIZONTAL = "H"
    VERTICAL = "V"

    @property
    def step(self) -> Tuple[int, int]:
        """Unit step vector along this axis."""
        return (1, 0) if self is Direction.HORIZONTAL else (0, 1)

    def orthogonal(self) -> "Direction":
        return Direction.VERTICAL if self is Direction.HORIZONTAL else Direction.HORIZONTAL


class Position(NamedTuple):
    """A signed board coordinate; may be negative before bounds checks."""
    x: int
    y: int


class Cell(NamedTuple):
    """A board cell: the tile on it and the id of the player who placed it."""
    letter: ScrabbleLetter
    owner: Optional[int]  # None means unowned


EMPTY_CELL = Cell(ScrabbleLetter.EMPTY, None)


def move_position(position: Tuple[int, int], offset: int, direction: Direction) -> Position:
    """Move `offset` steps from `position` along `direction`."""
    dx, dy = direction.step
    return Position(position[0] + offset * dx, position[1] + offset * dy)


class Placement(BaseModel):
    """A pending move: 1-3 letters laid out from a start position."""
    letters: List[ScrabbleLetter] = Field(..., min_length=1, max_length=3)
    start: Position
    direction: Direction

    @property
    def positions(self) -> List[Position]:
        """Board positions covered by the letters, in order."""
        return [move_position(self.start, i, self.direction) for i in range(len(self.letters))]

    def __str__(self) -> str:
        return f"{letters_to_string(self.letters)};{self.start.x};{self.start.y};{self.direction.value}"


class GameConfig(BaseModel):
    """Configuration for a game."""
    players: List[str] = Field(default_factory=list, validate_default=True)
    board_size: int = Field(default=DEFAULT_BOARD_SIZE, ge=1)

    @field_validator("players", mode="before")
    @classmethod
    def coerce_numeric_bags(cls, players):
        # YAML reads an unquoted digit bag such as `- 123` as an int
        if isinstance(players, list):
            return [str(bag) if isinstance(bag, int) and not isinstance(bag, bool) else bag
                    for bag in players]
        return players

    @field_validator("players")
    @classmethod
    def check_players(cls, players: List[str]) -> List[str]:
        if len(players) < MIN_PLAYERS:
            raise ValueError(f"You need at least {MIN_PLAYERS} players to play math scrabble!")
        if any(ScrabbleLetter.from_string(bag) is None for bag in players):
            raise ValueError("At least one of the player bags contains invalid letters!")
        return players

    @property
    def player_bags(self) -> List[List[ScrabbleLetter]]:
        """The bags converted to letters (validity already checked)."""
        return [ScrabbleLetter.from_string(bag) for bag in self.players]


class ScoredTerm(BaseModel):
    """A term that was evaluated as part of a committed placement."""
    term: str
    value: int
    owner: Optional[int] = None  # None when the ownership tally was tied


class PlacementResult(BaseModel):
    """Record of a single committed placement."""
    player_id: int
    turn_number: int
    placement: str
    terms: List[ScoredTerm] = Field(default_factory=list)
    scores_after: List[int] = Field(default_factory=list)
