"""Game engine for math scrabble."""

from .models import (
    Direction,
    Position,
    Cell,
    Placement,
    GameConfig,
    ScoredTerm,
    PlacementResult,
    move_position,
    DEFAULT_BOARD_SIZE,
)
from .errors import (
    ScrabbleError,
    CommandParseError,
    UnknownCommandError,
    InvalidPlayerIdError,
    PlacementSyntaxError,
    InvalidLettersError,
    InvalidArgumentCountError,
    ScrabbleRuntimeError,
    PlayerIdOutOfBoundsError,
    PositionOutOfBoundsError,
    IllegalPlacementError,
    MissingLettersError,
    BlockedSpaceError,
)
from .board import Board
from .player import Player
from .commands import (
    Command,
    QuitCommand,
    PrintCommand,
    ScoreCommand,
    BagCommand,
    PlaceCommand,
    parse_command,
)
from .game import Game, resolve_owner

__all__ = [
    # Models
    "Direction",
    "Position",
    "Cell",
    "Placement",
    "GameConfig",
    "ScoredTerm",
    "PlacementResult",
    "move_position",
    "DEFAULT_BOARD_SIZE",
    # Errors
    "ScrabbleError",
    "CommandParseError",
    "UnknownCommandError",
    "InvalidPlayerIdError",
    "PlacementSyntaxError",
    "InvalidLettersError",
    "InvalidArgumentCountError",
    "ScrabbleRuntimeError",
    "PlayerIdOutOfBoundsError",
    "PositionOutOfBoundsError",
    "IllegalPlacementError",
    "MissingLettersError",
    "BlockedSpaceError",
    # State
    "Board",
    "Player",
    "Game",
    "resolve_owner",
    # Commands
    "Command",
    "QuitCommand",
    "PrintCommand",
    "ScoreCommand",
    "BagCommand",
    "PlaceCommand",
    "parse_command",
]
