"""
Error taxonomy for the game.

Two independent families:
- CommandParseError: malformed input, raised before any game state is touched
- ScrabbleRuntimeError: valid input rejected by the game rules

Every error carries a stable code and renders as a one-line user message.
"""

from typing import Tuple


class ScrabbleError(Exception):
    """Base class for all user-facing game errors."""

    code: str = "ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"Error: {self.message}"


# Parse-time errors

class CommandParseError(ScrabbleError):
    """Input line could not be turned into a command."""


class UnknownCommandError(CommandParseError):
    code = "UNKNOWN_COMMAND"

    def __init__(self, input: str):
        super().__init__(f"'{input}' is not a valid command!")
        self.input = input


class InvalidPlayerIdError(CommandParseError):
    code = "INVALID_PLAYER_ID"

    def __init__(self, player_id: str):
        super().__init__(f"'{player_id}' is not a valid player id!")
        self.player_id = player_id


class PlacementSyntaxError(CommandParseError):
    code = "INVALID_PLACEMENT"

    def __init__(self, placement: str):
        super().__init__(f"'{placement}' is not a valid placement!")
        self.placement = placement


class InvalidLettersError(CommandParseError):
    code = "INVALID_LETTERS"

    def __init__(self, letters: str):
        super().__init__(f"'{letters}' contains invalid letters!")
        self.letters = letters


class InvalidArgumentCountError(CommandParseError):
    code = "INVALID_ARGUMENT_COUNT"

    def __init__(self, command: str, expected: int, received: int):
        super().__init__(
            f"The command '{command}' expects {expected} arguments, but received {received}!"
        )
        self.command = command
        self.expected = expected
        self.received = received


# Run-time errors

class ScrabbleRuntimeError(ScrabbleError):
    """A well-formed command was rejected by the game."""


class PlayerIdOutOfBoundsError(ScrabbleRuntimeError):
    code = "PLAYER_ID_OUT_OF_BOUNDS"

    def __init__(self, player_id: int):
        # Ids are 0-based internally, 1-based for the user
        super().__init__(f"The player with the id {player_id + 1} doesn't exist!")
        self.player_id = player_id


class PositionOutOfBoundsError(ScrabbleRuntimeError):
    code = "POSITION_OUT_OF_BOUNDS"

    def __init__(self, position: Tuple[int, int]):
        super().__init__(f"The position {tuple(position)} is out of bounds!")
        self.position = position


class IllegalPlacementError(ScrabbleRuntimeError):
    code = "INVALID_PLACEMENT"

    def __init__(self, cause: str):
        super().__init__(cause)
        self.cause = cause


class MissingLettersError(ScrabbleRuntimeError):
    code = "MISSING_LETTERS"

    def __init__(self):
        super().__init__(
            "The bag of the current player doesn't contain the right letters for this placement!"
        )


class BlockedSpaceError(ScrabbleRuntimeError):
    code = "BLOCKED_SPACE"

    def __init__(self):
        super().__init__(
            "The placement is out of bounds or tried to overwrite existing letters!"
        )
