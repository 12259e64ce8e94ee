"""
Test suite for command parsing.

Tests all parse cases:
- Valid commands (quit, print, score, bag, place)
- Parse errors (UNKNOWN_COMMAND, INVALID_ARGUMENT_COUNT, INVALID_PLAYER_ID,
  INVALID_PLACEMENT, INVALID_LETTERS)
"""

import pytest
from src.engine import (
    parse_command,
    QuitCommand,
    PrintCommand,
    ScoreCommand,
    BagCommand,
    PlaceCommand,
    Direction,
    Position,
    CommandParseError,
    UnknownCommandError,
    InvalidPlayerIdError,
    PlacementSyntaxError,
    InvalidLettersError,
    InvalidArgumentCountError,
)
from src.terms import ScrabbleLetter


class TestValidCommands:
    """Test cases for well-formed input lines."""

    def test_quit(self):
        assert isinstance(parse_command("quit"), QuitCommand)

    def test_print(self):
        assert isinstance(parse_command("print"), PrintCommand)

    def test_score_is_zero_based(self):
        """User id P1 is internal id 0."""
        command = parse_command("score P1")
        assert isinstance(command, ScoreCommand)
        assert command.player_id == 0

    def test_bag(self):
        command = parse_command("bag P12")
        assert isinstance(command, BagCommand)
        assert command.player_id == 11

    def test_place_horizontal(self):
        command = parse_command("place 12+;0;0;H")
        assert isinstance(command, PlaceCommand)
        placement = command.placement
        assert placement.letters == [ScrabbleLetter.NUM_1, ScrabbleLetter.NUM_2, ScrabbleLetter.PLUS]
        assert placement.start == Position(0, 0)
        assert placement.direction == Direction.HORIZONTAL

    def test_place_vertical(self):
        placement = parse_command("place 7;3;4;V").placement
        assert placement.direction == Direction.VERTICAL
        assert placement.start == Position(3, 4)
        assert placement.positions == [Position(3, 4)]

    def test_place_negative_coordinates_parse(self):
        """Negative coordinates are left for the board to reject."""
        placement = parse_command("place 1;-1;0;H").placement
        assert placement.start == Position(-1, 0)

    def test_placement_string_round_trip(self):
        assert str(parse_command("place 3*;2;5;V").placement) == "3*;2;5;V"


class TestCommandErrors:
    """Test cases for malformed input lines."""

    @pytest.mark.parametrize("line", ["", "jump", "QUIT", "place12+;0;0;H"])
    def test_unknown_command(self, line):
        with pytest.raises(UnknownCommandError) as exc_info:
            parse_command(line)
        assert exc_info.value.code == "UNKNOWN_COMMAND"
        assert str(exc_info.value) == f"Error: '{line}' is not a valid command!"

    @pytest.mark.parametrize("line,command,expected,received", [
        ("quit now", "quit", 0, 1),
        ("print all boards", "print", 0, 2),
        ("score", "score", 1, 0),
        ("bag P1 P2", "bag", 1, 2),
        ("place", "place", 1, 0),
        ("score P1 ", "score", 1, 2),
    ])
    def test_wrong_argument_count(self, line, command, expected, received):
        with pytest.raises(InvalidArgumentCountError) as exc_info:
            parse_command(line)
        err = exc_info.value
        assert (err.command, err.expected, err.received) == (command, expected, received)
        assert str(err) == (
            f"Error: The command '{command}' expects {expected} arguments, but received {received}!"
        )

    @pytest.mark.parametrize("player_id", ["P0", "P01", "1", "p1", "P", "Px", "P-1", "P\u0663"])
    def test_invalid_player_id(self, player_id):
        with pytest.raises(InvalidPlayerIdError) as exc_info:
            parse_command(f"score {player_id}")
        assert str(exc_info.value) == f"Error: '{player_id}' is not a valid player id!"

    @pytest.mark.parametrize("placement", [
        "12+;0;0",
        "12+;0;0;H;1",
        "12+;a;0;H",
        "12+;0;1.5;H",
        ";0;0;H",
        "1234;0;0;H",
        "12+;0;0;D",
        "12+;0;0;h",
        "1;\u0663;0;H",
        "1;0;\uff11;H",
    ])
    def test_invalid_placement(self, placement):
        with pytest.raises(PlacementSyntaxError) as exc_info:
            parse_command(f"place {placement}")
        assert exc_info.value.code == "INVALID_PLACEMENT"
        assert str(exc_info.value) == f"Error: '{placement}' is not a valid placement!"

    def test_invalid_letters(self):
        with pytest.raises(InvalidLettersError) as exc_info:
            parse_command("place 1/2;0;0;H")
        assert str(exc_info.value) == "Error: '1/2' contains invalid letters!"

    def test_letter_count_checked_before_letters(self):
        """Too many letters is a placement error even if they are invalid."""
        with pytest.raises(PlacementSyntaxError):
            parse_command("place abcd;0;0;H")

    def test_all_parse_errors_share_base(self):
        with pytest.raises(CommandParseError):
            parse_command("bag P0")
