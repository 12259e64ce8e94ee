"""Test cases for the board and player state."""

from collections import Counter

import pytest
from src.engine import (
    Board,
    Player,
    Cell,
    BlockedSpaceError,
    PositionOutOfBoundsError,
    MissingLettersError,
)
from src.terms import ScrabbleLetter


class TestBoardBounds:
    """Test cases for bounds checks."""

    @pytest.mark.parametrize("pos", [(-1, 0), (0, -1), (10, 0), (0, 10), (-3, 12)])
    def test_out_of_bounds(self, pos):
        """Negative or too large coordinates are out of bounds."""
        assert Board(size=10).is_out_of_bounds(pos) is True

    @pytest.mark.parametrize("pos", [(0, 0), (9, 9), (3, 7)])
    def test_in_bounds(self, pos):
        assert Board(size=10).is_out_of_bounds(pos) is False

    def test_out_of_bounds_is_not_empty(self):
        """Off-board positions are not placeable."""
        board = Board(size=3)
        assert board.is_empty((3, 0)) is False
        assert board.is_empty((0, 0)) is True

    def test_runtime_size(self):
        """The dimension is chosen per instance."""
        board = Board(size=4)
        assert len(board.cells) == 16
        assert board.is_out_of_bounds((4, 0)) is True
        assert board.is_out_of_bounds((3, 3)) is False


class TestBoardWrites:
    """Test cases for placing, reading and clearing cells."""

    def test_place_and_get(self):
        """A placed tile records its owner."""
        board = Board(size=5)
        board.try_place(1, ScrabbleLetter.NUM_4, (2, 3))
        assert board.try_get((2, 3)) == Cell(ScrabbleLetter.NUM_4, 1)
        assert board.is_empty((2, 3)) is False
        assert board.is_empty((3, 2)) is True

    def test_place_on_occupied_cell(self):
        """Occupied cells are blocked and keep their tile."""
        board = Board(size=5)
        board.try_place(0, ScrabbleLetter.NUM_1, (0, 0))
        with pytest.raises(BlockedSpaceError):
            board.try_place(1, ScrabbleLetter.NUM_2, (0, 0))
        assert board.try_get((0, 0)) == Cell(ScrabbleLetter.NUM_1, 0)

    def test_place_out_of_bounds(self):
        """Off-board writes are reported as blocked space."""
        board = Board(size=5)
        with pytest.raises(BlockedSpaceError):
            board.try_place(0, ScrabbleLetter.NUM_1, (5, 0))

    def test_get_out_of_bounds(self):
        board = Board(size=5)
        with pytest.raises(PositionOutOfBoundsError) as exc_info:
            board.try_get((-1, 2))
        assert exc_info.value.code == "POSITION_OUT_OF_BOUNDS"

    def test_clear(self):
        """Clearing resets letter and owner."""
        board = Board(size=5)
        board.try_place(0, ScrabbleLetter.PLUS, (1, 1))
        board.clear((1, 1))
        assert board.try_get((1, 1)) == Cell(ScrabbleLetter.EMPTY, None)
        board.clear((1, 1))
        assert board.is_empty((1, 1)) is True

    def test_clear_out_of_bounds_is_noop(self):
        board = Board(size=2)
        before = board.snapshot()
        board.clear((7, 7))
        assert board.snapshot() == before

    def test_count_tiles(self):
        board = Board(size=3)
        board.try_place(0, ScrabbleLetter.NUM_1, (0, 0))
        board.try_place(1, ScrabbleLetter.NUM_2, (2, 2))
        assert board.count_tiles() == 2


class TestBoardRender:
    """Test cases for the text rendering."""

    def test_empty_board(self):
        assert Board(size=2).render() == "[ ][ ]\n[ ][ ]\n"

    def test_rows_follow_y(self):
        """x runs along a row, y selects the row."""
        board = Board(size=3)
        board.try_place(0, ScrabbleLetter.NUM_1, (0, 0))
        board.try_place(0, ScrabbleLetter.NUM_2, (1, 0))
        board.try_place(0, ScrabbleLetter.TIMES, (2, 1))
        assert str(board) == "[1][2][ ]\n[ ][ ][*]\n[ ][ ][ ]\n"


class TestPlayer:
    """Test cases for bag consumption."""

    def make_player(self, bag: str) -> Player:
        return Player(player_id=0, bag=ScrabbleLetter.from_string(bag))

    def test_consume(self):
        """Consumed letters leave the bag."""
        player = self.make_player("12+3")
        player.try_consume(ScrabbleLetter.from_string("1+"))
        assert player.bag_string == "23"

    def test_consume_duplicates(self):
        """Each requested letter takes its own instance."""
        player = self.make_player("1121")
        player.try_consume(ScrabbleLetter.from_string("11"))
        assert Counter(player.bag_string) == Counter("21")

    def test_consume_missing_is_atomic(self):
        """If any letter is missing, nothing is removed."""
        player = self.make_player("12+")
        with pytest.raises(MissingLettersError):
            player.try_consume(ScrabbleLetter.from_string("1-"))
        assert player.bag_string == "12+"

    def test_consume_more_than_available(self):
        """A letter cannot be used twice."""
        player = self.make_player("1")
        with pytest.raises(MissingLettersError):
            player.try_consume(ScrabbleLetter.from_string("11"))
        assert player.bag_string == "1"

    def test_restore_bag(self):
        """Restoring puts the letters back in their original order."""
        player = self.make_player("12+3")
        before = list(player.bag)
        player.try_consume(ScrabbleLetter.from_string("2+"))
        player.restore_bag(before)
        assert player.bag_string == "12+3"
        assert player.bag is not before

    def test_name_and_state(self):
        player = Player(player_id=2, bag=ScrabbleLetter.from_string("919"))
        assert player.name == "P3"
        state = player.get_state()
        assert state["bag"] == "919"
        assert state["bag_summary"] == {"1": 1, "9": 2}
        assert state["score"] == 0
