"""
Game controller and placement engine.

A placement is applied as one transaction: letters are reserved from the
acting player's bag, written to the board, every touched term is derived,
owned and evaluated, and then either all scores are committed and the turn
advances, or the board and bag are restored as if nothing happened.
"""

import logging
from collections import Counter
from typing import Dict, List, Optional, Sequence, Tuple
from pydantic import BaseModel, Field

from ..terms.evaluate import evaluate
from ..terms.letters import ScrabbleLetter
from ..terms.models import Term
from .board import Board
from .commands import (
    Command,
    QuitCommand,
    PrintCommand,
    ScoreCommand,
    BagCommand,
    PlaceCommand,
)
from .errors import (
    BlockedSpaceError,
    IllegalPlacementError,
    PlayerIdOutOfBoundsError,
    PositionOutOfBoundsError,
)
from .models import (
    DEFAULT_BOARD_SIZE,
    Direction,
    GameConfig,
    Placement,
    PlacementResult,
    Position,
    ScoredTerm,
    move_position,
)
from .player import Player


logger = logging.getLogger(__name__)


def resolve_owner(owners: Sequence[Optional[int]]) -> Optional[int]:
    """
    Decide who owns a term from the owners of its cells.

    The most frequent owner wins if strictly ahead of the runner-up.
    A tie between the top two leaves the term unowned. Counts below the
    top two are not considered.
    """
    ranked = Counter(owners).most_common(2)
    if not ranked:
        return None
    if len(ranked) == 2 and ranked[0][1] == ranked[1][1]:
        return None
    return ranked[0][0]


class Game(BaseModel):
    """
    Manages the board, the players and turn order.

    Attributes:
        players: One Player per seat, in turn order
        board: The shared board
        current_player: Index of the player whose turn it is
        is_first_placement: True until the first placement is committed
        turn_history: Every committed placement
    """

    players: List[Player] = Field(default_factory=list)
    board: Board = Field(default_factory=Board)
    current_player: int = 0
    is_first_placement: bool = True
    turn_history: List[PlacementResult] = Field(default_factory=list)

    @classmethod
    def create(
        cls,
        player_bags: List[List[ScrabbleLetter]],
        board_size: int = DEFAULT_BOARD_SIZE,
    ) -> "Game":
        """
        Factory method to create a game from one letter bag per player.

        Args:
            player_bags: Initial letters for each player, in turn order
            board_size: Width and height of the board

        Returns:
            A new Game with an empty board
        """
        players = [
            Player(player_id=i, bag=list(bag))
            for i, bag in enumerate(player_bags)
        ]
        game = cls(players=players, board=Board(size=board_size))
        logger.info(
            "Created game with %d players on a %dx%d board",
            len(players), board_size, board_size,
        )
        return game

    @classmethod
    def from_config(cls, config: GameConfig) -> "Game":
        """Create a game from a validated configuration."""
        return cls.create(config.player_bags, board_size=config.board_size)

    def get_current_player(self) -> Player:
        """Get the player whose turn it is."""
        return self.players[self.current_player]

    def get_player(self, player_id: int) -> Player:
        """
        Look up a player by 0-based id.

        Raises:
            PlayerIdOutOfBoundsError: If no such player is registered
        """
        if not 0 <= player_id < len(self.players):
            raise PlayerIdOutOfBoundsError(player_id)
        return self.players[player_id]

    def execute_command(self, command: Command) -> Optional[str]:
        """
        Run a parsed command against the game.

        Returns:
            Text to show the user, or None for a silent success

        Raises:
            ScrabbleRuntimeError: If the game rejects the command
        """
        if isinstance(command, QuitCommand):
            raise AssertionError("BUG: Quit commands shouldn't be handled by the game!")
        if isinstance(command, PrintCommand):
            return self.board.render()
        if isinstance(command, ScoreCommand):
            return str(self.get_player(command.player_id).score)
        if isinstance(command, BagCommand):
            return self.get_player(command.player_id).bag_string
        if isinstance(command, PlaceCommand):
            self.place(command.placement)
            return None
        raise TypeError(f"Unsupported command: {command!r}")

    def place(self, placement: Placement) -> PlacementResult:
        """
        Apply a placement for the current player as a single transaction.

        Returns:
            The record of the committed placement

        Raises:
            MissingLettersError: If the bag lacks the letters
            BlockedSpaceError: If a target cell is occupied or off the board
            IllegalPlacementError: If a term is invalid or no term is formed
        """
        player = self.get_current_player()
        bag_before = list(player.bag)
        player.try_consume(placement.letters)

        try:
            self._write_placement(placement)
        except BlockedSpaceError:
            player.restore_bag(bag_before)
            logger.debug("%s: rolled back %s (blocked space)", player.name, placement)
            raise

        terms = [
            (term, owner)
            for term, owner in self.get_placement_terms(placement)
            if not term.is_singleton()
        ]
        results = [evaluate(term) for term, _ in terms]

        assert not self.is_first_placement or len(terms) <= 1, \
            "BUG: the first placement can only form the main term"

        if not all(result.valid for result in results):
            self._rollback(placement, bag_before)
            failures = [err.message for result in results for err in result.errors]
            logger.debug("%s: rolled back %s (%s)", player.name, placement, "; ".join(failures))
            raise IllegalPlacementError("The placement leads to invalid terms!")

        if not terms:
            self._rollback(placement, bag_before)
            logger.debug("%s: rolled back %s (only singleton terms)", player.name, placement)
            raise IllegalPlacementError("Terms of length 1 are not allowed!")

        scored_terms = []
        for (term, owner), result in zip(terms, results):
            if owner is not None:
                self.players[owner].score += result.value
            scored_terms.append(ScoredTerm(term=str(term), value=result.value, owner=owner))

        placement_result = PlacementResult(
            player_id=self.current_player,
            turn_number=len(self.turn_history),
            placement=str(placement),
            terms=scored_terms,
            scores_after=[p.score for p in self.players],
        )
        self.turn_history.append(placement_result)
        logger.debug(
            "%s: committed %s, terms %s",
            player.name, placement,
            ", ".join(f"{t.term}={t.value}" for t in scored_terms),
        )

        self._next_player()
        self.is_first_placement = False
        return placement_result

    def _write_placement(self, placement: Placement) -> None:
        """Write every letter, clearing the ones already written if a cell is blocked."""
        written: List[Position] = []
        for letter, pos in zip(placement.letters, placement.positions):
            try:
                self.board.try_place(self.current_player, letter, pos)
            except BlockedSpaceError:
                for written_pos in written:
                    self.board.clear(written_pos)
                raise
            written.append(pos)

    def _rollback(self, placement: Placement, bag_before: List[ScrabbleLetter]) -> None:
        """Undo a fully written placement and restore the bag it was taken from."""
        for pos in placement.positions:
            self.board.clear(pos)
        self.get_current_player().restore_bag(bag_before)

    def get_placement_terms(self, placement: Placement) -> List[Tuple[Term, Optional[int]]]:
        """
        Derive every term touched by a placement, with its owner.

        The first entry is the main term along the placement direction;
        one orthogonal term follows for each placed letter.
        """
        orthogonal = placement.direction.orthogonal()
        terms = [self.get_term(placement.start, placement.direction)]
        for pos in placement.positions:
            terms.append(self.get_term(pos, orthogonal))
        return terms

    def _collect_to_term_end(
        self,
        position: Position,
        direction: Direction,
        step: int,
    ) -> List[Position]:
        """Positions from `position` (inclusive) walking `step` until an empty cell or the edge."""
        positions: List[Position] = []
        current = position
        while not self.board.is_out_of_bounds(current) and not self.board.is_empty(current):
            positions.append(current)
            current = move_position(current, step, direction)
        return positions

    def get_term(self, position: Position, direction: Direction) -> Tuple[Term, Optional[int]]:
        """Read the maximal term through `position` along `direction` and resolve its owner."""
        backward = self._collect_to_term_end(position, direction, -1)
        forward = self._collect_to_term_end(position, direction, 1)
        term_positions = list(reversed(backward)) + forward[1:]

        try:
            cells = [self.board.try_get(pos) for pos in term_positions]
        except PositionOutOfBoundsError as err:
            raise AssertionError("BUG: term is out of bounds!") from err

        term = Term(tokens=[cell.letter for cell in cells])
        return term, resolve_owner([cell.owner for cell in cells])

    def _next_player(self) -> None:
        self.current_player = (self.current_player + 1) % len(self.players)

    def get_state(self) -> Dict:
        """
        Get the current game state as a dictionary.

        Useful for serialization and logging.

        Returns:
            Dictionary containing game state
        """
        return {
            "current_player": self.get_current_player().name,
            "is_first_placement": self.is_first_placement,
            "turns_played": len(self.turn_history),
            "tiles_on_board": self.board.count_tiles(),
            "players": [player.get_state() for player in self.players],
            "board": self.board.render(),
        }
