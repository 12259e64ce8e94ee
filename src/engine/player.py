"""
Player state: a depleting bag of letters and a running score.
"""

from typing import Dict, List
from pydantic import BaseModel, Field

from ..terms.letters import ScrabbleLetter, letters_to_string
from .errors import MissingLettersError


class Player(BaseModel):
    """
    A player's private letter bag and accumulated score.

    The bag is a multiset kept in insertion order. It shrinks when a
    placement consumes letters and is never refilled, except when a failed
    placement hands its letters back.

    Attributes:
        player_id: 0-based player index
        bag: Remaining letters
        score: Sum of the values of all terms credited to this player
    """

    player_id: int = Field(default=0, ge=0)
    bag: List[ScrabbleLetter] = Field(default_factory=list)
    score: int = 0

    @property
    def name(self) -> str:
        """User-facing id, e.g. 'P1'."""
        return f"P{self.player_id + 1}"

    @property
    def bag_string(self) -> str:
        """Remaining letters as display characters."""
        return letters_to_string(self.bag)

    @property
    def bag_summary(self) -> Dict[str, int]:
        """Get a count of each letter in the bag."""
        summary: Dict[str, int] = {}
        for letter in self.bag:
            summary[letter.value] = summary.get(letter.value, 0) + 1
        return dict(sorted(summary.items()))

    def try_consume(self, letters: List[ScrabbleLetter]) -> None:
        """
        Remove one instance of each requested letter from the bag.

        All-or-nothing: the removal is done on a working copy that only
        replaces the bag once every letter has been found.

        Args:
            letters: Letters to take, duplicates count separately

        Raises:
            MissingLettersError: If any letter is not (or no longer) in the bag
        """
        remaining = list(self.bag)
        for letter in letters:
            if letter not in remaining:
                raise MissingLettersError()
            remaining.remove(letter)
        self.bag = remaining

    def restore_bag(self, bag: List[ScrabbleLetter]) -> None:
        """Put the bag back exactly as it was before a failed placement."""
        self.bag = list(bag)

    def get_state(self) -> Dict:
        """
        Get the current player state as a dictionary.

        Returns:
            Dictionary containing player state
        """
        return {
            "player_id": self.name,
            "score": self.score,
            "bag": self.bag_string,
            "bag_summary": self.bag_summary,
        }
