"""Tile vocabulary for math scrabble."""

from enum import Enum
from typing import List, Optional


class ScrabbleLetter(str, Enum):
    """
    A single tile symbol.

    The value of each member is its display character. EMPTY marks an
    unoccupied board cell and is never produced by from_char.
    """

    NUM_0 = "0"
    NUM_1 = "1"
    NUM_2 = "2"
    NUM_3 = "3"
    NUM_4 = "4"
    NUM_5 = "5"
    NUM_6 = "6"
    NUM_7 = "7"
    NUM_8 = "8"
    NUM_9 = "9"
    PLUS = "+"
    MINUS = "-"
    TIMES = "*"
    EMPTY = " "

    @classmethod
    def from_char(cls, char: str) -> Optional["ScrabbleLetter"]:
        """Convert a character to a letter, or None if it is not a tile symbol."""
        if char == cls.EMPTY.value:
            return None
        try:
            return cls(char)
        except ValueError:
            return None

    @classmethod
    def from_string(cls, letters: str) -> Optional[List["ScrabbleLetter"]]:
        """Convert every character of a string, or None if any is invalid."""
        converted = [cls.from_char(char) for char in letters]
        if any(letter is None for letter in converted):
            return None
        return converted

    @property
    def is_digit(self) -> bool:
        return self.value.isdigit()

    @property
    def is_operator(self) -> bool:
        return self in (ScrabbleLetter.PLUS, ScrabbleLetter.MINUS, ScrabbleLetter.TIMES)

    @property
    def digit_value(self) -> int:
        """Numeric value of a digit tile."""
        if not self.is_digit:
            raise ValueError(f"'{self.value}' is not a digit")
        return int(self.value)

    def __str__(self) -> str:
        return self.value


def letters_to_string(letters: List[ScrabbleLetter]) -> str:
    """Render a letter sequence as its display characters."""
    return "".join(letter.value for letter in letters)
