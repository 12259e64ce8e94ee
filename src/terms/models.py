"""Data models for term evaluation."""

from typing import List, Optional
from pydantic import BaseModel, Field

from .letters import ScrabbleLetter, letters_to_string


class Term(BaseModel):
    """An ordered run of tiles read off the board along one axis."""
    tokens: List[ScrabbleLetter] = Field(default_factory=list)

    @classmethod
    def from_string(cls, text: str) -> "Term":
        """Build a term from display characters, e.g. '12+'."""
        tokens = ScrabbleLetter.from_string(text)
        if tokens is None:
            raise ValueError(f"'{text}' contains invalid letters")
        return cls(tokens=tokens)

    def is_singleton(self) -> bool:
        return len(self) == 1

    def __len__(self) -> int:
        return len(self.tokens)

    def __str__(self) -> str:
        return letters_to_string(self.tokens)


class EvaluationError(BaseModel):
    """A single evaluation error."""
    code: str
    message: str
    position: Optional[int] = None  # Token index where evaluation stopped


class EvaluationResult(BaseModel):
    """Result of evaluating a term as a postfix expression."""
    valid: bool
    value: Optional[int] = None
    errors: List[EvaluationError] = Field(default_factory=list)
    term: str = ""
