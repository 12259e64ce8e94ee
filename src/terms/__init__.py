"""Postfix term evaluation for math scrabble."""

from .letters import ScrabbleLetter, letters_to_string
from .models import Term, EvaluationError, EvaluationResult
from .evaluate import evaluate, OPERATORS

__all__ = [
    # Tiles
    "ScrabbleLetter",
    "letters_to_string",
    # Models
    "Term",
    "EvaluationError",
    "EvaluationResult",
    # Evaluation
    "evaluate",
    "OPERATORS",
]
