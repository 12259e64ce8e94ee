"""
Postfix evaluation of board terms.

A term is read left to right as a stack-based postfix expression:
digits push their value, operators pop two operands and push the result.
The operand pushed earlier is the left-hand side, so '52-' evaluates to 3.

Operands are Python ints, so intermediate results have arbitrary precision:
there is no wrap-around, no saturation and no overflow error.
"""

import operator
from typing import Callable, Dict, List, Optional, Union

from .letters import ScrabbleLetter
from .models import Term, EvaluationError, EvaluationResult


OPERATORS: Dict[ScrabbleLetter, Callable[[int, int], int]] = {
    ScrabbleLetter.PLUS: operator.add,
    ScrabbleLetter.MINUS: operator.sub,
    ScrabbleLetter.TIMES: operator.mul,
}


def _failure(term: Term, code: str, message: str, position: Optional[int] = None) -> EvaluationResult:
    return EvaluationResult(
        valid=False,
        errors=[EvaluationError(code=code, message=message, position=position)],
        term=str(term),
    )


def evaluate(term: Union[Term, List[ScrabbleLetter], str]) -> EvaluationResult:
    """
    Evaluate a term as a postfix arithmetic expression.

    Accepts a Term, a list of letters, or a string of display characters.

    Returns an EvaluationResult with:
    - valid: True if the term is a well-formed expression
    - value: the resulting integer (only when valid)
    - errors: NOT_ENOUGH_OPERANDS, EMPTY_TOKEN, UNUSED_OPERANDS or EMPTY_STACK
    """
    if isinstance(term, str):
        term = Term.from_string(term)
    elif not isinstance(term, Term):
        term = Term(tokens=term)

    operand_stack: List[int] = []

    for i, token in enumerate(term.tokens):
        if token.is_operator:
            if len(operand_stack) < 2:
                return _failure(
                    term,
                    "NOT_ENOUGH_OPERANDS",
                    f"The Operator {token.value} expects 2 arguments, "
                    f"but received only {len(operand_stack)}!",
                    position=i,
                )
            second = operand_stack.pop()
            first = operand_stack.pop()
            operand_stack.append(OPERATORS[token](first, second))
        elif token == ScrabbleLetter.EMPTY:
            return _failure(term, "EMPTY_TOKEN", "Found empty token in term!", position=i)
        else:
            operand_stack.append(token.digit_value)

    if len(operand_stack) > 1:
        return _failure(term, "UNUSED_OPERANDS", "Unused arguments are left on the stack!")

    if not operand_stack:
        return _failure(term, "EMPTY_STACK", "Empty operand stack at the end of evaluation!")

    return EvaluationResult(valid=True, value=operand_stack[0], term=str(term))
