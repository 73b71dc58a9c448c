"""
Copyright (C) 2025 yuygfgg

This file is part of rpnexpr.

rpnexpr is free software: you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

rpnexpr is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
GNU General Public License for more details.

You should have received a copy of the GNU General Public License
along with rpnexpr.  If not, see <https://www.gnu.org/licenses/>.
"""

import logging
from typing import Mapping, Optional

from .errors import (
    EmptyResultError,
    InsufficientOperandsError,
    InsufficientOperatorsError,
    InvalidOperatorError,
    UnboundOperandError,
)
from .operators import apply_operator
from .stack import Stack
from .utils import TokenType, is_digit, tokenize_expr

logger = logging.getLogger(__name__)


def evaluate_postfix(
    expr: str, variables: Optional[Mapping[str, float]] = None
) -> float:
    """
    Evaluate a postfix expression.

    Digit operands stand for their decimal value. Letter operands are looked
    up in ``variables``.

    Args:
        expr: The postfix expression string, e.g. ``"62/3-"``.
        variables: Optional values for single-letter operands.

    Returns:
        The numeric result.

    Raises:
        InsufficientOperandsError: If an operator has fewer than two operands.
        InsufficientOperatorsError: If more than one value is left at the end.
        EmptyResultError: If the expression has no tokens.
        DivisionByZeroError: If a division or power divides by zero.
        ArithmeticDomainError: If a power has no finite real result.
        UnboundOperandError: If a letter operand has no value.
        InvalidOperatorError: If a token is neither an operand nor an operator.
    """
    stack: Stack[float] = Stack()

    for i, token, kind in tokenize_expr(expr):
        if kind == TokenType.OPERAND:
            if is_digit(token):
                stack.push(float(token))
            elif variables is not None and token in variables:
                stack.push(float(variables[token]))
            else:
                raise UnboundOperandError(f"Operand '{token}' has no value", i)
        elif kind == TokenType.OPERATOR:
            if len(stack) < 2:
                raise InsufficientOperandsError(
                    f"Insufficient operands for '{token}'. Need 2, have {len(stack)}.",
                    i,
                )
            rhs = stack.pop()
            lhs = stack.pop()
            stack.push(apply_operator(token, lhs, rhs, i))
        else:
            raise InvalidOperatorError(f"Invalid or unknown token: '{token}'", i)

    if stack.is_empty():
        raise EmptyResultError("Empty stack after evaluation")
    if len(stack) > 1:
        raise InsufficientOperatorsError(
            f"{len(stack)} values left after evaluation, expected 1"
        )

    result = stack.pop()
    logger.debug("evaluate_postfix: %r -> %r", expr, result)
    return result
