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

from .errors import (
    EmptyResultError,
    InsufficientOperandsError,
    InsufficientOperatorsError,
    InvalidOperatorError,
)
from .stack import Stack
from .utils import TokenType, tokenize_expr

logger = logging.getLogger(__name__)


def postfix2infix(expr: str) -> str:
    """
    Converts a postfix expression string to a fully parenthesized infix string.

    Args:
        expr: The postfix expression string, e.g. ``"ab+c*"``.

    Returns:
        The infix string, e.g. ``"((a+b)*c)"``.

    Raises:
        InsufficientOperandsError: If an operator has fewer than two operands.
        InsufficientOperatorsError: If operands are left over at the end.
        EmptyResultError: If the expression has no tokens.
        InvalidOperatorError: If a token is neither an operand nor an operator.
    """
    stack: Stack[str] = Stack()

    for i, token, kind in tokenize_expr(expr):
        if kind == TokenType.OPERAND:
            stack.push(token)
            continue

        if kind == TokenType.OPERATOR:
            if len(stack) < 2:
                raise InsufficientOperandsError(
                    f"Stack underflow for operator '{token}'. Need 2, have {len(stack)}.",
                    i,
                )
            rhs = stack.pop()
            lhs = stack.pop()
            stack.push(f"({lhs}{token}{rhs})")
            continue

        raise InvalidOperatorError(f"Invalid or unknown token: '{token}'", i)

    if stack.is_empty():
        raise EmptyResultError("Stack is empty at the end of processing.")
    if len(stack) > 1:
        leftovers = list(reversed(list(stack)))
        raise InsufficientOperatorsError(
            f"Stack must have exactly 1 value at the end, but has {len(stack)}. Leftovers: {leftovers}"
        )

    result = stack.pop()
    logger.debug("postfix2infix: %r -> %r", expr, result)
    return result
