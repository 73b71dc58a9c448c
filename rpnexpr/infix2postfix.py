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

from .errors import InvalidOperatorError, UnmatchedParenthesisError
from .operators import Associativity, associativity, precedence
from .stack import Stack
from .utils import TokenType, tokenize_expr

logger = logging.getLogger(__name__)


def _should_pop(top: str, op: str) -> bool:
    if top == "(":
        return False
    top_prec = precedence(top)
    op_prec = precedence(op)
    if top_prec > op_prec:
        return True
    return top_prec == op_prec and associativity(op) == Associativity.LEFT


def infix2postfix(expr: str) -> str:
    R"""
    Convert an infix expression to postfix using the shunting-yard algorithm.

    Every operand is a single alphanumeric character and the output has no
    separators, e.g. ``"3+4*2"`` becomes ``"342*+"``. ``^`` is
    right-associative, so ``"2^3^2"`` becomes ``"232^^"``.

    Args:
        expr: Input infix expression. Whitespace is ignored.

    Returns:
        Converted postfix expression.

    Raises:
        UnmatchedParenthesisError: If a ``)`` has no matching ``(`` or a
            ``(`` is never closed.
        InvalidOperatorError: If a character is neither an operand, an
            operator nor a parenthesis.
    """
    ops: Stack[tuple[int, str]] = Stack()
    output: list[str] = []

    for i, ch, kind in tokenize_expr(expr):
        if kind == TokenType.OPERAND:
            output.append(ch)
        elif kind == TokenType.LEFT_PAREN:
            ops.push((i, ch))
        elif kind == TokenType.RIGHT_PAREN:
            while ops and ops.peek()[1] != "(":
                output.append(ops.pop()[1])
            if ops.pop() is None:
                raise UnmatchedParenthesisError("')' without matching '('", i)
        elif kind == TokenType.OPERATOR:
            while ops and _should_pop(ops.peek()[1], ch):
                output.append(ops.pop()[1])
            ops.push((i, ch))
        else:
            raise InvalidOperatorError(f"Unknown symbol '{ch}'", i)

    while ops:
        pos, op = ops.pop()
        if op == "(":
            raise UnmatchedParenthesisError("'(' is never closed", pos)
        output.append(op)

    result = "".join(output)
    logger.debug("infix2postfix: %r -> %r", expr, result)
    return result
