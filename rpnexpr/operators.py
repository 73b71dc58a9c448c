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

import math
import operator
from enum import StrEnum
from typing import Callable, Optional

from .errors import ArithmeticDomainError, DivisionByZeroError, InvalidOperatorError


class Associativity(StrEnum):
    """
    Grouping direction for consecutive operators of equal precedence.

    Attributes:
        LEFT: ``a-b-c`` groups as ``(a-b)-c``.
        RIGHT: ``a^b^c`` groups as ``a^(b^c)``.
    """

    LEFT = "left"
    RIGHT = "right"


NOT_AN_OPERATOR = -1


def _divide(lhs: float, rhs: float) -> float:
    if rhs == 0:
        raise DivisionByZeroError(f"Division by zero: {lhs:g} / {rhs:g}")
    return lhs / rhs


def _power(lhs: float, rhs: float) -> float:
    if lhs == 0 and rhs < 0:
        raise DivisionByZeroError(
            f"Zero raised to a negative power: {lhs:g} ^ {rhs:g}"
        )
    try:
        return math.pow(lhs, rhs)
    except ValueError:
        raise ArithmeticDomainError(f"Result is not a real number: {lhs:g} ^ {rhs:g}")
    except OverflowError:
        raise ArithmeticDomainError(f"Result is too large: {lhs:g} ^ {rhs:g}")


# symbol -> (precedence, associativity, implementation)
OPERATORS: dict[str, tuple[int, Associativity, Callable[[float, float], float]]] = {
    "+": (1, Associativity.LEFT, operator.add),
    "-": (1, Associativity.LEFT, operator.sub),
    "*": (2, Associativity.LEFT, operator.mul),
    "/": (2, Associativity.LEFT, _divide),
    "^": (3, Associativity.RIGHT, _power),
}


def is_operator(ch: str) -> bool:
    return ch in OPERATORS


def precedence(op: str) -> int:
    """
    Binding strength of ``op``; higher binds tighter.

    Symbols that are not operators (parentheses included) rank below every
    operator so they never win a pop comparison.
    """
    entry = OPERATORS.get(op)
    return entry[0] if entry else NOT_AN_OPERATOR


def associativity(op: str) -> Associativity:
    entry = OPERATORS.get(op)
    return entry[1] if entry else Associativity.LEFT


def apply_operator(
    op: str, lhs: float, rhs: float, position: Optional[int] = None
) -> float:
    """
    Apply the binary operator ``op`` to ``lhs`` and ``rhs``.

    Raises:
        InvalidOperatorError: If ``op`` is not a recognized operator.
        DivisionByZeroError: If the operation divides by zero.
        ArithmeticDomainError: If the result is not a finite real number.
    """
    entry = OPERATORS.get(op)
    if entry is None:
        raise InvalidOperatorError(f"Unknown operator '{op}'", position)
    try:
        result = entry[2](lhs, rhs)
    except (DivisionByZeroError, ArithmeticDomainError) as e:
        if position is None or e.position is not None:
            raise
        raise type(e)(e.message, position) from None
    if not math.isfinite(result):
        raise ArithmeticDomainError(
            f"Result is not finite: {lhs:g} {op} {rhs:g}", position
        )
    return result
