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

from enum import StrEnum
from typing import Optional


class ErrorKind(StrEnum):
    """
    Category of a conversion or evaluation failure.
    """

    UNMATCHED_PARENTHESIS = "unmatched parenthesis"
    INSUFFICIENT_OPERANDS = "insufficient operands"
    INSUFFICIENT_OPERATORS = "insufficient operators"
    DIVISION_BY_ZERO = "division by zero"
    INVALID_OPERATOR = "invalid operator"
    EMPTY_RESULT = "empty result"
    UNBOUND_OPERAND = "unbound operand"
    ARITHMETIC_DOMAIN = "arithmetic domain"
    INVALID_CHARACTER = "invalid character"


class ExpressionError(Exception):
    """Base error with optional position information"""

    kind: ErrorKind

    def __init__(self, message: str, position: Optional[int] = None):
        self.message = message
        self.position = position
        if position is not None:
            super().__init__(f"Position {position}: {message}")
        else:
            super().__init__(message)


class UnmatchedParenthesisError(ExpressionError):
    kind = ErrorKind.UNMATCHED_PARENTHESIS


class InsufficientOperandsError(ExpressionError):
    kind = ErrorKind.INSUFFICIENT_OPERANDS


class InsufficientOperatorsError(InsufficientOperandsError):
    kind = ErrorKind.INSUFFICIENT_OPERATORS


class DivisionByZeroError(ExpressionError, ZeroDivisionError):
    kind = ErrorKind.DIVISION_BY_ZERO


class InvalidOperatorError(ExpressionError):
    kind = ErrorKind.INVALID_OPERATOR


class EmptyResultError(ExpressionError):
    kind = ErrorKind.EMPTY_RESULT


class UnboundOperandError(ExpressionError):
    kind = ErrorKind.UNBOUND_OPERAND


class ArithmeticDomainError(ExpressionError, ArithmeticError):
    kind = ErrorKind.ARITHMETIC_DOMAIN


class InvalidCharacterError(ExpressionError, ValueError):
    kind = ErrorKind.INVALID_CHARACTER
