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

from .errors import (
    ArithmeticDomainError,
    DivisionByZeroError,
    EmptyResultError,
    ErrorKind,
    ExpressionError,
    InsufficientOperandsError,
    InsufficientOperatorsError,
    InvalidCharacterError,
    InvalidOperatorError,
    UnboundOperandError,
    UnmatchedParenthesisError,
)
from .evaluator import evaluate_postfix
from .expression import Expression, Notation
from .infix2postfix import infix2postfix
from .operators import Associativity, associativity, is_operator, precedence
from .postfix2infix import postfix2infix
from .stack import Stack
from .utils import validate_expression

__version__ = "0.0.1"

__all__ = [
    "Stack",
    "Notation",
    "Expression",
    "infix2postfix",
    "postfix2infix",
    "evaluate_postfix",
    "Associativity",
    "precedence",
    "associativity",
    "is_operator",
    "validate_expression",
    "ErrorKind",
    "ExpressionError",
    "UnmatchedParenthesisError",
    "InsufficientOperandsError",
    "InsufficientOperatorsError",
    "DivisionByZeroError",
    "InvalidOperatorError",
    "EmptyResultError",
    "UnboundOperandError",
    "ArithmeticDomainError",
    "InvalidCharacterError",
]
