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

import regex as re
from enum import StrEnum
from typing import Iterator

from .errors import InvalidCharacterError
from .operators import is_operator

_WHITESPACE_PATTERN = re.compile(r"\s")
_OPERAND_PATTERN = re.compile(r"^[A-Za-z0-9]$")
_DIGIT_PATTERN = re.compile(r"^[0-9]$")
_INFIX_INVALID_PATTERN = re.compile(r"[^A-Za-z0-9()+\-*/^\s]")
_POSTFIX_INVALID_PATTERN = re.compile(r"[^A-Za-z0-9+\-*/^\s]")


class TokenType(StrEnum):
    OPERAND = "operand"
    OPERATOR = "operator"
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"
    UNKNOWN = "unknown"


def is_operand(ch: str) -> bool:
    return bool(_OPERAND_PATTERN.match(ch))


def is_digit(ch: str) -> bool:
    return bool(_DIGIT_PATTERN.match(ch))


def classify(ch: str) -> TokenType:
    if is_operand(ch):
        return TokenType.OPERAND
    if is_operator(ch):
        return TokenType.OPERATOR
    if ch == "(":
        return TokenType.LEFT_PAREN
    if ch == ")":
        return TokenType.RIGHT_PAREN
    return TokenType.UNKNOWN


def tokenize_expr(expr: str) -> Iterator[tuple[int, str, TokenType]]:
    """
    Yield ``(position, char, type)`` for every non-whitespace character.
    """
    for i, ch in enumerate(expr):
        if _WHITESPACE_PATTERN.match(ch):
            continue
        yield i, ch, classify(ch)


def validate_expression(expr: str, notation: str) -> None:
    """
    Check that ``expr`` only uses characters allowed for ``notation``.

    Args:
        expr: Raw expression text.
        notation: ``"infix"`` or ``"postfix"``.

    Raises:
        InvalidCharacterError: If the expression is blank or contains a
            character outside the notation's character set.
        ValueError: If ``notation`` is unknown.
    """
    if notation == "infix":
        pattern = _INFIX_INVALID_PATTERN
    elif notation == "postfix":
        pattern = _POSTFIX_INVALID_PATTERN
    else:
        raise ValueError(f"Unknown notation: {notation!r}")

    if not expr.strip():
        raise InvalidCharacterError("Expression is empty")

    match = pattern.search(expr)
    if match:
        raise InvalidCharacterError(
            f"Character '{match.group(0)}' is not allowed in {notation} notation",
            match.start(),
        )
