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
from enum import StrEnum
from typing import Mapping, Optional, Union

from .evaluator import evaluate_postfix
from .infix2postfix import infix2postfix
from .postfix2infix import postfix2infix
from .utils import validate_expression

logger = logging.getLogger(__name__)


class Notation(StrEnum):
    """
    Notation an expression was entered in.

    Attributes:
        INFIX: Operators between operands, e.g. ``a+b``.
        POSTFIX: Operators after operands, e.g. ``ab+``.
    """

    INFIX = "infix"
    POSTFIX = "postfix"

    @classmethod
    def from_direction(cls, direction: Union[int, str]) -> "Notation":
        """
        Map the console menu codes ``1`` (infix) and ``2`` (postfix).
        """
        code = str(direction).strip()
        if code == "1":
            return cls.INFIX
        if code == "2":
            return cls.POSTFIX
        raise ValueError(f"Invalid direction: {direction!r}. Expected 1 or 2.")


class Expression:
    """
    One expression together with its declared notation.

    The form the expression was entered in is stored at construction. The
    other form stays ``None`` until :meth:`convert` succeeds and is cached
    afterwards.
    """

    def __init__(self, text: str, notation: Union[Notation, str]):
        self._text = text
        self._notation = Notation(notation)
        self._infix: Optional[str] = None
        self._postfix: Optional[str] = None
        if self._notation == Notation.INFIX:
            self._infix = text
        else:
            self._postfix = text

    @property
    def text(self) -> str:
        return self._text

    @property
    def notation(self) -> Notation:
        return self._notation

    @property
    def infix(self) -> Optional[str]:
        return self._infix

    @property
    def postfix(self) -> Optional[str]:
        return self._postfix

    def validate(self) -> None:
        validate_expression(self._text, self._notation)

    def convert(self) -> str:
        """
        Convert to the other notation.

        Infix input produces postfix and postfix input produces infix. The
        conversion always starts from the stored input, so repeated calls
        return the same string.
        """
        if self._notation == Notation.INFIX:
            self._postfix = infix2postfix(self._text)
            return self._postfix
        self._infix = postfix2infix(self._text)
        return self._infix

    def evaluate(self, variables: Optional[Mapping[str, float]] = None) -> float:
        """
        Evaluate the postfix form, converting infix input first if needed.
        """
        if self._postfix is None:
            logger.debug("No postfix form for %r yet, converting first", self._text)
            self.convert()
        return evaluate_postfix(self._postfix, variables)

    def __repr__(self) -> str:
        return f"Expression({self._text!r}, {self._notation.value!r})"
