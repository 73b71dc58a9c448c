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

import pytest

from rpnexpr import (
    ArithmeticDomainError,
    Associativity,
    DivisionByZeroError,
    ErrorKind,
    InvalidOperatorError,
    associativity,
    is_operator,
    precedence,
)
from rpnexpr.operators import NOT_AN_OPERATOR, apply_operator


@pytest.mark.parametrize(
    "op, expected",
    [
        ("^", 3),
        ("*", 2),
        ("/", 2),
        ("+", 1),
        ("-", 1),
        ("(", NOT_AN_OPERATOR),
        (")", NOT_AN_OPERATOR),
        ("a", NOT_AN_OPERATOR),
        ("%", NOT_AN_OPERATOR),
    ],
)
def test_precedence(op: str, expected: int) -> None:
    assert precedence(op) == expected


def test_non_operators_rank_below_every_operator():
    for op in "+-*/^":
        assert precedence("(") < precedence(op)


@pytest.mark.parametrize(
    "op, expected",
    [
        ("^", Associativity.RIGHT),
        ("+", Associativity.LEFT),
        ("-", Associativity.LEFT),
        ("*", Associativity.LEFT),
        ("/", Associativity.LEFT),
        ("x", Associativity.LEFT),
    ],
)
def test_associativity(op: str, expected: Associativity) -> None:
    assert associativity(op) == expected


def test_is_operator():
    assert all(is_operator(op) for op in "+-*/^")
    assert not any(is_operator(ch) for ch in "()a1%=. ")


class TestApplyOperator:
    @pytest.mark.parametrize(
        "op, lhs, rhs, expected",
        [
            ("+", 2.0, 3.0, 5.0),
            ("-", 2.0, 3.0, -1.0),
            ("*", 4.0, 2.5, 10.0),
            ("/", 7.5, 2.5, 3.0),
            ("^", 2.0, 10.0, 1024.0),
            ("^", 4.0, 0.5, 2.0),
            ("^", 0.0, 0.0, 1.0),
        ],
    )
    def test_arithmetic(self, op: str, lhs: float, rhs: float, expected: float):
        assert apply_operator(op, lhs, rhs) == pytest.approx(expected)

    def test_division_by_zero(self):
        with pytest.raises(DivisionByZeroError) as exc_info:
            apply_operator("/", 5.0, 0.0)
        assert exc_info.value.kind == ErrorKind.DIVISION_BY_ZERO
        assert isinstance(exc_info.value, ZeroDivisionError)

    def test_zero_to_negative_power(self):
        with pytest.raises(DivisionByZeroError):
            apply_operator("^", 0.0, -1.0)

    def test_non_real_power(self):
        with pytest.raises(ArithmeticDomainError):
            apply_operator("^", -8.0, 0.5)

    def test_overflowing_power(self):
        with pytest.raises(ArithmeticDomainError):
            apply_operator("^", 9.0, 387420489.0)

    @pytest.mark.parametrize(
        "op, lhs, rhs",
        [
            ("*", 1e200, 1e200),
            ("/", 1e308, 1e-10),
            ("+", 1.7e308, 1.7e308),
            ("-", -1.7e308, 1.7e308),
        ],
    )
    def test_non_finite_result(self, op: str, lhs: float, rhs: float):
        with pytest.raises(ArithmeticDomainError) as exc_info:
            apply_operator(op, lhs, rhs, position=3)
        assert exc_info.value.position == 3

    def test_position_is_attached(self):
        with pytest.raises(DivisionByZeroError) as exc_info:
            apply_operator("/", 1.0, 0.0, position=4)
        assert exc_info.value.position == 4
        assert str(exc_info.value).startswith("Position 4:")

    def test_unknown_operator(self):
        with pytest.raises(InvalidOperatorError):
            apply_operator("%", 1.0, 2.0)
