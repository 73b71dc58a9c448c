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

import sys
from typing import Callable

from .errors import ExpressionError, InvalidCharacterError
from .expression import Expression, Notation

InputFunc = Callable[[str], str]
OutputFunc = Callable[[str], None]


def _print_error(message: str) -> None:
    print(message, file=sys.stderr)


def prompt_direction(input_func: InputFunc, error_func: OutputFunc) -> Notation:
    while True:
        answer = input_func("Enter the direction (1 for infix, 2 for postfix): ")
        try:
            return Notation.from_direction(answer)
        except ValueError:
            error_func("Invalid direction. Please enter 1 or 2.")


def prompt_expression(
    notation: Notation, input_func: InputFunc, error_func: OutputFunc
) -> Expression:
    while True:
        article = "an" if notation == Notation.INFIX else "a"
        text = input_func(f"Enter {article} {notation} expression: ")
        expression = Expression(text.strip(), notation)
        try:
            expression.validate()
        except InvalidCharacterError as e:
            error_func(f"Invalid expression: {e}")
            continue
        return expression


def show_menu(expression: Expression, output_func: OutputFunc) -> None:
    output_func("Expression Conversion Menu:")
    if expression.notation == Notation.INFIX:
        output_func("1. Convert Infix to Postfix")
    else:
        output_func("1. Convert Postfix to Infix")
    output_func("2. Evaluate Expression")
    output_func("3. Quit")


def run_menu(
    expression: Expression,
    input_func: InputFunc,
    output_func: OutputFunc,
    error_func: OutputFunc,
) -> None:
    while True:
        show_menu(expression, output_func)
        choice = input_func("Enter your choice (1-3): ").strip()
        try:
            if choice == "1":
                result = expression.convert()
                if expression.notation == Notation.INFIX:
                    output_func(f"Postfix expression: {result}")
                else:
                    output_func(f"Infix expression: {result}")
            elif choice == "2":
                output_func(f"Result: {expression.evaluate():g}")
            elif choice == "3":
                output_func("Exiting program.")
                return
            else:
                error_func("Invalid choice. Please enter a number between 1 and 3.")
        except ExpressionError as e:
            error_func(f"Error: {e}")


def main(
    input_func: InputFunc = input,
    output_func: OutputFunc = print,
    error_func: OutputFunc = _print_error,
) -> int:
    """
    Interactive expression converter and evaluator.

    Returns the process exit code. End of input ends the session normally.
    """
    output_func("Welcome to the Expression Converter and Evaluator!")
    try:
        notation = prompt_direction(input_func, error_func)
        expression = prompt_expression(notation, input_func, error_func)
        run_menu(expression, input_func, output_func, error_func)
    except (EOFError, KeyboardInterrupt):
        output_func("")
        output_func("Exiting program.")
    return 0

