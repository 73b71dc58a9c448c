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

from rpnexpr import Stack


class TestStack:
    def test_new_stack_is_empty(self):
        stack: Stack[int] = Stack()
        assert stack.is_empty()
        assert stack.size() == 0
        assert len(stack) == 0
        assert not stack

    def test_lifo_order(self):
        stack: Stack[int] = Stack()
        for value in (1, 2, 3):
            stack.push(value)
        assert stack.size() == 3
        assert [stack.pop(), stack.pop(), stack.pop()] == [3, 2, 1]
        assert stack.is_empty()

    def test_peek_does_not_remove(self):
        stack: Stack[str] = Stack()
        stack.push("a")
        stack.push("b")
        assert stack.peek() == "b"
        assert stack.top() == "b"
        assert len(stack) == 2

    def test_empty_peek_and_pop_return_default(self):
        """Empty stacks fall back to the default instead of raising."""
        stack: Stack[str] = Stack()
        assert stack.peek() is None
        assert stack.pop() is None
        assert stack.peek("\0") == "\0"
        assert stack.pop("\0") == "\0"
        assert stack.size() == 0

    def test_pop_on_empty_is_noop(self):
        stack: Stack[int] = Stack()
        stack.push(7)
        stack.pop()
        stack.pop()
        assert stack.is_empty()
        stack.push(8)
        assert stack.peek() == 8
        assert len(stack) == 1

    def test_holds_any_element_type(self):
        floats: Stack[float] = Stack()
        floats.push(1.5)
        floats.push(-2.0)
        assert floats.pop() == -2.0

        fragments: Stack[str] = Stack()
        fragments.push("(a+b)")
        assert fragments.peek() == "(a+b)"

    def test_falsy_values_are_not_confused_with_empty(self):
        stack: Stack[float] = Stack()
        stack.push(0.0)
        assert stack
        assert not stack.is_empty()
        assert stack.pop(default=-1.0) == 0.0

    def test_iter_goes_top_to_bottom(self):
        stack: Stack[int] = Stack()
        for value in range(4):
            stack.push(value)
        assert list(stack) == [3, 2, 1, 0]
        assert repr(stack) == "Stack([0, 1, 2, 3])"

    def test_clear(self):
        stack: Stack[int] = Stack()
        stack.push(1)
        stack.push(2)
        stack.clear()
        assert stack.is_empty()
        assert stack.pop() is None

    def test_many_elements(self):
        stack: Stack[int] = Stack()
        for i in range(10000):
            stack.push(i)
        assert len(stack) == 10000
        for i in reversed(range(10000)):
            assert stack.pop() == i
        assert stack.is_empty()
