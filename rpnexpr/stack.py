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

from typing import Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


class _Node(Generic[T]):
    __slots__ = ("value", "next")

    def __init__(self, value: T, next: "Optional[_Node[T]]" = None):
        self.value = value
        self.next = next


class Stack(Generic[T]):
    """
    Last-in-first-out container backed by a singly linked list.

    The top of the stack is the head node, so push, pop and peek are O(1).
    Popping or peeking an empty stack does not raise; the caller-supplied
    default (``None`` unless given) is returned instead.
    """

    __slots__ = ("_head", "_size")

    def __init__(self) -> None:
        self._head: Optional[_Node[T]] = None
        self._size = 0

    def push(self, value: T) -> None:
        self._head = _Node(value, self._head)
        self._size += 1

    def pop(self, default: Optional[T] = None) -> Optional[T]:
        """
        Remove and return the top element, or return ``default`` if empty.
        """
        if self._head is None:
            return default
        node = self._head
        self._head = node.next
        self._size -= 1
        return node.value

    def peek(self, default: Optional[T] = None) -> Optional[T]:
        """
        Return the top element without removing it, or ``default`` if empty.
        """
        if self._head is None:
            return default
        return self._head.value

    top = peek

    def is_empty(self) -> bool:
        return self._head is None

    def size(self) -> int:
        return self._size

    def clear(self) -> None:
        self._head = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._head is not None

    def __iter__(self) -> Iterator[T]:
        # top to bottom
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        items = ", ".join(repr(v) for v in reversed(list(self)))
        return f"Stack([{items}])"
