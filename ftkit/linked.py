"""A singly linked list of arbitrary values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass
class Node:
    """One link of a LinkedList: a value and the node that follows it."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list that keeps its items in insertion order."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self._head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0
        if items is not None:
            for item in items:
                self.push_back(item)

    def push_front(self, content: Any) -> Node:
        """Insert content at the head of the list and return its node."""
        node = Node(content, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def push_back(self, content: Any) -> Node:
        """Append content at the tail of the list and return its node."""
        node = Node(content)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def last(self) -> Optional[Node]:
        """The final node, or None for an empty list."""
        return self._tail

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.content
            node = node.next

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call func on every item, from head to tail."""
        for content in self:
            func(content)

    def map(self, func: Callable[[Any], Any]) -> "LinkedList":
        """A new list holding func(item) for every item; this list is unchanged."""
        return LinkedList(func(content) for content in self)

    def clear(self, release: Optional[Callable[[Any], Any]] = None) -> None:
        """Empty the list, passing each item to release first when one is given."""
        contents = list(self)
        self._head = None
        self._tail = None
        self._size = 0
        if release is not None:
            for content in contents:
                release(content)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"