"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

__all__ = ["ListNode", "LinkedList"]


@dataclass
class ListNode:
    """One link of a :class:`LinkedList`."""

    content: Any
    next: Optional["ListNode"] = None


class LinkedList:
    """Singly linked list supporting insertion at either end."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self.head: Optional[ListNode] = None
        self._tail: Optional[ListNode] = None
        self._size = 0
        for item in items or ():
            self.add_back(item)

    def add_front(self, content: Any) -> ListNode:
        """Insert ``content`` at the start of the list and return its node."""
        node = ListNode(content, self.head)
        self.head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def add_back(self, content: Any) -> ListNode:
        """Append ``content`` to the end of the list and return its node."""
        node = ListNode(content)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def delete_first(self, delete: Optional[Callable[[Any], Any]]) -> None:
        """Unlink the first node, handing its content to ``delete``.

        Nothing happens when ``delete`` is None. An empty list raises
        ``IndexError``.
        """
        if self.head is None:
            raise IndexError("delete from an empty list")
        if delete is None:
            return
        node = self.head
        self.head = node.next
        if self.head is None:
            self._tail = None
        self._size -= 1
        delete(node.content)

    def clear(self, delete: Optional[Callable[[Any], Any]]) -> None:
        """Remove every node, passing each content that is not None to ``delete``.

        Nothing happens when the list is empty or ``delete`` is None.
        """
        if self.head is None or delete is None:
            return
        node = self.head
        self.head = None
        self._tail = None
        self._size = 0
        while node is not None:
            following = node.next
            if node.content is not None:
                delete(node.content)
            node.next = None
            node = following

    def iterate(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on each content in order.

        When ``func`` returns something other than None, that value
        replaces the content of the node.
        """
        node = self.head
        while node is not None:
            result = func(node.content)
            if result is not None:
                node.content = result
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.content
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"