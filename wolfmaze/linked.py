"""A minimal singly linked list."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    """One link of a singly linked list."""

    content: Any
    next: Optional["Node"] = None

    def __iter__(self) -> Iterator[Any]:
        """Yield the contents of this node and of every node after it."""
        node: Optional[Node] = self
        while node is not None:
            yield node.content
            node = node.next


def _nodes(head: Optional[Node]) -> Iterator[Node]:
    node = head
    while node is not None:
        yield node
        node = node.next


def lst_new(content: Any) -> Node:
    """Return a new node holding *content*, linked to nothing."""
    return Node(content)


def lst_add_front(head: Optional[Node], node: Optional[Node]) -> Optional[Node]:
    """Put *node* before *head* and return the new head.

    With no node to add, the list is returned unchanged.
    """
    if node is None:
        return head
    node.next = head
    return node


def lst_add_back(head: Optional[Node], node: Optional[Node]) -> Optional[Node]:
    """Append *node* after the last node of the list and return the head.

    An empty list becomes *node* itself; with no node to add, the list is
    returned unchanged.
    """
    if node is None:
        return head
    if head is None:
        return node
    last = lst_last(head)
    assert last is not None
    last.next = node
    return head


def lst_last(head: Optional[Node]) -> Optional[Node]:
    """Return the last node of the list, or None for an empty list."""
    last = None
    for last in _nodes(head):
        pass
    return last


def lst_size(head: Optional[Node]) -> int:
    """Return the number of nodes in the list."""
    return sum(1 for _ in _nodes(head))