"""Singly and doubly linked lists, plus a stack and a queue built on them."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Optional


class LinkListObj:
    """A node of a singly linked list.

    Subclasses that are to be sorted override :meth:`is_greater_than` and
    :meth:`is_less_than`.
    """

    def __init__(self) -> None:
        self.next: Optional[LinkListObj] = None

    def link_after(self, obj: Optional[LinkListObj]) -> None:
        """Splice this node in directly after ``obj``."""
        if obj is not None:
            self.next = obj.next
            obj.next = self

    def link_to_end(self, obj: Optional[LinkListObj]) -> None:
        """Append this node after the last node of the chain starting at ``obj``."""
        if obj is not None:
            while obj.next is not None:
                obj = obj.next
            obj.next = self

    def delete_tail(self) -> None:
        """Release every node chained after this one."""
        while self.next is not None:
            dropped = self.next
            self.next = dropped.next
            dropped.next = None

    def is_greater_than(self, other: LinkListObj) -> bool:
        """Ordering hook for sorting; the base node never compares greater."""
        return False

    def is_less_than(self, other: LinkListObj) -> bool:
        """Ordering hook for sorting; the base node never compares less."""
        return False


class LinkList:
    """Manager for a chain of :class:`LinkListObj` nodes."""

    def __init__(self) -> None:
        self._head: Optional[LinkListObj] = None

    def add_to_top(self, node: Optional[LinkListObj]) -> None:
        """Put a single node at the head of the list."""
        if node is not None:
            node.next = self._head
            self._head = node

    def add_to_end(self, node: Optional[LinkListObj]) -> None:
        """Append a node (and whatever it is chained to) at the end of the list."""
        if node is not None:
            if self._head is None:
                self._head = node
            else:
                node.link_to_end(self._head)

    def unlink_top(self) -> None:
        """Detach the head node without handing it back."""
        if self._head is not None:
            old = self._head
            self._head = old.next
            old.next = None

    def unlink(self, node: Optional[LinkListObj]) -> None:
        """Detach ``node`` from the list if it is there."""
        if node is None or self._head is None:
            return
        if self._head is node:
            self.unlink_top()
            return
        trace = self._head
        while trace.next is not node and trace.next is not None:
            trace = trace.next
        if trace.next is node:
            trace.next = node.next
            node.next = None

    def dump_list(self) -> None:
        """Drop every node from the list."""
        while self._head is not None:
            self.unlink_top()

    def is_empty(self) -> bool:
        return self._head is None

    def first(self) -> Optional[LinkListObj]:
        """The head node, or None when empty."""
        return self._head

    def last(self) -> Optional[LinkListObj]:
        """The final node, or None when empty."""
        trace = self._head
        if trace is not None:
            while trace.next is not None:
                trace = trace.next
        return trace

    def get_by_index(self, index: int) -> Optional[LinkListObj]:
        """The node at ``index``, or None if negative or past the end."""
        if index < 0:
            return None
        for position, node in enumerate(self):
            if position == index:
                return node
        return None

    def find_index(self, node: Optional[LinkListObj]) -> int:
        """Position of ``node`` in the list, or -1 if it is not there."""
        if node is not None:
            for position, candidate in enumerate(self):
                if candidate is node:
                    return position
        return -1

    @staticmethod
    def _chain(start: Optional[LinkListObj]) -> Iterator[LinkListObj]:
        while start is not None:
            following = start.next
            yield start
            start = following

    def find_max(self, start: Optional[LinkListObj]) -> Optional[LinkListObj]:
        """The largest node from ``start`` onward, by :meth:`LinkListObj.is_greater_than`."""
        best = start
        for node in self._chain(start):
            if node.is_greater_than(best):
                best = node
        return best

    def find_min(self, start: Optional[LinkListObj]) -> Optional[LinkListObj]:
        """The smallest node from ``start`` onward, by :meth:`LinkListObj.is_less_than`."""
        best = start
        for node in self._chain(start):
            if node.is_less_than(best):
                best = node
        return best

    def sort(self, ascending: bool = True) -> None:
        """Reorder the list using the nodes' comparison hooks."""
        sorted_head: Optional[LinkListObj] = None
        while not self.is_empty():
            pick = self.find_max(self._head) if ascending else self.find_min(self._head)
            if pick is not None:
                self.unlink(pick)
                pick.next = sorted_head
                sorted_head = pick
        self._head = sorted_head

    def loose_list(self) -> None:
        """Forget the chain without touching its nodes; someone else owns it now."""
        self._head = None

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __iter__(self) -> Iterator[LinkListObj]:
        return self._chain(self._head)


class Stack(LinkList):
    """Last in, first out."""

    def push(self, node: Optional[LinkListObj]) -> None:
        self.add_to_top(node)

    def pop(self) -> Optional[LinkListObj]:
        """Remove and return the top node, or None when empty."""
        top = self.first()
        if top is not None:
            self.unlink_top()
        return top

    def peek(self) -> Optional[LinkListObj]:
        return self.first()


class Queue(LinkList):
    """First in, first out."""

    def push(self, node: Optional[LinkListObj]) -> None:
        self.add_to_end(node)

    def pop(self) -> Optional[LinkListObj]:
        """Remove and return the head node, or None when empty."""
        head = self.first()
        if head is not None:
            self.unlink_top()
        return head

    def peek(self) -> Optional[LinkListObj]:
        return self.first()


class DblLinkListObj:
    """A self-managing node of a doubly linked list."""

    def __init__(self) -> None:
        self.prev: Optional[DblLinkListObj] = None
        self.next: Optional[DblLinkListObj] = None

    def link_after(self, obj: Optional[DblLinkListObj]) -> None:
        """Splice this node in directly after ``obj``."""
        if obj is not None:
            self.next = obj.next
            self.prev = obj
            obj.next = self
            if self.next is not None:
                self.next.prev = self

    def link_before(self, obj: Optional[DblLinkListObj]) -> None:
        """Splice this node in directly before ``obj``."""
        if obj is not None:
            self.prev = obj.prev
            self.next = obj
            obj.prev = self
            if self.prev is not None:
                self.prev.next = self

    def first(self) -> DblLinkListObj:
        """The head of the chain this node is in."""
        trace = self
        while trace.prev is not None:
            trace = trace.prev
        return trace

    def last(self) -> DblLinkListObj:
        """The tail end of the chain this node is in."""
        trace = self
        while trace.next is not None:
            trace = trace.next
        return trace

    def link_to_end(self, obj: Optional[DblLinkListObj]) -> None:
        """Link after the last node of the chain ``obj`` belongs to."""
        if obj is not None:
            self.link_after(obj.last())

    def link_to_start(self, obj: Optional[DblLinkListObj]) -> None:
        """Link before the first node of the chain ``obj`` belongs to."""
        if obj is not None:
            self.link_before(obj.first())

    def unhook(self) -> None:
        """Leave the chain, closing the gap behind."""
        if self.prev is not None:
            self.prev.next = self.next
        if self.next is not None:
            self.next.prev = self.prev
        self.next = None
        self.prev = None

    def get_tail_obj(self, index: int) -> Optional[DblLinkListObj]:
        """The ``index``-th node after this one (0 is the next node), or None."""
        trace = self.next
        count = 0
        while trace is not None and count < index:
            count += 1
            trace = trace.next
        return trace

    def dump_tail(self) -> None:
        """Unhook every node after this one."""
        while self.next is not None:
            self.next.unhook()

    def dump_head(self) -> None:
        """Unhook every node before this one."""
        while self.prev is not None:
            self.prev.unhook()

    def dump_list(self) -> None:
        """Unhook everything on both sides, leaving this node alone."""
        self.dump_head()
        self.dump_tail()

    def count_tail(self) -> int:
        """Number of nodes after this one."""
        count = 0
        trace = self.next
        while trace is not None:
            count += 1
            trace = trace.next
        return count

    def count_head(self) -> int:
        """Number of nodes before this one."""
        count = 0
        trace = self.prev
        while trace is not None:
            count += 1
            trace = trace.prev
        return count