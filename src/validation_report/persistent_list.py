"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: persistent_list.py
@DateTime: 2026-10-18
@Docs: Immutable singly-linked list with structural sharing.
结构共享的不可变单向链表。

Appending never copies or mutates existing nodes: the new list points at the
old head, so any number of lists may share a common tail.
追加操作从不复制或修改已有节点：新链表指向旧的头节点，因此任意数量的链表可以共享同一尾部。
"""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True, eq=False)
class Node(Generic[T]):
    """A single immutable cell.
    单个不可变节点。

    Attributes:
        value: Stored value.
            存储的值。
        prev: The node appended before this one (None at the root).
            在此之前追加的节点（根节点为 None）。
    """

    value: T
    prev: "Node[T] | None" = None


class PersistentList(Generic[T]):
    """Persistent list whose head is the most recently appended value.
    持久化链表，头部为最近追加的值。

    Examples:
        >>> a = PersistentList().append(1)
        >>> b = a.append(2)
        >>> list(b), list(a)
        ([2, 1], [1])
        >>> b.head.prev is a.head
        True
    """

    __slots__ = ("_head", "_len")

    def __init__(self) -> None:
        self._head: Node[T] | None = None
        self._len = 0

    @classmethod
    def _from_node(cls, head: Node[T] | None, length: int) -> "PersistentList[T]":
        lst: PersistentList[T] = cls.__new__(cls)
        lst._head = head
        lst._len = length
        return lst

    @property
    def head(self) -> Node[T] | None:
        """Return the head node (None when empty).
        返回头节点（为空时返回 None）。
        """
        return self._head

    def append(self, value: T) -> "PersistentList[T]":
        """Return a new list with ``value`` at the head and this list as tail.
        返回以 ``value`` 为头、当前链表为尾的新链表。

        Args:
            value: Value to append.
                要追加的值。

        Returns:
            PersistentList: New list sharing every node of this one.
                与当前链表共享全部节点的新链表。
        """
        return self._from_node(Node(value, self._head), self._len + 1)

    def tail(self) -> "PersistentList[T]":
        """Return the list without its head (empty stays empty).
        返回去掉头节点后的链表（空链表仍为空）。
        """
        if self._head is None:
            return self
        return self._from_node(self._head.prev, self._len - 1)

    def is_empty(self) -> bool:
        return self._len == 0

    def iter(self) -> Iterator[T]:
        """Iterate values head-to-tail (most recent first).
        从头到尾迭代（最近追加的在前）。
        """
        node = self._head
        while node is not None:
            yield node.value
            node = node.prev

    def __iter__(self) -> Iterator[T]:
        return self.iter()

    def __len__(self) -> int:
        return self._len

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, PersistentList):
            return NotImplemented
        if self._len != other._len:
            return False
        a, b = self._head, other._head
        while a is not None and b is not None:
            # Shared suffix: the rest is identical.
            if a is b:
                return True
            if a.value != b.value:
                return False
            a, b = a.prev, b.prev
        return True

    def __hash__(self) -> int:
        return hash(tuple(self.iter()))

    def __repr__(self) -> str:
        return f"PersistentList({list(self.iter())!r})"
