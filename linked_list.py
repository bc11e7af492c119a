from __future__ import annotations

import weakref
from dataclasses import dataclass
from typing import Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass(eq=False)
class _Node(Generic[T]):
    """
    next は所有参照、previous は weakref（前のノードの寿命を延ばさない）

    eq=False なので比較は同一性のみ
    """
    value: T
    next: Optional["_Node[T]"] = None
    _previous: Optional["weakref.ReferenceType[_Node[T]]"] = None

    @property
    def previous(self) -> Optional["_Node[T]"]:
        return None if self._previous is None else self._previous()

    @previous.setter
    def previous(self, node: Optional["_Node[T]"]) -> None:
        self._previous = None if node is None else weakref.ref(node)


class LinkedList(Generic[T]):
    """
    双方向リンクリスト
    append / remove_first / remove_last: O(1)

    head が先頭ノードを所有し、以降は next で連鎖的に所有される。
    tail は末尾への補助参照。
    """

    def __init__(self) -> None:
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
        self._count: int = 0

    def append(self, item: T) -> None:
        node = _Node(value=item)
        if self._tail is None:
            self._head = node
            self._tail = node
        else:
            self._tail.next = node
            node.previous = self._tail
            self._tail = node
        self._count += 1

    def remove_first(self) -> Optional[T]:
        if self._head is None:
            return None
        node = self._head
        self._head = node.next
        node.next = None
        if self._head is None:
            self._tail = None
        else:
            # 削除済みノードへの参照を残さない
            self._head.previous = None
        self._count -= 1
        return node.value

    def remove_last(self) -> Optional[T]:
        if self._tail is None:
            return None
        node = self._tail
        if self._head is node:
            self._head = None
            self._tail = None
            self._count -= 1
            return node.value

        self._tail = node.previous
        if self._tail is not None:
            self._tail.next = None
        node.previous = None
        self._count -= 1
        return node.value

    def first(self) -> Optional[T]:
        return None if self._head is None else self._head.value

    def last(self) -> Optional[T]:
        return None if self._tail is None else self._tail.value

    def count(self) -> int:
        return self._count

    def is_empty(self) -> bool:
        return self._count == 0

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def iter_reversed(self) -> Iterator[T]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.previous
