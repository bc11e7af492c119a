from __future__ import annotations

from typing import Generic, List, Optional, TypeVar

from linked_list import LinkedList

T = TypeVar("T")


class LinkedQueue(Generic[T]):
    """
    LinkedList の上に載せた Queue（FIFO）
    enqueue/dequeue: O(1)  詰め直しは不要、代わりに要素ごとにノードを確保する
    """

    def __init__(self) -> None:
        self._list: LinkedList[T] = LinkedList()

    def enqueue(self, item: T) -> None:
        self._list.append(item)

    def dequeue(self) -> Optional[T]:
        return self._list.remove_first()

    def front(self) -> Optional[T]:
        return self._list.first()

    first = front

    def count(self) -> int:
        return self._list.count()

    def is_empty(self) -> bool:
        return self._list.is_empty()

    def to_list(self) -> List[T]:
        return list(self._list)
