from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Generic, List, Optional, TypeVar

T = TypeVar("T")

LOGGER = logging.getLogger(__name__)

# 取り出し済みスロットの印。格納された None とは区別する
_CLEARED: Any = object()


class ArrayQueue(Generic[T]):
    """
    配列（list）で実装した素朴な Queue（FIFO）
    enqueue: O(1)（償却）
    dequeue: O(n)  先頭を取り出すたびに残り全要素がずれる
    """

    def __init__(self) -> None:
        self._data: List[T] = []

    def enqueue(self, item: T) -> None:
        self._data.append(item)

    def dequeue(self) -> Optional[T]:
        if not self._data:
            return None
        return self._data.pop(0)

    def front(self) -> Optional[T]:
        if not self._data:
            return None
        return self._data[0]

    first = front

    def count(self) -> int:
        return len(self._data)

    def is_empty(self) -> bool:
        return self.count() == 0

    def to_list(self) -> List[T]:
        return list(self._data)

    def copy(self) -> "ArrayQueue[T]":
        """
        値として扱うためのコピー（バッキング配列は共有しない）
        """
        other: ArrayQueue[T] = ArrayQueue()
        other._data = list(self._data)
        return other

    __copy__ = copy


@dataclass(frozen=True)
class CompactionPolicy:
    """
    CompactingArrayQueue の詰め直し条件

    len(slots) > min_length かつ head / len(slots) > min_ratio のときだけ詰め直す
    """
    min_length: int = 20
    min_ratio: float = 0.25

    def __post_init__(self) -> None:
        if self.min_length < 0:
            raise ValueError("min_length must be >= 0")
        if not 0 <= self.min_ratio < 1:
            raise ValueError("min_ratio must be in [0, 1)")

    def should_compact(self, head: int, length: int) -> bool:
        if length <= self.min_length:
            return False
        return head / length > self.min_ratio


class CompactingArrayQueue(Generic[T]):
    """
    先頭カーソル付きの配列 Queue（FIFO）
    enqueue: O(1)（償却）
    dequeue: O(1)（償却）

    dequeue ではスロットを _CLEARED にしてカーソルを進めるだけ。
    先頭の空きが増えたら CompactionPolicy に従ってまとめて削除する。
    """

    def __init__(self, policy: Optional[CompactionPolicy] = None) -> None:
        self._slots: List[Any] = []
        self._head = 0
        self._policy = policy or CompactionPolicy()
        self.compactions = 0

    @property
    def head(self) -> int:
        return self._head

    @property
    def policy(self) -> CompactionPolicy:
        return self._policy

    def enqueue(self, item: T) -> None:
        self._slots.append(item)

    def dequeue(self) -> Optional[T]:
        if self.is_empty():
            return None
        item = self._slots[self._head]
        if item is _CLEARED:
            return None

        self._slots[self._head] = _CLEARED
        self._head += 1
        self._compact_if_needed()
        return item

    def front(self) -> Optional[T]:
        if self.is_empty():
            return None
        return self._slots[self._head]

    first = front

    def count(self) -> int:
        return len(self._slots) - self._head

    def is_empty(self) -> bool:
        return self.count() == 0

    def capacity(self) -> int:
        return len(self._slots)

    def to_list(self) -> List[T]:
        return [item for item in self._slots[self._head:] if item is not _CLEARED]

    def slots(self) -> List[Optional[T]]:
        """
        クリア済みスロットも含めた内部配列のコピー（表示用）
        クリア済みは None として返す
        """
        return [None if item is _CLEARED else item for item in self._slots]

    def copy(self) -> "CompactingArrayQueue[T]":
        other: CompactingArrayQueue[T] = CompactingArrayQueue(self._policy)
        other._slots = list(self._slots)
        other._head = self._head
        other.compactions = self.compactions
        return other

    __copy__ = copy

    def _compact_if_needed(self) -> None:
        length = len(self._slots)
        if not self._policy.should_compact(self._head, length):
            return
        LOGGER.debug("compacting %d cleared slots of %d", self._head, length)
        del self._slots[:self._head]
        self._head = 0
        self.compactions += 1
