from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, List, Optional, Protocol, TypeVar

T = TypeVar("T")


class QueueKind(Enum):
    ARRAY = "array"           # 素朴な配列 Queue
    COMPACTING = "compacting"  # 先頭カーソル + 詰め直し
    LINKED = "linked"         # LinkedList ベース

    @classmethod
    def parse(cls, name: Optional[str]) -> Optional["QueueKind"]:
        name = (name or "").strip().lower()
        for kind in cls:
            if kind.value == name:
                return kind
        return None


class FifoQueue(Protocol[T]):
    def enqueue(self, item: T) -> None: ...

    def dequeue(self) -> Optional[T]: ...

    def front(self) -> Optional[T]: ...

    def count(self) -> int: ...

    def is_empty(self) -> bool: ...

    def to_list(self) -> List[T]: ...


class OpType(Enum):
    ENQUEUE = "ENQUEUE"
    DEQUEUE = "DEQUEUE"
    RESET = "RESET"


@dataclass
class Operation:
    seq: int
    op_type: OpType
    kind: Optional[QueueKind]   # None = 全 Queue / reset
    value: Optional[str] = None
    ok: bool = True


@dataclass
class QueueSnapshot:
    kind: QueueKind
    count: int
    front: Optional[str]
    items: List[str]
    # CompactingArrayQueue のときだけ埋まる
    head: Optional[int] = None
    slots: Optional[List[Optional[str]]] = None
    compactions: Optional[int] = None

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["kind"] = self.kind.value
        return data
