from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple

from array_queue import ArrayQueue, CompactingArrayQueue, CompactionPolicy
from linked_queue import LinkedQueue
from models import FifoQueue, Operation, OpType, QueueKind, QueueSnapshot

LOGGER = logging.getLogger(__name__)


class QueueLab:
    """
    3 種類の Queue を並べて操作する教材用の中枢

    - ARRAY:      ArrayQueue（dequeue O(n)）
    - COMPACTING: CompactingArrayQueue（dequeue 償却 O(1)）
    - LINKED:     LinkedQueue（LinkedList に委譲）
    - 操作履歴:   LinkedQueue（古いものから捨てる）
    """

    def __init__(
        self,
        policy: Optional[CompactionPolicy] = None,
        history_limit: int = 50,
    ) -> None:
        if history_limit <= 0:
            raise ValueError("history_limit must be > 0")
        self.policy = policy or CompactionPolicy()
        self.history_limit = history_limit

        self.queues: Dict[QueueKind, FifoQueue[str]] = {}
        self._history: LinkedQueue[Operation] = LinkedQueue()
        self._seq = 0
        self._build_queues()

    # -------------------------
    # 初期化
    # -------------------------
    def _build_queues(self) -> None:
        self.queues = {
            QueueKind.ARRAY: ArrayQueue(),
            QueueKind.COMPACTING: CompactingArrayQueue(self.policy),
            QueueKind.LINKED: LinkedQueue(),
        }

    def reset(self) -> Tuple[bool, str]:
        self._build_queues()
        self._record(OpType.RESET, None)
        LOGGER.info("all queues reset")
        return True, "すべての Queue を初期化しました"

    # -------------------------
    # 操作
    # -------------------------
    def enqueue(self, kind: QueueKind, value: str) -> Tuple[bool, str]:
        value = (value or "").strip()
        if not value:
            LOGGER.warning("rejected blank value for %s", kind.value)
            self._record(OpType.ENQUEUE, kind, ok=False)
            return False, "値を入力してください"

        self.queues[kind].enqueue(value)
        self._record(OpType.ENQUEUE, kind, value)
        LOGGER.debug("enqueue %r -> %s", value, kind.value)
        return True, f"{kind.value} に追加しました：{value}"

    def pop(self, kind: QueueKind) -> Optional[str]:
        value = self.queues[kind].dequeue()
        self._record(OpType.DEQUEUE, kind, value, ok=value is not None)
        if value is not None:
            LOGGER.debug("dequeue %r <- %s", value, kind.value)
        return value

    def dequeue(self, kind: QueueKind) -> Tuple[bool, str]:
        value = self.pop(kind)
        if value is None:
            return False, f"{kind.value} は空です"
        return True, f"{kind.value} から取り出しました：{value}"

    def enqueue_all(self, value: str) -> Tuple[bool, str]:
        value = (value or "").strip()
        if not value:
            self._record(OpType.ENQUEUE, None, ok=False)
            return False, "値を入力してください"

        for q in self.queues.values():
            q.enqueue(value)
        self._record(OpType.ENQUEUE, None, value)
        return True, f"すべての Queue に追加しました：{value}"

    def dequeue_all(self) -> Tuple[bool, str]:
        fronts = {kind: q.front() for kind, q in self.queues.items()}
        distinct = set(fronts.values())
        if distinct == {None}:
            self._record(OpType.DEQUEUE, None, ok=False)
            return False, "すべての Queue が空です"

        # 先頭が揃っていないときは 1 つも取り出さない
        if len(distinct) != 1:
            LOGGER.warning("queues disagree on front: %s", fronts)
            self._record(OpType.DEQUEUE, None, ok=False)
            return False, "Queue ごとに先頭が異なります"

        for q in self.queues.values():
            q.dequeue()
        value = distinct.pop()
        self._record(OpType.DEQUEUE, None, value)
        return True, f"すべての Queue から取り出しました：{value}"

    # -------------------------
    # 表示用
    # -------------------------
    def snapshot(self, kind: QueueKind) -> QueueSnapshot:
        q = self.queues[kind]
        snap = QueueSnapshot(
            kind=kind,
            count=q.count(),
            front=q.front(),
            items=q.to_list(),
        )
        if isinstance(q, CompactingArrayQueue):
            snap.head = q.head
            snap.slots = q.slots()
            snap.compactions = q.compactions
        return snap

    def snapshots(self) -> List[QueueSnapshot]:
        return [self.snapshot(kind) for kind in QueueKind]

    def history(self) -> List[Operation]:
        return self._history.to_list()

    # -------------------------
    # 内部
    # -------------------------
    def _record(
        self,
        op_type: OpType,
        kind: Optional[QueueKind],
        value: Optional[str] = None,
        ok: bool = True,
    ) -> None:
        self._seq += 1
        self._history.enqueue(
            Operation(seq=self._seq, op_type=op_type, kind=kind, value=value, ok=ok)
        )
        while self._history.count() > self.history_limit:
            self._history.dequeue()
