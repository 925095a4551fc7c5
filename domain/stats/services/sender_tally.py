"""线程安全的发件人计数器"""

import threading
from collections import Counter
from typing import Dict


class SenderTally:
    """
    发件人计数器

    多个获取任务并发调用 increment()，每次递增在锁内完成
    “读取-加一-写回”，不会丢失更新。
    snapshot() 在所有任务完成（join）之后调用。
    """

    def __init__(self) -> None:
        self._counts: Counter = Counter()
        self._lock = threading.Lock()

    def increment(self, address: str) -> int:
        """
        递增指定地址的计数

        Args:
            address: 归一化后的发件人地址

        Returns:
            递增前的计数
        """
        with self._lock:
            previous = self._counts[address]
            self._counts[address] = previous + 1
            return previous

    def snapshot(self) -> Dict[str, int]:
        """返回当前计数的副本"""
        with self._lock:
            return dict(self._counts)

    @property
    def total(self) -> int:
        """所有地址计数之和"""
        with self._lock:
            return sum(self._counts.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._counts)
