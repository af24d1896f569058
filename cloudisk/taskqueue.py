"""Thread-safe FIFO of server tasks with a shutdown broadcast."""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass

from .protocol import CmdType

__all__ = ["Task", "TaskQueue"]


@dataclass
class Task:
    """Work for a pool thread: the peer connection, the poller and the request."""

    peerfd: int
    epfd: int
    type: CmdType
    data: bytes = b""


class TaskQueue:
    """Blocking FIFO queue; once stopped, consumers receive None."""

    def __init__(self) -> None:
        self._tasks: deque[Task] = deque()
        self._cond = threading.Condition()
        self._running = True

    def put(self, task: Task) -> None:
        """Append *task* and wake one waiting consumer."""
        with self._cond:
            self._tasks.append(task)
            self._cond.notify()

    def get(self) -> Task | None:
        """Wait for and return the oldest task, or None once the queue is stopped."""
        with self._cond:
            while self._running and not self._tasks:
                self._cond.wait()
            if not self._running:
                return None
            return self._tasks.popleft()

    def is_empty(self) -> bool:
        with self._cond:
            return not self._tasks

    def __len__(self) -> int:
        with self._cond:
            return len(self._tasks)

    def broadcast_all(self) -> None:
        """Stop the queue and wake every waiting consumer."""
        with self._cond:
            self._running = False
            self._cond.notify_all()