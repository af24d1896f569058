"""Fixed-size pool of worker threads fed from a task queue."""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable

from .taskqueue import Task, TaskQueue

__all__ = ["ThreadPool"]

log = logging.getLogger(__name__)


class ThreadPool:
    """Runs *handler* on each submitted task in one of *num* worker threads."""

    def __init__(
        self,
        num: int,
        handler: Callable[[Task], object],
        poll_interval: float = 0.01,
    ) -> None:
        if num < 1:
            raise ValueError("a thread pool needs at least one thread")
        self._num = num
        self._handler = handler
        self._poll_interval = poll_interval
        self._queue = TaskQueue()
        self._threads: list[threading.Thread] = []

    @property
    def threads(self) -> tuple[threading.Thread, ...]:
        return tuple(self._threads)

    def _work(self) -> None:
        while (task := self._queue.get()) is not None:
            try:
                self._handler(task)
            except Exception:
                log.exception("task for peer %s failed", task.peerfd)
        log.debug("sub thread %s is exiting.", threading.get_ident())

    def start(self) -> None:
        """Launch the worker threads."""
        if self._threads:
            raise RuntimeError("thread pool already started")
        self._threads = [
            threading.Thread(target=self._work, name=f"cloudisk-worker-{n}", daemon=True)
            for n in range(self._num)
        ]
        for thread in self._threads:
            thread.start()

    def submit(self, task: Task) -> None:
        """Queue *task* for a worker."""
        self._queue.put(task)

    def stop(self) -> None:
        """Wait for the queue to drain, then stop and join every worker."""
        while not self._queue.is_empty():
            time.sleep(self._poll_interval)
        self._queue.broadcast_all()
        for thread in self._threads:
            thread.join()

    def __enter__(self) -> ThreadPool:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()