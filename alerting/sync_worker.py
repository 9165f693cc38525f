"""
Check Sync Worker

Background threads that run sync passes detached from the dashboard save
path. The save handler only enqueues; it never waits for a pass and never
sees its result.

- Bounded queue: a full queue drops the pass (logged), there is no retry
- Each submitted dashboard is deep-copied, so concurrent passes over the
  same dashboard never share mutable state
"""

import copy
import logging
import queue
import threading
import time
from typing import Any, Dict, List, Optional

from alerting.sync import SyncOrchestrator

logger = logging.getLogger(__name__)

_STOP = object()


class SyncWorker:
    """
    Runs SyncOrchestrator passes on a small pool of daemon threads.
    """

    def __init__(self, orchestrator: SyncOrchestrator, workers: int = 2, queue_size: int = 100):
        """
        Initialize sync worker.

        Args:
            orchestrator: Orchestrator that performs each pass
            workers: Number of background threads (default 2)
            queue_size: Pending passes kept before new ones are dropped (default 100)
        """
        self.orchestrator = orchestrator
        self.workers = max(int(workers), 1)
        self._queue: "queue.Queue[Any]" = queue.Queue(maxsize=max(int(queue_size), 1))

        self.running = False
        self.threads: List[threading.Thread] = []

        logger.info(f"Sync worker initialized: workers={self.workers}, queue_size={self._queue.maxsize}")

    @property
    def pending(self) -> int:
        return self._queue.qsize()

    def start(self):
        """Start worker threads"""
        if self.running:
            logger.warning("Sync worker already running")
            return

        if not self.orchestrator.enabled:
            logger.info("No alerting backend URL configured. Check sync is disabled")

        # Each start gets its own queue; threads left from an earlier start keep theirs.
        self._queue = queue.Queue(maxsize=self._queue.maxsize)
        self.running = True
        self.threads = [
            threading.Thread(target=self._run, args=(self._queue,), name=f"check-sync-{i}", daemon=True)
            for i in range(self.workers)
        ]
        for thread in self.threads:
            thread.start()

        logger.info("Sync worker started")

    def stop(self, timeout: float = 5.0):
        """
        Stop worker threads.

        The stop sentinel is queued behind pending passes, so those still run
        until the join timeout expires. Whatever is left after that is dropped.
        """
        if not self.running:
            return

        self.running = False
        for _ in self.threads:
            try:
                self._queue.put(_STOP, timeout=timeout)
            except queue.Full:
                break

        for thread in self.threads:
            if thread.is_alive():
                thread.join(timeout=timeout)
        self.threads = []

        logger.info("Sync worker stopped")

    def submit(self, dashboard: Dict[str, Any]) -> bool:
        """
        Queue a sync pass for a private copy of the dashboard.

        Returns True if the pass was queued. Never blocks.
        """
        if not self.orchestrator.enabled:
            logger.debug("Check sync disabled, not queuing dashboard")
            return False

        if not self.running:
            logger.warning("Sync worker not running, dropping check sync")
            return False

        snapshot = copy.deepcopy(dashboard)
        try:
            self._queue.put_nowait(snapshot)
        except queue.Full:
            title = snapshot.get("title") if isinstance(snapshot, dict) else None
            logger.warning(f"Check sync queue full ({self._queue.maxsize}), dropping sync for {title!r}")
            return False
        return True

    def wait_idle(self, timeout: Optional[float] = None) -> bool:
        """Block until every queued pass has finished. Returns False on timeout."""
        deadline = None if timeout is None else time.monotonic() + timeout
        while self._queue.unfinished_tasks:
            if deadline is not None and time.monotonic() >= deadline:
                return False
            time.sleep(0.01)
        return True

    def _run(self, work_queue: "queue.Queue[Any]"):
        """Worker loop (runs in background thread)"""
        while True:
            item = work_queue.get()
            try:
                if item is _STOP:
                    return
                self.orchestrator.sync(item)
            except Exception as e:
                logger.error(f"Check sync pass failed: {e}", exc_info=True)
            finally:
                work_queue.task_done()
