"""
Background query worker.

A single thread drains a FIFO queue of submitted calls and resolves a
``Future`` for each.  Because there is only one consumer, calls run in
submission order; a query submitted after an insert has returned will
see that insert.
"""

from __future__ import annotations

import logging
import queue
import threading
from concurrent.futures import Future
from typing import Any, Callable, Optional

from typeahead.config.settings import WorkerSettings, get_settings

logger = logging.getLogger(__name__)

_STOP = object()


class QueryWorker:
    """
    Single-threaded call executor.

    ``submit`` can be used before ``start``; queued calls run once the
    thread is up.  After ``stop`` it raises until ``start`` is called again.
    """

    def __init__(self, settings: WorkerSettings | None = None) -> None:
        self._settings = settings or get_settings().worker
        self._queue: "queue.Queue[Any]" = queue.Queue()
        self._running = False
        self._stopped = False
        self._thread: Optional[threading.Thread] = None
        self._lock = threading.Lock()

    def start(self) -> None:
        """Start the worker in a background thread."""
        with self._lock:
            if self._running:
                return
            self._running = True
            self._stopped = False
            self._thread = threading.Thread(
                target=self._loop, name=self._settings.name, daemon=True
            )
            self._thread.start()
        logger.info("Worker '%s' started", self._settings.name)

    def stop(self, timeout: float | None = None) -> None:
        """Finish queued calls, then stop the thread. Calls that never ran are cancelled."""
        with self._lock:
            self._stopped = True
            thread = None
            if self._running:
                self._running = False
                self._queue.put(_STOP)
                thread = self._thread
        if thread is None:
            self._cancel_pending()
            return
        if thread.is_alive():
            thread.join(timeout=timeout if timeout is not None else self._settings.stop_timeout)
        self._cancel_pending()
        logger.info("Worker '%s' stopped", self._settings.name)

    @property
    def is_running(self) -> bool:
        return self._running

    def submit(self, fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Future:
        """
        Queue ``fn(*args, **kwargs)`` and return a Future for its result.

        Raises RuntimeError once the worker is stopped, until it is started again.
        """
        with self._lock:
            if self._stopped:
                raise RuntimeError(f"Worker '{self._settings.name}' is stopped")
            future: Future = Future()
            self._queue.put((future, fn, args, kwargs))
        return future

    def _loop(self) -> None:
        """Main consume loop."""
        while True:
            item = self._queue.get()
            if item is _STOP:
                return
            self._run(item)

    def _run(self, item) -> None:
        future, fn, args, kwargs = item
        if not future.set_running_or_notify_cancel():
            return
        try:
            result = fn(*args, **kwargs)
        except Exception as exc:
            logger.exception("[%s] Query failed", self._settings.name)
            future.set_exception(exc)
        else:
            future.set_result(result)

    def run_pending(self) -> int:
        """
        Execute queued calls on the caller's thread (useful for testing).
        Returns the number of calls executed.
        """
        count = 0
        while True:
            try:
                item = self._queue.get_nowait()
            except queue.Empty:
                return count
            if item is _STOP:
                continue
            self._run(item)
            count += 1

    def _cancel_pending(self) -> int:
        """Cancel queued calls that will never run. A pending stop marker is kept."""
        cancelled = 0
        saw_stop = False
        while True:
            try:
                item = self._queue.get_nowait()
            except queue.Empty:
                break
            if item is _STOP:
                saw_stop = True
                continue
            if item[0].cancel():
                cancelled += 1
        if saw_stop:
            self._queue.put(_STOP)
        if cancelled:
            logger.warning("[%s] Cancelled %d queued call(s) on stop", self._settings.name, cancelled)
        return cancelled
