#!/usr/bin/env python3
"""
Database Worker for Sleep Tracker Application
Runs repository calls off the UI thread and delivers results back on it.

Uses the recommended QThread + Worker Object pattern instead of subclassing QThread.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from PyQt6.QtCore import QObject, QThread, pyqtSignal, pyqtSlot

logger = logging.getLogger(__name__)

SuccessCallback = Callable[[Any], None]
ErrorCallback = Callable[[Exception], None]


class DatabaseWorkerObject(QObject):
    """
    Worker object that performs one database operation.

    This object is moved to a QThread to perform work off the main thread.
    """

    succeeded = pyqtSignal(object)  # operation result
    failed = pyqtSignal(object)  # Exception
    finished = pyqtSignal()  # Signals work is complete

    def __init__(self, operation: Callable[[], Any]) -> None:
        super().__init__()
        self.operation = operation
        self.is_cancelled = False

    def run(self) -> None:
        """Run the operation. Called when thread starts."""
        try:
            if self.is_cancelled:
                return
            result = self.operation()
        except Exception as e:
            logger.exception("Database worker error")
            self.failed.emit(e)
        else:
            self.succeeded.emit(result)
        finally:
            self.finished.emit()

    def cancel(self) -> None:
        """Request cooperative cancellation."""
        self.is_cancelled = True


class DatabaseWorker(QObject):
    """
    Manager for one threaded database operation.

    The manager lives on the thread that created it (the UI thread), so the
    callbacks it is given run there as well. Once cancelled, results are
    dropped instead of delivered.
    """

    done = pyqtSignal(object)  # self, emitted after the thread has stopped

    def __init__(
        self,
        operation: Callable[[], Any],
        on_success: SuccessCallback | None = None,
        on_error: ErrorCallback | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._on_success = on_success
        self._on_error = on_error
        self._cancelled = False

        # Create thread and worker
        self._thread = QThread()
        self._worker = DatabaseWorkerObject(operation)

        # Move worker to thread
        self._worker.moveToThread(self._thread)

        # Connect thread started signal to worker run method
        self._thread.started.connect(self._worker.run)

        # Results are queued back to this object's thread
        self._worker.succeeded.connect(self._handle_succeeded)
        self._worker.failed.connect(self._handle_failed)

        # Stop the thread when the worker finishes
        self._worker.finished.connect(self._thread.quit)
        self._thread.finished.connect(self._handle_thread_finished)

    @property
    def is_cancelled(self) -> bool:
        return self._cancelled

    def start(self) -> None:
        """Start the operation in the background thread."""
        self._thread.start()

    def isRunning(self) -> bool:
        """Check if the operation is currently running."""
        return self._thread.isRunning()

    def cancel(self) -> None:
        """Request cooperative cancellation without blocking; later results are dropped."""
        self._cancelled = True
        self._worker.cancel()
        self._thread.quit()

    def wait(self, timeout: int = -1) -> bool:
        """Wait for the thread to finish."""
        if timeout < 0:
            return self._thread.wait()
        return self._thread.wait(timeout)

    @pyqtSlot(object)
    def _handle_succeeded(self, result: Any) -> None:
        if self._cancelled:
            logger.debug("Dropping result of cancelled database operation")
            return
        if self._on_success is not None:
            self._on_success(result)

    @pyqtSlot(object)
    def _handle_failed(self, error: Exception) -> None:
        if self._cancelled:
            logger.debug("Dropping error of cancelled database operation: %s", error)
            return
        if self._on_error is not None:
            self._on_error(error)

    @pyqtSlot()
    def _handle_thread_finished(self) -> None:
        self._thread.wait()
        self.done.emit(self)


class TaskScope(QObject):
    """
    Cancellation scope for the background work of one view model.

    Every operation launched through the scope is tracked until its thread
    stops. ``cancel()`` cancels all of them; nothing launched afterwards runs.
    """

    idle = pyqtSignal()  # the last tracked thread has stopped

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._workers: list[DatabaseWorker] = []
        self._cancelled = False

    @property
    def is_cancelled(self) -> bool:
        return self._cancelled

    @property
    def active_count(self) -> int:
        """Number of operations whose threads have not stopped yet."""
        return len(self._workers)

    def launch(
        self,
        operation: Callable[[], Any],
        on_success: SuccessCallback | None = None,
        on_error: ErrorCallback | None = None,
    ) -> DatabaseWorker | None:
        """Run ``operation`` on a worker thread; callbacks run on this thread."""
        if self._cancelled:
            logger.debug("Task scope cancelled, not launching %s", getattr(operation, "__qualname__", operation))
            return None

        worker = DatabaseWorker(operation, on_success, on_error)
        worker.done.connect(self._forget)
        self._workers.append(worker)
        worker.start()
        return worker

    def cancel(self) -> None:
        """
        Cancel all in-flight operations. Does not block.

        Running operations finish on their threads and their results are
        dropped. Workers stay tracked until their threads report done, so
        the owner must keep the scope alive until ``idle`` or call
        ``wait_for_idle()``.
        """
        self._cancelled = True
        for worker in self._workers:
            worker.cancel()
        if self._workers:
            logger.info("Cancelled %d in-flight database operations", len(self._workers))

    def wait_for_idle(self, timeout: int = 5000) -> bool:
        """Block until every tracked thread has stopped."""
        return all(worker.wait(timeout) for worker in self._workers[:])

    @pyqtSlot(object)
    def _forget(self, worker: DatabaseWorker) -> None:
        if worker in self._workers:
            self._workers.remove(worker)
        if not self._workers:
            self.idle.emit()
