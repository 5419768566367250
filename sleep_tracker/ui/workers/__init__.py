"""Background workers for the sleep tracker UI."""

from __future__ import annotations

from sleep_tracker.ui.workers.database_worker import DatabaseWorker, DatabaseWorkerObject, TaskScope

__all__ = ["DatabaseWorker", "DatabaseWorkerObject", "TaskScope"]
