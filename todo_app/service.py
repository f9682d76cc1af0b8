"""
Task service: the five todo operations.

Each method validates its input, consults the store, and either returns
the resulting task(s) or raises one of the ``TaskServiceError`` kinds.
The service holds nothing between calls except its store reference;
tasks it returns are request-scoped copies owned by the session.
"""

from __future__ import annotations

import logging

from .errors import TaskConflict, TaskNotFound
from .models import Task
from .store import TaskStore
from .validation import validate_task

logger = logging.getLogger(__name__)


class TaskService:
    """CRUD operations over a ``TaskStore``."""

    def __init__(self, store: TaskStore) -> None:
        self.store = store

    def list_tasks(self) -> list[Task]:
        """Return all tasks, possibly none."""
        return self.store.find_all()

    def create_task(self, task: Task) -> Task:
        """
        Store a new task under its client-chosen id.

        The existence check only short-circuits the common case; the store's
        primary-key constraint still decides when two creates race.

        Raises:
            InvalidField: ``title`` is empty or ``id`` is missing.
            TaskConflict: ``task.id`` is already in use.
            StorageFailure: The database failed.
        """
        validate_task(task)
        if self.store.find_by_id(task.id) is not None:
            raise TaskConflict(task.id)
        created = self.store.create(task)
        logger.info("Created task with ID: %s", created.id)
        return created

    def get_task(self, task_id: int) -> Task:
        """
        Return the task with ``task_id``.

        Raises:
            TaskNotFound: No such task.
        """
        task = self.store.find_by_id(task_id)
        if task is None:
            raise TaskNotFound(task_id)
        return task

    def modify_task(self, changes: Task) -> Task:
        """
        Overwrite ``title`` and ``completed`` of the task ``changes.id``.

        ``changes.id`` only selects the record; it is never written.

        Raises:
            InvalidField: ``title`` is empty or ``id`` is missing.
            TaskNotFound: No task with ``changes.id``.
        """
        validate_task(changes)
        task = self.get_task(changes.id)
        task.title = changes.title
        task.completed = changes.completed
        saved = self.store.save(task)
        logger.info("Updated task %s", saved.id)
        return saved

    def delete_task(self, task_id: int) -> None:
        """
        Delete the task with ``task_id``.

        Raises:
            TaskNotFound: No such task, including one removed concurrently
                between the lookup and the delete.
        """
        task = self.get_task(task_id)
        if not self.store.delete(task):
            raise TaskNotFound(task_id)
        logger.info("Deleted task %s", task_id)
