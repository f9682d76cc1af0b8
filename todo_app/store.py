"""
Storage gateway for tasks.

``TaskStore`` is the only component that talks to the database.  It is
constructed around an SQLAlchemy session by the application factory and
handed to the service, so nothing else holds a database handle.

Failure semantics:
- a missing row is an explicit ``None`` (``find_by_id``) or ``False``
  (``delete``), never an exception;
- a primary-key violation on insert is ``TaskConflict``;
- a row that disappeared before ``save`` is ``TaskNotFound``;
- anything else SQLAlchemy raises becomes ``StorageFailure``.
Every failed write rolls the session back before raising.
"""

from __future__ import annotations

import logging

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, scoped_session
from sqlalchemy.orm.exc import StaleDataError

from .errors import StorageFailure, TaskConflict, TaskNotFound
from .models import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """Durable CRUD for ``Task`` rows keyed by ``id``."""

    def __init__(self, session: Session | scoped_session) -> None:
        self.session = session

    def create(self, task: Task) -> Task:
        """
        Insert a new task.

        The primary-key constraint is the authority on duplicates: two
        concurrent creates for the same id cannot both succeed.

        Raises:
            TaskConflict: A row with ``task.id`` already exists.
            StorageFailure: Any other database error.
        """
        task_id = task.id
        try:
            self.session.add(task)
            self.session.commit()
        except IntegrityError as exc:
            self.session.rollback()
            logger.warning("Insert of task %s violated a constraint: %s", task_id, exc.orig)
            raise TaskConflict(task_id) from exc
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.exception("Failed to insert task %s", task_id)
            raise StorageFailure() from exc
        return task

    def find_by_id(self, task_id: int) -> Task | None:
        """Return the task with ``task_id``, or ``None`` when there is none."""
        try:
            return self.session.get(Task, task_id)
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.exception("Failed to load task %s", task_id)
            raise StorageFailure() from exc

    def find_all(self) -> list[Task]:
        """Return every task in store order; an empty list when there are none."""
        try:
            return list(self.session.scalars(select(Task)).all())
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.exception("Failed to list tasks")
            raise StorageFailure() from exc

    def save(self, task: Task) -> Task:
        """
        Persist changes made to a task previously loaded by this store.

        Raises:
            TaskNotFound: The row was deleted after it was loaded.
            StorageFailure: Any other database error.
        """
        # Read before commit; a rolled-back instance would reload from the row.
        task_id = task.id
        try:
            self.session.add(task)
            self.session.commit()
        except StaleDataError as exc:
            self.session.rollback()
            raise TaskNotFound(task_id) from exc
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.exception("Failed to save task %s", task_id)
            raise StorageFailure() from exc
        return task

    def delete(self, task: Task) -> bool:
        """
        Delete the row for ``task.id``.

        Returns:
            ``True`` when a row was removed, ``False`` when none matched.
        """
        task_id = task.id
        try:
            result = self.session.execute(delete(Task).where(Task.id == task_id))
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.exception("Failed to delete task %s", task_id)
            raise StorageFailure() from exc
        return result.rowcount > 0
