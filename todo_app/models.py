"""
Database Models for the Todo Service.

Defines the SQLAlchemy ORM model for a task, the only entity the service
stores, together with the column type that lets its identifier cover the
full unsigned 64-bit range on top of SQLite's signed integers.

Key Concepts Demonstrated:
- SQLAlchemy declarative ORM model with typed columns
- ``TypeDecorator`` for lossless value conversion at the database boundary
- Serialisation helper (``to_dict``) for JSON API responses
"""

from __future__ import annotations

from typing import Any

from sqlalchemy.types import BigInteger, TypeDecorator

from . import db

UINT64_MAX = 2**64 - 1
_INT64_LIMIT = 2**63


class UnsignedBigInteger(TypeDecorator):
    """
    Unsigned 64-bit integer stored in a signed 64-bit column.

    Values at or above ``2**63`` are written in two's complement form and
    converted back when loaded, so every id in ``0 .. 2**64 - 1`` survives
    a round trip through SQLite unchanged.
    """

    impl = BigInteger
    cache_ok = True

    def process_bind_param(self, value: int | None, dialect: Any) -> int | None:
        if value is None:
            return None
        if value >= _INT64_LIMIT:
            return value - 2**64
        return value

    def process_result_value(self, value: int | None, dialect: Any) -> int | None:
        if value is None:
            return None
        if value < 0:
            return value + 2**64
        return value


class Task(db.Model):
    """
    Task model representing a to-do item.

    Attributes:
        id: Client-chosen unsigned 64-bit identifier (primary key).
        title: Non-empty text describing the task.
        completed: Completion flag, ``False`` for new tasks.
    """

    __tablename__ = "tasks"

    id: int = db.Column(UnsignedBigInteger, primary_key=True, autoincrement=False)
    title: str = db.Column(db.Text, nullable=False)
    completed: bool = db.Column(db.Boolean, nullable=False, default=False)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert the task to its canonical dictionary representation.

        Returns:
            Dictionary with keys ``id``, ``title`` and ``completed`` in that
            order.
        """
        return {
            "id": self.id,
            "title": self.title,
            "completed": bool(self.completed),
        }

    def __repr__(self) -> str:
        """Return string representation of the task."""
        return f"<Task {self.id}: {self.title}>"
