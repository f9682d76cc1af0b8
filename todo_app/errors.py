"""
Error taxonomy for the Todo Service.

Every failure a request can end in is one of the exception classes below.
The service layer raises them, and the blueprint's error handler turns
them into an HTTP response through ``STATUS_CODES``, the only place where
an error kind is tied to a status code.

    InvalidPayload  -> 400   malformed request body or id
    InvalidField    -> 400   well-formed but semantically invalid value
    TaskNotFound    -> 404   no record for the requested id
    TaskConflict    -> 409   id already in use on create
    StorageFailure  -> 500   unexpected persistence-layer error
"""

from __future__ import annotations


class TaskServiceError(Exception):
    """Base class for every error a todo request can terminate with."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class InvalidPayload(TaskServiceError):
    """Raised when a request body or path id cannot be decoded."""

    def __init__(self, message: str = "Request is not valid") -> None:
        super().__init__(message)


class InvalidField(TaskServiceError):
    """Raised when a decoded task carries a value the service rejects."""

    def __init__(self, field: str, message: str | None = None) -> None:
        self.field = field
        super().__init__(message or f"'{field}' is required")


class TaskNotFound(TaskServiceError):
    """Raised when no task exists for the requested id."""

    def __init__(self, task_id: int) -> None:
        self.task_id = task_id
        super().__init__(f"Task with ID {task_id} was not found")


class TaskConflict(TaskServiceError):
    """Raised when a create targets an id that is already stored."""

    def __init__(self, task_id: int) -> None:
        self.task_id = task_id
        super().__init__(f"Task with ID {task_id} already exists")


class StorageFailure(TaskServiceError):
    """Raised when the database fails for a reason other than a missing row."""

    def __init__(self, message: str = "Storage failure") -> None:
        super().__init__(message)


STATUS_CODES: dict[type[TaskServiceError], int] = {
    InvalidPayload: 400,
    InvalidField: 400,
    TaskNotFound: 404,
    TaskConflict: 409,
    StorageFailure: 500,
}


def status_code_for(error: TaskServiceError) -> int:
    """Return the HTTP status code for ``error``, 500 for unknown kinds."""
    for error_type in type(error).__mro__:
        if error_type in STATUS_CODES:
            return STATUS_CODES[error_type]
    return 500
