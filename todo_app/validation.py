"""
Input decoding and validation for task payloads.

Three small, side-effect free helpers sit between the raw request and the
service layer:

* ``decode_task`` turns a JSON request body into a transient ``Task``
  (``InvalidPayload`` when the body is malformed or mistyped),
* ``validate_task`` applies the field rules (``InvalidField``),
* ``parse_task_id`` turns the ``{id}`` path segment into an integer
  (``InvalidPayload`` when it is not a decimal unsigned 64-bit value).

None of them touch the database, so a rejected request never reaches it.
"""

from __future__ import annotations

import json
import re
from typing import Any

from .errors import InvalidField, InvalidPayload
from .models import UINT64_MAX, Task

_DECIMAL_ID = re.compile(r"[0-9]+")


def _is_uint64(value: Any) -> bool:
    # bool is an int subclass; JSON true/false is never an id.
    return (
        isinstance(value, int)
        and not isinstance(value, bool)
        and 0 <= value <= UINT64_MAX
    )


def decode_task(body: bytes | str) -> Task:
    """
    Decode a JSON request body into an unsaved ``Task``.

    Unknown keys are ignored.  A missing ``title`` decodes as an empty
    string and a missing ``completed`` as ``False`` so that the field rules
    in ``validate_task`` decide whether the task is acceptable.

    Args:
        body: Raw request body.

    Returns:
        A transient ``Task`` instance that is not attached to any session.

    Raises:
        InvalidPayload: The body is not a JSON object or a known field has
            the wrong type.
    """
    try:
        data = json.loads(body)
    except (ValueError, RecursionError) as exc:
        raise InvalidPayload() from exc

    if not isinstance(data, dict):
        raise InvalidPayload()

    task_id = data.get("id")
    if task_id is not None and not _is_uint64(task_id):
        raise InvalidPayload()

    title = data.get("title")
    if title is None:
        title = ""
    elif not isinstance(title, str):
        raise InvalidPayload()

    completed = data.get("completed")
    if completed is None:
        completed = False
    elif not isinstance(completed, bool):
        raise InvalidPayload()

    return Task(id=task_id, title=title, completed=completed)


def validate_task(task: Task) -> None:
    """
    Check the field rules shared by the create and modify paths.

    Raises:
        InvalidField: ``title`` is empty or ``id`` is missing.  A title of
            spaces is not empty.
    """
    if not task.title:
        raise InvalidField("title")
    if task.id is None:
        raise InvalidField("id")


def parse_task_id(raw_id: str) -> int:
    """
    Parse the ``{id}`` path segment of ``/todo/{id}``.

    Only plain decimal digits are accepted: no sign, no whitespace, and
    nothing above the unsigned 64-bit maximum.

    Raises:
        InvalidPayload: ``raw_id`` is not a well-formed unsigned integer.
    """
    if not _DECIMAL_ID.fullmatch(raw_id):
        raise InvalidPayload()
    task_id = int(raw_id)
    if task_id > UINT64_MAX:
        raise InvalidPayload()
    return task_id
