"""
REST API Endpoints for the Todo Service.

Decodes requests, calls the ``TaskService`` injected by the application
factory, and encodes its outcome.  Successful responses are JSON; errors
are a short plain-text message whose status code comes from the single
table in ``todo_app.errors``.

Endpoints:
    GET    /health      - Service health check
    GET    /todo        - List all tasks
    POST   /todo        - Create a task (body: {id, title, completed})
    PATCH  /todo        - Modify a task (body: {id, title, completed})
    GET    /todo/<id>   - Retrieve a single task
    DELETE /todo/<id>   - Delete a task

Key Concepts Demonstrated:
- Static route table declared once on a Flask blueprint
- One error handler for the whole error taxonomy
- Thin handlers: decoding here, business rules in the service
"""

from __future__ import annotations

import logging

from flask import Blueprint, Response, current_app, jsonify, request

from .. import SERVICE_EXTENSION_KEY
from ..errors import StorageFailure, TaskServiceError, status_code_for
from ..service import TaskService
from ..validation import decode_task, parse_task_id

logger = logging.getLogger(__name__)

todo_bp = Blueprint("todo_api", __name__)


# =====================================================================
# Helper Functions
# =====================================================================


def _service() -> TaskService:
    """Return the service instance wired up by ``create_app``."""
    return current_app.extensions[SERVICE_EXTENSION_KEY]


def _text_response(message: str, status_code: int) -> Response:
    """Build a plain-text response terminated by a newline."""
    return Response(f"{message}\n", status=status_code, mimetype="text/plain")


# =====================================================================
# API Endpoints
# =====================================================================


@todo_bp.route("/health", methods=["GET"])
def health_check() -> tuple[Response, int]:
    """Return service health status for liveness probes."""
    return jsonify({"status": "healthy", "service": "todo"}), 200


@todo_bp.route("/todo", methods=["GET"])
def get_all_tasks() -> tuple[Response, int]:
    """
    List every task.

    Returns:
        JSON array of tasks (empty when none exist) and 200.
    """
    logger.info("GET /todo - Fetching all tasks")
    tasks = _service().list_tasks()
    logger.info("Found %d tasks", len(tasks))
    return jsonify([task.to_dict() for task in tasks]), 200


@todo_bp.route("/todo", methods=["POST"])
def add_task() -> tuple[Response, int]:
    """
    Create a task.

    Request Body (JSON):
        id: Unsigned integer chosen by the client (required)
        title: Task title (required, non-empty)
        completed: Completion flag (optional, default: false)

    Returns:
        JSON task and 201; 400 for a malformed or invalid body, 409 when
        the id is taken.
    """
    logger.info("POST /todo - Creating new task")
    task = decode_task(request.get_data())
    created = _service().create_task(task)
    return jsonify(created.to_dict()), 201


@todo_bp.route("/todo", methods=["PATCH"])
def modify_task() -> tuple[Response, int]:
    """
    Overwrite ``title`` and ``completed`` of the task named by ``id``.

    Returns:
        JSON task and 200; 400 for a malformed or invalid body, 404 when
        no task has that id.
    """
    logger.info("PATCH /todo - Modifying task")
    changes = decode_task(request.get_data())
    task = _service().modify_task(changes)
    return jsonify(task.to_dict()), 200


@todo_bp.route("/todo/<raw_id>", methods=["GET"])
def get_task_by_id(raw_id: str) -> tuple[Response, int]:
    """
    Get a single task by id.

    Returns:
        JSON task and 200; 400 when the id is not an unsigned integer,
        404 when there is no such task.
    """
    logger.info("GET /todo/%s - Fetching task", raw_id)
    task = _service().get_task(parse_task_id(raw_id))
    return jsonify(task.to_dict()), 200


@todo_bp.route("/todo/<raw_id>", methods=["DELETE"])
def delete_task_by_id(raw_id: str) -> Response:
    """
    Delete a task by id.

    Returns:
        Empty 200 response; 400 when the id is not an unsigned integer,
        404 when there is no such task.
    """
    logger.info("DELETE /todo/%s - Deleting task", raw_id)
    _service().delete_task(parse_task_id(raw_id))
    return Response(status=200)


# =====================================================================
# Error Handlers
# =====================================================================


@todo_bp.errorhandler(TaskServiceError)
def handle_task_error(error: TaskServiceError) -> Response:
    """Translate any ``TaskServiceError`` into its status code and message."""
    status_code = status_code_for(error)
    if isinstance(error, StorageFailure):
        logger.error("%s %s failed: %s", request.method, request.path, error)
    else:
        logger.warning("%s %s rejected (%d): %s", request.method, request.path, status_code, error)
    return _text_response(str(error), status_code)
