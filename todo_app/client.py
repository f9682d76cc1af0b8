"""
Demo client for a running todo service.

``TodoClient`` wraps a ``requests.Session`` with one method per API
operation.  ``main`` replays a fixed walk-through against a live server:
create tasks 1..10, list them, fetch and complete task 1, delete tasks
1..3 and list again, printing every response along the way.

Usage:
    todo-demo --base-url http://localhost:8080
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Any

import requests

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:8080"
DEFAULT_TIMEOUT = 5


class TodoClient:
    """Minimal HTTP client for the ``/todo`` endpoints."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _request(self, method: str, path: str, payload: dict[str, Any] | None = None) -> requests.Response:
        return self.session.request(
            method,
            f"{self.base_url}{path}",
            json=payload,
            timeout=self.timeout,
        )

    def list_tasks(self) -> requests.Response:
        return self._request("GET", "/todo")

    def create_task(self, task_id: int, title: str, completed: bool = False) -> requests.Response:
        return self._request(
            "POST", "/todo", {"id": task_id, "title": title, "completed": completed}
        )

    def get_task(self, task_id: int) -> requests.Response:
        return self._request("GET", f"/todo/{task_id}")

    def modify_task(self, task_id: int, title: str, completed: bool) -> requests.Response:
        return self._request(
            "PATCH", "/todo", {"id": task_id, "title": title, "completed": completed}
        )

    def delete_task(self, task_id: int) -> requests.Response:
        return self._request("DELETE", f"/todo/{task_id}")


def _print_response(response: requests.Response) -> None:
    print(f"{response.request.method} {response.url} -> {response.status_code}")
    if response.text:
        print(response.text.rstrip())


def run_demo(client: TodoClient, task_count: int = 10) -> None:
    """Replay the scripted walk-through against ``client``."""
    print("********* Add new tasks *********")
    for task_id in range(1, task_count + 1):
        _print_response(client.create_task(task_id, f"task ID: {task_id}"))

    print("********* Get all tasks *********")
    _print_response(client.list_tasks())

    print("********* Get task by ID = 1 *********")
    _print_response(client.get_task(1))

    print("********* Update task with ID = 1 *********")
    _print_response(client.modify_task(1, "task ID: 1", completed=True))

    for task_id in (1, 2, 3):
        print(f"********* Delete task by ID = {task_id} *********")
        _print_response(client.delete_task(task_id))

    print("********* Get all tasks *********")
    _print_response(client.list_tasks())


def main(argv: list[str] | None = None) -> int:
    """Console entry point for ``todo-demo``."""
    parser = argparse.ArgumentParser(description="Walk through the todo API against a live server.")
    parser.add_argument(
        "--base-url",
        default=os.environ.get("TODO_BASE_URL", DEFAULT_BASE_URL),
        help="Server root URL (default: $TODO_BASE_URL or %(default)s)",
    )
    parser.add_argument("--timeout", type=float, default=DEFAULT_TIMEOUT)
    args = parser.parse_args(argv)

    client = TodoClient(args.base_url, timeout=args.timeout)
    try:
        run_demo(client)
    except requests.RequestException as exc:
        logger.error("Demo aborted, server at %s is unreachable: %s", args.base_url, exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
