"""
Shared pytest fixtures for the Todo Service test suite.

This module contains fixtures that are shared across all test modules.
Every test gets its own application instance backed by a private
in-memory SQLite database, so no state leaks between tests.

Key Concepts Demonstrated:
- Fixture dependencies (app -> client / app_context -> store -> factory)
- Test data factories backed by Faker
- Per-test isolated storage through the application factory
"""

import itertools
import os
from typing import Any

import pytest
from faker import Faker

# Set testing environment before importing the app
os.environ["FLASK_ENV"] = "testing"

from todo_app import SERVICE_EXTENSION_KEY, create_app, db
from todo_app.models import Task


fake = Faker()


# -----------------------------------------------------------------------------
# Application Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def app():
    """
    Create an application instance with an empty in-memory database.

    Yields:
        Flask application instance configured for testing.
    """
    application = create_app("testing", {"SQLALCHEMY_DATABASE_URI": "sqlite://"})
    yield application
    with application.app_context():
        db.session.remove()
        db.engine.dispose()


@pytest.fixture
def client(app):
    """
    Create a test client for making HTTP requests.

    Yields:
        Flask test client for making HTTP requests.
    """
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture
def app_context(app):
    """Push an application context for tests that call the layers directly."""
    with app.app_context():
        yield app
        db.session.remove()


@pytest.fixture
def service(app_context):
    """Return the ``TaskService`` wired up by ``create_app``."""
    return app_context.extensions[SERVICE_EXTENSION_KEY]


@pytest.fixture
def store(service):
    """Return the ``TaskStore`` injected into the service."""
    return service.store


# -----------------------------------------------------------------------------
# Test Data Factory Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def task_factory(app_context):
    """
    Factory fixture for inserting Task rows directly into the database.

    Ids are handed out sequentially from 1 unless given explicitly.

    Example:
        def test_something(task_factory):
            task = task_factory(title="My Task")
            assert task.id == 1
    """
    id_sequence = itertools.count(1)

    def _create_task(
        task_id: int | None = None,
        title: str | None = None,
        completed: bool = False,
    ) -> Task:
        task = Task(
            id=task_id if task_id is not None else next(id_sequence),
            title=title or fake.sentence(nb_words=4),
            completed=completed,
        )
        db.session.add(task)
        db.session.commit()
        return task

    return _create_task


@pytest.fixture
def sample_task(task_factory) -> Task:
    """Create a single sample task with id 1."""
    return task_factory(task_id=1, title="Clean the room")


@pytest.fixture
def multiple_tasks(task_factory) -> list[Task]:
    """Create three tasks with ids 1, 2 and 3 and titles "a", "b", "c"."""
    return [
        task_factory(task_id=1, title="a"),
        task_factory(task_id=2, title="b"),
        task_factory(task_id=3, title="c", completed=True),
    ]


# -----------------------------------------------------------------------------
# Test Data Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def valid_task_data() -> dict[str, Any]:
    """Provide a valid create/modify payload."""
    return {"id": 1, "title": "Clean the room", "completed": False}


@pytest.fixture
def api_headers() -> dict[str, str]:
    """Provide common headers for API requests."""
    return {
        "Content-Type": "application/json",
        "Accept": "application/json",
    }
