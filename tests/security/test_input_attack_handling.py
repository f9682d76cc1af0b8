"""
Security tests for adversarial input handling on the /todo endpoints.

Submits SQL-injection payloads and mass-assignment probes through task
fields and path ids to verify the API treats them as opaque data rather
than executable SQL or bindable attributes.

Key SDET Concepts Demonstrated:
- Injection payload construction (DROP TABLE, tautology-based OR)
- Before-and-after state checks to detect silent data corruption
- Adversarial payloads carrying fields the model does not have
"""

from __future__ import annotations

import pytest

pytestmark = pytest.mark.integration


SQLI_PAYLOAD = "x'); DROP TABLE tasks;--"


def test_sqli_like_title_is_stored_as_plain_text(client):
    """Injected SQL-like content should be persisted literally, not executed."""
    # Act
    create_response = client.post("/todo", json={"id": 1, "title": SQLI_PAYLOAD})

    # Assert
    assert create_response.status_code == 201
    assert create_response.get_json()["title"] == SQLI_PAYLOAD
    assert client.get("/todo").get_json() == [
        {"id": 1, "title": SQLI_PAYLOAD, "completed": False}
    ]


def test_sqli_like_path_id_is_rejected(client, multiple_tasks):
    """A tautology in the path must not select or delete other rows."""
    # Act
    get_response = client.get("/todo/1 OR 1=1")
    delete_response = client.delete("/todo/1;DELETE FROM tasks")

    # Assert
    assert get_response.status_code == 400
    assert delete_response.status_code == 400
    assert len(client.get("/todo").get_json()) == 3


def test_modify_ignores_extra_fields(client, sample_task):
    """Unknown fields in a PATCH body are dropped, never bound to the row."""
    # Act
    response = client.patch(
        "/todo",
        json={"id": 1, "title": "Updated", "completed": True, "is_admin": True, "owner": 7},
    )

    # Assert
    assert response.status_code == 200
    assert response.get_json() == {"id": 1, "title": "Updated", "completed": True}
