"""
API tests for the student CRUD endpoints.

Runs the real app against an in-memory Redis; store failures are injected
by overriding the service dependency.
"""

from unittest.mock import AsyncMock

import pytest

from student_records.api.deps import get_student_service
from student_records.core.exceptions import InternalError, StoreUnavailable


def test_end_to_end_create_get_delete(client, sample_student):
    response = client.post("/students", json=sample_student)
    assert response.status_code == 201
    assert response.json() == {"message": "Student saved successfully"}

    response = client.get("/students/s1")
    assert response.status_code == 200
    assert response.json() == {
        "name": "Ann",
        "course": "CS",
        "age": "20",
        "address": "X",
        "year_level": "2",
        "college": "Eng",
        "hobbies": "chess",
    }

    response = client.delete("/students/s1")
    assert response.status_code == 200
    assert response.json() == {"message": "Student deleted successfully"}

    response = client.get("/students/s1")
    assert response.status_code == 404
    assert response.json() == {"detail": "Student not found"}


@pytest.mark.parametrize("missing", ["id", "name", "course", "age", "address", "year_level", "college", "hobbies"])
def test_create_with_missing_field_returns_400(client, sample_student, missing):
    del sample_student[missing]

    response = client.post("/students", json=sample_student)

    assert response.status_code == 400
    assert response.json() == {"detail": "All fields are required"}
    assert client.get("/students").json() == []


def test_create_with_empty_field_returns_400(client, sample_student):
    sample_student["college"] = ""

    response = client.post("/students", json=sample_student)

    assert response.status_code == 400


def test_create_without_body_returns_400(client):
    response = client.post("/students")

    assert response.status_code == 400
    assert response.json() == {"detail": "All fields are required"}


def test_create_with_form_encoded_body_returns_400(client, sample_student):
    response = client.post("/students", data=sample_student)

    assert response.status_code == 400
    assert response.json() == {"detail": "All fields are required"}
    assert client.get("/students").json() == []


def test_create_with_list_value_returns_400(client, sample_student):
    sample_student["hobbies"] = ["chess", "go"]

    response = client.post("/students", json=sample_student)

    assert response.status_code == 400
    assert client.get("/students").json() == []


def test_create_rejects_age_zero_string(client, sample_student):
    """Age "0" is treated as empty and rejected."""
    sample_student["age"] = "0"

    response = client.post("/students", json=sample_student)

    assert response.status_code == 400
    assert client.get("/students/s1").status_code == 404


def test_create_rejects_numeric_age_zero(client, sample_student):
    sample_student["age"] = 0

    response = client.post("/students", json=sample_student)

    assert response.status_code == 400


def test_create_stores_numeric_values_as_text(client, sample_student):
    sample_student["age"] = 21

    assert client.post("/students", json=sample_student).status_code == 201

    assert client.get("/students/s1").json()["age"] == "21"


def test_create_overwrites_existing_record(client, sample_student):
    client.post("/students", json=sample_student)
    sample_student["name"] = "Bea"

    assert client.post("/students", json=sample_student).status_code == 201

    assert client.get("/students/s1").json()["name"] == "Bea"


def test_list_students_includes_ids(client, sample_student):
    client.post("/students", json=sample_student)
    client.post("/students", json={**sample_student, "id": "s2", "name": "Bo"})

    response = client.get("/students")

    assert response.status_code == 200
    students = sorted(response.json(), key=lambda s: s["id"])
    assert [s["id"] for s in students] == ["s1", "s2"]
    assert students[1]["name"] == "Bo"
    assert students[0]["hobbies"] == "chess"


def test_list_students_empty(client):
    response = client.get("/students")

    assert response.status_code == 200
    assert response.json() == []


def test_update_changes_only_supplied_field(client, sample_student):
    client.post("/students", json=sample_student)

    response = client.put("/students/s1", json={"course": "Math"})

    assert response.status_code == 200
    assert response.json() == {"message": "Student updated successfully"}
    expected = {k: v for k, v in sample_student.items() if k != "id"}
    expected["course"] = "Math"
    assert client.get("/students/s1").json() == expected


def test_update_ignores_empty_values(client, sample_student):
    client.post("/students", json=sample_student)

    response = client.put("/students/s1", json={"course": "Math", "name": ""})

    assert response.status_code == 200
    assert client.get("/students/s1").json()["name"] == "Ann"


def test_update_with_empty_body_returns_400(client, sample_student):
    client.post("/students", json=sample_student)

    response = client.put("/students/s1", json={})

    assert response.status_code == 400
    assert response.json() == {"detail": "No fields provided for update"}


def test_update_with_only_empty_fields_returns_400(client, sample_student):
    client.post("/students", json=sample_student)

    response = client.put("/students/s1", json={"name": ""})

    assert response.status_code == 400
    assert response.json() == {"detail": "At least one field is required to update"}


def test_update_without_body_returns_400(client, sample_student):
    client.post("/students", json=sample_student)

    response = client.put("/students/s1")

    assert response.status_code == 400
    assert response.json() == {"detail": "No fields provided for update"}
    assert client.get("/students/s1").json()["name"] == "Ann"


def test_update_with_non_object_body_returns_400(client, sample_student):
    client.post("/students", json=sample_student)

    response = client.put("/students/s1", json=["name", "Bo"])

    assert response.status_code == 400
    assert client.get("/students/s1").json()["name"] == "Ann"


def test_update_missing_student_returns_404(client):
    response = client.put("/students/ghost", json={"name": "Ann"})

    assert response.status_code == 404
    assert client.get("/students/ghost").status_code == 404


def test_delete_is_idempotent(client):
    response = client.delete("/students/never-existed")

    assert response.status_code == 200
    assert client.get("/students/never-existed").status_code == 404


def test_id_with_colon_round_trips(client, sample_student):
    client.post("/students", json={**sample_student, "id": "2024:07"})

    assert client.get("/students/2024:07").status_code == 200
    assert [s["id"] for s in client.get("/students").json()] == ["2024:07"]


def test_create_store_failure_returns_500(client, sample_student):
    mock_service = AsyncMock()
    mock_service.create_student.side_effect = InternalError("Failed to save student")
    client.app.dependency_overrides[get_student_service] = lambda: mock_service

    response = client.post("/students", json=sample_student)

    assert response.status_code == 500
    assert response.json() == {"detail": "Failed to save student"}


def test_get_store_failure_returns_500(client):
    mock_service = AsyncMock()
    mock_service.get_student.side_effect = StoreUnavailable("down", operation="get_all")
    client.app.dependency_overrides[get_student_service] = lambda: mock_service

    response = client.get("/students/s1")

    assert response.status_code == 500


def test_update_partial_failure_returns_500(client):
    mock_service = AsyncMock()
    mock_service.update_student.side_effect = InternalError("Failed to update student")
    client.app.dependency_overrides[get_student_service] = lambda: mock_service

    response = client.put("/students/s1", json={"name": "Ann"})

    assert response.status_code == 500
    assert response.json() == {"detail": "Failed to update student"}


def test_unexpected_error_returns_500(client):
    mock_service = AsyncMock()
    mock_service.get_all_students.side_effect = RuntimeError("boom")
    client.app.dependency_overrides[get_student_service] = lambda: mock_service

    response = client.get("/students")

    assert response.status_code == 500
    assert response.json() == {"detail": "An internal error occurred during student operation"}


def test_correlation_id_is_echoed(client):
    response = client.get("/students", headers={"X-Correlation-ID": "abc-123"})

    assert response.headers["X-Correlation-ID"] == "abc-123"


def test_correlation_id_is_generated(client):
    response = client.get("/students")

    assert response.headers["X-Correlation-ID"]
