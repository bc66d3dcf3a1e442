from unittest.mock import patch

from student_records.api.deps import get_student_store
from student_records.core.exceptions import StoreUnavailable


def test_health_check(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "message": "Server Healthy"}


def test_health_check_store(client):
    response = client.get("/health/store")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "message": "Redis connection OK"}


def test_health_check_store_unavailable(client, student_store):
    client.app.dependency_overrides[get_student_store] = lambda: student_store
    with patch.object(student_store, "ping", side_effect=StoreUnavailable("down", operation="ping")):
        response = client.get("/health/store")
    assert response.status_code == 503
    assert response.json() == {"status": "unhealthy", "message": "Redis unavailable"}
