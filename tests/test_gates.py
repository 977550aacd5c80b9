"""Tests for the auth and content-type gates."""

import pytest

from mpocket.api.middleware import CONTENT_TYPE_MESSAGE, UNAUTHORIZED_MESSAGE
from mpocket.api.v1.dependencies import get_record_service
from tests.conftest import AUTH_KEY, HEADERS, SAMPLE_RECORD


class SpyRecordService:
    """Stands in for RecordService and records every call."""

    def __init__(self):
        self.calls = []

    def create_record(self, **kwargs):
        self.calls.append(kwargs)
        raise AssertionError("record service must not be reached")


@pytest.fixture
def spy_service(app):
    spy = SpyRecordService()
    app.dependency_overrides[get_record_service] = lambda: spy
    return spy


class TestAuthGate:
    """Tests for the x-auth-key gate."""

    def test_missing_auth_header_is_forbidden(self, client, spy_service, records_collection):
        """No auth header: 403 and no store interaction, even with a valid body."""
        response = client.post(
            "/products",
            json=SAMPLE_RECORD,
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 403
        assert response.json() == {"message": UNAUTHORIZED_MESSAGE}
        assert spy_service.calls == []
        assert records_collection.count_documents({}) == 0

    def test_wrong_auth_key_is_forbidden(self, client, spy_service):
        response = client.post(
            "/products",
            json=SAMPLE_RECORD,
            headers={"x-auth-key": AUTH_KEY + "-nope", "Content-Type": "application/json"},
        )

        assert response.status_code == 403
        assert spy_service.calls == []

    def test_missing_auth_with_invalid_body_is_forbidden(self, client, spy_service):
        """Auth is checked before the body is even parsed."""
        response = client.post(
            "/products",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 403
        assert spy_service.calls == []

    def test_auth_is_checked_before_content_type(self, client, spy_service):
        response = client.post("/products", content=b"mobile=1", headers={"Content-Type": "text/plain"})

        assert response.status_code == 403
        assert response.json() == {"message": UNAUTHORIZED_MESSAGE}


class TestContentTypeGate:
    """Tests for the application/json gate."""

    def test_wrong_content_type_is_rejected(self, client, spy_service, records_collection):
        response = client.post(
            "/products",
            content=b"mobile=9990001111",
            headers={"x-auth-key": AUTH_KEY, "Content-Type": "application/x-www-form-urlencoded"},
        )

        assert response.status_code == 400
        assert response.json() == {"message": CONTENT_TYPE_MESSAGE}
        assert spy_service.calls == []
        assert records_collection.count_documents({}) == 0

    def test_missing_content_type_is_rejected(self, client, spy_service):
        response = client.post("/products", headers={"x-auth-key": AUTH_KEY})

        assert response.status_code == 400
        assert response.json() == {"message": CONTENT_TYPE_MESSAGE}

    def test_valid_headers_reach_the_service(self, client):
        response = client.post("/products", json=SAMPLE_RECORD, headers=HEADERS)
        assert response.status_code == 201
