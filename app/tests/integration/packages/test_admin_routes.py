"""Integration tests for the admin routes."""

import pytest

from infrastructure.operations import OperationResult
from tests.factories.auth import make_token
from tests.factories.cafes import CAFE_ID, make_cafe
from tests.factories.submissions import SUBMISSION_ID, make_submission_row


@pytest.fixture
def admin_headers(mock_client):
    mock_client.select.return_value = OperationResult.success(data=[{"id": "admin"}])
    return {"Authorization": f"Bearer {make_token()}"}


@pytest.mark.integration
class TestAdminAuthentication:
    def test_missing_token(self, client):
        assert client.get("/api/v1/admin/submissions").status_code == 401

    def test_expired_token(self, client):
        headers = {"Authorization": f"Bearer {make_token(expires_in=-60)}"}

        assert client.get("/api/v1/admin/submissions", headers=headers).status_code == 401

    def test_wrong_secret(self, client):
        token = make_token(secret="another-secret-that-is-long-enough")
        headers = {"Authorization": f"Bearer {token}"}

        assert client.get("/api/v1/admin/submissions", headers=headers).status_code == 401

    def test_not_admin(self, client, mock_client):
        mock_client.select.return_value = OperationResult.success(data=[])
        headers = {"Authorization": f"Bearer {make_token()}"}

        assert client.get("/api/v1/admin/submissions", headers=headers).status_code == 403

    def test_secret_not_configured(self, client, settings):
        settings.supabase.SUPABASE_JWT_SECRET = ""
        headers = {"Authorization": f"Bearer {make_token()}"}

        assert client.get("/api/v1/admin/submissions", headers=headers).status_code == 500


@pytest.mark.integration
class TestAdminSubmissions:
    def test_list(self, client, admin_headers, submission_repository):
        submission_repository.list_by_status.return_value = OperationResult.success(
            data=[make_submission_row()]
        )

        response = client.get(
            "/api/v1/admin/submissions?status=pending", headers=admin_headers
        )

        assert response.status_code == 200
        assert response.json()["count"] == 1
        submission_repository.list_by_status.assert_called_once_with("pending", limit=100)

    def test_approve(self, client, admin_headers, submission_repository, cafe_repository):
        submission_repository.get.return_value = OperationResult.success(
            data=make_submission_row()
        )
        submission_repository.update.return_value = OperationResult.success(
            data=make_submission_row(status="approved")
        )
        cafe_repository.create.return_value = OperationResult.success(data=make_cafe())

        response = client.post(
            f"/api/v1/admin/submissions/{SUBMISSION_ID}/decision",
            json={"decision": "approve"},
            headers=admin_headers,
        )

        assert response.status_code == 200
        assert response.json() == {
            "ok": True,
            "submission_id": SUBMISSION_ID,
            "status": "approved",
            "cafe_id": CAFE_ID,
        }

    def test_unknown_submission(self, client, admin_headers, submission_repository):
        submission_repository.get.return_value = OperationResult.not_found("missing")

        response = client.post(
            f"/api/v1/admin/submissions/{SUBMISSION_ID}/decision",
            json={"decision": "reject"},
            headers=admin_headers,
        )

        assert response.status_code == 404

    def test_already_reviewed(self, client, admin_headers, submission_repository):
        submission_repository.get.return_value = OperationResult.success(
            data=make_submission_row(status="rejected")
        )

        response = client.post(
            f"/api/v1/admin/submissions/{SUBMISSION_ID}/decision",
            json={"decision": "approve"},
            headers=admin_headers,
        )

        assert response.status_code == 409

    def test_invalid_decision(self, client, admin_headers):
        response = client.post(
            f"/api/v1/admin/submissions/{SUBMISSION_ID}/decision",
            json={"decision": "maybe"},
            headers=admin_headers,
        )

        assert response.status_code == 422


@pytest.mark.integration
class TestAdminCafes:
    def test_create(self, client, admin_headers, cafe_repository):
        cafe_repository.create.return_value = OperationResult.success(data=make_cafe())

        response = client.post(
            "/api/v1/admin/cafes",
            json={"name": "Kaffeebar", "address": "Torstraße 1", "city": "Berlin"},
            headers=admin_headers,
        )

        assert response.status_code == 201
        assert response.json()["cafe"]["id"] == CAFE_ID

    def test_create_invalid_latitude(self, client, admin_headers, cafe_repository):
        response = client.post(
            "/api/v1/admin/cafes",
            json={"name": "Bar", "address": "Weg 1", "city": "Bonn", "latitude": 95},
            headers=admin_headers,
        )

        assert response.status_code == 400
        cafe_repository.create.assert_not_called()

    def test_update_not_found(self, client, admin_headers, cafe_repository):
        cafe_repository.update.return_value = OperationResult.not_found("missing")

        response = client.patch(
            f"/api/v1/admin/cafes/{CAFE_ID}",
            json={"is_active": False},
            headers=admin_headers,
        )

        assert response.status_code == 404
