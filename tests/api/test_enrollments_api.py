# tests/api/test_enrollments_api.py
"""
Integration tests for the enrollment API endpoints.
"""

import httpx
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from enrollment_service.models.address import Address
from enrollment_service.models.enrollment import Enrollment
from tests.utils.auth import get_user_authentication_headers
from tests.utils.enrollment import VALID_CPF, create_enrollment, enrollment_body


class TestGetEnrollment:
    def test_requires_token(self, client: TestClient) -> None:
        response = client.get("/api/v1/enrollments")

        assert response.status_code == 401

    def test_rejects_forged_token(self, client: TestClient) -> None:
        response = client.get(
            "/api/v1/enrollments", headers={"Authorization": "Bearer not-a-jwt"}
        )

        assert response.status_code == 401

    def test_not_found(self, client: TestClient) -> None:
        response = client.get(
            "/api/v1/enrollments", headers=get_user_authentication_headers(user_id=9)
        )

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "NOT_FOUND"

    def test_without_address(self, client: TestClient, db: Session) -> None:
        enrollment = create_enrollment(db, user_id=3)

        response = client.get(
            "/api/v1/enrollments", headers=get_user_authentication_headers(user_id=3)
        )

        assert response.status_code == 200
        content = response.json()
        assert content["id"] == enrollment.id
        assert content["cpf"] == VALID_CPF
        assert "address" not in content
        assert "user_id" not in content
        assert "created_at" not in content

    def test_with_address(self, client: TestClient, db: Session) -> None:
        create_enrollment(db, user_id=3, with_address=True)

        response = client.get(
            "/api/v1/enrollments", headers=get_user_authentication_headers(user_id=3)
        )

        assert response.status_code == 200
        address = response.json()["address"]
        assert address["cep"] == "01001000"
        assert "enrollment_id" not in address
        assert "updated_at" not in address


class TestUpsertEnrollment:
    def test_creates_then_reads_back(self, client: TestClient) -> None:
        headers = get_user_authentication_headers(user_id=7)

        response = client.post(
            "/api/v1/enrollments",
            headers=headers,
            json=enrollment_body(address={"address_detail": "Apto 12"}),
        )
        assert response.status_code == 200

        content = client.get("/api/v1/enrollments", headers=headers).json()
        assert content["name"] == "Maria Silva"
        assert content["cpf"] == VALID_CPF
        assert content["birthday"].startswith("1990-05-17")
        assert content["address"]["street"] == "Praça da Sé"
        assert content["address"]["address_detail"] == "Apto 12"

    def test_second_submission_updates(self, client: TestClient, db: Session) -> None:
        headers = get_user_authentication_headers(user_id=7)

        client.post("/api/v1/enrollments", headers=headers, json=enrollment_body())
        response = client.post(
            "/api/v1/enrollments",
            headers=headers,
            json=enrollment_body(
                name="Maria Souza",
                address={"cep": "22041001", "state": "RJ", "number": "1200"},
            ),
        )

        assert response.status_code == 200
        assert db.query(Enrollment).count() == 1
        assert db.query(Address).count() == 1
        content = client.get("/api/v1/enrollments", headers=headers).json()
        assert content["name"] == "Maria Souza"
        assert content["address"]["cep"] == "22041001"
        assert content["address"]["number"] == "1200"

    def test_unknown_cep(self, client: TestClient, db: Session) -> None:
        response = client.post(
            "/api/v1/enrollments",
            headers=get_user_authentication_headers(user_id=7),
            json=enrollment_body(address={"cep": "99999999"}),
        )

        assert response.status_code == 404
        assert db.query(Enrollment).count() == 0

    def test_invalid_body(self, client: TestClient, via_cep) -> None:
        response = client.post(
            "/api/v1/enrollments",
            headers=get_user_authentication_headers(user_id=7),
            json=enrollment_body(cpf="123.456.789-00", phone="11987654321"),
        )

        assert response.status_code == 400
        fields = {e["field"] for e in response.json()["error"]["validation_errors"]}
        assert fields == {"body.cpf", "body.phone"}
        assert via_cep.requested == []

    def test_invalid_state(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/enrollments",
            headers=get_user_authentication_headers(user_id=7),
            json=enrollment_body(address={"state": "XX"}),
        )

        assert response.status_code == 400

    def test_requires_token(self, client: TestClient) -> None:
        response = client.post("/api/v1/enrollments", json=enrollment_body())

        assert response.status_code == 401


class TestCepLookup:
    def test_found(self, client: TestClient) -> None:
        response = client.get("/api/v1/enrollments/cep", params={"cep": "01001000"})

        assert response.status_code == 200
        assert response.json() == {
            "logradouro": "Praça da Sé",
            "complemento": "lado ímpar",
            "bairro": "Sé",
            "cidade": "São Paulo",
            "uf": "SP",
        }

    def test_not_found_is_no_content(self, client: TestClient) -> None:
        response = client.get("/api/v1/enrollments/cep", params={"cep": "99999999"})

        assert response.status_code == 204
        assert response.content == b""

    def test_invalid_cep(self, client: TestClient, via_cep) -> None:
        response = client.get("/api/v1/enrollments/cep", params={"cep": "123"})

        assert response.status_code == 400
        content = response.json()
        assert content["error"]["code"] == "INVALID_DATA"
        assert content["error"]["errors"] == ["Unprocessable Entity"]
        assert via_cep.requested == []

    def test_upstream_unreachable(self, client: TestClient, via_cep) -> None:
        via_cep.error = httpx.ConnectError("connection refused")

        response = client.get("/api/v1/enrollments/cep", params={"cep": "01001000"})

        assert response.status_code == 502
        assert response.json()["error"]["code"] == "UPSTREAM_UNAVAILABLE"

    def test_upstream_timeout(self, client: TestClient, via_cep) -> None:
        via_cep.error = httpx.ReadTimeout("timed out")

        response = client.get("/api/v1/enrollments/cep", params={"cep": "01001000"})

        assert response.status_code == 504


def test_health(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}
