"""Tests for the category HTTP endpoints."""

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from admin_catalog import models


def _create(client: TestClient, name: str, description: str = "", is_active: bool = True) -> str:
    response = client.post(
        "/categories",
        json={"name": name, "description": description, "is_active": is_active},
    )
    assert response.status_code == status.HTTP_201_CREATED
    return response.json()["id"]


class TestCreateCategory:
    """Test suite for POST /categories."""

    def test_create_returns_id_and_location(self, client: TestClient, db_session: Session) -> None:
        response = client.post(
            "/categories",
            json={"name": "Filmes", "description": "A mais assistida", "is_active": True},
        )

        assert response.status_code == status.HTTP_201_CREATED
        category_id = response.json()["id"]
        assert response.headers["location"].endswith(f"/categories/{category_id}")

        row = db_session.get(models.Category, category_id)
        assert row is not None
        assert row.name == "Filmes"
        assert row.active is True
        assert row.deleted_at is None

    def test_is_active_defaults_to_true(self, client: TestClient) -> None:
        response = client.post("/categories", json={"name": "Filmes"})

        assert response.status_code == status.HTTP_201_CREATED
        category_id = response.json()["id"]
        assert client.get(f"/categories/{category_id}").json()["is_active"] is True

    def test_null_name_is_rejected(self, client: TestClient) -> None:
        response = client.post(
            "/categories", json={"name": None, "description": "desc", "is_active": True}
        )

        assert response.status_code == 422
        assert response.json() == {
            "message": "Could not create Aggregate Category",
            "errors": [{"message": "'name' should not be null"}],
        }

    def test_short_name_is_rejected(self, client: TestClient) -> None:
        response = client.post("/categories", json={"name": "Fi"})

        assert response.status_code == 422
        assert response.json()["errors"] == [
            {"message": "'name' must be between 3 and 255 characters"}
        ]


class TestGetCategory:
    """Test suite for GET /categories/{id}."""

    def test_get_returns_every_field(self, client: TestClient) -> None:
        category_id = _create(client, "Filmes", "A mais assistida", is_active=False)

        response = client.get(f"/categories/{category_id}")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["id"] == category_id
        assert data["name"] == "Filmes"
        assert data["description"] == "A mais assistida"
        assert data["is_active"] is False
        assert data["created_at"] is not None
        assert data["updated_at"] is not None
        assert data["deleted_at"] is not None

    def test_get_unknown_id_returns_404(self, client: TestClient) -> None:
        response = client.get("/categories/123")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"message": "Category with ID 123 was not found", "errors": []}


class TestUpdateCategory:
    """Test suite for PUT /categories/{id}."""

    def test_update_changes_fields(self, client: TestClient) -> None:
        category_id = _create(client, "Film")

        response = client.put(
            f"/categories/{category_id}",
            json={"name": "Filmes", "description": "Nova", "is_active": False},
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"id": category_id}
        data = client.get(f"/categories/{category_id}").json()
        assert data["name"] == "Filmes"
        assert data["description"] == "Nova"
        assert data["is_active"] is False
        assert data["deleted_at"] is not None

    def test_update_with_invalid_name_returns_422(self, client: TestClient) -> None:
        category_id = _create(client, "Filmes")

        response = client.put(
            f"/categories/{category_id}", json={"name": "", "description": None}
        )

        assert response.status_code == 422
        assert response.json() == {
            "message": "Could not update Aggregate Category",
            "errors": [{"message": "'name' should not be empty"}],
        }
        assert client.get(f"/categories/{category_id}").json()["name"] == "Filmes"

    def test_update_unknown_id_returns_404(self, client: TestClient) -> None:
        response = client.put("/categories/123", json={"name": "Filmes"})

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["message"] == "Category with ID 123 was not found"


class TestDeleteCategory:
    """Test suite for DELETE /categories/{id}."""

    def test_delete_returns_204(self, client: TestClient) -> None:
        category_id = _create(client, "Filmes")

        response = client.delete(f"/categories/{category_id}")

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert client.get(f"/categories/{category_id}").status_code == 404

    def test_delete_unknown_id_returns_204(self, client: TestClient) -> None:
        assert client.delete("/categories/123").status_code == status.HTTP_204_NO_CONTENT


class TestListCategories:
    """Test suite for GET /categories."""

    def test_list_uses_query_parameters(self, client: TestClient) -> None:
        for name in ("Filmes", "Series", "Documentarios"):
            _create(client, name)

        response = client.get(
            "/categories", params={"page": 0, "perPage": 2, "sort": "name", "dir": "desc"}
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["current_page"] == 0
        assert data["per_page"] == 2
        assert data["total"] == 3
        assert [item["name"] for item in data["items"]] == ["Series", "Filmes"]
        assert set(data["items"][0]) == {
            "id",
            "name",
            "description",
            "is_active",
            "created_at",
            "deleted_at",
        }

    def test_list_search(self, client: TestClient) -> None:
        _create(client, "Filmes", "Longas")
        _create(client, "Series", "Temporadas")

        data = client.get("/categories", params={"search": "tempo"}).json()

        assert data["total"] == 1
        assert data["items"][0]["name"] == "Series"

    def test_list_defaults(self, client: TestClient) -> None:
        data = client.get("/categories").json()

        assert data == {"current_page": 0, "per_page": 10, "total": 0, "items": []}
