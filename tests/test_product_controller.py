"""Tests for the product HTTP API.

These tests verify:
- Request/response mapping for create, update and read
- Service errors mapped to HTTP status codes and the standard error body
"""

import os
import tempfile

import pytest
from fastapi.testclient import TestClient

from src.api import create_app, get_product_service
from src.clients import SqliteClient, SqliteProductRepository
from src.services import ProductService


class TestProductController:
    """Test the /products endpoints against a temporary SQLite database."""

    @pytest.fixture
    def temp_db_path(self):
        """Create a temporary database file for testing."""
        fd, path = tempfile.mkstemp(suffix=".db")
        os.close(fd)
        yield path
        # Cleanup
        if os.path.exists(path):
            os.remove(path)

    @pytest.fixture
    def client(self, temp_db_path):
        """Create a TestClient whose service uses the temporary database."""
        sqlite_client = SqliteClient(temp_db_path)
        service = ProductService(SqliteProductRepository(sqlite_client))

        app = create_app()
        app.dependency_overrides[get_product_service] = lambda: service

        with TestClient(app) as test_client:
            yield test_client

        sqlite_client.close()

    def test_health_check(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_insert_returns_created_product(self, client):
        response = client.post("/products", json={"name": "Playstation", "price": 10.0})

        assert response.status_code == 201
        body = response.json()
        assert body["id"] is not None
        assert body["name"] == "Playstation"
        assert body["price"] == 10.0

    def test_insert_with_blank_name_returns_422(self, client):
        response = client.post("/products", json={"name": "  ", "price": 10.0})

        assert response.status_code == 422
        body = response.json()
        assert body["status"] == 422
        assert body["error"] == "Invalid data"
        assert body["message"] == "Name field is empty or null"
        assert body["path"] == "/products"
        assert client.get("/products").json() == []

    def test_insert_without_price_returns_422(self, client):
        response = client.post("/products", json={"name": "Playstation"})

        assert response.status_code == 422
        assert response.json()["message"] == "Invalid price field"

    def test_update_existing_product(self, client):
        created = client.post("/products", json={"name": "Playstation", "price": 10.0}).json()

        response = client.put(
            f"/products/{created['id']}", json={"name": "Playstation 5", "price": 499.0}
        )

        assert response.status_code == 200
        assert response.json() == {"id": created["id"], "name": "Playstation 5", "price": 499.0}
        assert client.get(f"/products/{created['id']}").json()["name"] == "Playstation 5"

    def test_update_missing_product_returns_404(self, client):
        response = client.put("/products/999", json={"name": "Playstation", "price": 10.0})

        assert response.status_code == 404
        body = response.json()
        assert body["error"] == "Resource not found"
        assert body["path"] == "/products/999"

    def test_update_missing_product_with_invalid_data_returns_422(self, client):
        response = client.put("/products/999", json={"name": "", "price": 10.0})

        assert response.status_code == 422

    def test_find_by_id_missing_returns_404(self, client):
        response = client.get("/products/999")

        assert response.status_code == 404

    def test_find_all_lists_products(self, client):
        client.post("/products", json={"name": "Playstation", "price": 10.0})
        client.post("/products", json={"name": "Xbox", "price": 20.0})

        response = client.get("/products")

        assert response.status_code == 200
        assert [product["name"] for product in response.json()] == ["Playstation", "Xbox"]
