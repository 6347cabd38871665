# ruff: noqa: S101

"""Tests for category GET endpoints."""

import pytest
from fastapi import status
from fastapi.testclient import TestClient

_ELECTRONICS_ID = "1a6f3e4d-2a5b-4c7f-9f1e-0b8c7f3e4d2a"
_PHONES_ID = "2a6f3e4d-2a5b-4c7f-9f1e-0b8c7f3e4d2a"
_CAMERAS_ID = "3a6f3e4d-2a5b-4c7f-9f1e-0b8c7f3e4d2a"
_NON_EXISTENT_ID = "12345678-1234-5678-1234-567812345678"


@pytest.mark.asyncio
@pytest.mark.category
@pytest.mark.category_read
class TestReadCategories:
    """Tests for the GET /categories endpoints."""

    @classmethod
    async def test_tree(cls, client: TestClient) -> None:
        """Top-level categories carry their children."""
        response = client.get("/categories")

        assert response.status_code == status.HTTP_200_OK
        tree = {node["slug"]: node for node in response.json()}
        assert {"electronics", "fashion", "paging"} <= tree.keys()

        electronics = tree["electronics"]
        assert electronics["level"] == 1
        assert electronics["parent_id"] is None
        children = {child["id"] for child in electronics["children"]}
        assert children == {_PHONES_ID, _CAMERAS_ID}
        assert all(child["level"] == 2 for child in electronics["children"])

    @classmethod
    async def test_get_by_id(cls, client: TestClient) -> None:
        """A single category can be read by ID."""
        response = client.get(f"/categories/{_PHONES_ID}")

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["name"] == "Phones"
        assert body["slug"] == "phones"
        assert body["parent_id"] == _ELECTRONICS_ID

    @classmethod
    async def test_not_found(cls, client: TestClient) -> None:
        """Unknown IDs give 404."""
        response = client.get(f"/categories/{_NON_EXISTENT_ID}")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["code"] == "NOT_FOUND"
