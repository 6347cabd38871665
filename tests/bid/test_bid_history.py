# ruff: noqa: S101

"""Tests for the GET /products/{product_id}/bids endpoint."""

import pytest
from fastapi import status
from fastapi.testclient import TestClient

_READ_ID = "8b8c7f3e-4d2a-4b5c-9f1e-0a6f3e4d2a01"
_PUT_ID = "8b8c7f3e-4d2a-4b5c-9f1e-0a6f3e4d2a04"
_NON_EXISTENT_ID = "12345678-1234-5678-1234-567812345678"


@pytest.mark.asyncio
@pytest.mark.bid
@pytest.mark.bid_history
class TestBidHistory:
    """Tests for the paged bid history."""

    @classmethod
    async def test_history_order(cls, client: TestClient) -> None:
        """Highest bid first, bidder names masked."""
        response = client.get(f"/products/{_READ_ID}/bids")

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["total"] == 2
        assert body["totalpages"] == 1
        assert body["navigation"]["label"] == "1–2 of 2"

        first, second = body["items"]
        assert first["bidder_name"] == "****Hoa"
        assert first["amount"] == 5_200_000
        assert first["is_highest"] is True
        assert second["bidder_name"] == "****Anh"
        assert second["amount"] == 5_100_000
        assert second["is_highest"] is False

    @classmethod
    async def test_empty_history(cls, client: TestClient) -> None:
        """A product without bids has an empty first page."""
        response = client.get(f"/products/{_PUT_ID}/bids")

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["items"] == []
        assert body["page"] == 1
        assert body["navigation"]["label"] == "0–0 of 0"

    @classmethod
    async def test_invalid_page_size(cls, client: TestClient) -> None:
        """Only the configured page sizes are accepted."""
        response = client.get(f"/products/{_READ_ID}/bids", params={"size": 10})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["code"] == "INVALID_PAGE_SIZE"

    @classmethod
    async def test_not_found(cls, client: TestClient) -> None:
        """Unknown products give 404."""
        response = client.get(f"/products/{_NON_EXISTENT_ID}/bids")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["code"] == "NOT_FOUND"
