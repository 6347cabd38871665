# ruff: noqa: S101

"""Tests for product GET endpoints."""

from datetime import datetime

import pytest
from fastapi import status
from fastapi.testclient import TestClient

_READ_ID = "8b8c7f3e-4d2a-4b5c-9f1e-0a6f3e4d2a01"
_CAMERA_ID = "8b8c7f3e-4d2a-4b5c-9f1e-0a6f3e4d2a02"
_TRIPOD_ID = "8b8c7f3e-4d2a-4b5c-9f1e-0a6f3e4d2a03"
_EXPIRED_ID = "8b8c7f3e-4d2a-4b5c-9f1e-0a6f3e4d2a11"
_SCHEDULED_ID = "8b8c7f3e-4d2a-4b5c-9f1e-0a6f3e4d2a12"
_CAMERAS_ID = "3a6f3e4d-2a5b-4c7f-9f1e-0b8c7f3e4d2a"
_NON_EXISTENT_ID = "12345678-1234-5678-1234-567812345678"


@pytest.mark.asyncio
@pytest.mark.product
@pytest.mark.product_read
class TestReadProduct:
    """Tests for the GET /products/{product_id} endpoint."""

    @classmethod
    async def test_get_by_id(cls, client: TestClient) -> None:
        """The detail view carries auction state and category."""
        response = client.get(f"/products/{_READ_ID}")

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["id"] == _READ_ID
        assert body["title"] == "Leica M6 Film Camera"
        assert body["status"] == "active"
        assert body["current_price"] == 5_200_000
        assert body["bid_count"] == 2
        assert body["highest_bidder_name"] == "Le Thi Hoa"
        assert body["cover_image"] == "https://img.bidmarket.test/leica-front.jpg"
        assert body["is_hot"] is False
        assert body["category"]["id"] == _CAMERAS_ID
        assert response.headers["ETag"] == f'"{body["version"]}"'

    @classmethod
    async def test_top_bidders(cls, client: TestClient) -> None:
        """The detail view lists the leading bids with masked names."""
        bidders = client.get(f"/products/{_READ_ID}").json()["top_bidders"]

        assert [(b["bidder_name"], b["amount"]) for b in bidders] == [
            ("****Hoa", 5_200_000),
            ("****Anh", 5_100_000),
        ]
        assert [b["is_highest"] for b in bidders] == [True, False]

    @classmethod
    async def test_related_products(cls, client: TestClient) -> None:
        """Related auctions are other active products of the same category."""
        related = client.get(f"/products/{_READ_ID}").json()["related"]
        ids = [item["id"] for item in related]

        assert set(ids) == {_CAMERA_ID, _TRIPOD_ID}
        assert _READ_ID not in ids
        assert len(related) <= 5
        assert all(item["status"] == "active" for item in related)

    @classmethod
    async def test_no_bids_no_top_bidders(cls, client: TestClient) -> None:
        """An auction without bids has an empty bidder list."""
        body = client.get(f"/products/{_TRIPOD_ID}").json()

        assert body["top_bidders"] == []
        assert _READ_ID in [item["id"] for item in body["related"]]

    @classmethod
    async def test_not_modified(cls, client: TestClient) -> None:
        """A matching If-None-Match header gives 304."""
        etag = client.get(f"/products/{_READ_ID}").headers["ETag"]

        response = client.get(f"/products/{_READ_ID}", headers={"If-None-Match": etag})

        assert response.status_code == status.HTTP_304_NOT_MODIFIED
        assert response.headers["ETag"] == etag

    @classmethod
    async def test_stale_if_none_match(cls, client: TestClient) -> None:
        """A stale If-None-Match header returns the full product."""
        response = client.get(
            f"/products/{_READ_ID}", headers={"If-None-Match": '"999"'}
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["id"] == _READ_ID

    @classmethod
    async def test_expired_auction_ends_on_read(cls, client: TestClient) -> None:
        """An active auction past its end is reported as ended."""
        response = client.get(f"/products/{_EXPIRED_ID}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["status"] == "ended"

    @classmethod
    async def test_scheduled_auction(cls, client: TestClient) -> None:
        """An auction starting in the future stays scheduled."""
        response = client.get(f"/products/{_SCHEDULED_ID}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["status"] == "scheduled"

    @classmethod
    async def test_not_found(cls, client: TestClient) -> None:
        """Unknown IDs give 404."""
        response = client.get(f"/products/{_NON_EXISTENT_ID}")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["code"] == "NOT_FOUND"

    @classmethod
    async def test_invalid_id(cls, client: TestClient) -> None:
        """Malformed IDs fail request validation."""
        response = client.get("/products/not-a-uuid")

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


@pytest.mark.asyncio
@pytest.mark.product
@pytest.mark.product_read
class TestTopProducts:
    """Tests for the GET /products/top endpoint."""

    @classmethod
    async def test_top_lists(cls, client: TestClient) -> None:
        """Each highlight list holds up to five active auctions in order."""
        response = client.get("/products/top")

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        for key in ("ending_soon", "most_bids", "highest_price"):
            assert 0 < len(body[key]) <= 5
            assert all(item["status"] == "active" for item in body[key])

        ending = [datetime.fromisoformat(i["end_at"]) for i in body["ending_soon"]]
        assert ending == sorted(ending)

        bids = [item["bid_count"] for item in body["most_bids"]]
        assert bids == sorted(bids, reverse=True)

        prices = [item["current_price"] for item in body["highest_price"]]
        assert prices == sorted(prices, reverse=True)
