# ruff: noqa: S101

"""Tests for the POST /products/{product_id}/bids endpoint."""

from datetime import datetime

import pytest
from fastapi import status
from fastapi.testclient import TestClient
from httpx import Response

_BID_ID = "8b8c7f3e-4d2a-4b5c-9f1e-0a6f3e4d2a07"
_BID_LOW_ID = "8b8c7f3e-4d2a-4b5c-9f1e-0a6f3e4d2a08"
_BUY_NOW_ID = "8b8c7f3e-4d2a-4b5c-9f1e-0a6f3e4d2a09"
_ENDED_ID = "8b8c7f3e-4d2a-4b5c-9f1e-0a6f3e4d2a10"
_EXPIRED_ID = "8b8c7f3e-4d2a-4b5c-9f1e-0a6f3e4d2a11"
_SCHEDULED_ID = "8b8c7f3e-4d2a-4b5c-9f1e-0a6f3e4d2a12"
_NEAR_END_ID = "8b8c7f3e-4d2a-4b5c-9f1e-0a6f3e4d2a13"
_NO_EXTEND_ID = "8b8c7f3e-4d2a-4b5c-9f1e-0a6f3e4d2a14"
_NON_EXISTENT_ID = "12345678-1234-5678-1234-567812345678"


def _bid(
    client: TestClient, product_id: str, amount: int, name: str = "Tran Quang Minh"
) -> Response:
    return client.post(
        f"/products/{product_id}/bids", json={"bidder_name": name, "amount": amount}
    )


@pytest.mark.asyncio
@pytest.mark.bid
@pytest.mark.bid_place
class TestPlaceBid:
    """Tests for placing bids on running auctions."""

    @classmethod
    async def test_first_and_second_bid(cls, client: TestClient) -> None:
        """The first bid may match the start price, later bids add a step."""
        response = _bid(client, _BID_ID, 2_000_000)

        assert response.status_code == status.HTTP_201_CREATED
        body = response.json()
        assert body["current_price"] == 2_000_000
        assert body["auto_extended"] is False
        assert body["bid"]["bidder_name"] == "****Minh"
        assert body["bid"]["is_highest"] is True
        assert response.headers["Location"].endswith(body["bid"]["id"])

        too_low = _bid(client, _BID_ID, 2_050_000, "Pham Thu Trang")
        assert too_low.status_code == status.HTTP_400_BAD_REQUEST
        assert too_low.json()["code"] == "BID_TOO_LOW"

        accepted = _bid(client, _BID_ID, 2_100_000, "Pham Thu Trang")
        assert accepted.status_code == status.HTTP_201_CREATED

        product = client.get(f"/products/{_BID_ID}").json()
        assert product["current_price"] == 2_100_000
        assert product["bid_count"] == 2
        assert product["highest_bidder_name"] == "Pham Thu Trang"
        assert product["version"] == 2

    @classmethod
    async def test_bid_below_minimum(cls, client: TestClient) -> None:
        """A bid must beat the current price by one step."""
        response = _bid(client, _BID_LOW_ID, 3_050_000)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        body = response.json()
        assert body["code"] == "BID_TOO_LOW"
        assert "3100000" in body["message"]

        product = client.get(f"/products/{_BID_LOW_ID}").json()
        assert product["current_price"] == 3_000_000
        assert product["bid_count"] == 1

    @classmethod
    async def test_buy_now(cls, client: TestClient) -> None:
        """Reaching the buy-now price ends the auction."""
        response = _bid(client, _BUY_NOW_ID, 4_000_000)

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["current_price"] == 4_000_000

        product = client.get(f"/products/{_BUY_NOW_ID}").json()
        assert product["status"] == "ended"
        assert product["highest_bidder_name"] == "Tran Quang Minh"

        late = _bid(client, _BUY_NOW_ID, 4_100_000, "Vo Thanh Tam")
        assert late.status_code == status.HTTP_400_BAD_REQUEST
        assert late.json()["code"] == "AUCTION_NOT_ACTIVE"

    @classmethod
    @pytest.mark.parametrize("product_id", [_ENDED_ID, _EXPIRED_ID, _SCHEDULED_ID])
    async def test_auction_not_active(cls, client: TestClient, product_id: str) -> None:
        """Ended, expired and scheduled auctions reject bids."""
        response = _bid(client, product_id, 20_000_000)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["code"] == "AUCTION_NOT_ACTIVE"

    @classmethod
    async def test_late_bid_extends(cls, client: TestClient) -> None:
        """A bid shortly before the end extends an auction with auto-extend."""
        before = client.get(f"/products/{_NEAR_END_ID}").json()
        response = _bid(client, _NEAR_END_ID, 4_000_000)

        assert response.status_code == status.HTTP_201_CREATED
        body = response.json()
        assert body["auto_extended"] is True
        end_before = datetime.fromisoformat(before["end_at"])
        assert datetime.fromisoformat(body["end_at"]) > end_before

        product = client.get(f"/products/{_NEAR_END_ID}").json()
        assert product["auto_extend_count"] == 1

    @classmethod
    async def test_late_bid_without_extend(cls, client: TestClient) -> None:
        """Auctions without auto-extend keep their end."""
        before = client.get(f"/products/{_NO_EXTEND_ID}").json()
        response = _bid(client, _NO_EXTEND_ID, 7_000_000)

        assert response.status_code == status.HTTP_201_CREATED
        body = response.json()
        assert body["auto_extended"] is False
        assert datetime.fromisoformat(body["end_at"]) == datetime.fromisoformat(
            before["end_at"]
        )

    @classmethod
    async def test_not_found(cls, client: TestClient) -> None:
        """Bids on unknown products give 404."""
        response = _bid(client, _NON_EXISTENT_ID, 1_000_000)

        assert response.status_code == status.HTTP_404_NOT_FOUND

    @classmethod
    @pytest.mark.parametrize(
        "payload",
        [
            {"bidder_name": "Tran Quang Minh", "amount": 0},
            {"bidder_name": "", "amount": 2_500_000},
            {"amount": 2_500_000},
        ],
    )
    async def test_invalid_payload(cls, client: TestClient, payload: dict) -> None:
        """Malformed bids are rejected by request validation."""
        response = client.post(f"/products/{_BID_ID}/bids", json=payload)

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
