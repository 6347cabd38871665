# ruff: noqa: S101

"""Tests for the paged product list."""

import pytest
from fastapi import status
from fastapi.testclient import TestClient

_PAGING_ID = "6a6f3e4d-2a5b-4c7f-9f1e-0b8c7f3e4d2a"
_ELECTRONICS_ID = "1a6f3e4d-2a5b-4c7f-9f1e-0b8c7f3e4d2a"
_PHONES_ID = "2a6f3e4d-2a5b-4c7f-9f1e-0b8c7f3e4d2a"
_CAMERAS_ID = "3a6f3e4d-2a5b-4c7f-9f1e-0b8c7f3e4d2a"
_READ_ID = "8b8c7f3e-4d2a-4b5c-9f1e-0a6f3e4d2a01"
_ENDED_ID = "8b8c7f3e-4d2a-4b5c-9f1e-0a6f3e4d2a10"
_NON_EXISTENT_ID = "12345678-1234-5678-1234-567812345678"

_ELLIPSIS = "…"


def _render(navigation: dict) -> list[int | str]:
    return [
        _ELLIPSIS if entry["kind"] == "ellipsis" else entry["page"]
        for entry in navigation["pages"]
    ]


def _paging(client: TestClient, **params: str | int) -> dict:
    response = client.get("/products", params={"category_id": _PAGING_ID, **params})
    assert response.status_code == status.HTTP_200_OK
    return response.json()


@pytest.mark.asyncio
@pytest.mark.product
@pytest.mark.product_paged
class TestPagedProducts:
    """Tests for the GET /products endpoint."""

    @classmethod
    async def test_default_page(cls, client: TestClient) -> None:
        """Without parameters the first page holds the default page size."""
        body = _paging(client)

        assert body["page"] == 1
        assert body["size"] == 12
        assert body["total"] == 60
        assert body["totalpages"] == 5
        assert len(body["items"]) == 12
        assert body["items"][0]["title"] == "Paging Lot 60"

        navigation = body["navigation"]
        assert navigation["label"] == "1–12 of 60"
        assert navigation["start_item"] == 1
        assert navigation["end_item"] == 12
        assert _render(navigation) == [1, 2, 3, 4, 5]
        assert [e["page"] for e in navigation["pages"] if e["current"]] == [1]
        assert not navigation["has_previous"]
        assert navigation["has_next"]

    @classmethod
    async def test_sliding_window(cls, client: TestClient) -> None:
        """The list view uses the sliding window by default."""
        body = _paging(client, size=6, page=6)

        assert body["totalpages"] == 10
        assert body["navigation"]["label"] == "31–36 of 60"
        assert _render(body["navigation"]) == [
            1, _ELLIPSIS, 4, 5, 6, 7, 8, _ELLIPSIS, 10
        ]

    @classmethod
    async def test_anchored_window_override(cls, client: TestClient) -> None:
        """The window query parameter selects the anchored policy."""
        body = _paging(client, size=6, page=6, window="anchored")

        assert _render(body["navigation"]) == [1, _ELLIPSIS, 5, 6, 7, _ELLIPSIS, 10]

    @classmethod
    async def test_page_beyond_last_is_clamped(cls, client: TestClient) -> None:
        """A page past the end shows the last page."""
        body = _paging(client, size=6, page=99)

        assert body["page"] == 10
        assert len(body["items"]) == 6
        assert body["navigation"]["label"] == "55–60 of 60"
        assert body["navigation"]["has_previous"]
        assert not body["navigation"]["has_next"]

    @classmethod
    async def test_partial_last_page(cls, client: TestClient) -> None:
        """The last page holds the remainder."""
        body = _paging(client, size=48, page=2)

        assert len(body["items"]) == 12
        assert body["navigation"]["label"] == "49–60 of 60"
        assert _render(body["navigation"]) == [1, 2]

    @classmethod
    async def test_pages_do_not_overlap(cls, client: TestClient) -> None:
        """Walking all pages yields every product exactly once."""
        seen: list[str] = []
        for page in range(1, 6):
            seen.extend(item["id"] for item in _paging(client, page=page)["items"])

        assert len(seen) == 60
        assert len(set(seen)) == 60

    @classmethod
    async def test_invalid_page_size(cls, client: TestClient) -> None:
        """Page sizes outside the allowed set are rejected."""
        response = client.get("/products", params={"size": 7})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["code"] == "INVALID_PAGE_SIZE"

    @classmethod
    async def test_invalid_page(cls, client: TestClient) -> None:
        """Pages below 1 fail request validation."""
        response = client.get("/products", params={"page": 0})

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    @classmethod
    async def test_empty_result(cls, client: TestClient) -> None:
        """An empty result has no page buttons and shows 0-0."""
        body = _paging(client, min_price=999_999_999)

        assert body["page"] == 1
        assert body["total"] == 0
        assert body["totalpages"] == 0
        assert body["items"] == []
        assert body["navigation"]["pages"] == []
        assert body["navigation"]["label"] == "0–0 of 0"
        assert not body["navigation"]["has_previous"]
        assert not body["navigation"]["has_next"]


@pytest.mark.asyncio
@pytest.mark.product
@pytest.mark.product_paged
class TestProductFilters:
    """Tests for sorting and filtering the product list."""

    @classmethod
    async def test_sort_price_asc(cls, client: TestClient) -> None:
        """Cheapest products come first."""
        items = _paging(client, sort="price_asc")["items"]

        assert items[0]["title"] == "Paging Lot 01"
        assert items[0]["current_price"] == 21_000
        prices = [item["current_price"] for item in items]
        assert prices == sorted(prices)

    @classmethod
    async def test_sort_price_desc(cls, client: TestClient) -> None:
        """Most expensive products come first."""
        items = _paging(client, sort="price_desc")["items"]

        assert items[0]["title"] == "Paging Lot 60"
        assert items[0]["current_price"] == 80_000

    @classmethod
    async def test_sort_ending_soon(cls, client: TestClient) -> None:
        """Auctions ending first come first."""
        items = _paging(client, sort="ending_soon")["items"]

        assert items[0]["title"] == "Paging Lot 01"

    @classmethod
    async def test_unknown_sort(cls, client: TestClient) -> None:
        """Unknown sort options fail request validation."""
        response = client.get("/products", params={"sort": "cheapest"})

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    @classmethod
    async def test_price_range(cls, client: TestClient) -> None:
        """Only products within the price range are listed."""
        body = _paging(client, min_price=30_000, max_price=39_000)

        assert body["total"] == 10
        assert all(30_000 <= i["current_price"] <= 39_000 for i in body["items"])

    @classmethod
    async def test_parent_category_includes_children(cls, client: TestClient) -> None:
        """Filtering by a top-level category lists products of its children."""
        response = client.get(
            "/products", params={"category_id": _ELECTRONICS_ID, "size": 48}
        )

        assert response.status_code == status.HTTP_200_OK
        items = response.json()["items"]
        assert _READ_ID in {item["id"] for item in items}
        assert {item["category_id"] for item in items} <= {
            _ELECTRONICS_ID,
            _PHONES_ID,
            _CAMERAS_ID,
        }

    @classmethod
    async def test_unknown_category(cls, client: TestClient) -> None:
        """Filtering by an unknown category gives 404."""
        response = client.get("/products", params={"category_id": _NON_EXISTENT_ID})

        assert response.status_code == status.HTTP_404_NOT_FOUND

    @classmethod
    async def test_status_filter(cls, client: TestClient) -> None:
        """Ended auctions are only listed when asked for."""
        active = client.get("/products", params={"size": 48, "sort": "most_bids"})
        ended = client.get("/products", params={"status": "ended", "size": 48})

        assert _ENDED_ID not in {item["id"] for item in active.json()["items"]}
        ended_items = ended.json()["items"]
        assert _ENDED_ID in {item["id"] for item in ended_items}
        assert all(item["status"] == "ended" for item in ended_items)
