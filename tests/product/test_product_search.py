# ruff: noqa: S101

"""Tests for the product search."""

import pytest
from fastapi import status
from fastapi.testclient import TestClient

_READ_ID = "8b8c7f3e-4d2a-4b5c-9f1e-0a6f3e4d2a01"
_ELECTRONICS_ID = "1a6f3e4d-2a5b-4c7f-9f1e-0b8c7f3e4d2a"
_PHONES_ID = "2a6f3e4d-2a5b-4c7f-9f1e-0b8c7f3e4d2a"
_CAMERAS_ID = "3a6f3e4d-2a5b-4c7f-9f1e-0b8c7f3e4d2a"
_NON_EXISTENT_ID = "12345678-1234-5678-1234-567812345678"

_ELLIPSIS = "…"


def _render(navigation: dict) -> list[int | str]:
    return [
        _ELLIPSIS if entry["kind"] == "ellipsis" else entry["page"]
        for entry in navigation["pages"]
    ]


def _search(client: TestClient, q: str, **params: str | int) -> dict:
    response = client.get("/products/search", params={"q": q, **params})
    assert response.status_code == status.HTTP_200_OK
    return response.json()


@pytest.mark.asyncio
@pytest.mark.product
@pytest.mark.product_search
class TestSearchProducts:
    """Tests for the GET /products/search endpoint."""

    @classmethod
    async def test_title_match_ignores_case(cls, client: TestClient) -> None:
        """Search text matches titles regardless of case."""
        body = _search(client, "LEICA")

        assert [item["id"] for item in body["items"]] == [_READ_ID]
        assert body["navigation"]["label"] == "1–1 of 1"
        assert body["navigation"]["pages"] == []

    @classmethod
    async def test_description_match(cls, client: TestClient) -> None:
        """Search text also matches descriptions."""
        body = _search(client, "rangefinder")

        assert [item["id"] for item in body["items"]] == [_READ_ID]

    @classmethod
    async def test_relevance(cls, client: TestClient) -> None:
        """Title matches rank before description matches, newest first."""
        body = _search(client, "camera")

        assert [item["title"] for item in body["items"]] == [
            "Canon AE-1 Camera",
            "Leica M6 Film Camera",
            "Manfrotto Tripod",
        ]

    @classmethod
    async def test_anchored_window(cls, client: TestClient) -> None:
        """Search results use the anchored window by default."""
        first = _search(client, "paging lot", size=6)
        middle = _search(client, "paging lot", size=6, page=6)

        assert first["totalpages"] == 10
        assert _render(first["navigation"]) == [1, 2, 3, 4, _ELLIPSIS, 10]
        assert _render(middle["navigation"]) == [1, _ELLIPSIS, 5, 6, 7, _ELLIPSIS, 10]
        assert middle["navigation"]["label"] == "31–36 of 60"

    @classmethod
    async def test_sort_price(cls, client: TestClient) -> None:
        """Search results can be sorted by price."""
        items = _search(client, "paging lot", sort="price_desc")["items"]

        assert items[0]["current_price"] == 80_000

    @classmethod
    async def test_only_active_auctions(cls, client: TestClient) -> None:
        """Ended auctions are not found."""
        body = _search(client, "adidas")

        assert body["total"] == 0

    @classmethod
    async def test_wildcards_are_literal(cls, client: TestClient) -> None:
        """LIKE wildcards in the search text match only themselves."""
        body = _search(client, "%_%")

        assert body["total"] == 0
        assert body["navigation"]["label"] == "0–0 of 0"

    @classmethod
    async def test_query_too_short(cls, client: TestClient) -> None:
        """Search text needs at least two characters."""
        response = client.get("/products/search", params={"q": "a"})

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert response.json()["code"] == "INVALID_SEARCH_QUERY"

    @classmethod
    @pytest.mark.parametrize("q", ["  ", " a ", "\t\n"])
    async def test_blank_query_rejected(cls, client: TestClient, q: str) -> None:
        """Whitespace does not count towards the search text length."""
        response = client.get("/products/search", params={"q": q})

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert response.json()["code"] == "INVALID_SEARCH_QUERY"

    @classmethod
    async def test_query_is_trimmed(cls, client: TestClient) -> None:
        """Surrounding whitespace is ignored when matching."""
        body = _search(client, "  leica  ")

        assert [item["id"] for item in body["items"]] == [_READ_ID]

    @classmethod
    async def test_query_missing(cls, client: TestClient) -> None:
        """Search text is required."""
        response = client.get("/products/search")

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    @classmethod
    async def test_price_range(cls, client: TestClient) -> None:
        """Search results can be narrowed to a price range."""
        body = _search(
            client, "paging lot", min_price=30_000, max_price=39_000, size=24
        )

        assert body["total"] == 10
        prices = [item["current_price"] for item in body["items"]]
        assert all(30_000 <= price <= 39_000 for price in prices)

    @classmethod
    @pytest.mark.parametrize(
        ("category_id", "expected"),
        [(_CAMERAS_ID, 3), (_ELECTRONICS_ID, 3), (_PHONES_ID, 0)],
    )
    async def test_category_filter(
        cls, client: TestClient, category_id: str, expected: int
    ) -> None:
        """A category filter keeps matches listed in it or its children."""
        body = _search(client, "camera", category_id=category_id)

        assert body["total"] == expected

    @classmethod
    async def test_unknown_category(cls, client: TestClient) -> None:
        """Filtering by a missing category is an error."""
        response = client.get(
            "/products/search",
            params={"q": "camera", "category_id": _NON_EXISTENT_ID},
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["code"] == "NOT_FOUND"
