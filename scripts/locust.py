"""Load testing with Locust.

Run with: uvx locust -f scripts/locust.py
Run headless with: uvx locust -f scripts/locust.py --host=http://localhost:8000 --headless -u 1 -r 1
"""  # noqa: E501

import random

import urllib3
from locust import HttpUser, constant_throughput, task

urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)


_PRODUCT_IDS = [
    "8b8c7f3e-4d2a-4b5c-9f1e-0a6f3e4d2a01",
    "8b8c7f3e-4d2a-4b5c-9f1e-0a6f3e4d2a02",
    "8b8c7f3e-4d2a-4b5c-9f1e-0a6f3e4d2a03",
    "8b8c7f3e-4d2a-4b5c-9f1e-0a6f3e4d2a04",
    "8b8c7f3e-4d2a-4b5c-9f1e-0a6f3e4d2a07",
]
_PAGING_CATEGORY_ID = "6a6f3e4d-2a5b-4c7f-9f1e-0b8c7f3e4d2a"
_PRODUCT_PATH = "/products"
_BAD_REQUEST = 400
_PRECONDITION_FAILED = 412


class AppLoadTests(HttpUser):
    """Load tests for the API."""

    host = "http://localhost:8000"
    wait_time = constant_throughput(0.1)

    def on_start(self) -> None:
        """Set up the client to ignore SSL certificate validation."""
        self.client.verify = False

    @task(5)
    def browse_products(self) -> None:
        """Page through the product list of the paging category."""
        for page in range(1, 6):
            self.client.get(
                _PRODUCT_PATH,
                params={"category_id": _PAGING_CATEGORY_ID, "page": page},
                name="/products?page",
            )

    @task(3)
    def search_products(self) -> None:
        """Search the active auctions."""
        for query in ["camera", "paging lot", "iphone"]:
            self.client.get(
                f"{_PRODUCT_PATH}/search",
                params={"q": query, "size": 6},
                name="/products/search",
            )

    @task
    def get_top_products(self) -> None:
        """Get the highlight lists of the home page."""
        self.client.get(f"{_PRODUCT_PATH}/top")

    @task(2)
    def get_single_product(self) -> None:
        """Get products and their bid history."""
        for product_id in _PRODUCT_IDS:
            self.client.get(f"{_PRODUCT_PATH}/{product_id}", name="/products/{id}")
            self.client.get(
                f"{_PRODUCT_PATH}/{product_id}/bids", name="/products/{id}/bids"
            )

    @task
    def place_bid(self) -> None:
        """Bid on a running auction, losing the race counts as success."""
        product_id = random.choice(_PRODUCT_IDS)  # noqa: S311
        product = self.client.get(
            f"{_PRODUCT_PATH}/{product_id}", name="/products/{id}"
        ).json()
        amount = product["current_price"] + product["price_step"]
        with self.client.post(
            f"{_PRODUCT_PATH}/{product_id}/bids",
            json={"bidder_name": "Load Test", "amount": amount},
            name="/products/{id}/bids",
            catch_response=True,
        ) as response:
            if response.status_code == _BAD_REQUEST:
                response.success()  # type: ignore[attr-defined]

    @task
    def put_product(self) -> None:
        """Update a product title with its current ETag."""
        product_id = _PRODUCT_IDS[3]
        response = self.client.get(
            f"{_PRODUCT_PATH}/{product_id}", name="/products/{id}"
        )
        etag = response.headers.get("ETag")
        with self.client.put(
            f"{_PRODUCT_PATH}/{product_id}",
            json={"title": "iPhone 12 Pro Max"},
            headers={"If-Match": etag},
            name="/products/{id}",
            catch_response=True,
        ) as response:
            if response.status_code == _PRECONDITION_FAILED:
                response.success()  # type: ignore[attr-defined]
