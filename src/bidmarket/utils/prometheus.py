"""Prometheus metrics for tracking custom metrics."""

from collections.abc import Awaitable, Callable

from fastapi import FastAPI, Request, Response
from prometheus_client import Counter, Gauge

__all__ = ["BIDS_PLACED", "REQUESTS_IN_PROGRESS", "add_prometheus_metrics"]


REQUESTS_IN_PROGRESS = Gauge(
    "http_requests_in_progress_total",
    "Active HTTP requests",
    ["method", "path"],
)

BIDS_PLACED = Counter(
    "bids_placed",
    "Accepted bids",
    ["outcome"],
)


def add_prometheus_metrics(app: FastAPI) -> None:
    """Track in-flight HTTP requests per route template.

    The route template is used as label instead of the raw path, so product
    IDs do not create a new time series each.

    Args:
        app: The FastAPI application instance where the middleware will be added.
    """

    @app.middleware("http")
    async def track_in_flight(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Middleware to track the number of in-flight requests."""
        gauge = REQUESTS_IN_PROGRESS.labels(request.method, _route_path(request))
        gauge.inc()
        try:
            return await call_next(request)
        finally:
            gauge.dec()


def _route_path(request: Request) -> str:
    for route in request.app.routes:
        match, _ = route.matches(request.scope)
        if match.name == "FULL":
            return getattr(route, "path", request.url.path)
    return request.url.path
