"""Declaration of the root package bidmarket."""

from bidmarket.app import app
from bidmarket.server import run

__all__ = ["app", "main"]


def main() -> None:
    """Run the application server."""
    run()
