"""Pagination helpers shared by the list endpoints."""

from bidmarket.config.config import settings

from .exceptions import InvalidPageSizeError
from .state import PaginationState
from .window import PageWindowCalculator, WindowPolicy, get_window_calculator

__all__ = ["calculator_for", "resolve_state", "validate_page_size"]


def validate_page_size(size: int | None) -> int:
    """Return the page size to use for a request.

    Args:
        size: Requested page size, or None for the configured default.

    Returns:
        A page size from the allowed set.

    Raises:
        InvalidPageSizeError: If the size is not in the allowed set.
    """
    if size is None:
        return settings.default_page_size
    if size not in settings.allowed_page_sizes:
        raise InvalidPageSizeError(size, settings.allowed_page_sizes)
    return size


def resolve_state(page: int, size: int, total: int) -> PaginationState:
    """Build the pagination state for a request, clamped to the result size."""
    return PaginationState.clamped(page, size, total)


def calculator_for(
    window: WindowPolicy | None, default: WindowPolicy | str
) -> PageWindowCalculator:
    """Return the page window calculator for a view.

    Args:
        window: Policy requested by the client, if any.
        default: Policy configured for the view.
    """
    return get_window_calculator(window or default, settings.max_visible_pages)
