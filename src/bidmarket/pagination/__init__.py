"""Pagination module.

Pure view-model for paged lists: the pagination state of a view, the page
window with its ellipsis markers, and the range label shown under a list.
"""

from .exceptions import InvalidPageSizeError
from .schemas import PagedResponse, PageNavigation
from .service import calculator_for, resolve_state, validate_page_size
from .state import PaginationState
from .window import (
    AnchoredWindowCalculator,
    PageEntry,
    PageEntryKind,
    PageWindowCalculator,
    SlidingWindowCalculator,
    WindowPolicy,
    get_window_calculator,
)

__all__ = [
    "AnchoredWindowCalculator",
    "InvalidPageSizeError",
    "PageEntry",
    "PageEntryKind",
    "PageNavigation",
    "PageWindowCalculator",
    "PagedResponse",
    "PaginationState",
    "SlidingWindowCalculator",
    "WindowPolicy",
    "calculator_for",
    "get_window_calculator",
    "resolve_state",
    "validate_page_size",
]
