"""Paged Response Model."""

from collections.abc import Sequence
from typing import Generic, TypeVar

from pydantic import BaseModel, Field

from .state import PaginationState
from .window import PageEntry, PageWindowCalculator

__all__ = ["PageNavigation", "PagedResponse"]

T = TypeVar("T")


class PageNavigation(BaseModel):
    """Navigation controls rendered below a paged list."""

    pages: list[PageEntry] = Field(
        description="Page buttons and ellipsis markers, empty for a single page"
    )
    start_item: int = Field(description="1-indexed position of the first item shown")
    end_item: int = Field(description="1-indexed position of the last item shown")
    label: str = Field(description="Human readable range, e.g. '13–24 of 25'")
    has_previous: bool = Field(description="Whether first/previous is enabled")
    has_next: bool = Field(description="Whether next/last is enabled")

    @classmethod
    def from_state(
        cls, state: PaginationState, calculator: PageWindowCalculator
    ) -> "PageNavigation":
        """Build the navigation block for a pagination state."""
        start_item, end_item = state.display_range()
        return cls(
            pages=calculator.compute(state.current_page, state.total_pages),
            start_item=start_item,
            end_item=end_item,
            label=state.range_label(),
            has_previous=state.has_previous,
            has_next=state.has_next,
        )


class PagedResponse(BaseModel, Generic[T]):
    """Paged response class."""

    page: int
    size: int
    totalpages: int
    total: int
    items: Sequence[T]
    navigation: PageNavigation

    @classmethod
    def from_state(
        cls,
        *,
        items: Sequence[T],
        state: PaginationState,
        calculator: PageWindowCalculator,
    ) -> "PagedResponse[T]":
        """Factory method to create a PagedResponse from a query result."""
        return cls(
            page=state.current_page,
            size=state.items_per_page,
            totalpages=state.total_pages,
            total=state.total_items,
            items=items,
            navigation=PageNavigation.from_state(state, calculator),
        )
