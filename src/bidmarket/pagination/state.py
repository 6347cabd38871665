"""Pagination state of a list view."""

from pydantic import BaseModel, Field, computed_field, model_validator

__all__ = ["PaginationState"]


class PaginationState(BaseModel):
    """Snapshot of a list view's position.

    The state is immutable and always valid: ``current_page`` lies in
    ``[1, max(total_pages, 1)]``. Requests for arbitrary pages go through
    :meth:`clamped`, transitions return new states clamped the same way.
    """

    current_page: int = Field(default=1, ge=1, description="1-indexed page")
    items_per_page: int = Field(ge=1, description="Number of items per page")
    total_items: int = Field(default=0, ge=0, description="Items in the result")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_page_in_range(self) -> "PaginationState":
        last_page = max(self.total_pages, 1)
        if self.current_page > last_page:
            raise ValueError(
                f"current_page {self.current_page} is past the last page {last_page}"
            )
        return self

    @classmethod
    def clamped(
        cls, current_page: int, items_per_page: int, total_items: int
    ) -> "PaginationState":
        """Create the state for a requested page moved into range.

        Args:
            current_page: Requested page, any integer.
            items_per_page: Page size, at least 1.
            total_items: Item count reported by the data source.

        Returns:
            A state on the nearest existing page.
        """
        total_items = max(total_items, 0)
        total_pages = -(-total_items // items_per_page)
        page = min(max(current_page, 1), max(total_pages, 1))
        return cls(
            current_page=page,
            items_per_page=items_per_page,
            total_items=total_items,
        )

    @computed_field
    @property
    def total_pages(self) -> int:
        """Number of pages needed to show every item."""
        return -(-self.total_items // self.items_per_page)

    @property
    def offset(self) -> int:
        """Number of items before the current page."""
        return (self.current_page - 1) * self.items_per_page

    @property
    def has_previous(self) -> bool:
        """Whether first/previous navigation is enabled."""
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        """Whether next/last navigation is enabled."""
        return self.current_page < self.total_pages

    def with_page(self, page: int) -> "PaginationState":
        """Return the state after navigating to ``page``."""
        return self.clamped(page, self.items_per_page, self.total_items)

    def with_page_size(self, items_per_page: int) -> "PaginationState":
        """Return the state after changing the page size.

        The view jumps back to the first page, as the old page number points at
        unrelated items under the new size.
        """
        return PaginationState(
            current_page=1,
            items_per_page=items_per_page,
            total_items=self.total_items,
        )

    def with_total(self, total_items: int) -> "PaginationState":
        """Return the state after the data source reported a new item count."""
        return self.clamped(self.current_page, self.items_per_page, total_items)

    def display_range(self) -> tuple[int, int]:
        """Return the inclusive 1-indexed range of items on the current page.

        Returns:
            ``(start_item, end_item)``, or ``(0, 0)`` for an empty result.
        """
        if self.total_items == 0:
            return 0, 0
        start_item = self.offset + 1
        end_item = min(self.current_page * self.items_per_page, self.total_items)
        return start_item, end_item

    def range_label(self) -> str:
        """Return the range as shown under the list, e.g. ``13–24 of 25``."""
        start_item, end_item = self.display_range()
        return f"{start_item}–{end_item} of {self.total_items}"
