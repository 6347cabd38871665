"""Page window calculation for paginated list views.

A page window is the ordered row of navigation buttons under a list: page
numbers around the current page, the first and last page, and ellipsis markers
where pages are skipped. Two window policies exist:

- ``sliding``: a fixed-width run of pages centred on the current page, with the
  first and last page attached when the run does not reach them.
- ``anchored``: the first and last page are always shown, with a narrow window
  around the current page that widens when it approaches either end.

Both policies share the ellipsis rule: a marker is placed between two
consecutive page numbers whenever at least one page lies between them.
"""

from abc import ABC, abstractmethod
from enum import StrEnum
from typing import Final

from pydantic import BaseModel, Field

__all__ = [
    "AnchoredWindowCalculator",
    "PageEntry",
    "PageEntryKind",
    "PageWindowCalculator",
    "SlidingWindowCalculator",
    "WindowPolicy",
    "get_window_calculator",
]


_MIN_VISIBLE: Final = 3


class WindowPolicy(StrEnum):
    """Available page window policies."""

    SLIDING = "sliding"
    ANCHORED = "anchored"


class PageEntryKind(StrEnum):
    """Kind of a navigation entry."""

    PAGE = "page"
    ELLIPSIS = "ellipsis"


class PageEntry(BaseModel):
    """Single entry of a page window."""

    kind: PageEntryKind = Field(description="Page button or ellipsis marker")
    page: int | None = Field(
        default=None, description="Page number, empty for an ellipsis"
    )
    current: bool = Field(
        default=False, description="Whether this entry is the current page"
    )

    @classmethod
    def number(cls, page: int, *, current: bool = False) -> "PageEntry":
        """Create a page number entry."""
        return cls(kind=PageEntryKind.PAGE, page=page, current=current)

    @classmethod
    def ellipsis(cls) -> "PageEntry":
        """Create an ellipsis entry."""
        return cls(kind=PageEntryKind.ELLIPSIS)

    @property
    def is_ellipsis(self) -> bool:
        """Whether the entry is an ellipsis marker."""
        return self.kind == PageEntryKind.ELLIPSIS


class PageWindowCalculator(ABC):
    """Compute the navigation entries for a paginated view.

    Subclasses only decide which page numbers are visible. Clamping, hiding
    the navigation for single-page results and placing ellipsis markers are
    shared.
    """

    policy: WindowPolicy

    def __init__(self, max_visible: int = 5) -> None:
        """Initialize with the number of page buttons in the window.

        Args:
            max_visible: Width of the page window, at least 3.

        Raises:
            ValueError: If ``max_visible`` is smaller than 3.
        """
        if max_visible < _MIN_VISIBLE:
            raise ValueError(f"max_visible must be at least {_MIN_VISIBLE}")
        self.max_visible = max_visible

    def compute(self, current_page: int, total_pages: int) -> list[PageEntry]:
        """Return the page window for the given position.

        Args:
            current_page: The 1-indexed page the user is on. Out of range
                values are clamped into ``[1, total_pages]``.
            total_pages: Number of pages in the result.

        Returns:
            Ordered page and ellipsis entries, empty when there is at most one
            page.
        """
        if total_pages <= 1:
            return []

        current = min(max(current_page, 1), total_pages)
        pages = self.page_numbers(current, total_pages)

        entries: list[PageEntry] = []
        previous: int | None = None
        for page in pages:
            if previous is not None and page - previous > 1:
                entries.append(PageEntry.ellipsis())
            entries.append(PageEntry.number(page, current=page == current))
            previous = page
        return entries

    @abstractmethod
    def page_numbers(self, current: int, total_pages: int) -> list[int]:
        """Return the visible page numbers in ascending order.

        Args:
            current: Current page, already clamped into range.
            total_pages: Number of pages, greater than one.
        """


class SlidingWindowCalculator(PageWindowCalculator):
    """Fixed-width window centred on the current page."""

    policy = WindowPolicy.SLIDING

    def page_numbers(self, current: int, total_pages: int) -> list[int]:  # noqa: D102
        start = max(1, current - self.max_visible // 2)
        end = min(total_pages, start + self.max_visible - 1)

        # Near the last page the window shifts left to keep its width
        if end - start + 1 < self.max_visible:
            start = max(1, end - self.max_visible + 1)

        pages = list(range(start, end + 1))
        if start > 1:
            pages.insert(0, 1)
        if end < total_pages:
            pages.append(total_pages)
        return pages


class AnchoredWindowCalculator(PageWindowCalculator):
    """First and last page pinned, narrow window around the current page."""

    policy = WindowPolicy.ANCHORED

    def page_numbers(self, current: int, total_pages: int) -> list[int]:  # noqa: D102
        if total_pages <= self.max_visible:
            return list(range(1, total_pages + 1))

        half = (self.max_visible - 3) // 2
        start = max(2, current - half)
        end = min(total_pages - 1, current + half)

        # Near either end the window widens to keep max_visible - 2 inner pages
        if current <= self.max_visible - 2:
            end = max(end, self.max_visible - 1)
        if current >= total_pages - (self.max_visible - 3):
            start = min(start, total_pages - (self.max_visible - 2))

        return [1, *range(start, end + 1), total_pages]


_CALCULATORS: Final[dict[WindowPolicy, type[PageWindowCalculator]]] = {
    WindowPolicy.SLIDING: SlidingWindowCalculator,
    WindowPolicy.ANCHORED: AnchoredWindowCalculator,
}


def get_window_calculator(
    policy: WindowPolicy | str, max_visible: int = 5
) -> PageWindowCalculator:
    """Create the calculator for a window policy.

    Args:
        policy: Policy name or enum value.
        max_visible: Width of the page window.

    Returns:
        A calculator implementing the requested policy.
    """
    return _CALCULATORS[WindowPolicy(policy)](max_visible)
