"""
Pagination types for queries.

Board pages are 0-indexed, matching the ``page`` query parameter clients
already send.

Example:
    page_request = PageRequest(page=0, size=9)
    items, total = repo.find_books(..., offset=page_request.offset, limit=page_request.limit)
    return Page(items=items, total_elements=total, request=page_request)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

# Maximum allowed page size
MAX_PAGE_SIZE = 100


@dataclass(frozen=True)
class PageRequest:
    """
    Pagination parameters for list queries.

    Attributes:
        page: Page index (0-indexed)
        size: Number of items per page
    """

    page: int = 0
    size: int = 20

    def __post_init__(self) -> None:
        if self.page < 0:
            raise ValueError("Page must be at least 0")
        if self.size < 1:
            raise ValueError("Page size must be at least 1")
        if self.size > MAX_PAGE_SIZE:
            raise ValueError(f"Page size cannot exceed {MAX_PAGE_SIZE}")

    @property
    def offset(self) -> int:
        """Calculate the offset for database queries."""
        return self.page * self.size

    @property
    def limit(self) -> int:
        """Return the limit for database queries."""
        return self.size


@dataclass(frozen=True)
class Page(Generic[T]):
    """
    One slice of an ordered result set plus its metadata.

    Attributes:
        items: Items on this page
        total_elements: Number of items across all pages
        request: The pagination parameters used
    """

    items: list[T]
    total_elements: int
    request: PageRequest

    @property
    def number(self) -> int:
        """Current page index."""
        return self.request.page

    @property
    def size(self) -> int:
        """Requested page size."""
        return self.request.size

    @property
    def total_pages(self) -> int:
        """Total number of pages."""
        if self.total_elements == 0:
            return 0
        return (self.total_elements + self.request.size - 1) // self.request.size

    @property
    def is_first(self) -> bool:
        return self.request.page == 0

    @property
    def is_last(self) -> bool:
        return self.request.page + 1 >= self.total_pages
