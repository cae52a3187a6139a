"""Use case for the paginated, sortable, searchable book listing."""

import structlog

from rebook.application.board.protocols.book_repository import BookRepositoryProtocol
from rebook.application.common.pagination import Page, PageRequest
from rebook.domain.board.entities.book import BookSummary
from rebook.domain.board.value_objects.book_sort_key import BookSortKey

logger = structlog.get_logger(__name__)


class BookListUseCase:
    """Use case for listing book summaries a page at a time."""

    def __init__(self, book_repository: BookRepositoryProtocol) -> None:
        """Initialize use case with dependencies."""
        self.book_repository = book_repository

    def get_book_page(
        self,
        page: int = 0,
        size: int = 9,
        sort: str | None = None,
        query: str | None = None,
    ) -> Page[BookSummary]:
        """
        Get one page of book summaries.

        Args:
            page: Page index (0-indexed)
            size: Number of books per page
            sort: Raw sort key; unknown keys fall back to the default order
            query: Optional name search; blank queries are ignored

        Returns:
            Page of BookSummary with pagination metadata
        """
        page_request = PageRequest(page=page, size=size)
        sort_key = BookSortKey.parse(sort)
        name_query = query.strip() if query is not None else None
        if not name_query:
            name_query = None

        items, total = self.book_repository.find_summaries(
            sort_key=sort_key,
            offset=page_request.offset,
            limit=page_request.limit,
            name_query=name_query,
        )

        logger.debug(
            "book_page_loaded",
            page=page,
            size=size,
            sort=sort_key.name,
            query=name_query,
            total=total,
        )
        return Page(items=items, total_elements=total, request=page_request)
