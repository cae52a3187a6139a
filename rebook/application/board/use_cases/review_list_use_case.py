"""Use case for listing a book's reviews."""

from rebook.application.board.protocols.review_repository import ReviewRepositoryProtocol
from rebook.application.common.pagination import Page, PageRequest
from rebook.domain.board.entities.review import Review
from rebook.domain.common.value_objects.ids import BookId


class ReviewListUseCase:
    """Use case for paging through a book's reviews, newest first."""

    def __init__(self, review_repository: ReviewRepositoryProtocol) -> None:
        """Initialize use case with dependencies."""
        self.review_repository = review_repository

    def get_review_page(self, book_id: str, page: int = 0, size: int = 10) -> Page[Review]:
        page_request = PageRequest(page=page, size=size)
        items, total = self.review_repository.find_by_book_newest_first(
            BookId(book_id), offset=page_request.offset, limit=page_request.limit
        )
        return Page(items=items, total_elements=total, request=page_request)
