"""Use case for a book's detail page and its like toggle."""

import structlog

from rebook.application.board.protocols.book_repository import BookRepositoryProtocol
from rebook.application.board.protocols.like_repository import LikeRepositoryProtocol
from rebook.domain.board.entities.book import BookDetail
from rebook.domain.board.value_objects.like_state import LikeState
from rebook.domain.common.value_objects.ids import BookId, UserId
from rebook.domain.identity.entities.viewer import AuthenticatedViewer, Viewer
from rebook.exceptions import BookNotFoundError

logger = structlog.get_logger(__name__)


class BookDetailUseCase:
    """Use case for reading a book's detail and flipping a user's like on it."""

    def __init__(
        self,
        book_repository: BookRepositoryProtocol,
        like_repository: LikeRepositoryProtocol,
    ) -> None:
        """Initialize use case with dependencies."""
        self.book_repository = book_repository
        self.like_repository = like_repository

    def book_exists(self, book_id: str) -> bool:
        """Check whether a book exists."""
        return self.book_repository.exists(BookId(book_id))

    def get_book_detail(self, book_id: str, viewer: Viewer) -> BookDetail:
        """
        Get a book's detail as seen by a viewer.

        Anonymous viewers always see ``is_liked=False``; the like count is
        reported either way.

        Args:
            book_id: ID of the book
            viewer: Who is looking

        Returns:
            BookDetail for the viewer

        Raises:
            BookNotFoundError: If the book does not exist
        """
        book_id_vo = BookId(book_id)
        summary = self.book_repository.find_summary(book_id_vo)
        if summary is None:
            raise BookNotFoundError(book_id)

        match viewer:
            case AuthenticatedViewer(id=user_id):
                is_liked = self.like_repository.is_liked(book_id_vo, user_id)
            case _:
                is_liked = False

        return BookDetail(summary=summary, is_liked=is_liked, like_count=summary.like_count)

    def toggle_like(self, book_id: str, user_id: str) -> LikeState:
        """
        Flip whether a user likes a book.

        The store flips the like and counts the book's likes inside one
        transaction, so the returned count always includes this toggle.

        Args:
            book_id: ID of the book
            user_id: ID of the verified caller

        Returns:
            LikeState after the toggle

        Raises:
            BookNotFoundError: If the book does not exist
        """
        state = self.like_repository.toggle(BookId(book_id), UserId(user_id))
        if state is None:
            raise BookNotFoundError(book_id)

        logger.info(
            "book_like_toggled",
            book_id=book_id,
            user_id=user_id,
            is_liked=state.is_liked,
            like_count=state.like_count,
        )
        return state
