"""Infrastructure layer repositories for the board bounded context."""

from rebook.infrastructure.board.repositories.book_repository import BookRepository
from rebook.infrastructure.board.repositories.like_repository import LikeRepository
from rebook.infrastructure.board.repositories.review_repository import ReviewRepository

__all__ = ["BookRepository", "LikeRepository", "ReviewRepository"]
