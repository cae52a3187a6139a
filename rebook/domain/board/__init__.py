"""Board domain layer: books, reviews and likes."""

from rebook.domain.board.entities import BookDetail, BookSummary, Review
from rebook.domain.board.value_objects import BookSortKey, LikeState

__all__ = ["BookDetail", "BookSortKey", "BookSummary", "LikeState", "Review"]
