from dataclasses import dataclass
from datetime import datetime

from rebook.domain.common.entity import Entity
from rebook.domain.common.exceptions import ValidationError
from rebook.domain.common.value_objects.ids import BookId, ReviewId, UserId

MIN_RATING = 1
MAX_RATING = 5


@dataclass(frozen=True, eq=False)
class Review(Entity[ReviewId]):
    """
    A reader's review. Belongs to exactly one book.

    Review listings are ordered newest first; equal timestamps fall back to
    the review id, descending, so paging never reshuffles rows.
    """

    id: ReviewId
    book_id: BookId
    user_id: UserId
    content: str
    rating: int
    created_at: datetime
    user_name: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not MIN_RATING <= self.rating <= MAX_RATING:
            raise ValidationError(
                f"Rating must be between {MIN_RATING} and {MAX_RATING}",
                field="rating",
                value=self.rating,
            )
