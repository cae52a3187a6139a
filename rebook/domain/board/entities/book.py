from dataclasses import dataclass

from rebook.domain.common.entity import Entity
from rebook.domain.common.exceptions import InvariantViolationError, ValidationError
from rebook.domain.common.value_objects.ids import BookId


@dataclass(frozen=True, eq=False)
class BookSummary(Entity[BookId]):
    """
    Catalog snapshot of a book with its aggregates.

    Counts and rating are computed by the catalog query every time; a summary
    is never cached or written back.
    """

    id: BookId
    name: str
    like_count: int = 0
    review_count: int = 0
    rating: float = 0.0
    writer: str | None = None
    publisher: str | None = None
    image_url: str | None = None
    description: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.name or not self.name.strip():
            raise ValidationError("Book name cannot be empty", field="name", value=self.name)
        if self.like_count < 0:
            raise InvariantViolationError("BookSummary", "like_count must be >= 0")
        if self.review_count < 0:
            raise InvariantViolationError("BookSummary", "review_count must be >= 0")


@dataclass(frozen=True)
class BookDetail:
    """A book as seen by one viewer: the summary plus that viewer's like state."""

    summary: BookSummary
    is_liked: bool
    like_count: int

    def __post_init__(self) -> None:
        if self.like_count < 0:
            raise InvariantViolationError("BookDetail", "like_count must be >= 0")

    @property
    def id(self) -> BookId:
        return self.summary.id
