from rebook.domain.board.entities.book import BookSummary
from rebook.domain.common.value_objects.ids import BookId
from rebook.models import Book as BookORM


class BookMapper:
    """Mapper for Book ORM + aggregate columns -> BookSummary."""

    def to_domain(
        self,
        orm_model: BookORM,
        like_count: int | None,
        review_count: int | None,
        rating: float | None,
    ) -> BookSummary:
        """Convert ORM model and its aggregates to a domain snapshot."""
        return BookSummary(
            id=BookId(orm_model.id),
            name=orm_model.name,
            like_count=like_count or 0,
            review_count=review_count or 0,
            rating=round(float(rating or 0.0), 2),
            writer=orm_model.writer,
            publisher=orm_model.publisher,
            image_url=orm_model.image_url,
            description=orm_model.description,
        )
