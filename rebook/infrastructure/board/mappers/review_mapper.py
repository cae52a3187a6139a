from rebook.domain.board.entities.review import Review
from rebook.domain.common.value_objects.ids import BookId, ReviewId, UserId
from rebook.models import Review as ReviewORM


class ReviewMapper:
    """Mapper for Review ORM -> domain."""

    def to_domain(self, orm_model: ReviewORM, user_name: str | None = None) -> Review:
        return Review(
            id=ReviewId(orm_model.id),
            book_id=BookId(orm_model.book_id),
            user_id=UserId(orm_model.user_id),
            content=orm_model.content,
            rating=orm_model.rating,
            created_at=orm_model.created_at,
            user_name=user_name,
        )
