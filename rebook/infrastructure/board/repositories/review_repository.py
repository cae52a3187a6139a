from sqlalchemy import func, select
from sqlalchemy.orm import Session

from rebook.domain.board.entities.review import Review
from rebook.domain.common.value_objects.ids import BookId
from rebook.infrastructure.board.mappers.review_mapper import ReviewMapper
from rebook.models import Review as ReviewORM
from rebook.models import User as UserORM


class ReviewRepository:
    """Repository for reading reviews."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = ReviewMapper()

    def find_by_book_newest_first(
        self, book_id: BookId, offset: int = 0, limit: int = 10
    ) -> tuple[list[Review], int]:
        """
        Get a page of a book's reviews, newest first.

        Reviews sharing a timestamp are ordered by id descending.

        Returns:
            tuple[list[Review], total_count]
        """
        total_stmt = select(func.count(ReviewORM.id)).where(ReviewORM.book_id == book_id.value)
        total = self.db.execute(total_stmt).scalar() or 0

        stmt = (
            select(ReviewORM, UserORM.name)
            .outerjoin(UserORM, UserORM.id == ReviewORM.user_id)
            .where(ReviewORM.book_id == book_id.value)
            .order_by(ReviewORM.created_at.desc(), ReviewORM.id.desc())
            .offset(offset)
            .limit(limit)
        )
        results = self.db.execute(stmt).all()

        reviews = [self.mapper.to_domain(orm, user_name) for orm, user_name in results]
        return reviews, total
