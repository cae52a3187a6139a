import logging

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from rebook.domain.board.value_objects.like_state import LikeState
from rebook.domain.common.value_objects.ids import BookId, UserId
from rebook.models import Book as BookORM
from rebook.models import BookLike as BookLikeORM

logger = logging.getLogger(__name__)


class LikeRepository:
    """Repository for (book, user) like relations."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def is_liked(self, book_id: BookId, user_id: UserId) -> bool:
        """Check whether a user currently likes a book."""
        stmt = (
            select(BookLikeORM.id)
            .where(BookLikeORM.book_id == book_id.value)
            .where(BookLikeORM.user_id == user_id.value)
        )
        return self.db.execute(stmt).scalar_one_or_none() is not None

    def count_for_book(self, book_id: BookId) -> int:
        """Count the users who like a book."""
        stmt = select(func.count(BookLikeORM.id)).where(BookLikeORM.book_id == book_id.value)
        return self.db.execute(stmt).scalar() or 0

    def toggle(self, book_id: BookId, user_id: UserId) -> LikeState | None:
        """
        Flip a user's like on a book in one transaction.

        The book row is locked first (``SELECT ... FOR UPDATE``; on SQLite the
        transaction already holds the write lock from ``BEGIN IMMEDIATE``), so
        concurrent toggles on the same book queue up and each one counts likes
        after its own flip.

        Returns:
            LikeState after the flip, or None if the book does not exist
        """
        try:
            lock_stmt = select(BookORM.id).where(BookORM.id == book_id.value).with_for_update()
            if self.db.execute(lock_stmt).scalar_one_or_none() is None:
                self.db.rollback()
                return None

            existing_stmt = (
                select(BookLikeORM)
                .where(BookLikeORM.book_id == book_id.value)
                .where(BookLikeORM.user_id == user_id.value)
            )
            existing = self.db.execute(existing_stmt).scalar_one_or_none()

            if existing is not None:
                self.db.delete(existing)
                is_liked = False
            else:
                self.db.add(BookLikeORM(book_id=book_id.value, user_id=user_id.value))
                is_liked = True
            self.db.flush()

            like_count = self.count_for_book(book_id)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.error(f"Like toggle failed for book_id={book_id}, user_id={user_id}")
            raise

        return LikeState(is_liked=is_liked, like_count=like_count)
