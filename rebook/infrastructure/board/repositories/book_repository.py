from sqlalchemy import ColumnElement, Select, func, select
from sqlalchemy.orm import Session

from rebook.domain.board.entities.book import BookSummary
from rebook.domain.board.value_objects.book_sort_key import BookSortKey
from rebook.domain.common.value_objects.ids import BookId
from rebook.infrastructure.board.mappers.book_mapper import BookMapper
from rebook.models import Book as BookORM
from rebook.models import BookLike as BookLikeORM
from rebook.models import Review as ReviewORM

# Subqueries for the per-book aggregates, correlated to the outer books row
LIKE_COUNT = (
    select(func.count(BookLikeORM.id))
    .where(BookLikeORM.book_id == BookORM.id)
    .correlate(BookORM)
    .scalar_subquery()
    .label("like_count")
)

REVIEW_COUNT = (
    select(func.count(ReviewORM.id))
    .where(ReviewORM.book_id == BookORM.id)
    .correlate(BookORM)
    .scalar_subquery()
    .label("review_count")
)

RATING = (
    select(func.coalesce(func.avg(ReviewORM.rating), 0.0))
    .where(ReviewORM.book_id == BookORM.id)
    .correlate(BookORM)
    .scalar_subquery()
    .label("rating")
)

# Every non-default ordering ends on the primary key so pages never overlap
ORDERINGS: dict[BookSortKey, tuple[ColumnElement, ...]] = {
    BookSortKey.DEFAULT: (BookORM.id.asc(),),
    BookSortKey.LIKE_COUNT: (LIKE_COUNT.desc(), BookORM.id.asc()),
    BookSortKey.REVIEW_COUNT: (REVIEW_COUNT.desc(), BookORM.id.asc()),
    BookSortKey.RATING: (RATING.desc(), BookORM.id.asc()),
}


def _escape_like(text: str) -> str:
    return text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class BookRepository:
    """Read-side repository for the book catalog."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = BookMapper()

    def _summary_select(self) -> Select:
        return select(BookORM, LIKE_COUNT, REVIEW_COUNT, RATING)

    def exists(self, book_id: BookId) -> bool:
        """Check whether a book exists."""
        stmt = select(BookORM.id).where(BookORM.id == book_id.value)
        return self.db.execute(stmt).scalar_one_or_none() is not None

    def find_summary(self, book_id: BookId) -> BookSummary | None:
        """Find one book with its like count, review count and rating."""
        stmt = self._summary_select().where(BookORM.id == book_id.value)
        row = self.db.execute(stmt).one_or_none()

        if row is None:
            return None

        book_orm, like_count, review_count, rating = row
        return self.mapper.to_domain(book_orm, like_count, review_count, rating)

    def find_summaries(
        self,
        sort_key: BookSortKey,
        offset: int = 0,
        limit: int = 9,
        name_query: str | None = None,
    ) -> tuple[list[BookSummary], int]:
        """
        Get a page of book summaries.

        Args:
            sort_key: Ordering to apply
            offset: Number of books to skip
            limit: Maximum number of books to return
            name_query: Optional case-insensitive substring to match against the name

        Returns:
            tuple[list[BookSummary], total_count]
        """
        filters = []
        if name_query:
            filters.append(BookORM.name.ilike(f"%{_escape_like(name_query)}%", escape="\\"))

        total_stmt = select(func.count(BookORM.id)).where(*filters)
        total = self.db.execute(total_stmt).scalar() or 0

        stmt = (
            self._summary_select()
            .where(*filters)
            .order_by(*ORDERINGS[sort_key])
            .offset(offset)
            .limit(limit)
        )
        results = self.db.execute(stmt).all()

        return [
            self.mapper.to_domain(book_orm, like_count, review_count, rating)
            for book_orm, like_count, review_count, rating in results
        ], total
