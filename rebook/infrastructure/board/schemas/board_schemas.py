"""Pydantic schemas for the board API (camelCase on the wire)."""

from datetime import datetime

from pydantic import Field

from rebook.domain.board.entities.book import BookDetail, BookSummary
from rebook.domain.board.entities.review import Review
from rebook.domain.identity.entities.viewer import AuthenticatedViewer
from rebook.infrastructure.common.schemas import CamelModel, PageMetadata


class BookSummarySchema(CamelModel):
    """Schema for a book in the listing."""

    id: str
    name: str
    writer: str | None = None
    publisher: str | None = None
    image_url: str | None = None
    description: str | None = None
    like_count: int = Field(..., ge=0, description="Number of users who like this book")
    review_count: int = Field(..., ge=0, description="Number of reviews for this book")
    rating: float = Field(..., ge=0, description="Mean review rating, 0 without reviews")

    @classmethod
    def from_domain(cls, summary: BookSummary) -> "BookSummarySchema":
        return cls(
            id=summary.id.value,
            name=summary.name,
            writer=summary.writer,
            publisher=summary.publisher,
            image_url=summary.image_url,
            description=summary.description,
            like_count=summary.like_count,
            review_count=summary.review_count,
            rating=summary.rating,
        )


class BookDetailSchema(BookSummarySchema):
    """Schema for a book as seen by one viewer."""

    is_liked: bool

    @classmethod
    def from_detail(cls, detail: BookDetail) -> "BookDetailSchema":
        base = BookSummarySchema.from_domain(detail.summary).model_dump()
        base["like_count"] = detail.like_count
        return cls(**base, is_liked=detail.is_liked)


class BookListResponse(CamelModel):
    """Schema for the paginated book listing."""

    books: list[BookSummarySchema]
    sort: str | None = Field(None, description="Sort key as sent by the client")
    query: str | None = Field(None, description="Search text as sent by the client")
    page: PageMetadata


class ReviewSchema(CamelModel):
    """Schema for a review."""

    id: str
    book_id: str
    user_id: str
    user_name: str | None = None
    content: str
    rating: int = Field(..., ge=1, le=5)
    created_at: datetime

    @classmethod
    def from_domain(cls, review: Review) -> "ReviewSchema":
        return cls(
            id=review.id.value,
            book_id=review.book_id.value,
            user_id=review.user_id.value,
            user_name=review.user_name,
            content=review.content,
            rating=review.rating,
            created_at=review.created_at,
        )


class ViewerSchema(CamelModel):
    """Schema for the logged-in viewer."""

    id: str
    name: str | None = None

    @classmethod
    def from_viewer(cls, viewer: AuthenticatedViewer) -> "ViewerSchema":
        return cls(id=viewer.id.value, name=viewer.name)


class BookDetailPageResponse(CamelModel):
    """Schema for the book detail page."""

    book: BookDetailSchema
    is_liked: bool
    like_count: int = Field(..., ge=0)
    reviews: list[ReviewSchema]
    page: PageMetadata
    user: ViewerSchema | None = Field(None, description="Logged-in viewer, null when anonymous")


class ToggleLikeResponse(CamelModel):
    """Schema for the toggle-like result."""

    success: bool = True
    message: str = "Like toggled"
    is_liked: bool
    like_count: int = Field(..., ge=0)
