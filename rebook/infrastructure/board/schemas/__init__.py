from .board_schemas import (
    BookDetailPageResponse,
    BookDetailSchema,
    BookListResponse,
    BookSummarySchema,
    ReviewSchema,
    ToggleLikeResponse,
    ViewerSchema,
)

__all__ = [
    "BookDetailPageResponse",
    "BookDetailSchema",
    "BookListResponse",
    "BookSummarySchema",
    "ReviewSchema",
    "ToggleLikeResponse",
    "ViewerSchema",
]
