import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query
from starlette import status

from rebook.application.board.use_cases.book_detail_use_case import BookDetailUseCase
from rebook.application.board.use_cases.book_list_use_case import BookListUseCase
from rebook.application.board.use_cases.review_list_use_case import ReviewListUseCase
from rebook.application.common.pagination import MAX_PAGE_SIZE
from rebook.config import Settings, get_settings
from rebook.core import Container
from rebook.domain.common import DomainError
from rebook.domain.identity.entities.identity import AuthenticatedIdentity
from rebook.domain.identity.entities.viewer import AuthenticatedViewer, Viewer
from rebook.exceptions import BookNotFoundError, RebookError
from rebook.infrastructure.board.schemas import (
    BookDetailPageResponse,
    BookDetailSchema,
    BookListResponse,
    BookSummarySchema,
    ReviewSchema,
    ToggleLikeResponse,
    ViewerSchema,
)
from rebook.infrastructure.common.di import inject_use_case
from rebook.infrastructure.common.schemas import ErrorResponse, PageMetadata, PaginatedResponse
from rebook.infrastructure.identity.dependencies import get_authenticated_identity, get_viewer

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/board", tags=["board"])


def _unexpected(action: str, e: Exception) -> HTTPException:
    logger.error(f"Failed to {action}: {e!s}", exc_info=True)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected error occurred. Please try again later.",
    )


@router.get("/list", response_model=BookListResponse, status_code=status.HTTP_200_OK)
def list_books(
    settings: Annotated[Settings, Depends(get_settings)],
    use_case: BookListUseCase = Depends(inject_use_case(Container.book_list_use_case)),
    sort: str | None = Query(
        None, description="likeCount, reviewCount or rating; anything else keeps the default order"
    ),
    query: str | None = Query(None, description="Case-insensitive search on the book name"),
    page: int = Query(0, ge=0, description="Page index (0-indexed)"),
    size: int | None = Query(None, ge=1, le=MAX_PAGE_SIZE, description="Books per page"),
) -> BookListResponse:
    """
    Get one page of the book listing.

    Args:
        sort: Optional sort key
        query: Optional search text
        page: Page index
        size: Page size (default: 9)

    Returns:
        BookListResponse with the books on the page and pagination info

    Raises:
        HTTPException: If fetching books fails due to server error
    """
    logger.info(f"Listing books: sort={sort}, query={query}, page={page}")
    try:
        book_page = use_case.get_book_page(
            page=page, size=size or settings.LIST_PAGE_SIZE, sort=sort, query=query
        )
        return BookListResponse(
            books=[BookSummarySchema.from_domain(book) for book in book_page.items],
            sort=sort,
            query=query,
            page=PageMetadata.from_page(book_page),
        )
    except RebookError:
        raise
    except (DomainError, ValueError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except Exception as e:
        raise _unexpected("fetch books", e) from e


@router.get(
    "/detail/{book_id}",
    response_model=BookDetailPageResponse,
    status_code=status.HTTP_200_OK,
    responses={404: {"model": ErrorResponse}},
)
def get_book_detail(
    book_id: str,
    viewer: Annotated[Viewer, Depends(get_viewer)],
    settings: Annotated[Settings, Depends(get_settings)],
    detail_use_case: BookDetailUseCase = Depends(inject_use_case(Container.book_detail_use_case)),
    review_use_case: ReviewListUseCase = Depends(
        inject_use_case(Container.review_list_use_case)
    ),
    page: int = Query(0, ge=0, description="Review page index (0-indexed)"),
    size: int | None = Query(None, ge=1, le=MAX_PAGE_SIZE, description="Reviews per page"),
) -> BookDetailPageResponse:
    """
    Get a book's detail page: the book, the viewer's like state and a page of reviews.

    Anonymous viewers are welcome; they see ``isLiked=false`` and ``user=null``.

    Raises:
        BookNotFoundError: If the book does not exist (404)
    """
    logger.info(f"Fetching detail for book id: {book_id}")
    try:
        detail = detail_use_case.get_book_detail(book_id, viewer)
        review_page = review_use_case.get_review_page(
            book_id, page=page, size=size or settings.REVIEW_PAGE_SIZE
        )
        return BookDetailPageResponse(
            book=BookDetailSchema.from_detail(detail),
            is_liked=detail.is_liked,
            like_count=detail.like_count,
            reviews=[ReviewSchema.from_domain(review) for review in review_page.items],
            page=PageMetadata.from_page(review_page),
            user=ViewerSchema.from_viewer(viewer)
            if isinstance(viewer, AuthenticatedViewer)
            else None,
        )
    except RebookError:
        # Re-raise custom exceptions - handled by exception handlers
        raise
    except (DomainError, ValueError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except Exception as e:
        raise _unexpected(f"fetch book detail for book_id={book_id}", e) from e


@router.get(
    "/detail/{book_id}/reviews",
    response_model=PaginatedResponse[ReviewSchema],
    status_code=status.HTTP_200_OK,
    responses={404: {"model": ErrorResponse}},
)
def get_book_reviews(
    book_id: str,
    settings: Annotated[Settings, Depends(get_settings)],
    detail_use_case: BookDetailUseCase = Depends(inject_use_case(Container.book_detail_use_case)),
    review_use_case: ReviewListUseCase = Depends(
        inject_use_case(Container.review_list_use_case)
    ),
    page: int = Query(0, ge=0, description="Review page index (0-indexed)"),
    size: int | None = Query(None, ge=1, le=MAX_PAGE_SIZE, description="Reviews per page"),
) -> PaginatedResponse[ReviewSchema]:
    """Get one page of a book's reviews, newest first."""
    try:
        if not detail_use_case.book_exists(book_id):
            raise BookNotFoundError(book_id)
        review_page = review_use_case.get_review_page(
            book_id, page=page, size=size or settings.REVIEW_PAGE_SIZE
        )
        return PaginatedResponse[ReviewSchema](
            items=[ReviewSchema.from_domain(review) for review in review_page.items],
            page=PageMetadata.from_page(review_page),
        )
    except RebookError:
        raise
    except (DomainError, ValueError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except Exception as e:
        raise _unexpected(f"fetch reviews for book_id={book_id}", e) from e


@router.post(
    "/detail/{book_id}/toggle-like",
    response_model=ToggleLikeResponse,
    status_code=status.HTTP_200_OK,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)
def toggle_like(
    book_id: str,
    identity: Annotated[AuthenticatedIdentity, Depends(get_authenticated_identity)],
    use_case: BookDetailUseCase = Depends(inject_use_case(Container.book_detail_use_case)),
) -> ToggleLikeResponse:
    """
    Like the book if the caller does not like it yet, otherwise unlike it.

    Requires ``Authorization: Bearer <token>``. A missing header or another
    scheme is a 400; a token that fails verification is a 401.

    Returns:
        ToggleLikeResponse with the new like state and like count
    """
    logger.info(f"/toggle-like: POST, {book_id}")
    try:
        state = use_case.toggle_like(book_id, identity.user_id.value)
        return ToggleLikeResponse(is_liked=state.is_liked, like_count=state.like_count)
    except RebookError:
        raise
    except (DomainError, ValueError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except Exception as e:
        raise _unexpected(f"toggle like for book_id={book_id}", e) from e
