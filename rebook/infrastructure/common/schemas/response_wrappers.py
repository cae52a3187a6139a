"""Common response wrapper schemas for API responses."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from rebook.application.common.pagination import Page

T = TypeVar("T")


class CamelModel(BaseModel):
    """Response model serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SuccessResponse(CamelModel):
    """Generic success response wrapper."""

    success: bool
    message: str


class ErrorResponse(BaseModel):
    """Body of every error response."""

    detail: str


class PageMetadata(CamelModel):
    """Pagination metadata for a 0-indexed page."""

    number: int
    size: int
    total_pages: int
    total_elements: int
    first: bool
    last: bool

    @classmethod
    def from_page(cls, page: Page) -> "PageMetadata":
        return cls(
            number=page.number,
            size=page.size,
            total_pages=page.total_pages,
            total_elements=page.total_elements,
            first=page.is_first,
            last=page.is_last,
        )


class PaginatedResponse(CamelModel, Generic[T]):
    """Generic pagination wrapper."""

    items: list[T]
    page: PageMetadata
