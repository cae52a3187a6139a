from .response_wrappers import (
    CamelModel,
    ErrorResponse,
    PageMetadata,
    PaginatedResponse,
    SuccessResponse,
)

__all__ = ["CamelModel", "ErrorResponse", "PageMetadata", "PaginatedResponse", "SuccessResponse"]
