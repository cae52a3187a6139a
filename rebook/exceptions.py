"""Custom exception hierarchy for the re-book application."""


class RebookError(Exception):
    """Base exception for all re-book errors."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        headers: dict[str, str] | None = None,
    ) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        self.headers = headers
        super().__init__(self.message)


class BadRequestError(RebookError):
    """Malformed request."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 400 status code."""
        super().__init__(message, status_code=400)


class AuthorizationHeaderError(BadRequestError):
    """Authorization header is missing or does not use the Bearer scheme."""

    def __init__(self) -> None:
        """Initialize with the fixed header message."""
        super().__init__("Authorization header is missing or malformed")


class UnauthorizedError(RebookError):
    """Credentials were supplied but could not be accepted."""

    def __init__(self, message: str) -> None:
        """Initialize with message, 401 status code and a Bearer challenge."""
        super().__init__(message, status_code=401, headers={"WWW-Authenticate": "Bearer"})


class NotFoundError(RebookError):
    """Resource not found error."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 404 status code."""
        super().__init__(message, status_code=404)


class BookNotFoundError(NotFoundError):
    """Book not found error."""

    def __init__(self, book_id: str | None = None, *, message: str | None = None) -> None:
        """Initialize with book ID or custom message."""
        self.book_id = book_id
        if message:
            super().__init__(message)
        elif book_id is not None:
            super().__init__(f"Book with id {book_id} not found")
        else:
            super().__init__("Book not found")
