"""Identity domain exceptions."""

from rebook.domain.common.exceptions import DomainError


class TokenVerificationError(DomainError):
    """Base class for access tokens that could not be accepted."""


class TokenExpiredError(TokenVerificationError):
    """The token was well formed and correctly signed but its ``exp`` has passed."""

    def __init__(self) -> None:
        super().__init__("Token has expired")


class UnsupportedTokenError(TokenVerificationError):
    """The token uses a format or signing algorithm this service does not accept."""

    def __init__(self, algorithm: str | None = None) -> None:
        details: dict[str, object] = {"algorithm": algorithm} if algorithm else {}
        super().__init__("Unsupported token format", details)
        self.algorithm = algorithm


class InvalidTokenError(TokenVerificationError):
    """Any other verification failure: bad signature, garbage, missing subject."""

    def __init__(self, reason: str | None = None) -> None:
        super().__init__("Token is invalid or expired")
        self.reason = reason
