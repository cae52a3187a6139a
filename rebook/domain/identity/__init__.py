"""Identity domain layer."""

from rebook.domain.identity.entities import (
    ANONYMOUS,
    AnonymousViewer,
    AuthenticatedIdentity,
    AuthenticatedViewer,
    Viewer,
)
from rebook.domain.identity.exceptions import (
    InvalidTokenError,
    TokenExpiredError,
    TokenVerificationError,
    UnsupportedTokenError,
)

__all__ = [
    "ANONYMOUS",
    "AnonymousViewer",
    "AuthenticatedIdentity",
    "AuthenticatedViewer",
    "InvalidTokenError",
    "TokenExpiredError",
    "TokenVerificationError",
    "UnsupportedTokenError",
    "Viewer",
]
