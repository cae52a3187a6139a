"""Access token creation and verification."""

from datetime import UTC, datetime, timedelta

import jwt

from rebook.config import get_settings
from rebook.domain.common.exceptions import ValidationError
from rebook.domain.common.value_objects.ids import UserId
from rebook.domain.identity.entities.identity import AuthenticatedIdentity
from rebook.domain.identity.exceptions import (
    InvalidTokenError,
    TokenExpiredError,
    UnsupportedTokenError,
)


def create_access_token(user_id: str, expires_delta: timedelta | None = None) -> str:
    """Create an access token for a user."""
    settings = get_settings()
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    expire = datetime.now(UTC) + expires_delta
    to_encode = {"sub": user_id, "exp": expire, "type": "access"}
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def verify_access_token(token: str) -> AuthenticatedIdentity:
    """
    Verify an access token and return the caller's identity.

    Raises:
        UnsupportedTokenError: Token header names an algorithm other than the configured one
        TokenExpiredError: Signature is valid but ``exp`` has passed
        InvalidTokenError: Anything else (garbage, bad signature, refresh token, no subject)
    """
    settings = get_settings()

    try:
        header = jwt.get_unverified_header(token)
    except jwt.InvalidTokenError as e:
        raise InvalidTokenError(str(e)) from e

    algorithm = header.get("alg")
    if algorithm != settings.JWT_ALGORITHM:
        raise UnsupportedTokenError(algorithm)

    try:
        payload = jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[settings.JWT_ALGORITHM],
            options={"require": ["exp", "sub"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise TokenExpiredError from e
    except jwt.InvalidAlgorithmError as e:
        raise UnsupportedTokenError(algorithm) from e
    except jwt.InvalidTokenError as e:
        raise InvalidTokenError(str(e)) from e

    # Refresh tokens are only accepted by the login service
    if payload.get("type") == "refresh":
        raise InvalidTokenError("refresh token used as access token")

    try:
        user_id = UserId(payload["sub"])
    except ValidationError as e:
        raise InvalidTokenError("blank subject") from e

    return AuthenticatedIdentity(
        user_id=user_id,
        expires_at=datetime.fromtimestamp(payload["exp"], UTC),
    )


class TokenVerifier:
    """Adapter wrapping token service functions for DI."""

    def verify_access_token(self, token: str) -> AuthenticatedIdentity:
        return verify_access_token(token)
