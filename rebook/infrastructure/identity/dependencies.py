"""FastAPI dependencies for authentication and viewer resolution."""

import logging
from typing import Annotated

from fastapi import Header, Request

from rebook.core import container
from rebook.domain.common.exceptions import ValidationError
from rebook.domain.common.value_objects.ids import UserId
from rebook.domain.identity.entities.identity import AuthenticatedIdentity
from rebook.domain.identity.entities.viewer import ANONYMOUS, AuthenticatedViewer, Viewer
from rebook.domain.identity.exceptions import TokenVerificationError
from rebook.exceptions import AuthorizationHeaderError, UnauthorizedError

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "
SESSION_LOGIN_KEY = "login_user"


def extract_bearer_token(authorization: str | None) -> str:
    """
    Strip the ``Bearer`` scheme from an Authorization header value.

    Raises:
        AuthorizationHeaderError: If the header is absent or uses another scheme
    """
    if authorization is None or not authorization.startswith(BEARER_PREFIX):
        raise AuthorizationHeaderError
    return authorization[len(BEARER_PREFIX) :]


def get_authenticated_identity(
    authorization: Annotated[str | None, Header()] = None,
) -> AuthenticatedIdentity:
    """
    Get the caller's identity from a bearer access token.

    Args:
        authorization: Raw Authorization header

    Returns:
        AuthenticatedIdentity for the token's subject

    Raises:
        AuthorizationHeaderError: Header missing or not a Bearer credential (400)
        UnauthorizedError: Token expired, unsupported or otherwise invalid (401)
    """
    token = extract_bearer_token(authorization)
    verifier = container.token_verifier()

    try:
        return verifier.verify_access_token(token)
    except TokenVerificationError as e:
        logger.warning(f"Rejected access token: {type(e).__name__}")
        raise UnauthorizedError(e.message) from e


def get_viewer(request: Request) -> Viewer:
    """
    Get the page viewer from the login session.

    A missing or unreadable session entry means an anonymous viewer.
    """
    login_user = request.session.get(SESSION_LOGIN_KEY)
    if not isinstance(login_user, dict):
        return ANONYMOUS

    try:
        return AuthenticatedViewer(
            id=UserId(login_user.get("user_id")), name=login_user.get("name")
        )
    except ValidationError:
        logger.warning("Ignoring login session without a usable user id")
        return ANONYMOUS


def store_viewer(request: Request, viewer: AuthenticatedViewer) -> None:
    """Write the viewer into the login session."""
    request.session[SESSION_LOGIN_KEY] = {"user_id": viewer.id.value, "name": viewer.name}


def clear_viewer(request: Request) -> None:
    """Remove the viewer from the login session."""
    request.session.pop(SESSION_LOGIN_KEY, None)
