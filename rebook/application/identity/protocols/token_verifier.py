from typing import Protocol

from rebook.domain.identity.entities.identity import AuthenticatedIdentity


class TokenVerifierProtocol(Protocol):
    def verify_access_token(self, token: str) -> AuthenticatedIdentity:
        """
        Raises:
            TokenExpiredError, UnsupportedTokenError, InvalidTokenError
        """
        ...
