from .token_verifier import TokenVerifierProtocol
from .user_repository import UserRepositoryProtocol

__all__ = ["TokenVerifierProtocol", "UserRepositoryProtocol"]
