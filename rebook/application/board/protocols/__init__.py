from .book_repository import BookRepositoryProtocol
from .like_repository import LikeRepositoryProtocol
from .review_repository import ReviewRepositoryProtocol

__all__ = ["BookRepositoryProtocol", "LikeRepositoryProtocol", "ReviewRepositoryProtocol"]
