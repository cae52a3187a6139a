from .book_sort_key import BookSortKey
from .like_state import LikeState

__all__ = ["BookSortKey", "LikeState"]
