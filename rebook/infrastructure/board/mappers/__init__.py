from .book_mapper import BookMapper
from .review_mapper import ReviewMapper

__all__ = ["BookMapper", "ReviewMapper"]
