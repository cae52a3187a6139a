from .book import BookDetail, BookSummary
from .review import Review

__all__ = ["BookDetail", "BookSummary", "Review"]
