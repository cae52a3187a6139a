from .ids import BookId, ReviewId, UserId

__all__ = ["BookId", "ReviewId", "UserId"]
