from dataclasses import dataclass

from rebook.domain.common.exceptions import InvariantViolationError
from rebook.domain.common.value_object import ValueObject


@dataclass(frozen=True)
class LikeState(ValueObject):
    """Like state of one (book, user) pair together with the book's like count."""

    is_liked: bool
    like_count: int

    def __post_init__(self) -> None:
        if self.like_count < 0:
            raise InvariantViolationError("LikeState", "like_count must be >= 0")
        if self.is_liked and self.like_count == 0:
            raise InvariantViolationError("LikeState", "a liked book has at least one like")
