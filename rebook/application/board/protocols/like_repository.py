from typing import Protocol

from rebook.domain.board.value_objects.like_state import LikeState
from rebook.domain.common.value_objects.ids import BookId, UserId


class LikeRepositoryProtocol(Protocol):
    def is_liked(self, book_id: BookId, user_id: UserId) -> bool: ...

    def count_for_book(self, book_id: BookId) -> int: ...

    def toggle(self, book_id: BookId, user_id: UserId) -> LikeState | None:
        """
        Flip the like and return the new state and count from the same transaction.

        Returns None when the book does not exist.
        """
        ...
