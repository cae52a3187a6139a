from typing import Protocol

from rebook.domain.board.entities.review import Review
from rebook.domain.common.value_objects.ids import BookId


class ReviewRepositoryProtocol(Protocol):
    def find_by_book_newest_first(
        self, book_id: BookId, offset: int = 0, limit: int = 10
    ) -> tuple[list[Review], int]: ...
