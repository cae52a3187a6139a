from typing import Protocol

from rebook.domain.board.entities.book import BookSummary
from rebook.domain.board.value_objects.book_sort_key import BookSortKey
from rebook.domain.common.value_objects.ids import BookId


class BookRepositoryProtocol(Protocol):
    def exists(self, book_id: BookId) -> bool: ...

    def find_summary(self, book_id: BookId) -> BookSummary | None: ...

    def find_summaries(
        self,
        sort_key: BookSortKey,
        offset: int = 0,
        limit: int = 9,
        name_query: str | None = None,
    ) -> tuple[list[BookSummary], int]: ...
