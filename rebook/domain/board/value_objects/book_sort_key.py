"""Sort orderings offered by the book listing."""

from enum import Enum


class BookSortKey(Enum):
    """
    Ordering of the book listing.

    ``parse`` is total: missing and unrecognised keys select ``DEFAULT``
    rather than raising, so a stale or hand-edited link still renders.
    """

    DEFAULT = None
    LIKE_COUNT = "likeCount"
    REVIEW_COUNT = "reviewCount"
    RATING = "rating"

    @classmethod
    def parse(cls, raw: str | None) -> "BookSortKey":
        """Map a ``sort`` query parameter to an ordering."""
        if raw is None:
            return cls.DEFAULT
        for key in cls:
            if key.value == raw:
                return key
        return cls.DEFAULT
