"""
Base class for Value Objects.

Value objects carry no identity of their own: two instances with the same
attributes are interchangeable. Subclasses are frozen dataclasses that check
their own invariants in ``__post_init__``.

Example:
    @dataclass(frozen=True)
    class Rating(ValueObject):
        value: int

        def __post_init__(self) -> None:
            if not 1 <= self.value <= 5:
                raise ValidationError("Rating must be between 1 and 5")
"""


class ValueObject:
    """Immutable, compared by value, self-validating."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.__dict__ == other.__dict__

    def __hash__(self) -> int:
        return hash(tuple(sorted(self.__dict__.items())))

    def __repr__(self) -> str:
        attrs = ", ".join(f"{k}={v!r}" for k, v in self.__dict__.items())
        return f"{self.__class__.__name__}({attrs})"

    def to_primitive(self) -> object:
        """
        Convert to a primitive for serialization.

        Single-field value objects collapse to that field's value.
        """
        values = list(self.__dict__.values())
        if len(values) == 1:
            return values[0]
        return dict(self.__dict__)
