"""
Base class for Value Objects.

Value Objects are immutable objects defined by their attributes rather
than by identity. Two value objects are equal if all their attributes
are equal.

Example:
    @dataclass(frozen=True)
    class StackRow(ValueObject):
        id: int | None
        name: str | None
"""


class ValueObject:
    """
    Base class for Value Objects in the domain model.

    Value Objects are:
    - Immutable (use frozen=True in dataclass)
    - Compared by value (all attributes must match)
    - Self-validating (validation in __post_init__)
    """

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.__dict__ == other.__dict__

    def __hash__(self) -> int:
        return hash(tuple(sorted(self.__dict__.items())))

    def to_primitive(self) -> object:
        """
        Convert to primitive Python type for serialization.

        Single-value objects collapse to that value, others to a dict.
        """
        values = list(self.__dict__.values())
        if len(values) == 1:
            return values[0]
        return dict(self.__dict__)
