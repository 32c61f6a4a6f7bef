"""
Base class for Entities.

Entities have a distinct identity that runs through time. Two entities
are equal if they have the same identity, regardless of their attributes.
Cached entities are frozen snapshots, so subclasses are declared with
``@dataclass(frozen=True, eq=False)`` to keep identity-based equality.

Example:
    @dataclass(frozen=True, eq=False)
    class Flashcard(Entity[FlashcardId]):
        id: FlashcardId
        front: str
        back: str
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, Self, TypeVar

from .value_object import ValueObject


@dataclass(frozen=True)
class EntityId(ValueObject):
    """
    Base class for strongly-typed entity identifiers.

    Entity IDs wrap the integer primary key assigned by the store.
    They prevent mixing up IDs of different entities:

        StackId(42) != FlashcardId(42)
    """

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"{self.__class__.__name__} must be non-negative")

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def generate(cls) -> Self:
        """Placeholder id. The database assigns the real one."""
        return cls(0)

    def to_primitive(self) -> int:
        """Convert to primitive for serialization."""
        return self.value


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """
    Base class for Entities in the domain model.

    Subclasses must have an 'id' attribute of type IdType.
    """

    id: IdType

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
