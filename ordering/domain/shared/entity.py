"""Base Entity class for domain model.

Entity - об'єкт з унікальною ідентичністю. Два entity з однаковими
атрибутами але різними ID - це різні об'єкти.
"""

from abc import ABC


class Entity(ABC):
    """Base class for all domain entities.

    Entity порівнюється за ID, а не за значенням атрибутів.

    Example:
        >>> order1 = PurchaseOrder(PurchaseOrderState(id=1))
        >>> order2 = PurchaseOrder(PurchaseOrderState(id=1))
        >>> order1 == order2  # True (same ID)
    """

    def __init__(self, id: int) -> None:
        """Initialize entity.

        Args:
            id: Unique identifier.
        """
        self._id = id

    @property
    def id(self) -> int:
        """Get entity ID."""
        return self._id

    def __eq__(self, other: object) -> bool:
        """Entities порівнюються за типом та ID, не за атрибутами."""
        if not isinstance(other, Entity):
            return False
        return type(self) is type(other) and self._id == other._id

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._id))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self._id})"
