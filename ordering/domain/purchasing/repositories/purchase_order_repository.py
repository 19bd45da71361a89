"""PurchaseOrderRepository Port - interface для persistence purchase orders.

Це PORT в Hexagonal Architecture (domain визначає interface).
Infrastructure layer має implement цей interface.
"""

from abc import ABC, abstractmethod

from ..entities import PurchaseOrder


class PurchaseOrderRepository(ABC):
    """Abstract interface для purchase order persistence.

    Repository відповідає за identity resolution, створення aggregates та
    commit: save - єдиний шлях, яким events потрапляють на bus.

    Example (Domain uses):
        >>> order = await repository.get_by_id(7)
        >>> order.approve()
        >>> await repository.save(order)  # PurchaseOrderApprovedEvent → bus
    """

    @abstractmethod
    async def get_by_id(self, order_id: int) -> PurchaseOrder:
        """Load order by ID.

        Args:
            order_id: Purchase order ID.

        Returns:
            Fresh aggregate over the stored state (empty event buffer).

        Raises:
            PurchaseOrderNotFoundError: Якщо order не знайдено.
        """
        pass

    @abstractmethod
    async def create(self, order_id: int) -> PurchaseOrder:
        """Create a brand-new order with default state.

        Args:
            order_id: ID нового order.

        Returns:
            Aggregate over a new state.

        Note:
            Нічого не записується в store до save().
        """
        pass

    @abstractmethod
    async def save(self, order: PurchaseOrder) -> None:
        """Commit order: store state if absent, drain events onto the bus.

        Args:
            order: Aggregate to commit.

        Note:
            Existing state ніколи не перезаписується (upsert-by-absence).
            Events йдуть на bus в порядку додавання, після чого buffer порожній.
        """
        pass

    @abstractmethod
    async def get_or_create(self, order_id: int) -> PurchaseOrder:
        """Load order by ID, or register a new one with default state.

        Lookup and registration are one atomic step, so concurrent callers
        for the same new ID share a single state.

        Args:
            order_id: Purchase order ID.

        Returns:
            Aggregate over the stored state (empty event buffer).

        Note:
            На відміну від create(), новий state одразу потрапляє в store.
            Events все одно йдуть на bus тільки через save().
        """
        pass

    @abstractmethod
    async def exists(self, order_id: int) -> bool:
        """Check if order with this ID is stored.

        Args:
            order_id: Purchase order ID.

        Returns:
            True if stored.
        """
        pass
