"""Base Handler classes для Commands та Queries.

Handler - orchestrates domain logic для виконання use case.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from .command import Command
from .query import Query

TCommand = TypeVar("TCommand", bound=Command)
TQuery = TypeVar("TQuery", bound=Query)
TResult = TypeVar("TResult")


class CommandHandler(ABC, Generic[TCommand, TResult]):
    """Base class для command handlers.

    Command Handler відповідає за:
    - Load або create aggregate через repository
    - Execute domain logic (aggregate methods)
    - Save aggregate (repository публікує events на bus)

    Example:
        >>> class ApprovePurchaseOrderHandler(
        ...     CommandHandler[ApprovePurchaseOrderCommand, PurchaseOrderDTO]
        ... ):
        ...     async def handle(self, command):
        ...         order = await self.repository.get_by_id(command.order_id)
        ...         order.approve()
        ...         await self.repository.save(order)
        ...         return PurchaseOrderDTO.from_state(order.state)
    """

    @abstractmethod
    async def handle(self, command: TCommand) -> TResult:
        """Handle command and return result.

        Raises:
            DomainException: If business rule violated.
        """
        pass


class QueryHandler(ABC, Generic[TQuery, TResult]):
    """Base class для query handlers.

    Query Handler - тільки читання, NO side effects.
    """

    @abstractmethod
    async def handle(self, query: TQuery) -> TResult:
        """Handle query and return result."""
        pass
