"""Base Command class для CQRS pattern.

Command - запит на зміну стану системи (write operation).
"""

from abc import ABC
from dataclasses import dataclass


@dataclass(frozen=True)
class Command(ABC):
    """Base class для всіх commands.

    Command характеристики:
    - **Immutable**: frozen=True запобігає змінам
    - **Verb-based naming**: ApprovePurchaseOrder, DeclinePurchaseOrder
    - **No business logic**: Тільки data, logic в Handler та aggregate

    Example:
        >>> @dataclass(frozen=True)
        ... class ApprovePurchaseOrderCommand(Command):
        ...     order_id: int

        >>> result = await handler.handle(ApprovePurchaseOrderCommand(order_id=7))
    """

    pass
