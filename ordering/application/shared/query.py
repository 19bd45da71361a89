"""Base Query class для CQRS pattern.

Query - запит на отримання даних (read operation), без side effects.
"""

from abc import ABC
from dataclasses import dataclass


@dataclass(frozen=True)
class Query(ABC):
    """Base class для всіх queries.

    Example:
        >>> @dataclass(frozen=True)
        ... class GetPurchaseOrderQuery(Query):
        ...     order_id: int
    """

    pass
