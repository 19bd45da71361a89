"""Domain Layer - Pure Business Logic.

This layer contains:
- Bounded Contexts (Purchasing)
- Aggregate Roots (PurchaseOrder)
- Domain Events (for decoupling)
- Repository Interfaces (ports)

Key Principles:
- Zero dependencies on infrastructure
- Pure business logic only
"""

# Shared kernel
from .shared import AggregateRoot, DomainEvent, DomainException

__all__ = [
    "AggregateRoot",
    "DomainEvent",
    "DomainException",
]
