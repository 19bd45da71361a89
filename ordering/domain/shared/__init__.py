"""Shared Kernel - base classes для всієї domain layer.

Shared Kernel містить building blocks для Domain-Driven Design:
- Entity: Об'єкт з identity
- AggregateRoot: Головний entity в aggregate, накопичує uncommitted events
- DomainEvent: Подія що сталась в domain
- DomainException: Порушення бізнес-правил
"""

from .aggregate_root import AggregateRoot
from .domain_event import DomainEvent
from .entity import Entity
from .exceptions import (
    AggregateNotFound,
    BusinessRuleViolation,
    DomainException,
    InvalidStateTransition,
)

__all__ = [
    # Base classes
    "Entity",
    "AggregateRoot",
    "DomainEvent",
    # Exceptions
    "DomainException",
    "BusinessRuleViolation",
    "AggregateNotFound",
    "InvalidStateTransition",
]
