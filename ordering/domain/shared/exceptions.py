"""Base domain exceptions.

Domain exceptions представляють порушення бізнес-правил.
Вони частина domain layer і не залежать від infrastructure.
"""

from typing import Any


class DomainException(Exception):
    """Base exception for all domain errors.

    Domain exceptions - це business rule violations, не technical errors.

    Example:
        >>> raise DomainException("Reason is required", order_id=21)
    """

    def __init__(self, message: str, **context: Any) -> None:
        """Initialize domain exception.

        Args:
            message: Human-readable error message.
            **context: Additional context (order_id, status, etc).
        """
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        """String representation with context."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class BusinessRuleViolation(DomainException):
    """Exception raised when business rule is violated.

    Example:
        >>> if not reason:
        ...     raise BusinessRuleViolation("Reason is required", order_id=order.id)
    """

    pass


class AggregateNotFound(DomainException):
    """Exception raised when aggregate is not found.

    Example:
        >>> if state is None:
        ...     raise AggregateNotFound("Purchase order not found", order_id=123)
    """

    pass


class InvalidStateTransition(DomainException):
    """Exception raised for invalid state transitions.

    Example:
        >>> # Declined -> Approved is invalid in strict mode
        >>> raise InvalidStateTransition(
        ...     "Cannot approve purchase order",
        ...     from_status="Declined",
        ...     to_status="Approved",
        ... )
    """

    pass
