"""Exceptions для Purchasing bounded context."""

from ordering.domain.shared import AggregateNotFound, BusinessRuleViolation


class InvalidPurchaseOrderOperation(BusinessRuleViolation):
    """Raised коли операція над order має невалідні аргументи (e.g. decline без reason)."""

    pass


class PurchaseOrderNotFoundError(AggregateNotFound):
    """Raised коли purchase order з таким id не існує в store."""

    pass
