"""PurchaseOrder Aggregate Root.

PurchaseOrder - transient view над PurchaseOrderState: aggregate мутує стан
через submit/approve/decline і додає відповідний event в uncommitted buffer.
State shared by reference з repository store, тому repository не копіює
його при save.
"""

from dataclasses import dataclass
from typing import Any

from ordering.domain.shared import AggregateRoot, InvalidStateTransition

from ..events import (
    PurchaseOrderApprovedEvent,
    PurchaseOrderDeclinedEvent,
    PurchaseOrderSubmittedEvent,
)
from ..exceptions import InvalidPurchaseOrderOperation
from ..value_objects import PurchaseOrderStatus


@dataclass
class PurchaseOrderState:
    """Durable snapshot of one purchase order.

    Defaults відповідають щойно створеному order до submit.
    id задається один раз при створенні; status/product_code/quantity
    мутуються aggregate.
    """

    id: int
    status: PurchaseOrderStatus = PurchaseOrderStatus.SUBMITTED
    product_code: str | None = None
    quantity: int = 0

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "id" and "id" in self.__dict__:
            raise AttributeError("PurchaseOrderState.id is immutable")
        super().__setattr__(name, value)

    def to_dict(self) -> dict[str, Any]:
        """Render state as a plain key/value record."""
        return {
            "id": self.id,
            "status": self.status.value,
            "product_code": self.product_code,
            "quantity": self.quantity,
        }


class PurchaseOrder(AggregateRoot):
    """Purchase Order Aggregate Root.

    Правила:
    - submit() безумовний: записує product_code/quantity, status → SUBMITTED
    - approve() за замовчуванням безумовний, status → APPROVED
    - decline() вимагає non-empty reason, перевірка ДО мутації стану
    - Кожна операція додає рівно один event

    With enforce_transitions=True approve/decline дозволені тільки з SUBMITTED.

    Example:
        >>> order = PurchaseOrder(PurchaseOrderState(id=21))
        >>> order.submit("Product-99", 42)
        >>> order.approve()
        >>> [e.event_name for e in order]
        ['PurchaseOrderSubmittedEvent', 'PurchaseOrderApprovedEvent']
    """

    def __init__(
        self,
        state: PurchaseOrderState,
        enforce_transitions: bool = False,
    ) -> None:
        """Initialize aggregate over an existing state.

        Args:
            state: Стан order (shared, не копіюється).
            enforce_transitions: Strict state machine для approve/decline.
        """
        super().__init__(state.id)
        self._state = state
        self._enforce_transitions = enforce_transitions

    @property
    def state(self) -> PurchaseOrderState:
        """Current state (same object the repository stores)."""
        return self._state

    @property
    def status(self) -> PurchaseOrderStatus:
        return self._state.status

    def submit(self, product_code: str, quantity: int) -> None:
        """Submit the order.

        Args:
            product_code: Код продукту.
            quantity: Кількість.
        """
        self._state.status = PurchaseOrderStatus.SUBMITTED
        self._state.product_code = product_code
        self._state.quantity = quantity

        self.add_domain_event(
            PurchaseOrderSubmittedEvent(
                order_id=self.id,
                product_code=product_code,
                quantity=quantity,
            )
        )

    def approve(self) -> None:
        """Approve the order.

        Raises:
            InvalidStateTransition: Strict mode, order не в SUBMITTED.
        """
        self._guard_transition(PurchaseOrderStatus.APPROVED)

        self._state.status = PurchaseOrderStatus.APPROVED

        self.add_domain_event(PurchaseOrderApprovedEvent(order_id=self.id))

    def decline(self, reason: str | None) -> None:
        """Decline the order.

        Args:
            reason: Причина відхилення (обов'язкова).

        Raises:
            InvalidPurchaseOrderOperation: Якщо reason порожній або None.
            InvalidStateTransition: Strict mode, order не в SUBMITTED.
        """
        if not reason:
            raise InvalidPurchaseOrderOperation(
                "Reason is required",
                order_id=self.id,
            )
        self._guard_transition(PurchaseOrderStatus.DECLINED)

        self._state.status = PurchaseOrderStatus.DECLINED

        self.add_domain_event(
            PurchaseOrderDeclinedEvent(order_id=self.id, reason=reason)
        )

    @property
    def is_submitted(self) -> bool:
        return self._state.status == PurchaseOrderStatus.SUBMITTED

    @property
    def is_approved(self) -> bool:
        return self._state.status == PurchaseOrderStatus.APPROVED

    @property
    def is_declined(self) -> bool:
        return self._state.status == PurchaseOrderStatus.DECLINED

    @property
    def is_final_state(self) -> bool:
        """Check if order в terminal state (APPROVED або DECLINED)."""
        return self._state.status in (
            PurchaseOrderStatus.APPROVED,
            PurchaseOrderStatus.DECLINED,
        )

    def _guard_transition(self, to_status: PurchaseOrderStatus) -> None:
        if self._enforce_transitions and not self.is_submitted:
            raise InvalidStateTransition(
                f"Cannot move purchase order to {to_status.value}",
                order_id=self.id,
                from_status=self._state.status.value,
                to_status=to_status.value,
            )

    def __repr__(self) -> str:
        return (
            f"PurchaseOrder(id={self.id}, status={self._state.status.value}, "
            f"product_code={self._state.product_code}, quantity={self._state.quantity})"
        )
