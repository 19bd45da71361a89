"""Handlers для purchase order use cases.

Кожен command handler: load/create aggregate → domain method → save.
Events на bus потрапляють тільки через repository.save().
"""

import logging

from ordering.application.shared import CommandHandler, QueryHandler
from ordering.domain.purchasing import PurchaseOrderRepository

from ..commands import (
    ApprovePurchaseOrderCommand,
    DeclinePurchaseOrderCommand,
    SubmitPurchaseOrderCommand,
)
from ..dtos import PurchaseOrderDTO
from ..queries import GetPurchaseOrderQuery

logger = logging.getLogger(__name__)


class SubmitPurchaseOrderHandler(
    CommandHandler[SubmitPurchaseOrderCommand, PurchaseOrderDTO]
):
    """Handler для SubmitPurchaseOrder command.

    Order резолвиться через repository.get_or_create() за один крок, тому
    два concurrent submit для нового id працюють з одним state, і save()
    ніколи не "губить" state через upsert-by-absence.
    """

    def __init__(self, repository: PurchaseOrderRepository) -> None:
        self.repository = repository

    async def handle(self, command: SubmitPurchaseOrderCommand) -> PurchaseOrderDTO:
        order = await self.repository.get_or_create(command.order_id)

        order.submit(command.product_code, command.quantity)
        await self.repository.save(order)

        logger.info(
            "purchase_order.submitted",
            extra={
                "order_id": command.order_id,
                "product_code": command.product_code,
                "quantity": command.quantity,
            },
        )
        return PurchaseOrderDTO.from_state(order.state)


class ApprovePurchaseOrderHandler(
    CommandHandler[ApprovePurchaseOrderCommand, PurchaseOrderDTO]
):
    """Handler для ApprovePurchaseOrder command."""

    def __init__(self, repository: PurchaseOrderRepository) -> None:
        self.repository = repository

    async def handle(self, command: ApprovePurchaseOrderCommand) -> PurchaseOrderDTO:
        order = await self.repository.get_by_id(command.order_id)
        order.approve()
        await self.repository.save(order)

        logger.info("purchase_order.approved", extra={"order_id": command.order_id})
        return PurchaseOrderDTO.from_state(order.state)


class DeclinePurchaseOrderHandler(
    CommandHandler[DeclinePurchaseOrderCommand, PurchaseOrderDTO]
):
    """Handler для DeclinePurchaseOrder command.

    Raises:
        PurchaseOrderNotFoundError: Order не існує.
        InvalidPurchaseOrderOperation: Порожній reason (стан не змінюється).
    """

    def __init__(self, repository: PurchaseOrderRepository) -> None:
        self.repository = repository

    async def handle(self, command: DeclinePurchaseOrderCommand) -> PurchaseOrderDTO:
        order = await self.repository.get_by_id(command.order_id)
        order.decline(command.reason)
        await self.repository.save(order)

        logger.info(
            "purchase_order.declined",
            extra={"order_id": command.order_id, "reason": command.reason},
        )
        return PurchaseOrderDTO.from_state(order.state)


class GetPurchaseOrderHandler(QueryHandler[GetPurchaseOrderQuery, PurchaseOrderDTO]):
    """Handler для GetPurchaseOrder query (read-only)."""

    def __init__(self, repository: PurchaseOrderRepository) -> None:
        self.repository = repository

    async def handle(self, query: GetPurchaseOrderQuery) -> PurchaseOrderDTO:
        order = await self.repository.get_by_id(query.order_id)
        return PurchaseOrderDTO.from_state(order.state)
