"""Purchase order API routes.

Route template: /api/purchaseorders/{id}/{action}.
Domain errors не ловляться тут: main.py мапить їх на 404/400/409.
"""

from typing import Annotated

from fastapi import APIRouter, Path, status

from ordering.application.purchasing.commands import (
    ApprovePurchaseOrderCommand,
    DeclinePurchaseOrderCommand,
    SubmitPurchaseOrderCommand,
)
from ordering.application.purchasing.queries import GetPurchaseOrderQuery
from ordering.presentation.api.dependencies import (
    ApproveHandlerDep,
    DeclineHandlerDep,
    GetHandlerDep,
    SubmitHandlerDep,
)
from ordering.presentation.api.v1.schemas import (
    DeclinePurchaseOrderRequest,
    ErrorResponse,
    PurchaseOrderResponse,
    SubmitPurchaseOrderRequest,
)

router = APIRouter(prefix="/purchaseorders", tags=["Purchase Orders"])

OrderId = Annotated[int, Path(description="Purchase order ID")]

NOT_FOUND = {404: {"model": ErrorResponse, "description": "Purchase order not found"}}


@router.get(
    "/{order_id}",
    response_model=PurchaseOrderResponse,
    summary="Get purchase order",
    responses=NOT_FOUND,
)
async def get_purchase_order(
    handler: GetHandlerDep,
    order_id: OrderId,
) -> PurchaseOrderResponse:
    dto = await handler.handle(GetPurchaseOrderQuery(order_id=order_id))
    return PurchaseOrderResponse.from_dto(dto)


@router.post(
    "/{order_id}/submit",
    response_model=PurchaseOrderResponse,
    status_code=status.HTTP_200_OK,
    summary="Submit purchase order",
    description="Creates the order if it does not exist yet, then submits it.",
)
async def submit_purchase_order(
    request: SubmitPurchaseOrderRequest,
    handler: SubmitHandlerDep,
    order_id: OrderId,
) -> PurchaseOrderResponse:
    dto = await handler.handle(
        SubmitPurchaseOrderCommand(
            order_id=order_id,
            product_code=request.product_code,
            quantity=request.quantity,
        )
    )
    return PurchaseOrderResponse.from_dto(dto)


@router.post(
    "/{order_id}/approve",
    response_model=PurchaseOrderResponse,
    summary="Approve purchase order",
    responses={
        **NOT_FOUND,
        409: {"model": ErrorResponse, "description": "Transition not allowed"},
    },
)
async def approve_purchase_order(
    handler: ApproveHandlerDep,
    order_id: OrderId,
) -> PurchaseOrderResponse:
    dto = await handler.handle(ApprovePurchaseOrderCommand(order_id=order_id))
    return PurchaseOrderResponse.from_dto(dto)


@router.post(
    "/{order_id}/decline",
    response_model=PurchaseOrderResponse,
    summary="Decline purchase order",
    responses={
        **NOT_FOUND,
        400: {"model": ErrorResponse, "description": "Reason is required"},
        409: {"model": ErrorResponse, "description": "Transition not allowed"},
    },
)
async def decline_purchase_order(
    handler: DeclineHandlerDep,
    order_id: OrderId,
    request: DeclinePurchaseOrderRequest | None = None,
) -> PurchaseOrderResponse:
    dto = await handler.handle(
        DeclinePurchaseOrderCommand(
            order_id=order_id,
            reason=request.reason if request else None,
        )
    )
    return PurchaseOrderResponse.from_dto(dto)
