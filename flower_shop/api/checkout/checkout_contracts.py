from __future__ import annotations

import datetime
from typing import Annotated, List

from pydantic import BaseModel, ConfigDict, StringConstraints

from flower_shop.store.order_models import (
    CheckoutState,
    CheckoutSummary,
    DeliveryInfo,
    OrderConfirmation,
    OrderLine,
)

RequiredText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class CheckoutResponse(BaseModel):
    state: CheckoutState
    subtotal: int
    delivery_fee: int
    grand_total: int

    @staticmethod
    def from_entity(entity: CheckoutSummary) -> CheckoutResponse:
        return CheckoutResponse(
            state=entity.state,
            subtotal=entity.subtotal,
            delivery_fee=entity.delivery_fee,
            grand_total=entity.grand_total,
        )


class DeliveryRequest(BaseModel):
    name: RequiredText
    phone: RequiredText
    address: RequiredText
    date: datetime.date
    time: datetime.time
    comment: str | None = None

    model_config = ConfigDict(extra="forbid")

    def as_delivery_info(self) -> DeliveryInfo:
        return DeliveryInfo(
            name=self.name,
            phone=self.phone,
            address=self.address,
            date=self.date,
            time=self.time,
            comment=self.comment,
        )


class OrderLineResponse(BaseModel):
    id: int
    name: str
    price: int
    quantity: int
    line_total: int

    @staticmethod
    def from_order_line(line: OrderLine) -> OrderLineResponse:
        return OrderLineResponse(
            id=line.id,
            name=line.name,
            price=line.price,
            quantity=line.quantity,
            line_total=line.line_total,
        )


class OrderConfirmationResponse(BaseModel):
    number: int
    message: str
    items: List[OrderLineResponse]
    name: str
    phone: str
    address: str
    date: datetime.date
    time: datetime.time
    comment: str | None
    subtotal: int
    delivery_fee: int
    grand_total: int

    @staticmethod
    def from_entity(entity: OrderConfirmation) -> OrderConfirmationResponse:
        order = entity.order
        return OrderConfirmationResponse(
            number=order.number,
            message=entity.message,
            items=[OrderLineResponse.from_order_line(line) for line in order.lines],
            name=order.delivery.name,
            phone=order.delivery.phone,
            address=order.delivery.address,
            date=order.delivery.date,
            time=order.delivery.time,
            comment=order.delivery.comment,
            subtotal=order.subtotal,
            delivery_fee=order.delivery_fee,
            grand_total=order.grand_total,
        )
