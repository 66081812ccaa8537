from dataclasses import replace
from typing import Sequence

from flower_shop.store.cart_models import EMPTY_CART, Cart
from flower_shop.store.item_models import Item
from flower_shop.store.order_models import (
    CheckoutState,
    CheckoutSummary,
    DeliveryInfo,
    Order,
    OrderConfirmation,
    OrderLine,
    SessionState,
)
from flower_shop.store import cart_queries, item_queries


def build_order(
    cart: Cart,
    catalog: Sequence[Item],
    delivery: DeliveryInfo,
    delivery_fee: int,
    number: int,
) -> Order:
    if not cart:
        raise ValueError("cannot build an order from an empty cart")

    lines = []
    for line in cart.lines:
        item = item_queries.get_one(catalog, line.id)
        if item is None:
            raise KeyError(line.id)
        lines.append(
            OrderLine(id=item.id, name=item.name, price=item.price, quantity=line.quantity)
        )

    return Order(
        number=number,
        lines=tuple(lines),
        delivery=delivery,
        subtotal=cart_queries.total_price(cart, catalog),
        delivery_fee=delivery_fee,
    )


def submit_order(
    state: SessionState, order: Order
) -> tuple[SessionState, OrderConfirmation]:
    # "submitted" is not retained, the session goes straight back to closed
    state = replace(state, cart=EMPTY_CART, checkout=CheckoutState.CLOSED, clear_pending=False)
    return state, OrderConfirmation(order)


def can_open_checkout(state: SessionState) -> bool:
    return bool(state.cart)


def summarize_checkout(
    state: SessionState, catalog: Sequence[Item], delivery_fee: int
) -> CheckoutSummary:
    return CheckoutSummary(
        state=state.checkout,
        subtotal=cart_queries.total_price(state.cart, catalog),
        delivery_fee=delivery_fee,
    )
