import logging
from dataclasses import replace
from typing import Callable, Sequence

from flower_shop.settings import DELIVERY_FEE
from flower_shop.store.cart_models import Cart, CartLine, CartSummary
from flower_shop.store.item_models import Item
from flower_shop.store.order_models import (
    CheckoutState,
    CheckoutSummary,
    DeliveryInfo,
    OrderConfirmation,
    SessionState,
)
from flower_shop.store import cart_queries, item_queries, order_queries, session_store

logger = logging.getLogger(__name__)

SaveHook = Callable[[Cart], None]


class ShopSession:
    def __init__(
        self,
        catalog: Sequence[Item],
        delivery_fee: int,
        save_hook: SaveHook | None = None,
    ) -> None:
        self.catalog = catalog
        self.delivery_fee = delivery_fee
        self._save_hook = save_hook
        self._state = SessionState()
        self._last_order_number = 0

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def cart(self) -> Cart:
        return self._state.cart

    def _commit(self, state: SessionState) -> SessionState:
        # checkout can only stay open over a non-empty cart
        if not state.cart and state.checkout is CheckoutState.OPEN:
            state = replace(state, checkout=CheckoutState.CLOSED)

        if self._save_hook is not None and state.cart != self._state.cart:
            self._save_hook(state.cart)

        self._state = state
        return state

    def hydrate(self, cart: Cart) -> Cart:
        # loaded once at startup; lines breaking the cart invariants are dropped
        lines: list[CartLine] = []
        seen: set[int] = set()
        for line in cart.lines:
            if line.id in seen or line.quantity < 1:
                continue
            if item_queries.get_one(self.catalog, line.id) is None:
                logger.warning("Dropping persisted line for unknown item %d", line.id)
                continue
            seen.add(line.id)
            lines.append(line)

        self._state = SessionState(cart=Cart(lines=tuple(lines)))
        logger.info("Session hydrated with %d cart line(s)", len(lines))
        return self._state.cart

    def reset(self) -> SessionState:
        return self._commit(SessionState())

    def add_item(self, item_id: int) -> Cart | None:
        item = item_queries.get_one(self.catalog, item_id)
        if item is None:
            return None

        cart = cart_queries.add_item(self._state.cart, item)
        logger.debug("Added item %d to cart", item_id)
        return self._commit(replace(self._state, cart=cart)).cart

    def remove_item(self, item_id: int) -> Cart:
        cart = cart_queries.remove_item(self._state.cart, item_id)
        return self._commit(replace(self._state, cart=cart)).cart

    def set_quantity(self, item_id: int, quantity: int) -> Cart:
        cart = cart_queries.set_quantity(self._state.cart, item_id, quantity)
        return self._commit(replace(self._state, cart=cart)).cart

    def summary(self) -> CartSummary:
        return cart_queries.summarize(self._state.cart, self.catalog)

    def request_clear(self) -> bool:
        if not self._state.cart:
            return False
        self._commit(replace(self._state, clear_pending=True))
        return True

    def confirm_clear(self) -> Cart | None:
        if not self._state.clear_pending:
            return None
        logger.debug("Clearing cart on confirmation")
        return self._commit(
            replace(self._state, cart=Cart(), clear_pending=False)
        ).cart

    def cancel_clear(self) -> Cart:
        return self._commit(replace(self._state, clear_pending=False)).cart

    def checkout_summary(self) -> CheckoutSummary:
        return order_queries.summarize_checkout(self._state, self.catalog, self.delivery_fee)

    def open_checkout(self) -> CheckoutSummary | None:
        if not order_queries.can_open_checkout(self._state):
            return None
        self._commit(replace(self._state, checkout=CheckoutState.OPEN))
        return self.checkout_summary()

    def close_checkout(self) -> CheckoutSummary:
        self._commit(replace(self._state, checkout=CheckoutState.CLOSED))
        return self.checkout_summary()

    def submit_order(self, delivery: DeliveryInfo) -> OrderConfirmation | None:
        if self._state.checkout is not CheckoutState.OPEN:
            return None

        number = self._last_order_number + 1
        order = order_queries.build_order(
            self._state.cart, self.catalog, delivery, self.delivery_fee, number
        )
        state, confirmation = order_queries.submit_order(self._state, order)
        self._commit(state)
        self._last_order_number = number

        logger.info(
            "Order #%d accepted: %d line(s), grand total %d",
            order.number,
            len(order.lines),
            order.grand_total,
        )
        return confirmation


shop_session = ShopSession(
    catalog=item_queries.catalog,
    delivery_fee=DELIVERY_FEE,
    save_hook=session_store.save_cart,
)
