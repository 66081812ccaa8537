from dataclasses import dataclass
import datetime
from enum import Enum

from flower_shop.store.cart_models import EMPTY_CART, Cart

ORDER_ACCEPTED_MESSAGE = "Thank you for your order! We will contact you shortly."


class CheckoutState(str, Enum):
    CLOSED = "closed"
    OPEN = "open"


@dataclass(frozen=True, slots=True)
class DeliveryInfo:
    name: str
    phone: str
    address: str
    date: datetime.date
    time: datetime.time
    comment: str | None = None


@dataclass(frozen=True, slots=True)
class OrderLine:
    id: int
    name: str
    price: int
    quantity: int

    @property
    def line_total(self) -> int:
        return self.price * self.quantity


@dataclass(frozen=True, slots=True)
class Order:
    number: int
    lines: tuple[OrderLine, ...]
    delivery: DeliveryInfo
    subtotal: int
    delivery_fee: int

    @property
    def grand_total(self) -> int:
        return self.subtotal + self.delivery_fee


@dataclass(frozen=True, slots=True)
class OrderConfirmation:
    order: Order
    message: str = ORDER_ACCEPTED_MESSAGE


@dataclass(frozen=True, slots=True)
class CheckoutSummary:
    state: CheckoutState
    subtotal: int
    delivery_fee: int

    @property
    def grand_total(self) -> int:
        return self.subtotal + self.delivery_fee


@dataclass(frozen=True, slots=True)
class SessionState:
    cart: Cart = EMPTY_CART
    checkout: CheckoutState = CheckoutState.CLOSED
    clear_pending: bool = False
