from typing import Sequence

from flower_shop.store.cart_models import Cart, CartLine, CartSummary
from flower_shop.store.item_models import Item
from flower_shop.store import item_queries


def add_item(cart: Cart, item: Item) -> Cart:
    if cart.get(item.id) is None:
        return Cart(lines=cart.lines + (CartLine(id=item.id, quantity=1),))

    return Cart(
        lines=tuple(
            CartLine(id=line.id, quantity=line.quantity + 1) if line.id == item.id else line
            for line in cart.lines
        )
    )


def remove_item(cart: Cart, id: int) -> Cart:
    if cart.get(id) is None:
        return cart
    return Cart(lines=tuple(line for line in cart.lines if line.id != id))


def set_quantity(cart: Cart, id: int, quantity: int) -> Cart:
    if quantity < 1:
        return remove_item(cart, id)

    # never creates a line, only add_item does
    if cart.get(id) is None:
        return cart

    return Cart(
        lines=tuple(
            CartLine(id=line.id, quantity=quantity) if line.id == id else line
            for line in cart.lines
        )
    )


def total_items(cart: Cart) -> int:
    return sum(line.quantity for line in cart.lines)


def total_price(cart: Cart, catalog: Sequence[Item]) -> int:
    return sum(
        line.quantity * item_queries.price_of(catalog, line.id) for line in cart.lines
    )


def summarize(cart: Cart, catalog: Sequence[Item]) -> CartSummary:
    return CartSummary(
        total_items=total_items(cart),
        total_price=total_price(cart, catalog),
    )
