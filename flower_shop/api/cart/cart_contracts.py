from __future__ import annotations

from typing import Annotated, List, Sequence

from pydantic import BaseModel, ConfigDict, Field, StrictInt

from flower_shop.store.cart_models import Cart, CartLine
from flower_shop.store.item_models import Item
from flower_shop.store import cart_queries, item_queries

# fits a 32-bit INTEGER column
MAX_QUANTITY = 2**31 - 1


class CartLineResponse(BaseModel):
    id: int
    name: str
    price: int
    quantity: int
    line_total: int

    @staticmethod
    def from_cart_line(line: CartLine, catalog: Sequence[Item]) -> CartLineResponse:
        item = item_queries.get_one(catalog, line.id)
        return CartLineResponse(
            id=line.id,
            name=item.name,
            price=item.price,
            quantity=line.quantity,
            line_total=item.price * line.quantity,
        )


class CartResponse(BaseModel):
    items: List[CartLineResponse]
    total_items: int
    total_price: int

    @staticmethod
    def from_entity(entity: Cart, catalog: Sequence[Item]) -> CartResponse:
        summary = cart_queries.summarize(entity, catalog)
        return CartResponse(
            items=[CartLineResponse.from_cart_line(line, catalog) for line in entity.lines],
            total_items=summary.total_items,
            total_price=summary.total_price,
        )


class QuantityRequest(BaseModel):
    # below 1 removes the line
    quantity: Annotated[StrictInt, Field(le=MAX_QUANTITY)]

    model_config = ConfigDict(extra="forbid")


class ClearResponse(BaseModel):
    pending: bool
