from __future__ import annotations

from pydantic import BaseModel

from flower_shop.store.item_models import Item


class ItemResponse(BaseModel):
    id: int
    name: str
    price: int
    category: str
    description: str
    image: str

    @staticmethod
    def from_entity(entity: Item) -> ItemResponse:
        return ItemResponse(
            id=entity.id,
            name=entity.name,
            price=entity.price,
            category=entity.category,
            description=entity.description,
            image=entity.image,
        )
