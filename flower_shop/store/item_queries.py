from typing import Sequence

from flower_shop.store.item_models import ALL_CATEGORY, Item

catalog: tuple[Item, ...] = (
    Item(
        id=1,
        name="Tenderness Bouquet",
        price=2500,
        category="Roses",
        description="15 pink roses with greenery",
        image="https://images.unsplash.com/photo-1561181286-d3fee7d55364?w=400&h=400&fit=crop",
    ),
    Item(
        id=2,
        name="Passion Bouquet",
        price=3200,
        category="Roses",
        description="25 premium red roses",
        image="https://images.unsplash.com/photo-1518895949257-7621c3c786d7?w=400&h=400&fit=crop",
    ),
    Item(
        id=3,
        name="Spring Bouquet",
        price=1800,
        category="Tulips",
        description="21 tulips in mixed colours",
        image="https://images.unsplash.com/photo-1490750967868-88aa4486c946?w=400&h=400&fit=crop",
    ),
    Item(
        id=4,
        name="Sunshine Bouquet",
        price=2100,
        category="Sunflowers",
        description="7 bright sunflowers",
        image="https://images.unsplash.com/photo-1597848212624-e24ce6e0bcf7?w=400&h=400&fit=crop",
    ),
    Item(
        id=5,
        name="Elegance Bouquet",
        price=4500,
        category="Peonies",
        description="White and pink peonies",
        image="https://images.unsplash.com/photo-1563241527-3004b7be0ffd?w=400&h=400&fit=crop",
    ),
    Item(
        id=6,
        name="Romance Bouquet",
        price=2800,
        category="Roses",
        description="Roses mixed with eucalyptus",
        image="https://images.unsplash.com/photo-1487070183336-b863922373d4?w=400&h=400&fit=crop",
    ),
)


def categories_of(items: Sequence[Item]) -> list[str]:
    categories = [ALL_CATEGORY]
    for item in items:
        if item.category not in categories:
            categories.append(item.category)
    return categories


def filter_by_category(items: Sequence[Item], category: str) -> list[Item]:
    if category == ALL_CATEGORY:
        return list(items)
    return [item for item in items if item.category == category]


def get_one(items: Sequence[Item], id: int) -> Item | None:
    for item in items:
        if item.id == id:
            return item
    return None


def price_of(items: Sequence[Item], id: int) -> int:
    item = get_one(items, id)
    if item is None:
        # lines are only ever created from catalog items
        raise KeyError(id)
    return item.price
