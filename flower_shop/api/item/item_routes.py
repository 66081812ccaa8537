from http import HTTPStatus
from typing import Annotated

from fastapi import APIRouter, HTTPException, Query

from flower_shop.store.item_models import ALL_CATEGORY
from flower_shop.store import item_queries as store

from .item_contracts import ItemResponse

item_router = APIRouter(prefix="/item")


@item_router.get("/")
async def get_item_list(
    category: Annotated[str, Query()] = ALL_CATEGORY,
) -> list[ItemResponse]:
    return [
        ItemResponse.from_entity(e)
        for e in store.filter_by_category(store.catalog, category)
    ]


@item_router.get("/categories")
async def get_category_list() -> list[str]:
    return store.categories_of(store.catalog)


@item_router.get(
    "/{id}",
    responses={
        HTTPStatus.OK: {
            "description": "Successfully returned requested item",
        },
        HTTPStatus.NOT_FOUND: {
            "description": "Failed to return requested item as one was not found",
        },
    },
)
async def get_item_by_id(id: int) -> ItemResponse:
    entity = store.get_one(store.catalog, id)

    if not entity:
        raise HTTPException(
            HTTPStatus.NOT_FOUND,
            f"Request resource /item/{id} was not found",
        )

    return ItemResponse.from_entity(entity)
