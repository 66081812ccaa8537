from http import HTTPStatus

from fastapi import APIRouter, HTTPException, Response

from flower_shop.store.session import shop_session as store

from .cart_contracts import (
    CartResponse,
    ClearResponse,
    QuantityRequest,
)

cart_router = APIRouter(prefix="/cart")


@cart_router.get("/")
async def get_cart() -> CartResponse:
    return CartResponse.from_entity(store.cart, store.catalog)


@cart_router.post(
    "/add/{item_id}",
    responses={
        HTTPStatus.OK: {
            "description": "Successfully added item to cart",
        },
        HTTPStatus.NOT_FOUND: {
            "description": "Failed to add item as one was not found in the catalog",
        },
    },
)
async def add_item(item_id: int) -> CartResponse:
    entity = store.add_item(item_id)

    if entity is None:
        raise HTTPException(
            HTTPStatus.NOT_FOUND,
            f"Request resource /item/{item_id} was not found",
        )

    return CartResponse.from_entity(entity, store.catalog)


@cart_router.put("/{item_id}")
async def put_quantity(item_id: int, info: QuantityRequest) -> CartResponse:
    entity = store.set_quantity(item_id, info.quantity)
    return CartResponse.from_entity(entity, store.catalog)


@cart_router.delete("/{item_id}")
async def delete_item(item_id: int) -> CartResponse:
    entity = store.remove_item(item_id)
    return CartResponse.from_entity(entity, store.catalog)


@cart_router.post("/clear")
async def request_clear(response: Response) -> ClearResponse:
    pending = store.request_clear()
    if pending:
        response.status_code = HTTPStatus.ACCEPTED
    return ClearResponse(pending=pending)


@cart_router.post(
    "/clear/confirm",
    responses={
        HTTPStatus.OK: {
            "description": "Successfully cleared cart",
        },
        HTTPStatus.CONFLICT: {
            "description": "Failed to clear cart as no clear was requested",
        },
    },
)
async def confirm_clear() -> CartResponse:
    entity = store.confirm_clear()

    if entity is None:
        raise HTTPException(
            HTTPStatus.CONFLICT,
            "Cart clear was not requested",
        )

    return CartResponse.from_entity(entity, store.catalog)


@cart_router.post("/clear/cancel")
async def cancel_clear() -> CartResponse:
    entity = store.cancel_clear()
    return CartResponse.from_entity(entity, store.catalog)
