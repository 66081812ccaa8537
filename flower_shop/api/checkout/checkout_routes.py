from http import HTTPStatus

from fastapi import APIRouter, HTTPException

from flower_shop.store.session import shop_session as store

from .checkout_contracts import (
    CheckoutResponse,
    DeliveryRequest,
    OrderConfirmationResponse,
)

checkout_router = APIRouter(prefix="/checkout")


@checkout_router.get("/")
async def get_checkout() -> CheckoutResponse:
    return CheckoutResponse.from_entity(store.checkout_summary())


@checkout_router.post(
    "/open",
    responses={
        HTTPStatus.OK: {
            "description": "Successfully opened checkout",
        },
        HTTPStatus.CONFLICT: {
            "description": "Failed to open checkout as the cart is empty",
        },
    },
)
async def open_checkout() -> CheckoutResponse:
    entity = store.open_checkout()

    if entity is None:
        raise HTTPException(
            HTTPStatus.CONFLICT,
            "Cannot open checkout with an empty cart",
        )

    return CheckoutResponse.from_entity(entity)


@checkout_router.post("/close")
async def close_checkout() -> CheckoutResponse:
    return CheckoutResponse.from_entity(store.close_checkout())


@checkout_router.post(
    "/",
    responses={
        HTTPStatus.OK: {
            "description": "Successfully submitted order",
        },
        HTTPStatus.CONFLICT: {
            "description": "Failed to submit order as checkout is not open",
        },
    },
)
async def submit_order(info: DeliveryRequest) -> OrderConfirmationResponse:
    entity = store.submit_order(info.as_delivery_info())

    if entity is None:
        raise HTTPException(
            HTTPStatus.CONFLICT,
            "Checkout is not open",
        )

    return OrderConfirmationResponse.from_entity(entity)
