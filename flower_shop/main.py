import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
import uvicorn

from flower_shop.settings import LOG_LEVEL
from flower_shop.api.cart.cart_routes import cart_router
from flower_shop.api.checkout.checkout_routes import checkout_router
from flower_shop.api.item.item_routes import item_router
from flower_shop.store import session_store
from flower_shop.store.session import shop_session

logging.basicConfig(level=LOG_LEVEL)


@asynccontextmanager
async def lifespan(app: FastAPI):
    session_store.init_db()
    shop_session.hydrate(session_store.load_cart())
    yield


app = FastAPI(title="Flower Shop API", lifespan=lifespan)

app.include_router(cart_router)
app.include_router(checkout_router)
app.include_router(item_router)


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
