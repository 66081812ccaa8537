import logging
import time

from sqlalchemy import (
    create_engine,
    Column,
    Integer,
    String,
    select,
    delete,
)
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import declarative_base, sessionmaker

from flower_shop.settings import DATABASE_URL, DB_INIT_ATTEMPTS, SESSION_KEY
from flower_shop.store.cart_models import Cart, CartLine

logger = logging.getLogger(__name__)

engine = create_engine(DATABASE_URL, future=True)
SessionLocal = sessionmaker(bind=engine, expire_on_commit=False, future=True)
Base = declarative_base()


class CartLineOrm(Base):
    __tablename__ = "cart_lines"
    session_key = Column(String(64), primary_key=True)
    position = Column(Integer, primary_key=True)
    item_id = Column(Integer, nullable=False)
    quantity = Column(Integer, nullable=False, default=1)


def init_db(attempts: int = DB_INIT_ATTEMPTS, delay: float = 1.0) -> None:
    for attempt in range(1, attempts + 1):
        try:
            Base.metadata.create_all(bind=engine)
            return
        except OperationalError:
            if attempt == attempts:
                raise
            logger.warning("Database not ready (attempt %d/%d)", attempt, attempts)
            time.sleep(delay)


def load_cart(key: str = SESSION_KEY) -> Cart:
    with SessionLocal() as session:
        rows = session.execute(
            select(CartLineOrm.item_id, CartLineOrm.quantity)
            .where(CartLineOrm.session_key == key)
            .order_by(CartLineOrm.position)
        ).all()
    return Cart(lines=tuple(CartLine(id=item_id, quantity=quantity) for item_id, quantity in rows))


def save_cart(cart: Cart, key: str = SESSION_KEY) -> None:
    with SessionLocal.begin() as session:
        session.execute(delete(CartLineOrm).where(CartLineOrm.session_key == key))
        for position, line in enumerate(cart.lines):
            session.add(
                CartLineOrm(
                    session_key=key,
                    position=position,
                    item_id=line.id,
                    quantity=line.quantity,
                )
            )
    logger.debug("Persisted %d cart line(s) for session %r", len(cart.lines), key)
