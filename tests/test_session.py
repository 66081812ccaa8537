from __future__ import annotations

import datetime
import logging

import pytest

from flower_shop.store.cart_models import EMPTY_CART, Cart, CartLine
from flower_shop.store.item_models import Item
from flower_shop.store.order_models import CheckoutState, DeliveryInfo, SessionState
from flower_shop.store.session import ShopSession

ROSES = Item(id=1, name="Rose Bouquet", price=2500, category="Roses")
TULIPS = Item(id=3, name="Tulip Bouquet", price=1800, category="Tulips")
CATALOG = (ROSES, TULIPS)

DELIVERY = DeliveryInfo(
	name="Anna",
	phone="+7 (999) 123-45-67",
	address="Main street 1",
	date=datetime.date(2026, 3, 8),
	time=datetime.time(10, 30),
	comment="ring twice",
)


class FailingSave(Exception):
	pass


@pytest.fixture()
def saved() -> list[Cart]:
	return []


@pytest.fixture()
def session(saved: list[Cart]) -> ShopSession:
	return ShopSession(catalog=CATALOG, delivery_fee=300, save_hook=saved.append)


def test_add_unknown_catalog_item_returns_none(session: ShopSession, saved: list[Cart]) -> None:
	assert session.add_item(99) is None
	assert session.cart == EMPTY_CART
	assert saved == []


def test_each_cart_change_is_saved(session: ShopSession, saved: list[Cart]) -> None:
	session.add_item(1)
	session.add_item(1)
	session.set_quantity(1, 2)  # unchanged, nothing to save
	session.remove_item(42)
	session.remove_item(1)

	assert saved == [
		Cart(lines=(CartLine(1, 1),)),
		Cart(lines=(CartLine(1, 2),)),
		EMPTY_CART,
	]


def test_failing_save_leaves_state_untouched() -> None:
	def save(cart: Cart) -> None:
		raise FailingSave()

	session = ShopSession(catalog=CATALOG, delivery_fee=300, save_hook=save)

	with pytest.raises(FailingSave):
		session.add_item(1)

	assert session.state == SessionState()


def test_summary(session: ShopSession) -> None:
	session.add_item(1)
	session.add_item(3)
	session.set_quantity(3, 2)

	summary = session.summary()
	assert summary.total_items == 3
	assert summary.total_price == 2500 + 2 * 1800


def test_checkout_cannot_open_on_empty_cart(session: ShopSession) -> None:
	assert session.open_checkout() is None
	assert session.state.checkout is CheckoutState.CLOSED


def test_checkout_scenario(session: ShopSession, saved: list[Cart]) -> None:
	session.add_item(1)
	session.add_item(1)

	summary = session.open_checkout()
	assert summary.state is CheckoutState.OPEN
	assert summary.subtotal == 5000
	assert summary.grand_total == 5300

	confirmation = session.submit_order(DELIVERY)

	assert confirmation.order.grand_total == 5300
	assert confirmation.order.delivery.comment == "ring twice"
	assert session.state == SessionState()
	assert saved[-1] == EMPTY_CART


def test_submit_refused_unless_checkout_open(session: ShopSession) -> None:
	session.add_item(1)

	assert session.submit_order(DELIVERY) is None
	assert session.cart.lines == (CartLine(1, 1),)


def test_failing_save_on_submit_keeps_cart_and_checkout() -> None:
	calls: list[Cart] = []

	def save(cart: Cart) -> None:
		if not cart:
			raise FailingSave()
		calls.append(cart)

	session = ShopSession(catalog=CATALOG, delivery_fee=300, save_hook=save)
	session.add_item(3)
	session.open_checkout()
	before = session.state

	with pytest.raises(FailingSave):
		session.submit_order(DELIVERY)

	assert session.state == before


def test_emptying_cart_closes_checkout(session: ShopSession) -> None:
	session.add_item(1)
	session.open_checkout()

	session.set_quantity(1, 0)

	assert session.state.checkout is CheckoutState.CLOSED
	assert session.submit_order(DELIVERY) is None


def test_close_checkout_keeps_cart(session: ShopSession) -> None:
	session.add_item(1)
	session.open_checkout()

	summary = session.close_checkout()

	assert summary.state is CheckoutState.CLOSED
	assert session.cart.lines == (CartLine(1, 1),)


def test_two_step_clear(session: ShopSession) -> None:
	assert session.request_clear() is False
	assert session.confirm_clear() is None

	session.add_item(1)
	assert session.request_clear() is True
	assert session.cancel_clear() == Cart(lines=(CartLine(1, 1),))
	assert session.confirm_clear() is None

	assert session.request_clear() is True
	assert session.confirm_clear() == EMPTY_CART
	assert session.state == SessionState()


def test_hydrate_drops_invalid_lines(session: ShopSession, saved: list[Cart]) -> None:
	cart = session.hydrate(
		Cart(
			lines=(
				CartLine(3, 2),
				CartLine(99, 1),
				CartLine(1, 0),
				CartLine(3, 5),
				CartLine(1, 4),
			)
		)
	)

	assert cart.lines == (CartLine(3, 2), CartLine(1, 4))
	assert session.state.checkout is CheckoutState.CLOSED
	assert saved == []


def test_reset(session: ShopSession, saved: list[Cart]) -> None:
	session.add_item(1)
	session.open_checkout()

	assert session.reset() == SessionState()
	assert saved[-1] == EMPTY_CART


def test_order_numbers_increase(session: ShopSession) -> None:
	numbers = []
	for _ in range(3):
		session.add_item(3)
		session.open_checkout()
		numbers.append(session.submit_order(DELIVERY).order.number)

	assert numbers == [1, 2, 3]


def test_failed_submit_does_not_consume_order_number() -> None:
	fail = [True]

	def save(cart: Cart) -> None:
		if not cart and fail[0]:
			raise FailingSave()

	session = ShopSession(catalog=CATALOG, delivery_fee=300, save_hook=save)
	session.add_item(1)
	session.open_checkout()

	with pytest.raises(FailingSave):
		session.submit_order(DELIVERY)

	fail[0] = False
	assert session.submit_order(DELIVERY).order.number == 1


def test_order_accepted_is_logged_only_after_commit(caplog) -> None:
	def save(cart: Cart) -> None:
		if not cart:
			raise FailingSave()

	session = ShopSession(catalog=CATALOG, delivery_fee=300, save_hook=save)
	session.add_item(1)
	session.open_checkout()

	with caplog.at_level(logging.INFO, logger="flower_shop.store.session"):
		with pytest.raises(FailingSave):
			session.submit_order(DELIVERY)

	assert "accepted" not in caplog.text


def test_order_accepted_is_logged(session: ShopSession, caplog) -> None:
	session.add_item(1)
	session.open_checkout()

	with caplog.at_level(logging.INFO, logger="flower_shop.store.session"):
		confirmation = session.submit_order(DELIVERY)

	assert f"Order #{confirmation.order.number} accepted" in caplog.text
