"""Tests for order placement, checkout and status tracking."""

import json
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from storefront.domain.errors import (
    InvalidCredentials,
    InvalidInput,
    InvalidStatusTransition,
    NoAddressSelected,
    NotFound,
)
from storefront.domain.schemas import Address, CartEntry, OrderStatus, PaymentMethod
from storefront.services.order_service import (
    PLACED_DESCRIPTION,
    can_transition,
    estimate_delivery,
)

from conftest import make_product


@pytest.fixture
def two_store_cart(cart_service, product_a, product_b):
    # A: 100 x 2 w S1, B: 50 x 1 w S2
    cart_service.add_item(product_a, "S1")
    cart_service.add_item(product_a, "S1")
    cart_service.add_item(product_b, "S2")
    return cart_service


class TestPlaceOrder:

    def test_one_order_per_store(self, two_store_cart, order_service, address):
        orders = order_service.place_order(
            two_store_cart.group_by_store(), address, PaymentMethod.COD, "user_1"
        )

        assert len(orders) == 2
        by_store = {o.store.id: o for o in orders}
        assert by_store["S1"].total == Decimal("240")
        assert by_store["S2"].total == Decimal("90")

    def test_initial_state(self, two_store_cart, order_service, address):
        orders = order_service.place_order(
            two_store_cart.group_by_store(), address, "ONLINE", "user_1"
        )

        for order in orders:
            assert order.id.startswith("ORD-")
            assert order.status == OrderStatus.PENDING
            assert order.payment_method == PaymentMethod.ONLINE
            assert order.created_at == order.updated_at
            history = order.tracking_info.status_history
            assert len(history) == 1
            assert history[0].status == OrderStatus.PENDING
            assert history[0].description == PLACED_DESCRIPTION
            assert order.tracking_info.current_status == OrderStatus.PENDING

    def test_orders_persisted_under_user_key(self, two_store_cart, order_service, address, kv):
        order_service.place_order(two_store_cart.group_by_store(), address, "COD", "user_1")

        doc = json.loads(kv.get("orders_user_1"))
        assert doc["schema_version"] == 1
        assert len(doc["data"]) == 2
        assert order_service.list_orders("user_1")[0].store.id == "S1"
        assert order_service.list_orders("someone_else") == []

    def test_address_is_copied(self, two_store_cart, order_service, address):
        orders = order_service.place_order(two_store_cart.group_by_store(), address, "COD", "u")
        address.city = "Mysuru"
        assert orders[0].address.city == "Bengaluru"

    def test_missing_address(self, two_store_cart, order_service):
        with pytest.raises(NoAddressSelected):
            order_service.place_order(two_store_cart.group_by_store(), None, "COD", "u")

    def test_incomplete_address(self, two_store_cart, order_service):
        with pytest.raises(NoAddressSelected):
            order_service.place_order(
                two_store_cart.group_by_store(), Address(full_name="Asha"), "COD", "u"
            )

    def test_unknown_payment_method(self, two_store_cart, order_service, address):
        with pytest.raises(InvalidInput):
            order_service.place_order(two_store_cart.group_by_store(), address, "CARD", "u")

    def test_invalid_status_rejected_at_construction(self):
        with pytest.raises(ValueError):
            OrderStatus("shipped")


class TestEstimateDelivery:

    def test_within_24_to_48_hours(self):
        created = datetime(2024, 1, 1, tzinfo=timezone.utc)
        for _ in range(50):
            eta = estimate_delivery(created)
            assert created + timedelta(hours=24) <= eta <= created + timedelta(hours=48)

    def test_orders_have_estimate(self, two_store_cart, order_service, address):
        order = order_service.place_order(two_store_cart.group_by_store(), address, "COD", "u")[0]
        assert timedelta(hours=24) <= order.estimated_delivery - order.created_at <= timedelta(hours=48)


class TestCheckout:

    def test_checkout_places_orders_and_clears_cart(self, logged_in, two_store_cart, order_service, session):
        orders = order_service.checkout(PaymentMethod.COD)

        assert len(orders) == 2
        assert all(o.user_id == logged_in.id for o in orders)
        assert all(o.address == logged_in.addresses[0] for o in orders)
        assert session.cart.entries == ()
        assert len(order_service.list_orders(logged_in.id)) == 2

    def test_checkout_requires_login(self, two_store_cart, order_service):
        with pytest.raises(InvalidCredentials):
            order_service.checkout("COD")

    def test_checkout_empty_cart(self, logged_in, order_service):
        with pytest.raises(InvalidInput):
            order_service.checkout("COD")

    def test_checkout_without_address_keeps_cart(self, user_service, two_store_cart, order_service, session):
        user_service.register("Asha", "asha@x.com", "pw")

        with pytest.raises(NoAddressSelected):
            order_service.checkout("COD")

        assert len(session.cart.entries) == 2

    def test_checkout_with_unknown_store_keeps_cart(self, logged_in, cart_service, order_service, session):
        cart_service.add_item(make_product("Z", 10), "closed-store")

        with pytest.raises(NotFound):
            order_service.checkout("COD")

        assert len(session.cart.entries) == 1


class TestTracking:

    @pytest.fixture
    def order(self, logged_in, two_store_cart, order_service):
        return order_service.checkout("COD")[0]

    def test_advance_status_appends_history(self, order, order_service):
        updated = order_service.advance_status(order, OrderStatus.CONFIRMED, "Store confirmed")

        assert updated.status == OrderStatus.CONFIRMED
        assert updated.tracking_info.current_status == OrderStatus.CONFIRMED
        history = updated.tracking_info.status_history
        assert [h.status for h in history] == [OrderStatus.PENDING, OrderStatus.CONFIRMED]
        assert history[1].description == "Store confirmed"
        assert history[0].timestamp <= history[1].timestamp
        assert updated.updated_at >= order.updated_at

    def test_advance_status_is_persisted(self, order, order_service):
        order_service.advance_status(order, "confirmed", "ok")

        stored = order_service.get_order(order.user_id, order.id)

        assert stored.status == OrderStatus.CONFIRMED
        assert len(stored.tracking_info.status_history) == 2

    def test_full_lifecycle(self, order, order_service):
        for status in ("confirmed", "preparing", "out_for_delivery", "delivered"):
            order = order_service.advance_status(order, status, status)

        assert order.status == OrderStatus.DELIVERED
        assert len(order.tracking_info.status_history) == 5

    def test_skipping_states_rejected(self, order, order_service):
        with pytest.raises(InvalidStatusTransition):
            order_service.advance_status(order, OrderStatus.DELIVERED, "too fast")

    def test_cancelled_is_terminal(self, order, order_service):
        cancelled = order_service.cancel_order(order)

        assert cancelled.status == OrderStatus.CANCELLED
        with pytest.raises(InvalidStatusTransition):
            order_service.advance_status(cancelled, OrderStatus.CONFIRMED, "resurrect")

    def test_unknown_order(self, order, order_service):
        ghost = order.evolve(id="ORD-GHOST-0000")
        with pytest.raises(NotFound):
            order_service.advance_status(ghost, OrderStatus.CONFIRMED, "x")

    def test_stale_copy_does_not_drop_history(self, order, order_service):
        order_service.advance_status(order, OrderStatus.CONFIRMED, "Store confirmed")

        # order to wciaz kopia ze statusem pending
        cancelled = order_service.cancel_order(order)

        statuses = [h.status for h in cancelled.tracking_info.status_history]
        assert statuses == [OrderStatus.PENDING, OrderStatus.CONFIRMED, OrderStatus.CANCELLED]
        stored = order_service.get_order(order.user_id, order.id)
        assert stored == cancelled

    def test_transition_checked_against_stored_status(self, order, order_service):
        order_service.advance_status(order, OrderStatus.CONFIRMED, "ok")

        with pytest.raises(InvalidStatusTransition):
            order_service.advance_status(order, OrderStatus.CONFIRMED, "again")

    def test_transition_graph(self):
        assert can_transition(OrderStatus.PENDING, OrderStatus.CONFIRMED)
        assert can_transition(OrderStatus.OUT_FOR_DELIVERY, OrderStatus.CANCELLED)
        assert not can_transition(OrderStatus.DELIVERED, OrderStatus.CANCELLED)
        assert not can_transition(OrderStatus.CONFIRMED, OrderStatus.PENDING)


class TestQueries:

    def test_get_order(self, logged_in, two_store_cart, order_service):
        orders = order_service.checkout("COD")

        assert order_service.get_order(logged_in.id, orders[1].id) == orders[1]
        assert order_service.get_order(logged_in.id, "ORD-NOPE-0000") is None

    def test_list_newest_first(self, order_service, address, catalog, product_a):
        store = catalog.get_store("S1")
        entries = [CartEntry(product=product_a, quantity=1, store_id="S1")]
        first = order_service.place_order([(store, entries)], address, "COD", "u")[0]
        second = order_service.place_order([(store, entries)], address, "COD", "u")[0]

        assert [o.id for o in order_service.list_orders("u")] == [first.id, second.id]
        newest = order_service.list_orders("u", newest_first=True)
        assert newest[0].created_at >= newest[1].created_at

    def test_order_summary(self, logged_in, two_store_cart, order_service):
        order = next(o for o in order_service.checkout("COD") if o.store.id == "S1")

        summary = order_service.order_summary(order)

        assert summary["items_subtotal"] == Decimal("200")
        assert summary["delivery_fee"] == Decimal("40")
        assert summary["total"] == Decimal("240")
        assert summary["item_count"] == 2

    def test_round_trip_preserves_fields(self, logged_in, two_store_cart, order_service):
        placed = order_service.checkout("COD")
        reloaded = order_service.list_orders(logged_in.id)

        assert reloaded == placed
        assert isinstance(reloaded[0].created_at, datetime)
        assert reloaded[0].tracking_info.status_history[0].timestamp == placed[0].created_at
