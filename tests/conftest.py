"""Pytest fixtures for storefront tests."""

import random
from decimal import Decimal

import pytest

from storefront.data.catalog import Catalog
from storefront.data.kv import MemoryStore
from storefront.domain.schemas import Address, Product, Store
from storefront.services.cart_service import CartService
from storefront.services.identity_client import IdentityClient
from storefront.services.order_service import OrderService
from storefront.services.user_service import UserService
from storefront.session import ShopSession


def make_product(pid, price, category="Misc"):
    return Product(
        id=pid,
        name=f"Product {pid}",
        description="",
        price=Decimal(str(price)),
        image="",
        category=category,
    )


def make_store(sid, lat=0.0, lon=0.0, products=(), category="Grocery", name=None):
    return Store(
        id=sid,
        name=name or f"Store {sid}",
        description=f"Description of {sid}",
        address="1 Main Road",
        category=category,
        rating=4.0,
        image="",
        latitude=lat,
        longitude=lon,
        products=tuple(products),
    )


@pytest.fixture
def product_a():
    return make_product("A", 100)


@pytest.fixture
def product_b():
    return make_product("B", 50)


@pytest.fixture
def catalog(product_a, product_b):
    """Two stores, one product each."""
    return Catalog([
        make_store("S1", 19.0760, 72.8777, [product_a]),
        make_store("S2", 28.6139, 77.2090, [product_b], category="Electronics"),
    ])


@pytest.fixture
def kv():
    return MemoryStore()


@pytest.fixture
def session(kv, catalog):
    return ShopSession(kv=kv, catalog=catalog)


@pytest.fixture
def cart_service(session):
    return CartService(session)


@pytest.fixture
def user_service(session):
    return UserService(session, identity_client=IdentityClient(delay=0), delay=0)


@pytest.fixture
def order_service(session):
    return OrderService(session, delivery_fee=Decimal("40"), rng=random.Random(7))


@pytest.fixture
def address():
    return Address(
        full_name="Asha Rao",
        street="12 MG Road",
        city="Bengaluru",
        state="Karnataka",
        postal_code="560001",
        phone="+91 9000000000",
    )


@pytest.fixture
def logged_in(user_service, address):
    """Registered user with one (default) address."""
    user_service.register("Asha Rao", "asha@example.com", "secret")
    return user_service.add_address(address)
