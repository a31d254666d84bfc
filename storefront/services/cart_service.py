# storefront/services/cart_service.py
from decimal import Decimal
from typing import List, Tuple

from storefront.domain import cart as carts
from storefront.domain.errors import NotFound
from storefront.domain.schemas import Cart, CartEntry, Product, Store
from storefront.session import ShopSession
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class CartService:
    """
    Use case'y koszyka.
    Komendy (add, remove, set_quantity, clear) podmieniaja koszyk sesji i zapisuja go,
    zapytania (total, item_count, group_by_store) tylko czytaja.
    """

    def __init__(self, session: ShopSession):
        self.session = session
        self.repo = session.cart_repo

    @property
    def cart(self) -> Cart:
        return self.session.cart

    def _commit(self, cart: Cart) -> Cart:
        self.session.cart = cart
        self.repo.save(cart)
        return cart

    #commands
    def add_item(self, product: Product, store_id: str) -> Cart:
        logger.info(f"Add product {product.id} (store {store_id}) to cart")
        return self._commit(carts.add_item(self.cart, product, store_id))

    def add_product_by_id(self, product_id: str) -> Cart:
        """Dodanie po samym ID produktu, sklep brany z katalogu."""
        found = self.session.catalog.get_product(product_id)
        if found is None:
            raise NotFound(f"Produkt o ID {product_id} nie istnieje")
        store, product = found
        return self.add_item(product, store.id)

    def remove_item(self, product_id: str) -> Cart:
        logger.info(f"Remove product {product_id} from cart")
        return self._commit(carts.remove_item(self.cart, product_id))

    def set_quantity(self, product_id: str, quantity: int) -> Cart:
        if self.cart.find(product_id) is None and quantity > 0:
            logger.info(f"Product {product_id} not in cart, quantity update ignored")
            return self.cart
        logger.info(f"Set quantity of product {product_id} to {quantity}")
        return self._commit(carts.set_quantity(self.cart, product_id, quantity))

    def clear(self) -> Cart:
        logger.info("Clear cart")
        return self._commit(carts.clear(self.cart))

    #query
    def total(self) -> Decimal:
        return carts.total(self.cart)

    def item_count(self) -> int:
        return carts.item_count(self.cart)

    def store_items(self, store_id: str) -> List[CartEntry]:
        return carts.store_items(self.cart, store_id)

    def group_by_store(self) -> List[Tuple[Store, List[CartEntry]]]:
        return carts.group_by_store(self.cart, self.session.catalog)
