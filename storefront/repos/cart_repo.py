# storefront/repos/cart_repo.py
from pydantic import TypeAdapter

from storefront.domain.schemas import Cart
from storefront.repos.base import JsonRepo

CART_KEY = "cart"

_cart = TypeAdapter(Cart)


class CartRepo(JsonRepo):

    def migrate(self, data, version):
        # stary format: sama lista pozycji
        if version == 0 and isinstance(data, list):
            return {"entries": data}
        return data

    def load(self) -> Cart:
        return self.read(CART_KEY, _cart) or Cart()

    def save(self, cart: Cart) -> None:
        self.write(CART_KEY, cart, _cart)
