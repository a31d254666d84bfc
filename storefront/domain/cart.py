# storefront/domain/cart.py
"""
Czyste operacje na koszyku.
Kazda komenda zwraca nowy Cart, zapis robi CartService.
"""
from decimal import Decimal
from typing import Dict, List, Tuple

from storefront.domain.errors import NotFound
from storefront.domain.schemas import Cart, CartEntry, Product, Store


#commands
def add_item(cart: Cart, product: Product, store_id: str) -> Cart:
    existing = cart.find(product.id)

    if existing:
        # wpis zachowuje pierwotny sklep
        bumped = existing.evolve(quantity=existing.quantity + 1)
        entries = tuple(bumped if e.product.id == product.id else e for e in cart.entries)
        return Cart(entries=entries)

    return Cart(entries=(*cart.entries, CartEntry(product=product, quantity=1, store_id=store_id)))


def remove_item(cart: Cart, product_id: str) -> Cart:
    return Cart(entries=tuple(e for e in cart.entries if e.product.id != product_id))


def set_quantity(cart: Cart, product_id: str, quantity: int) -> Cart:
    if quantity <= 0:
        return remove_item(cart, product_id)

    return Cart(
        entries=tuple(
            e.evolve(quantity=quantity) if e.product.id == product_id else e
            for e in cart.entries
        )
    )


def clear(cart: Cart) -> Cart:
    return Cart()


#query
def total(cart: Cart) -> Decimal:
    return sum((e.subtotal for e in cart.entries), Decimal("0"))


def item_count(cart: Cart) -> int:
    return sum(e.quantity for e in cart.entries)


def store_items(cart: Cart, store_id: str) -> List[CartEntry]:
    return [e for e in cart.entries if e.store_id == store_id]


def group_by_store(cart: Cart, catalog) -> List[Tuple[Store, List[CartEntry]]]:
    """
    Podzial koszyka na sklepy, w kolejnosci pierwszego wystapienia.
    Sklep musi istniec w katalogu, inaczej nie da sie zlozyc zamowienia.
    """
    groups: Dict[str, List[CartEntry]] = {}
    for entry in cart.entries:
        groups.setdefault(entry.store_id, []).append(entry)

    result = []
    for store_id, entries in groups.items():
        store = catalog.get_store(store_id)
        if store is None:
            raise NotFound(f"Sklep o ID {store_id} nie istnieje")
        result.append((store, entries))
    return result
