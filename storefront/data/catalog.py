# storefront/data/catalog.py
from typing import Iterable, List, Optional, Tuple

from storefront.data.seed import STORES
from storefront.domain.schemas import Product, Store


class Catalog:
    """
    Katalog sklepow i produktow, tylko do odczytu.
    """

    def __init__(self, stores: Iterable[Store]):
        self._stores: Tuple[Store, ...] = tuple(stores)

    @classmethod
    def from_records(cls, records: Iterable[dict]) -> "Catalog":
        return cls(Store.model_validate(r) for r in records)

    @classmethod
    def default(cls) -> "Catalog":
        return cls.from_records(STORES)

    def list_stores(self) -> List[Store]:
        return list(self._stores)

    def get_store(self, store_id: str) -> Optional[Store]:
        return next((s for s in self._stores if s.id == store_id), None)

    def get_product(self, product_id: str) -> Optional[Tuple[Store, Product]]:
        for store in self._stores:
            for product in store.products:
                if product.id == product_id:
                    return store, product
        return None

    def list_categories(self) -> List[str]:
        # unikalne, w kolejnosci katalogu
        return list(dict.fromkeys(s.category for s in self._stores))

    def stores_by_category(self, category: str) -> List[Store]:
        wanted = category.lower()
        return [s for s in self._stores if s.category.lower() == wanted]

    def search_stores(self, query: str) -> List[Store]:
        q = query.lower()
        return [
            s for s in self._stores
            if q in s.name.lower()
            or q in s.category.lower()
            or q in s.description.lower()
        ]
