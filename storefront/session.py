# storefront/session.py
from storefront.data.catalog import Catalog
from storefront.data.kv import KeyValueStore, create_store
from storefront.domain.schemas import Cart, UserAccount
from storefront.repos.cart_repo import CartRepo
from storefront.repos.user_repo import UserRepo
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class ShopSession:
    """
    Stan jednej sesji (jednego kontekstu przegladarki): koszyk i zalogowany uzytkownik.
    Serwisy dostaja sesje jawnie, nie ma globalnego stanu.
    """

    def __init__(self, kv: KeyValueStore | None = None, catalog: Catalog | None = None):
        self.kv = kv if kv is not None else create_store()
        self.catalog = catalog or Catalog.default()

        self.cart_repo = CartRepo(self.kv)
        self.user_repo = UserRepo(self.kv)

        # odtworzenie stanu z magazynu
        self.cart: Cart = self.cart_repo.load()
        self.user: UserAccount | None = self.user_repo.get_current()

        logger.info(
            f"Session restored: {len(self.cart.entries)} cart entries, "
            f"user={self.user.id if self.user else None}"
        )

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None
