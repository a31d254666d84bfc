# storefront/services/order_service.py
import random
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Dict, Iterable, List, Sequence, Tuple

from storefront.domain.errors import (
    InvalidCredentials,
    InvalidInput,
    InvalidStatusTransition,
    NoAddressSelected,
    NotFound,
)
from storefront.domain.schemas import (
    Address,
    CartEntry,
    Order,
    OrderStatus,
    PaymentMethod,
    StatusChange,
    Store,
    TrackingInfo,
)
from storefront.repos.order_repo import OrderRepo
from storefront.services.cart_service import CartService
from storefront.session import ShopSession
from storefront.utils.settings import DELIVERY_FEE
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

PLACED_DESCRIPTION = "Order has been placed and is awaiting confirmation"

# pending -> confirmed -> preparing -> out_for_delivery -> delivered,
# cancelled z kazdego stanu nieterminalnego
_NEXT_STATUS = {
    OrderStatus.PENDING: OrderStatus.CONFIRMED,
    OrderStatus.CONFIRMED: OrderStatus.PREPARING,
    OrderStatus.PREPARING: OrderStatus.OUT_FOR_DELIVERY,
    OrderStatus.OUT_FOR_DELIVERY: OrderStatus.DELIVERED,
}


def _now() -> datetime:
    return datetime.now(timezone.utc)


def can_transition(current: OrderStatus, new: OrderStatus) -> bool:
    if current.is_terminal:
        return False
    return new == OrderStatus.CANCELLED or _NEXT_STATUS.get(current) == new


def estimate_delivery(created_at: datetime, rng: random.Random | None = None) -> datetime:
    """24h + losowo 0-23 pelnych godzin od zlozenia zamowienia."""
    extra_hours = (rng or random).randrange(24)
    return created_at + timedelta(hours=24 + extra_hours)


def initial_tracking(now: datetime) -> TrackingInfo:
    return TrackingInfo(
        current_status=OrderStatus.PENDING,
        status_history=[
            StatusChange(status=OrderStatus.PENDING, timestamp=now, description=PLACED_DESCRIPTION)
        ],
    )


class OrderService:
    """
    Serwis zamowien: tworzenie zamowien z koszyka (jedno na sklep),
    odczyt i sledzenie statusu.
    """

    def __init__(
        self,
        session: ShopSession,
        delivery_fee: Decimal | None = None,
        rng: random.Random | None = None,
    ):
        self.session = session
        self.repo = OrderRepo(session.kv)
        self.delivery_fee = DELIVERY_FEE if delivery_fee is None else Decimal(delivery_fee)
        self.rng = rng

    # =====================================================
    # COMMANDS
    # =====================================================
    def place_order(
        self,
        groups: Iterable[Tuple[Store, Sequence[CartEntry]]],
        address: Address | None,
        payment_method: PaymentMethod | str,
        user_id: str,
    ) -> List[Order]:
        """
        Use Case: Zlozenie zamowien, jedno na kazdy sklep z koszyka.

        Kazde zamowienie jest zapisywane od razu. Jesli kolejna grupa sie nie uda,
        wczesniej zapisane zamowienia zostaja (brak rollbacku).
        """
        if address is None or not address.is_complete:
            raise NoAddressSelected()

        try:
            payment_method = PaymentMethod(payment_method)
        except ValueError:
            raise InvalidInput(f"Nieznana metoda platnosci: {payment_method}")

        created = []
        for store, entries in groups:
            entries = list(entries)
            if not entries:
                raise InvalidInput(f"Brak pozycji dla sklepu {store.id}")

            now = _now()
            store_total = sum((e.subtotal for e in entries), Decimal("0")) + self.delivery_fee

            order = Order(
                user_id=user_id,
                items=entries,
                store=store,
                status=OrderStatus.PENDING,
                created_at=now,
                updated_at=now,
                total=store_total,
                # kopia, nie referencja do ksiazki adresow
                address=address.model_copy(deep=True),
                payment_method=payment_method,
                estimated_delivery=estimate_delivery(now, self.rng),
                tracking_info=initial_tracking(now),
            )

            self.repo.create_order(order)
            logger.info(f"Order {order.id} placed for user {user_id} in store {store.id}, total {store_total}")
            created.append(order)

        return created

    def checkout(
        self,
        payment_method: PaymentMethod | str,
        address_index: int | None = None,
    ) -> List[Order]:
        """
        Use Case: Checkout calego koszyka sesji.

        1. Wymaga zalogowanego uzytkownika i niepustego koszyka
        2. Adres: podany indeks albo domyslny
        3. Zamowienie na kazdy sklep
        4. Czyszczenie koszyka dopiero gdy wszystkie zamowienia sie udaly
        """
        user = self.session.user
        if not user:
            raise InvalidCredentials("Zaloguj sie, aby zlozyc zamowienie")

        cart_service = CartService(self.session)
        if not cart_service.cart.entries:
            raise InvalidInput("Koszyk jest pusty")

        idx = user.default_address_index if address_index is None else address_index
        address = user.addresses[idx] if 0 <= idx < len(user.addresses) else None

        groups = cart_service.group_by_store()
        orders = self.place_order(groups, address, payment_method, user.id)

        cart_service.clear()
        logger.info(f"Checkout of user {user.id} finished with {len(orders)} orders")
        return orders

    def advance_status(self, order: Order, new_status: OrderStatus | str, description: str) -> Order:
        """
        Use Case: Zmiana statusu, dopisuje wpis do historii sledzenia.
        """
        new_status = OrderStatus(new_status)

        # zrodlem prawdy jest zapisany rekord, nie kopia wolajacego
        stored = self.repo.get_order(order.user_id, order.id)
        if stored is None:
            raise NotFound(f"Zamowienie {order.id} nie istnieje")

        if not can_transition(stored.status, new_status):
            raise InvalidStatusTransition(stored.status, new_status)

        history = list(stored.tracking_info.status_history) if stored.tracking_info else []
        now = _now()
        if history and history[-1].timestamp > now:
            # historia musi byc niemalejaca w czasie
            now = history[-1].timestamp
        history.append(StatusChange(status=new_status, timestamp=now, description=description))

        updated = stored.evolve(
            status=new_status,
            updated_at=now,
            tracking_info=TrackingInfo(current_status=new_status, status_history=history),
        )
        self.repo.update_order(updated)

        logger.info(f"Order {stored.id}: {stored.status.value} -> {new_status.value}")
        return updated

    def cancel_order(self, order: Order, description: str = "Order has been cancelled") -> Order:
        return self.advance_status(order, OrderStatus.CANCELLED, description)

    # =====================================================
    # QUERY
    # =====================================================
    def list_orders(self, user_id: str, newest_first: bool = False) -> List[Order]:
        orders = self.repo.list_orders(user_id)
        if newest_first:
            orders.sort(key=lambda o: o.created_at, reverse=True)
        return orders

    def get_order(self, user_id: str, order_id: str) -> Order | None:
        return self.repo.get_order(user_id, order_id)

    def order_summary(self, order: Order) -> Dict[str, object]:
        items_subtotal = sum((e.subtotal for e in order.items), Decimal("0"))
        return {
            "order_id": order.id,
            "item_count": sum(e.quantity for e in order.items),
            "items_subtotal": items_subtotal,
            "delivery_fee": order.total - items_subtotal,
            "total": order.total,
        }
