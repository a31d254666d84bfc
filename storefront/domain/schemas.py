# storefront/domain/schemas.py
import random
import string
import time
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Annotated, List, Optional, Tuple

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

_BASE36 = string.digits + string.ascii_lowercase


def _random_base36(length: int) -> str:
    return "".join(random.choice(_BASE36) for _ in range(length))


def _as_utc(value: datetime) -> datetime:
    # znacznik bez strefy traktujemy jako UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


UtcDatetime = Annotated[datetime, AfterValidator(_as_utc)]


def generate_user_id() -> str:
    return f"user_{_random_base36(7)}"


def generate_order_id() -> str:
    # ORD-XXXXXX-NNNN, koncowka to ostatnie cyfry timestampu w ms
    millis = str(int(time.time() * 1000))
    return f"ORD-{_random_base36(6).upper()}-{millis[9:]}"


class DomainModel(BaseModel):
    """
    Wspolna konfiguracja modeli.
    Aliasy camelCase pozwalaja wczytac stare rekordy zapisane przez aplikacje webowa,
    zapis zawsze idzie po nazwach pol.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def evolve(self, **changes):
        """Kopia z walidacja (model_copy jej nie robi)."""
        data = {name: getattr(self, name) for name in type(self).model_fields}
        data.update(changes)
        return type(self).model_validate(data)


class OrderStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    PREPARING = "preparing"
    OUT_FOR_DELIVERY = "out_for_delivery"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self in (OrderStatus.DELIVERED, OrderStatus.CANCELLED)


class PaymentMethod(str, Enum):
    COD = "COD"
    ONLINE = "ONLINE"


class AuthProvider(str, Enum):
    EMAIL = "email"
    GOOGLE = "google"


# =====================================================
# KATALOG
# =====================================================
class Product(DomainModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str = ""
    price: Decimal = Field(..., ge=0)
    image: str = ""
    category: str = ""


class Store(DomainModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str = ""
    address: str = ""
    category: str = ""
    rating: float = Field(0.0, ge=0.0, le=5.0)
    image: str = ""
    latitude: float
    longitude: float
    products: Tuple[Product, ...] = ()


# =====================================================
# KOSZYK
# =====================================================
class CartEntry(DomainModel):
    model_config = ConfigDict(frozen=True)

    product: Product
    quantity: int = Field(..., ge=1)
    store_id: str

    @property
    def subtotal(self) -> Decimal:
        return self.product.price * self.quantity


class Cart(DomainModel):
    model_config = ConfigDict(frozen=True)

    entries: Tuple[CartEntry, ...] = ()

    @model_validator(mode="after")
    def _one_entry_per_product(self):
        ids = [e.product.id for e in self.entries]
        if len(ids) != len(set(ids)):
            raise ValueError("Produkt moze wystapic w koszyku tylko raz")
        return self

    def find(self, product_id: str) -> Optional[CartEntry]:
        return next((e for e in self.entries if e.product.id == product_id), None)


# =====================================================
# UZYTKOWNIK
# =====================================================
class Address(DomainModel):
    full_name: str = ""
    street: str = ""
    city: str = ""
    state: str = ""
    postal_code: str = ""
    phone: str = ""

    def missing_fields(self) -> List[str]:
        return [
            name for name in type(self).model_fields
            if not str(getattr(self, name)).strip()
        ]

    @property
    def is_complete(self) -> bool:
        return not self.missing_fields()


class UserAccount(DomainModel):
    id: str = Field(default_factory=generate_user_id)
    name: str
    email: str
    phone: Optional[str] = None
    addresses: List[Address] = Field(default_factory=list)
    default_address_index: int = -1
    photo_url: Optional[str] = Field(None, alias="photoURL")
    provider: AuthProvider = AuthProvider.EMAIL

    @model_validator(mode="after")
    def _default_points_at_address(self):
        idx = self.default_address_index
        if idx != -1 and not 0 <= idx < len(self.addresses):
            raise ValueError(f"Nieprawidlowy indeks domyslnego adresu: {idx}")
        return self

    @property
    def default_address(self) -> Optional[Address]:
        if self.default_address_index == -1:
            return None
        return self.addresses[self.default_address_index]


class ProfilePatch(DomainModel):
    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None


class ExternalProfile(DomainModel):
    """Profil zwracany przez zewnetrznego dostawce tozsamosci."""

    name: str
    email: str
    photo_url: Optional[str] = Field(None, alias="photoURL")


# =====================================================
# ZAMOWIENIA
# =====================================================
class StatusChange(DomainModel):
    status: OrderStatus
    timestamp: UtcDatetime
    description: str


class TrackingInfo(DomainModel):
    current_status: OrderStatus
    status_history: List[StatusChange]

    @model_validator(mode="after")
    def _history_consistent(self):
        history = self.status_history
        if not history:
            raise ValueError("Historia statusow nie moze byc pusta")
        for prev, nxt in zip(history, history[1:]):
            if nxt.timestamp < prev.timestamp:
                raise ValueError("Historia statusow musi byc chronologiczna")
        if history[-1].status != self.current_status:
            raise ValueError("Ostatni wpis historii musi odpowiadac aktualnemu statusowi")
        return self


class Order(DomainModel):
    id: str = Field(default_factory=generate_order_id)
    user_id: str
    items: List[CartEntry]
    store: Store
    status: OrderStatus = OrderStatus.PENDING
    created_at: UtcDatetime
    updated_at: UtcDatetime
    total: Decimal
    address: Address
    payment_method: PaymentMethod
    estimated_delivery: Optional[UtcDatetime] = None
    tracking_info: Optional[TrackingInfo] = None

    @model_validator(mode="after")
    def _tracking_mirrors_status(self):
        if self.tracking_info and self.tracking_info.current_status != self.status:
            raise ValueError("Status sledzenia musi odpowiadac statusowi zamowienia")
        return self
