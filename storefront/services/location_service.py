# storefront/services/location_service.py
from typing import Dict, List, Optional, Protocol

from pydantic import BaseModel, ConfigDict, Field

from storefront.data.catalog import Catalog
from storefront.domain.errors import LocationUnavailable
from storefront.domain.schemas import Store
from storefront.utils.geo import distance_km, filter_within_radius, rank_by_distance
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class Position(BaseModel):
    model_config = ConfigDict(frozen=True)

    lat: float
    lon: float


class PositionProvider(Protocol):
    def get_current_position(self) -> Position: ...


class StaticPositionProvider:
    """Stala pozycja albo jej brak (np. uzytkownik odmowil geolokalizacji)."""

    def __init__(self, position: Position | None = None):
        self.position = position

    def get_current_position(self) -> Position:
        if self.position is None:
            raise LocationUnavailable("Geolokalizacja niedostepna")
        return self.position


class NearbyStores(BaseModel):
    stores: List[Store]
    position: Optional[Position] = None
    error: Optional[str] = None
    distances: Dict[str, float] = Field(default_factory=dict)


class LocationService:
    """
    Lista sklepow wzgledem pozycji uzytkownika.
    Brak pozycji nigdy nie jest bledem - wtedy lista w kolejnosci katalogu.
    """

    def __init__(self, catalog: Catalog, provider: PositionProvider):
        self.catalog = catalog
        self.provider = provider

    def _position(self) -> Position | None:
        try:
            return self.provider.get_current_position()
        except LocationUnavailable as e:
            logger.warning(f"Location unavailable: {e}")
            return None
        except Exception as e:
            # zewnetrzny provider, kazdy blad = brak pozycji
            logger.warning(f"Position provider failed: {e!r}")
            return None

    def nearby_stores(self, category: str | None = None, max_km: float | None = None) -> NearbyStores:
        stores = self.catalog.stores_by_category(category) if category else self.catalog.list_stores()

        position = self._position()
        if position is None:
            return NearbyStores(
                stores=stores,
                error="Unable to get your location. Showing all stores instead.",
            )

        if max_km is not None:
            stores = filter_within_radius(stores, position.lat, position.lon, max_km)
        ranked = rank_by_distance(stores, position.lat, position.lon)

        return NearbyStores(
            stores=ranked,
            position=position,
            distances={
                s.id: distance_km(position.lat, position.lon, s.latitude, s.longitude)
                for s in ranked
            },
        )
