# storefront/utils/geo.py
import math
from typing import Iterable, List

from storefront.domain.schemas import Store

EARTH_RADIUS_KM = 6371


def _deg2rad(deg: float) -> float:
    return deg * (math.pi / 180)


def distance_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Odleglosc po kole wielkim (haversine), w km."""
    d_lat = _deg2rad(lat2 - lat1)
    d_lon = _deg2rad(lon2 - lon1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(_deg2rad(lat1)) * math.cos(_deg2rad(lat2)) * math.sin(d_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def rank_by_distance(stores: Iterable[Store], user_lat: float, user_lon: float) -> List[Store]:
    # sorted() jest stabilny, remisy zostaja w kolejnosci katalogu
    return sorted(
        stores,
        key=lambda s: distance_km(user_lat, user_lon, s.latitude, s.longitude),
    )


def filter_within_radius(
    stores: Iterable[Store],
    user_lat: float,
    user_lon: float,
    max_km: float,
) -> List[Store]:
    return [
        s for s in stores
        if distance_km(user_lat, user_lon, s.latitude, s.longitude) <= max_km
    ]
