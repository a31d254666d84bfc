# storefront/data/kv.py
from typing import Dict, Optional, Protocol

import redis

from storefront.utils.retry import redis_retry
from storefront.utils.settings import REDIS_URL, STORAGE_BACKEND, STORAGE_NAMESPACE
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class KeyValueStore(Protocol):
    """
    Kontrakt magazynu: caly rekord jest odczytywany i zapisywany naraz.
    Brak wersjonowania/CAS - bezpieczne tylko przy jednym piszacym na namespace.
    """

    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...


class MemoryStore:
    """Odpowiednik localStorage w pamieci procesu."""

    def __init__(self, initial: Dict[str, str] | None = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)


class RedisStore:
    """
    Trwaly magazyn w Redisie.
    Klucze sa prefiksowane namespace'em (np. id sesji przegladarki).
    """

    def __init__(
        self,
        url: str | None = None,
        namespace: str | None = None,
        client: redis.Redis | None = None,
    ):
        self.redis = client or redis.Redis.from_url(
            url or REDIS_URL,
            decode_responses=True,
        )
        self.namespace = namespace or STORAGE_NAMESPACE

    def _key(self, key: str) -> str:
        return f"{self.namespace}:{key}"

    @redis_retry()
    def get(self, key: str) -> Optional[str]:
        return self.redis.get(self._key(key))

    @redis_retry()
    def set(self, key: str, value: str) -> None:
        logger.debug(f"SET {self._key(key)} ({len(value)} bytes)")
        self.redis.set(self._key(key), value)

    @redis_retry()
    def delete(self, key: str) -> None:
        logger.debug(f"DEL {self._key(key)}")
        self.redis.delete(self._key(key))


def create_store(backend: str | None = None, namespace: str | None = None) -> KeyValueStore:
    backend = (backend or STORAGE_BACKEND).lower()

    if backend == "memory":
        return MemoryStore()
    if backend == "redis":
        logger.info(f"Using Redis storage, namespace '{namespace or STORAGE_NAMESPACE}'")
        return RedisStore(namespace=namespace)

    raise ValueError(f"Nieznany backend magazynu: {backend}")
