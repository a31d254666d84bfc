# storefront/repos/base.py
import json
from typing import Any

from pydantic import TypeAdapter, ValidationError

from storefront.data.kv import KeyValueStore
from storefront.domain.errors import PersistenceCorrupt
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

SCHEMA_VERSION = 1


class JsonRepo:
    """
    Rekordy JSON w magazynie klucz-wartosc.

    Zapis: {"schema_version": 1, "data": ...}
    Odczyt: wersja 0 (surowy JSON bez koperty, zapisany przez aplikacje webowa)
    przechodzi przez migrate(). Uszkodzony rekord jest logowany i usuwany,
    wolajacy dostaje None.
    """

    def __init__(self, kv: KeyValueStore):
        self.kv = kv

    def migrate(self, data: Any, version: int) -> Any:
        return data

    def _decode(self, key: str, raw: str, adapter: TypeAdapter):
        try:
            doc = json.loads(raw)
        except json.JSONDecodeError as e:
            raise PersistenceCorrupt(key, f"niepoprawny JSON ({e.msg})")

        if isinstance(doc, dict) and "schema_version" in doc:
            version = doc["schema_version"]
            if not isinstance(version, int) or version > SCHEMA_VERSION or "data" not in doc:
                raise PersistenceCorrupt(key, f"nieobslugiwana wersja schematu {version!r}")
            data = doc["data"]
        else:
            version = 0
            data = doc

        if version < SCHEMA_VERSION:
            data = self.migrate(data, version)

        try:
            return adapter.validate_python(data)
        except ValidationError as e:
            raise PersistenceCorrupt(key, f"{e.error_count()} bledow walidacji")

    def read(self, key: str, adapter: TypeAdapter):
        raw = self.kv.get(key)
        if raw is None:
            return None

        try:
            return self._decode(key, raw, adapter)
        except PersistenceCorrupt as e:
            logger.warning(f"{e} - usuwam klucz")
            self.kv.delete(key)
            return None

    def write(self, key: str, value: Any, adapter: TypeAdapter) -> None:
        envelope = {
            "schema_version": SCHEMA_VERSION,
            "data": adapter.dump_python(value, mode="json"),
        }
        self.kv.set(key, json.dumps(envelope))

    def delete(self, key: str) -> None:
        self.kv.delete(key)
