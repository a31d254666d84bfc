# storefront/domain/errors.py


class StorefrontError(Exception):
    """Bazowy wyjatek domeny sklepu."""


class NotFound(StorefrontError):
    pass


class InvalidInput(StorefrontError):
    pass


class InvalidStatusTransition(InvalidInput):
    def __init__(self, current, requested):
        self.current = current
        self.requested = requested
        super().__init__(
            f"Niedozwolona zmiana statusu zamowienia: {current.value} -> {requested.value}"
        )


class Conflict(StorefrontError):
    pass


class NoAddressSelected(StorefrontError):
    def __init__(self, message: str = "Wybierz adres dostawy"):
        super().__init__(message)


class InvalidCredentials(StorefrontError):
    def __init__(self, message: str = "Nieprawidlowy email lub haslo"):
        super().__init__(message)


class PersistenceCorrupt(StorefrontError):
    """Uszkodzony rekord w magazynie klucz-wartosc. Nigdy nie wychodzi poza repo."""

    def __init__(self, key: str, reason: str):
        self.key = key
        self.reason = reason
        super().__init__(f"Uszkodzone dane pod kluczem '{key}': {reason}")


class LocationUnavailable(StorefrontError):
    pass
