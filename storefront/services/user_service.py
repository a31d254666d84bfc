# storefront/services/user_service.py
import time
from typing import Any, Dict

from storefront.domain.errors import Conflict, InvalidCredentials, InvalidInput
from storefront.domain.schemas import (
    Address,
    AuthProvider,
    ExternalProfile,
    ProfilePatch,
    UserAccount,
)
from storefront.services.identity_client import IdentityClient
from storefront.session import ShopSession
from storefront.utils.settings import AUTH_DELAY_SECONDS, DEMO_LOGIN_TRIGGERS
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class UserService:
    """
    Konto uzytkownika i ksiazka adresow.

    Haslo nie jest przechowywane ani sprawdzane - logowanie to zaslepka
    zewnetrznego serwisu auth. Mutacje bez zalogowanego uzytkownika nic nie robia
    i zwracaja None.
    """

    def __init__(
        self,
        session: ShopSession,
        identity_client: IdentityClient | None = None,
        delay: float | None = None,
        demo_triggers: tuple | None = None,
    ):
        self.session = session
        self.repo = session.user_repo
        self.identity_client = identity_client or IdentityClient()
        self.delay = AUTH_DELAY_SECONDS if delay is None else delay
        self.demo_triggers = DEMO_LOGIN_TRIGGERS if demo_triggers is None else demo_triggers

    def _simulate_latency(self):
        if self.delay:
            time.sleep(self.delay)

    def _set_current(self, user: UserAccount) -> UserAccount:
        self.session.user = user
        self.repo.set_current(user)
        return user

    # =====================================================
    # AUTH
    # =====================================================
    def register(self, name: str, email: str, password: str) -> UserAccount:
        self._simulate_latency()

        if not name.strip() or not email.strip():
            raise InvalidInput("Imie i email sa wymagane")

        # dokladne porownanie, wielkosc liter ma znaczenie
        if self.repo.find_by_email(email):
            raise Conflict(f"Konto z adresem {email} juz istnieje")

        user = self.repo.create_user(UserAccount(name=name, email=email))
        logger.info(f"Registered user {user.id}")

        return self._set_current(user)

    def login(self, email: str, password: str) -> UserAccount:
        self._simulate_latency()

        if any(trigger in email for trigger in self.demo_triggers):
            # konto demo, nie trafia do katalogu kont
            demo = UserAccount(name="Test User", email=email, phone="+91 9876543210")
            logger.info(f"Demo login as throwaway user {demo.id}")
            return self._set_current(demo)

        user = self.repo.find_by_email(email)
        if not user:
            logger.info("Login failed: unknown email")
            raise InvalidCredentials()

        logger.info(f"User {user.id} logged in")
        return self._set_current(user)

    def login_with_external_identity(self, profile: ExternalProfile | None = None) -> UserAccount:
        if profile is None:
            profile = self.identity_client.fetch_profile()

        existing = self.repo.find_by_email(profile.email)

        if existing:
            user = existing.evolve(photo_url=profile.photo_url, provider=AuthProvider.GOOGLE)
            self.repo.update_user(user)
            logger.info(f"External login for existing user {user.id}")
        else:
            user = self.repo.create_user(
                UserAccount(
                    name=profile.name,
                    email=profile.email,
                    photo_url=profile.photo_url,
                    provider=AuthProvider.GOOGLE,
                )
            )
            logger.info(f"External login created user {user.id}")

        return self._set_current(user)

    def logout(self) -> None:
        if self.session.user:
            logger.info(f"User {self.session.user.id} logged out")
        self.session.user = None
        self.repo.clear_current()

    # =====================================================
    # PROFIL
    # =====================================================
    def _save(self, **changes) -> UserAccount:
        user = self.session.user.evolve(**changes)
        # konta demo nie ma w katalogu, update_user wtedy nic nie podmienia
        self.repo.update_user(user)
        return self._set_current(user)

    def update_profile(self, patch: ProfilePatch | Dict[str, Any]) -> UserAccount | None:
        user = self.session.user
        if not user:
            return None

        if not isinstance(patch, ProfilePatch):
            patch = ProfilePatch.model_validate(patch)
        changes = patch.model_dump(exclude_unset=True)
        # name/email sa wymagane, None oznacza "bez zmian"
        changes = {k: v for k, v in changes.items() if v is not None or k == "phone"}

        new_email = changes.get("email")
        if new_email is not None and new_email != user.email:
            taken = self.repo.find_by_email(new_email)
            if taken and taken.id != user.id:
                raise Conflict(f"Konto z adresem {new_email} juz istnieje")

        logger.info(f"Update profile of user {user.id}: {sorted(changes)}")
        return self._save(**changes)

    # =====================================================
    # ADRESY
    # =====================================================
    def _require_complete(self, address: Address):
        missing = address.missing_fields()
        if missing:
            raise InvalidInput(f"Wszystkie pola adresu sa wymagane, brakuje: {', '.join(missing)}")

    def _in_bounds(self, index: int) -> bool:
        user = self.session.user
        return bool(user) and 0 <= index < len(user.addresses)

    def add_address(self, address: Address) -> UserAccount | None:
        user = self.session.user
        if not user:
            return None

        self._require_complete(address)

        default_idx = 0 if user.default_address_index == -1 else user.default_address_index
        return self._save(
            addresses=[*user.addresses, address],
            default_address_index=default_idx,
        )

    def update_address(self, index: int, address: Address) -> UserAccount | None:
        if not self._in_bounds(index):
            return self.session.user

        self._require_complete(address)

        addresses = list(self.session.user.addresses)
        addresses[index] = address
        return self._save(addresses=addresses)

    def remove_address(self, index: int) -> UserAccount | None:
        if not self._in_bounds(index):
            return self.session.user

        user = self.session.user
        addresses = [a for i, a in enumerate(user.addresses) if i != index]
        default_idx = user.default_address_index

        if index == default_idx:
            default_idx = 0 if addresses else -1
        elif index < default_idx:
            # dalej wskazuje ten sam adres
            default_idx -= 1

        return self._save(addresses=addresses, default_address_index=default_idx)

    def set_default_address(self, index: int) -> UserAccount | None:
        if not self._in_bounds(index):
            return self.session.user

        return self._save(default_address_index=index)

    def default_address(self) -> Address | None:
        user = self.session.user
        return user.default_address if user else None
