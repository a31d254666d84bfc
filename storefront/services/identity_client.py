# storefront/services/identity_client.py
import time

from storefront.domain.schemas import ExternalProfile
from storefront.utils.settings import EXTERNAL_AUTH_DELAY_SECONDS
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_PROFILE = ExternalProfile(
    name="Google User",
    email="google.user@example.com",
    photo_url="https://images.unsplash.com/photo-1535713875002-d1d0cf377fde?q=80&w=200&auto=format&fit=crop",
)


class IdentityClient:
    """
    Zaslepka zewnetrznego dostawcy tozsamosci (Google).
    Symuluje opoznienie sieci i zwraca staly profil.
    """

    def __init__(self, profile: ExternalProfile | None = None, delay: float | None = None):
        self.profile = profile or DEFAULT_PROFILE
        self.delay = EXTERNAL_AUTH_DELAY_SECONDS if delay is None else delay

    def fetch_profile(self) -> ExternalProfile:
        logger.info(f"IdentityClient fetch profile (simulated {self.delay}s)")
        if self.delay:
            time.sleep(self.delay)
        return self.profile
