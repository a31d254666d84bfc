# storefront/utils/settings.py
import os
from decimal import Decimal
from dotenv import load_dotenv

load_dotenv()

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# memory | redis
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "memory")
STORAGE_NAMESPACE = os.getenv("STORAGE_NAMESPACE", "storefront")
REDIS_URL = os.getenv("REDIS_URL", "redis://redis:6379/0")

DELIVERY_FEE = Decimal(os.getenv("DELIVERY_FEE", "40"))

#symulacja opoznienia zewnetrznego auth (sekundy)
AUTH_DELAY_SECONDS = float(os.getenv("AUTH_DELAY_SECONDS", 0.5))
EXTERNAL_AUTH_DELAY_SECONDS = float(os.getenv("EXTERNAL_AUTH_DELAY_SECONDS", 1.0))

#pusty string wylacza demo logowanie
DEMO_LOGIN_TRIGGERS = tuple(
    t.strip() for t in os.getenv("DEMO_LOGIN_TRIGGERS", "test,demo").split(",") if t.strip()
)
