# storefront/utils/formatting.py
# formatowanie dla widokow
import math
from decimal import Decimal, ROUND_HALF_UP


def _group_indian(digits: str) -> str:
    # 1234567 -> 12,34,567
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    groups.append(tail)
    return ",".join(groups)


def format_price(amount) -> str:
    """Cena w INR bez groszy, np. ``₹1,23,456``."""
    value = Decimal(str(amount)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    return f"{sign}₹{_group_indian(str(abs(value)))}"


def format_rating(rating: float) -> str:
    full = math.floor(rating)
    half = rating % 1 >= 0.5
    empty = 5 - full - (1 if half else 0)
    return "★" * full + ("½" if half else "") + "☆" * empty


def truncate_text(text: str, max_length: int) -> str:
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."
