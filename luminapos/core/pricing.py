from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable

# Impuesto fijo del sistema (11%), no configurable por transaccion.
TAX_RATE = Decimal("0.11")


def compute_tax(subtotal: int) -> int:
    return int((Decimal(subtotal) * TAX_RATE).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def compute_breakdown(lines: Iterable) -> dict:
    """
    Retorna el desglose de precio de un conjunto de lineas (price, quantity).
    {
      "subtotal": int,
      "tax": int,
      "total": int,
      "item_count": int
    }
    """
    subtotal = 0
    item_count = 0
    for line in lines:
        subtotal += line.price * line.quantity
        item_count += line.quantity
    tax = compute_tax(subtotal)
    return {
        "subtotal": subtotal,
        "tax": tax,
        "total": subtotal + tax,
        "item_count": item_count,
    }


def format_currency(amount: int) -> str:
    """Rp 62.160 (sin decimales, separador de miles con punto)."""
    sign = "-" if amount < 0 else ""
    return f"{sign}Rp {abs(amount):,.0f}".replace(",", ".")
