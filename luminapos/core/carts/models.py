from dataclasses import dataclass, field, replace
from typing import Dict, Optional
from time import time
import logging

from luminapos.core.models import Product, TransactionItem
from luminapos.core.pricing import compute_breakdown

log = logging.getLogger(__name__)

def _now() -> float:
    return time()

@dataclass
class CartLine:
    product: Product
    quantity: int
    updated_at: float = field(default_factory=_now)

    def __post_init__(self):
        if self.quantity <= 0:
            raise ValueError("Cantidad debe ser > 0")
        # Copia propia: cambios posteriores al producto del catalogo no la afectan.
        self.product = replace(self.product, strict=False)

    @property
    def product_id(self) -> str:
        return self.product.id

    @property
    def price(self) -> int:
        return self.product.price

    def line_total(self) -> int:
        return self.price * self.quantity

    def snapshot(self) -> TransactionItem:
        return TransactionItem.from_product(self.product, self.quantity)

    def to_dict(self) -> dict:
        d = self.product.to_dict()
        d["quantity"] = self.quantity
        d["line_total"] = self.line_total()
        return d


@dataclass
class Cart:
    # dict conserva el orden de insercion (orden de despliegue).
    items: Dict[str, CartLine] = field(default_factory=dict)
    created_at: float = field(default_factory=_now)
    updated_at: float = field(default_factory=_now)
    version: int = 1
    last_action: Optional[dict] = None

    def is_empty(self) -> bool:
        return not self.items

    def touch(self) -> None:
        self.updated_at = time()
        self.version += 1

    def to_summary(self) -> dict:
        breakdown = compute_breakdown(self.items.values())
        return {
            "version": self.version,
            "items": [i.to_dict() for i in self.items.values()],
            **breakdown,
            "last_action": self.last_action,
            "updated_at": self.updated_at,
        }
