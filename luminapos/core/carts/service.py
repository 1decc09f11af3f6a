from threading import RLock
from time import time
from typing import Tuple
import logging

from luminapos.core.carts.models import Cart, CartLine
from luminapos.core.models import Product

log = logging.getLogger(__name__)


class CartService:
    """
    Carrito unico de la sesion activa. Solo vive en memoria.
    Toda cantidad se limita al stock vivo del catalogo.
    """

    def __init__(self, catalog, lock=None):
        self.catalog = catalog
        self.cart = Cart()
        self._lock = lock or RLock()

    def _record(self, action: str, line: CartLine = None, product_id: str = None, qty: int = 0):
        self.cart.last_action = {
            "action": action,
            "product_id": line.product_id if line else product_id,
            "name": line.product.name if line else None,
            "qty": qty,
            "timestamp": time(),
        }
        self.cart.touch()

    def add_to_cart(self, product: Product) -> dict:
        with self._lock:
            if product.stock <= 0:
                self._record("noop", product_id=product.id)
                log.info(f"Producto {product.id} sin stock; no se agrega.")
                return self.cart.to_summary()
            existing = self.cart.items.get(product.id)
            if existing:
                existing.quantity = min(existing.quantity + 1, product.stock)
                existing.updated_at = time()
                line = existing
            else:
                line = CartLine(product=product, quantity=1)
                self.cart.items[product.id] = line
            self._record("add", line, qty=line.quantity)
            log.info(f"Producto {product.id} en carrito: cantidad {line.quantity}")
            return self.cart.to_summary()

    def update_quantity(self, product_id: str, delta: int) -> dict:
        with self._lock:
            line = self.cart.items.get(product_id)
            if not line:
                self._record("noop", product_id=product_id)
                return self.cart.to_summary()
            new_qty = max(0, line.quantity + delta)
            # Stock re-leido del catalogo, nunca el de la copia del carrito.
            new_qty = min(new_qty, max(0, self.catalog.stock_of(product_id)))
            if new_qty == 0:
                self.cart.items.pop(product_id, None)
                self._record("remove", line, qty=line.quantity)
                log.info(f"Producto {product_id} quitado del carrito.")
            else:
                line.quantity = new_qty
                line.updated_at = time()
                self._record("update", line, qty=new_qty)
            return self.cart.to_summary()

    def remove(self, product_id: str) -> dict:
        with self._lock:
            line = self.cart.items.pop(product_id, None)
            if line:
                self._record("remove", line, qty=line.quantity)
            else:
                self._record("noop", product_id=product_id)
            return self.cart.to_summary()

    def clear(self) -> dict:
        with self._lock:
            self.cart.items.clear()
            self._record("clear")
            log.info("Carrito vaciado.")
            return self.cart.to_summary()

    def lines(self) -> Tuple[CartLine, ...]:
        with self._lock:
            return tuple(self.cart.items.values())

    def is_empty(self) -> bool:
        return self.cart.is_empty()

    def quantity_of(self, product_id: str) -> int:
        line = self.cart.items.get(product_id)
        return line.quantity if line else 0

    def show(self) -> dict:
        with self._lock:
            return self.cart.to_summary()
