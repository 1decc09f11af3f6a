"""
Motor de cobro.

Flujo: validar carrito y pago -> re-validar stock contra el catalogo vivo ->
armar la transaccion (copia por valor de las lineas) -> escribir historial y
catalogo en una sola unidad atomica del store -> vaciar el carrito.

Si la escritura falla, carrito, historial y catalogo quedan como estaban.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from threading import RLock
from typing import Optional

from luminapos.core.errors import (
    EmptyCartError,
    InsufficientPaymentError,
    InsufficientStockError,
    InvalidPaymentError,
)
from luminapos.core.models import PAYMENT_METHODS, Transaction
from luminapos.core.pricing import compute_breakdown
from luminapos.storage.base import PRODUCTS, TRANSACTIONS
from luminapos.storage.codec import encode_products
from luminapos.storage.transaction_serial import TransactionSerial

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Payment:
    method: str
    amount_paid: int = 0


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def iso_timestamp(moment: datetime) -> str:
    # 2026-10-19T10:27:00.123Z
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class CheckoutService:
    def __init__(self, cart, catalog, ledger, store, serial: Optional[TransactionSerial] = None,
                 now=_utc_now, lock=None):
        self.cart = cart
        self.catalog = catalog
        self.ledger = ledger
        self.store = store
        self.serial = serial or TransactionSerial()
        self.now = now
        self._lock = lock or RLock()
        self.serial.seed(self.ledger.last_id())

    def quote(self) -> dict:
        return compute_breakdown(self.cart.lines())

    def _settle(self, payment: Payment, total: int):
        if payment.method not in PAYMENT_METHODS:
            raise InvalidPaymentError(f"Metodo de pago invalido: {payment.method}")
        if payment.method != "cash":
            # Tarjeta / QRIS: se cobra exacto, sin cambio.
            return total, 0
        if payment.amount_paid is None or payment.amount_paid < total:
            raise InsufficientPaymentError(payment.amount_paid or 0, total)
        return payment.amount_paid, payment.amount_paid - total

    def checkout(self, payment: Payment) -> Transaction:
        # Validar, escribir y vaciar el carrito es una sola seccion exclusiva.
        with self._lock:
            return self._commit(payment)

    def _commit(self, payment: Payment) -> Transaction:
        # --- 1. Validaciones (sin efectos) ---
        if self.cart.is_empty():
            raise EmptyCartError()

        lines = self.cart.lines()
        breakdown = compute_breakdown(lines)
        amount_paid, change = self._settle(payment, breakdown["total"])

        products = self.catalog.get_products()
        live = {p.id: p for p in products}
        for line in lines:
            available = live[line.product_id].stock if line.product_id in live else 0
            if line.quantity > available:
                raise InsufficientStockError(line.product_id, line.quantity, available)

        # --- 2. Transaccion inmutable ---
        transaction = Transaction(
            id=self.serial.next(),
            items=tuple(line.snapshot() for line in lines),
            subtotal=breakdown["subtotal"],
            tax=breakdown["tax"],
            total=breakdown["total"],
            amount_paid=amount_paid,
            change=change,
            date=iso_timestamp(self.now()),
            payment_method=payment.method,
        )

        # --- 3. Commit: historial + stock en una sola escritura ---
        for item in transaction.items:
            self.catalog.apply_decrement(products, item.id, item.quantity)
        self.store.write_many({
            TRANSACTIONS: self.ledger.encode_with(transaction),
            PRODUCTS: encode_products(products),
        })
        log.info(
            f"Transaccion {transaction.id} confirmada: total {transaction.total}, "
            f"{transaction.item_count} unidades, pago {transaction.payment_method}"
        )

        self.cart.clear()
        return transaction
