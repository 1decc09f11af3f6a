import logging
from threading import RLock
from typing import List, Optional

from luminapos.core.models import Transaction
from luminapos.storage.base import TRANSACTIONS
from luminapos.storage.codec import decode_transactions, encode_transactions

log = logging.getLogger(__name__)


class TransactionLedger:
    """
    Historial append-only de ventas confirmadas.
    El indice 0 es siempre la transaccion mas reciente.
    """

    def __init__(self, store, lock=None):
        self.store = store
        self._lock = lock or RLock()

    def list(self) -> List[Transaction]:
        raw = self.store.read(TRANSACTIONS)
        if raw is None:
            return []
        return decode_transactions(raw)

    def encode_with(self, transaction: Transaction) -> bytes:
        """Bytes de la coleccion con la transaccion antepuesta (sin escribir)."""
        transactions = self.list()
        if any(t.id == transaction.id for t in transactions):
            raise ValueError(f"Transaccion duplicada: {transaction.id}")
        return encode_transactions([transaction] + transactions)

    def record(self, transaction: Transaction) -> None:
        with self._lock:
            self.store.write(TRANSACTIONS, self.encode_with(transaction))
        log.info(f"Transaccion {transaction.id} registrada en el historial.")

    def get(self, transaction_id: str) -> Optional[Transaction]:
        for t in self.list():
            if t.id == transaction_id:
                return t
        return None

    def for_date(self, prefix: str) -> List[Transaction]:
        # Filtro por prefijo ISO: "2026-10-19" o "2026-10".
        return [t for t in self.list() if t.date.startswith(prefix)]

    def last_id(self) -> Optional[str]:
        transactions = self.list()
        return transactions[0].id if transactions else None
