"""
Pruebas del historial de transacciones (solo agrega, mas reciente primero).
"""

import pytest

from luminapos.core.ledger import TransactionLedger
from luminapos.core.models import Transaction, TransactionItem
from luminapos.storage.base import TRANSACTIONS


def _make_tx(tx_id="TX-1", date="2026-10-19T08:00:00.000Z", **overrides) -> Transaction:
    item = TransactionItem(id="2", name="Iced Latte", category="Beverages", price=28000,
                           stock=100, sku="BEV-001", image="", quantity=1)
    defaults = dict(
        id=tx_id,
        items=(item,),
        subtotal=28000,
        tax=3080,
        total=31080,
        amount_paid=31080,
        change=0,
        date=date,
        payment_method="qris",
    )
    defaults.update(overrides)
    return Transaction(**defaults)


class TestTransactionModel:
    def test_total_must_match(self):
        with pytest.raises(ValueError, match="Total"):
            _make_tx(total=1)

    def test_payment_method_validated(self):
        with pytest.raises(ValueError, match="Metodo"):
            _make_tx(payment_method="cheque")

    def test_items_coerced_to_tuple(self):
        tx = _make_tx(items=[_make_tx().items[0]])
        assert isinstance(tx.items, tuple)

    def test_external_format_keys(self):
        data = _make_tx().to_dict()
        assert set(data) == {"id", "items", "subtotal", "tax", "total", "amountPaid", "change", "date", "paymentMethod"}
        assert data["items"][0]["quantity"] == 1


class TestLedger:
    def test_empty_ledger(self, store):
        assert TransactionLedger(store).list() == []
        assert store.read(TRANSACTIONS) is None

    def test_record_prepends(self, store):
        ledger = TransactionLedger(store)
        ledger.record(_make_tx("TX-1"))
        ledger.record(_make_tx("TX-2"))
        ledger.record(_make_tx("TX-3"))
        assert [t.id for t in ledger.list()] == ["TX-3", "TX-2", "TX-1"]
        assert ledger.last_id() == "TX-3"

    def test_duplicate_id_rejected(self, store):
        ledger = TransactionLedger(store)
        ledger.record(_make_tx("TX-1"))
        with pytest.raises(ValueError, match="duplicada"):
            ledger.record(_make_tx("TX-1"))
        assert len(ledger.list()) == 1

    def test_get(self, store):
        ledger = TransactionLedger(store)
        ledger.record(_make_tx("TX-7"))
        assert ledger.get("TX-7").total == 31080
        assert ledger.get("TX-8") is None

    def test_for_date_prefix(self, store):
        ledger = TransactionLedger(store)
        ledger.record(_make_tx("TX-1", date="2026-10-18T23:59:59.000Z"))
        ledger.record(_make_tx("TX-2", date="2026-10-19T00:00:01.000Z"))
        assert [t.id for t in ledger.for_date("2026-10-19")] == ["TX-2"]
        assert len(ledger.for_date("2026-10")) == 2
