"""
Pruebas de los agregados del tablero y del insumo para analitica.
"""

from datetime import date, datetime, timedelta, timezone

from luminapos.core import reports
from luminapos.core.checkout import Payment


def _sell(pos, *product_ids):
    for product_id in product_ids:
        pos.cart.add_to_cart(pos.catalog.get_product(product_id))
    return pos.checkout.checkout(Payment("card"))


class TestDashboard:
    def test_no_transactions(self, pos):
        summary = reports.dashboard_summary(pos.catalog.get_products(), [], today=date(2026, 10, 19))
        assert summary["total_revenue"] == 0
        assert summary["order_count"] == 0
        assert summary["average_order_value"] == 0.0
        assert len(summary["daily_revenue"]) == 7

    def test_totals_and_average(self, pos):
        _sell(pos, "2", "2")
        _sell(pos, "4")
        transactions = pos.ledger.list()
        assert reports.total_revenue(transactions) == 62160 + 5550
        assert reports.average_order_value(transactions) == (62160 + 5550) / 2

    def test_daily_revenue_oldest_first(self, pos):
        _sell(pos, "4")
        days = reports.daily_revenue(pos.ledger.list(), days=3, today=date(2026, 10, 19))
        assert days == [
            {"date": "2026-10-17", "total": 0},
            {"date": "2026-10-18", "total": 0},
            {"date": "2026-10-19", "total": 5550},
        ]

    def test_default_day_is_the_utc_date(self, monkeypatch):
        class _WestOfUtcClock(datetime):
            # 2030-01-01T02:00Z; en UTC-12 todavia es 31 de diciembre.
            @classmethod
            def now(cls, tz=None):
                moment = datetime(2030, 1, 1, 2, 0, tzinfo=timezone.utc)
                return moment.astimezone(tz or timezone(timedelta(hours=-12)))

        monkeypatch.setattr(reports, "datetime", _WestOfUtcClock)
        days = reports.daily_revenue([], days=2)
        assert [d["date"] for d in days] == ["2029-12-31", "2030-01-01"]

    def test_category_breakdown(self, catalog):
        assert reports.category_breakdown(catalog.get_products()) == [
            {"category": "Coffee", "products": 1},
            {"category": "Beverages", "products": 2},
            {"category": "Pastry", "products": 1},
            {"category": "Merchandise", "products": 1},
        ]

    def test_low_stock_count(self, catalog):
        assert reports.low_stock_count(catalog.get_products(), threshold=16) == 2


class TestInsightSnapshot:
    def test_snapshot_is_read_only_copy(self, pos, store):
        _sell(pos, "5", "5", "5", "5", "5", "5")
        writes = store.writes
        snapshot = reports.insight_snapshot(pos.catalog.get_products(), pos.ledger.list(), limit=1)
        assert snapshot["low_stock"] == ["Tote Bag Lumina"]
        assert snapshot["order_count"] == 1
        assert snapshot["recent_transactions"][0]["paymentMethod"] == "card"
        assert store.writes == writes
