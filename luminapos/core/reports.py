# luminapos/core/reports.py
from datetime import date, datetime, timedelta, timezone
from typing import List, Optional, Sequence

from luminapos.core.models import Product, Transaction

INSIGHT_LOW_STOCK = 5


def total_revenue(transactions: Sequence[Transaction]) -> int:
    return sum(t.total for t in transactions)


def average_order_value(transactions: Sequence[Transaction]) -> float:
    if not transactions:
        return 0.0
    return total_revenue(transactions) / len(transactions)


def daily_revenue(transactions: Sequence[Transaction], days: int = 7,
                  today: Optional[date] = None) -> List[dict]:
    """Ingresos por dia (UTC), del mas antiguo al mas reciente."""
    today = today or datetime.now(timezone.utc).date()
    result = []
    for offset in range(days - 1, -1, -1):
        day = (today - timedelta(days=offset)).isoformat()
        result.append({
            "date": day,
            "total": sum(t.total for t in transactions if t.date.startswith(day)),
        })
    return result


def category_breakdown(products: Sequence[Product]) -> List[dict]:
    counts = {}
    for p in products:
        counts[p.category] = counts.get(p.category, 0) + 1
    return [{"category": c, "products": n} for c, n in counts.items()]


def low_stock_count(products: Sequence[Product], threshold: int = 10) -> int:
    return sum(1 for p in products if p.stock < threshold)


def dashboard_summary(products: Sequence[Product], transactions: Sequence[Transaction],
                      threshold: int = 10, today: Optional[date] = None) -> dict:
    return {
        "total_revenue": total_revenue(transactions),
        "order_count": len(transactions),
        "average_order_value": average_order_value(transactions),
        "low_stock_count": low_stock_count(products, threshold),
        "daily_revenue": daily_revenue(transactions, today=today),
        "categories": category_breakdown(products),
    }


def insight_snapshot(products: Sequence[Product], transactions: Sequence[Transaction],
                     limit: int = 10) -> dict:
    """Copia de solo lectura para un servicio de analitica externo."""
    return {
        "total_revenue": total_revenue(transactions),
        "order_count": len(transactions),
        "low_stock": [p.name for p in products if p.stock < INSIGHT_LOW_STOCK],
        "recent_transactions": [t.to_dict() for t in transactions[:limit]],
    }
