# luminapos/routers/reports.py
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from luminapos.core import reports
from luminapos.core.session import PosSession
from luminapos.routers.deps import get_session

router = APIRouter(prefix="/reports", tags=["Reports"])


def _parse_day(value: Optional[str]) -> Optional[date]:
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise HTTPException(status_code=400, detail="El parametro 'hoy' debe tener formato YYYY-MM-DD.")


# === 1. Resumen del tablero ===
@router.get("/summary")
def summary(
    request: Request,
    hoy: Optional[str] = Query(None),
    pos: PosSession = Depends(get_session),
):
    threshold = request.app.state.settings.low_stock_threshold
    return reports.dashboard_summary(
        pos.catalog.get_products(),
        pos.ledger.list(),
        threshold=threshold,
        today=_parse_day(hoy),
    )


# === 2. Productos con poco stock ===
@router.get("/low_stock")
def low_stock(request: Request, pos: PosSession = Depends(get_session)):
    threshold = request.app.state.settings.low_stock_threshold
    products = pos.catalog.low_stock(threshold)
    return {"threshold": threshold, "products": [p.to_dict() for p in products]}


# === 3. Insumo para analitica externa ===
@router.get("/insight_snapshot")
def insight_snapshot(limit: int = Query(10, ge=1, le=100), pos: PosSession = Depends(get_session)):
    return reports.insight_snapshot(pos.catalog.get_products(), pos.ledger.list(), limit=limit)
