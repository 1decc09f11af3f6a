from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from luminapos.core.session import PosSession
from luminapos.routers.deps import get_session

router = APIRouter(prefix="/transactions", tags=["Transactions"])


@router.get("/")
def list_transactions(
    date: Optional[str] = Query(None, description="Prefijo ISO, p.ej. 2026-10-19"),
    pos: PosSession = Depends(get_session),
):
    """
    Historial completo, mas reciente primero.
    """
    transactions = pos.ledger.for_date(date) if date else pos.ledger.list()
    return {
        "total_transactions": len(transactions),
        "transactions": [t.to_dict() for t in transactions],
    }


@router.get("/{transaction_id}")
def get_transaction(transaction_id: str, pos: PosSession = Depends(get_session)):
    transaction = pos.ledger.get(transaction_id)
    if not transaction:
        raise HTTPException(status_code=404, detail="Transaccion no encontrada.")
    return transaction.to_dict()
