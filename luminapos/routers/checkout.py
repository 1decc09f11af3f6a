# luminapos/routers/checkout.py
from typing import Literal

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from luminapos.core.checkout import Payment
from luminapos.core.errors import CheckoutValidationError
from luminapos.core.pricing import format_currency
from luminapos.core.session import PosSession
from luminapos.routers.deps import get_session

router = APIRouter(prefix="/checkout", tags=["Checkout"])


class PaymentIn(BaseModel):
    method: Literal["cash", "card", "qris"]
    amount_paid: int = Field(0, ge=0)


@router.get("/quote")
def quote(pos: PosSession = Depends(get_session)):
    breakdown = pos.checkout.quote()
    breakdown["total_display"] = format_currency(breakdown["total"])
    return breakdown


@router.post("/", status_code=201)
def checkout(payload: PaymentIn, pos: PosSession = Depends(get_session)):
    """
    Confirma la venta del carrito actual.
    Errores de validacion -> 400 sin cambios; fallos de persistencia -> 500.
    """
    try:
        transaction = pos.checkout.checkout(Payment(method=payload.method, amount_paid=payload.amount_paid))
    except CheckoutValidationError as err:
        raise HTTPException(status_code=400, detail=str(err))

    return {
        "message": "Transaccion registrada correctamente",
        "transaction": transaction.to_dict(),
        "change_display": format_currency(transaction.change),
    }
