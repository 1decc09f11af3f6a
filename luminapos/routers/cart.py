from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from luminapos.core.session import PosSession
from luminapos.routers.deps import get_session

router = APIRouter(prefix="/cart", tags=["Cart"])


class AddItem(BaseModel):
    product_id: str


class QuantityDelta(BaseModel):
    delta: int


@router.get("/")
def show_cart(pos: PosSession = Depends(get_session)):
    return pos.cart.show()


@router.post("/items")
def add_item(payload: AddItem, pos: PosSession = Depends(get_session)):
    # Siempre con el producto vivo del catalogo.
    product = pos.catalog.get_product(payload.product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Producto no encontrado.")
    return pos.cart.add_to_cart(product)


@router.patch("/items/{product_id}")
def update_item(product_id: str, payload: QuantityDelta, pos: PosSession = Depends(get_session)):
    return pos.cart.update_quantity(product_id, payload.delta)


@router.delete("/items/{product_id}")
def remove_item(product_id: str, pos: PosSession = Depends(get_session)):
    return pos.cart.remove(product_id)


@router.delete("/")
def clear_cart(pos: PosSession = Depends(get_session)):
    return pos.cart.clear()
