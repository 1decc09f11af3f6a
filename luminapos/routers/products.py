# luminapos/routers/products.py
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, Field

from luminapos.core.errors import ProductNotFoundError
from luminapos.core.models import Product
from luminapos.core.session import PosSession
from luminapos.routers.deps import get_session

router = APIRouter(prefix="/products", tags=["Products"])


class ProductIn(BaseModel):
    id: Optional[str] = None
    name: str = Field(min_length=1)
    category: str = ""
    price: int = Field(ge=0)
    stock: int = Field(ge=0)
    sku: str = ""
    image: str = ""


class ProductOut(ProductIn):
    id: str


def _to_product(data: ProductIn) -> Product:
    return Product(**data.model_dump())


@router.get("/", response_model=List[ProductOut])
def list_products(
    q: Optional[str] = Query(None),
    category: Optional[str] = Query(None),
    pos: PosSession = Depends(get_session),
):
    """Catalogo completo; filtra por texto (nombre o SKU) y categoria si se envian."""
    if q or category:
        products = pos.catalog.search(q or "", category)
    else:
        products = pos.catalog.get_products()
    return [p.to_dict() for p in products]


@router.get("/categories", response_model=List[str])
def list_categories(pos: PosSession = Depends(get_session)):
    return pos.catalog.categories()


@router.get("/{product_id}", response_model=ProductOut)
def get_product(product_id: str, pos: PosSession = Depends(get_session)):
    product = pos.catalog.get_product(product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Producto no encontrado.")
    return product.to_dict()


@router.put("/", response_model=List[ProductOut])
def replace_products(payload: List[ProductOut], pos: PosSession = Depends(get_session)):
    """
    Reemplaza la coleccion completa. No es un merge: lo que no se envie se elimina.
    """
    products = [_to_product(p) for p in payload]
    pos.catalog.replace_all(products)
    return [p.to_dict() for p in products]


@router.post("/", response_model=ProductOut, status_code=201)
def save_product(payload: ProductIn, pos: PosSession = Depends(get_session)):
    """Crea un producto nuevo (sin id) o reemplaza el existente con ese id."""
    if payload.id:
        product = pos.catalog.upsert_product(_to_product(payload))
    else:
        product = pos.catalog.create_product(
            name=payload.name,
            category=payload.category,
            price=payload.price,
            stock=payload.stock,
            sku=payload.sku,
            image=payload.image,
        )
    return product.to_dict()


@router.delete("/{product_id}", status_code=204)
def delete_product(product_id: str, pos: PosSession = Depends(get_session)):
    try:
        pos.catalog.delete_product(product_id)
    except ProductNotFoundError:
        raise HTTPException(status_code=404, detail="Producto no encontrado.")
