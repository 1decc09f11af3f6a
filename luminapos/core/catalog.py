import logging
from threading import RLock
from time import time
from typing import List, Optional, Sequence

from luminapos.core.errors import ProductNotFoundError
from luminapos.core.models import Product
from luminapos.storage.base import PRODUCTS
from luminapos.storage.codec import decode_products, encode_products

log = logging.getLogger(__name__)

IMAGE_URL = "https://picsum.photos/seed/{seed}/400/400"

# ----------------------------------------------------------------------
# 1. CATALOGO INICIAL (primer arranque)
# ----------------------------------------------------------------------
DEFAULT_CATALOG = (
    {"id": "1", "name": "Arabica Coffee Beans 250g", "category": "Coffee", "price": 85000, "stock": 24, "sku": "COF-001", "image": IMAGE_URL.format(seed="coffee")},
    {"id": "2", "name": "Iced Latte", "category": "Beverages", "price": 28000, "stock": 100, "sku": "BEV-001", "image": IMAGE_URL.format(seed="latte")},
    {"id": "3", "name": "Chocolate Croissant", "category": "Pastry", "price": 22000, "stock": 15, "sku": "PAS-001", "image": IMAGE_URL.format(seed="pastry")},
    {"id": "4", "name": "Mineral Water 600ml", "category": "Beverages", "price": 5000, "stock": 50, "sku": "BEV-002", "image": IMAGE_URL.format(seed="water")},
    {"id": "5", "name": "Tote Bag Lumina", "category": "Merchandise", "price": 45000, "stock": 10, "sku": "MER-001", "image": IMAGE_URL.format(seed="bag")},
)


def default_products() -> List[Product]:
    return [Product(**row) for row in DEFAULT_CATALOG]


class CatalogRepository:
    """
    Dueno exclusivo de la coleccion de productos.
    La unica escritura es el reemplazo completo (replace_all).
    """

    def __init__(self, store, lock=None):
        self.store = store
        self._lock = lock or RLock()

    # ------------------------------------------------------------------
    # 2. LECTURA / ESCRITURA
    # ------------------------------------------------------------------
    def get_products(self) -> List[Product]:
        with self._lock:
            raw = self.store.read(PRODUCTS)
            if raw is None:
                products = default_products()
                self.replace_all(products)
                log.info(f"Catalogo inicial sembrado con {len(products)} productos.")
                return products
        return decode_products(raw)

    def replace_all(self, products: Sequence[Product]) -> None:
        with self._lock:
            self.store.write(PRODUCTS, encode_products(products))
        log.info(f"Catalogo reemplazado ({len(products)} productos).")

    save_products = replace_all

    def get_product(self, product_id: str) -> Optional[Product]:
        for p in self.get_products():
            if p.id == product_id:
                return p
        return None

    def stock_of(self, product_id: str) -> int:
        product = self.get_product(product_id)
        return product.stock if product else 0

    # ------------------------------------------------------------------
    # 3. STOCK
    # ------------------------------------------------------------------
    @staticmethod
    def apply_decrement(products: List[Product], product_id: str, quantity: int) -> Product:
        """Resta en la lista dada sin limitar a 0: la suficiencia la valida quien llama."""
        for p in products:
            if p.id == product_id:
                p.stock -= quantity
                return p
        raise ProductNotFoundError(product_id)

    def decrement_stock(self, product_id: str, quantity: int) -> Product:
        with self._lock:
            products = self.get_products()
            product = self.apply_decrement(products, product_id, quantity)
            self.replace_all(products)
        return product

    def low_stock(self, threshold: int = 10) -> List[Product]:
        return [p for p in self.get_products() if p.stock < threshold]

    # ------------------------------------------------------------------
    # 4. ADMINISTRACION DEL CATALOGO
    # ------------------------------------------------------------------
    def upsert_product(self, product: Product) -> Product:
        with self._lock:
            products = self.get_products()
            for index, p in enumerate(products):
                if p.id == product.id:
                    products[index] = product
                    break
            else:
                # Los productos nuevos van primero.
                products.insert(0, product)
            self.replace_all(products)
        return product

    def create_product(self, name: str, category: str, price: int, stock: int,
                       sku: str = "", image: str = "") -> Product:
        stamp = str(int(time() * 1000))
        product = Product(
            id=stamp,
            name=name,
            category=category,
            price=price,
            stock=stock,
            sku=sku,
            image=image or IMAGE_URL.format(seed=stamp),
        )
        return self.upsert_product(product)

    def delete_product(self, product_id: str) -> None:
        with self._lock:
            products = self.get_products()
            remaining = [p for p in products if p.id != product_id]
            if len(remaining) == len(products):
                raise ProductNotFoundError(product_id)
            self.replace_all(remaining)

    # ------------------------------------------------------------------
    # 5. BUSQUEDA
    # ------------------------------------------------------------------
    def categories(self) -> List[str]:
        seen = []
        for p in self.get_products():
            if p.category not in seen:
                seen.append(p.category)
        return seen

    def search(self, term: str = "", category: Optional[str] = None) -> List[Product]:
        term = (term or "").strip().lower()
        results = []
        for p in self.get_products():
            if category and category != "All" and p.category != category:
                continue
            if term and term not in p.name.lower() and term not in p.sku.lower():
                continue
            results.append(p)
        return results
