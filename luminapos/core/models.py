from dataclasses import InitVar, dataclass, asdict
from typing import Tuple
import logging

log = logging.getLogger(__name__)

PAYMENT_METHODS = ("cash", "card", "qris")


@dataclass
class Product:
    id: str
    name: str
    category: str
    price: int
    stock: int
    sku: str = ""
    image: str = ""
    strict: InitVar[bool] = True

    def __post_init__(self, strict: bool):
        if not self.id or not isinstance(self.id, str):
            raise ValueError("ID de producto invalido")
        if not strict:
            if self.stock < 0:
                log.warning(f"Producto {self.id} cargado con stock negativo ({self.stock}).")
            return
        if self.price < 0:
            raise ValueError("Precio no puede ser negativo")
        if self.stock < 0:
            raise ValueError("Stock no puede ser negativo")

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "Product":
        # Carga sin validar montos: un stock negativo guardado debe verse, no ocultarse.
        return cls(
            id=str(data["id"]),
            name=data.get("name", ""),
            category=data.get("category", ""),
            price=int(data.get("price", 0)),
            stock=int(data.get("stock", 0)),
            sku=data.get("sku", ""),
            image=data.get("image", ""),
            strict=False,
        )


@dataclass(frozen=True)
class TransactionItem:
    """Copia por valor de una linea del carrito al momento del cobro."""

    id: str
    name: str
    category: str
    price: int
    stock: int
    sku: str
    image: str
    quantity: int

    def line_total(self) -> int:
        return self.price * self.quantity

    @classmethod
    def from_product(cls, product: Product, quantity: int) -> "TransactionItem":
        return cls(quantity=quantity, **product.to_dict())

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "TransactionItem":
        return cls(
            id=str(data["id"]),
            name=data.get("name", ""),
            category=data.get("category", ""),
            price=int(data.get("price", 0)),
            stock=int(data.get("stock", 0)),
            sku=data.get("sku", ""),
            image=data.get("image", ""),
            quantity=int(data["quantity"]),
        )


@dataclass(frozen=True)
class Transaction:
    id: str
    items: Tuple[TransactionItem, ...]
    subtotal: int
    tax: int
    total: int
    amount_paid: int
    change: int
    date: str
    payment_method: str

    def __post_init__(self):
        if self.payment_method not in PAYMENT_METHODS:
            raise ValueError(f"Metodo de pago invalido: {self.payment_method}")
        if self.total != self.subtotal + self.tax:
            raise ValueError("Total inconsistente con subtotal + impuesto")
        # Las lineas siempre quedan como tupla inmutable.
        object.__setattr__(self, "items", tuple(self.items))

    @property
    def item_count(self) -> int:
        return sum(i.quantity for i in self.items)

    def to_dict(self) -> dict:
        """Formato externo del historial (claves camelCase)."""
        return {
            "id": self.id,
            "items": [i.to_dict() for i in self.items],
            "subtotal": self.subtotal,
            "tax": self.tax,
            "total": self.total,
            "amountPaid": self.amount_paid,
            "change": self.change,
            "date": self.date,
            "paymentMethod": self.payment_method,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Transaction":
        return cls(
            id=data["id"],
            items=tuple(TransactionItem.from_dict(i) for i in data.get("items", [])),
            subtotal=int(data["subtotal"]),
            tax=int(data["tax"]),
            total=int(data["total"]),
            amount_paid=int(data["amountPaid"]),
            change=int(data["change"]),
            date=data["date"],
            payment_method=data["paymentMethod"],
        )
