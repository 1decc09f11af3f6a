"""
Errores del nucleo de caja.

Los errores de validacion se lanzan antes de cualquier escritura: carrito,
ledger y catalogo quedan intactos. PersistenceError aborta la operacion en curso.
"""


class LuminaError(Exception):
    """Base de todos los errores del dominio."""


class CheckoutValidationError(LuminaError, ValueError):
    """El cobro fue rechazado; no se confirmo nada."""


class EmptyCartError(CheckoutValidationError):
    def __init__(self):
        super().__init__("El carrito esta vacio.")


class InvalidPaymentError(CheckoutValidationError):
    pass


class InsufficientPaymentError(CheckoutValidationError):
    def __init__(self, amount_paid: int, total: int):
        self.amount_paid = amount_paid
        self.total = total
        super().__init__(f"Pago insuficiente: recibido {amount_paid}, total {total}.")


class InsufficientStockError(CheckoutValidationError):
    def __init__(self, product_id: str, requested: int, available: int):
        self.product_id = product_id
        self.requested = requested
        self.available = available
        super().__init__(
            f"Stock insuficiente para {product_id}: solicitado {requested}, disponible {available}."
        )


class ProductNotFoundError(LuminaError, KeyError):
    def __init__(self, product_id: str):
        self.product_id = product_id
        super().__init__(product_id)

    def __str__(self):
        return f"Producto {self.product_id} no encontrado."


class PersistenceError(LuminaError, RuntimeError):
    """Fallo de almacenamiento o de (de)serializacion. Nunca se silencia."""
