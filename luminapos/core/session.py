from dataclasses import dataclass, field
from threading import RLock

from luminapos.core.carts.service import CartService
from luminapos.core.catalog import CatalogRepository
from luminapos.core.checkout import CheckoutService
from luminapos.core.ledger import TransactionLedger


@dataclass
class PosSession:
    """
    Servicios de la unica sesion de caja del proceso, sobre un store inyectado.

    Los routers corren en un threadpool: catalogo, historial, carrito y cobro
    comparten un mismo RLock, asi cada lectura-modificacion-escritura es
    exclusiva y un cobro no pisa la escritura de otro.
    """

    store: object
    catalog: CatalogRepository
    ledger: TransactionLedger
    cart: CartService
    checkout: CheckoutService
    lock: RLock = field(default_factory=RLock)

    @classmethod
    def open(cls, store, **checkout_options) -> "PosSession":
        lock = RLock()
        catalog = CatalogRepository(store, lock=lock)
        ledger = TransactionLedger(store, lock=lock)
        cart = CartService(catalog, lock=lock)
        checkout = CheckoutService(cart, catalog, ledger, store, lock=lock, **checkout_options)
        return cls(store=store, catalog=catalog, ledger=ledger, cart=cart, checkout=checkout, lock=lock)
