from typing import Dict, Optional, Protocol

PRODUCTS = "products"
TRANSACTIONS = "transactions"
COLLECTIONS = (PRODUCTS, TRANSACTIONS)


class Store(Protocol):
    """
    Persistencia clave-valor por coleccion completa.
    Cada escritura reemplaza la coleccion entera (no hay escrituras parciales).
    """

    def initialize(self) -> None: ...

    def read(self, collection: str) -> Optional[bytes]: ...

    def write(self, collection: str, data: bytes) -> None: ...

    def write_many(self, blobs: Dict[str, bytes]) -> None:
        """Escribe varias colecciones como una sola unidad: todas o ninguna."""
        ...


def check_collection(collection: str) -> str:
    if collection not in COLLECTIONS:
        raise ValueError(f"Coleccion desconocida: {collection}")
    return collection
