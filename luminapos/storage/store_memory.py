from typing import Dict, Optional
import logging

from luminapos.storage.base import check_collection

log = logging.getLogger(__name__)


class MemoryStore:
    """Almacenamiento en memoria para pruebas o sesiones efimeras (no sobrevive reinicios)."""

    def __init__(self, initial: Optional[Dict[str, bytes]] = None):
        self._store: Dict[str, bytes] = dict(initial or {})
        self.writes = 0

    def initialize(self) -> None:
        log.info("MemoryStore listo.")

    def read(self, collection: str) -> Optional[bytes]:
        return self._store.get(check_collection(collection))

    def write(self, collection: str, data: bytes) -> None:
        self.write_many({collection: data})

    def write_many(self, blobs: Dict[str, bytes]) -> None:
        for collection, data in blobs.items():
            check_collection(collection)
            if not isinstance(data, bytes):
                raise TypeError(f"Se esperaban bytes para {collection}")
        self._store.update(blobs)
        self.writes += 1
        log.info(f"Colecciones {sorted(blobs)} actualizadas en memoria.")
