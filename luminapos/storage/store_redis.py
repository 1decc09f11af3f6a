from typing import Dict, Optional
import logging

import redis

from luminapos.core.errors import PersistenceError
from luminapos.storage.base import check_collection

log = logging.getLogger(__name__)


class RedisStore:
    """Persistencia en Redis: una clave por coleccion, sin TTL."""

    def __init__(self, url="redis://localhost:6379/0", prefix="luminapos", client=None):
        self.client = client or redis.Redis.from_url(url)
        self.prefix = prefix

    def _key(self, collection: str) -> str:
        return f"{self.prefix}_{check_collection(collection)}"

    def initialize(self) -> None:
        try:
            self.client.ping()
        except redis.RedisError as err:
            raise PersistenceError(f"Redis no disponible: {err}") from err
        log.info(f"RedisStore conectado (prefijo {self.prefix}).")

    def read(self, collection: str) -> Optional[bytes]:
        key = self._key(collection)
        try:
            raw = self.client.get(key)
        except redis.RedisError as err:
            log.exception(f"Fallo leyendo {key}.")
            raise PersistenceError(f"Error leyendo {collection}: {err}") from err
        if isinstance(raw, str):
            raw = raw.encode("utf-8")
        return raw

    def write(self, collection: str, data: bytes) -> None:
        self.write_many({collection: data})

    def write_many(self, blobs: Dict[str, bytes]) -> None:
        keys = {self._key(c): data for c, data in blobs.items()}
        try:
            # MULTI/EXEC: las claves se aplican juntas o ninguna.
            with self.client.pipeline(transaction=True) as pipe:
                for key, data in keys.items():
                    pipe.set(key, data)
                pipe.execute()
        except redis.RedisError as err:
            log.exception(f"Fallo escribiendo {sorted(keys)}.")
            raise PersistenceError(f"Error escribiendo {sorted(blobs)}: {err}") from err
        log.info(f"Colecciones {sorted(blobs)} actualizadas en Redis.")
