import logging

from luminapos.config import Settings
from luminapos.core.errors import PersistenceError
from luminapos.storage.store_memory import MemoryStore
from luminapos.storage.store_redis import RedisStore
from luminapos.storage.store_sql import SqlStore

log = logging.getLogger(__name__)


def build_store(settings: Settings, redis_client=None):
    """
    Construye e inicializa el backend configurado.
    Si Redis no responde se usa la base SQL; nunca se cae a memoria
    para no perder durabilidad sin avisar.
    """
    if settings.store_backend == "memory":
        store = MemoryStore()
        log.warning("Usando almacenamiento en memoria: los datos no sobreviven reinicios.")
    elif settings.store_backend == "redis":
        store = RedisStore(url=settings.redis_url, prefix=settings.key_prefix, client=redis_client)
        try:
            store.initialize()
            log.info("Store usando Redis.")
            return store
        except PersistenceError as err:
            log.warning(f"No se pudo conectar a Redis ({err}). Usando base de datos SQL.")
            store = SqlStore(url=settings.database_url)
    else:
        store = SqlStore(url=settings.database_url)
    store.initialize()
    return store
