from typing import Dict, Optional
import logging

from sqlalchemy.exc import SQLAlchemyError

from luminapos.core.errors import PersistenceError
from luminapos.storage.base import check_collection
from luminapos.storage.db import (
    DEFAULT_DATABASE_URL,
    Base,
    make_engine,
    make_session_factory,
    session_scope,
)
from luminapos.storage.models import CollectionRow

log = logging.getLogger(__name__)


class SqlStore:
    """Persistencia durable sobre SQLAlchemy (SQLite por defecto, PostgreSQL via DATABASE_URL)."""

    def __init__(self, url: str = DEFAULT_DATABASE_URL, engine=None):
        self.engine = engine or make_engine(url)
        self.SessionLocal = make_session_factory(self.engine)

    def initialize(self) -> None:
        try:
            Base.metadata.create_all(bind=self.engine)
        except SQLAlchemyError as err:
            log.exception("No se pudo crear el esquema.")
            raise PersistenceError(f"Error inicializando base de datos: {err}") from err
        log.info(f"SqlStore listo en {self.engine.url.render_as_string(hide_password=True)}")

    def read(self, collection: str) -> Optional[bytes]:
        check_collection(collection)
        try:
            with session_scope(self.SessionLocal) as db:
                row = db.get(CollectionRow, collection)
                return bytes(row.payload) if row else None
        except SQLAlchemyError as err:
            log.exception(f"Fallo leyendo {collection}.")
            raise PersistenceError(f"Error leyendo {collection}: {err}") from err

    def write(self, collection: str, data: bytes) -> None:
        self.write_many({collection: data})

    def write_many(self, blobs: Dict[str, bytes]) -> None:
        for collection in blobs:
            check_collection(collection)
        try:
            # Una sola transaccion para todas las colecciones.
            with session_scope(self.SessionLocal) as db:
                for collection, data in blobs.items():
                    row = db.get(CollectionRow, collection)
                    if row:
                        row.payload = data
                    else:
                        db.add(CollectionRow(name=collection, payload=data))
        except SQLAlchemyError as err:
            log.exception(f"Fallo escribiendo {sorted(blobs)}.")
            raise PersistenceError(f"Error escribiendo {sorted(blobs)}: {err}") from err
        log.info(f"Colecciones {sorted(blobs)} actualizadas en base de datos.")
