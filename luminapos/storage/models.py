# luminapos/storage/models.py
# ======================================================
# Modelo ORM de LuminaPOS
# Una fila por coleccion: el blob se reemplaza completo.
# ======================================================

from sqlalchemy import Column, DateTime, LargeBinary, String
from sqlalchemy.sql import func

from .db import Base


class CollectionRow(Base):
    __tablename__ = "collections"

    name = Column(String(64), primary_key=True)
    payload = Column(LargeBinary, nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    def __repr__(self):
        return f"<CollectionRow name={self.name} bytes={len(self.payload or b'')}>"
