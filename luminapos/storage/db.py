# luminapos/storage/db.py
from __future__ import annotations
from contextlib import contextmanager
from typing import Iterator
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker, DeclarativeBase

DEFAULT_DATABASE_URL = "sqlite:///luminapos.db"


# === BASE ORM ===
class Base(DeclarativeBase):
    """Clase base para los modelos ORM."""
    pass


# === ENGINE ===
def make_engine(url: str = DEFAULT_DATABASE_URL, echo: bool = False) -> Engine:
    return create_engine(
        url,
        echo=echo,           # True para ver el SQL en consola
        future=True,
        pool_pre_ping=True,  # Verifica conexiones antes de usarlas
    )


# === SESION ===
def make_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(
        bind=engine,
        autocommit=False,
        autoflush=False,
        future=True,
    )


@contextmanager
def session_scope(factory: sessionmaker[Session]) -> Iterator[Session]:
    """Contexto transaccional: commit al salir, rollback ante cualquier error."""
    db = factory()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
