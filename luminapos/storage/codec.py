import json
import logging
from typing import Iterable, List

from luminapos.core.errors import PersistenceError
from luminapos.core.models import Product, Transaction

log = logging.getLogger(__name__)


def _dumps(records: list) -> bytes:
    try:
        return json.dumps(records, ensure_ascii=False).encode("utf-8")
    except (TypeError, ValueError) as err:
        log.exception("No se pudo serializar la coleccion.")
        raise PersistenceError(f"Error de serializacion: {err}") from err


def _loads(raw: bytes) -> list:
    try:
        data = json.loads(raw)
    except (UnicodeDecodeError, ValueError) as err:
        log.exception("Coleccion almacenada ilegible.")
        raise PersistenceError(f"Error de deserializacion: {err}") from err
    if not isinstance(data, list):
        raise PersistenceError("La coleccion almacenada no es una lista.")
    return data


def encode_products(products: Iterable[Product]) -> bytes:
    return _dumps([p.to_dict() for p in products])


def decode_products(raw: bytes) -> List[Product]:
    try:
        return [Product.from_dict(d) for d in _loads(raw)]
    except (KeyError, TypeError, ValueError) as err:
        raise PersistenceError(f"Producto almacenado invalido: {err}") from err


def encode_transactions(transactions: Iterable[Transaction]) -> bytes:
    return _dumps([t.to_dict() for t in transactions])


def decode_transactions(raw: bytes) -> List[Transaction]:
    try:
        return [Transaction.from_dict(d) for d in _loads(raw)]
    except (KeyError, TypeError, ValueError) as err:
        raise PersistenceError(f"Transaccion almacenada invalida: {err}") from err
