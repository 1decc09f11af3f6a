from datetime import datetime, timezone

import pytest
import redis

from luminapos.core.errors import PersistenceError
from luminapos.core.session import PosSession
from luminapos.storage.store_memory import MemoryStore
from luminapos.storage.transaction_serial import TransactionSerial

FIXED_NOW = datetime(2026, 10, 19, 10, 30, 0, tzinfo=timezone.utc)
FIXED_CLOCK = 1792405800.0  # 2026-10-19T10:30:00Z


class FakeRedis:
    """Cliente minimo con la misma interfaz que usa RedisStore."""

    def __init__(self, fail_on_execute=False, down=False):
        self.data = {}
        self.fail_on_execute = fail_on_execute
        self.down = down

    def ping(self):
        if self.down:
            raise redis.ConnectionError("connection refused")
        return True

    def get(self, key):
        if self.down:
            raise redis.ConnectionError("connection refused")
        return self.data.get(key)

    def pipeline(self, transaction=True):
        return FakePipeline(self)


class FakePipeline:
    def __init__(self, client):
        self.client = client
        self.queued = []

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.queued = []
        return False

    def set(self, key, value):
        self.queued.append((key, value))

    def execute(self):
        if self.client.fail_on_execute or self.client.down:
            raise redis.ConnectionError("connection lost")
        for key, value in self.queued:
            self.client.data[key] = value
        self.queued = []


class FailingStore(MemoryStore):
    """Store en memoria cuyas escrituras fallan cuando se activa."""

    def __init__(self):
        super().__init__()
        self.fail = False

    def write_many(self, blobs):
        if self.fail:
            raise PersistenceError("disco lleno")
        super().write_many(blobs)


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def failing_store():
    return FailingStore()


def open_session(store):
    return PosSession.open(
        store,
        serial=TransactionSerial(clock=lambda: FIXED_CLOCK),
        now=lambda: FIXED_NOW,
    )


@pytest.fixture
def pos(store):
    return open_session(store)


@pytest.fixture
def catalog(pos):
    return pos.catalog


@pytest.fixture
def cart(pos):
    return pos.cart


@pytest.fixture
def ledger(pos):
    return pos.ledger


@pytest.fixture
def checkout(pos):
    return pos.checkout
