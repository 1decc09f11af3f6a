import os
from dataclasses import dataclass

STORE_BACKENDS = ("sql", "redis", "memory")


@dataclass(frozen=True)
class Settings:
    store_backend: str = "sql"
    database_url: str = "sqlite:///luminapos.db"
    redis_url: str = "redis://localhost:6379/0"
    key_prefix: str = "luminapos"
    low_stock_threshold: int = 10
    log_level: str = "INFO"

    def __post_init__(self):
        if self.store_backend not in STORE_BACKENDS:
            raise ValueError(
                f"STORE_BACKEND invalido: {self.store_backend}. Usa uno de: {', '.join(STORE_BACKENDS)}"
            )

    @classmethod
    def from_env(cls) -> "Settings":
        # === CONFIGURACION: variables de entorno ===
        return cls(
            store_backend=os.getenv("STORE_BACKEND", "sql").strip().lower(),
            database_url=os.getenv("DATABASE_URL", "sqlite:///luminapos.db"),
            redis_url=os.getenv("REDIS_URL", "redis://localhost:6379/0"),
            key_prefix=os.getenv("STORE_KEY_PREFIX", "luminapos"),
            low_stock_threshold=int(os.getenv("LOW_STOCK_THRESHOLD", "10")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
