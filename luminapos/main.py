import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from luminapos.config import Settings
from luminapos.core.errors import PersistenceError
from luminapos.core.session import PosSession
from luminapos.routers import cart, checkout, health, products, reports, transactions
from luminapos.storage.factory import build_store
from luminapos.utils.logger import setup_logging

log = logging.getLogger(__name__)


def create_app(settings: Settings = None, store=None) -> FastAPI:
    settings = settings or Settings.from_env()

    # --- Lifespan ---
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Se ejecuta al iniciar la app
        setup_logging(settings.log_level)
        backend = store
        if backend is None:
            backend = build_store(settings)
        else:
            backend.initialize()
        app.state.pos = PosSession.open(backend)
        # Siembra el catalogo en el primer arranque.
        app.state.pos.catalog.get_products()
        log.info("[startup] Store inicializado y catalogo disponible.")
        yield
        # Al apagar la app
        log.info("[shutdown] App finalizada correctamente.")

    # --- Inicializacion de la app ---
    app = FastAPI(
        title="LuminaPOS API",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Fallo de persistencia: se detiene la operacion y se informa, nunca se continua con datos viejos.
    @app.exception_handler(PersistenceError)
    async def persistence_error_handler(request: Request, exc: PersistenceError):
        log.error(f"Fallo de persistencia en {request.url.path}: {exc}")
        return JSONResponse(status_code=500, content={"detail": str(exc)})

    # --- Routers ---
    app.include_router(health.router)
    app.include_router(products.router)
    app.include_router(cart.router)
    app.include_router(checkout.router)
    app.include_router(transactions.router)
    app.include_router(reports.router)

    @app.get("/")
    async def root():
        return {"message": "API de LuminaPOS en linea"}

    return app


app = create_app()
