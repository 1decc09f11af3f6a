from fastapi import Request

from luminapos.core.session import PosSession


def get_session(request: Request) -> PosSession:
    """Sesion de caja creada en el lifespan (para inyeccion en FastAPI)."""
    return request.app.state.pos
