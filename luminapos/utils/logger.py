import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str = "INFO") -> None:
    root = logging.getLogger()
    if root.handlers:
        # Ya configurado (uvicorn, pytest): solo ajusta el nivel.
        root.setLevel(level)
        return
    logging.basicConfig(level=level, format=LOG_FORMAT)
