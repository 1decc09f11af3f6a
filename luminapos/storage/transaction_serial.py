from time import time

TRANSACTION_PREFIX = "TX-"


class TransactionSerial:
    """
    Genera TX-<epoch en ms>. Si el reloj no avanzo desde el ultimo id
    (o retrocedio), usa el ultimo valor + 1 para que los ids sigan creciendo.
    """

    def __init__(self, clock=time, prefix: str = TRANSACTION_PREFIX):
        self.clock = clock
        self.prefix = prefix
        self._last = 0

    def seed(self, last_id: str) -> None:
        """Continua despues de un id ya persistido (p.ej. al reiniciar)."""
        if last_id and last_id.startswith(self.prefix):
            suffix = last_id[len(self.prefix):]
            if suffix.isdigit():
                self._last = max(self._last, int(suffix))

    def next(self) -> str:
        stamp = int(self.clock() * 1000)
        if stamp <= self._last:
            stamp = self._last + 1
        self._last = stamp
        return f"{self.prefix}{stamp}"
