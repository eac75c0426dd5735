"""
Configuração de logging da aplicação
"""
import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

_handler = None


def setup_logging(level: str = "INFO") -> None:
    """Configura o logger raiz; chamadas repetidas só ajustam o nível"""
    global _handler
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    if _handler is None:
        _handler = logging.StreamHandler(sys.stdout)
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(_handler)

    # SQL só aparece com DB_ECHO
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
