"""Logging del proyecto.

Por qué un namespace propio (`gde`):
- Los módulos piden su logger con `get_logger("github")`, `get_logger("pipeline")`...
- La CLI configura solo ese árbol; el root logger queda intacto.

Los avisos para el usuario no se loguean como WARNING: los pinta la UI vía
hooks, y el log queda para `--verbose` o un fichero.
"""

from __future__ import annotations

import logging
from pathlib import Path


LOGGER_NAMESPACE = "gde"

_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")


def setup_logging(level: int = logging.WARNING, log_file: Path | None = None) -> logging.Logger:
    """
    Configura el logger `gde` (stderr + fichero opcional).

    Solo toca el logger del namespace, no el root, para no pisar handlers
    de quien nos importe (tests incluidos).
    """
    logger = logging.getLogger(LOGGER_NAMESPACE)
    logger.setLevel(level)

    # Evita duplicar handlers si se llama varias veces en el mismo proceso
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

    fmt = logging.Formatter(_FORMAT)

    sh = logging.StreamHandler()
    sh.setLevel(level)
    sh.setFormatter(fmt)
    logger.addHandler(sh)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(level)
        fh.setFormatter(fmt)
        logger.addHandler(fh)

    logger.debug("logging configured level=%s", logging.getLevelName(level))
    return logger
