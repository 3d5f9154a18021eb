"""Logging del paquete.

Se instala un NullHandler en el logger raíz de la aplicación para que importar
los módulos no emita avisos si nadie configuró logging. La CLI llama a
`configure_logging` una vez, con un `RichHandler` sobre stderr.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

__all__ = [
    "PACKAGE_LOGGER_NAME",
    "configure_logging",
    "get_logger",
]

PACKAGE_LOGGER_NAME = "license_cli"

logging.getLogger(PACKAGE_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str | None = None) -> logging.Logger:
    """Logger hijo del logger de la aplicación (`license_cli.<name>`)."""

    if not name:
        return logging.getLogger(PACKAGE_LOGGER_NAME)
    return logging.getLogger(f"{PACKAGE_LOGGER_NAME}.{name}")


def configure_logging(
    *,
    level: int | str = logging.WARNING,
    console: Console | None = None,
) -> logging.Logger:
    """Configura un único `RichHandler` en el logger de la aplicación.

    Llamadas repetidas solo actualizan el nivel; no duplican handlers.
    """

    logger = get_logger()
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)
    logger.setLevel(level)

    for handler in logger.handlers:
        if isinstance(handler, RichHandler):
            handler.setLevel(level)
            return logger

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=False,
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    return logger
