"""Selección de una licencia del registro.

Dos modos:
- identificador explícito: búsqueda exacta (case-sensitive) sobre `license_id`
- sin identificador: se delega en un `Picker` interactivo inyectado

El picker devuelve `None` cuando el usuario cancela; aquí se traduce a
`SelectionCancelled`, distinto de `LicenseNotFound`.
"""

from __future__ import annotations

from typing import Awaitable, Callable, Sequence

from core.domain.models import LicenseSummary
from core.errors import LicenseNotFound, SelectionCancelled
from core.log import get_logger

logger = get_logger(__name__)

Picker = Callable[[Sequence[LicenseSummary]], Awaitable[LicenseSummary | None]]


def find_by_identifier(summaries: Sequence[LicenseSummary], identifier: str) -> LicenseSummary:
    for summary in summaries:
        if summary.license_id == identifier:
            return summary
    raise LicenseNotFound(identifier)


async def select_license(
    summaries: Sequence[LicenseSummary],
    identifier: str | None,
    *,
    picker: Picker,
) -> LicenseSummary:
    """Devuelve exactamente una licencia o lanza un error de `core.errors`."""

    if identifier is not None:
        chosen = find_by_identifier(summaries, identifier)
        logger.debug("Selected %s by identifier", chosen.license_id)
        return chosen

    picked = await picker(summaries)
    if picked is None:
        raise SelectionCancelled()
    logger.debug("Selected %s interactively", picked.license_id)
    return picked
