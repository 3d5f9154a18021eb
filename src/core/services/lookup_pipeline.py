"""Orquestación de la consulta de una licencia.

Registro -> selección -> detalle, estrictamente secuencial. Cualquier error
aborta la ejecución; no hay reintentos. La presentación (terminal, ficheros)
queda fuera: la CLI recibe un `LookupResult` y decide cómo mostrarlo.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from core.domain.models import LicenseDetail, LicenseSummary
from core.interfaces.registry import LicenseSource
from core.log import get_logger
from core.services.selector import Picker, select_license

logger = get_logger(__name__)


@dataclass
class LookupRequest:
    """Parámetros de una consulta."""

    identifier: str | None = None


@dataclass
class PipelineHooks:
    """Callbacks opcionales para la capa de UI."""

    fetching_details: Callable[[LicenseSummary], None] | None = None


@dataclass
class LookupResult:
    summary: LicenseSummary
    detail: LicenseDetail


async def run_lookup(
    request: LookupRequest,
    *,
    source: LicenseSource,
    picker: Picker,
    hooks: PipelineHooks | None = None,
) -> LookupResult:
    hooks = hooks or PipelineHooks()

    summaries = await source.fetch_registry()
    summary = await select_license(summaries, request.identifier, picker=picker)

    if hooks.fetching_details:
        hooks.fetching_details(summary)
    logger.info("Fetching details for %s", summary.license_id)
    detail = await source.fetch_details(summary.details_url)

    return LookupResult(summary=summary, detail=detail)
