"""Contrato del origen de datos de licencias.

El pipeline depende de este Protocol, no del cliente HTTP concreto, de modo
que los tests pueden pasar un origen en memoria.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import LicenseDetail, LicenseSummary


@runtime_checkable
class LicenseSource(Protocol):
    """Contrato mínimo de un registro de licencias.

    Reglas:
    - Ambos métodos son asíncronos porque hacen I/O (HTTP).
    - Los errores se señalan con subclases de `core.errors.LicenseCliError`.
    """

    async def fetch_registry(self) -> list[LicenseSummary]:
        """Devuelve la lista completa de resúmenes del registro."""

        ...

    async def fetch_details(self, url: str) -> LicenseDetail:
        """Devuelve el detalle de la licencia publicado en `url`."""

        ...
