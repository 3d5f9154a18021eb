"""Cliente del registro SPDX.

Dos peticiones GET:
- `licenses.json` -> lista de `LicenseSummary`
- `detailsUrl` de una licencia -> `LicenseDetail`

Toda la validación del JSON ocurre aquí; hacia arriba solo salen modelos
tipados o errores de `core.errors`.
"""

from __future__ import annotations

import json
from typing import Any

import httpx
from pydantic import BaseModel, ValidationError

from adapters.http_client import is_cached_response
from core.config import AppSettings
from core.domain.models import LicenseDetail, LicenseRegistry, LicenseSummary
from core.errors import MalformedLicenseData, RequestFailed, describe_validation_error
from core.interfaces.registry import LicenseSource
from core.log import get_logger

logger = get_logger(__name__)


def _validate(model: type[BaseModel], payload: Any) -> Any:
    if not isinstance(payload, dict):
        raise MalformedLicenseData(f"expected a JSON object, got {type(payload).__name__}")
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise MalformedLicenseData(describe_validation_error(exc)) from exc


class LicenseRegistryClient(LicenseSource):
    """Implementación HTTP de `LicenseSource`.

    El `httpx.AsyncClient` se inyecta (ver `adapters.http_client`); esta clase
    no lo crea ni lo cierra.
    """

    def __init__(self, client: httpx.AsyncClient, settings: AppSettings | None = None) -> None:
        self._client = client
        self._settings = settings or AppSettings()

    @property
    def registry_url(self) -> str:
        return self._settings.registry_url

    async def _get_json(self, url: str) -> Any:
        logger.debug("GET %s", url)
        try:
            resp = await self._client.get(url)
            resp.raise_for_status()
        except httpx.HTTPError as exc:
            raise RequestFailed(url, exc) from exc

        logger.debug(
            "HTTP %s %s%s",
            resp.status_code,
            url,
            " (cache)" if is_cached_response(resp) else "",
        )
        try:
            return resp.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise RequestFailed(url, f"error decoding response body: {exc}") from exc

    async def fetch_registry_document(self) -> LicenseRegistry:
        payload = await self._get_json(self.registry_url)
        registry: LicenseRegistry = _validate(LicenseRegistry, payload)
        logger.info(
            "Registry loaded: %d licenses (list version %s)",
            len(registry.licenses),
            registry.license_list_version or "unknown",
        )
        return registry

    async def fetch_registry(self) -> list[LicenseSummary]:
        registry = await self.fetch_registry_document()
        return list(registry.licenses)

    async def fetch_details(self, url: str) -> LicenseDetail:
        payload = await self._get_json(url)
        return _validate(LicenseDetail, payload)
