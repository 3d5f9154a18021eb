"""Wrapper de httpx con caché HTTP opcional.

Estandariza timeouts, headers y redirects para las dos peticiones de la
aplicación. La caché (hishel) es un detalle del transporte: el resto del
código recibe un `httpx.AsyncClient` y no sabe si las respuestas salen del
disco o de la red.
"""

from __future__ import annotations

import hishel
import httpx

from core.config import AppSettings
from core.log import get_logger

logger = get_logger(__name__)


def build_async_client(
    settings: AppSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea el cliente HTTP de la aplicación.

    - `cache_enabled=True`: `hishel.AsyncCacheClient` con almacenamiento en
      `settings.resolved_cache_dir()`.
    - `cache_enabled=False`, o directorio de caché no creable: `httpx.AsyncClient`
      sin caché.

    `transport` permite inyectar un stub (p.ej. `httpx.MockTransport`) en tests.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    kwargs: dict[str, object] = {
        "timeout": httpx.Timeout(settings.http_timeout_seconds),
        "follow_redirects": True,
        "headers": headers,
    }
    if transport is not None:
        kwargs["transport"] = transport

    if not settings.cache_enabled:
        logger.debug("HTTP cache disabled")
        return httpx.AsyncClient(**kwargs)

    cache_dir = settings.resolved_cache_dir()
    try:
        cache_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        logger.warning("HTTP cache unavailable at %s (%s); continuing without cache", cache_dir, exc)
        return httpx.AsyncClient(**kwargs)
    logger.debug("HTTP cache at %s", cache_dir)
    storage = hishel.AsyncFileStorage(base_path=cache_dir)
    return hishel.AsyncCacheClient(storage=storage, **kwargs)


def is_cached_response(response: httpx.Response) -> bool:
    """True si hishel sirvió la respuesta desde la caché."""

    return bool(response.extensions.get("from_cache", False))
