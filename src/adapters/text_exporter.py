"""Exportación del texto de una licencia a fichero."""

from __future__ import annotations

from pathlib import Path

from core.domain.models import LicenseDetail
from core.errors import FileWriteError
from core.log import get_logger

logger = get_logger(__name__)


def export_license_text(*, detail: LicenseDetail, output_path: Path) -> Path | None:
    """Escribe `license_text` tal cual (bytes UTF-8, sin traducir saltos de línea).

    Devuelve `None` si la licencia no trae texto: no es un error fatal.
    """

    if detail.license_text is None:
        logger.info("No license text for %s; nothing written", detail.license_id)
        return None

    try:
        output_path.write_bytes(detail.license_text.encode("utf-8"))
    except OSError as exc:
        raise FileWriteError(output_path, exc) from exc

    logger.info("Wrote %s license text to %s", detail.license_id, output_path)
    return output_path
