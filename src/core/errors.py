"""Errores de la aplicación.

Todas las fases del pipeline (registro, selección, detalle, escritura) lanzan
subclases de `LicenseCliError`. Solo la CLI las traduce a mensajes y exit codes.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError


def describe_validation_error(exc: ValidationError) -> str:
    """Primer error de pydantic como `campo: mensaje`."""

    errors = exc.errors()
    if not errors:
        return str(exc)
    first = errors[0]
    loc = ".".join(str(part) for part in first.get("loc", ()))
    return f"{loc}: {first.get('msg')}" if loc else str(first.get("msg"))


class LicenseCliError(Exception):
    """Base de los errores terminales de una ejecución."""


class RequestFailed(LicenseCliError):
    """Fallo de transporte, status HTTP de error o cuerpo no decodificable."""

    def __init__(self, url: str, cause: object) -> None:
        self.url = url
        self.cause = cause
        super().__init__(f"HTTP request failed: {cause}")


class MalformedLicenseData(LicenseCliError):
    """El JSON recibido no tiene la forma esperada."""

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail
        message = "License data is missing or malformed"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class LicenseNotFound(LicenseCliError):
    def __init__(self, identifier: str) -> None:
        self.identifier = identifier
        super().__init__(f"License not found for SPDX identifier: {identifier}")


class SelectionCancelled(LicenseCliError):
    """El usuario cerró el selector interactivo sin elegir licencia."""

    def __init__(self) -> None:
        super().__init__("No license selected.")


class FileWriteError(LicenseCliError):
    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to write to file: {path}: {cause}")


class ConfigError(LicenseCliError):
    """Configuración inválida (variables `SPDX_LICENSE_*` o `.env`)."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Invalid configuration: {detail}")
