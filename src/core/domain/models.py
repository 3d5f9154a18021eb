"""Modelos del dominio (Pydantic v2).

Los payloads del registro SPDX llegan en camelCase; los modelos los mapean con
alias y se validan una sola vez en el borde (adaptador HTTP). El resto del
código trabaja con atributos tipados, nunca con el JSON crudo.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class LicenseSummary(BaseModel):
    """Entrada de la lista `licenses` de `licenses.json`."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    license_id: str = Field(
        ...,
        alias="licenseId",
        min_length=1,
        description="Identificador SPDX canónico (p.ej. 'MIT').",
    )
    name: str = Field(
        ...,
        description="Nombre completo de la licencia.",
    )
    details_url: str = Field(
        ...,
        alias="detailsUrl",
        min_length=1,
        description="URL del JSON con el detalle de la licencia.",
    )
    is_osi_approved: bool = Field(
        default=False,
        alias="isOsiApproved",
        description="Aprobada por la Open Source Initiative.",
    )
    is_deprecated_license_id: bool = Field(
        default=False,
        alias="isDeprecatedLicenseId",
        description="El identificador está obsoleto en la lista SPDX.",
    )

    @property
    def label(self) -> str:
        """Etiqueta mostrada en el selector interactivo."""

        return f"{self.license_id} - {self.name}"


class LicenseRegistry(BaseModel):
    """Documento raíz del registro (`licenses.json`)."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    licenses: list[LicenseSummary] = Field(
        ...,
        description="Resumen de todas las licencias conocidas.",
    )
    license_list_version: str | None = Field(
        default=None,
        alias="licenseListVersion",
    )
    release_date: str | None = Field(
        default=None,
        alias="releaseDate",
    )


class LicenseDetail(BaseModel):
    """Detalle completo de una licencia (JSON apuntado por `detailsUrl`)."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    name: str = Field(..., description="Nombre completo de la licencia.")
    license_id: str = Field(..., alias="licenseId", min_length=1)
    is_osi_approved: bool = Field(default=False, alias="isOsiApproved")
    is_deprecated_license_id: bool | None = Field(
        default=None,
        alias="isDeprecatedLicenseId",
        description="None si el registro no informa el flag.",
    )
    see_also: list[str] = Field(
        default_factory=list,
        alias="seeAlso",
        description="Enlaces relacionados, en el orden del registro.",
    )
    license_text: str | None = Field(
        default=None,
        alias="licenseText",
        description="Texto completo de la licencia, si el registro lo incluye.",
    )
