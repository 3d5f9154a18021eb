"""Componentes de UI para la CLI (Rich).

Funciones puras: reciben modelos del dominio y devuelven renderables de Rich.
Ninguna imprime; `cli.main` decide la consola de destino.
"""

from __future__ import annotations

from typing import Sequence

from rich.table import Table
from rich.text import Text

from core.domain.models import LicenseDetail, LicenseSummary

TRUNCATION_MARKER = "..."


def _yes_no(value: bool, *, yes_is_good: bool = True) -> Text:
    good, bad = "green", "red"
    if not yes_is_good:
        good, bad = bad, good
    return Text("Yes", style=good) if value else Text("No", style=bad)


def _field(out: Text, label: str, value: Text | str) -> None:
    out.append(label, style="bold cyan")
    out.append(": ")
    if isinstance(value, Text):
        out.append_text(value)
    else:
        out.append(value, style="white")
    out.append("\n")


def render_license(
    detail: LicenseDetail,
    *,
    full_text: bool = False,
    preview_chars: int = 200,
) -> Text:
    """Resumen legible de una licencia.

    - `full_text=True`: texto completo.
    - `full_text=False`: como mucho `preview_chars` caracteres seguidos de `...`.
    - Sin `license_text`: aviso "License text not available".
    """

    out = Text()
    out.append("\n")
    out.append("License Preview:\n", style="bold green")
    out.append("----------------\n", style="green")

    _field(out, "Name", detail.name)
    _field(out, "SPDX ID", detail.license_id)
    _field(out, "Is OSI Approved", _yes_no(detail.is_osi_approved))
    if detail.is_deprecated_license_id is not None:
        _field(out, "Deprecated", _yes_no(detail.is_deprecated_license_id, yes_is_good=False))

    if detail.see_also:
        out.append("See Also:\n", style="bold cyan")
        for url in detail.see_also:
            out.append("  - ")
            out.append(url, style="underline blue")
            out.append("\n")

    text = detail.license_text
    if text is None:
        out.append("License text not available\n", style="red")
        return out

    out.append("\n")
    if full_text:
        out.append("Full License Text\n", style="bold green")
        out.append(text)
        out.append("\n")
    else:
        out.append(f"License Text Preview (first {preview_chars} chars)\n", style="bold cyan")
        out.append(text[:preview_chars], style="italic")
        out.append("\n")
        out.append(TRUNCATION_MARKER, style="bright_black")
        out.append("\n")
    return out


def build_registry_table(summaries: Sequence[LicenseSummary], *, version: str | None = None) -> Table:
    """Tabla con el registro completo (flag `--list`)."""

    title = f"SPDX Licenses ({len(summaries)})"
    if version:
        title = f"{title} - list version {version}"
    table = Table(title=title)
    table.add_column("SPDX ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("OSI", no_wrap=True)
    table.add_column("Deprecated", no_wrap=True)
    for summary in summaries:
        table.add_row(
            summary.license_id,
            summary.name,
            _yes_no(summary.is_osi_approved),
            _yes_no(summary.is_deprecated_license_id, yes_is_good=False),
        )
    return table
