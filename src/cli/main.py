"""Comando principal: consulta de una licencia SPDX.

Flujo:
- descarga `licenses.json` (caché HTTP opcional)
- selecciona la licencia (identificador exacto o selector fuzzy)
- descarga el detalle, lo muestra y opcionalmente escribe el texto a fichero

Los errores de `core.errors` se muestran en stderr y terminan con exit code 1.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.text import Text

from adapters.http_client import build_async_client
from adapters.registry_client import LicenseRegistryClient
from adapters.text_exporter import export_license_text
from cli import __version__
from cli.picker import FuzzyPicker
from cli.ui_components import build_registry_table, render_license
from core.config import AppSettings
from core.domain.models import LicenseSummary
from core.errors import ConfigError, LicenseCliError, describe_validation_error
from core.log import configure_logging, get_logger
from core.services.lookup_pipeline import LookupRequest, PipelineHooks, run_lookup

app = typer.Typer(
    add_completion=False,
    help="Look up an open-source license by SPDX identifier and print a summary.",
)

_console = Console()
_err_console = Console(stderr=True)

logger = get_logger(__name__)


def _version_callback(value: bool) -> None:
    if value:
        _console.print(f"spdx-license {__version__}")
        raise typer.Exit()


def _load_settings(*, no_cache: bool) -> AppSettings:
    try:
        settings = AppSettings()
    except ValidationError as exc:
        raise ConfigError(describe_validation_error(exc)) from exc
    if no_cache:
        settings = settings.model_copy(update={"cache_enabled": False})
    return settings


def _announce_fetch(summary: LicenseSummary) -> None:
    _console.print("Fetching license details...", style="yellow")


async def _list_registry(settings: AppSettings) -> None:
    async with build_async_client(settings) as client:
        source = LicenseRegistryClient(client, settings)
        registry = await source.fetch_registry_document()
    _console.print(build_registry_table(registry.licenses, version=registry.license_list_version))


async def _lookup(
    settings: AppSettings,
    *,
    identifier: str | None,
    output: Path | None,
    full_text: bool,
) -> None:
    async with build_async_client(settings) as client:
        source = LicenseRegistryClient(client, settings)
        result = await run_lookup(
            LookupRequest(identifier=identifier),
            source=source,
            picker=FuzzyPicker(queue_size=settings.picker_queue_size),
            hooks=PipelineHooks(fetching_details=_announce_fetch),
        )

    # Sin reflow: el texto de la licencia sale tal cual.
    _console.print(
        render_license(result.detail, full_text=full_text, preview_chars=settings.preview_chars),
        soft_wrap=True,
    )

    if output is None:
        return
    written = export_license_text(detail=result.detail, output_path=output)
    if written is None:
        _console.print("License text not available for writing to file", style="red")
    else:
        _console.print(
            Text.assemble("\n", ("License text written to:", "green"), " ", str(written))
        )


@app.command()
def lookup(
    spdx_identifier: str | None = typer.Argument(
        None,
        help="The SPDX identifier of the license (e.g. MIT). Omit it to pick interactively.",
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        metavar="FILE",
        help="Write the full license text to FILE.",
    ),
    full_text: bool = typer.Option(
        False,
        "--full-text",
        "-f",
        help="Print the full license text instead of a preview.",
    ),
    list_licenses: bool = typer.Option(
        False,
        "--list",
        "-l",
        help="Print every license in the registry and exit.",
    ),
    no_cache: bool = typer.Option(
        False,
        "--no-cache",
        help="Bypass the on-disk HTTP cache for this run.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging on stderr.",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Look up a license and print its summary."""

    try:
        settings = _load_settings(no_cache=no_cache)
        configure_logging(level="DEBUG" if verbose else settings.log_level)
        if list_licenses:
            asyncio.run(_list_registry(settings))
        else:
            asyncio.run(
                _lookup(
                    settings,
                    identifier=spdx_identifier,
                    output=output,
                    full_text=full_text,
                )
            )
    except LicenseCliError as exc:
        logger.debug("Run aborted: %r", exc)
        _err_console.print(Text(f"Error: {exc}", style="red"), soft_wrap=True)
        raise typer.Exit(code=1) from exc


def run() -> None:
    app()


if __name__ == "__main__":
    run()
