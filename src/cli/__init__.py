"""CLI de consulta de licencias SPDX (Typer + Rich)."""

__version__ = "0.3.0"
