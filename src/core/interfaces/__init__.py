"""Interfaces/abstracciones del Core.

Define contratos (Protocol) que implementan adaptadores concretos.
"""

from core.interfaces.registry import LicenseSource

__all__ = ["LicenseSource"]
