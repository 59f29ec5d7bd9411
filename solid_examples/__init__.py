"""solid-examples: SOLID design principles in runnable Python.

Main entry points:
- solid-examples CLI: Run the principle demos
- ServiceRegistry: Name-based lookup for capability implementations
- principles package: One module per principle, bad and good designs side by side
"""
from __future__ import annotations

from .registry import (
    DuplicateServiceError,
    ServiceNotFoundError,
    ServiceRegistry,
    ServiceRegistryError,
    ServiceTypeError,
)

__all__ = [
    "DuplicateServiceError",
    "ServiceNotFoundError",
    "ServiceRegistry",
    "ServiceRegistryError",
    "ServiceTypeError",
]
