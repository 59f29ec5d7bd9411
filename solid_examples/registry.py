"""Minimal service registry for capability implementations.

The ServiceRegistry is a name->instance table that:
- Binds capability implementations (a database, an email sender, ...) to keys
- Replaces existing bindings on re-registration (last write wins)
- Raises ServiceNotFoundError for unknown keys instead of returning a default

Prefer passing collaborators through constructors. The registry is for the
places where an implementation is picked by name at runtime.
"""
from __future__ import annotations

import logging
import threading
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ServiceRegistryError(Exception):
    """Base class for registry errors."""


class ServiceNotFoundError(ServiceRegistryError, LookupError):
    """No service is registered under the requested key."""

    def __init__(self, key: str, available: list[str] | None = None) -> None:
        self.key = key
        self.available = available or []
        super().__init__(f"Service '{key}' not found. Registered: {self.available}")


class ServiceTypeError(ServiceRegistryError, TypeError):
    """A registered service does not satisfy the type the caller asked for."""

    def __init__(self, key: str, expected: type, actual: type) -> None:
        self.key = key
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Service '{key}' is {actual.__name__}, expected {expected.__name__}"
        )


class DuplicateServiceError(ServiceRegistryError, ValueError):
    """Strict registry refused to replace an existing binding."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Service '{key}' is already registered")


class ServiceRegistry:
    """Thread-safe name-based registry of service instances.

    Instances are stored by reference; the registry never copies or cleans
    them up. With ``strict=True`` a second registration under the same key
    raises DuplicateServiceError instead of replacing the first.
    """

    def __init__(self, *, strict: bool = False) -> None:
        self.strict = strict
        self._lock = threading.Lock()
        self._services: dict[str, Any] = {}

    def register(self, key: str, instance: Any) -> None:
        """Bind ``instance`` to ``key``, replacing any earlier binding.

        Raises:
            DuplicateServiceError: If the registry is strict and ``key`` is taken
        """
        with self._lock:
            if key in self._services:
                if self.strict:
                    raise DuplicateServiceError(key)
                logger.debug("Replacing service %r (%s)", key, type(instance).__name__)
            else:
                logger.debug("Registered service %r (%s)", key, type(instance).__name__)
            self._services[key] = instance

    def get(self, key: str) -> Any:
        """Return the instance registered under ``key``.

        Raises:
            ServiceNotFoundError: If nothing is registered under ``key``
        """
        with self._lock:
            try:
                return self._services[key]
            except KeyError:
                available = sorted(self._services)
        raise ServiceNotFoundError(key, available)

    def get_typed(self, key: str, expected_type: type[T]) -> T:
        """Return the instance under ``key`` after checking it is an ``expected_type``.

        ``expected_type`` may be a class or a runtime_checkable Protocol.

        Raises:
            ServiceNotFoundError: If nothing is registered under ``key``
            ServiceTypeError: If the instance is not an ``expected_type``
            ServiceRegistryError: If ``expected_type`` cannot be used with
                isinstance, e.g. a Protocol without @runtime_checkable
        """
        instance = self.get(key)
        try:
            matches = isinstance(instance, expected_type)
        except TypeError as exc:
            raise ServiceRegistryError(
                f"Cannot check service '{key}' against {expected_type.__name__}: {exc}"
            ) from exc
        if not matches:
            raise ServiceTypeError(key, expected_type, type(instance))
        return instance

    def names(self) -> list[str]:
        """Return sorted registered keys."""
        with self._lock:
            return sorted(self._services)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._services

    def __len__(self) -> int:
        with self._lock:
            return len(self._services)
