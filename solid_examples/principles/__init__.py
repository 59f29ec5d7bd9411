"""SOLID principle demos.

Each module contrasts a principle-violating design with one that follows the
principle and exposes a ``demonstrate_*`` entry point. PRINCIPLES lists them
in canonical order.
"""
from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .dependency_inversion import demonstrate_dip
from .interface_segregation import demonstrate_isp
from .liskov_substitution import demonstrate_lsp
from .open_closed import demonstrate_ocp
from .single_responsibility import demonstrate_srp

if TYPE_CHECKING:
    from ..config import SolidExamplesConfig
    from ..registry import ServiceRegistry

DemoOptions = Callable[["SolidExamplesConfig", "ServiceRegistry"], dict[str, Any]]


def _no_options(config: "SolidExamplesConfig", registry: "ServiceRegistry") -> dict[str, Any]:
    return {}


class UnknownPrincipleError(ValueError):
    def __init__(self, name: str) -> None:
        self.name = name
        choices = ", ".join(p.code for p in PRINCIPLES)
        super().__init__(f"Unknown principle '{name}'. Choose from: {choices}")


@dataclass(frozen=True, slots=True)
class Principle:
    """A principle demo and how to derive its keyword arguments from config."""

    code: str
    slug: str
    title: str
    module: str
    demo: Callable[..., Any]
    options: DemoOptions = field(default=_no_options)

    def matches(self, name: str) -> bool:
        normalized = name.strip().lower().replace("_", "-")
        return normalized in (self.code, self.slug)


PRINCIPLES: tuple[Principle, ...] = (
    Principle(
        code="srp",
        slug="single-responsibility",
        title="Single Responsibility Principle",
        module="single_responsibility",
        demo=demonstrate_srp,
    ),
    Principle(
        code="ocp",
        slug="open-closed",
        title="Open-Closed Principle",
        module="open_closed",
        demo=demonstrate_ocp,
    ),
    Principle(
        code="lsp",
        slug="liskov-substitution",
        title="Liskov Substitution Principle",
        module="liskov_substitution",
        demo=demonstrate_lsp,
    ),
    Principle(
        code="isp",
        slug="interface-segregation",
        title="Interface Segregation Principle",
        module="interface_segregation",
        demo=demonstrate_isp,
        options=lambda config, registry: {"step_delay": config.services.latency_scale},
    ),
    Principle(
        code="dip",
        slug="dependency-inversion",
        title="Dependency Inversion Principle",
        module="dependency_inversion",
        demo=demonstrate_dip,
        options=lambda config, registry: {
            "registry": registry,
            "database": config.services.database,
            "email": config.services.email,
            "payment": config.services.payment,
        },
    ),
)

PRINCIPLES_BY_MODULE: dict[str, Principle] = {p.module: p for p in PRINCIPLES}


def resolve_principle(name: str) -> Principle:
    """Look up a principle by short code or slug.

    Raises:
        UnknownPrincipleError: If ``name`` matches nothing
    """
    for principle in PRINCIPLES:
        if principle.matches(name):
            return principle
    raise UnknownPrincipleError(name)


__all__ = [
    "PRINCIPLES",
    "PRINCIPLES_BY_MODULE",
    "Principle",
    "UnknownPrincipleError",
    "resolve_principle",
    "demonstrate_srp",
    "demonstrate_ocp",
    "demonstrate_lsp",
    "demonstrate_isp",
    "demonstrate_dip",
]
