import pytest

from solid_examples.config import SolidExamplesConfig
from solid_examples.principles import (
    PRINCIPLES,
    PRINCIPLES_BY_MODULE,
    UnknownPrincipleError,
    resolve_principle,
)
from solid_examples.principles.dependency_inversion import build_registry


def test_principles_in_canonical_order():
    assert [p.code for p in PRINCIPLES] == ["srp", "ocp", "lsp", "isp", "dip"]
    assert PRINCIPLES_BY_MODULE["open_closed"].code == "ocp"


@pytest.mark.parametrize(
    ("name", "code"),
    [
        ("srp", "srp"),
        ("OCP", "ocp"),
        ("liskov-substitution", "lsp"),
        ("interface_segregation", "isp"),
        (" Dependency-Inversion ", "dip"),
    ],
)
def test_resolve_principle(name, code):
    assert resolve_principle(name).code == code


def test_resolve_unknown_principle_lists_choices():
    with pytest.raises(UnknownPrincipleError, match="Choose from: srp, ocp, lsp, isp, dip"):
        resolve_principle("kiss")


def test_options_come_from_config():
    config = SolidExamplesConfig()
    config = config.model_copy(
        update={"services": config.services.model_copy(update={"latency_scale": 0.0, "payment": "paypal-payment"})}
    )
    registry = build_registry(latency_scale=0)

    assert resolve_principle("isp").options(config, registry) == {"step_delay": 0.0}
    assert resolve_principle("dip").options(config, registry) == {
        "registry": registry,
        "database": "mongo-db",
        "email": "mock-email",
        "payment": "paypal-payment",
    }
    assert resolve_principle("srp").options(config, registry) == {}
