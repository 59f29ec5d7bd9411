"""Shared test fixtures for the solid-examples test suite."""
import logging

import pytest

from solid_examples.config import LATENCY_SCALE_ENV
from solid_examples.registry import ServiceRegistry


@pytest.fixture(autouse=True)
def _no_latency_env(monkeypatch):
    """Keep a developer's SOLID_EXAMPLES_LATENCY_SCALE from leaking into tests."""
    monkeypatch.delenv(LATENCY_SCALE_ENV, raising=False)


@pytest.fixture
def registry():
    """A fresh, non-strict registry per test."""
    return ServiceRegistry()


@pytest.fixture
def narration(caplog):
    """caplog capturing INFO narration from every solid_examples logger."""
    caplog.set_level(logging.INFO, logger="solid_examples")
    return caplog


@pytest.fixture
def anyio_backend():
    """The package is built on asyncio; run anyio-marked tests on that backend."""
    return "asyncio"
