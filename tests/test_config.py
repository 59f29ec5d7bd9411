import textwrap

import pytest

from solid_examples.config import LATENCY_SCALE_ENV, ConfigError, load_config


# TRIVIAL: mirrors model defaults; kept for documentation.
def test_load_config_defaults_when_missing(tmp_path):
    config = load_config(tmp_path)

    assert config.path is None
    assert config.demo.principles == ["srp", "ocp", "lsp", "isp", "dip"]
    assert config.services.latency_scale == 1.0
    assert config.services.database == "mongo-db"
    assert config.registry.strict is False
    assert config.logging.level == "INFO"


def test_load_config_reads_fields(tmp_path):
    config_file = tmp_path / "solid-examples.toml"
    config_file.write_text(
        textwrap.dedent(
            """
            [demo]
            principles = ["dip", "srp"]

            [services]
            latency_scale = 0
            database = "postgres-db"
            payment = "stripe-payment"

            [registry]
            strict = true

            [logging]
            level = "debug"
            """
        ).strip()
    )

    config = load_config(tmp_path)

    assert config.path == config_file
    assert config.demo.principles == ["dip", "srp"]
    assert config.services.latency_scale == 0
    assert config.services.database == "postgres-db"
    assert config.services.email == "mock-email"
    assert config.services.payment == "stripe-payment"
    assert config.registry.strict is True
    assert config.logging.level == "DEBUG"


@pytest.mark.parametrize(
    "body",
    [
        '[demo]\nprinciples = ["xyz"]',
        "[services]\nlatency_scale = -1",
        '[services]\nunknown = "field"',
        '[logging]\nlevel = "LOUD"',
    ],
)
def test_load_config_rejects_invalid_values(tmp_path, body):
    (tmp_path / "solid-examples.toml").write_text(body)

    with pytest.raises(ConfigError, match="Invalid config"):
        load_config(tmp_path)


def test_load_config_rejects_malformed_toml(tmp_path):
    (tmp_path / "solid-examples.toml").write_text("[services\nlatency_scale = ")

    with pytest.raises(ConfigError, match="Invalid TOML"):
        load_config(tmp_path)


def test_env_overrides_latency_scale(tmp_path, monkeypatch):
    (tmp_path / "solid-examples.toml").write_text("[services]\nlatency_scale = 2.0")
    monkeypatch.setenv(LATENCY_SCALE_ENV, "0.25")

    config = load_config(tmp_path)

    assert config.services.latency_scale == 0.25


@pytest.mark.parametrize("raw", ["fast", "-0.5"])
def test_env_latency_scale_must_be_non_negative_number(tmp_path, monkeypatch, raw):
    monkeypatch.setenv(LATENCY_SCALE_ENV, raw)

    with pytest.raises(ConfigError, match=LATENCY_SCALE_ENV):
        load_config(tmp_path)
