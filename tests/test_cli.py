import json
import logging

import pytest

from solid_examples import cli
from solid_examples.cli import main
from solid_examples.registry import ServiceNotFoundError


def _json_lines(text: str) -> list[dict]:
    return [json.loads(line) for line in text.splitlines() if line.strip()]


def test_list_prints_every_principle(capsys):
    assert main(["--list"]) == 0

    out = capsys.readouterr().out
    for code in ("srp", "ocp", "lsp", "isp", "dip"):
        assert code in out
    assert "Liskov Substitution Principle" in out


def test_runs_selected_principle_as_json(capsys, tmp_path):
    exit_code = main(["ocp", "--json", "--config", str(tmp_path)])

    assert exit_code == 0
    records = _json_lines(capsys.readouterr().out)
    assert records[0] == {
        "kind": "heading",
        "principle": "ocp",
        "level": "info",
        "message": "Open-Closed Principle",
    }
    messages = [r["message"] for r in records]
    assert "Total Area: 75.76" in messages
    assert "20% Discount: $80.00 (20.00% savings)" in messages
    assert {r["principle"] for r in records} == {"ocp"}


def test_long_names_resolve(capsys, tmp_path):
    exit_code = main(["liskov-substitution", "--headless", "--config", str(tmp_path)])

    assert exit_code == 0
    out = capsys.readouterr().out
    assert "=== Liskov Substitution Principle ===" in out
    assert "[lsp] Ostrich running very fast on the ground" in out


def test_dip_uses_selected_registry_keys(capsys, tmp_path):
    exit_code = main(
        [
            "dip",
            "--json",
            "--latency-scale", "0",
            "--database", "postgres-db",
            "--payment", "stripe-payment",
            "--config", str(tmp_path),
        ]
    )

    assert exit_code == 0
    messages = [r["message"] for r in _json_lines(capsys.readouterr().out)]
    assert "Processing $49.98 USD payment via Stripe" in messages
    assert "Payment processed: True" in messages
    assert any(m.startswith("Saving to PostgreSQL table orders") for m in messages)


def test_unknown_registry_key_reports_error(capsys, tmp_path):
    exit_code = main(["dip", "--headless", "--latency-scale", "0", "--database", "oracle-db", "--config", str(tmp_path)])

    assert exit_code == 1
    err = capsys.readouterr().err
    assert "Service 'oracle-db' not found" in err


def test_registry_key_of_wrong_capability_reports_error(capsys, tmp_path):
    exit_code = main(["dip", "--headless", "--latency-scale", "0", "--database", "mock-email", "--config", str(tmp_path)])

    assert exit_code == 1
    assert "expected Database" in capsys.readouterr().err


def test_unknown_principle_reports_error(capsys, tmp_path):
    assert main(["yagni", "--config", str(tmp_path)]) == 1
    assert "Unknown principle 'yagni'" in capsys.readouterr().err


def test_config_selects_default_principles(capsys, tmp_path):
    (tmp_path / "solid-examples.toml").write_text('[demo]\nprinciples = ["srp"]\n')

    assert main(["--json", "--config", str(tmp_path)]) == 0

    principles = {r["principle"] for r in _json_lines(capsys.readouterr().out)}
    assert principles == {"srp"}


def test_invalid_config_reports_error(capsys, tmp_path):
    (tmp_path / "solid-examples.toml").write_text("[services]\nlatency_scale = -3\n")

    assert main(["srp", "--config", str(tmp_path)]) == 1
    assert "Invalid config" in capsys.readouterr().err


def test_verbose_shows_registry_activity(capsys, tmp_path):
    exit_code = main(["dip", "--json", "-v", "--latency-scale", "0", "--config", str(tmp_path)])

    assert exit_code == 0
    records = _json_lines(capsys.readouterr().out)
    assert any(r["level"] == "debug" and "Registered service 'mock-payment'" in r["message"] for r in records)


def test_main_restores_logger_state(tmp_path):
    root = logging.getLogger("solid_examples")
    handlers_before = list(root.handlers)

    main(["ocp", "--headless", "--config", str(tmp_path)])

    assert root.handlers == handlers_before
    assert root.propagate is True


def test_list_as_json_prints_one_object_per_line(capsys):
    assert main(["--list", "--json"]) == 0

    records = _json_lines(capsys.readouterr().out)
    assert [r["code"] for r in records] == ["srp", "ocp", "lsp", "isp", "dip"]
    assert records[3] == {
        "code": "isp",
        "slug": "interface-segregation",
        "title": "Interface Segregation Principle",
    }


def test_debug_reraises_known_errors(tmp_path):
    with pytest.raises(ServiceNotFoundError) as exc_info:
        main(["dip", "--headless", "--debug", "--latency-scale", "0", "--database", "oracle-db", "--config", str(tmp_path)])

    assert exc_info.value.key == "oracle-db"


def test_keyboard_interrupt_exits_130(capsys, monkeypatch, tmp_path):
    def interrupted(*args, **kwargs):
        raise KeyboardInterrupt

    monkeypatch.setattr(cli, "run_principles", interrupted)

    assert main(["srp", "--headless", "--config", str(tmp_path)]) == 130
    assert "Interrupted" in capsys.readouterr().err
