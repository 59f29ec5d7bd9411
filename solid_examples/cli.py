"""Run SOLID principle demos from the command line.

Usage:
    solid-examples                     # every principle in config order
    solid-examples srp lsp             # selected principles
    solid-examples dip --database postgres-db --payment stripe-payment
    solid-examples --list

Output styles:
    default     - Rich formatting
    --headless  - plain text
    --json      - one JSON object per line
"""
from __future__ import annotations

import argparse
import asyncio
import inspect
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape

from .config import ConfigError, SolidExamplesConfig, load_config
from .display import (
    ROOT_LOGGER,
    DisplayHandler,
    HeadlessDisplayHandler,
    JsonDisplayHandler,
    RichDisplayHandler,
)
from .principles import PRINCIPLES, Principle, UnknownPrincipleError, resolve_principle
from .principles.dependency_inversion import build_registry
from .registry import ServiceRegistry, ServiceRegistryError

logger = logging.getLogger(__name__)


def _non_negative_float(raw: str) -> float:
    try:
        value = float(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected a number, got {raw!r}") from exc
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {value}")
    return value


def _parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="solid-examples",
        description="Walk through SOLID design principle examples",
    )
    parser.add_argument(
        "principles",
        nargs="*",
        metavar="PRINCIPLE",
        help="Principles to demonstrate (srp, ocp, lsp, isp, dip or their long names). "
             "Defaults to the configured list.",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        default=False,
        help="List available principles and exit",
    )
    output = parser.add_mutually_exclusive_group()
    output.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Emit machine-readable JSON lines",
    )
    output.add_argument(
        "--headless",
        action="store_true",
        default=False,
        help="Plain text output (no colors)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        default=False,
        help="Show debug records, including registry activity",
    )
    parser.add_argument(
        "--config",
        dest="config_dir",
        type=Path,
        default=None,
        help="Directory containing solid-examples.toml (default: current directory)",
    )
    parser.add_argument(
        "--latency-scale",
        type=_non_negative_float,
        default=None,
        help="Multiplier for simulated service latency (0 disables waiting)",
    )
    parser.add_argument(
        "--database",
        default=None,
        help="Registry key of the database used by the full application demo",
    )
    parser.add_argument(
        "--email",
        default=None,
        help="Registry key of the email service used by the full application demo",
    )
    parser.add_argument(
        "--payment",
        default=None,
        help="Registry key of the payment processor used by the full application demo",
    )
    parser.add_argument(
        "--strict-registry",
        action="store_true",
        default=False,
        help="Reject duplicate service registrations instead of replacing them",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Show full stack traces on errors",
    )
    return parser.parse_args(argv)


def _apply_cli_overrides(config: SolidExamplesConfig, args: argparse.Namespace) -> SolidExamplesConfig:
    services = {
        key: value
        for key, value in (
            ("latency_scale", args.latency_scale),
            ("database", args.database),
            ("email", args.email),
            ("payment", args.payment),
        )
        if value is not None
    }
    updates: dict[str, object] = {}
    if services:
        updates["services"] = config.services.model_copy(update=services)
    if args.strict_registry:
        updates["registry"] = config.registry.model_copy(update={"strict": True})
    return config.model_copy(update=updates) if updates else config


def _make_display_handler(args: argparse.Namespace) -> DisplayHandler:
    if args.json:
        return JsonDisplayHandler()
    if args.headless:
        return HeadlessDisplayHandler()
    return RichDisplayHandler()


def _print_principles(console: Console, as_json: bool) -> None:
    for principle in PRINCIPLES:
        if as_json:
            line = json.dumps({"code": principle.code, "slug": principle.slug, "title": principle.title})
            console.print(line, markup=False, highlight=False, soft_wrap=True)
        else:
            console.print(f"[bold]{principle.code}[/bold]  {principle.slug:<24} {principle.title}")


async def run_principles(
    principles: Sequence[Principle],
    config: SolidExamplesConfig,
    registry: ServiceRegistry,
) -> None:
    """Run each demo in order, awaiting the ones that are coroutines."""
    for principle in principles:
        logger.debug("Running %s demo", principle.code)
        result = principle.demo(**principle.options(config, registry))
        if inspect.isawaitable(result):
            await result


def main(argv: Optional[list[str]] = None) -> int:
    args = _parse_args(argv)
    console = Console(highlight=False)
    err_console = Console(stderr=True, highlight=False)

    if args.list:
        _print_principles(console, args.json)
        return 0

    root_logger = logging.getLogger(ROOT_LOGGER)
    handler = _make_display_handler(args)
    root_logger.addHandler(handler)
    previous_level = root_logger.level
    previous_propagate = root_logger.propagate
    root_logger.propagate = False

    try:
        config = _apply_cli_overrides(load_config(args.config_dir or Path.cwd()), args)
        root_logger.setLevel(logging.DEBUG if args.verbose else config.logging.level)

        names = args.principles or config.demo.principles
        principles = [resolve_principle(name) for name in names]
        registry = build_registry(config.services.latency_scale, strict=config.registry.strict)

        asyncio.run(run_principles(principles, config, registry))
        return 0
    except (ConfigError, UnknownPrincipleError, ServiceRegistryError) as exc:
        if args.debug:
            raise
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        return 1
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Interrupted[/yellow]")
        return 130
    finally:
        root_logger.removeHandler(handler)
        root_logger.setLevel(previous_level)
        root_logger.propagate = previous_propagate


if __name__ == "__main__":
    sys.exit(main())
