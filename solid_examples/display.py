"""Display handlers that render demo narration.

Demo classes narrate through ordinary loggers. The CLI attaches exactly one
of these handlers to the ``solid_examples`` logger to choose the output style.
"""
from __future__ import annotations

import json
import logging
import sys
from abc import ABC, abstractmethod
from typing import Any, Mapping, TextIO

# Pass as ``extra=HEADING`` to mark a record as a section heading.
HEADING: Mapping[str, Any] = {"heading": True}

ROOT_LOGGER = "solid_examples"


def principle_label(logger_name: str) -> str:
    """Return the short label shown for records from ``logger_name``."""
    from .principles import PRINCIPLES_BY_MODULE

    module = logger_name.rsplit(".", 1)[-1]
    principle = PRINCIPLES_BY_MODULE.get(module)
    return principle.code if principle else module


def is_heading(record: logging.LogRecord) -> bool:
    return bool(getattr(record, "heading", False))


class DisplayHandler(logging.Handler, ABC):
    """Interface for rendering narration records (plain text, JSON, Rich)."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.display_record(record)
        except Exception:
            self.handleError(record)

    @abstractmethod
    def display_record(self, record: logging.LogRecord) -> None:
        raise NotImplementedError


class HeadlessDisplayHandler(DisplayHandler):
    """Plain text renderer for non-interactive output."""

    def __init__(self, stream: TextIO | None = None):
        super().__init__()
        self.stream = stream or sys.stdout

    def _write(self, text: str) -> None:
        self.stream.write(text)
        self.stream.write("\n")
        self.stream.flush()

    def display_record(self, record: logging.LogRecord) -> None:
        message = record.getMessage()
        if is_heading(record):
            self._write(f"\n=== {message} ===")
            return
        label = principle_label(record.name)
        prefix = f"[{label}]"
        if record.levelno >= logging.WARNING:
            prefix = f"{prefix} {record.levelname}:"
        self._write(f"{prefix} {message}")
        if record.exc_info:
            self._write(logging.Formatter().formatException(record.exc_info))


class JsonDisplayHandler(DisplayHandler):
    """JSONL renderer for scripting and automation."""

    def __init__(self, stream: TextIO | None = None):
        super().__init__()
        self.stream = stream or sys.stdout

    def _write_record(self, record: Mapping[str, Any]) -> None:
        json.dump(record, self.stream, default=repr)
        self.stream.write("\n")
        self.stream.flush()

    def display_record(self, record: logging.LogRecord) -> None:
        payload: dict[str, Any] = {
            "kind": "heading" if is_heading(record) else "message",
            "principle": principle_label(record.name),
            "level": record.levelname.lower(),
            "message": record.getMessage(),
        }
        if record.exc_info and record.exc_info[1] is not None:
            payload["error"] = repr(record.exc_info[1])
        self._write_record(payload)


class RichDisplayHandler(DisplayHandler):
    """Rich-formatted renderer for terminals."""

    _LEVEL_STYLES = {
        logging.DEBUG: "dim",
        logging.WARNING: "yellow",
        logging.ERROR: "bold red",
        logging.CRITICAL: "bold red",
    }

    def __init__(self, stream: TextIO | None = None, force_terminal: bool | None = None):
        from rich.console import Console

        super().__init__()
        self.stream = stream or sys.stdout
        self.console = Console(file=self.stream, force_terminal=force_terminal, highlight=False)

    def display_record(self, record: logging.LogRecord) -> None:
        message = record.getMessage()
        if is_heading(record):
            self.console.rule(f"[bold]{message}[/bold]")
            return
        label = principle_label(record.name)
        style = self._LEVEL_STYLES.get(record.levelno)
        self.console.print(f"[cyan]\\[{label}][/cyan] ", end="")
        self.console.print(message, style=style, markup=False)
        if record.exc_info:
            self.console.print(
                logging.Formatter().formatException(record.exc_info),
                style="red",
                markup=False,
            )
