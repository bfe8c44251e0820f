"""Colored pipeline logger — ANSI-colored console logging for salary ingestion.

Provides a PipelineLogger with color-coded output per ingestion stage,
making it easy to follow an upload from header check to commit in the
terminal.

Color scheme:
    🟢 Green   — Commit
    🟡 Yellow  — Header check
    🔵 Blue    — Row stream
    🔴 Red     — Rollback / Errors
    ⚪ Gray    — Row details
"""

import logging
from typing import Any


# ── ANSI Color Codes ─────────────────────────────────────────────────

class _Colors:
    """ANSI escape codes for terminal colors."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    BLUE = "\033[94m"
    GRAY = "\033[90m"


# ── Pipeline Stage Definitions ───────────────────────────────────────

class PipelineStage:
    """Predefined ingestion stages with colors and icons."""

    HEADER = ("HEADER", _Colors.YELLOW, "🔎")
    ROWS = ("ROWS", _Colors.BLUE, "📄")
    COMMIT = ("COMMIT", _Colors.GREEN, "✅")
    ROLLBACK = ("ROLLBACK", _Colors.RED, "↩️")


def _format_details(kwargs: dict[str, Any]) -> str:
    return " | ".join(f"{k}={v}" for k, v in kwargs.items())


# ── PipelineLogger ───────────────────────────────────────────────────

class PipelineLogger:
    """Color-coded logger for the ingestion pipeline.

    Usage:
        log = PipelineLogger("SalaryImportService")
        log.step_start(PipelineStage.HEADER, "Validating header")
        log.detail("columns=NAME,SALARY")
        log.step_complete(PipelineStage.COMMIT, "Committed", accepted=42)
    """

    def __init__(self, component_name: str):
        self._logger = logging.getLogger(component_name)

    def step_start(self, stage: tuple[str, str, str], message: str, **kwargs: Any) -> None:
        """Log the start of a pipeline step with its stage color."""
        label, color, icon = stage
        formatted = (
            f"{color}{_Colors.BOLD}{icon} [{label}]{_Colors.RESET} "
            f"{color}{message}{_Colors.RESET}"
        )
        if kwargs:
            formatted += f" {_Colors.GRAY}({_format_details(kwargs)}){_Colors.RESET}"
        self._logger.info(formatted)

    def step_complete(self, stage: tuple[str, str, str], message: str, **kwargs: Any) -> None:
        """Log the successful completion of a pipeline step."""
        label, color, icon = stage
        formatted = (
            f"{color}{icon} [{label}]{_Colors.RESET} "
            f"{_Colors.GREEN}✓ {message}{_Colors.RESET}"
        )
        if kwargs:
            formatted += f" {_Colors.GRAY}({_format_details(kwargs)}){_Colors.RESET}"
        self._logger.info(formatted)

    def step_error(
        self,
        stage: tuple[str, str, str],
        message: str,
        error: Exception | None = None,
        **kwargs: Any,
    ) -> None:
        """Log a pipeline step failure in red."""
        label, _, icon = stage
        formatted = (
            f"{_Colors.RED}{_Colors.BOLD}{icon} [{label}]{_Colors.RESET} "
            f"{_Colors.RED}{message}{_Colors.RESET}"
        )
        if kwargs:
            formatted += f" {_Colors.GRAY}({_format_details(kwargs)}){_Colors.RESET}"
        if error:
            formatted += f" {_Colors.DIM}→ {type(error).__name__}: {error}{_Colors.RESET}"
        self._logger.warning(formatted)

    def detail(self, message: str, **kwargs: Any) -> None:
        """Log additional detail (gray/dimmed) at DEBUG level."""
        formatted = f"   {_Colors.GRAY}├─ {message}{_Colors.RESET}"
        if kwargs:
            formatted += f" {_Colors.DIM}({_format_details(kwargs)}){_Colors.RESET}"
        self._logger.debug(formatted)

    def separator(self, title: str = "") -> None:
        """Log a visual separator line."""
        if title:
            self._logger.info(
                f"{_Colors.GRAY}{'─' * 10} {title} {'─' * max(0, 50 - len(title))}{_Colors.RESET}"
            )
        else:
            self._logger.info(f"{_Colors.GRAY}{'─' * 60}{_Colors.RESET}")
