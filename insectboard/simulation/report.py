"""Report — write simulation results or a validation failure to a file."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from insectboard.simulation.engine import TurnResult


def format_results(results: Iterable[TurnResult]) -> str:
    """Return one line per result, each newline-terminated."""
    return "".join(f"{result.format_line()}\n" for result in results)


def write_results(path: str | Path, results: Iterable[TurnResult]) -> None:
    """Write every turn result to ``path``, replacing its contents."""
    Path(path).write_text(format_results(results))


def write_error(path: str | Path, error: Exception) -> None:
    """Write the single-line failure message of ``error`` to ``path``.

    No results are written alongside it.
    """
    Path(path).write_text(f"{error}\n")
