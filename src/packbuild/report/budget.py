"""Byte budget margin and the boxed proportional bar."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Final, TextIO

import typer

SUBUNITS_PER_CELL: Final = 8
FULL_BLOCK: Final = "█"
# Left one-eighth (U+258F) through left seven-eighths (U+2589).
PARTIAL_BLOCKS: Final = tuple(chr(0x2590 - eighths) for eighths in range(1, SUBUNITS_PER_CELL))


@dataclass(frozen=True, slots=True)
class BudgetMargin:
    """Observed size against a fixed byte budget."""

    size: int
    limit: int

    def __post_init__(self) -> None:
        if self.limit <= 0:
            raise ValueError(f"budget limit must be positive, got {self.limit}")
        if self.size < 0:
            raise ValueError(f"size must be non-negative, got {self.size}")

    @property
    def margin(self) -> float:
        """Signed fraction; positive when over budget."""

        return (self.size - self.limit) / self.limit

    @property
    def over_budget(self) -> bool:
        return self.size > self.limit

    @property
    def bar_fraction(self) -> float:
        """Overage fraction when over budget, remaining fraction otherwise."""

        return abs(self.margin)


def terminal_columns(stream: TextIO, fallback: int = 80) -> int:
    """Width of the terminal behind ``stream``, or ``fallback`` if unknown."""

    isatty = getattr(stream, "isatty", None)
    if isatty is None or not isatty():
        return fallback
    try:
        columns = os.get_terminal_size(stream.fileno()).columns
    except (OSError, ValueError):
        return fallback
    return columns or fallback


def bar_subunits(fraction: float, columns: int) -> int:
    """Number of filled eighth-cells for ``fraction`` of ``columns`` cells."""

    total = columns * SUBUNITS_PER_CELL
    clamped = min(1.0, max(0.0, fraction))
    # Half-up rounding; round() would round half to even.
    return min(total, max(0, math.floor(clamped * total + 0.5)))


def render_bar(fraction: float, columns: int) -> str:
    """Render a three-row box whose interior is filled to ``fraction``."""

    filled = bar_subunits(fraction, columns)
    full_cells, partial = divmod(filled, SUBUNITS_PER_CELL)
    inner = FULL_BLOCK * full_cells
    if partial:
        inner += PARTIAL_BLOCKS[partial - 1]
    inner = inner.ljust(columns)
    rule = "─" * columns
    return (
        f"┌{rule}┐\n"
        f"│{inner}│\n"
        f"└{rule}┘\n"
    )


def format_percent(fraction: float) -> str:
    """Percentage with one decimal, rounding exact halves up."""

    value = Decimal(100 * fraction).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    return f"{value}%"


def _style_rows(text: str, **styles: str) -> str:
    # Each row gets its own reset code.
    return "\n".join(typer.style(row, **styles) for row in text.splitlines())


def write_budget_report(
    size: int,
    limit: int,
    stream: TextIO,
    *,
    fallback_columns: int = 80,
    min_columns: int = 10,
    color: bool | None = None,
) -> BudgetMargin:
    """Write the size line, the bar and the percentage line to ``stream``."""

    budget = BudgetMargin(size=size, limit=limit)
    columns = max(min_columns, terminal_columns(stream, fallback_columns)) - 2
    bar = render_bar(budget.bar_fraction, columns)
    percent = format_percent(budget.bar_fraction)

    typer.echo(f"Size: {size} bytes", file=stream, color=color)
    if budget.over_budget:
        typer.echo(_style_rows(bar, fg="red", bg="bright_white"), file=stream, color=color)
        typer.echo(typer.style(f"Over limit by: {percent}", fg="bright_red"), file=stream, color=color)
    else:
        typer.echo(_style_rows(bar, fg="bright_green", bg="blue"), file=stream, color=color)
        typer.echo(f"Space remaining: {percent}", file=stream, color=color)
    return budget
