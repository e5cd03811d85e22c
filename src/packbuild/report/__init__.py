"""Budget reporting for the packed artifact."""

from packbuild.report.budget import (
    BudgetMargin,
    bar_subunits,
    render_bar,
    terminal_columns,
    write_budget_report,
)

__all__ = [
    "BudgetMargin",
    "bar_subunits",
    "render_bar",
    "terminal_columns",
    "write_budget_report",
]
