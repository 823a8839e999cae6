"""Define functions that render task data as rich tables for the console."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.table import Table

if TYPE_CHECKING:
    from collections.abc import Iterable

    from moveit_pick_place.scene import AllowedCollisionMatrix
    from moveit_pick_place.tasks.outcome import StepOutcome


def render_acm_table(acm: AllowedCollisionMatrix, names: Iterable[str] | None = None) -> Table:
    """Render the allowed collision matrix as a table of allowed ("1") and forbidden ("0") pairs.

    :param acm: Allowed collision matrix to be rendered
    :param names: Names of the bodies to include as rows (defaults to every body in the matrix)
    :return: Table with one row per selected body and one column per body in the matrix
    """
    row_names = acm.entry_names if names is None else [n for n in names if n in acm]
    column_names = acm.entry_names

    table = Table(title="Allowed Collision Matrix", show_lines=False)
    table.add_column("Body", style="bold", no_wrap=True)
    for idx, _ in enumerate(column_names):
        table.add_column(str(idx), justify="center")

    for row_name in row_names:
        cells = []
        for column_name in column_names:
            allowed = acm.get_entry(row_name, column_name)
            cells.append("-" if allowed is None else ("[green]1[/]" if allowed else "0"))
        table.add_row(f"{column_names.index(row_name)}: {row_name}", *cells)

    return table


def render_outcome_table(outcomes: Iterable[StepOutcome]) -> Table:
    """Render a summary table of the outcomes of each step in the sequence."""
    table = Table(title="Pick-and-Place Summary", show_lines=False)
    table.add_column("#", justify="right", style="cyan", no_wrap=True)
    table.add_column("Step", style="bold")
    table.add_column("Result")
    table.add_column("Details", style="dim")

    for idx, outcome in enumerate(outcomes, start=1):
        result = "[green]ok[/]" if outcome.success else "[red]FAILED[/]"
        table.add_row(str(idx), outcome.step, result, outcome.message)

    return table
