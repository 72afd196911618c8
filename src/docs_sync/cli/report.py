"""Rich table rendering of a rename plan."""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from docs_sync.naming import RenamePlan
from docs_sync.utils.console import console as default_console


def render_plan(plan: RenamePlan, console: Console = default_console) -> None:
  """
  Prints the planned renames as a table, in traversal order.

  Args:
      plan (RenamePlan): Output of the planning step.
      console (Console): Destination console.
  """
  table = Table(title=f"Planned renames ({len(plan)})")
  table.add_column("Kind", style="dim")
  table.add_column("Upstream path", style="bold blue")
  table.add_column("Published path", style="green")

  for op in plan.operations:
    table.add_row(op.kind.value, escape(op.source.as_posix()), escape(op.target.as_posix()))

  console.print(table)
