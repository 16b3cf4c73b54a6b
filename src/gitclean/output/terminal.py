"""Rich terminal reporter — file table, verdict, summary."""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from gitclean.git.models import FileStatus, StatusCode
from gitclean.status.result import CheckResult

_CODE_STYLE = {
    StatusCode.MODIFIED.value: "yellow",
    StatusCode.ADDED.value: "green",
    StatusCode.DELETED.value: "red",
    StatusCode.RENAMED.value: "cyan",
    StatusCode.COPIED.value: "cyan",
    StatusCode.UNMERGED.value: "bold red",
    StatusCode.UNTRACKED.value: "magenta",
}


def _code_cell(code: str) -> Text:
    if not code:
        return Text("-", style="dim")
    return Text(code, style=_CODE_STYLE.get(code.upper(), ""))


def _path_cell(f: FileStatus) -> str:
    if f.orig_path:
        return f"{f.orig_path} → {f.path}"
    return f.path


def render_table(result: CheckResult, console: Console, *, title: str = "Uncommitted changes") -> None:
    table = Table(title=title, title_style="bold", border_style="dim")
    table.add_column("Staged", justify="center", width=8)
    table.add_column("Unstaged", justify="center", width=8)
    table.add_column("Path", style="magenta")
    table.add_column("Submodule", justify="center")

    for f in result.files:
        table.add_row(
            _code_cell(f.index),
            _code_cell(f.working_tree),
            _path_cell(f),
            "✓" if f.is_submodule else "",
        )
    console.print(table)


def render(
    result: CheckResult,
    *,
    show_summary: bool = True,
    console: Optional[Console] = None,
) -> None:
    """Print check results to the terminal using Rich."""
    console = console or Console(stderr=True)

    if result.clean:
        console.print("[bold green]✅ Working tree is clean.[/bold green]")
        if show_summary:
            _print_summary(console, result)
        return

    render_table(result, console)
    if show_summary:
        _print_summary(console, result)

    console.print()
    console.print(
        f"[bold red]❌ DIRTY: {len(result.files)} file(s) with uncommitted changes.[/bold red]"
    )


def _print_summary(console: Console, result: CheckResult) -> None:
    console.print()
    console.print(f"[dim]Directory:[/dim]   {result.directory}")
    console.print(f"[dim]Staged:[/dim]      {len(result.staged)}")
    console.print(f"[dim]Unstaged:[/dim]    {len(result.unstaged)}")
    console.print(f"[dim]Untracked:[/dim]   {len(result.untracked)}")
    console.print(f"[dim]Submodules:[/dim]  {len(result.submodules)}")
    console.print(f"[dim]Duration:[/dim]    {result.duration_ms:.0f}ms")
