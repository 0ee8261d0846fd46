# deploy_planner/cli/utils/output.py
"""Output formatting utilities"""

from pathlib import Path
from typing import List, Optional, Tuple

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.syntax import Syntax
from rich.tree import Tree
from rich.markup import escape
from rich import box

from ...constants import EMOJI_SUCCESS, EMOJI_WARNING
from ...models import ManifestResult, PlanResult

console = Console()


def format_groups(result: PlanResult) -> None:
    """Display deployment groups as a tree"""
    plan = result.plan
    untested = set(plan.untested)

    tree = Tree(f"[bold]Deployment groups[/bold] ({plan.group_count})")
    for index, group in enumerate(plan.groups):
        label = f"[cyan]Group {index + 1}[/cyan] [dim]({len(group)})[/dim]"
        if result.forced_group == index:
            label += " [yellow]forced[/yellow]"
        branch = tree.add(label)
        for component in group:
            line = f"{escape(component.type)}: {escape(component.name)} [dim]({escape(component.id)})[/dim]"
            if component.id in untested:
                line += " [yellow]-- UNTESTED[/yellow]"
            branch.add(line)

    console.print(tree)


def format_diagnostics(result: PlanResult) -> None:
    """Display residual components and unmatched tests"""
    plan = result.plan

    if plan.residual:
        table = Table(title="Unstaged components", box=box.SIMPLE)
        table.add_column("Id", style="dim")
        table.add_column("Type", style="cyan")
        table.add_column("Name", style="white")
        table.add_column("In-degree", justify="right", style="yellow")
        table.add_column("Waiting for", style="red")

        for entry in plan.residual:
            waiting = ", ".join(name for _, name in entry.unmet_dependencies)
            if entry.awaiting_subject and not waiting:
                waiting = f"subject {entry.awaiting_subject}"
            table.add_row(entry.id, entry.type, entry.name, str(entry.in_degree), waiting)

        console.print(table)

    if plan.unmatched_tests:
        console.print(f"\n[yellow]Tests without a subject:[/yellow] {len(plan.unmatched_tests)}")
        for test_id in plan.unmatched_tests:
            console.print(f"  • {test_id}")

    console.print(
        f"\n[bold]Groups:[/bold] {plan.group_count}  "
        f"[bold]Untested:[/bold] {len(plan.untested)}  "
        f"[bold]Unstaged:[/bold] {len(plan.residual)}"
    )


def format_manifest_table(written: List[Tuple[ManifestResult, Path]]) -> None:
    """Display written manifests with counts and test names"""
    table = Table(title="Manifests", box=box.ROUNDED)
    table.add_column("Set", style="cyan", no_wrap=True)
    table.add_column("File", style="white")
    table.add_column("Members", justify="right", style="green")
    table.add_column("Tests", style="dim")

    for manifest, path in written:
        table.add_row(
            manifest.label,
            str(path),
            str(manifest.member_count),
            ", ".join(manifest.test_names) or "-"
        )

    console.print(table)


def format_yaml(text: str, title: Optional[str] = None) -> None:
    """Display YAML text with syntax highlighting"""
    syntax = Syntax(text, "yaml", theme="monokai", line_numbers=False)

    if title:
        panel = Panel(syntax, title=title, border_style="blue")
        console.print(panel)
    else:
        console.print(syntax)


def print_error(message: str, error: Optional[Exception] = None) -> None:
    """Print error message, with any collected validation errors"""
    if error:
        console.print(f"[red]Error:[/red] {message}: {escape(str(error))}")
        for detail in getattr(error, 'errors', None) or []:
            console.print(f"  [red]•[/red] {escape(str(detail))}")
    else:
        console.print(f"[red]Error:[/red] {message}")


def print_warning(message: str) -> None:
    """Print warning message"""
    console.print(f"[yellow]{EMOJI_WARNING} Warning:[/yellow] {escape(message)}")


def print_success(message: str) -> None:
    """Print success message"""
    console.print(f"[green]{EMOJI_SUCCESS}[/green] {message}")
