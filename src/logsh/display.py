"""Terminal display using Rich."""
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .models import Configuration

console = Console()
err_console = Console(stderr=True)


def render_connections(config: Configuration):
    """Render configured connections as a table."""
    if not config.connections:
        console.print("[yellow]No connections configured[/yellow]")
        console.print("[dim]  Run 'logsh connect <server>' to add one.[/dim]")
        return

    table = Table(title="Connections", show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Endpoint", no_wrap=True)

    for i, conn in enumerate(config.connections, start=1):
        table.add_row(str(i), f"[blue]{escape(conn.endpoint)}[/blue]")

    console.print(table)


def show_probe_result(endpoint: str, reachable: bool, message: str):
    if reachable:
        console.print(f"[green]✓ {escape(endpoint)}: {message}[/green]", soft_wrap=True)
    else:
        console.print(f"[yellow]⚠ {escape(endpoint)}: {message}[/yellow]", soft_wrap=True)


def show_save_result(ok: bool, path: Path):
    if ok:
        console.print(f"[green]Saved configuration to {escape(str(path))}[/green]", soft_wrap=True)
    else:
        err_console.print(f"[red]✗ Cannot write configuration to {escape(str(path))}[/red]", soft_wrap=True)
