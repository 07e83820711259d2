"""
Utility commands - Doctor
"""

import sys

import typer

from pydrinth.api import ModrinthAPIConfig
from pydrinth.cli.shared import console
from pydrinth.core import default_game_directory

app = typer.Typer()


@app.command()
def doctor() -> None:
    """Validate the pydrinth installation"""
    console.print("[bold cyan]Running diagnostics...[/bold cyan]\n")

    issues = []

    py_version = f"{sys.version_info.major}.{sys.version_info.minor}"
    console.print(f"[green]✓[/green] Python {py_version}")

    console.print(f"[green]✓[/green] API: {ModrinthAPIConfig().base_url}")

    game_dir = default_game_directory()
    if game_dir.is_dir():
        console.print(f"[green]✓[/green] Game directory: {game_dir}")
        if (game_dir / "mods").is_dir():
            console.print(f"[green]✓[/green] Mods folder: {game_dir / 'mods'}")
        else:
            console.print("[yellow]![/yellow] No mods folder yet (created by download --mcdir)")
    else:
        console.print(f"[yellow]![/yellow] Game directory not found: {game_dir}")
        issues.append("Launch Minecraft once, or use download --output to pick a folder")

    console.print()
    if issues:
        console.print("[yellow]Issues found:[/yellow]")
        for issue in issues:
            console.print(f"  - {issue}")
    else:
        console.print("[green bold]✓ All checks passed![/green bold]")
