"""
Main CLI entry point - Registers all commands
"""

from pathlib import Path
from typing import Optional

from pyfiglet import figlet_format
from rich.panel import Panel
from rich.text import Text
import typer

from pydrinth.cli import browse, install, utils
from pydrinth.cli.shared import console, fail
from pydrinth.core import PydrinthError, configure_logging, get_version_info

__version__, __author__ = get_version_info()

app = typer.Typer(
    add_completion=False,
    no_args_is_help=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def render_banner() -> None:
    """Renders a stylized banner"""
    width = console.width
    font = "slant" if width > 60 else "small"

    ascii_art = figlet_format("pydrinth", font=font)
    banner_text = Text(ascii_art, style="bold green")

    info_line = Text.assemble(
        (" ⛏  ", "yellow"),
        (f"v{__version__}", "bold white"),
        (" | ", "dim"),
        ("Modrinth from your terminal", "italic white"),
    )

    console.print(
        Panel(
            Text.assemble(banner_text, "\n", info_line),
            border_style="green",
            padding=(1, 2),
            expand=False,
        ),
        justify="left",
    )


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    version: Optional[bool] = typer.Option(None, "--version", help="Show version and exit"),
    verbose: Optional[bool] = typer.Option(None, "--verbose", help="Enable verbose logging"),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file", dir_okay=False, help="Also write log records to this file"
    ),
) -> None:
    """pydrinth: search, inspect and download Modrinth mods."""

    try:
        configure_logging(verbose=bool(verbose), log_file=log_file)
    except PydrinthError as e:
        fail(e)

    if version:
        console.print(f"pydrinth Version: [bold cyan]{__version__}[/bold cyan]")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        render_banner()
        console.print("\n[bold yellow]Usage:[/bold yellow] pydrinth [COMMAND] [ARGS]...")
        console.print("\n[bold cyan]Commands:[/bold cyan]")
        console.print("  [green]search[/green]        Search Modrinth for mods")
        console.print("  [green]info[/green]          Show a project's description")
        console.print("  [green]dependencies[/green]  List a version's dependencies")
        console.print("  [green]download[/green]      Download a mod file")
        console.print("\n[bold cyan]Utility:[/bold cyan]")
        console.print("  [green]doctor[/green]        Validate installation")
        console.print("\nRun [white]pydrinth --help[/white] for details.\n")


# Register all commands
app.command()(browse.search)
app.command()(browse.info)
app.command()(install.dependencies)
app.command()(install.download)
app.command()(utils.doctor)


def main() -> None:
    """Main entry point"""
    app()


if __name__ == "__main__":
    main()
