"""
Terminal rendering of Modrinth results.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text
import typer

from pydrinth.core import Dependency, Hit, InstallTarget, Project, ProjectVersion


def display_search_results(console: Console, hits: Sequence[Hit]) -> None:
    """One entry per hit, in the order Modrinth returned them."""
    if not hits:
        console.print("[warning]Couldn't find any mods matching the query[/warning]")
        return

    for hit in hits:
        console.print(
            Text.assemble((f'"{hit.title}"', "bold cyan"), " : ", (hit.slug, "green"))
        )
        if hit.description:
            console.print(Text(hit.description))
        console.print()


def display_project(console: Console, project: Project) -> None:
    """Header lines, then the description body exactly as published."""
    console.print(
        Text.assemble(
            (project.project_type or "project", "magenta"),
            " - ",
            (project.title, "bold cyan"),
            (f" ({project.slug})", "dim"),
        )
    )
    if project.categories:
        console.print(Text(", ".join(project.categories), style="dim"))
    console.print()

    # Markdown/HTML stays untouched: no rich markup, no wrapping
    typer.echo(project.body)


def _dependency_label(dep: Dependency, projects: Mapping[str, Project]) -> str:
    if dep.project_id and dep.project_id in projects:
        known = projects[dep.project_id]
        return f'"{known.title}" - {known.slug}'
    return dep.project_id or dep.file_name or "-"


def display_dependencies(
    console: Console,
    project: str,
    version: ProjectVersion,
    dependencies: Sequence[Dependency],
    projects: Mapping[str, Project] | None = None,
) -> None:
    projects = projects or {}

    if not dependencies:
        console.print(
            f"[warning]No dependencies found for {escape(project)} "
            f"{escape(version.version_number)}[/warning]"
        )
        return

    table = Table(
        title=escape(f"{project} {version.version_number}"),
        header_style="bold magenta",
    )
    table.add_column("Type", style="cyan")
    table.add_column("Project", style="green")
    table.add_column("Version", style="dim")

    for dep in dependencies:
        table.add_row(
            dep.dependency_type,
            escape(_dependency_label(dep, projects)),
            escape(dep.version_id or "any"),
        )

    console.print(table)


def display_install(console: Console, target: InstallTarget, version: ProjectVersion) -> None:
    console.print(
        f"[success]✓[/success] {escape(target.filename)} "
        f"[dim](v{escape(version.version_number)})[/dim] → {escape(str(target.path))}"
    )
