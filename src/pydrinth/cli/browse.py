"""
Browsing commands - search and info
"""

from typing import List, Optional

from pydantic import ValidationError
import typer

from pydrinth.api import ModrinthClient
from pydrinth.cli.display import display_project, display_search_results
from pydrinth.cli.shared import SEARCH_LIMIT, console, fail, not_blank, split_categories
from pydrinth.core import PydrinthError, SearchQuery

app = typer.Typer()


@app.command()
def search(
    query: str = typer.Option(
        ..., "--query", "-q", callback=not_blank, help="The string to search for matching mods"
    ),
    version: Optional[str] = typer.Option(
        None, "--version", "-v", help="The Minecraft version to search mods for"
    ),
    categories: Optional[List[str]] = typer.Option(
        None,
        "--categories",
        "-c",
        help='Categories like "optimization"; the mod loader also goes here. Repeatable',
    ),
    limit: int = typer.Option(
        SEARCH_LIMIT, "--limit", "-n", min=1, max=SEARCH_LIMIT, help="Maximum results to show"
    ),
) -> None:
    """Search Modrinth for mods"""
    try:
        request = SearchQuery(
            query=query,
            game_version=version or None,
            categories=split_categories(categories),
            limit=limit,
        )
    except ValidationError as e:
        raise typer.BadParameter(str(e)) from e

    try:
        with ModrinthClient() as client:
            hits = client.search(request)
    except PydrinthError as e:
        fail(e)

    display_search_results(console, hits)


@app.command()
def info(
    project: str = typer.Option(
        ...,
        "--project",
        "-p",
        callback=not_blank,
        help='The project to describe, a slug like "sodium" or an id like "AANobbMI"',
    ),
) -> None:
    """Show a project's full description"""
    try:
        with ModrinthClient() as client:
            detail = client.info(project)
    except PydrinthError as e:
        fail(e)

    display_project(console, detail)
