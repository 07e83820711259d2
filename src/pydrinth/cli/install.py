"""
Version commands - dependencies and download
"""

from pathlib import Path
from typing import Optional

import typer

from pydrinth.api import ModrinthClient
from pydrinth.cli.display import display_dependencies, display_install
from pydrinth.cli.shared import console, err_console, fail, lowercase, not_blank
from pydrinth.core import ModDownloader, PydrinthError, VersionResolver

app = typer.Typer()


@app.command()
def dependencies(
    project: str = typer.Option(
        ..., "--project", "-p", callback=not_blank, help="The targeted project, slug or id"
    ),
    version: str = typer.Option(
        ..., "--version", "-v", callback=not_blank, help="The Minecraft version of the targeted mod"
    ),
    loader: str = typer.Option(
        ..., "--loader", "-l", callback=lowercase, help="The loader of the targeted mod"
    ),
    names: bool = typer.Option(
        False, "--names", help="Look up dependency titles and slugs (one extra request)"
    ),
) -> None:
    """List the dependencies of a project's version"""
    resolver = VersionResolver(mc_version=version, loader=loader)

    try:
        with ModrinthClient() as client:
            versions = client.list_versions(project, loaders=[loader], game_versions=[version])
            selected, deps = resolver.resolve(versions, project)

            projects = {}
            if names:
                ids = list(dict.fromkeys(d.project_id for d in deps if d.project_id))
                projects = {p.id: p for p in client.get_projects(ids)}
    except PydrinthError as e:
        fail(e)

    display_dependencies(console, project, selected, deps, projects)


@app.command()
def download(
    project: str = typer.Option(
        ...,
        "--project",
        "-p",
        callback=not_blank,
        help='The project to download, a slug like "sodium" or an id like "AANobbMI"',
    ),
    version: str = typer.Option(
        ...,
        "--version",
        "-v",
        callback=not_blank,
        help="The targeted Minecraft version for the downloaded mod",
    ),
    loader: str = typer.Option(
        ..., "--loader", "-l", callback=lowercase, help="The mod loader for the mod"
    ),
    mcdir: bool = typer.Option(
        False, "--mcdir", help="Install into the .minecraft/mods folder instead of here"
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", file_okay=False, help="Directory to save the file into"
    ),
    no_verify: bool = typer.Option(
        False, "--no-verify", help="Skip checking the file against Modrinth's published hash"
    ),
) -> None:
    """Download a project's file for a Minecraft version and loader"""
    if mcdir and output is not None:
        raise typer.BadParameter("cannot be combined with --mcdir", param_hint="'--output'")

    resolver = VersionResolver(mc_version=version, loader=loader)

    try:
        with ModrinthClient() as client:
            versions = client.list_versions(project, loaders=[loader], game_versions=[version])
            selected = resolver.select_version(versions, project)

            downloader = ModDownloader(client, verify=not no_verify, console=err_console)
            target = downloader.install(selected, mcdir=mcdir, output=output)
    except PydrinthError as e:
        fail(e)

    display_install(console, target, selected)
