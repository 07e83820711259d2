from __future__ import annotations

import hashlib
import logging
from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console
from rich.progress import (
    BarColumn,
    DownloadColumn,
    Progress,
    SpinnerColumn,
    TextColumn,
    TransferSpeedColumn,
)

from pydrinth.core.errors import ChecksumError, FilesystemError, NotFoundError
from pydrinth.core.models import File, InstallTarget, ProjectVersion
from pydrinth.core.paths import ensure_directory, mods_directory

if TYPE_CHECKING:
    from pydrinth.api import ModrinthClient

logger = logging.getLogger(__name__)

# strongest first
HASH_ALGORITHMS = ("sha512", "sha1")


def pick_primary_file(version: ProjectVersion) -> File:
    """The file flagged primary, else the first file of the version."""
    files = version.files
    primary_file = next((f for f in files if f.primary), None)

    if not primary_file and files:
        primary_file = files[0]

    if not primary_file:
        raise NotFoundError(f"Version {version.version_number} ({version.id}) has no files")

    return primary_file


def resolve_install_target(
    filename: str,
    *,
    mcdir: bool = False,
    output: Path | None = None,
    game_dir: Path | None = None,
) -> InstallTarget:
    """
    Destination for a downloaded file.

    ``mcdir`` targets the game's mods folder, ``output`` an explicit
    directory; otherwise the current working directory. Directories are
    created when missing.
    """
    if Path(filename).name != filename or filename in ("", ".", ".."):
        raise FilesystemError(f"Refusing to write file with unsafe name {filename!r}")

    if mcdir:
        directory = mods_directory(game_dir)
    elif output is not None:
        directory = ensure_directory(output.expanduser())
    else:
        directory = Path.cwd()

    return InstallTarget(directory=directory.resolve(), filename=filename)


def verify_hashes(file: File, data: bytes) -> str | None:
    """
    Check ``data`` against the strongest hash Modrinth published for ``file``.

    Returns the algorithm used, or None when the API supplied no hash.
    """
    for algorithm in HASH_ALGORITHMS:
        expected = file.hashes.get(algorithm)
        if not expected:
            continue
        actual = hashlib.new(algorithm, data).hexdigest()
        if actual != expected.lower():
            raise ChecksumError(
                f"Hash mismatch for {file.filename}\n"
                f"  Expected {algorithm}: {expected}\n"
                f"  Got:      {actual}"
            )
        return algorithm
    return None


class ModDownloader:
    def __init__(
        self,
        client: ModrinthClient,
        *,
        verify: bool = True,
        console: Console | None = None,
    ):
        self.client = client
        self.verify = verify
        self.console = console or Console(stderr=True)

    def fetch(self, file: File) -> bytes:
        """Download ``file`` with a progress bar on stderr."""
        with Progress(
            SpinnerColumn(),
            TextColumn("[bold cyan]{task.description}"),
            BarColumn(),
            DownloadColumn(),
            TransferSpeedColumn(),
            console=self.console,
            transient=True,
        ) as progress:
            task_id = progress.add_task(file.filename, total=file.size)
            return self.client.fetch_file(
                file, progress=lambda n: progress.advance(task_id, n)
            )

    def install(
        self,
        version: ProjectVersion,
        *,
        mcdir: bool = False,
        output: Path | None = None,
        game_dir: Path | None = None,
    ) -> InstallTarget:
        """
        Fetch the primary file of ``version`` and write it to its destination.

        Nothing touches the filesystem until the bytes are fetched and
        (unless disabled) verified.
        """
        file = pick_primary_file(version)
        data = self.fetch(file)

        if self.verify:
            algorithm = verify_hashes(file, data)
            if algorithm:
                logger.debug("%s verified with %s", file.filename, algorithm)
            else:
                logger.warning("No hash published for %s, skipping verification", file.filename)

        target = resolve_install_target(
            file.filename, mcdir=mcdir, output=output, game_dir=game_dir
        )

        try:
            target.path.write_bytes(data)
        except OSError as e:
            raise FilesystemError(f"Could not write {target.path}: {e}") from e

        logger.info("Wrote %s (%d bytes)", target.path, len(data))
        return target
