from __future__ import annotations

from collections.abc import Mapping
import logging
import os
from pathlib import Path
import platform

from pydrinth.core.errors import FilesystemError

logger = logging.getLogger(__name__)


def default_game_directory(
    system: str | None = None,
    home: Path | None = None,
    env: Mapping[str, str] | None = None,
) -> Path:
    """Location of the vanilla launcher's game directory on this platform."""
    system = system or platform.system()
    home = home or Path.home()
    env = os.environ if env is None else env

    if system == "Windows":
        appdata = env.get("APPDATA")
        roaming = Path(appdata) if appdata else home / "AppData" / "Roaming"
        return roaming / ".minecraft"
    if system == "Darwin":
        return home / "Library" / "Application Support" / "minecraft"
    return home / ".minecraft"


def ensure_directory(path: Path) -> Path:
    """Create ``path`` (and parents) if missing."""
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FilesystemError(f"Could not create directory {path}: {e}") from e
    if not path.is_dir():
        raise FilesystemError(f"{path} exists and is not a directory")
    return path


def mods_directory(game_dir: Path | None = None) -> Path:
    """``<game dir>/mods``, created if absent."""
    game_dir = game_dir or default_game_directory()
    if not game_dir.exists():
        logger.warning("Game directory %s does not exist yet, creating it", game_dir)
    return ensure_directory(game_dir / "mods")
