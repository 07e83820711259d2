from .downloader import ModDownloader, pick_primary_file, resolve_install_target, verify_hashes
from .errors import (
    ApiError,
    ChecksumError,
    FilesystemError,
    NetworkError,
    NotFoundError,
    ParseError,
    PydrinthError,
)
from .models import (
    Dependency,
    File,
    Hit,
    InstallTarget,
    Project,
    ProjectVersion,
    ProjectVersionList,
    SearchQuery,
    SearchResult,
)
from .paths import default_game_directory, ensure_directory, mods_directory
from .resolver import VersionResolver
from .utils import configure_logging, get_version_info

__all__ = [
    "ModDownloader",
    "VersionResolver",
    "SearchQuery",
    "Hit",
    "SearchResult",
    "Project",
    "ProjectVersion",
    "ProjectVersionList",
    "Dependency",
    "File",
    "InstallTarget",
    "PydrinthError",
    "NetworkError",
    "ApiError",
    "NotFoundError",
    "ParseError",
    "FilesystemError",
    "ChecksumError",
    "pick_primary_file",
    "resolve_install_target",
    "verify_hashes",
    "default_game_directory",
    "ensure_directory",
    "mods_directory",
    "configure_logging",
    "get_version_info",
]
