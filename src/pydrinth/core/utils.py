import logging
from pathlib import Path

from pydrinth.core.errors import FilesystemError

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_version_info() -> tuple[str, str]:
    """Get version and author info"""
    try:
        from pydrinth.__version__ import __author__, __version__

        return __version__, __author__
    except ImportError:
        return "unknown", "pydrinth"


def configure_logging(verbose: bool = False, log_file: Path | None = None) -> None:
    """
    Route log records to stderr, and to ``log_file`` when given.

    Without ``verbose`` only warnings and errors are shown.
    """
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file is not None:
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
        except OSError as e:
            raise FilesystemError(f"Could not open log file {log_file}: {e}") from e

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )

    # urllib3 is chatty at DEBUG; keep it one notch quieter
    if verbose:
        logging.getLogger("urllib3").setLevel(logging.INFO)
