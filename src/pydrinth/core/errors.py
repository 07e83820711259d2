"""
Error types raised by the API client, resolver and installer.

Every error carries a human-readable message and the exit status the CLI
should terminate with.
"""

from __future__ import annotations


class PydrinthError(Exception):
    """Base class for all pydrinth failures."""

    exit_code: int = 1


class NetworkError(PydrinthError):
    """Transport failure: DNS, refused connection, timeout."""


class ApiError(PydrinthError):
    """Modrinth answered with a non-success HTTP status."""

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


class NotFoundError(ApiError):
    """Unknown project, or no version for the requested game version / loader."""


class ParseError(PydrinthError):
    """Response body did not match the expected schema."""


class FilesystemError(PydrinthError):
    """Directory creation or file write failed."""


class ChecksumError(PydrinthError):
    """Downloaded bytes do not match the hash published by Modrinth."""
