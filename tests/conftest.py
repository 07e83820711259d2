"""Shared test fixtures and configuration for the pydrinth test suite."""

import hashlib
import json
import logging
from typing import Any, Callable
from unittest.mock import MagicMock

import pytest
import requests

from pydrinth.core import File, ProjectVersion

JAR_BYTES = b"PK\x03\x04 fake sodium jar contents"


def build_response(
    status: int = 200,
    payload: Any = None,
    content: bytes | None = None,
    url: str = "https://api.modrinth.com/v2/test",
) -> requests.Response:
    """Build a real requests.Response with an already-consumed body."""
    response = requests.Response()
    response.status_code = status
    response._content = content if content is not None else json.dumps(payload).encode()
    response._content_consumed = True
    response.encoding = "utf-8"
    response.url = url
    response.reason = "OK" if status < 400 else "Error"
    return response


@pytest.fixture
def make_response() -> Callable[..., requests.Response]:
    """Factory fixture for canned HTTP responses."""
    return build_response


@pytest.fixture
def session() -> MagicMock:
    """A mocked requests.Session."""
    return MagicMock(spec=requests.Session)


def version_payload(
    version_id: str,
    *,
    game_versions: list[str],
    loaders: list[str],
    date_published: str | None = "2024-01-01T00:00:00Z",
    dependencies: list[dict] | None = None,
    files: list[dict] | None = None,
) -> dict:
    """A version object shaped like GET /project/{id}/version entries."""
    data = {
        "id": version_id,
        "project_id": "AANobbMI",
        "version_number": f"{version_id}-build",
        "name": f"Sodium {version_id}",
        "version_type": "release",
        "game_versions": game_versions,
        "loaders": loaders,
        "dependencies": dependencies or [],
        "files": files
        if files is not None
        else [
            {
                "url": f"https://cdn.modrinth.com/data/AANobbMI/versions/{version_id}/sodium.jar",
                "filename": f"sodium-{version_id}.jar",
                "primary": True,
                "hashes": {"sha1": hashlib.sha1(JAR_BYTES).hexdigest()},
                "size": len(JAR_BYTES),
            }
        ],
    }
    if date_published is not None:
        data["date_published"] = date_published
    return data


def make_version(version_id: str, **kwargs: Any) -> ProjectVersion:
    return ProjectVersion.model_validate(version_payload(version_id, **kwargs))


@pytest.fixture
def sample_file() -> File:
    """A primary jar file with correct hashes for JAR_BYTES."""
    return File(
        url="https://cdn.modrinth.com/data/AANobbMI/versions/abc/sodium.jar",
        filename="sodium-fabric-0.5.3.jar",
        primary=True,
        hashes={
            "sha1": hashlib.sha1(JAR_BYTES).hexdigest(),
            "sha512": hashlib.sha512(JAR_BYTES).hexdigest(),
        },
        size=len(JAR_BYTES),
    )


@pytest.fixture
def jar_bytes() -> bytes:
    return JAR_BYTES


@pytest.fixture
def version_data() -> Callable[..., dict]:
    """Factory for raw version JSON objects."""
    return version_payload


@pytest.fixture
def version_factory() -> Callable[..., ProjectVersion]:
    """Factory for validated ProjectVersion models."""
    return make_version


@pytest.fixture(autouse=True)
def _reset_logging():
    """Drop handlers installed by the CLI so later tests don't log to a closed stream."""
    yield
    root = logging.getLogger()
    for handler in root.handlers[:]:
        if type(handler) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(logging.WARNING)
