"""
api/client.py - Modrinth API v2 URL builder and blocking HTTP client
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
import json
import logging
import os
from typing import Any, Dict, List, Optional
from urllib.parse import quote, quote_plus

from pydantic import TypeAdapter, ValidationError
import requests

from pydrinth.core.errors import (
    ApiError,
    NetworkError,
    NotFoundError,
    ParseError,
)
from pydrinth.core.models import (
    File,
    Hit,
    Project,
    ProjectList,
    ProjectVersion,
    ProjectVersionList,
    SearchQuery,
    SearchResult,
)
from pydrinth.core.utils import get_version_info

__version__, __author__ = get_version_info()

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.modrinth.com/v2"
BASE_URL_ENV = "PYDRINTH_API_URL"

# connect, read
DEFAULT_TIMEOUT = (10, 60)
CHUNK_SIZE = 64 * 1024

ENDPOINTS: Dict[str, Any] = {
    "search": "/search",
    "projects": {
        "project": "/project/{id}",
        "project_versions": "/project/{id}/version",
    },
    "bulk": {
        "projects": "/projects",
    },
}


class ModrinthAPIConfig:
    """Builds Modrinth API URLs from the endpoint table."""

    def __init__(self, base_url: Optional[str] = None):
        self.base_url: str = (base_url or os.environ.get(BASE_URL_ENV) or DEFAULT_BASE_URL).rstrip(
            "/"
        )
        self.endpoints: Dict[str, Any] = ENDPOINTS

    def build_url(self, template: str, **kwargs: str) -> str:
        """Format a template string with kwargs and prepend base URL."""
        try:
            path = template.format(**{k: quote(v, safe="") for k, v in kwargs.items()})
            return f"{self.base_url}{path}"
        except KeyError as e:
            raise ValueError(f"Missing URL parameter: {e}") from e

    # === Endpoint URL Builders ===

    def search(
        self,
        query: Optional[str] = None,
        categories: Optional[List[str]] = None,
        game_versions: Optional[List[str]] = None,
        project_type: Optional[str] = None,
        limit: Optional[int] = 10,
        index: Optional[str] = "relevance",  # relevance, downloads, follows, updated, newest
    ) -> str:
        """
        Build the Modrinth search URL with query parameters.

        Docs: https://docs.modrinth.com/api/operations/searchprojects/

        Facets format: [[inner OR], [inner OR]] = outer AND
        Example: [["categories:fabric"], ["project_type:mod"]]

        Args:
            query: Search term (e.g., "sodium")
            categories: Each entry becomes its own AND-ed facet; loader names
                are categories too (e.g., ["fabric", "optimization"])
            game_versions: OR-ed Minecraft versions facet (e.g., ["1.21.1"])
            project_type: "mod", "resourcepack", "shader", "modpack", "datapack"
            limit: Results per page (max 100)
            index: Sort order

        Returns:
            Full search URL with query parameters
        """
        base = self.build_url(self.endpoints["search"])

        params = []

        if query:
            params.append(f"query={quote_plus(query)}")

        facets_array: List[List[str]] = []

        if project_type:
            facets_array.append([f"project_type:{project_type}"])

        if categories:
            for cat in categories:
                facets_array.append([f"categories:{cat}"])

        if game_versions:
            facets_array.append([f"versions:{version}" for version in game_versions])

        if facets_array:
            params.append(f"facets={quote_plus(json.dumps(facets_array))}")

        if limit is not None:
            params.append(f"limit={min(limit, 100)}")  # Modrinth caps at 100

        if index:
            params.append(f"index={index}")

        query_string = "&".join(params)
        return f"{base}?{query_string}" if params else base

    def project(self, project_id: str) -> str:
        return self.build_url(self.endpoints["projects"]["project"], id=project_id)

    def project_versions(
        self,
        project_id: str,
        loaders: Optional[List[str]] = None,
        game_versions: Optional[List[str]] = None,
    ) -> str:
        base = self.build_url(self.endpoints["projects"]["project_versions"], id=project_id)

        params = []
        if loaders:
            params.append(f"loaders={quote_plus(json.dumps(loaders))}")
        if game_versions:
            params.append(f"game_versions={quote_plus(json.dumps(game_versions))}")

        return f"{base}?{'&'.join(params)}" if params else base

    def bulk_projects(self, project_ids: Iterable[str]) -> str:
        ids = json.dumps(list(project_ids))
        return f"{self.build_url(self.endpoints['bulk']['projects'])}?ids={quote_plus(ids)}"


def get_api_session() -> requests.Session:
    """Returns a session with the correct pydrinth headers."""
    session = requests.Session()
    session.headers.update({"User-Agent": f"{__author__}/pydrinth/{__version__}"})
    return session


def _error_message(response: requests.Response) -> str:
    # Modrinth errors look like {"error": "not_found", "description": "..."}
    try:
        data = response.json()
    except ValueError:
        return response.text.strip() or (response.reason or "")
    if isinstance(data, dict):
        return str(data.get("description") or data.get("error") or data)
    return str(data)


class ModrinthClient:
    """
    One blocking GET per call against the Modrinth REST API.

    Every method either returns validated models or raises one of the
    ``pydrinth.core.errors`` types; nothing is retried.
    """

    def __init__(
        self,
        api: Optional[ModrinthAPIConfig] = None,
        session: Optional[requests.Session] = None,
        timeout: Any = DEFAULT_TIMEOUT,
    ) -> None:
        self.api = api or ModrinthAPIConfig()
        self.session = session or get_api_session()
        self.timeout = timeout

    def __enter__(self) -> "ModrinthClient":
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    def _get(self, url: str, what: str, stream: bool = False) -> requests.Response:
        logger.debug("GET %s", url)
        try:
            response = self.session.get(url, timeout=self.timeout, stream=stream)
        except requests.RequestException as e:
            raise NetworkError(f"Could not reach Modrinth while fetching {what}: {e}") from e

        logger.debug("%s -> HTTP %s", url, response.status_code)
        if response.status_code == 404:
            raise NotFoundError(f"{what} not found", status=404)
        if not response.ok:
            raise ApiError(
                f"Modrinth returned HTTP {response.status_code} for {what}: "
                f"{_error_message(response)}",
                status=response.status_code,
            )
        return response

    def _decode(self, response: requests.Response, model: Any, what: str) -> Any:
        try:
            if isinstance(model, TypeAdapter):
                return model.validate_json(response.content)
            return model.model_validate_json(response.content)
        except ValidationError as e:
            raise ParseError(f"Unexpected response for {what}:\n{e}") from e

    # === Operations ===

    def search(self, query: SearchQuery) -> list[Hit]:
        """Search mods; returns at most ``query.limit`` hits in API order."""
        url = self.api.search(
            query.query,
            categories=query.categories,
            game_versions=[query.game_version] if query.game_version else None,
            project_type=query.project_type,
            limit=query.limit,
            index=query.index,
        )
        what = f"search '{query.query}'"
        result: SearchResult = self._decode(self._get(url, what), SearchResult, what)
        return result.hits[: query.limit]

    def info(self, project: str) -> Project:
        what = f"Project '{project}'"
        return self._decode(self._get(self.api.project(project), what), Project, what)

    def list_versions(
        self,
        project: str,
        loaders: Optional[List[str]] = None,
        game_versions: Optional[List[str]] = None,
    ) -> list[ProjectVersion]:
        what = f"Project '{project}'"
        url = self.api.project_versions(project, loaders=loaders, game_versions=game_versions)
        return self._decode(self._get(url, what), ProjectVersionList, f"versions of {what}")

    def get_projects(self, project_ids: Iterable[str]) -> list[Project]:
        ids = list(project_ids)
        if not ids:
            return []
        what = f"projects {', '.join(ids)}"
        return self._decode(self._get(self.api.bulk_projects(ids), what), ProjectList, what)

    def fetch_file(
        self,
        file: File,
        progress: Optional[Callable[[int], None]] = None,
    ) -> bytes:
        """Download a version file, reporting each received chunk size to ``progress``."""
        what = f"file '{file.filename}'"
        response = self._get(file.url, what, stream=True)

        chunks = []
        try:
            for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                chunks.append(chunk)
                if progress:
                    progress(len(chunk))
        except requests.RequestException as e:
            raise NetworkError(f"Download of {what} was interrupted: {e}") from e
        finally:
            response.close()

        data = b"".join(chunks)
        logger.debug("Fetched %s (%d bytes)", file.filename, len(data))
        return data
