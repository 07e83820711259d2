from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timezone
import logging

from pydrinth.core.errors import NotFoundError
from pydrinth.core.models import Dependency, ProjectVersion

logger = logging.getLogger(__name__)

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


def _published(version: ProjectVersion) -> datetime:
    published = version.date_published
    if published is None:
        return _EPOCH
    if published.tzinfo is None:
        return published.replace(tzinfo=timezone.utc)
    return published


class VersionResolver:
    """
    Picks the version of a project matching one Minecraft version + loader pair.

    This is a filter over an already fetched version list: no transitive
    expansion, no version ranges.
    """

    def __init__(self, *, mc_version: str, loader: str) -> None:
        self.mc_version = mc_version
        self.loader = loader

    def select_version(self, versions: Iterable[ProjectVersion], project: str) -> ProjectVersion:
        """
        Most recently published match wins; equal or missing dates keep the
        first one in response order.
        """
        selected: ProjectVersion | None = None

        for v in versions:
            if not v.supports(self.mc_version, self.loader):
                continue
            if selected is None or _published(v) > _published(selected):
                selected = v

        if selected is None:
            raise NotFoundError(
                f"No version of '{project}' for Minecraft {self.mc_version} on {self.loader}"
            )

        logger.debug(
            "Selected %s %s (%s) for %s/%s",
            project,
            selected.version_number,
            selected.id,
            self.mc_version,
            self.loader,
        )
        return selected

    def resolve(
        self, versions: Iterable[ProjectVersion], project: str
    ) -> tuple[ProjectVersion, list[Dependency]]:
        """Return the selected version and its dependency list exactly as published."""
        version = self.select_version(versions, project)
        return version, list(version.dependencies)
