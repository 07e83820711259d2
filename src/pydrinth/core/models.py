from datetime import datetime
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, TypeAdapter, field_validator


class BaseAPIModel(BaseModel):
    model_config = {"extra": "ignore"}


class SearchQuery(BaseModel):
    query: str
    game_version: str | None = None
    categories: list[str] = Field(default_factory=list)
    project_type: str = "mod"
    limit: int = Field(default=10, ge=1, le=10)
    index: str = "relevance"

    @field_validator("query")
    @classmethod
    def _strip_query(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("query must not be empty")
        return value


class Hit(BaseAPIModel):
    project_id: str
    slug: str
    title: str
    description: str = ""
    project_type: str | None = None
    author: str | None = None
    categories: list[str] = Field(default_factory=list)
    versions: list[str] = Field(default_factory=list)
    downloads: int | None = None


class SearchResult(BaseAPIModel):
    hits: list[Hit] = Field(default_factory=list)
    total_hits: int | None = None


class Project(BaseAPIModel):
    id: str
    slug: str
    title: str
    body: str
    description: str = ""
    project_type: str | None = None
    categories: list[str] = Field(default_factory=list)
    loaders: list[str] = Field(default_factory=list)
    game_versions: list[str] = Field(default_factory=list)
    downloads: int | None = None


class Dependency(BaseAPIModel):
    dependency_type: Literal["required", "optional", "incompatible", "embedded"]
    project_id: str | None = None
    version_id: str | None = None
    file_name: str | None = None


class File(BaseAPIModel):
    url: str
    filename: str
    primary: bool = False
    hashes: dict[str, str] = Field(default_factory=dict)
    size: int | None = None


class ProjectVersion(BaseAPIModel):
    id: str
    project_id: str
    version_number: str
    name: str | None = None
    version_type: str | None = None
    date_published: datetime | None = None
    dependencies: list[Dependency] = Field(default_factory=list)
    files: list[File] = Field(default_factory=list)
    game_versions: list[str] = Field(default_factory=list)
    loaders: list[str] = Field(default_factory=list)

    def supports(self, game_version: str, loader: str) -> bool:
        loader = loader.lower()
        return game_version in self.game_versions and loader in (
            name.lower() for name in self.loaders
        )


class InstallTarget(BaseModel):
    directory: Path
    filename: str

    @property
    def path(self) -> Path:
        return self.directory / self.filename


ProjectVersionList = TypeAdapter(list[ProjectVersion])
ProjectList = TypeAdapter(list[Project])

__all__ = [
    "SearchQuery",
    "Hit",
    "SearchResult",
    "Project",
    "Dependency",
    "File",
    "ProjectVersion",
    "ProjectVersionList",
    "ProjectList",
    "InstallTarget",
]
