"""Tests for the API response models."""

from pydantic import ValidationError
import pytest

from pydrinth.core import Dependency, Hit, ProjectVersion, SearchQuery


class TestSearchQuery:
    def test_defaults(self):
        query = SearchQuery(query="  sodium ")
        assert query.query == "sodium"
        assert query.limit == 10
        assert query.categories == []
        assert query.project_type == "mod"

    def test_blank_query_rejected(self):
        with pytest.raises(ValidationError):
            SearchQuery(query="   ")

    @pytest.mark.parametrize("limit", [0, 11])
    def test_limit_bounds(self, limit):
        with pytest.raises(ValidationError):
            SearchQuery(query="iris", limit=limit)


class TestResponseModels:
    def test_hit_ignores_unknown_fields(self):
        hit = Hit.model_validate(
            {
                "project_id": "AANobbMI",
                "slug": "sodium",
                "title": "Sodium",
                "icon_url": "https://cdn.modrinth.com/icon.png",
                "follows": 20000,
            }
        )
        assert hit.description == ""

    def test_unknown_dependency_type_rejected(self):
        with pytest.raises(ValidationError):
            Dependency.model_validate({"project_id": "x", "dependency_type": "suggested"})

    def test_version_supports(self, version_data):
        version = ProjectVersion.model_validate(
            version_data("v", game_versions=["1.20.1", "1.20.2"], loaders=["Fabric", "quilt"])
        )
        assert version.supports("1.20.2", "fabric")
        assert not version.supports("1.20.2", "forge")
        assert not version.supports("1.21", "quilt")
