"""Tests for version selection and dependency extraction."""

import pytest

from pydrinth.core import NotFoundError, VersionResolver


@pytest.fixture
def resolver():
    return VersionResolver(mc_version="1.20.1", loader="fabric")


class TestSelectVersion:
    def test_single_match(self, resolver, version_factory):
        versions = [
            version_factory("forge-build", game_versions=["1.20.1"], loaders=["forge"]),
            version_factory("fabric-build", game_versions=["1.20.1"], loaders=["fabric"]),
            version_factory("old-build", game_versions=["1.19.2"], loaders=["fabric"]),
        ]

        assert resolver.select_version(versions, "sodium").id == "fabric-build"

    def test_requires_both_version_and_loader(self, resolver, version_factory):
        versions = [
            version_factory("a", game_versions=["1.20.1"], loaders=["quilt"]),
            version_factory("b", game_versions=["1.20.4"], loaders=["fabric"]),
        ]

        with pytest.raises(NotFoundError) as exc_info:
            resolver.select_version(versions, "sodium")

        message = str(exc_info.value)
        assert "sodium" in message
        assert "1.20.1" in message
        assert "fabric" in message

    def test_empty_list(self, resolver):
        with pytest.raises(NotFoundError):
            resolver.select_version([], "sodium")

    def test_most_recent_match_wins(self, resolver, version_factory):
        versions = [
            version_factory(
                "older",
                game_versions=["1.20.1"],
                loaders=["fabric"],
                date_published="2023-06-01T10:00:00Z",
            ),
            version_factory(
                "newest",
                game_versions=["1.20", "1.20.1"],
                loaders=["fabric", "quilt"],
                date_published="2024-02-10T08:30:00Z",
            ),
            version_factory(
                "middle",
                game_versions=["1.20.1"],
                loaders=["fabric"],
                date_published="2023-12-24T00:00:00Z",
            ),
        ]

        assert resolver.select_version(versions, "sodium").id == "newest"

    def test_tie_keeps_response_order(self, resolver, version_factory):
        versions = [
            version_factory("first", game_versions=["1.20.1"], loaders=["fabric"]),
            version_factory("second", game_versions=["1.20.1"], loaders=["fabric"]),
        ]

        assert resolver.select_version(versions, "sodium").id == "first"

    def test_missing_dates_keep_response_order(self, resolver, version_factory):
        versions = [
            version_factory(
                "first", game_versions=["1.20.1"], loaders=["fabric"], date_published=None
            ),
            version_factory(
                "second", game_versions=["1.20.1"], loaders=["fabric"], date_published=None
            ),
        ]

        assert resolver.select_version(versions, "sodium").id == "first"

    def test_loader_is_case_insensitive(self, version_factory):
        resolver = VersionResolver(mc_version="1.20.1", loader="Fabric")
        versions = [version_factory("a", game_versions=["1.20.1"], loaders=["fabric"])]

        assert resolver.select_version(versions, "sodium").id == "a"


class TestResolve:
    def test_dependencies_passed_through(self, resolver, version_factory):
        versions = [
            version_factory(
                "sodium-0.5",
                game_versions=["1.20.1"],
                loaders=["fabric"],
                dependencies=[{"project_id": "fabric-api", "dependency_type": "required"}],
            )
        ]

        version, deps = resolver.resolve(versions, "sodium")

        assert version.id == "sodium-0.5"
        assert len(deps) == 1
        assert deps[0].project_id == "fabric-api"
        assert deps[0].dependency_type == "required"

    def test_all_dependency_types_kept(self, resolver, version_factory):
        raw = [
            {"project_id": "a", "dependency_type": "required"},
            {"project_id": "b", "version_id": "b-1", "dependency_type": "optional"},
            {"project_id": "c", "dependency_type": "incompatible"},
            {"file_name": "bundled.jar", "dependency_type": "embedded"},
        ]
        versions = [
            version_factory(
                "v", game_versions=["1.20.1"], loaders=["fabric"], dependencies=raw
            )
        ]

        _, deps = resolver.resolve(versions, "sodium")

        assert [d.dependency_type for d in deps] == [
            "required",
            "optional",
            "incompatible",
            "embedded",
        ]
        assert deps[1].version_id == "b-1"
        assert deps[3].project_id is None
        assert deps[3].file_name == "bundled.jar"

    def test_no_match_raises(self, resolver, version_factory):
        versions = [version_factory("v", game_versions=["1.18.2"], loaders=["forge"])]

        with pytest.raises(NotFoundError):
            resolver.resolve(versions, "sodium")
