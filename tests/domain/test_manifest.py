"""Tests for manifest result types and dependency-name rules."""

from __future__ import annotations

import pytest

from pkgverify.domain.manifest import (
    MalformedManifest,
    Manifest,
    UnreadableManifest,
    is_skipped_name,
)


class TestManifest:
    def test_accessors(self) -> None:
        m = Manifest("/x", {"name": "left-pad", "version": "1.2.0", "dependencies": {}})
        assert m.name == "left-pad"
        assert m.version == "1.2.0"
        assert m.section("dependencies") == {}
        assert m.section("peerDependencies") is None

    def test_non_string_version_is_none(self) -> None:
        assert Manifest("/x", {"version": 1}).version is None
        assert Manifest("/x", {}).version is None

    def test_result_variants_are_distinct(self) -> None:
        results = [Manifest("/x", {}), UnreadableManifest("/x"), MalformedManifest("/x")]
        assert [type(r).__name__ for r in results] == [
            "Manifest",
            "UnreadableManifest",
            "MalformedManifest",
        ]


class TestSkippedNames:
    @pytest.mark.parametrize(
        "name",
        ["@babel/core", "@types/node", "git+https://github.com/a/b.git", "http://x.test/y.tgz"],
    )
    def test_skipped(self, name: str) -> None:
        assert is_skipped_name(name) is True

    @pytest.mark.parametrize("name", ["left-pad", "lodash.merge", "a@b"])
    def test_not_skipped(self, name: str) -> None:
        assert is_skipped_name(name) is False
