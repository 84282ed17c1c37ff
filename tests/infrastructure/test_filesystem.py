"""Tests for filesystem helpers."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from pkgverify.domain.manifest import MalformedManifest, Manifest, UnreadableManifest
from pkgverify.infrastructure.filesystem import has_native_binding, is_directory, read_manifest


class TestIsDirectory:
    def test_directory(self, tmp_path: Path) -> None:
        assert is_directory(str(tmp_path)) is True

    def test_file(self, tmp_path: Path) -> None:
        f = tmp_path / "f"
        f.write_text("x")
        assert is_directory(str(f)) is False

    def test_missing(self, tmp_path: Path) -> None:
        assert is_directory(str(tmp_path / "nope")) is False

    def test_nul_byte_does_not_raise(self) -> None:
        assert is_directory("bad\0path") is False


class TestReadManifest:
    def test_reads_object(self, tmp_path: Path) -> None:
        (tmp_path / "package.json").write_text('{"name": "a", "version": "1.0.0"}')
        result = read_manifest(str(tmp_path))
        assert isinstance(result, Manifest)
        assert result.name == "a"
        assert result.directory == str(tmp_path)

    def test_missing_file_is_unreadable(self, tmp_path: Path) -> None:
        assert isinstance(read_manifest(str(tmp_path)), UnreadableManifest)

    def test_invalid_json_is_malformed(self, tmp_path: Path) -> None:
        (tmp_path / "package.json").write_text("{not json")
        assert isinstance(read_manifest(str(tmp_path)), MalformedManifest)

    def test_non_object_is_malformed(self, tmp_path: Path) -> None:
        (tmp_path / "package.json").write_text("[1, 2]")
        result = read_manifest(str(tmp_path))
        assert isinstance(result, MalformedManifest)
        assert "list" in result.reason

    def test_bad_utf8_is_malformed(self, tmp_path: Path) -> None:
        (tmp_path / "package.json").write_bytes(b'{"name": "\xff"}')
        assert isinstance(read_manifest(str(tmp_path)), MalformedManifest)

    def test_custom_filename(self, tmp_path: Path) -> None:
        (tmp_path / "manifest.json").write_text('{"name": "a"}')
        assert isinstance(read_manifest(str(tmp_path), "manifest.json"), Manifest)


class TestHasNativeBinding:
    def test_regular_file(self, tmp_path: Path) -> None:
        (tmp_path / "binding.gyp").write_text("{}")
        assert has_native_binding(str(tmp_path)) is True

    def test_absent(self, tmp_path: Path) -> None:
        assert has_native_binding(str(tmp_path)) is False

    def test_directory_is_not_a_binding(self, tmp_path: Path) -> None:
        (tmp_path / "binding.gyp").mkdir()
        assert has_native_binding(str(tmp_path)) is False

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
    def test_symlink_is_not_followed(self, tmp_path: Path) -> None:
        target = tmp_path / "real.gyp"
        target.write_text("{}")
        (tmp_path / "binding.gyp").symlink_to(target)
        assert has_native_binding(str(tmp_path)) is False
