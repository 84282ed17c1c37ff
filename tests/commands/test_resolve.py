"""Tests for the resolve and paths commands."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from pkgverify.cli import cli
from tests.conftest import install


@pytest.mark.usefixtures("_isolated_project")
class TestResolveCommand:
    def test_found(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        dep = install(tmp_path, "dep")

        result = cli_runner.invoke(cli, ["--json", "resolve", "dep"])

        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["data"]["directory"] == str(dep)

    def test_quiet_prints_directory(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        dep = install(tmp_path, "dep")
        nested = tmp_path / "src" / "lib"
        nested.mkdir(parents=True)

        result = cli_runner.invoke(cli, ["-q", "resolve", "dep", "-C", str(nested)])

        assert result.exit_code == 0
        assert result.output.strip() == str(dep)

    def test_not_found(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "resolve", "ghost"])
        assert result.exit_code == 1
        assert json.loads(result.output)["error"]["code"] == "NOT_FOUND"


@pytest.mark.usefixtures("_isolated_project")
class TestPathsCommand:
    def test_lists_in_order(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["--json", "paths"])

        assert result.exit_code == 0, result.output
        items = json.loads(result.output)["data"]["items"]
        assert items[0]["path"] == str(tmp_path / "node_modules")
        assert items[-1]["path"] == "/node_modules"

    def test_quiet(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["-q", "paths"])
        lines = result.output.splitlines()
        assert lines[0] == str(tmp_path / "node_modules")

    def test_extra_paths_from_env(
        self, cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("PKGVERIFY_RESOLVER__EXTRA_PATHS", '["/opt/shared"]')
        result = cli_runner.invoke(cli, ["-q", "paths"])
        assert result.output.splitlines()[-1] == "/opt/shared"

    def test_extra_paths_from_config_beside_directory(
        self, cli_runner: CliRunner, tmp_path: Path
    ) -> None:
        project = tmp_path / "web"
        project.mkdir()
        (project / "pkgverify.toml").write_text('[resolver]\nextra_paths = ["/opt/web"]\n')

        result = cli_runner.invoke(cli, ["-q", "paths", "-C", str(project)])

        assert result.output.splitlines()[-1] == "/opt/web"
