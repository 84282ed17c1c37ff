"""Shared pytest fixtures and test helpers for pkg-verify tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from pkgverify.domain.issues import Issue
from pkgverify.infrastructure.resolver import ModuleResolver
from pkgverify.services.policies import collect_policy
from pkgverify.services.verifier import Verifier


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host Node configuration out of every test."""
    for var in ("NODE_PATH", "NODE_DEBUG", "PKGVERIFY_CONFIG"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def resolver() -> ModuleResolver:
    """Resolver limited to local ``node_modules`` lookups."""
    return ModuleResolver(use_global_paths=False)


@pytest.fixture
def issues() -> list[Issue]:
    return []


@pytest.fixture
def traces() -> list[str]:
    return []


@pytest.fixture
def verifier(resolver: ModuleResolver, issues: list[Issue], traces: list[str]) -> Verifier:
    """Verifier that collects issues and debug traces instead of raising."""
    return Verifier(resolver, collect_policy(issues, on_debug=traces.append))


@pytest.fixture
def _isolated_project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp directory and drop global search paths."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("PKGVERIFY_RESOLVER__GLOBAL_PATHS", "false")


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def write_package(
    directory: Path,
    name: str,
    version: str | None = "1.0.0",
    **fields: Any,
) -> Path:
    """Write ``package.json`` into *directory*, creating it as needed."""
    directory.mkdir(parents=True, exist_ok=True)
    data: dict[str, Any] = {"name": name}
    if version is not None:
        data["version"] = version
    data.update(fields)
    (directory / "package.json").write_text(json.dumps(data), encoding="utf-8")
    return directory


def install(parent: Path, name: str, version: str | None = "1.0.0", **fields: Any) -> Path:
    """Install package *name* under ``<parent>/node_modules``."""
    return write_package(parent / "node_modules" / name, name, version, **fields)


def kinds(found: list[Issue]) -> list[str]:
    return [issue.kind.value for issue in found]
