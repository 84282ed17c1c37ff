"""Issue records passed to the verifier's error hook.

Constructors keep the wording of every message in one place so the
CLI, the library presets, and the tests all see identical text.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pkgverify.domain.types import IssueKind


@dataclass(frozen=True)
class Issue:
    """A single verification problem.

    Attributes:
        kind: Taxonomy entry for the problem.
        message: Human-readable description (also ``str(issue)``).
        package: Package name the problem concerns, when known.
        directory: Package directory the problem was found in, when known.
    """

    kind: IssueKind
    message: str
    package: str | None = None
    directory: str | None = None

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "message": self.message,
            "package": self.package,
            "directory": self.directory,
        }


def _spec(name: str, expect: str) -> str:
    return f"{name}@{expect}"


def missing_manifest(name: str) -> Issue:
    return Issue(IssueKind.MISSING_MANIFEST, "Missing package.json!", package=name)


def unreadable_root(name: str, directory: str) -> Issue:
    return Issue(
        IssueKind.UNREADABLE_MANIFEST,
        "Could not open package.json!",
        package=name,
        directory=directory,
    )


def malformed_root(name: str, directory: str) -> Issue:
    return Issue(
        IssueKind.MALFORMED_MANIFEST,
        "Malformed package.json!",
        package=name,
        directory=directory,
    )


def name_mismatch(requested: str, declared: Any, directory: str) -> Issue:
    return Issue(
        IssueKind.NAME_MISMATCH,
        f"Package name mismatch: {requested} != {declared}.",
        package=requested,
        directory=directory,
    )


def invalid_field(field: str, directory: str) -> Issue:
    return Issue(
        IssueKind.INVALID_FIELD,
        f"Invalid field in package.json: {field}.",
        directory=directory,
    )


def invalid_range(field: str, name: str, directory: str) -> Issue:
    return Issue(
        IssueKind.INVALID_FIELD,
        f"Invalid field in {field}: {name}.",
        package=name,
        directory=directory,
    )


def invalid_name(field: str, directory: str) -> Issue:
    return Issue(IssueKind.INVALID_NAME, f"Invalid name in {field}.", directory=directory)


def missing_dependency(name: str, expect: str, directory: str) -> Issue:
    return Issue(
        IssueKind.MISSING_DEPENDENCY,
        f"Missing dependency: {_spec(name, expect)}.",
        package=name,
        directory=directory,
    )


def missing_optional(name: str, expect: str, directory: str) -> Issue:
    return Issue(
        IssueKind.MISSING_OPTIONAL_DEPENDENCY,
        f"Missing optional dependency: {_spec(name, expect)}.",
        package=name,
        directory=directory,
    )


def unreadable_dependency(name: str, expect: str, directory: str) -> Issue:
    return Issue(
        IssueKind.UNREADABLE_MANIFEST,
        f"Cannot access package.json: {_spec(name, expect)}.",
        package=name,
        directory=directory,
    )


def malformed_dependency(name: str, expect: str, directory: str) -> Issue:
    return Issue(
        IssueKind.MALFORMED_MANIFEST,
        f"Malformed package.json: {_spec(name, expect)}.",
        package=name,
        directory=directory,
    )


def no_version(name: str, expect: str, directory: str) -> Issue:
    return Issue(
        IssueKind.NO_VERSION,
        f"No version in package.json: {_spec(name, expect)}.",
        package=name,
        directory=directory,
    )


def invalid_version(name: str, expect: str, version: str, directory: str) -> Issue:
    return Issue(
        IssueKind.INVALID_VERSION,
        f"Invalid version for {_spec(name, expect)}: {version}.",
        package=name,
        directory=directory,
    )


def unmet_version(name: str, expect: str, version: str, directory: str) -> Issue:
    return Issue(
        IssueKind.UNMET_VERSION,
        f"Unmet dependency version {_spec(name, expect)}: {version}.",
        package=name,
        directory=directory,
    )
