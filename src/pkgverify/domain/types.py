"""Dependency fields, issue kinds, and on-disk layout names.

These enums define the three manifest dependency sections and the
error taxonomy reported by the verifier.
"""

from __future__ import annotations

from enum import StrEnum

MANIFEST_FILENAME = "package.json"
MODULES_DIRNAME = "node_modules"
BINDING_FILENAME = "binding.gyp"


class DependencyField(StrEnum):
    """Manifest sections that declare dependencies, in verification order."""

    DEPENDENCIES = "dependencies"
    PEER = "peerDependencies"
    OPTIONAL = "optionalDependencies"


class IssueKind(StrEnum):
    """Kinds of problems the verifier can report."""

    MISSING_MANIFEST = "missing_manifest"
    UNREADABLE_MANIFEST = "unreadable_manifest"
    MALFORMED_MANIFEST = "malformed_manifest"
    NAME_MISMATCH = "name_mismatch"
    INVALID_FIELD = "invalid_field"
    INVALID_NAME = "invalid_name"
    MISSING_DEPENDENCY = "missing_dependency"
    MISSING_OPTIONAL_DEPENDENCY = "missing_optional_dependency"
    NO_VERSION = "no_version"
    INVALID_VERSION = "invalid_version"
    UNMET_VERSION = "unmet_version"
