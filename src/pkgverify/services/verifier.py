"""Verifier — walk a package's dependency graph and check it on disk.

For every declared dependency the verifier resolves the installed
directory from the *dependent's* directory (so nested installs of
different versions are each checked against their own requester),
reads its ``package.json`` and matches the installed version against
the declared range.  Nothing is ever loaded or executed.

INVARIANT: each package directory is verified at most once per
:class:`VerificationState`.  Directories are marked visited before
their dependencies are walked, which makes cycles terminate.

Problems go to ``policy.on_error`` and the walk continues past them
unless the hook raises.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

from pkgverify.domain import issues
from pkgverify.domain.manifest import (
    MalformedManifest,
    Manifest,
    ManifestResult,
    UnreadableManifest,
    is_skipped_name,
)
from pkgverify.domain.types import BINDING_FILENAME, MANIFEST_FILENAME, DependencyField
from pkgverify.domain.versions import is_valid_version, satisfies
from pkgverify.infrastructure.filesystem import has_native_binding, is_directory, read_manifest
from pkgverify.infrastructure.resolver import ModuleResolver
from pkgverify.services.policies import VerifyPolicy, raise_policy

logger = logging.getLogger(__name__)


@dataclass
class VerificationState:
    """Mutable bookkeeping for one verification run.

    Attributes:
        visited: Package directories already verified.
        native_binding_packages: Basenames of visited directories that ship
            a native-build descriptor.
        manifests: Manifest read results by directory, so no manifest is
            read twice within the run.
    """

    visited: set[str] = field(default_factory=set)
    native_binding_packages: set[str] = field(default_factory=set)
    manifests: dict[str, ManifestResult] = field(default_factory=dict)


class Verifier:
    """Dependency graph verifier.

    Usage::

        verifier = Verifier(policy=warn_policy())
        state = verifier.verify("/srv/app", "my-app")
        state.visited  # every package directory that was checked
    """

    def __init__(
        self,
        resolver: ModuleResolver | None = None,
        policy: VerifyPolicy | None = None,
        *,
        manifest_filename: str = MANIFEST_FILENAME,
        binding_filename: str = BINDING_FILENAME,
    ) -> None:
        self.resolver = resolver or ModuleResolver()
        self.policy = policy or raise_policy(debug=False)
        self.manifest_filename = manifest_filename
        self.binding_filename = binding_filename
        self.state: VerificationState | None = None

    # ------------------------------------------------------------------
    # Last-run accessors
    # ------------------------------------------------------------------

    @property
    def paths(self) -> list[str]:
        """Directories verified by the most recent run."""
        return sorted(self.state.visited) if self.state else []

    @property
    def bindings(self) -> list[str]:
        """Packages with native bindings seen by the most recent run."""
        return sorted(self.state.native_binding_packages) if self.state else []

    # ------------------------------------------------------------------
    # Hooks
    # ------------------------------------------------------------------

    def _debug(self, message: str) -> None:
        logger.debug(message)
        if self.policy.on_debug is not None:
            self.policy.on_debug(message)

    def _error(self, issue: issues.Issue) -> None:
        self.policy.on_error(issue)

    def _load(self, directory: str, state: VerificationState) -> ManifestResult:
        result = state.manifests.get(directory)
        if result is None:
            result = read_manifest(directory, self.manifest_filename)
            state.manifests[directory] = result
        return result

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def verify(
        self,
        start_directory: str,
        package_name: str,
        *,
        state: VerificationState | None = None,
    ) -> VerificationState:
        """Verify *package_name* as resolved from *start_directory*.

        A fresh :class:`VerificationState` is used unless *state* is given,
        in which case directories it already holds are not checked again.
        """
        state = state if state is not None else VerificationState()
        self.state = state

        moddir = self.resolver.resolve(package_name, start_directory)
        if moddir is None:
            self._error(issues.missing_manifest(package_name))
            return state

        self._debug(f"Opening main package.json in {moddir}.")
        manifest = self._load_root(package_name, moddir, state)
        if manifest is None:
            return state

        if manifest.name != package_name:
            self._error(issues.name_mismatch(package_name, manifest.name, moddir))

        self._debug(f"Opened package.json for {manifest.name}.")
        self.verify_package(manifest, state)
        return state

    def verify_directory(
        self,
        directory: str,
        *,
        state: VerificationState | None = None,
    ) -> VerificationState:
        """Verify the package whose ``package.json`` lives in *directory*.

        No name lookup takes place, so there is no name check.
        """
        state = state if state is not None else VerificationState()
        self.state = state

        moddir = self.resolver.platform.absolute(directory)
        if not is_directory(moddir):
            self._error(issues.missing_manifest(os.path.basename(moddir)))
            return state

        self._debug(f"Opening main package.json in {moddir}.")
        manifest = self._load_root(os.path.basename(moddir), moddir, state)
        if manifest is not None:
            self.verify_package(manifest, state)
        return state

    def _load_root(self, name: str, moddir: str, state: VerificationState) -> Manifest | None:
        result = self._load(moddir, state)
        if isinstance(result, UnreadableManifest):
            self._error(issues.unreadable_root(name, moddir))
            return None
        if isinstance(result, MalformedManifest):
            self._error(issues.malformed_root(name, moddir))
            return None
        return result

    # ------------------------------------------------------------------
    # Graph walk
    # ------------------------------------------------------------------

    def verify_package(self, manifest: Manifest, state: VerificationState) -> None:
        """Verify *manifest* and everything reachable from it.

        Uses an explicit stack so long dependency chains are not bounded
        by the interpreter's recursion limit.
        """
        stack = [manifest]
        while stack:
            pkg = stack.pop()
            if pkg.directory in state.visited:
                continue
            state.visited.add(pkg.directory)

            if has_native_binding(pkg.directory, self.binding_filename):
                state.native_binding_packages.add(os.path.basename(pkg.directory))

            self._debug(f"Verifying package {pkg.name} at {pkg.directory}.")

            children: list[Manifest] = []
            for dep_field in DependencyField:
                deps = pkg.section(dep_field)
                if deps is None:
                    continue
                if not isinstance(deps, dict):
                    self._error(issues.invalid_field(dep_field, pkg.directory))
                    continue
                for name, expect in deps.items():
                    child = self.verify_dependency(dep_field, name, expect, pkg.directory, state)
                    if child is not None and child.directory not in state.visited:
                        children.append(child)

            self._debug(f"Package {pkg.name} is valid!")
            # Reversed so the first declared dependency is walked first.
            stack.extend(reversed(children))

    def verify_dependency(
        self,
        dep_field: DependencyField,
        name: str,
        expect: object,
        dependent: str,
        state: VerificationState,
    ) -> Manifest | None:
        """Check one declared dependency of the package in *dependent*.

        Returns the dependency's manifest when its own dependencies should
        be walked, or None.
        """
        if not name:
            self._error(issues.invalid_name(dep_field, dependent))
            return None

        if is_skipped_name(name):
            return None

        if not isinstance(expect, str):
            self._error(issues.invalid_range(dep_field, name, dependent))
            return None

        moddir = self.resolver.resolve(name, dependent)
        if moddir is None:
            if dep_field is DependencyField.OPTIONAL:
                self._debug(issues.missing_optional(name, expect, dependent).message)
            else:
                self._error(issues.missing_dependency(name, expect, dependent))
            return None

        self._debug(f"Opening sub package.json in {moddir}.")
        result = self._load(moddir, state)

        if isinstance(result, UnreadableManifest):
            self._error(issues.unreadable_dependency(name, expect, moddir))
            return None
        if isinstance(result, MalformedManifest):
            self._error(issues.malformed_dependency(name, expect, moddir))
            return None

        version = result.version
        if version is None:
            self._error(issues.no_version(name, expect, moddir))
            return None

        if not is_valid_version(version):
            self._error(issues.invalid_version(name, expect, version, moddir))
        elif not satisfies(version, expect):
            self._error(issues.unmet_version(name, expect, version, moddir))
        else:
            self._debug(f"Valid version: {name}@{version} satisfies {expect}.")

        return result
