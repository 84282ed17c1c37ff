"""CheckService — run verification for the CLI and report a ServiceResult.

Unlike the library presets, the service collects every issue instead of
stopping at the first one, so a single run surfaces the whole picture.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Any

import structlog

from pkgverify.errors import VerificationError
from pkgverify.infrastructure.filesystem import is_directory
from pkgverify.infrastructure.resolver import ModuleResolver
from pkgverify.services.policies import collect_policy, debug_enabled, stderr_debug
from pkgverify.services.result import ServiceError, ServiceResult
from pkgverify.services.verifier import Verifier

if TYPE_CHECKING:
    from pkgverify.config.settings import PkgVerifySettings
    from pkgverify.domain.issues import Issue

log = structlog.get_logger(__name__)


class CheckService:
    """Verify, resolve, and list search paths using the configured resolver."""

    def __init__(self, settings: PkgVerifySettings) -> None:
        self._settings = settings
        rcfg = settings.resolver
        self._resolver = ModuleResolver(
            exec_path=rcfg.node_executable,
            extra_paths=rcfg.extra_paths,
            use_global_paths=rcfg.global_paths,
        )

    def _start(self, directory: str | None) -> str:
        return os.path.abspath(directory or str(self._settings.root))

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def check(
        self,
        name: str | None = None,
        directory: str | None = None,
        *,
        fail_fast: bool = False,
    ) -> ServiceResult:
        """Verify *name* (or the package in *directory*) and report all issues."""
        start = self._start(directory)
        vcfg = self._settings.verify
        found: list[Issue] = []
        on_debug = stderr_debug if vcfg.debug or debug_enabled() else None
        verifier = Verifier(
            self._resolver,
            collect_policy(found, fail_fast=fail_fast, on_debug=on_debug),
            manifest_filename=vcfg.manifest_filename,
            binding_filename=vcfg.binding_filename,
        )

        aborted = False
        try:
            if name:
                verifier.verify(start, name)
            else:
                verifier.verify_directory(start)
        except VerificationError:
            aborted = True

        data: dict[str, Any] = {
            "package": name or os.path.basename(start),
            "directory": start,
            "issues": [issue.to_dict() for issue in found],
            "count": len(found),
            "packages": len(verifier.paths),
            "paths": verifier.paths,
            "bindings": verifier.bindings,
        }
        log.info("verify.finished", package=data["package"], issues=len(found))

        if not found:
            return ServiceResult(ok=True, op="verify", data=data)

        if aborted:
            code, message = "VERIFY_ABORTED", f"Stopped at first issue: {found[0].message}"
        else:
            code, message = "UNSATISFIED_DEPENDENCIES", f"{len(found)} dependency issue(s) found"
        return ServiceResult(
            ok=False,
            op="verify",
            data=data,
            error=ServiceError(code=code, message=message, detail=data),
        )

    def resolve(self, name: str, directory: str | None = None) -> ServiceResult:
        """Locate the installed directory of *name* as seen from *directory*."""
        start = self._start(directory)
        found = self._resolver.resolve(name, start)
        if found is None:
            return ServiceResult(
                ok=False,
                op="resolve",
                error=ServiceError(
                    code="NOT_FOUND",
                    message=f"Cannot find package {name!r} from {start}",
                    detail={"name": name, "from": start},
                ),
            )
        return ServiceResult(
            ok=True,
            op="resolve",
            data={"name": name, "from": start, "directory": found},
        )

    def search_paths(self, directory: str | None = None) -> ServiceResult:
        """List the ordered ``node_modules`` search path for *directory*."""
        start = self._start(directory)
        items = [
            {"path": path, "exists": is_directory(path)}
            for path in self._resolver.module_paths(start)
        ]
        return ServiceResult(
            ok=True,
            op="paths",
            data={"from": start, "items": items, "count": len(items)},
        )
