"""Exceptions raised by the default and tagged error policies."""

from __future__ import annotations

from typing import Any

from pkgverify.domain.issues import Issue


class VerificationError(Exception):
    """A dependency problem raised out of the verifier.

    ``str(err)`` is the human-readable message; the originating
    :class:`~pkgverify.domain.issues.Issue` is kept on ``err.issue``.
    """

    def __init__(self, issue: Issue) -> None:
        super().__init__(issue.message)
        self.issue = issue

    @property
    def kind(self) -> str:
        return self.issue.kind.value


class PackageVerifyError(VerificationError):
    """Tagged variant with a stable machine-readable ``code``."""

    code = "ERR_PKGVERIFY"

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "kind": self.kind, **self.issue.to_dict()}
