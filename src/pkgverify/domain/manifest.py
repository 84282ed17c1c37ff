"""Manifest read results as a tagged union.

Reading ``package.json`` has three outcomes: a decoded object, a file
that could not be read, or a file that could not be decoded. Each is a
distinct frozen type so callers dispatch with ``isinstance`` or
``match`` instead of comparing sentinel values.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Manifest:
    """A decoded manifest and the package directory it was read from."""

    directory: str
    data: dict[str, Any]

    @property
    def name(self) -> Any:
        return self.data.get("name")

    @property
    def version(self) -> str | None:
        """The declared version, or None when absent or not a string."""
        version = self.data.get("version")
        return version if isinstance(version, str) else None

    def section(self, name: str) -> Any:
        """Raw value of a top-level manifest field (None when absent)."""
        return self.data.get(name)


@dataclass(frozen=True)
class UnreadableManifest:
    """The manifest file is missing or could not be read."""

    directory: str
    reason: str = ""


@dataclass(frozen=True)
class MalformedManifest:
    """The manifest was read but is not a JSON object."""

    directory: str
    reason: str = ""


ManifestResult = Manifest | UnreadableManifest | MalformedManifest


def is_skipped_name(name: str) -> bool:
    """True for scoped (``@scope/pkg``) and URL-style dependency names.

    Examples:
        >>> is_skipped_name("@babel/core")
        True
        >>> is_skipped_name("git+https://example.com/x.git")
        True
        >>> is_skipped_name("left-pad")
        False
    """
    return name.startswith("@") or "://" in name
