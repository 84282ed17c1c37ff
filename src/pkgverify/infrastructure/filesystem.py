"""Read-only filesystem operations for installed packages.

Existence checks never raise: a missing path, a permission error, and a
path of the wrong type all report False.
"""

from __future__ import annotations

import json
import os
import stat

from pkgverify.domain.manifest import (
    MalformedManifest,
    Manifest,
    ManifestResult,
    UnreadableManifest,
)
from pkgverify.domain.types import BINDING_FILENAME, MANIFEST_FILENAME

# ---------------------------------------------------------------------------
# Existence checks
# ---------------------------------------------------------------------------


def is_directory(path: str) -> bool:
    """True if *path* exists and is a directory (following symlinks)."""
    try:
        return stat.S_ISDIR(os.stat(path).st_mode)
    except (OSError, ValueError):
        return False


def has_native_binding(directory: str, filename: str = BINDING_FILENAME) -> bool:
    """True if *directory* contains a regular native-build descriptor file.

    The descriptor itself is not followed if it is a symlink.
    """
    try:
        return stat.S_ISREG(os.lstat(os.path.join(directory, filename)).st_mode)
    except (OSError, ValueError):
        return False


# ---------------------------------------------------------------------------
# Manifest I/O
# ---------------------------------------------------------------------------


def read_manifest(directory: str, filename: str = MANIFEST_FILENAME) -> ManifestResult:
    """Read and decode ``<directory>/<filename>``.

    Returns :class:`Manifest` on success, :class:`UnreadableManifest` if the
    file cannot be read, or :class:`MalformedManifest` if it is not a UTF-8
    JSON object.
    """
    path = os.path.join(directory, filename)
    try:
        with open(path, "rb") as fh:
            raw = fh.read()
    except OSError as exc:
        return UnreadableManifest(directory, reason=exc.strerror or str(exc))

    try:
        data = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        return MalformedManifest(directory, reason=str(exc))

    if not isinstance(data, dict):
        return MalformedManifest(directory, reason=f"expected object, got {type(data).__name__}")
    return Manifest(directory, data)
