"""Locate ``pkgverify.toml`` for a verification run.

The file is looked up next to the package being checked and in each
parent directory, so one file at a monorepo root covers every package
below it.  ``PKGVERIFY_CONFIG`` pins a file explicitly.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "pkgverify.toml"
CONFIG_ENV_VAR = "PKGVERIFY_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file governing *start* (default: cwd), or None.

    A non-empty ``PKGVERIFY_CONFIG`` takes precedence over the walk-up; if
    it names a missing file no config is used at all.
    """
    pinned = os.environ.get(CONFIG_ENV_VAR)
    if pinned:
        path = Path(pinned)
        return path if path.is_file() else None

    directory = (start or Path.cwd()).resolve()
    for candidate_dir in (directory, *directory.parents):
        candidate = candidate_dir / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
