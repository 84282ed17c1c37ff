"""Semantic version checks, delegated to ``node-semver``.

Only two operations are needed: whether an installed version string is a
valid semver, and whether it satisfies a declared npm range.  Both use
npm's strict (non-loose) parsing.
"""

from __future__ import annotations

import nodesemver


def is_valid_version(version: str) -> bool:
    """True if *version* parses as a strict semantic version."""
    try:
        return nodesemver.parse(version, loose=False) is not None
    except (ValueError, TypeError):
        return False


def satisfies(version: str, expect: str) -> bool:
    """True if *version* is within the npm range *expect*.

    A range that cannot be parsed is never satisfied.
    """
    try:
        return bool(nodesemver.satisfies(version, expect, loose=False))
    except (ValueError, TypeError):
        return False
