"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, pkgverify.toml only contains
overrides.  An empty (or absent) file verifies with Node's own rules.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from pkgverify.domain.types import BINDING_FILENAME, MANIFEST_FILENAME


class ResolverConfig(BaseModel):
    """[resolver] section."""

    model_config = {"frozen": True}

    global_paths: bool = True
    extra_paths: list[str] = Field(default_factory=list)
    node_executable: str | None = None


class VerifyConfig(BaseModel):
    """[verify] section."""

    model_config = {"frozen": True}

    manifest_filename: str = MANIFEST_FILENAME
    binding_filename: str = BINDING_FILENAME
    debug: bool = False

