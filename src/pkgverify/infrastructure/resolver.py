"""Node-style module path resolution.

Finds the directory a CommonJS loader would load a bare package name
from, starting at an arbitrary directory.  The search order is:

  1. ``<dir>/node_modules`` for the start directory and every ancestor,
     skipping ancestors that are themselves named ``node_modules``
  2. ``NODE_PATH`` entries, then any configured extra paths
  3. ``~/.node_modules`` and ``~/.node_libraries``
  4. ``<prefix>/lib/node`` next to the Node executable

Path syntax differs by platform, so the rules live in two strategy
classes (:class:`PosixSearchPaths`, :class:`WindowsSearchPaths`) selected
once via :func:`search_paths_for_platform`.  Everything is computed on
strings so either strategy can be exercised on any host.
"""

from __future__ import annotations

import logging
import ntpath
import os
import posixpath
import shutil
import sys
from collections.abc import Iterable, Mapping
from types import ModuleType

from pkgverify.domain.types import MODULES_DIRNAME
from pkgverify.infrastructure.filesystem import is_directory

logger = logging.getLogger(__name__)

NODE_PATH_ENV_VAR = "NODE_PATH"


# ---------------------------------------------------------------------------
# Platform strategies
# ---------------------------------------------------------------------------


class SearchPaths:
    """Platform-specific path rules used by :class:`ModuleResolver`."""

    pathmod: ModuleType = posixpath
    sep: str = "/"
    delimiter: str = ":"
    separators: str = "/"
    home_var: str = "HOME"

    def absolute(self, *parts: str) -> str:
        """Join *parts* and normalize to an absolute path."""
        return self.pathmod.abspath(self.pathmod.join(*parts))

    def is_path_name(self, name: str) -> bool:
        """True if *name* is a relative or absolute path, not a package name."""
        return name[:1] == "." or name[:1] == "/"

    def is_root(self, path: str) -> bool:
        raise NotImplementedError

    def local_paths(self, start: str) -> list[str]:
        """``node_modules`` candidates for *start* and each of its ancestors."""
        start = self.absolute(start)
        if self.is_root(start):
            return [start + MODULES_DIRNAME]
        return self._ancestor_paths(start)

    def _ancestor_paths(self, start: str) -> list[str]:
        paths: list[str] = []
        last = len(start)
        for i in range(len(start) - 1, -1, -1):
            if start[i] not in self.separators:
                continue
            if start[i + 1 : last] != MODULES_DIRNAME:
                paths.append(start[:last] + self.sep + MODULES_DIRNAME)
            last = i
        return paths

    def prefix(self, exec_path: str) -> str:
        """Installation prefix of the Node executable at *exec_path*."""
        raise NotImplementedError

    def global_paths(
        self,
        *,
        env: Mapping[str, str],
        home: str | None = None,
        exec_path: str | None = None,
        extra_paths: Iterable[str] = (),
    ) -> list[str]:
        """Global fallback search paths, in lookup order."""
        paths = [p for p in env.get(NODE_PATH_ENV_VAR, "").split(self.delimiter) if p]
        paths.extend(p for p in extra_paths if p)

        if home is None:
            home = env.get(self.home_var)
        if home:
            paths.append(self.absolute(home, ".node_modules"))
            paths.append(self.absolute(home, ".node_libraries"))

        if exec_path:
            paths.append(self.absolute(self.prefix(exec_path), "lib", "node"))
        return paths


class PosixSearchPaths(SearchPaths):
    """POSIX rules: ``/`` separator, ``:`` delimiter, root is ``/``."""

    def is_root(self, path: str) -> bool:
        return path == "/"

    def _ancestor_paths(self, start: str) -> list[str]:
        paths = super()._ancestor_paths(start)
        paths.append("/" + MODULES_DIRNAME)
        return paths

    def prefix(self, exec_path: str) -> str:
        return self.absolute(exec_path, "..", "..")


class WindowsSearchPaths(SearchPaths):
    """Windows rules: ``\\`` separator, ``;`` delimiter, drive roots ``X:\\``."""

    pathmod = ntpath
    sep = "\\"
    delimiter = ";"
    separators = "\\/:"
    home_var = "USERPROFILE"

    def is_path_name(self, name: str) -> bool:
        return name[:1] in (".", "/", "\\")

    def is_root(self, path: str) -> bool:
        return path.endswith(":\\")

    def prefix(self, exec_path: str) -> str:
        return self.absolute(exec_path, "..")


def _node_executable() -> str | None:
    """Resolved path of the ``node`` binary on PATH, as Node reports its own."""
    found = shutil.which("node")
    return os.path.realpath(found) if found else None


def search_paths_for_platform(platform: str | None = None) -> SearchPaths:
    """Pick the path strategy for *platform* (default: the running one)."""
    if (platform or sys.platform) == "win32":
        return WindowsSearchPaths()
    return PosixSearchPaths()


# ---------------------------------------------------------------------------
# Resolver
# ---------------------------------------------------------------------------


class ModuleResolver:
    """Locate installed package directories the way Node's loader would.

    Global paths are computed once at construction.  *env*, *home* and
    *exec_path* default to the running process; pass them explicitly to
    isolate tests from the host environment.

    Usage::

        resolver = ModuleResolver()
        resolver.resolve("left-pad", "/srv/app")
        # -> "/srv/app/node_modules/left-pad" or None
    """

    def __init__(
        self,
        platform: SearchPaths | None = None,
        *,
        env: Mapping[str, str] | None = None,
        home: str | None = None,
        exec_path: str | None = None,
        extra_paths: Iterable[str] = (),
        use_global_paths: bool = True,
    ) -> None:
        self.platform = platform or search_paths_for_platform()
        if use_global_paths:
            if env is None:
                env = os.environ
            if exec_path is None:
                exec_path = _node_executable()
            self.global_paths = self.platform.global_paths(
                env=env,
                home=home,
                exec_path=exec_path,
                extra_paths=extra_paths,
            )
        else:
            self.global_paths = [p for p in extra_paths if p]
        logger.debug("Found global paths: %s", self.global_paths)

    def module_paths(self, from_directory: str) -> list[str]:
        """Ordered candidate roots for resolving a bare name from *from_directory*."""
        return self.platform.local_paths(from_directory) + self.global_paths

    def resolve(self, name: str, from_directory: str) -> str | None:
        """Return the directory of package *name* as seen from *from_directory*.

        Returns None when the package cannot be found.
        """
        if not name:
            return None

        if self.platform.is_path_name(name):
            base = self.platform.absolute(from_directory, name)
            return base if is_directory(base) else None

        for path in self.module_paths(from_directory):
            if not is_directory(path):
                continue
            base = self.platform.absolute(path, name)
            if is_directory(base):
                return base
        return None
