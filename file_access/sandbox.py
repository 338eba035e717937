from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .errors import AccessDenied, ConfigurationError


def _normalize_root(root: str, resolve_symlinks: bool) -> str:
    if not isinstance(root, str) or not root.strip():
        raise ConfigurationError("Allowed directory must be a non-empty path")
    resolved = os.path.abspath(root)
    if resolve_symlinks:
        resolved = os.path.realpath(resolved)
    return resolved


def _is_within(path: str, root: str) -> bool:
    if path == root:
        return True
    # "/allowed" must not admit "/allowed-evil"; the filesystem root already ends in a separator.
    prefix = root if root.endswith(os.sep) else root + os.sep
    return path.startswith(prefix)


@dataclass(frozen=True)
class PathGuard:
    """
    Confines caller-supplied paths to a single directory subtree.

    Relative candidates are resolved against the allowed root, absolute ones
    are taken as-is; both are normalized lexically before the containment
    check. Symbolic links are only followed when ``resolve_symlinks`` is set.
    Resolving relative candidates against the root rather than the process
    working directory is intentional: the root is the tool's working directory.
    """

    root: str
    resolve_symlinks: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "root", _normalize_root(self.root, self.resolve_symlinks))

    def resolve(self, candidate: str) -> str:
        # os.path.join drops the root when the candidate is absolute.
        resolved = os.path.normpath(os.path.join(self.root, candidate))
        if self.resolve_symlinks:
            resolved = os.path.realpath(resolved)
        return resolved

    def validate(self, candidate: str) -> Path:
        if not isinstance(candidate, str) or "\x00" in candidate:
            raise AccessDenied(candidate)
        try:
            os.fsencode(candidate)
        except UnicodeEncodeError as exc:
            raise AccessDenied(candidate) from exc
        resolved = self.resolve(candidate)
        if not _is_within(resolved, self.root):
            raise AccessDenied(candidate)
        return Path(resolved)


def validate_path(candidate: str, root: str, *, resolve_symlinks: bool = False) -> Path:
    return PathGuard(root, resolve_symlinks=resolve_symlinks).validate(candidate)
