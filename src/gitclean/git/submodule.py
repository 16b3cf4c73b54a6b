"""Submodule detection for status paths."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional, Protocol, Union

logger = logging.getLogger(__name__)

GIT_MARKER = ".git"


class SubmoduleDetector(Protocol):
    """Answers whether a status path is the root of a nested repository."""

    def __call__(self, path: str) -> bool:
        ...


class GitMarkerDetector:
    """Treat a path as a submodule when it holds a ``.git`` entry.

    Submodules checked out by modern git have a ``.git`` *file* pointing at
    the parent's module store; older ones have a full ``.git`` directory.
    Both count. Relative paths resolve against *root*.
    """

    def __init__(self, root: Optional[Union[str, Path]] = None) -> None:
        self.root = Path(root) if root is not None else None

    def __call__(self, path: str) -> bool:
        target = Path(path.rstrip("/") or ".")
        if self.root is not None and not target.is_absolute():
            target = self.root / target
        try:
            return os.path.lexists(target / GIT_MARKER) and target.is_dir()
        except OSError as exc:
            logger.debug("submodule check failed for %s: %s", path, exc)
            return False
