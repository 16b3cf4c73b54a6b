"""Status providers — the source of raw per-file status records."""

from __future__ import annotations

from pathlib import Path
from typing import List, Protocol

from gitclean.git.adapter import (
    DEFAULT_TIMEOUT,
    get_repo_root,
    get_status_output,
    parse_porcelain,
)
from gitclean.git.models import RawStatus


class StatusProvider(Protocol):
    """Anything that can report the working-tree status of a directory."""

    def status(self, directory: Path) -> List[RawStatus]:
        ...


class GitStatusProvider:
    """Reads status from ``git status --porcelain``."""

    def __init__(self, timeout: int = DEFAULT_TIMEOUT) -> None:
        self.timeout = timeout

    def status(self, directory: Path) -> List[RawStatus]:
        return parse_porcelain(get_status_output(directory, timeout=self.timeout))

    def repo_root(self, directory: Path) -> Path:
        """Return the root that status paths are relative to."""
        return get_repo_root(directory, timeout=self.timeout)
