"""Check result model used by the reporters."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from gitclean.git.models import FileStatus


@dataclass
class CheckResult:
    """Files that count toward "dirty" for one directory."""

    directory: str
    files: List[FileStatus] = field(default_factory=list)
    duration_ms: float = 0.0

    @property
    def clean(self) -> bool:
        return not self.files

    @property
    def staged(self) -> List[FileStatus]:
        return [f for f in self.files if f.is_staged]

    @property
    def unstaged(self) -> List[FileStatus]:
        return [f for f in self.files if f.has_unstaged_changes]

    @property
    def untracked(self) -> List[FileStatus]:
        return [f for f in self.files if f.is_untracked]

    @property
    def submodules(self) -> List[FileStatus]:
        return [f for f in self.files if f.is_submodule]
