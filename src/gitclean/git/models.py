"""Data models for working-tree status records."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, Optional


class StatusCode(str, Enum):
    """Known porcelain status codes, after trimming."""

    UNMODIFIED = ""
    MODIFIED = "M"
    TYPE_CHANGED = "T"
    ADDED = "A"
    DELETED = "D"
    RENAMED = "R"
    COPIED = "C"
    UNMERGED = "U"
    UNTRACKED = "?"
    IGNORED = "!"


@dataclass(frozen=True)
class RawStatus:
    """One entry as reported by a status provider, codes untouched."""

    path: str
    index: str
    working_tree: str
    orig_path: Optional[str] = None  # set on renames and copies


@dataclass(frozen=True)
class FileStatus:
    """A classified status record.

    ``index`` and ``working_tree`` are trimmed codes. They are plain strings
    rather than :class:`StatusCode` members: submodule entries carry
    lowercased codes and unknown codes pass through unchanged.
    """

    path: str
    index: str
    working_tree: str
    is_submodule: bool = False
    orig_path: Optional[str] = None

    @property
    def is_untracked(self) -> bool:
        return self.index == StatusCode.UNTRACKED

    @property
    def is_staged(self) -> bool:
        return self.index not in (StatusCode.UNMODIFIED, StatusCode.UNTRACKED)

    @property
    def has_unstaged_changes(self) -> bool:
        return self.working_tree == StatusCode.MODIFIED

    @property
    def is_partially_staged(self) -> bool:
        return self.is_staged and self.has_unstaged_changes

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        if data["orig_path"] is None:
            del data["orig_path"]
        return data
