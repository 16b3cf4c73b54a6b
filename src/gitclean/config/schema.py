"""Configuration schema — dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

OutputFormat = Literal["terminal", "json"]

OUTPUT_FORMATS = ("terminal", "json")

# Categories accepted by GITCLEAN_IGNORE, mapped to CheckConfig fields
IGNORE_CATEGORIES: dict[str, str] = {
    "untracked": "ignore_untracked",
    "staged": "ignore_staged",
    "unstaged": "ignore_unstaged",
}


@dataclass
class CheckConfig:
    include_submodules: bool = False
    ignore_untracked: bool = False
    ignore_staged: bool = False
    ignore_unstaged: bool = False
    only_untracked: bool = False
    only_staged: bool = False
    only_unstaged: bool = False


@dataclass
class OutputConfig:
    format: OutputFormat = "terminal"
    show_summary: bool = True


@dataclass
class GitConfig:
    timeout: int = 30  # seconds allowed for `git status`


@dataclass
class GitCleanConfig:
    version: str = "1.0"
    check: CheckConfig = field(default_factory=CheckConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    git: GitConfig = field(default_factory=GitConfig)
