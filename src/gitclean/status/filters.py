"""Filter chain — narrows classified files according to CheckOptions.

Each clause is enabled by any one of several option names, so "ignore X" and
"only Y" share the same three predicates: ``only_staged`` is exactly
``ignore_unstaged`` plus ``ignore_untracked``. Clauses run in order over the
same live list; submodule exclusion always comes first.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Callable, Iterable, List, Tuple

from gitclean.git.models import FileStatus, StatusCode
from gitclean.status.options import CheckOptions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileFilter:
    """A named clause: active when *enabled* holds, keeps files matching *keep*."""

    name: str
    enabled: Callable[[CheckOptions], bool]
    keep: Callable[[FileStatus], bool]


def _any_of(*names: str) -> Callable[[CheckOptions], bool]:
    return lambda options: any(getattr(options, n) for n in names)


FILTERS: Tuple[FileFilter, ...] = (
    FileFilter(
        name="submodules",
        enabled=lambda options: not options.include_submodules,
        keep=lambda f: not f.is_submodule,
    ),
    FileFilter(
        name="untracked",
        enabled=_any_of("ignore_untracked", "only_staged", "only_unstaged"),
        keep=lambda f: f.index != StatusCode.UNTRACKED,
    ),
    FileFilter(
        name="staged",
        enabled=_any_of("ignore_staged", "only_unstaged", "only_untracked"),
        keep=lambda f: f.index in (StatusCode.UNMODIFIED, StatusCode.UNTRACKED),
    ),
    FileFilter(
        name="unstaged",
        enabled=_any_of("ignore_unstaged", "only_staged", "only_untracked"),
        keep=lambda f: f.working_tree != StatusCode.MODIFIED,
    ),
)


def _dump(files: Iterable[FileStatus]) -> str:
    return json.dumps([f.to_dict() for f in files], indent=2)


def active_filters(
    options: CheckOptions, filters: Iterable[FileFilter] = FILTERS
) -> List[FileFilter]:
    return [clause for clause in filters if clause.enabled(options)]


def apply_filters(
    files: Iterable[FileStatus],
    options: CheckOptions,
    filters: Iterable[FileFilter] = FILTERS,
) -> List[FileStatus]:
    """Return the files that survive every active clause, in input order."""
    result = list(files)
    for clause in active_filters(options, filters):
        result = [f for f in result if clause.keep(f)]
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("filtered out %s files, new list: %s", clause.name, _dump(result))
    return result
