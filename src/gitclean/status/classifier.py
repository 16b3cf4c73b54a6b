"""Status classifier — raw provider records to FileStatus."""

from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional

from gitclean.git.models import FileStatus, RawStatus

logger = logging.getLogger(__name__)


def _detect(is_submodule: Callable[[str], bool], path: str) -> bool:
    try:
        return bool(is_submodule(path))
    except Exception as exc:
        logger.debug("treating %s as a regular file, detection failed: %r", path, exc)
        return False


def classify(
    records: Iterable[RawStatus],
    is_submodule: Optional[Callable[[str], bool]] = None,
) -> List[FileStatus]:
    """Trim status codes and tag submodules, preserving input order.

    Submodule entries get lowercased codes so they stay distinguishable from
    regular files carrying the same nominal code.
    """
    files: List[FileStatus] = []
    for record in records:
        index = record.index.strip()
        working_tree = record.working_tree.strip()
        submodule = is_submodule is not None and _detect(is_submodule, record.path)
        if submodule:
            index = index.lower()
            working_tree = working_tree.lower()
        files.append(
            FileStatus(
                path=record.path,
                index=index,
                working_tree=working_tree,
                is_submodule=submodule,
                orig_path=record.orig_path,
            )
        )
    return files
