"""Entry points — list the files that make a tree dirty, or just answer clean/dirty."""

from __future__ import annotations

import json
import logging
import time
from pathlib import Path
from typing import Any, Callable, List, Mapping, Optional, Union

from gitclean.git.adapter import GitError
from gitclean.git.models import FileStatus
from gitclean.git.provider import GitStatusProvider, StatusProvider
from gitclean.git.submodule import GitMarkerDetector
from gitclean.status.classifier import classify
from gitclean.status.filters import apply_filters
from gitclean.status.options import CheckOptions, resolve_options
from gitclean.status.result import CheckResult
from gitclean.status.workdir import working_directory

logger = logging.getLogger(__name__)

OptionsArg = Union[CheckOptions, Mapping[str, Any], None]


def get_files(
    options: OptionsArg = None,
    *,
    provider: Optional[StatusProvider] = None,
    detector: Optional[Callable[[str], bool]] = None,
    **flags: Any,
) -> List[FileStatus]:
    """Return the changed files that count toward "dirty" under *options*.

    *provider* defaults to :class:`GitStatusProvider`; *detector* defaults to
    a :class:`GitMarkerDetector` rooted at the repository root, or at the
    inspected directory when a custom provider is given. Errors from the
    provider propagate unchanged after the working directory has been
    restored.
    """
    opts = resolve_options(options, **flags)
    logger.debug("options: %s", opts)

    if opts.dir is not None and not Path(opts.dir).is_dir():
        raise GitError(f"Not a directory: {opts.dir}")

    provider = provider or GitStatusProvider()
    with working_directory(opts.dir) as cwd:
        logger.debug("reading status of %s", cwd)
        records = provider.status(cwd)

    if detector is None:
        # porcelain paths are relative to the repository root, not to cwd
        if records and isinstance(provider, GitStatusProvider):
            detector = GitMarkerDetector(provider.repo_root(cwd))
        else:
            detector = GitMarkerDetector(cwd)
    files = classify(records, detector)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "initial file list: %s", json.dumps([f.to_dict() for f in files], indent=2)
        )

    files = apply_filters(files, opts)
    logger.debug("final file count: %d", len(files))
    return files


def is_clean(
    options: OptionsArg = None,
    *,
    provider: Optional[StatusProvider] = None,
    detector: Optional[Callable[[str], bool]] = None,
    **flags: Any,
) -> bool:
    """Return True when no file counts toward "dirty" under *options*."""
    return len(get_files(options, provider=provider, detector=detector, **flags)) == 0


def run_check(
    options: OptionsArg = None,
    *,
    provider: Optional[StatusProvider] = None,
    detector: Optional[Callable[[str], bool]] = None,
    **flags: Any,
) -> CheckResult:
    """Like :func:`get_files`, but wrap the outcome in a timed CheckResult."""
    opts = resolve_options(options, **flags)
    start = time.perf_counter()
    files = get_files(opts, provider=provider, detector=detector)
    return CheckResult(
        directory=str(Path(opts.dir) if opts.dir is not None else Path.cwd()),
        files=files,
        duration_ms=(time.perf_counter() - start) * 1000,
    )
