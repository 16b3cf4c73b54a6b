"""Git subprocess wrapper — repo root, porcelain status, status parsing."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import List, Optional

from gitclean.git.models import RawStatus

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30

# Rename and copy entries carry the source path in the following NUL field
_TWO_PATH_CODES = ("R", "C")


class GitError(Exception):
    """Raised when git is unavailable or returns an unexpected error."""


def _run_git(args: list[str], cwd: Path, timeout: int = DEFAULT_TIMEOUT) -> str:
    """Run a git command and return stdout. Raises GitError on failure."""
    logger.debug("running git %s in %s", " ".join(args), cwd)
    try:
        result = subprocess.run(
            ["git", *args],
            cwd=cwd,
            capture_output=True,
            text=True,
            timeout=timeout,
            encoding="utf-8",
            errors="replace",
        )
    except FileNotFoundError:
        raise GitError("git is not installed or not on PATH")
    except NotADirectoryError:
        raise GitError(f"not a directory: {cwd}")
    except subprocess.TimeoutExpired:
        raise GitError(f"git command timed out after {timeout}s: git {' '.join(args)}")

    if result.returncode != 0:
        stderr = result.stderr.strip()
        raise GitError(f"git error: {stderr or f'exit status {result.returncode}'}")
    return result.stdout


def get_repo_root(cwd: Optional[Path] = None, timeout: int = DEFAULT_TIMEOUT) -> Path:
    """Return the root of the current git repository."""
    cwd = cwd or Path.cwd()
    out = _run_git(["rev-parse", "--show-toplevel"], cwd=cwd, timeout=timeout)
    return Path(out.strip())


def get_status_output(cwd: Path, timeout: int = DEFAULT_TIMEOUT) -> str:
    """Return NUL-separated porcelain status output for *cwd*."""
    return _run_git(
        ["status", "--porcelain", "-z", "--untracked-files=all"],
        cwd=cwd,
        timeout=timeout,
    )


def parse_porcelain(output: str) -> List[RawStatus]:
    """Parse ``git status --porcelain -z`` output into RawStatus records.

    Each entry is ``XY <path>``. When either column is a rename or copy the
    next field holds the original path. Codes are returned untrimmed.
    """
    fields = output.split("\0")
    records: List[RawStatus] = []
    idx = 0
    while idx < len(fields):
        entry = fields[idx]
        idx += 1
        if len(entry) < 4:
            # trailing terminator or a malformed fragment
            continue
        index, working_tree, path = entry[0], entry[1], entry[3:]
        orig_path = None
        if index in _TWO_PATH_CODES or working_tree in _TWO_PATH_CODES:
            if idx < len(fields):
                orig_path = fields[idx]
                idx += 1
        records.append(
            RawStatus(path=path, index=index, working_tree=working_tree, orig_path=orig_path)
        )
    return records
