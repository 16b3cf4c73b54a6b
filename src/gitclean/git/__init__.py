"""Git interface layer — adapter, status provider, submodule detection, models."""

from gitclean.git.adapter import (
    GitError,
    get_repo_root,
    get_status_output,
    parse_porcelain,
)
from gitclean.git.models import FileStatus, RawStatus, StatusCode
from gitclean.git.provider import GitStatusProvider, StatusProvider
from gitclean.git.submodule import GitMarkerDetector, SubmoduleDetector

__all__ = [
    "FileStatus",
    "GitError",
    "GitMarkerDetector",
    "GitStatusProvider",
    "RawStatus",
    "StatusCode",
    "StatusProvider",
    "SubmoduleDetector",
    "get_repo_root",
    "get_status_output",
    "parse_porcelain",
]
