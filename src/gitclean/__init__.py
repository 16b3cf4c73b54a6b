"""gitclean — check whether a git working tree has uncommitted changes."""

__version__ = "1.0.0"

from gitclean.git.adapter import GitError
from gitclean.git.models import FileStatus, RawStatus, StatusCode
from gitclean.status.core import get_files, is_clean
from gitclean.status.options import CheckOptions

__all__ = [
    "CheckOptions",
    "FileStatus",
    "GitError",
    "RawStatus",
    "StatusCode",
    "__version__",
    "get_files",
    "is_clean",
]
