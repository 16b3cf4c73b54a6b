"""Status classification, filtering and the clean/dirty verdict."""

from gitclean.status.classifier import classify
from gitclean.status.core import get_files, is_clean, run_check
from gitclean.status.filters import FILTERS, FileFilter, active_filters, apply_filters
from gitclean.status.options import CheckOptions, resolve_options
from gitclean.status.result import CheckResult
from gitclean.status.workdir import working_directory

__all__ = [
    "FILTERS",
    "CheckOptions",
    "CheckResult",
    "FileFilter",
    "active_filters",
    "apply_filters",
    "classify",
    "get_files",
    "is_clean",
    "resolve_options",
    "run_check",
    "working_directory",
]
