"""Shared test fixtures — mock status records, fake providers, temp git repos."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Callable, List, Optional

import pytest

from gitclean.git.models import RawStatus

MOCK_FILES = {
    "staged": RawStatus(path="/path/to/staged", index="M", working_tree=" "),
    "unstaged": RawStatus(path="/path/to/unstaged", index=" ", working_tree="M"),
    "untracked": RawStatus(path="/path/to/untracked", index="?", working_tree="?"),
    "partially_staged": RawStatus(path="/path/to/partially-staged", index="M", working_tree="M"),
}


class FakeProvider:
    """Status provider returning canned records and remembering where it ran."""

    def __init__(self, records: List[RawStatus], error: Optional[Exception] = None) -> None:
        self.records = records
        self.error = error
        self.calls: List[Path] = []
        self.cwd_during_call: Optional[Path] = None

    def status(self, directory: Path) -> List[RawStatus]:
        self.calls.append(directory)
        self.cwd_during_call = Path.cwd()
        if self.error is not None:
            raise self.error
        return list(self.records)


@pytest.fixture
def mock_files() -> dict:
    return dict(MOCK_FILES)


@pytest.fixture
def three_files() -> List[RawStatus]:
    """Staged, unstaged and untracked, in that order."""
    return [MOCK_FILES["staged"], MOCK_FILES["unstaged"], MOCK_FILES["untracked"]]


@pytest.fixture
def make_provider() -> Callable[..., FakeProvider]:
    return FakeProvider


@pytest.fixture
def no_submodules() -> Callable[[str], bool]:
    return lambda path: False


def _git(*args: str, cwd: Path) -> None:
    subprocess.run(["git", *args], cwd=cwd, capture_output=True, check=True)


@pytest.fixture
def tmp_git_repo(tmp_path: Path) -> Path:
    """Create a temporary git repository with one committed file."""
    repo = tmp_path / "repo"
    repo.mkdir()
    _git("init", str(repo), cwd=tmp_path)
    _git("config", "user.email", "test@test.com", cwd=repo)
    _git("config", "user.name", "Test", cwd=repo)
    (repo / "README.md").write_text("# Test\n")
    _git("add", ".", cwd=repo)
    _git("commit", "-m", "init", cwd=repo)
    return repo


@pytest.fixture
def dirty_git_repo(tmp_git_repo: Path) -> Path:
    """A repository with one staged, one unstaged and one untracked file."""
    repo = tmp_git_repo
    (repo / "tracked.txt").write_text("v1\n")
    _git("add", "tracked.txt", cwd=repo)
    _git("commit", "-m", "add tracked", cwd=repo)

    (repo / "staged.txt").write_text("new\n")
    _git("add", "staged.txt", cwd=repo)
    (repo / "tracked.txt").write_text("v2\n")
    (repo / "untracked.txt").write_text("?\n")
    return repo


@pytest.fixture(autouse=True)
def reset_gitclean_logger():
    """Undo the handler and level that `--debug` installs on the package logger."""
    logger = logging.getLogger("gitclean")
    yield
    logger.setLevel(logging.NOTSET)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)


@pytest.fixture
def submodule_repo(tmp_git_repo: Path, tmp_path: Path) -> Path:
    """A repository with a `docs/` directory and a dirty submodule at `vendor/lib`."""
    lib = tmp_path / "lib"
    lib.mkdir()
    _git("init", str(lib), cwd=tmp_path)
    _git("config", "user.email", "test@test.com", cwd=lib)
    _git("config", "user.name", "Test", cwd=lib)
    (lib / "lib.py").write_text("x = 1\n")
    _git("add", ".", cwd=lib)
    _git("commit", "-m", "init lib", cwd=lib)

    repo = tmp_git_repo
    (repo / "docs").mkdir()
    (repo / "docs" / "index.md").write_text("# Docs\n")
    _git("-c", "protocol.file.allow=always", "submodule", "add", str(lib), "vendor/lib", cwd=repo)
    _git("add", ".", cwd=repo)
    _git("commit", "-m", "add submodule", cwd=repo)

    (repo / "vendor" / "lib" / "lib.py").write_text("x = 2\n")
    return repo
