"""Tests for the pre-commit hook installer."""

from pathlib import Path

from gitclean.hooks.installer import hook_script, install_hook, uninstall_hook


class TestHookScript:
    def test_default_args(self):
        assert "gitclean check --ignore-staged ||" in hook_script()

    def test_custom_args_quoted(self):
        script = hook_script(["--dir", "my dir"])
        assert "gitclean check --dir 'my dir'" in script


class TestInstall:
    def test_not_a_repo(self, tmp_path: Path):
        ok, msg = install_hook(tmp_path)
        assert ok is False
        assert "Not a git repository" in msg

    def test_install_and_reinstall(self, tmp_git_repo: Path):
        ok, _ = install_hook(tmp_git_repo)
        assert ok
        hook = tmp_git_repo / ".git" / "hooks" / "pre-commit"
        assert hook.stat().st_mode & 0o111
        ok, msg = install_hook(tmp_git_repo)
        assert ok
        assert "already installed" in msg

    def test_force_rewrites_own_hook_with_new_args(self, tmp_git_repo: Path):
        install_hook(tmp_git_repo)
        install_hook(tmp_git_repo, force=True, args=["--only-untracked"])
        hook = tmp_git_repo / ".git" / "hooks" / "pre-commit"
        assert "--only-untracked" in hook.read_text()

    def test_refuses_foreign_hook(self, tmp_git_repo: Path):
        hooks = tmp_git_repo / ".git" / "hooks"
        hooks.mkdir(parents=True, exist_ok=True)
        (hooks / "pre-commit").write_text("#!/bin/sh\necho other\n")
        ok, _ = install_hook(tmp_git_repo)
        assert ok is False


class TestUninstall:
    def test_nothing_to_remove(self, tmp_git_repo: Path):
        ok, msg = uninstall_hook(tmp_git_repo)
        assert ok
        assert "nothing to remove" in msg

    def test_refuses_foreign_hook(self, tmp_git_repo: Path):
        hooks = tmp_git_repo / ".git" / "hooks"
        hooks.mkdir(parents=True, exist_ok=True)
        (hooks / "pre-commit").write_text("#!/bin/sh\necho other\n")
        ok, _ = uninstall_hook(tmp_git_repo)
        assert ok is False
        assert (hooks / "pre-commit").exists()
