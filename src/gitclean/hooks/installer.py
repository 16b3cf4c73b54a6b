"""Pre-commit hook installer — gitclean install / uninstall."""

from __future__ import annotations

import shlex
from pathlib import Path
from typing import Sequence, Tuple

_HOOK_MARKER = "# gitclean-hook"

# Committing only what is staged: anything unstaged or untracked blocks the hook
DEFAULT_HOOK_ARGS: Tuple[str, ...] = ("--ignore-staged",)


def hook_script(args: Sequence[str] = DEFAULT_HOOK_ARGS) -> str:
    command = " ".join(["gitclean", "check", *(shlex.quote(a) for a in args)])
    return f"""\
#!/bin/sh
{_HOOK_MARKER}
# Installed by gitclean. To uninstall: gitclean uninstall

{command} || {{
  echo "Unstaged changes or untracked files present!" >&2
  exit 1
}}
"""


def _hooks_dir(repo_root: Path) -> Path:
    """Return the hooks directory."""
    return repo_root / ".git" / "hooks"


def install_hook(
    repo_root: Path,
    *,
    force: bool = False,
    args: Sequence[str] = DEFAULT_HOOK_ARGS,
) -> Tuple[bool, str]:
    """Install ``gitclean check`` as a pre-commit hook.

    Returns (success, message).
    """
    hooks_dir = _hooks_dir(repo_root)
    if not hooks_dir.parent.is_dir():
        return False, f"Not a git repository: {repo_root}"

    hooks_dir.mkdir(parents=True, exist_ok=True)
    hook_path = hooks_dir / "pre-commit"

    if hook_path.exists():
        content = hook_path.read_text(encoding="utf-8", errors="replace")
        if _HOOK_MARKER in content and not force:
            return True, "gitclean hook is already installed."
        if _HOOK_MARKER not in content and not force:
            return (
                False,
                f"A pre-commit hook already exists at {hook_path}. "
                "Use --force to overwrite, or manually add 'gitclean check' to it.",
            )

    hook_path.write_text(hook_script(args), encoding="utf-8")
    try:
        hook_path.chmod(0o755)
    except OSError:
        pass  # Windows doesn't need chmod

    return True, f"Installed gitclean pre-commit hook at {hook_path}"


def uninstall_hook(repo_root: Path) -> Tuple[bool, str]:
    """Remove gitclean pre-commit hook.

    Returns (success, message).
    """
    hook_path = _hooks_dir(repo_root) / "pre-commit"

    if not hook_path.exists():
        return True, "No pre-commit hook found, nothing to remove."

    content = hook_path.read_text(encoding="utf-8", errors="replace")
    if _HOOK_MARKER not in content:
        return False, "Pre-commit hook exists but was not installed by gitclean."

    hook_path.unlink()
    return True, f"Removed gitclean pre-commit hook from {hook_path}"
