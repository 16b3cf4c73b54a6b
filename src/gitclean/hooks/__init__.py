"""Git hook management."""

from gitclean.hooks.installer import install_hook, uninstall_hook

__all__ = ["install_hook", "uninstall_hook"]
