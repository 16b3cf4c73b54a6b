"""Starter .gitclean.toml template."""

DEFAULT_TOML = """\
# gitclean configuration
version = "1.0"

[check]
# Which changes count toward "dirty". All default to false.
include_submodules = false
ignore_untracked = false
ignore_staged = false
ignore_unstaged = false
# only_untracked = false
# only_staged = false
# only_unstaged = false

[output]
format = "terminal"       # terminal | json
show_summary = true

[git]
timeout = 30              # seconds allowed for `git status`
"""
