"""gitclean CLI — Typer application with check, files, install, init commands."""

from __future__ import annotations

import logging
import shlex
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from gitclean import __version__

app = typer.Typer(
    name="gitclean",
    help="Check whether a git working tree has uncommitted changes.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)

# Options shared by `check` and `files`
_DIR = typer.Option(None, "--dir", "-C", help="Directory to inspect (default: current directory)")
_CONFIG = typer.Option(None, "--config", "-c", help="Path to .gitclean.toml")
_FORMAT = typer.Option(None, "--format", "-f", help="Output format: terminal | json")
_INCLUDE_SUBMODULES = typer.Option(False, "--include-submodules", help="Count changed submodules as dirty")
_IGNORE_UNTRACKED = typer.Option(False, "--ignore-untracked", help="Ignore untracked files")
_IGNORE_STAGED = typer.Option(False, "--ignore-staged", help="Ignore staged changes")
_IGNORE_UNSTAGED = typer.Option(False, "--ignore-unstaged", help="Ignore unstaged changes")
_ONLY_UNTRACKED = typer.Option(False, "--only-untracked", help="Only consider untracked files")
_ONLY_STAGED = typer.Option(False, "--only-staged", help="Only consider staged changes")
_ONLY_UNSTAGED = typer.Option(False, "--only-unstaged", help="Only consider unstaged changes")
_VERBOSE = typer.Option(False, "--verbose", "-v", help="Verbose output")
_DEBUG = typer.Option(False, "--debug", help="Debug logging of every filtering step")


def _configure_logging(debug: bool) -> None:
    if not debug:
        return
    logger = logging.getLogger("gitclean")
    logger.setLevel(logging.DEBUG)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=console, show_path=False))


def _resolve_repo_root(directory: Optional[Path]) -> Path:
    """Find the git repo root for *directory*, exit 2 on failure."""
    from gitclean.git.adapter import GitError, get_repo_root

    target = directory or Path.cwd()
    if not target.is_dir():
        console.print(f"[bold red]Error:[/bold red] Not a directory: {target}")
        raise typer.Exit(code=2)
    try:
        return get_repo_root(target)
    except GitError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc


def _load_config(repo_root: Path, config: Optional[str], format: Optional[str]):
    from gitclean.config.loader import ConfigError, load_config
    from gitclean.config.schema import OUTPUT_FORMATS

    try:
        cfg = load_config(repo_root, config)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    if format:
        if format not in OUTPUT_FORMATS:
            console.print(f"[bold red]Invalid format:[/bold red] {format}")
            raise typer.Exit(code=2)
        cfg.output.format = format  # type: ignore[assignment]
    return cfg


def _run(directory: Optional[Path], repo_root: Path, cfg, flags: dict, verbose: bool):
    """Merge config defaults with CLI flags and run the check. Exit 2 on git errors."""
    import dataclasses

    from gitclean.git.adapter import GitError
    from gitclean.git.provider import GitStatusProvider
    from gitclean.git.submodule import GitMarkerDetector
    from gitclean.status import CheckOptions, run_check

    # a CLI flag can only switch an option on
    merged = {
        name: value or flags.get(name, False)
        for name, value in dataclasses.asdict(cfg.check).items()
    }
    options = CheckOptions(dir=directory, **merged)

    if verbose:
        enabled = [name for name, value in merged.items() if value] or ["none"]
        console.print(f"[dim]Directory: {directory or Path.cwd()}[/dim]")
        console.print(f"[dim]Options: {', '.join(enabled)}[/dim]")

    try:
        return run_check(
            options,
            provider=GitStatusProvider(timeout=cfg.git.timeout),
            detector=GitMarkerDetector(repo_root),
        )
    except GitError as exc:
        console.print(f"[bold red]Git error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc


# ── check ─────────────────────────────────────────────────────────────────────


@app.command()
def check(
    dir: Optional[Path] = _DIR,
    config: Optional[str] = _CONFIG,
    format: Optional[str] = _FORMAT,
    include_submodules: bool = _INCLUDE_SUBMODULES,
    ignore_untracked: bool = _IGNORE_UNTRACKED,
    ignore_staged: bool = _IGNORE_STAGED,
    ignore_unstaged: bool = _IGNORE_UNSTAGED,
    only_untracked: bool = _ONLY_UNTRACKED,
    only_staged: bool = _ONLY_STAGED,
    only_unstaged: bool = _ONLY_UNSTAGED,
    quiet: bool = typer.Option(False, "--quiet", "-q", help="No output, exit code only"),
    verbose: bool = _VERBOSE,
    debug: bool = _DEBUG,
) -> None:
    """Exit 0 if the working tree is clean, 1 if it is dirty, 2 on error."""
    from gitclean.output import json_report, terminal

    _configure_logging(debug)
    repo_root = _resolve_repo_root(dir)
    cfg = _load_config(repo_root, config, format)

    flags = dict(
        include_submodules=include_submodules,
        ignore_untracked=ignore_untracked,
        ignore_staged=ignore_staged,
        ignore_unstaged=ignore_unstaged,
        only_untracked=only_untracked,
        only_staged=only_staged,
        only_unstaged=only_unstaged,
    )
    result = _run(dir, repo_root, cfg, flags, verbose or debug)

    if not quiet:
        if cfg.output.format == "json":
            print(json_report.render(result))
        else:
            terminal.render(result, show_summary=cfg.output.show_summary)

    raise typer.Exit(code=0 if result.clean else 1)


# ── files ─────────────────────────────────────────────────────────────────────


@app.command()
def files(
    dir: Optional[Path] = _DIR,
    config: Optional[str] = _CONFIG,
    format: Optional[str] = _FORMAT,
    include_submodules: bool = _INCLUDE_SUBMODULES,
    ignore_untracked: bool = _IGNORE_UNTRACKED,
    ignore_staged: bool = _IGNORE_STAGED,
    ignore_unstaged: bool = _IGNORE_UNSTAGED,
    only_untracked: bool = _ONLY_UNTRACKED,
    only_staged: bool = _ONLY_STAGED,
    only_unstaged: bool = _ONLY_UNSTAGED,
    verbose: bool = _VERBOSE,
    debug: bool = _DEBUG,
) -> None:
    """List the files that count toward "dirty" under the given filters."""
    from gitclean.output import json_report, terminal

    _configure_logging(debug)
    repo_root = _resolve_repo_root(dir)
    cfg = _load_config(repo_root, config, format)

    flags = dict(
        include_submodules=include_submodules,
        ignore_untracked=ignore_untracked,
        ignore_staged=ignore_staged,
        ignore_unstaged=ignore_unstaged,
        only_untracked=only_untracked,
        only_staged=only_staged,
        only_unstaged=only_unstaged,
    )
    result = _run(dir, repo_root, cfg, flags, verbose or debug)

    if cfg.output.format == "json":
        print(json_report.render(result))
    elif result.clean:
        console.print("[dim]No matching changes.[/dim]")
    else:
        terminal.render_table(result, Console(), title="Matching changes")


# ── install ───────────────────────────────────────────────────────────────────


@app.command()
def install(
    force: bool = typer.Option(False, "--force", help="Overwrite existing pre-commit hook"),
    args: str = typer.Option(
        "--ignore-staged", "--args", help="Arguments passed to `gitclean check` in the hook",
    ),
) -> None:
    """Install `gitclean check` as a git pre-commit hook."""
    from gitclean.hooks.installer import install_hook

    repo_root = _resolve_repo_root(None)
    success, msg = install_hook(repo_root, force=force, args=shlex.split(args))
    if success:
        console.print(f"[green]✓[/green] {msg}")
    else:
        console.print(f"[red]✗[/red] {msg}")
        raise typer.Exit(code=1)


# ── uninstall ─────────────────────────────────────────────────────────────────


@app.command()
def uninstall() -> None:
    """Remove the gitclean pre-commit hook."""
    from gitclean.hooks.installer import uninstall_hook

    repo_root = _resolve_repo_root(None)
    success, msg = uninstall_hook(repo_root)
    if success:
        console.print(f"[green]✓[/green] {msg}")
    else:
        console.print(f"[red]✗[/red] {msg}")
        raise typer.Exit(code=1)


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init() -> None:
    """Generate a starter .gitclean.toml in the repo root."""
    from gitclean.config.defaults import DEFAULT_TOML

    repo_root = _resolve_repo_root(None)
    config_path = repo_root / ".gitclean.toml"

    if config_path.exists():
        console.print(f"[yellow]⚠[/yellow]  .gitclean.toml already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"gitclean {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """gitclean — Check whether a git working tree has uncommitted changes."""
