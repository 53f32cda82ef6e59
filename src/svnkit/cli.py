"""svnkit CLI — Typer application wrapping the svn client facade."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator, List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from svnkit import __version__
from svnkit.config.loader import ConfigError, load_config
from svnkit.config.schema import SvnKitConfig
from svnkit.output import json_report
from svnkit.svn.client import SvnClient
from svnkit.svn.errors import ParseError, SvnError

app = typer.Typer(
    name="svnkit",
    help="Run svn and print its reports as typed JSON.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)


def _configure_logging(verbose: bool, debug: bool) -> None:
    level = logging.DEBUG if debug else logging.INFO if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_time=False, show_path=False)],
        force=True,
    )


def build_client(cfg: SvnKitConfig) -> SvnClient:
    """Create the client for a CLI invocation."""
    return SvnClient(
        binary=cfg.svn.binary,
        context=cfg.execution_context(),
        locale=cfg.svn.locale,
    )


def _load(ctx: typer.Context) -> SvnKitConfig:
    config_path = (ctx.obj or {}).get("config")
    try:
        return load_config(Path.cwd(), config_path)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc


@contextmanager
def _handled() -> Iterator[None]:
    """Turn engine errors into a message on stderr and an exit code."""
    try:
        yield
    except ParseError as exc:
        console.print(f"[bold red]Parse error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc
    except SvnError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc
    except ValueError as exc:
        console.print(f"[bold red]Invalid arguments:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc


def _emit(result: Any, cfg: SvnKitConfig) -> None:
    print(json_report.render(result, indent=cfg.output.indent))


# ── queries ───────────────────────────────────────────────────────────────────


@app.command()
def status(
    ctx: typer.Context,
    path: str = typer.Argument(".", help="Working copy path"),
) -> None:
    """Show working copy status."""
    cfg = _load(ctx)
    with _handled():
        result = build_client(cfg).status(path)
    _emit(result, cfg)


@app.command()
def log(
    ctx: typer.Context,
    path: str = typer.Argument(".", help="Working copy path or URL"),
    limit: Optional[int] = typer.Option(None, "--limit", "-l", help="Maximum number of entries"),
    start: Optional[int] = typer.Option(None, "--start-revision", "-s", help="First revision"),
    end: Optional[int] = typer.Option(None, "--end-revision", "-e", help="Last revision (needs --start-revision)"),
) -> None:
    """Show commit history, newest first."""
    cfg = _load(ctx)
    with _handled():
        result = build_client(cfg).log(path, limit or cfg.log.limit, start, end)
    _emit(result, cfg)


@app.command()
def info(
    ctx: typer.Context,
    target: str = typer.Argument(".", help="Working copy path or URL"),
) -> None:
    """Describe a single node."""
    cfg = _load(ctx)
    with _handled():
        result = build_client(cfg).info(target)
    _emit(result, cfg)


@app.command("ls")
def list_(
    ctx: typer.Context,
    url: str = typer.Argument(..., help="Repository URL or path"),
    revision: Optional[str] = typer.Option(None, "--revision", "-r", help="Revision to list"),
    depth: Optional[str] = typer.Option(None, "--depth", help="empty | immediates | infinity"),
) -> None:
    """List repository entries."""
    cfg = _load(ctx)
    with _handled():
        result = build_client(cfg).list(url, revision, depth)
    _emit(result, cfg)


# ── changes ───────────────────────────────────────────────────────────────────


@app.command()
def update(
    ctx: typer.Context,
    path: str = typer.Argument(".", help="Working copy path"),
) -> None:
    """Bring the working copy up to date."""
    cfg = _load(ctx)
    with _handled():
        result = build_client(cfg).update(path)
    _emit(result, cfg)


@app.command()
def commit(
    ctx: typer.Context,
    paths: Optional[List[str]] = typer.Argument(None, help="Paths to commit (default: .)"),
    message: str = typer.Option(..., "--message", "-m", help="Commit message"),
) -> None:
    """Commit local changes."""
    cfg = _load(ctx)
    with _handled():
        result = build_client(cfg).commit(paths or ["."], message)
    _emit(result, cfg)


@app.command()
def revert(
    ctx: typer.Context,
    paths: List[str] = typer.Argument(..., help="Paths to revert"),
) -> None:
    """Revert local changes."""
    cfg = _load(ctx)
    with _handled():
        build_client(cfg).revert(paths)
    console.print(f"[green]✓[/green] Reverted {len(paths)} path(s)")


@app.command()
def add(
    ctx: typer.Context,
    paths: List[str] = typer.Argument(..., help="Paths to put under version control"),
) -> None:
    """Schedule paths for addition."""
    cfg = _load(ctx)
    with _handled():
        build_client(cfg).add(paths)
    console.print(f"[green]✓[/green] Added {len(paths)} path(s)")


@app.command()
def delete(
    ctx: typer.Context,
    paths: List[str] = typer.Argument(..., help="Paths to remove from version control"),
) -> None:
    """Schedule paths for deletion."""
    cfg = _load(ctx)
    with _handled():
        build_client(cfg).delete(paths)
    console.print(f"[green]✓[/green] Deleted {len(paths)} path(s)")


@app.command()
def cleanup(
    ctx: typer.Context,
    path: str = typer.Argument(".", help="Working copy path"),
) -> None:
    """Recover an interrupted working copy."""
    cfg = _load(ctx)
    with _handled():
        build_client(cfg).cleanup(path)
    console.print(f"[green]✓[/green] Cleaned up {escape(path)}")


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init() -> None:
    """Generate a starter .svnkit.toml in the current directory."""
    from svnkit.config.defaults import DEFAULT_TOML
    from svnkit.config.loader import CONFIG_FILENAME

    config_path = Path.cwd() / CONFIG_FILENAME
    if config_path.exists():
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {escape(str(config_path))}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {escape(str(config_path))}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"svnkit {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .svnkit.toml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log each svn invocation"),
    debug: bool = typer.Option(False, "--debug", help="Debug logging"),
) -> None:
    """svnkit — typed access to svn status, log, info and list reports."""
    _configure_logging(verbose, debug)
    ctx.obj = {"config": config}
