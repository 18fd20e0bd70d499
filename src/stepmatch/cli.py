"""Stepmatch CLI: step completion and resolution from the command line."""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from stepmatch import __version__

from .catalog import TomlStepCatalog
from .config import ConfigError, StepmatchConfig, load_config, write_config_template
from .constants import CONFIG_FILENAME
from .core import StepLocator
from .errors import TraversalError
from .logging import configure_logging
from .output import OutputContext


def _version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"stepmatch {__version__}")
        raise typer.Exit()


app = typer.Typer(
    name="stepmatch",
    help="Find and resolve step definitions for behaviour-specification lines",
    no_args_is_help=True,
)

# Global output context
_ctx: OutputContext | None = None


def get_output_context() -> OutputContext:
    """Get the current output context."""
    if _ctx is None:
        return OutputContext(Console())
    return _ctx


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Log search details (-v), with times and sources (-vv)",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only log warnings and errors",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output in JSON format for automation",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
) -> None:
    """Stepmatch CLI - step completion for behaviour specifications."""
    global _ctx
    console = configure_logging(verbosity=verbose, quiet=quiet, no_color=no_color)
    _ctx = OutputContext(console=console, json_mode=json_output)


def _load_config_or_exit(ctx: OutputContext) -> StepmatchConfig:
    try:
        return load_config(Path.cwd())
    except ConfigError as e:
        ctx.error(str(e))
        raise typer.Exit(2) from None


def _locator(ctx: OutputContext, catalog: Path | None, all_types: bool = False) -> StepLocator:
    config = _load_config_or_exit(ctx)
    catalog_path = catalog or config.catalog.resolve(Path.cwd())
    matcher = config.matcher
    if all_types:
        matcher = matcher.model_copy(update={"enforce_type_match": False})
    return StepLocator(TomlStepCatalog(catalog_path), matcher)


def _search_failed(ctx: OutputContext, line: str, e: TraversalError) -> typer.Exit:
    cause = e.__cause__ or e
    ctx.error(f"Search failed for <{line}>: {cause}", {"line": line})
    return typer.Exit(3)


# ============================================================================
# stepmatch init
# ============================================================================


@app.command()
def init() -> None:
    """Write a stepmatch.toml template in the current directory."""
    ctx = get_output_context()
    config_path = Path.cwd() / CONFIG_FILENAME
    if config_path.exists():
        ctx.result(
            {"path": str(config_path), "created": False},
            f"[yellow]Config already exists:[/yellow] {escape(str(config_path))}",
        )
        return
    write_config_template(Path.cwd())
    ctx.result(
        {"path": str(config_path), "created": True},
        f"[green]Created config template:[/green] {escape(str(config_path))}",
    )


# ============================================================================
# stepmatch complete
# ============================================================================


@app.command()
def complete(
    line: str = typer.Argument(..., help="Step line, possibly incomplete"),
    catalog: Path | None = typer.Option(
        None, "--catalog", "-c", help="Step catalog file (overrides stepmatch.toml)"
    ),
    all_types: bool = typer.Option(
        False, "--all-types", help="Propose steps of every type, not only the line's"
    ),
    limit: int | None = typer.Option(None, "--limit", "-n", min=1, help="Maximum candidates"),
) -> None:
    """List step definitions that complete LINE, best first."""
    ctx = get_output_context()
    locator = _locator(ctx, catalog, all_types=all_types)
    try:
        candidates = locator.find_ranked_candidates(line, limit=limit)
    except TraversalError as e:
        raise _search_failed(ctx, line, e) from None
    ctx.candidates(line, candidates)


# ============================================================================
# stepmatch resolve
# ============================================================================


@app.command()
def resolve(
    line: str = typer.Argument(..., help="Complete step line"),
    catalog: Path | None = typer.Option(
        None, "--catalog", "-c", help="Step catalog file (overrides stepmatch.toml)"
    ),
) -> None:
    """Show the step definition LINE resolves to."""
    ctx = get_output_context()
    locator = _locator(ctx, catalog)
    try:
        step = locator.find_first_step(line)
    except TraversalError as e:
        raise _search_failed(ctx, line, e) from None
    ctx.resolved(line, step)
    if step is None:
        raise typer.Exit(1)
