"""Command line interface for resource-resolver."""

from __future__ import annotations

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from resource_resolver.config import ResolverConfig
from resource_resolver.config import load_config
from resource_resolver.contexts import PackageContext
from resource_resolver.contexts import ResolutionContext
from resource_resolver.exceptions import ResourceError
from resource_resolver.resolver import ResourceResolver
from resource_resolver.results import ResolutionStatus

console = Console()
err_console = Console(stderr=True)

_STATUS_STYLES = {
    ResolutionStatus.FOUND: "green",
    ResolutionStatus.NOT_FOUND: "dim",
    ResolutionStatus.UNUSABLE: "yellow",
}


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


def _fail(ctx: click.Context, message: str) -> None:
    err_console.print(f"[red]Error:[/red] {escape(message)}")
    ctx.exit(1)


def _package_context(ctx: click.Context, package: str | None) -> ResolutionContext | None:
    if not package:
        return None
    try:
        return PackageContext(package)
    except ModuleNotFoundError as e:
        _fail(ctx, f"Cannot import package {package!r}: {e}")
    return None


@click.group()
@click.option(
    "--home",
    type=click.Path(file_okay=False),
    default=None,
    help="Home directory for home-relative lookups (overrides RESOURCE_RESOLVER_HOME)",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML configuration file",
)
@click.option("--verbose", "-v", is_flag=True, help="Log every resolution step")
@click.pass_context
def cli(ctx: click.Context, home: str | None, config_path: Path | None, verbose: bool) -> None:
    """Resolve resource names to URLs and read them."""
    _setup_logging(verbose)

    try:
        config = load_config(config_path) if config_path else ResolverConfig.from_env()
    except ResourceError as e:
        _fail(ctx, str(e))
        return

    if home is not None:
        config = config.with_home(home)

    ctx.obj = ResourceResolver(config)


@cli.command()
@click.argument("name")
@click.option("--package", "-p", default=None, help="Search this package first")
@click.pass_context
def resolve(ctx: click.Context, name: str, package: str | None) -> None:
    """Print the URL NAME resolves to."""
    resolver: ResourceResolver = ctx.obj
    locator = resolver.from_resource(name, _package_context(ctx, package))
    if locator is None:
        _fail(ctx, f"Resource not found: {name}")
        return
    click.echo(locator.url)


@cli.command()
@click.argument("name")
@click.option("--package", "-p", default=None, help="Search this package first")
@click.pass_context
def explain(ctx: click.Context, name: str, package: str | None) -> None:
    """Show every lookup made while resolving NAME."""
    resolver: ResourceResolver = ctx.obj
    trace = resolver.explain(name, _package_context(ctx, package))

    table = Table(title=f"Resolving {escape(name)}", show_lines=False)
    table.add_column("#", style="dim", justify="right")
    table.add_column("Strategy", style="cyan")
    table.add_column("Candidate")
    table.add_column("Status")
    table.add_column("Result")

    for index, attempt in enumerate(trace.attempts, start=1):
        style = _STATUS_STYLES[attempt.status]
        result = attempt.locator.url if attempt.locator else attempt.detail
        table.add_row(
            str(index),
            attempt.strategy.value,
            escape(attempt.candidate),
            f"[{style}]{attempt.status.value}[/{style}]",
            escape(result),
        )

    console.print(table)
    if not trace.found:
        ctx.exit(1)


@cli.command()
@click.argument("name")
@click.option("--encoding", default=None, help="Text encoding (default: platform preferred)")
@click.pass_context
def cat(ctx: click.Context, name: str, encoding: str | None) -> None:
    """Resolve NAME and print its text."""
    resolver: ResourceResolver = ctx.obj
    locator = resolver.from_resource(name)
    if locator is None:
        _fail(ctx, f"Resource not found: {name}")
        return

    try:
        text = resolver.read_text(locator, encoding=encoding)
    except ResourceError as e:
        _fail(ctx, str(e))
        return
    click.echo(text, nl=False)


@cli.command()
@click.argument("name")
@click.pass_context
def relative(ctx: click.Context, name: str) -> None:
    """Resolve NAME and print its path relative to the home directory."""
    resolver: ResourceResolver = ctx.obj
    locator = resolver.from_resource(name)
    if locator is None:
        _fail(ctx, f"Resource not found: {name}")
        return
    click.echo(resolver.home_relative_location(locator))


def main() -> None:
    """Entry point for the resource-resolver command."""
    cli()


if __name__ == "__main__":
    main()
