"""Main CLI application setup and configuration."""

from pathlib import Path
from typing import Any, Dict, Optional

import typer

from chaincmd import __version__
from chaincmd.application import Application
from chaincmd.bootstrap import create_application
from chaincmd.chain import FROM_MASTER_OPTION
from chaincmd.command import CommandInput
from chaincmd.commands import BarCommand, ChainListCommand, FooCommand
from chaincmd.config import load_config
from chaincmd.console import ConsoleOutput, get_console, print_error
from chaincmd.errors import ConfigurationError
from chaincmd.logging_config import setup_logging

# Initialize the main app
app = typer.Typer(
    name="chaincmd",
    help="chaincmd: console commands that trigger chains of member commands",
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
    pretty_exceptions_enable=False,
)


def version_callback(value: bool):
    if value:
        get_console().print(f"[bold cyan]chaincmd[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit()


@app.callback()
def callback(
    ctx: typer.Context,
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-V", help="Enable verbose output"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Minimal output"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Configuration file path"),
):
    """chaincmd: console commands that trigger chains of member commands."""
    try:
        settings = load_config(config)
    except ConfigurationError as e:
        print_error(e.format(), title="Configuration error")
        raise typer.Exit(1)

    setup_logging(settings.logging, verbose=verbose, quiet=quiet)
    ctx.obj = create_application(settings)


def _run(ctx: typer.Context, name: str, options: Optional[Dict[str, Any]] = None) -> None:
    application: Application = ctx.obj
    exit_code = application.run(name, CommandInput(options), ConsoleOutput())
    if exit_code:
        raise typer.Exit(exit_code)


@app.command(name=FooCommand.name, help=FooCommand.description)
def foo_hello(ctx: typer.Context):
    _run(ctx, FooCommand.name)


@app.command(name=BarCommand.name, help=BarCommand.description)
def bar_hi(
    ctx: typer.Context,
    from_master: bool = typer.Option(
        False,
        f"--{FROM_MASTER_OPTION}",
        help=f"Indicates if this command was triggered by {BarCommand.master}.",
    ),
):
    _run(ctx, BarCommand.name, {FROM_MASTER_OPTION: from_master})


@app.command(name=ChainListCommand.name, help=ChainListCommand.description)
def chain_list(ctx: typer.Context):
    _run(ctx, ChainListCommand.name)


def main():
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
