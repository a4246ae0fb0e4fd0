"""Command-line interface for Simon."""

import logging
import sys
from pathlib import Path

import click
from rich.console import Console

from .app import Simon
from .config import ConfigModel, get_config_path, load_config, save_config
from .storage import Storage
from .ui import Ui


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def build_session(config: ConfigModel) -> Simon:
    """Wire storage and console UI for ``config``."""
    console = Console(no_color=config.no_color)
    storage = Storage(config.get_data_path())
    return Simon(storage, Ui(console), suggest_commands=config.suggest_commands)


@click.group(invoke_without_command=True)
@click.option("--config", "config_path", type=click.Path(dir_okay=False), help="Path to config file")
@click.option("--data-file", type=click.Path(dir_okay=False), help="Task file to use")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.pass_context
def main(ctx, config_path, data_file, verbose):
    """Simon - keep track of todos, deadlines and events."""
    setup_logging(verbose)

    ctx.ensure_object(dict)
    ctx.obj["config_path"] = Path(config_path) if config_path else get_config_path()
    config = load_config(ctx.obj["config_path"])
    if data_file:
        config.data_file = str(Path(data_file).expanduser())
    ctx.obj["config"] = config

    if ctx.invoked_subcommand is None:
        ctx.invoke(chat)


@main.command()
@click.pass_context
def chat(ctx):
    """Start an interactive session (the default)."""
    build_session(ctx.obj["config"]).run()


@main.command()
@click.argument("words", nargs=-1, required=True)
@click.pass_context
def run(ctx, words):
    """Run a single command, e.g. simon run deadline report /by friday."""
    build_session(ctx.obj["config"]).execute(" ".join(words))


@main.command()
@click.option("--init", is_flag=True, help="Write the current settings to the config file")
@click.pass_context
def config(ctx, init):
    """Show the active configuration."""
    cfg = ctx.obj["config"]
    path = ctx.obj["config_path"]

    if init:
        save_config(cfg, path)
        click.echo(f"Configuration saved to {path}")
        return

    click.echo(f"# {path}")
    click.echo(cfg.to_yaml(), nl=False)


if __name__ == "__main__":
    main()
