"""
Config command group.

Commands:
    - config show             # Display configuration as JSON
    - config init [--force]   # Write the default configuration file
"""

import click

from uniformcolors.models import AppConfig
from uniformcolors.models.config import DEFAULT_CONFIG_PATH

from .common import load_config


@click.group(name="config")
def config():
    """Show or create the configuration file."""
    pass


@config.command(name="show")
@click.pass_context
def show_config(ctx):
    """Display the active configuration."""
    click.echo(load_config(ctx).model_dump_json(indent=2))


@config.command(name="init")
@click.pass_context
@click.option('--force', is_flag=True, help='Overwrite an existing file (keeps a .bak copy)')
def init_config(ctx, force: bool):
    """Write the default configuration file."""
    path = ctx.find_root().obj.get("config_path") or DEFAULT_CONFIG_PATH

    if path.exists() and not force:
        click.echo(f"Configuration already exists: {path}", err=True)
        click.echo("Use --force to overwrite it.", err=True)
        ctx.exit(1)

    AppConfig().save(path)
    click.echo(f"Wrote default configuration to {path}")
