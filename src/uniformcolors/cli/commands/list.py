"""List command implementation."""

import click

from .common import load_registry


@click.command(name="list")
@click.pass_context
def list_command(ctx):
    """List registered prototype colors."""
    registry = load_registry(ctx)

    click.echo(f"Registered prototypes ({len(registry)}):\n")
    for category, color in registry.items():
        red, green, blue = color.to_rgb_tuple()
        click.echo(
            f"  {category.label:<12} {color.to_hex()}  "
            f"red={red:>3} green={green:>3} blue={blue:>3}"
        )
