"""Copy command implementation."""

import click

from uniformcolors.cli.errors import report_error
from uniformcolors.exceptions import UniformColorsError
from uniformcolors.models import UniformCategory

from .common import load_registry


@click.command(name="copy")
@click.pass_context
@click.argument('category')
@click.option(
    '--shallow/--deep',
    default=True,
    help='Copy strategy (default: shallow)'
)
def copy_command(ctx, category: str, shallow: bool):
    """Copy a single prototype and print its trace.

    CATEGORY is one of: red, green, blue, command, engineering, medical.

    \b
    Examples:
      uniformcolors copy red
      uniformcolors copy medical --deep
    """
    registry = load_registry(ctx)

    try:
        uniform = registry.clone(category.lower(), shallow=shallow)
    except UniformColorsError as e:
        report_error(e)
        ctx.exit(1)

    kind = "Shallow" if shallow else "Deep"
    click.echo(uniform.describe_copy(kind, UniformCategory(category.lower()).label))
