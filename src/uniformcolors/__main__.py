"""Main entry point for uniformcolors."""

from uniformcolors.cli.main import cli


if __name__ == "__main__":
    cli()
