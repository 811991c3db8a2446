"""Command line interface for uniformcolors."""
