"""CLI commands for uniformcolors."""

from .config import config
from .copy import copy_command
from .list import list_command

__all__ = ["config", "copy_command", "list_command"]
