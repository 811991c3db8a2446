"""Helpers shared by CLI subcommands."""

import logging

import click

from uniformcolors.cli.errors import report_error
from uniformcolors.exceptions import UniformColorsError
from uniformcolors.models import AppConfig, UniformColor
from uniformcolors.registry import PrototypeRegistry, build_registry

logger = logging.getLogger(__name__)


def load_config(ctx: click.Context) -> AppConfig:
    """Load the configuration selected by the root --config option, exiting 1 on errors."""
    root_obj = ctx.find_root().obj or {}
    try:
        return AppConfig.load_or_default(root_obj.get("config_path"))
    except UniformColorsError as e:
        logger.error(f"Failed to load configuration: {e.technical_message}")
        report_error(e)
        ctx.exit(1)


def load_registry(ctx: click.Context) -> PrototypeRegistry[UniformColor]:
    """Build a registry from the configured prototypes."""
    return build_registry(load_config(ctx).prototypes)
