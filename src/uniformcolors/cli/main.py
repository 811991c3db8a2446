"""Main CLI entry point."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

import click

from uniformcolors import __version__

from .commands import config, copy_command, list_command
from .errors import report_error

logger = logging.getLogger(__name__)


def resolve_log_path(debug: bool, log_file: Optional[Path]) -> Path:
    """Return the log file used for the given --debug/--log-file flags."""
    if log_file:
        return log_file
    if debug:
        return Path.cwd() / "uniformcolors-debug.log"
    return Path.home() / ".uniformcolors" / "logs" / "uniformcolors.log"


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> Path:
    """
    Configure logging for the application.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, enable debug mode with file logging
        log_file: Custom log file path (optional)
        log_level: Log level for file logging (DEBUG/INFO/WARNING/ERROR)

    Returns:
        Path of the log file
    """
    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    # Explicit log level wins when logging to a custom file
    if log_file:
        level = getattr(logging, log_level.upper())

    log_path = resolve_log_path(debug, log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Rotating file handler (keeps last 5 files, max 10MB each)
    file_handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=10 * 1024 * 1024,
        backupCount=5
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(file_handler)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_path}")
    return log_path


@click.group(invoke_without_command=True)
@click.pass_context
@click.version_option(version=__version__, prog_name="uniformcolors")
@click.option(
    '--config',
    '-c',
    'config_path',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Configuration file (default: ~/.uniformcolors/config.json)'
)
@click.option(
    '--pause/--no-pause',
    default=None,
    help='Wait for a key press before exiting (default: from config)'
)
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (DEBUG level, logs to ./uniformcolors-debug.log)'
)
@click.option(
    '--log-file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Custom log file path'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    default='INFO',
    help='Log level for file logging (default: INFO)'
)
def cli(
    ctx,
    config_path: Optional[Path],
    pause: Optional[bool],
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str
):
    """
    Starfleet Uniform Colors - a Prototype pattern demonstration.

    Registers six prototype uniform colors, then creates new uniforms by
    copying them: shallow copies of Red and Engineering and a deep copy
    of Medical.

    \b
    Examples:
      # Run the demonstration
      uniformcolors

      # Run without waiting for a key press
      uniformcolors --no-pause

      # List registered prototypes
      uniformcolors list

      # Deep copy a single prototype
      uniformcolors copy medical --deep
    """
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path

    if ctx.invoked_subcommand is not None:
        return

    from uniformcolors.demo import run_demo
    from uniformcolors.models import AppConfig

    log_path = setup_logging(verbose, debug, log_file, log_level)
    logger.info("Starting prototype demonstration")

    try:
        config_obj = AppConfig.load_or_default(config_path)
        run_demo(config_obj.prototypes, echo=click.echo)
    except Exception as e:
        logger.exception("Error running demonstration")
        report_error(e, log_path)
        sys.exit(1)

    should_pause = config_obj.pause_on_exit if pause is None else pause
    if should_pause:
        # click.pause is a no-op when stdin is not a terminal
        click.pause()

    logger.info("Demonstration finished")


cli.add_command(list_command)
cli.add_command(copy_command)
cli.add_command(config)

if __name__ == "__main__":
    cli()
