"""Main CLI entry point."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

import click

from chromapick import __version__

from .commands import config, convert, hsl, palette, spectrum

logger = logging.getLogger(__name__)

APP_DIR = Path.home() / ".chromapick"


def resolve_log_path(debug: bool, log_file: Optional[Path]) -> Path:
    """Work out where log output goes for the given flags."""
    if log_file:
        return log_file
    if debug:
        return Path.cwd() / "chromapick-debug.log"
    return APP_DIR / "logs" / "chromapick.log"


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> Path:
    """
    Configure logging for the application.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, enable debug mode with file logging in the current directory
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
@click.version_option(version=__version__, prog_name="chromapick")
@click.option(
    '--color',
    '-c',
    type=str,
    default=None,
    help='Start color as #RRGGBB (default: last picked or configured color)'
)
@click.option(
    '--tab',
    '-t',
    type=click.Choice(['grid', 'spectrum', 'sliders'], case_sensitive=False),
    default=None,
    help='Tab the picker opens on (default: from config)'
)
@click.option(
    '--config-file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Config file path (default: ~/.chromapick/config.json)'
)
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (DEBUG level, logs to ./chromapick-debug.log)'
)
@click.option(
    '--log-file',
    type=click.Path(path_type=Path),
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
    color: Optional[str],
    tab: Optional[str],
    config_file: Optional[Path],
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str
):
    """
    chromapick - terminal color picker with presets, spectrum and RGB entry.

    Without a subcommand, opens the interactive picker. The picked color
    is remembered between runs unless disabled in the config.

    \b
    Examples:
      # Open the picker
      chromapick

      # Start from a given color on the spectrum tab
      chromapick --color "#3B82F6" --tab spectrum

      # Convert colors without the UI
      chromapick convert "#3b82f6"
      chromapick hsl 210 100 50

      # Show the preset catalogue
      chromapick palette
    """
    ctx.ensure_object(dict)
    ctx.obj["config_file"] = config_file

    if ctx.invoked_subcommand is not None:
        return

    # Lazy imports to keep subcommands light
    from chromapick.colors import normalize_hex
    from chromapick.exceptions import format_error_for_display
    from chromapick.models import PickerConfig, PickerTab
    from chromapick.tui import ColorPickerApp

    # The TUI owns stdout, so logs go to a file
    log_path = setup_logging(verbose, debug, log_file, log_level)
    logger.info("Starting chromapick")

    start_color = None
    if color is not None:
        start_color = normalize_hex(color, require_hash=False)
        if start_color is None:
            raise click.BadParameter(f"{color!r} is not a #RRGGBB color", param_hint="--color")

    try:
        config_obj = PickerConfig.load_or_default(config_file)
        if tab is not None:
            config_obj = config_obj.model_copy(update={"default_tab": PickerTab(tab.lower())})

        app = ColorPickerApp(config=config_obj, config_path=config_file, color=start_color)
        app.run()

        click.echo(app.current_color)

    except KeyboardInterrupt:
        logger.info("Application interrupted by user")
        click.echo("\nShutting down...", err=True)
    except click.Abort:
        raise
    except Exception as e:
        logger.exception("Error running application")

        user_message, recovery_hint = format_error_for_display(e)

        click.echo("\n" + "=" * 70, err=True)
        click.echo(f"ERROR: {user_message}", err=True)
        click.echo("=" * 70, err=True)

        if recovery_hint:
            click.echo(f"\n{recovery_hint}", err=True)

        click.echo(f"\nFor details, check the log file: {log_path}", err=True)
        sys.exit(1)


cli.add_command(convert)
cli.add_command(hsl)
cli.add_command(palette)
cli.add_command(spectrum)
cli.add_command(config)

if __name__ == "__main__":
    cli()
