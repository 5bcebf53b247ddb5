"""Configuration commands."""

import click

from chromapick.exceptions import ConfigurationError
from chromapick.model_manager import PydanticPersistence
from chromapick.models import PickerConfig
from chromapick.models.config import DEFAULT_CONFIG_PATH


def _config_path(ctx: click.Context):
    obj = ctx.find_root().obj or {}
    return obj.get("config_file") or DEFAULT_CONFIG_PATH


@click.group(name="config")
def config():
    """Inspect the picker configuration."""
    pass


@config.command(name="path")
@click.pass_context
def config_path(ctx: click.Context):
    """Print the config file location."""
    click.echo(str(_config_path(ctx)))


@config.command(name="show")
@click.pass_context
def show_config(ctx: click.Context):
    """Print the effective configuration as JSON."""
    path = _config_path(ctx)
    try:
        config_obj = PickerConfig.load_or_default(path)
    except ConfigurationError as e:
        raise click.ClickException(e.get_full_message()) from e

    if not path.exists():
        click.echo(f"# {path} does not exist, showing defaults", err=True)
    click.echo(config_obj.model_dump_json(indent=2))


@config.command(name="validate")
@click.pass_context
def validate_config(ctx: click.Context):
    """Check that the config file loads cleanly."""
    path = _config_path(ctx)
    error = PydanticPersistence.validate_json(path, PickerConfig)
    if error is not None:
        raise click.ClickException(error)
    click.echo(f"{path}: OK")
