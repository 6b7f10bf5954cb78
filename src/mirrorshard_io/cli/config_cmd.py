"""Configuration management CLI commands."""

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from mirrorshard_io.constants import DEFAULT_CONFIG_DIR
from mirrorshard_io.core.config import ConfigManager
from mirrorshard_io.models.config import AppConfig
from mirrorshard_io.utils.app_logger import get_logger

console = Console()
logger = get_logger(__name__)


def _manager(ctx: click.Context) -> ConfigManager:
    ctx.ensure_object(dict)
    return ConfigManager(ctx.obj.get("config_dir", DEFAULT_CONFIG_DIR))


@click.group(name="config")
def config_group() -> None:
    """Manage application configuration settings."""
    pass


@config_group.command(name="get")
@click.argument("key", type=str)
@click.pass_context
def config_get(ctx: click.Context, key: str) -> None:
    """Get a configuration value.

    Args:
        key: Configuration key to retrieve (e.g., 'default_encoding')
    """
    try:
        value = _manager(ctx).get(key)

        if value is None:
            console.print(f"[yellow]Configuration key '{escape(key)}' not set[/yellow]")
        else:
            console.print(f"[bold]{escape(key)}[/bold] = [green]{escape(str(value))}[/green]")

    except Exception as e:
        console.print(f"[red]Error getting config: {escape(str(e))}[/red]")
        raise click.Abort()


@config_group.command(name="set")
@click.argument("key", type=str)
@click.argument("value", type=str)
@click.pass_context
def config_set(ctx: click.Context, key: str, value: str) -> None:
    """Set a configuration value.

    Known settings are validated; anything else is stored as-is.

    Args:
        key: Configuration key to set
        value: Value to assign to the key
    """
    try:
        config_mgr = _manager(ctx)

        converted_value = value if key in AppConfig.model_fields else _convert_value(value)
        config_mgr.set(key, converted_value)
        config_mgr.save()

        stored = config_mgr.get(key)
        console.print(
            f"[green]✓[/green] Set [bold]{escape(key)}[/bold] = [green]{escape(str(stored))}[/green]"
        )
        logger.info(f"Configuration updated: {key} = {stored}")

    except Exception as e:
        console.print(f"[red]Error setting config: {escape(str(e))}[/red]")
        raise click.Abort()


@config_group.command(name="list")
@click.pass_context
def config_list(ctx: click.Context) -> None:
    """List all configuration settings."""
    try:
        config_dict = _manager(ctx).to_dict()

        table = Table(title="Configuration Settings")
        table.add_column("Key", style="cyan", no_wrap=True)
        table.add_column("Value", style="green")
        table.add_column("Type", style="dim")

        for key, value in sorted(config_dict.items()):
            table.add_row(key, escape(str(value)), type(value).__name__)

        console.print(table)

    except Exception as e:
        console.print(f"[red]Error listing config: {escape(str(e))}[/red]")
        raise click.Abort()


@config_group.command(name="reset")
@click.argument("key", type=str, required=False)
@click.option("--all", "reset_all", is_flag=True, help="Reset all configuration to defaults")
@click.pass_context
def config_reset(ctx: click.Context, key: str | None, reset_all: bool) -> None:
    """Reset configuration to default values.

    Args:
        key: Specific configuration key to reset (optional)
        reset_all: Reset all configuration if True
    """
    try:
        config_mgr = _manager(ctx)

        if reset_all:
            config_mgr.reset_to_defaults()
            config_mgr.save()
            console.print("[green]✓[/green] Reset all configuration to defaults")
            logger.info("Configuration reset to defaults")
        elif key:
            config_mgr.reset_key(key)
            config_mgr.save()
            console.print(f"[green]✓[/green] Reset [bold]{escape(key)}[/bold] to default")
            logger.info(f"Configuration key reset: {key}")
        else:
            console.print("[yellow]Specify a key to reset or use --all flag[/yellow]")

    except Exception as e:
        console.print(f"[red]Error resetting config: {escape(str(e))}[/red]")
        raise click.Abort()


def _convert_value(value_str: str) -> bool | int | float | str:
    """Convert string value to appropriate Python type.

    Args:
        value_str: String representation of value

    Returns:
        Converted value (bool, int, float, or str)
    """
    if value_str.lower() in ("true", "yes", "on"):
        return True
    if value_str.lower() in ("false", "no", "off"):
        return False

    try:
        return int(value_str)
    except ValueError:
        pass

    try:
        return float(value_str)
    except ValueError:
        pass

    return value_str
