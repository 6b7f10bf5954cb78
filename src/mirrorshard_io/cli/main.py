"""Main CLI entry point using Click framework."""

import logging
import sys
from pathlib import Path

import click
from rich.console import Console

from mirrorshard_io import __version__
from mirrorshard_io.constants import (
    DEFAULT_CONFIG_DIR,
    DEFAULT_LOG_FILE,
    EXIT_GENERAL_ERROR,
    EXIT_SUCCESS,
    LOG_RETENTION_DAYS,
)
from mirrorshard_io.core.config import ConfigManager
from mirrorshard_io.core.pending import PendingFileSlot
from mirrorshard_io.utils.app_logger import cleanup_old_logs, get_logger, setup_logging

console = Console()
logger = get_logger(__name__)


class AliasedGroup(click.Group):
    """Custom Click Group that supports command aliases."""

    aliases = {
        "o": "open",
        "s": "save",
        "c": "config",
    }

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        """Override to support command aliases."""
        return super().get_command(ctx, self.aliases.get(cmd_name, cmd_name))


@click.group(cls=AliasedGroup)
@click.version_option(version=__version__, prog_name="mirrorshard-io")
@click.option(
    "--config-dir",
    type=click.Path(path_type=Path),
    default=DEFAULT_CONFIG_DIR,
    help="Configuration directory path",
    envvar="MIRRORSHARD_CONFIG_DIR",
)
@click.option(
    "--file",
    "-f",
    "launch_file",
    type=click.Path(path_type=Path),
    default=None,
    help="File handed over by the OS launcher; opened when 'open' gets no PATH",
    envvar="MIRRORSHARD_OPEN_FILE",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose logging",
)
@click.pass_context
def cli(ctx: click.Context, config_dir: Path, launch_file: Path | None, verbose: bool) -> None:
    """MirrorShard document I/O.

    Open text files in UTF-8 or Shift_JIS, keep track of their encoding and
    line endings, and save edits back atomically.
    """
    ctx.ensure_object(dict)

    pending = PendingFileSlot()
    if launch_file is not None:
        pending.offer(launch_file)

    ctx.obj["config_dir"] = config_dir
    ctx.obj["verbose"] = verbose
    ctx.obj["pending"] = pending

    config_error: str | None = None
    try:
        config = ConfigManager(config_dir).load()
    except ValueError as e:
        # Commands that need settings reload them and report the error themselves
        config = None
        config_error = str(e)
    else:
        ctx.obj["config"] = config

    log_file = config.log_path if config is not None else config_dir / DEFAULT_LOG_FILE
    retention_days = config.log_retention_days if config is not None else LOG_RETENTION_DAYS
    try:
        # Console stays quiet by default so document content on stdout is clean
        setup_logging(log_file, console_level=logging.DEBUG if verbose else logging.WARNING)
        cleanup_old_logs(log_file, retention_days=retention_days)
    except Exception as e:
        console.print(f"[yellow]Warning: Could not initialize logging: {e}[/yellow]")
    if config_error is not None:
        logger.debug(f"Using default log settings, configuration not loaded: {config_error}")


# Import command groups
from mirrorshard_io.cli.config_cmd import config_group  # noqa: E402
from mirrorshard_io.cli.document_cmd import (  # noqa: E402
    convert_command,
    ls_command,
    open_command,
    save_command,
    scan_command,
)

# Register commands
cli.add_command(open_command)
cli.add_command(save_command)
cli.add_command(convert_command)
cli.add_command(scan_command)
cli.add_command(ls_command)
cli.add_command(config_group)


def main() -> int:
    """Main entry point for CLI."""
    try:
        # Non-standalone mode returns the ctx.exit() code instead of raising SystemExit
        rv = cli(obj={}, standalone_mode=False)
        return rv if isinstance(rv, int) else EXIT_SUCCESS
    except click.ClickException as e:
        e.show()
        return e.exit_code
    except click.Abort:
        console.print("[red]Aborted.[/red]")
        return EXIT_GENERAL_ERROR
    except Exception as e:
        logger.debug(f"Unhandled error: {e}", exc_info=True)
        console.print(f"[red]Error: {e}[/red]")
        return EXIT_GENERAL_ERROR


if __name__ == "__main__":
    sys.exit(main())
