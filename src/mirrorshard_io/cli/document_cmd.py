"""Document CLI commands: open, save, convert, scan and ls."""

from __future__ import annotations

import json
from pathlib import Path
from typing import NoReturn

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from mirrorshard_io.constants import (
    DEFAULT_CONFIG_DIR,
    EXIT_CONFIG_ERROR,
    EXIT_FILE_ERROR,
    EXIT_INVALID_ARGS,
    EXIT_PERMISSION_ERROR,
    EXIT_UNSUPPORTED_ENCODING,
)
from mirrorshard_io.core.config import ConfigManager
from mirrorshard_io.core.decoder import decode, read_document
from mirrorshard_io.core.errors import DocumentIOError, UnsupportedEncodingError
from mirrorshard_io.core.loader import DocumentLoader, LoadResult, LoadStatus
from mirrorshard_io.core.writer import write_document
from mirrorshard_io.models.config import AppConfig
from mirrorshard_io.models.document import LineEnding, TextEncoding
from mirrorshard_io.utils.app_logger import get_logger
from mirrorshard_io.utils.file_utils import list_directory

console = Console()
logger = get_logger(__name__)


class EncodingType(click.ParamType):
    """Click parameter accepting loose encoding tags such as 'utf8' or 'sjis'."""

    name = "encoding"

    def convert(
        self, value: object, param: click.Parameter | None, ctx: click.Context | None
    ) -> TextEncoding:
        if isinstance(value, TextEncoding):
            return value
        try:
            return TextEncoding.parse(str(value))
        except ValueError as e:
            self.fail(str(e), param, ctx)


ENCODING = EncodingType()


def _load_config(ctx: click.Context) -> AppConfig:
    ctx.ensure_object(dict)
    if "config" in ctx.obj:
        return ctx.obj["config"]
    config_dir: Path = ctx.obj.get("config_dir", DEFAULT_CONFIG_DIR)
    try:
        return ConfigManager(config_dir).load()
    except ValueError as e:
        console.print(f"[red]Configuration error: {escape(str(e))}[/red]", soft_wrap=True)
        ctx.exit(EXIT_CONFIG_ERROR)


def _fail(ctx: click.Context, error: DocumentIOError) -> NoReturn:
    """Report a document error and exit with the matching code."""
    if isinstance(error, UnsupportedEncodingError):
        code = EXIT_UNSUPPORTED_ENCODING
    elif isinstance(error.__cause__, PermissionError):
        code = EXIT_PERMISSION_ERROR
    else:
        code = EXIT_FILE_ERROR
    console.print(f"[red]Error: {escape(str(error))}[/red]", highlight=False, soft_wrap=True)
    ctx.exit(code)


@click.command(name="open")
@click.argument("path", type=click.Path(path_type=Path), required=False)
@click.option("--json", "as_json", is_flag=True, help="Print the document as a JSON payload")
@click.option("--meta-only", is_flag=True, help="Print only encoding and line ending")
@click.pass_context
def open_command(ctx: click.Context, path: Path | None, as_json: bool, meta_only: bool) -> None:
    """Decode a file and print its content.

    Without PATH, opens the file handed over through --file.
    """
    ctx.ensure_object(dict)
    if path is None:
        pending = ctx.obj.get("pending")
        path = pending.take() if pending is not None else None
        if path is None:
            raise click.UsageError("Provide PATH or start with --file")

    try:
        document = read_document(path)
    except DocumentIOError as e:
        _fail(ctx, e)

    if as_json:
        payload = document.to_payload()
        if meta_only:
            payload.pop("content")
        click.echo(json.dumps(payload, ensure_ascii=False))
    elif meta_only:
        click.echo(f"encoding: {document.encoding.value}")
        click.echo(f"line_ending: {document.line_ending.value}")
    else:
        click.echo(document.content, nl=False)


@click.command(name="save")
@click.argument("path", type=click.Path(path_type=Path))
@click.option(
    "--encoding",
    "-e",
    type=ENCODING,
    default=None,
    help="UTF-8 or Shift_JIS (default: the file's current encoding)",
)
@click.option(
    "--input",
    "-i",
    "input_path",
    type=click.Path(allow_dash=True, path_type=Path),
    default="-",
    show_default=True,
    help="File to read the new content from ('-' for stdin)",
)
@click.pass_context
def save_command(
    ctx: click.Context, path: Path, encoding: TextEncoding | None, input_path: Path
) -> None:
    """Atomically write new content to PATH."""
    config = _load_config(ctx)

    try:
        if str(input_path) == "-":
            content = decode(click.get_binary_stream("stdin").read()).content
        else:
            content = read_document(input_path).content
    except DocumentIOError as e:
        _fail(ctx, e)

    if encoding is None:
        encoding = _current_encoding(path) or config.default_encoding

    try:
        write_document(path, content, encoding, temp_suffix=config.temp_suffix)
    except DocumentIOError as e:
        _fail(ctx, e)

    console.print(
        f"[green]✓[/green] Saved {escape(str(path))} ({encoding.value})",
        highlight=False,
        soft_wrap=True,
    )


def _current_encoding(path: Path) -> TextEncoding | None:
    """Encoding an existing file decodes with, if any."""
    if not path.is_file():
        return None
    try:
        return read_document(path).encoding
    except DocumentIOError as e:
        logger.debug(f"Keeping default encoding for {path}: {e}")
        return None


@click.command(name="convert")
@click.argument("path", type=click.Path(path_type=Path))
@click.option("--to", "target", type=ENCODING, required=True, help="UTF-8 or Shift_JIS")
@click.option(
    "--line-ending",
    type=click.Choice([member.value for member in LineEnding], case_sensitive=False),
    default=None,
    help="Rewrite every line ending to LF or CRLF",
)
@click.pass_context
def convert_command(
    ctx: click.Context, path: Path, target: TextEncoding, line_ending: str | None
) -> None:
    """Re-encode PATH in place, optionally normalizing line endings."""
    config = _load_config(ctx)

    try:
        document = read_document(path)
    except DocumentIOError as e:
        _fail(ctx, e)

    content = document.content
    if line_ending is not None:
        ending = LineEnding(line_ending.upper())
        content = content.replace("\r\n", "\n")
        if ending is LineEnding.CRLF:
            content = content.replace("\n", "\r\n")

    try:
        write_document(path, content, target, temp_suffix=config.temp_suffix)
    except DocumentIOError as e:
        _fail(ctx, e)

    console.print(
        f"[green]✓[/green] Converted {escape(str(path))}: "
        f"{document.encoding.value} -> {target.value}",
        highlight=False,
        soft_wrap=True,
    )


@click.command(name="scan")
@click.argument("directory", type=click.Path(path_type=Path))
@click.option("--workers", "-w", type=int, default=None, help="Worker pool size")
@click.option("--hidden", is_flag=True, help="Include dot-files")
@click.pass_context
def scan_command(ctx: click.Context, directory: Path, workers: int | None, hidden: bool) -> None:
    """Detect the encoding and line ending of every file in DIRECTORY."""
    config = _load_config(ctx)
    if workers is not None and workers < 1:
        console.print("[red]--workers must be at least 1[/red]")
        ctx.exit(EXIT_INVALID_ARGS)

    try:
        entries = list_directory(directory, include_hidden=hidden or config.include_hidden)
    except DocumentIOError as e:
        _fail(ctx, e)

    files = [entry.path for entry in entries if not entry.is_dir]
    if not files:
        console.print("[yellow]No files found[/yellow]")
        return

    loader = DocumentLoader(max_workers=workers or config.max_workers)
    results = loader.load_many(files)
    console.print(_results_table(results))

    failed = sum(1 for r in results if not r.ok)
    if failed:
        console.print(f"[yellow]{failed} of {len(results)} file(s) could not be decoded[/yellow]")


def _results_table(results: list[LoadResult]) -> Table:
    table = Table(title="Documents", show_header=True, header_style="bold cyan")
    table.add_column("File", style="bold")
    table.add_column("Encoding")
    table.add_column("Line Ending")
    table.add_column("Status")

    for result in results:
        if result.document is not None:
            table.add_row(
                result.path.name,
                result.document.encoding.value,
                result.document.line_ending.value,
                "[green]ok[/green]",
            )
        else:
            status = (
                "unsupported encoding"
                if result.status == LoadStatus.UNSUPPORTED_ENCODING
                else "read error"
            )
            table.add_row(result.path.name, "-", "-", f"[red]{status}[/red]")
    return table


@click.command(name="ls")
@click.argument("directory", type=click.Path(path_type=Path), default=".")
@click.option("--hidden", is_flag=True, help="Include dot-entries")
@click.pass_context
def ls_command(ctx: click.Context, directory: Path, hidden: bool) -> None:
    """List DIRECTORY, folders first."""
    config = _load_config(ctx)
    try:
        entries = list_directory(directory, include_hidden=hidden or config.include_hidden)
    except DocumentIOError as e:
        _fail(ctx, e)

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Name", style="bold")
    table.add_column("Type")
    for entry in entries:
        table.add_row(entry.name, "dir" if entry.is_dir else "file")
    console.print(table)
