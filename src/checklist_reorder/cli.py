"""CLI for checklist-reorder (reorder, watch, settings)."""

import json
from pathlib import Path
from typing import Annotated

import typer
from loguru import logger

from checklist_reorder.core.engine import reorder
from checklist_reorder.host.buffers import FileBuffer
from checklist_reorder.host.service import ReorderService
from checklist_reorder.host.settings_store import (
    SettingsError,
    load_settings,
    save_settings,
    settings_to_dict,
)
from checklist_reorder.host.watcher import Watcher
from checklist_reorder.logging_config import configure_logging
from checklist_reorder.models.checklist import Caret, IgnoreScope
from checklist_reorder.models.settings import (
    DocumentPolicy,
    Settings,
    clamp_interval,
    parse_comma_list,
)

app = typer.Typer(help="Reorder markdown checklists by task status and priority.")
settings_app = typer.Typer(help="Show and change persisted settings.")
app.add_typer(settings_app, name="settings")

_LIST_KEYS = ("statuses", "sorted_statuses", "sorted_substrings", "ignore_substrings")

SettingsFileOption = Annotated[
    Path | None,
    typer.Option("--settings", "-s", help="Settings file (default: ~/.config/checklist-reorder)"),
]


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log warnings and errors"),
) -> None:
    configure_logging(verbose=verbose, quiet=quiet)


def _load(settings_file: Path | None) -> Settings:
    try:
        return load_settings(settings_file)
    except SettingsError as e:
        logger.error("{}", e)
        raise typer.Exit(1) from e


@app.command(name="reorder")
def reorder_cmd(
    paths: Annotated[list[str], typer.Argument(help="Markdown files, or '-' for stdin")],
    line: int = typer.Option(0, "--line", "-l", help="Caret line (zero-based)"),
    ch: int = typer.Option(0, "--ch", "-c", help="Caret column"),
    check: bool = typer.Option(False, "--check", help="Exit with 1 if a file would change"),
    dry_run: bool = typer.Option(False, "--dry-run", "-n", help="Do not write anything"),
    settings_file: SettingsFileOption = None,
) -> None:
    """Reorder checklist items in files."""
    settings = _load(settings_file)
    service = ReorderService(settings)
    would_change: list[str] = []
    failed = False

    for path in paths:
        if path == "-":
            text = typer.get_text_stream("stdin").read()
            result = reorder(text, line, ch, settings.to_config())
            typer.echo(result.text, nl=False)
            if result.changed:
                would_change.append(path)
            continue

        file_path = Path(path)
        if not file_path.is_file():
            logger.error("File not found: {}", file_path)
            failed = True
            continue

        buffer = FileBuffer(file_path, Caret(line=line, ch=ch), dry_run=dry_run or check)
        try:
            result = service.reorder_buffer(buffer, file_path)
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Cannot reorder {}: {}", file_path, e)
            failed = True
            continue

        if result.changed:
            would_change.append(path)
            caret = f"{result.caret_line}:{result.caret_column}"
            typer.echo(f"{path}: {result.status.value} (caret {caret})")
        else:
            typer.echo(f"{path}: {result.status.value}")

    if failed or (check and would_change):
        raise typer.Exit(1)


@app.command()
def watch(
    paths: Annotated[list[Path], typer.Argument(help="Markdown files to watch")],
    interval: Annotated[
        float | None,
        typer.Option("--interval", "-i", help="Seconds between checks (default from settings)"),
    ] = None,
    once: bool = typer.Option(False, "--once", help="Check once and exit"),
    settings_file: SettingsFileOption = None,
) -> None:
    """Watch files and reorder them whenever they change."""
    settings = _load(settings_file)
    watcher = Watcher(paths, settings, interval=interval)
    if once:
        for result in watcher.tick():
            typer.echo(result.status.value)
        return
    try:
        watcher.run()
    except KeyboardInterrupt:
        logger.info("Stopped watching")


@settings_app.command("show")
def settings_show(settings_file: SettingsFileOption = None) -> None:
    """Print the effective settings as JSON."""
    settings = _load(settings_file)
    typer.echo(json.dumps(settings_to_dict(settings), sort_keys=True, indent=2, ensure_ascii=False))


@settings_app.command("set")
def settings_set(
    key: str = typer.Argument(..., help="Setting name, e.g. sorted-statuses"),
    value: str = typer.Option(..., "--value", help="New value; lists are comma separated"),
    settings_file: SettingsFileOption = None,
) -> None:
    """Change one setting and save."""
    settings = _load(settings_file)
    name = key.replace("-", "_")

    if name in _LIST_KEYS:
        setattr(settings, name, parse_comma_list(value))
    elif name == "interval_seconds":
        try:
            settings.interval_seconds = clamp_interval(int(value))
        except ValueError as e:
            logger.error("Interval must be an integer, got {!r}", value)
            raise typer.Exit(1) from e
    elif name == "ignore_scope":
        try:
            settings.ignore_scope = IgnoreScope(value)
        except ValueError as e:
            choices = ", ".join(s.value for s in IgnoreScope)
            logger.error("Unknown ignore scope {!r}, expected one of: {}", value, choices)
            raise typer.Exit(1) from e
    else:
        logger.error("Unknown setting: {}", key)
        raise typer.Exit(1)

    path = save_settings(settings, settings_file)
    typer.echo(f"Saved {name} to {path}")


@settings_app.command("document")
def settings_document(
    path: Path = typer.Argument(..., help="Markdown file"),
    policy: DocumentPolicy = typer.Argument(..., help="enabled, disabled or unspecified"),
    settings_file: SettingsFileOption = None,
) -> None:
    """Enable or disable reordering for a single document."""
    settings = _load(settings_file)
    settings.set_document_policy(path, policy)
    save_settings(settings, settings_file)
    typer.echo(f"{path}: {policy.value}")
