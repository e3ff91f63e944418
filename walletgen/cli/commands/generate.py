"""Generate a batch of wallets and export it."""

import asyncio
import logging
import os
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from walletgen.cli.commands._history_helpers import open_history
from walletgen.cli.output import format_error, format_success, format_warning, json_output, print_payload
from walletgen.cli.utils import (
    ConfigError,
    ConfigManager,
    validate_format,
    validate_selection,
    validate_workers,
)
from walletgen.state import Session, save_batch
from walletgen.wallet import (
    Batch,
    InvalidCountError,
    RandomSourceError,
    coerce_count,
    export_rows,
    generate_batch,
    render_export,
)

console = Console()
err_console = Console(stderr=True)
logger = logging.getLogger(__name__)


async def _save(config: ConfigManager, batch: Batch) -> Session:
    """Persist a batch as a new history session."""
    return await save_batch(open_history(config), batch)


def write_export(path: Path, payload: str) -> None:
    """Write an export payload to a file readable only by the owner."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    with os.fdopen(fd, "w", encoding="utf-8") as f:
        f.write(payload)


def generate_command(
    count: Optional[str],
    public: Optional[bool],
    fmt: Optional[str],
    selection: str,
    save: Optional[bool],
    output: Optional[str],
    workers: int,
    json_flag: bool,
) -> None:
    """Generate wallets, optionally save them, and print the export payload."""
    config = ConfigManager()
    try:
        prefs = config.load()
    except ConfigError as e:
        format_error(console, str(e), hint=f"Fix or remove {config.config_path}")
        raise typer.Exit(code=1)

    try:
        export_format = validate_format(fmt) if fmt else prefs.output_format
        key_selection = validate_selection(selection)
        workers = validate_workers(workers)
    except ValueError as e:
        format_error(console, str(e))
        raise typer.Exit(code=2)

    default_count = coerce_count(prefs.default_wallet_count)
    wallet_count = coerce_count(count, default=default_count)
    if count is not None and wallet_count != _as_int(count):
        logger.warning("Ignoring invalid wallet count %r, using %d", count, wallet_count)
    include_public = prefs.include_public_keys if public is None else public
    save_to_history = prefs.save_to_history if save is None else save

    try:
        batch = generate_batch(wallet_count, include_public, max_workers=workers)
    except InvalidCountError as e:
        format_error(console, str(e))
        raise typer.Exit(code=2)
    except RandomSourceError as e:
        format_error(console, f"Wallet generation failed: {e}")
        raise typer.Exit(code=1)

    payload = render_export(batch, export_format, key_selection)

    session_id: Optional[str] = None
    if save_to_history:
        try:
            session_id = asyncio.run(_save(config, batch)).id
        except Exception as e:
            format_warning(err_console, f"Could not save to history: {e}")

    output_path = Path(output) if output else None
    if output_path:
        try:
            write_export(output_path, payload)
        except OSError as e:
            format_error(console, f"Could not write {output_path}: {e}")
            raise typer.Exit(code=1)

    summary = f"Generated {batch.count} wallets in {batch.generation_time_ms:.2f}ms"

    if json_flag:
        json_output(
            console,
            {
                "status": "generated",
                "count": batch.count,
                "generation_time_ms": round(batch.generation_time_ms, 2),
                "format": export_format,
                "selection": key_selection,
                "include_public_key": batch.include_public_key,
                "session_id": session_id,
                "output": str(output_path) if output_path else None,
                "wallets": None if output_path else export_rows(batch, key_selection),
            },
        )
        return

    if output_path:
        format_success(console, f"{summary}, exported to {output_path}")
        if session_id:
            console.print(f"[cyan]Session:[/cyan] {session_id}")
        return

    print_payload(console, payload)
    format_success(err_console, summary)
    if session_id:
        err_console.print(f"[cyan]Saved to history as session {session_id}[/cyan]")


def _as_int(text: str) -> Optional[int]:
    try:
        return int(text.strip())
    except ValueError:
        return None
