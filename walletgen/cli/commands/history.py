"""List, export and delete saved generation sessions."""

import asyncio
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from walletgen.cli.commands._history_helpers import open_history, session_summary
from walletgen.cli.commands.generate import write_export
from walletgen.cli.output import (
    format_error,
    format_success,
    format_table,
    format_warning,
    json_output,
    print_payload,
)
from walletgen.cli.utils import (
    ConfigError,
    ConfigManager,
    validate_format,
    validate_selection,
    validate_session_id,
)
from walletgen.cli.utils.confirmation import ClearConfirmation, ClearState
from walletgen.state import DatabaseError, Session
from walletgen.wallet import render_export

console = Console()

_FIRST_PROMPT = "Delete all {count} saved sessions?"
_SECOND_PROMPT = "This cannot be undone. Really clear history?"


def _run_async(coro, error_label: str):
    """Run async operation with standard error handling."""
    try:
        return asyncio.run(coro)
    except DatabaseError as e:
        format_error(console, f"Failed to {error_label}: {e}", hint="Check the history database path")
        raise typer.Exit(code=1)
    except Exception as e:
        format_error(console, f"Failed to {error_label}: {e}")
        raise typer.Exit(code=1)


async def _list() -> list[Session]:
    return await open_history(ConfigManager()).list_sessions()


async def _get(session_id: str) -> Optional[Session]:
    return await open_history(ConfigManager()).get(session_id)


async def _delete(session_id: str) -> bool:
    return await open_history(ConfigManager()).delete_one(session_id)


async def _clear() -> None:
    await open_history(ConfigManager()).delete_all()


def _checked_session_id(session_id: str) -> str:
    try:
        return validate_session_id(session_id)
    except ValueError as e:
        format_error(console, str(e))
        raise typer.Exit(code=2)


def list_command(json_flag: bool) -> None:
    """List saved sessions, newest first."""
    sessions = _run_async(_list(), "list history")

    if json_flag:
        json_output(console, {"sessions": [session_summary(s) for s in sessions]})
        return

    if not sessions:
        console.print("[dim]No saved sessions. Use 'walletgen generate --save'.[/dim]")
        return

    rows = [
        (
            s.id,
            s.created_at.strftime("%Y-%m-%d %H:%M:%S"),
            str(s.batch.count),
            "yes" if s.batch.include_public_key else "no",
            f"{s.batch.generation_time_ms:.2f}ms",
        )
        for s in sessions
    ]
    format_table(console, "History", ["ID", "Created (UTC)", "Wallets", "Public Keys", "Time"], rows)


def show_command(
    session_id: str,
    fmt: Optional[str],
    selection: str,
    output: Optional[str],
) -> None:
    """Print the export payload of a saved session."""
    session_id = _checked_session_id(session_id)
    try:
        selected = validate_selection(selection)
        export_format = validate_format(fmt) if fmt else ConfigManager().load().output_format
    except ValueError as e:
        format_error(console, str(e))
        raise typer.Exit(code=2)
    except ConfigError as e:
        format_error(console, str(e))
        raise typer.Exit(code=1)

    session = _run_async(_get(session_id), "read history")
    if session is None:
        format_error(console, f"Session not found: {session_id}", hint="walletgen history list")
        raise typer.Exit(code=1)

    payload = render_export(session.batch, export_format, selected)
    if output:
        try:
            write_export(Path(output), payload)
        except OSError as e:
            format_error(console, f"Could not write {output}: {e}")
            raise typer.Exit(code=1)
        format_success(console, f"Session {session_id} exported to {output}")
        return
    print_payload(console, payload)


def delete_command(session_id: str, json_flag: bool) -> None:
    """Delete a single saved session."""
    session_id = _checked_session_id(session_id)
    deleted = _run_async(_delete(session_id), "delete session")

    if json_flag:
        json_output(console, {"status": "deleted" if deleted else "not_found", "id": session_id})
        return
    if deleted:
        format_success(console, f"Deleted session {session_id}")
    else:
        format_warning(console, f"No session with id {session_id}")


def clear_command(yes: bool, json_flag: bool) -> None:
    """Delete every saved session after a double confirmation."""
    sessions = _run_async(_list(), "read history")

    gate = ClearConfirmation()
    gate.start()
    while gate.pending:
        if yes:
            gate.answer(True)
            continue
        prompt = _FIRST_PROMPT.format(count=len(sessions)) if gate.state is ClearState.PENDING_FIRST else _SECOND_PROMPT
        gate.answer(typer.confirm(prompt, default=False, err=True))

    if not gate.confirmed:
        console.print("[yellow]Cancelled[/yellow]")
        raise typer.Exit(code=0)

    _run_async(_clear(), "clear history")

    if json_flag:
        json_output(console, {"status": "cleared", "sessions_deleted": len(sessions)})
        return
    format_success(console, f"Cleared {len(sessions)} saved sessions")
