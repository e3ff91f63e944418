"""Show preferences and history status."""

import asyncio

import typer
from rich.console import Console

from walletgen.cli.commands._history_helpers import open_history
from walletgen.cli.output import format_error, format_key_value, json_output
from walletgen.cli.utils import ConfigError, ConfigManager
from walletgen.state import MAX_SESSIONS, DatabaseError
from walletgen.wallet import coerce_count

console = Console()


async def _history_size(config: ConfigManager) -> int:
    return len(await open_history(config).list_sessions())


def status_command(json_flag: bool) -> None:
    """Show effective preferences, file locations and history size."""
    config = ConfigManager()
    try:
        prefs = config.load()
    except ConfigError as e:
        format_error(console, str(e), hint=f"Fix or remove {config.config_path}")
        raise typer.Exit(code=1)

    try:
        history_size = asyncio.run(_history_size(config)) if config.db_path.exists() else 0
    except DatabaseError as e:
        format_error(console, f"Failed to read history: {e}")
        raise typer.Exit(code=1)

    data = {
        "config_path": str(config.config_path),
        "config_exists": config.exists(),
        "db_path": str(config.db_path),
        "output_format": prefs.output_format.value,
        "default_wallet_count": coerce_count(prefs.default_wallet_count),
        "include_public_keys": prefs.include_public_keys,
        "save_to_history": prefs.save_to_history,
        "history_sessions": history_size,
        "history_limit": MAX_SESSIONS,
    }
    if json_flag:
        json_output(console, data)
        return
    format_key_value(console, data)
