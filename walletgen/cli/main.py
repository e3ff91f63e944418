"""Main CLI entry point for walletgen."""

import logging
from typing import Optional

import typer
from rich.console import Console

from walletgen.cli.commands.generate import generate_command
from walletgen.cli.commands.history import clear_command, delete_command, list_command, show_command
from walletgen.cli.commands.init import init_command
from walletgen.cli.commands.inspect_key import inspect_command, verify_command
from walletgen.cli.commands.status import status_command

app = typer.Typer(
    name="walletgen",
    help="walletgen - batch Solana wallet generator",
    no_args_is_help=True,
    add_completion=False,
)
history_app = typer.Typer(help="Manage saved generation sessions", no_args_is_help=True)
app.add_typer(history_app, name="history")
console = Console()


@app.callback()
def root(
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Log progress to stderr"),
) -> None:
    """Configure logging for the invoked command."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


@app.command("init")
def init(
    fmt: str = typer.Option("csv", "-f", "--format", help="Default export format (csv|json)"),
    count: str = typer.Option("10", "-c", "--count", help="Default wallet count"),
    public: bool = typer.Option(False, "--public", help="Include public keys by default"),
    save: bool = typer.Option(False, "--save", help="Save batches to history by default"),
    force: bool = typer.Option(False, "--force", help="Overwrite config"),
    json_flag: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Write default generation preferences."""
    init_command(fmt, count, public, save, force, json_flag)


@app.command("generate")
def generate(
    count: Optional[str] = typer.Option(None, "-c", "--count", help="Number of wallets (1-1000)"),
    public: Optional[bool] = typer.Option(None, "--public/--no-public", help="Include public keys"),
    fmt: Optional[str] = typer.Option(None, "-f", "--format", help="Export format (csv|json)"),
    selection: str = typer.Option("both", "-s", "--select", help="Keys to export (both|private|public)"),
    save: Optional[bool] = typer.Option(None, "--save/--no-save", help="Save batch to history"),
    output: Optional[str] = typer.Option(None, "-o", "--output", help="Write export to file"),
    workers: int = typer.Option(1, "-w", "--workers", help="Generation threads"),
    json_flag: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Generate a batch of wallets and print the export."""
    generate_command(count, public, fmt, selection, save, output, workers, json_flag)


@app.command("inspect")
def inspect(
    secret: str = typer.Argument(..., help="Base-58 secret key, or - for stdin"),
    json_flag: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show the address controlled by a secret key."""
    inspect_command(secret, json_flag)


@app.command("verify")
def verify(
    path: str = typer.Argument(..., help="CSV or JSON export file"),
    fmt: Optional[str] = typer.Option(None, "-f", "--format", help="Override detected format"),
    json_flag: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Check that every key pair in an export file is valid."""
    verify_command(path, fmt, json_flag)


@app.command("status")
def status(
    json_flag: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show preferences and history status."""
    status_command(json_flag)


@history_app.command("list")
def history_list(
    json_flag: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """List saved sessions, newest first."""
    list_command(json_flag)


@history_app.command("show")
def history_show(
    session_id: str = typer.Argument(..., help="Session ID"),
    fmt: Optional[str] = typer.Option(None, "-f", "--format", help="Export format (csv|json)"),
    selection: str = typer.Option("both", "-s", "--select", help="Keys to export (both|private|public)"),
    output: Optional[str] = typer.Option(None, "-o", "--output", help="Write export to file"),
) -> None:
    """Print the export of a saved session."""
    show_command(session_id, fmt, selection, output)


@history_app.command("delete")
def history_delete(
    session_id: str = typer.Argument(..., help="Session ID"),
    json_flag: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Delete one saved session."""
    delete_command(session_id, json_flag)


@history_app.command("clear")
def history_clear(
    yes: bool = typer.Option(False, "-y", "--yes", help="Skip both confirmations"),
    json_flag: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Delete every saved session."""
    clear_command(yes, json_flag)


def main() -> None:
    """Entry point."""
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[yellow]Cancelled[/yellow]")
        raise typer.Exit(130)
