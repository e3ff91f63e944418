"""Decode secret keys and show the addresses they control."""

import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from walletgen.cli.output import format_error, format_success, format_table, json_output
from walletgen.cli.utils import validate_format
from walletgen.wallet import (
    PUBLIC_KEY_LENGTH,
    DecodingError,
    ExportFormat,
    decode,
    decode_public,
    encode_public,
    keypair_from_secret,
    parse_export,
)

console = Console()


def _check_row(row: dict) -> tuple[bool, str]:
    """Verify one export row. Returns (ok, address or error).

    A lone CSV field that decodes to 32 bytes comes from a public-only
    export and is checked as an address.
    """
    secret = row.get("privateKey")
    public = row.get("publicKey")
    try:
        if secret is not None and public is None and len(decode(secret)) == PUBLIC_KEY_LENGTH:
            secret, public = None, secret
        if secret is None:
            return True, encode_public(decode_public(public or ""))
        pair = keypair_from_secret(secret)
    except DecodingError as e:
        return False, str(e)
    address = encode_public(pair.public_key)
    if public is not None and public != address:
        return False, f"public key mismatch, secret controls {address}"
    return True, address


def inspect_command(secret: str, json_flag: bool) -> None:
    """Print the address controlled by a base-58 secret key.

    Pass ``-`` to read the secret from standard input.
    """
    text = sys.stdin.readline() if secret == "-" else secret
    try:
        pair = keypair_from_secret(text)
    except DecodingError as e:
        format_error(console, str(e), hint="Expected a 64-byte base-58 secret key")
        raise typer.Exit(code=2)

    address = encode_public(pair.public_key)
    if json_flag:
        json_output(console, {"valid": True, "public_key": address})
        return
    format_success(console, "Valid secret key")
    console.print(f"[cyan]Address:[/cyan] {address}", soft_wrap=True)


def verify_command(path: str, fmt: Optional[str], json_flag: bool) -> None:
    """Check every row of an export file decodes and pairs correctly."""
    file_path = Path(path)
    if not file_path.exists():
        format_error(console, f"File not found: {file_path}")
        raise typer.Exit(code=1)
    try:
        export_format = validate_format(fmt) if fmt else (
            ExportFormat.JSON if file_path.suffix.lower() == ".json" else ExportFormat.CSV
        )
    except ValueError as e:
        format_error(console, str(e))
        raise typer.Exit(code=2)
    try:
        rows = parse_export(file_path.read_text(encoding="utf-8"), export_format)
    except ValueError as e:
        format_error(console, f"Could not parse {file_path}: {e}")
        raise typer.Exit(code=2)

    results = [_check_row(row) for row in rows]
    invalid = [(i + 1, detail) for i, (ok, detail) in enumerate(results) if not ok]

    if json_flag:
        json_output(
            console,
            {
                "rows": len(rows),
                "valid": len(rows) - len(invalid),
                "invalid": [{"row": i, "error": detail} for i, detail in invalid],
            },
        )
    elif invalid:
        format_table(console, "Invalid rows", ["Row", "Error"], [(str(i), d) for i, d in invalid])
    else:
        format_success(console, f"All {len(rows)} rows are valid key pairs")

    if invalid:
        raise typer.Exit(code=1)
