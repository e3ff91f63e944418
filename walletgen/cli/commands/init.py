"""Write the preference file."""

import typer
from rich.console import Console

from walletgen.cli.output import format_error, format_success, json_output
from walletgen.cli.utils import ConfigManager, Preferences, validate_format
from walletgen.wallet import coerce_count

console = Console()


def init_command(
    fmt: str,
    count: str,
    public: bool,
    save: bool,
    force: bool,
    json_flag: bool,
) -> None:
    """Create ~/.walletgen/config.yaml with generation preferences."""
    try:
        output_format = validate_format(fmt)
    except ValueError as e:
        format_error(console, str(e))
        raise typer.Exit(code=2)

    config = ConfigManager()

    if config.exists() and not force:
        format_error(
            console,
            f"Configuration already exists at {config.config_path}",
            hint="Use --force to overwrite existing configuration",
        )
        raise typer.Exit(code=1)

    prefs = Preferences(
        output_format=output_format,
        default_wallet_count=count,
        include_public_keys=public,
        save_to_history=save,
    )
    config.save(prefs)

    if json_flag:
        json_output(
            console,
            {"status": "initialized", "config_path": str(config.config_path), **prefs.to_dict()},
        )
        return

    format_success(console, "Preferences saved")
    console.print(f"[cyan]Format:[/cyan]       {prefs.output_format.value}")
    console.print(f"[cyan]Count:[/cyan]        {coerce_count(prefs.default_wallet_count)}")
    console.print(f"[cyan]Public Keys:[/cyan]  {'yes' if prefs.include_public_keys else 'no'}")
    console.print(f"[cyan]Save History:[/cyan] {'yes' if prefs.save_to_history else 'no'}")
    console.print(f"[cyan]Config:[/cyan]       {config.config_path}")
