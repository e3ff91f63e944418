"""Preference file management for CLI."""

import logging
import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from walletgen.wallet import DEFAULT_WALLET_COUNT, ExportFormat

logger = logging.getLogger(__name__)

_RECOGNISED_BOOL_VALUES = frozenset(
    ("1", "true", "yes", "0", "false", "no")
)


@dataclass(frozen=True)
class Preferences:
    """Generation preferences loaded from config file and environment.

    ``default_wallet_count`` is kept as text; it is coerced leniently where
    it is used.
    """

    output_format: ExportFormat = ExportFormat.CSV
    default_wallet_count: str = str(DEFAULT_WALLET_COUNT)
    include_public_keys: bool = False
    save_to_history: bool = False

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["output_format"] = self.output_format.value
        return data


class ConfigError(Exception):
    """Configuration file error."""

    pass


def _parse_bool(value: Any, default: bool, source: str) -> bool:
    """Parse a boolean preference with explicit default.

    Recognises ``true/1/yes`` and ``false/0/no`` (case-insensitive) as well
    as YAML booleans. Logs a warning and returns *default* for anything else.
    """
    if value is None or value == "":
        return default
    if isinstance(value, bool):
        return value
    normalised = str(value).strip().lower()
    if normalised not in _RECOGNISED_BOOL_VALUES:
        logger.warning(
            "Unrecognised boolean value %r for %s, using default %s. "
            "Expected one of: true/1/yes or false/0/no.",
            value,
            source,
            default,
        )
        return default
    return normalised in ("1", "true", "yes")


def _parse_format(value: Any, source: str) -> ExportFormat:
    try:
        return ExportFormat(str(value).strip().lower())
    except ValueError as e:
        raise ConfigError(f"Invalid {source}: {value!r} (expected csv or json)") from e


class ConfigManager:
    """Manages preferences in ~/.walletgen/config.yaml."""

    DEFAULT_DIR = Path.home() / ".walletgen"
    CONFIG_FILE = "config.yaml"
    DB_FILE = "history.db"

    ENV_OUTPUT_FORMAT = "WALLETGEN_OUTPUT_FORMAT"
    ENV_DEFAULT_COUNT = "WALLETGEN_DEFAULT_COUNT"
    ENV_INCLUDE_PUBLIC_KEYS = "WALLETGEN_INCLUDE_PUBLIC_KEYS"
    ENV_SAVE_TO_HISTORY = "WALLETGEN_SAVE_TO_HISTORY"

    def __init__(self, config_dir: Optional[Path] = None) -> None:
        self._config_dir = config_dir or self.DEFAULT_DIR
        self._config_path = self._config_dir / self.CONFIG_FILE
        self._db_path = self._config_dir / self.DB_FILE

    @property
    def config_dir(self) -> Path:
        return self._config_dir

    @property
    def config_path(self) -> Path:
        return self._config_path

    @property
    def db_path(self) -> Path:
        return self._db_path

    def exists(self) -> bool:
        """Check if a preference file exists."""
        return self._config_path.exists()

    def _read_file(self) -> dict[str, Any]:
        if not self._config_path.exists():
            return {}
        try:
            with open(self._config_path) as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid config file {self._config_path}: {e}") from e
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"Invalid config file {self._config_path}: expected a mapping")
        return data

    def load(self) -> Preferences:
        """Load preferences, applying environment overrides.

        A missing file yields defaults. Raises ConfigError if the file is
        malformed or names an unknown output format.
        """
        data = self._read_file()
        env = os.environ
        defaults = Preferences()

        fmt_value = env.get(self.ENV_OUTPUT_FORMAT) or data.get("output_format")
        output_format = (
            _parse_format(fmt_value, "output_format") if fmt_value else defaults.output_format
        )

        count_value = env.get(self.ENV_DEFAULT_COUNT) or data.get("default_wallet_count")
        default_wallet_count = (
            str(count_value) if count_value is not None else defaults.default_wallet_count
        )

        include_public_keys = _parse_bool(
            env.get(self.ENV_INCLUDE_PUBLIC_KEYS, data.get("include_public_keys")),
            defaults.include_public_keys,
            "include_public_keys",
        )
        save_to_history = _parse_bool(
            env.get(self.ENV_SAVE_TO_HISTORY, data.get("save_to_history")),
            defaults.save_to_history,
            "save_to_history",
        )

        return Preferences(
            output_format=output_format,
            default_wallet_count=default_wallet_count,
            include_public_keys=include_public_keys,
            save_to_history=save_to_history,
        )

    def save(self, preferences: Preferences) -> None:
        """Write preferences to the config file."""
        self._config_dir.mkdir(parents=True, exist_ok=True)
        with open(self._config_path, "w") as f:
            yaml.safe_dump(preferences.to_dict(), f, default_flow_style=False)
