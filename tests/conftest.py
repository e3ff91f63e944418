"""Shared pytest fixtures."""
from pathlib import Path

import pytest
import pytest_asyncio

from walletgen.cli.utils.config import ConfigManager
from walletgen.state.database import DatabaseManager
from walletgen.state.history import SessionHistoryStore


@pytest_asyncio.fixture
async def db(tmp_path: Path) -> DatabaseManager:
    """Create and initialize a temp database."""
    db_manager = DatabaseManager(tmp_path / "test_history.db")
    await db_manager.initialize()
    return db_manager


@pytest.fixture
def store(db: DatabaseManager) -> SessionHistoryStore:
    return SessionHistoryStore(db)


@pytest.fixture
def config_dir(tmp_path: Path, monkeypatch) -> Path:
    """Point ConfigManager at a temp directory and clear env overrides."""
    directory = tmp_path / "walletgen"
    monkeypatch.setattr(ConfigManager, "DEFAULT_DIR", directory)
    for name in (
        ConfigManager.ENV_OUTPUT_FORMAT,
        ConfigManager.ENV_DEFAULT_COUNT,
        ConfigManager.ENV_INCLUDE_PUBLIC_KEYS,
        ConfigManager.ENV_SAVE_TO_HISTORY,
    ):
        monkeypatch.delenv(name, raising=False)
    return directory
