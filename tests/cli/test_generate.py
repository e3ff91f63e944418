"""Tests for walletgen generate."""

import json
import re
from pathlib import Path

import pytest
from typer.testing import CliRunner

from walletgen.cli.main import app
from walletgen.wallet import encode_public, keypair_from_secret

runner = CliRunner()

_B58 = r"[1-9A-HJ-NP-Za-km-z]+"


def _payload_lines(stdout: str, count: int) -> list[str]:
    """First ``count`` lines of stdout, where the payload is printed."""
    return stdout.splitlines()[:count]


class TestGenerateCsv:
    """Tests for CSV output."""

    def test_default_count_is_ten(self, config_dir):
        result = runner.invoke(app, ["generate"])
        assert result.exit_code == 0
        lines = _payload_lines(result.stdout, 10)
        assert all(re.fullmatch(_B58, line) for line in lines)

    def test_count_and_public(self, config_dir):
        result = runner.invoke(app, ["generate", "-c", "3", "--public"])
        assert result.exit_code == 0
        lines = _payload_lines(result.stdout, 3)
        assert all(re.fullmatch(f"{_B58}, {_B58}", line) for line in lines)

    def test_public_key_matches_secret(self, config_dir):
        result = runner.invoke(app, ["generate", "-c", "2", "--public"])
        for line in _payload_lines(result.stdout, 2):
            secret, public = line.split(", ")
            assert encode_public(keypair_from_secret(secret).public_key) == public

    @pytest.mark.parametrize("text", ["abc", "0", "5000", ""])
    def test_invalid_count_text_defaults_to_ten(self, config_dir, text):
        result = runner.invoke(app, ["generate", "-c", text, "--json"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["count"] == 10

    def test_config_default_count(self, config_dir):
        runner.invoke(app, ["init", "--count", "4"])
        result = runner.invoke(app, ["generate", "--json"])
        assert json.loads(result.stdout)["count"] == 4

    def test_invalid_format_exits_2(self, config_dir):
        result = runner.invoke(app, ["generate", "-f", "xml"])
        assert result.exit_code == 2
        assert "csv, json" in result.stdout

    def test_invalid_selection_exits_2(self, config_dir):
        result = runner.invoke(app, ["generate", "-s", "everything"])
        assert result.exit_code == 2

    def test_workers(self, config_dir):
        result = runner.invoke(app, ["generate", "-c", "20", "-w", "4", "--json"])
        assert result.exit_code == 0
        assert len(json.loads(result.stdout)["wallets"]) == 20


class TestGenerateJson:
    """Tests for --json and JSON format output."""

    def test_json_flag(self, config_dir):
        result = runner.invoke(app, ["generate", "-c", "3", "--public", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["status"] == "generated"
        assert data["count"] == 3
        assert data["session_id"] is None
        assert all(set(w) == {"privateKey", "publicKey"} for w in data["wallets"])

    def test_json_private_only(self, config_dir):
        result = runner.invoke(
            app, ["generate", "-c", "5", "--public", "-s", "private", "--json"]
        )
        data = json.loads(result.stdout)
        assert len(data["wallets"]) == 5
        assert data["format"] == "csv"
        assert data["selection"] == "private"
        assert all(set(w) == {"privateKey"} for w in data["wallets"])

    def test_json_format_to_file(self, config_dir, tmp_path: Path):
        out = tmp_path / "wallets.json"
        result = runner.invoke(app, ["generate", "-c", "3", "-f", "json", "-o", str(out)])
        assert result.exit_code == 0
        assert "exported to" in result.stdout
        data = json.loads(out.read_text())
        assert len(data) == 3
        assert all(set(item) == {"privateKey"} for item in data)

    def test_export_file_permissions(self, config_dir, tmp_path: Path):
        out = tmp_path / "wallets.csv"
        runner.invoke(app, ["generate", "-c", "1", "-o", str(out)])
        assert out.stat().st_mode & 0o777 == 0o600


class TestGenerateSave:
    """Tests for --save."""

    def test_save_creates_session(self, config_dir):
        result = runner.invoke(app, ["generate", "-c", "3", "--save", "--json"])
        assert result.exit_code == 0
        session_id = json.loads(result.stdout)["session_id"]
        assert session_id

        listed = runner.invoke(app, ["history", "list", "--json"])
        sessions = json.loads(listed.stdout)["sessions"]
        assert [s["id"] for s in sessions] == [session_id]
        assert sessions[0]["count"] == 3

    def test_no_save_by_default(self, config_dir):
        runner.invoke(app, ["generate", "-c", "2"])
        listed = runner.invoke(app, ["history", "list", "--json"])
        assert json.loads(listed.stdout)["sessions"] == []

    def test_save_preference(self, config_dir):
        runner.invoke(app, ["init", "--save"])
        result = runner.invoke(app, ["generate", "-c", "1", "--json"])
        assert json.loads(result.stdout)["session_id"]

    def test_no_save_overrides_preference(self, config_dir):
        runner.invoke(app, ["init", "--save"])
        result = runner.invoke(app, ["generate", "-c", "1", "--no-save", "--json"])
        assert json.loads(result.stdout)["session_id"] is None
