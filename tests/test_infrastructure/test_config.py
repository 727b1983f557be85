"""Tests for configuration."""

import stat

from forge_remap.infrastructure.config import read_env_file, resolve_forge_bin


class TestReadEnvFile:
    def test_reads_env_values(self, tmp_path, monkeypatch):
        (tmp_path / ".env").write_text("FORGE_BIN=/opt/forge\nLOG_LEVEL=debug\n")
        monkeypatch.chdir(tmp_path)

        assert read_env_file(["FORGE_BIN", "LOG_LEVEL"]) == {"FORGE_BIN": "/opt/forge", "LOG_LEVEL": "debug"}

    def test_strips_quotes(self, tmp_path, monkeypatch):
        (tmp_path / ".env").write_text('FORGE_BIN="/opt/forge"\nREMAPPINGS_FILE=\'custom.txt\'\n')
        monkeypatch.chdir(tmp_path)

        result = read_env_file(["FORGE_BIN", "REMAPPINGS_FILE"])
        assert result["FORGE_BIN"] == "/opt/forge"
        assert result["REMAPPINGS_FILE"] == "custom.txt"

    def test_skips_comments_and_blank_lines(self, tmp_path, monkeypatch):
        (tmp_path / ".env").write_text("# comment\n\nFORGE_BIN=forge\n\n")
        monkeypatch.chdir(tmp_path)

        assert read_env_file(["FORGE_BIN"]) == {"FORGE_BIN": "forge"}

    def test_only_requested_keys(self, tmp_path, monkeypatch):
        (tmp_path / ".env").write_text("FORGE_BIN=forge\nSECRET=x\n")
        monkeypatch.chdir(tmp_path)

        assert "SECRET" not in read_env_file(["FORGE_BIN"])

    def test_value_may_contain_equals(self, tmp_path, monkeypatch):
        (tmp_path / ".env").write_text("REMAPPINGS_FILE=a=b.txt\n")
        monkeypatch.chdir(tmp_path)

        assert read_env_file(["REMAPPINGS_FILE"]) == {"REMAPPINGS_FILE": "a=b.txt"}

    def test_missing_file_returns_empty(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert read_env_file(["FORGE_BIN"]) == {}

    def test_empty_values_skipped(self, tmp_path, monkeypatch):
        (tmp_path / ".env").write_text("FORGE_BIN=\n")
        monkeypatch.chdir(tmp_path)

        assert "FORGE_BIN" not in read_env_file(["FORGE_BIN"])


class TestResolveForgeBin:
    def test_finds_binary_on_path(self, tmp_path, monkeypatch):
        forge = tmp_path / "forge"
        forge.write_text("#!/bin/sh\n")
        forge.chmod(forge.stat().st_mode | stat.S_IXUSR)
        monkeypatch.setenv("PATH", str(tmp_path))

        assert resolve_forge_bin("forge") == str(forge)

    def test_keeps_name_when_not_found(self, tmp_path, monkeypatch):
        monkeypatch.setenv("PATH", str(tmp_path))
        assert resolve_forge_bin("forge") == "forge"
