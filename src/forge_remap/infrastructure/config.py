"""Configuration constants read from the environment or a local .env file."""

from __future__ import annotations

import os
import shutil
from pathlib import Path


def read_env_file(keys: list[str]) -> dict[str, str]:
    """Return the requested keys from `.env` in the working directory.

    Values are not exported to os.environ, so they never reach the `forge`
    child process.
    """
    try:
        content = (Path.cwd() / ".env").read_text()
    except OSError:
        return {}

    wanted = set(keys)
    result: dict[str, str] = {}
    for line in content.splitlines():
        trimmed = line.strip()
        if not trimmed or trimmed.startswith("#") or "=" not in trimmed:
            continue
        key, _, value = trimmed.partition("=")
        key = key.strip()
        value = value.strip()
        if key not in wanted:
            continue
        if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
            value = value[1:-1]
        if value:
            result[key] = value

    return result


def _setting(name: str, default: str) -> str:
    return os.environ.get(name) or _env_config.get(name, default)


_env_config = read_env_file(["FORGE_BIN", "REMAPPINGS_FILE", "LOG_LEVEL"])

LOG_LEVEL: str = _setting("LOG_LEVEL", "INFO").upper()

FORGE_BIN: str = _setting("FORGE_BIN", "forge")
REMAPPINGS_COMMAND: tuple[str, ...] = ("remappings",)

# Relative to the working directory at read time
REMAPPINGS_FILE: str = _setting("REMAPPINGS_FILE", "remappings.txt")


def resolve_forge_bin(name: str = FORGE_BIN) -> str:
    """Locate the forge binary on PATH, keeping the bare name if it isn't there."""
    return shutil.which(name) or name
