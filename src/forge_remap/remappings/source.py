"""RemappingSource — raw remapping text from `forge` or `remappings.txt`."""

from __future__ import annotations

import asyncio
from pathlib import Path

from forge_remap.infrastructure.config import REMAPPINGS_COMMAND, REMAPPINGS_FILE
from forge_remap.infrastructure.logger import logger
from forge_remap.remappings.runner import ForgeRunner, SubprocessForgeRunner
from forge_remap.remappings.types import ForgeFailure


class RemappingSource:
    """Produces unparsed remapping text.

    `forge remappings` is preferred. When it can't be run or exits with an
    error, the static remappings file in the working directory is read
    instead. A missing file surfaces as a plain OSError.
    """

    def __init__(self, runner: ForgeRunner | None = None, fallback_file: str | Path = REMAPPINGS_FILE) -> None:
        self._runner = runner or SubprocessForgeRunner()
        self._fallback_file = Path(fallback_file)

    @property
    def fallback_path(self) -> Path:
        return Path.cwd() / self._fallback_file

    async def read(self) -> str:
        result = await self._runner.run(*REMAPPINGS_COMMAND)

        if isinstance(result, ForgeFailure):
            path = self.fallback_path
            logger.warning(
                "Couldn't get remappings from forge, reading file instead",
                error=result.to_error().message,
                path=str(path),
            )
            return await asyncio.to_thread(path.read_text, encoding="utf-8", errors="replace")

        return result.stdout
