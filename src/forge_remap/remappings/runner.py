"""ForgeRunner — invokes the `forge` CLI via async subprocess."""

from __future__ import annotations

import asyncio
from typing import Protocol

from forge_remap.errors import FORGE_NOT_FOUND_EXIT_CODE
from forge_remap.infrastructure.config import resolve_forge_bin
from forge_remap.infrastructure.logger import logger
from forge_remap.remappings.types import ForgeFailure, ForgeResult, ForgeSuccess


class ForgeRunner(Protocol):
    """Interface for anything that can run a forge subcommand."""

    async def run(self, *args: str) -> ForgeResult: ...


class SubprocessForgeRunner:
    """Runs `forge` as a child process and captures its output."""

    def __init__(self, bin: str | None = None) -> None:
        self._bin = bin or resolve_forge_bin()

    @property
    def bin(self) -> str:
        return self._bin

    async def run(self, *args: str) -> ForgeResult:
        logger.debug("Running forge", bin=self._bin, args=list(args))

        try:
            proc = await asyncio.create_subprocess_exec(
                self._bin, *args,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except FileNotFoundError as err:
            return ForgeFailure(exit_code=FORGE_NOT_FOUND_EXIT_CODE, message=str(err), cause=err)
        except OSError as err:
            return ForgeFailure(exit_code=None, message=str(err), cause=err)

        stdout, stderr = await proc.communicate()
        return_code = proc.returncode

        if return_code:
            # Killed by signal N: report it the way a shell would (128 + N)
            if return_code < 0:
                return_code = 128 - return_code
            message = stderr.decode("utf-8", errors="replace").strip()
            logger.debug("Forge exited with error", bin=self._bin, code=return_code)
            return ForgeFailure(exit_code=return_code, message=message)

        return ForgeSuccess(stdout=stdout.decode("utf-8", errors="replace"))
