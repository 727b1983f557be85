"""Remapping domain types."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Union

from pydantic import BaseModel, ConfigDict

from forge_remap.errors import ForgeExecutionError, build_forge_execution_error

# Import prefix -> target path
Remappings = Mapping[str, str]


class ForgeSuccess(BaseModel):
    model_config = ConfigDict(frozen=True)

    stdout: str


class ForgeFailure(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    exit_code: int | None = None
    message: str = ""
    # Spawn error, when forge never started
    cause: BaseException | None = None

    def to_error(self) -> ForgeExecutionError:
        return build_forge_execution_error(self.exit_code, self.message, self.cause)


ForgeResult = Union[ForgeSuccess, ForgeFailure]
