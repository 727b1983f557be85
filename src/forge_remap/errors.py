"""Error hierarchy and `forge` exit-code translation."""

from __future__ import annotations

FORGE_NOT_FOUND_EXIT_CODE = 127
FORGE_ABORT_EXIT_CODE = 134


class ForgeRemapError(Exception):
    """Base error for everything this package raises on purpose."""

    def __init__(self, message: str, parent: BaseException | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.parent = parent


class RemappingValidationError(ForgeRemapError):
    """A remapping line that can't be accepted."""

    def __init__(self, line: str, reason: str) -> None:
        super().__init__(f"Invalid remapping '{line}', {reason}")
        self.line = line


class ForgeExecutionError(ForgeRemapError):
    """`forge` ran (or tried to) and did not succeed."""

    def __init__(self, message: str, exit_code: int | None = None, parent: BaseException | None = None) -> None:
        super().__init__(message, parent)
        self.exit_code = exit_code


class ForgeNotFoundError(ForgeExecutionError):
    def __init__(self, parent: BaseException | None = None) -> None:
        super().__init__(
            "Couldn't run `forge`. Please check that your foundry installation is correct.",
            FORGE_NOT_FOUND_EXIT_CODE,
            parent,
        )


class ForgeConfigError(ForgeExecutionError):
    def __init__(self, parent: BaseException | None = None) -> None:
        super().__init__(
            "Running `forge` failed. Please check that your foundry.toml file is correct.",
            FORGE_ABORT_EXIT_CODE,
            parent,
        )


def build_forge_execution_error(
    exit_code: int | None, message: str, parent: BaseException | None = None
) -> ForgeExecutionError:
    """Map a `forge` exit code to the error the user should see."""
    if exit_code == FORGE_NOT_FOUND_EXIT_CODE:
        return ForgeNotFoundError(parent)
    if exit_code == FORGE_ABORT_EXIT_CODE:
        return ForgeConfigError(parent)
    return ForgeExecutionError(f"Unexpected error while running `forge`: {message}", exit_code, parent)
