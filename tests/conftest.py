from __future__ import annotations

import stat
from pathlib import Path
from typing import Callable

import pytest

from forge_remap.remappings.types import ForgeFailure, ForgeResult, ForgeSuccess

FakeForge = Callable[[str], Path]
MakeStubRunner = Callable[[ForgeResult], "StubRunner"]


@pytest.fixture
def fake_forge(tmp_path: Path) -> FakeForge:
    """Write an executable shell script that stands in for `forge`."""

    def _make(body: str) -> Path:
        script = tmp_path / "bin" / "forge"
        script.parent.mkdir(exist_ok=True)
        script.write_text(f"#!/bin/sh\n{body}\n")
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return script

    return _make


class StubRunner:
    """ForgeRunner that returns a canned result and records calls."""

    def __init__(self, result: ForgeResult) -> None:
        self.result = result
        self.calls: list[tuple[str, ...]] = []

    async def run(self, *args: str) -> ForgeResult:
        self.calls.append(args)
        return self.result


@pytest.fixture
def stub_runner() -> MakeStubRunner:
    """Build a StubRunner that always returns the given result."""
    return StubRunner


@pytest.fixture
def succeeding_runner(stub_runner: MakeStubRunner) -> StubRunner:
    return stub_runner(ForgeSuccess(stdout="p=q\n"))


@pytest.fixture
def missing_forge_runner(stub_runner: MakeStubRunner) -> StubRunner:
    return stub_runner(ForgeFailure(exit_code=127, message="forge: not found"))
