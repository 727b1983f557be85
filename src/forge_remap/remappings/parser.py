"""Parser for the `prefix=target` remapping format printed by `forge remappings`."""

from __future__ import annotations

import re

from forge_remap.errors import RemappingValidationError

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def parse_remappings(text: str) -> dict[str, str]:
    """Parse remapping text into a prefix -> target table.

    Blank lines are skipped and the first definition of a prefix wins.
    Context-qualified remappings (`context:prefix=target`) and lines without
    a target raise RemappingValidationError.
    """
    remappings: dict[str, str] = {}

    for line in _LINE_BREAK.split(text):
        if not line.strip():
            continue

        if ":" in line:
            raise RemappingValidationError(line, "remapping contexts are not allowed")

        if "=" not in line:
            raise RemappingValidationError(line, "remappings without a target are not allowed")

        prefix, _, target = line.partition("=")
        if prefix in remappings:
            continue

        remappings[prefix] = target

    return remappings
