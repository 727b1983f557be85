"""Entry point: python -m forge_remap"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys

from forge_remap.errors import ForgeRemapError
from forge_remap.infrastructure.logger import install_exception_hooks, logger
from forge_remap.remappings.cache import RemappingCache
from forge_remap.remappings.types import Remappings


def format_remappings(remappings: Remappings, as_json: bool = False) -> str:
    if as_json:
        return json.dumps(dict(remappings), indent=2, sort_keys=True)
    return "\n".join(f"{prefix}={target}" for prefix, target in sorted(remappings.items()))


async def main(as_json: bool = False) -> int:
    cache = RemappingCache()

    try:
        remappings = await cache.get_remappings()
    except ForgeRemapError as err:
        logger.error(err.message)
        return 1
    except OSError as err:
        logger.error("Couldn't read remappings file", error=str(err))
        return 1

    output = format_remappings(remappings, as_json)
    if output:
        print(output)
    return 0


def run(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="forge-remap", description="Print the project's forge remappings")
    parser.add_argument("--json", action="store_true", help="Print remappings as a JSON object")
    args = parser.parse_args(argv)

    install_exception_hooks()

    try:
        code = asyncio.run(main(as_json=args.json))
    except KeyboardInterrupt:
        code = 130
    sys.exit(code)


if __name__ == "__main__":
    run()
