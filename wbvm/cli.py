"""Command line interface."""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from . import __version__
from .config import Settings
from .errors import WbvmError
from .manager import VersionManager
from .utils import setup_logging

logger = logging.getLogger("wbvm")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wbvm", description="Manage Wörterbuch versions")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug output")
    commands = parser.add_subparsers(dest="command", metavar="<command>", required=True)

    commands.add_parser("list", help="List available versions")

    install = commands.add_parser("install", help="Install specified version")
    install.add_argument("version", help="Bare version string or 'latest'")

    use = commands.add_parser("use", help="Use specified version for this session")
    use.add_argument("version")

    default = commands.add_parser(
        "default", help="Set the specified version as the default version to use"
    )
    default.add_argument("version", help="Bare version string or 'latest'")

    commands.add_parser("current", help="Show the default version")
    return parser


async def run(args: argparse.Namespace, manager: VersionManager) -> int:
    async with manager:
        if args.command == "list":
            for line in await manager.list_versions():
                print(line)
        elif args.command == "install":
            await manager.install(args.version)
            print("Ok")
        elif args.command == "use":
            # session-scoped selection has no persistent effect yet
            print("use", args.version)
        elif args.command == "default":
            await manager.set_default(args.version)
        elif args.command == "current":
            print(manager.get_default() or "none")
    return 0


def main(argv: Optional[List[str]] = None, manager: Optional[VersionManager] = None) -> int:
    args = build_parser().parse_args(argv)

    settings = Settings.from_env()
    if manager is None:
        setup_logging(settings.log_dir, verbose=args.verbose)
        manager = VersionManager(settings)

    try:
        return asyncio.run(run(args, manager))
    except WbvmError as e:
        logger.error("%s", e)
        return 1
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    sys.exit(main())
