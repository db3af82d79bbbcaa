"""
Gash Terminal Engine

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import asyncio
import logging
import os
import sys
from argparse import ArgumentParser, Namespace
from pathlib import Path
from typing import Any, Sequence

from rich.markup import escape

from gash.config import loader
from gash.console import console
from gash.exceptions import GashError
from gash.gash import Gash
from gash.utils import setup_logging
from gash.version import __version__


def find_gash_config() -> Path | None:
    candidates = [
        Path.cwd() / "gash.yaml",
        Path.cwd() / "gash.toml",
        Path(os.environ.get("GASH_CONFIG", "gash.yaml")),
        Path.home() / ".config" / "gash" / "gash.yaml",
    ]
    return next((p for p in candidates if p.exists()), None)


def bootstrap(config: str | None = None) -> Path | None:
    config_path = Path(config) if config else find_gash_config()
    if config_path and str(config_path.parent) not in sys.path:
        sys.path.insert(0, str(config_path.parent))
    return config_path


def get_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="gash",
        description="Interactive terminal for text games built with Gash.",
        epilog="Without a config file only the built-in commands are available.",
    )
    parser.add_argument(
        "-c",
        "--config",
        help="Path to a YAML or TOML config file. Searched for when omitted.",
    )
    parser.add_argument(
        "-e",
        "--execute",
        action="append",
        default=[],
        metavar="LINE",
        help="Run LINE without prompting. May be given several times.",
    )
    parser.add_argument(
        "--log-mode",
        choices=["cli", "json"],
        default=None,
        help="Console log format. Defaults to GASH_LOG_MODE or container detection.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Show debug logs on the console."
    )
    parser.add_argument("--version", action="version", version=f"gash {__version__}")
    return parser


def build_gash(args: Namespace) -> Gash:
    config_path = bootstrap(args.config)
    if config_path is None:
        return Gash()
    return loader(config_path)


def main(argv: Sequence[str] | None = None) -> Any:
    args = get_parser().parse_args(argv)
    setup_logging(
        mode=args.log_mode,
        console_log_level=logging.DEBUG if args.verbose else logging.WARNING,
    )
    try:
        gash = build_gash(args)
    except (GashError, FileNotFoundError) as error:
        console.print(f"[error]{escape(str(error))}[/error]")
        sys.exit(1)

    if args.execute:
        results = asyncio.run(gash.run_lines(args.execute))
        sys.exit(0 if all(result.success for result in results) else 1)
    return asyncio.run(gash.menu())


if __name__ == "__main__":
    main()
