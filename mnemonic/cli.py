#!/usr/bin/env python3
"""
Command line entry point: print one or more mnemonics.

    python -m mnemonic -n 3 -s -
"""

import argparse
import sys
from typing import List, Optional

from mnemonic.config import ConfigManager
from mnemonic.errors import ConfigError, EmptyWordListError
from mnemonic.logger import LogFormat, get_logger, setup_default_logging

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mnemonic", description="Generate adjective/noun mnemonics such as 'amazing_jordan'"
    )
    parser.add_argument(
        "-s", "--separator", default=None, help="String placed between the words (default: '_')"
    )
    parser.add_argument(
        "-n", "--count", type=int, default=1, help="Number of mnemonics to print (default: 1)"
    )
    parser.add_argument("-c", "--config", default=None, help="Path to a YAML configuration file")
    parser.add_argument("--log-level", default="ERROR", help="Log level (default: ERROR)")
    parser.add_argument(
        "--log-format",
        choices=[f.value for f in LogFormat],
        default=LogFormat.SIMPLE.value,
        help="Log line format (default: simple)",
    )
    parser.add_argument("--log-file", default=None, help="Also write log records to this file")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    # stdout carries only mnemonics
    setup_default_logging(
        level=args.log_level,
        log_file=args.log_file,
        format_type=LogFormat(args.log_format),
        stream=sys.stderr,
    )

    if args.count < 0:
        print("mnemonic: --count must not be negative", file=sys.stderr)
        return 1

    try:
        manager = ConfigManager(args.config).load()
        generator = manager.build_generator()
        logger.debug(f"Using {generator!r}")
        separator = manager.separator if args.separator is None else args.separator
        for _ in range(args.count):
            print(generator.generate_with_separator(separator))
    except (ConfigError, EmptyWordListError) as e:
        print(f"mnemonic: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
