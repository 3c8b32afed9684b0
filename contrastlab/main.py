#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/main.py

import argparse
import sys
from typing import List, Optional

from contrastlab import __version__
from contrastlab.subcommands.command_registry import SUBCOMMANDS
from contrastlab.shared.logger import log, ContrastlabArgumentParser
from contrastlab.shared.truecolor import ensure_truecolor


def get_main_parser() -> argparse.ArgumentParser:
    parser = ContrastlabArgumentParser(
        prog="contrastlab",
        description="contrastlab: WCAG contrast and palette distinction checks",
        epilog=f"commands: {', '.join(SUBCOMMANDS)}\n"
               "run 'contrastlab <command> -h' for command options",
        formatter_class=argparse.RawTextHelpFormatter,
        add_help=False,
    )
    parser.add_argument(
        "-h",
        "--help",
        action="help",
        default=argparse.SUPPRESS,
        help="show this help message and exit",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"contrastlab {__version__}",
        help="show program version and exit",
    )
    parser.add_argument(
        "-hf",
        "--help-full",
        action="store_true",
        help="show full help message including subcommands",
    )
    parser.add_argument(
        "command",
        nargs="?",
        help=argparse.SUPPRESS,
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for contrastlab CLI"""
    argv = list(sys.argv[1:] if argv is None else argv)

    # Subcommand Routing
    if argv and argv[0].lower() in SUBCOMMANDS:
        ensure_truecolor()
        sys.exit(SUBCOMMANDS[argv[0].lower()].main(argv[1:]))

    parser = get_main_parser()
    args = parser.parse_args(argv)

    if args.help_full:
        parser.print_help()
        for name, module in SUBCOMMANDS.items():
            print("\n" * 2)
            getattr(module, f"get_{name}_parser")().print_help()
        sys.exit(0)

    if args.command:
        log("error", f"unrecognized command: '{args.command}'")
    else:
        parser.print_usage(sys.stderr)
        log("error", f"a command is required: {', '.join(SUBCOMMANDS)}")
    sys.exit(2)


if __name__ == "__main__":
    main()
