#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/subcommands/distinct.py

import argparse
import sys
from typing import List, Optional

from contrastlab.core import config as c
from contrastlab.logic.distinct import engine
from contrastlab.shared.logger import ContrastlabArgumentParser
from contrastlab.shared.sanitizer import INPUT_HANDLERS


def get_distinct_parser() -> argparse.ArgumentParser:
    parser = ContrastlabArgumentParser(
        prog="contrastlab distinct",
        description="contrastlab distinct: check that every color in a palette is perceptually distinct",
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
        "colors",
        nargs="+",
        type=INPUT_HANDLERS["color"],
        help="palette colors, each in quotes",
    )
    parser.add_argument(
        "-md",
        "--minimum-distance",
        default=c.DEFAULT_MINIMUM_DISTANCE,
        type=INPUT_HANDLERS["minimum_distance"],
        help=f"smallest acceptable ΔE between any two colors (default: {c.DEFAULT_MINIMUM_DISTANCE:g})",
    )
    parser.add_argument(
        "-a",
        "--algorithm",
        default=c.DEFAULT_ALGORITHM,
        type=INPUT_HANDLERS["algorithm"],
        help=f"distance formula: CIE76, CIE94 or CIEDE2000 (default: {c.DEFAULT_ALGORITHM})",
    )
    parser.add_argument(
        "--no-groups",
        action="store_true",
        help="do not group colors that are too close to each other",
    )
    parser.add_argument(
        "--no-recommendations",
        action="store_true",
        help="do not suggest replacement colors",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="print the result as JSON",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the distinct command."""
    parser = get_distinct_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    return engine.run(args)
