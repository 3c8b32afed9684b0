#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/subcommands/contrast.py

import argparse
import sys
from typing import List, Optional

from contrastlab.core import config as c
from contrastlab.logic.contrast import engine
from contrastlab.shared.logger import ContrastlabArgumentParser
from contrastlab.shared.sanitizer import INPUT_HANDLERS


def get_contrast_parser() -> argparse.ArgumentParser:
    parser = ContrastlabArgumentParser(
        prog="contrastlab contrast",
        description="contrastlab contrast: check a text/background pair against WCAG contrast levels",
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
        "-fg",
        "--foreground",
        required=True,
        type=INPUT_HANDLERS["color"],
        help="text color, in quotes\n"
             "examples: '#333', '#1a2b3c', 'rgb(0, 0, 0)', 'hsl(210, 50%%, 40%%)', 'navy'",
    )
    parser.add_argument(
        "-bg",
        "--background",
        required=True,
        type=INPUT_HANDLERS["color"],
        help="background color, same formats as --foreground",
    )
    parser.add_argument(
        "-l",
        "--level",
        default=c.DEFAULT_WCAG_LEVEL,
        type=INPUT_HANDLERS["wcag_level"],
        help=f"WCAG conformance level: A, AA or AAA (default: {c.DEFAULT_WCAG_LEVEL})",
    )
    parser.add_argument(
        "--large-text",
        action="store_true",
        help="use the large-text thresholds (18pt, or 14pt bold)",
    )
    parser.add_argument(
        "--no-recommendations",
        action="store_true",
        help="do not suggest an adjusted color when the check fails",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="print the result as JSON",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the contrast command."""
    parser = get_contrast_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    return engine.run(args)
