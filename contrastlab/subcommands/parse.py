#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/subcommands/parse.py

import argparse
import sys
from typing import List, Optional

from contrastlab.logic.parse import engine
from contrastlab.shared.logger import ContrastlabArgumentParser
from contrastlab.shared.sanitizer import INPUT_HANDLERS


def get_parse_parser() -> argparse.ArgumentParser:
    parser = ContrastlabArgumentParser(
        prog="contrastlab parse",
        description="contrastlab parse: show how a color string is understood",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "color",
        type=INPUT_HANDLERS["color"],
        help="color text, in quotes",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="print the result as JSON",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = get_parse_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    return engine.run(args)
