#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/logic/distinct/engine.py

import argparse
import json

from contrastlab.shared.logger import log
from .renderer import render_distinction_result
from .validator import validate_color_distinction


def run(args: argparse.Namespace) -> int:
    """Execution engine for the palette distinction check. Returns the exit status."""
    result = validate_color_distinction(
        args.colors,
        minimum_distance=args.minimum_distance,
        algorithm=args.algorithm,
        group_similar_colors=not args.no_groups,
        include_recommendations=not args.no_recommendations,
    )

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    elif result.error:
        log("error", result.error)
        for text in result.invalid_colors:
            log("info", f"unrecognized color '{text}'")
    else:
        render_distinction_result(result)

    return 0 if result.valid else 1
