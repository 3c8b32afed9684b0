#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/logic/contrast/engine.py

import argparse
import json

from contrastlab.shared.logger import log
from .renderer import render_contrast_result
from .validator import test_contrast


def run(args: argparse.Namespace) -> int:
    """Execution engine for the contrast check. Returns the exit status."""
    result = test_contrast(
        args.foreground,
        args.background,
        wcag_level=args.level,
        large_text=args.large_text,
        include_recommendations=not args.no_recommendations,
    )

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    elif result.error:
        log("error", result.error)
    else:
        render_contrast_result(result)

    return 0 if result.valid else 1
