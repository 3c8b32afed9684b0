#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/logic/distinct/renderer.py

from contrastlab.core import config as c
from contrastlab.core.conversions import rgb_to_hex
from contrastlab.core.results import DistinctionResult
from contrastlab.shared.logger import log, paint
from contrastlab.shared.parser import parse_color
from contrastlab.shared.preview import print_color_block


def _swatch(text: str, title: str, end: str = "\n") -> None:
    print_color_block(rgb_to_hex(*parse_color(text)), title, end=end)


def render_distinction_result(result: DistinctionResult) -> None:
    for text in result.invalid_colors:
        log("warning", f"skipping unrecognized color '{text}'")

    print()
    print(paint(c.BOLD_WHITE, f"{result.algorithm} pairs (minimum {result.minimum_distance:g})"))
    for pair in result.color_pairs:
        color = c.MSG_BOLD_COLORS['success'] if pair.sufficient else c.MSG_BOLD_COLORS['error']
        print(f"  {pair.color1} <-> {pair.color2}: {paint(color, f'{pair.distance:.2f}')}")
    print()

    if result.similar_groups:
        for i, group in enumerate(result.similar_groups, 1):
            print(paint(c.BOLD_WHITE, f"similar group {i}"))
            for text in group:
                _swatch(text, f"  {text}")
            print()

    if result.recommendations:
        for rec in result.recommendations:
            _swatch(rec.original_color, "replace")
            print_color_block(rec.suggested_color, paint(c.MSG_BOLD_COLORS['info'], "with"))
            print()

    if result.valid:
        log("success", "all colors are distinguishable")
    else:
        count = len(result.insufficient_pairs)
        log("error", f"{count} pair{'s' if count != 1 else ''} below the minimum distance")
    print()
