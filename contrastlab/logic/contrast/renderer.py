#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/logic/contrast/renderer.py

from contrastlab.core import config as c
from contrastlab.core.contrast import get_wcag_levels
from contrastlab.core.results import ContrastResult
from contrastlab.shared.formatting import format_ratio
from contrastlab.shared.logger import log, paint
from contrastlab.shared.preview import print_color_block


def _row(label: str, value: str) -> None:
    print(f"{label:<{c.PREVIEW_LABEL_WIDTH}}{paint(c.BOLD_WHITE, ':')}   {value}")


def render_contrast_result(result: ContrastResult) -> None:
    print()
    print_color_block(result.foreground_color.hex, "foreground")
    print_color_block(result.background_color.hex, "background")
    print()

    _row("contrast ratio", paint(c.BOLD_WHITE, format_ratio(result.contrast_ratio)))
    size = "large text" if result.large_text else "normal text"
    _row(f"required {result.wcag_level}", f"{format_ratio(result.required_ratio)} ({size})")
    print()

    for name, status in get_wcag_levels(result.contrast_ratio).items():
        color = c.MSG_BOLD_COLORS['success'] if status == "Pass" else c.MSG_BOLD_COLORS['error']
        _row(f"  {name}", paint(color, status))
    print()

    if result.valid:
        log("success", f"passes WCAG {result.wcag_level} for {size}")
    else:
        log("error", f"fails WCAG {result.wcag_level} for {size}")

    rec = result.recommendation
    if rec is not None:
        print()
        print_color_block(rec.color.hex, paint(c.MSG_BOLD_COLORS['info'], f"suggested {rec.type}"), end="")
        print(f"  ({format_ratio(rec.contrast_ratio)}, ΔE2000: {rec.distance:.2f})")
    print()
