#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/logic/parse/renderer.py

from typing import Any, Dict

from contrastlab.core import config as c
from contrastlab.shared.formatting import format_colorspace
from contrastlab.shared.logger import paint
from contrastlab.shared.preview import print_color_block


def render_parse_info(info: Dict[str, Any]) -> None:
    """Composes a parsed color into aligned terminal rows."""
    def row(label, value):
        print(f"{label:<{c.PREVIEW_LABEL_WIDTH}}{paint(c.BOLD_WHITE, ':')}   {paint(c.BOLD_WHITE, str(value))}")

    hsl, lab = info["hsl"], info["lab"]

    print()
    print_color_block(info["hex"], info["name"] or "color")
    print()
    row("rgb", info["rgb"])
    row("hsl", format_colorspace("hsl", hsl["h"], hsl["s"], hsl["l"]))
    row("lab", format_colorspace("lab", lab["l"], lab["a"], lab["b"]))
    row("luminance", f"{info['luminance']:.4f}")
    print()
