#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/shared/preview.py

import re

from contrastlab.core import config as c
from contrastlab.core.conversions import hex_to_rgb
from contrastlab.shared.logger import paint

_ANSI_ESCAPE = re.compile(r'\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])')


def get_visible_len(s: str) -> int:
    return len(_ANSI_ESCAPE.sub('', s))


def print_color_block(hex_code: str, title: str = "color", end: str = "\n") -> None:
    """Print a truecolor swatch for '#rrggbb' with a padded label."""
    r, g, b = hex_to_rgb(hex_code)
    padding = " " * max(0, c.PREVIEW_LABEL_WIDTH - get_visible_len(title))
    block = paint(f"\033[48;2;{r};{g};{b}m", " " * c.PREVIEW_BLOCK_WIDTH)

    print(
        f"{title}{padding}{paint(c.BOLD_WHITE, ':')}   "
        f"{block}  {paint(c.BOLD_WHITE, hex_code.upper())}",
        end=end,
    )
