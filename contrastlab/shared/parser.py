#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/shared/parser.py

import re
from typing import Callable, List, Optional

from contrastlab.core import config as c
from contrastlab.core import conversions as conv
from contrastlab.core.types import RGBColor, degrees_to_fraction
from contrastlab.shared.clamping import _clamp_channel, _clamp_percent
from .naming import resolve_color_name

# Regex breakdown:
# rgba?\(            -> 'rgb(' or 'rgba('
# (\d+) x3           -> decimal integer channels separated by commas
# (?:,\s*[\d.]+)?    -> optional alpha, parsed but not kept
_RGB_RE = re.compile(r"rgba?\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*(?:,\s*[\d.]+\s*)?\)")

# Hue is an integer degree value; saturation and lightness may carry decimals
_HSL_RE = re.compile(
    r"hsla?\(\s*(\d+)\s*,\s*(\d+(?:\.\d+)?|\.\d+)%\s*,\s*(\d+(?:\.\d+)?|\.\d+)%\s*(?:,\s*[\d.]+\s*)?\)"
)


def parse_hex_string(s: str) -> Optional[RGBColor]:
    if not s.startswith("#"):
        return None
    return conv.hex_to_rgb(s)


def parse_rgb_string(s: str) -> Optional[RGBColor]:
    """'rgb(R, G, B)' / 'rgba(R, G, B, A)'. Channels above 255 are clamped."""
    m = _RGB_RE.fullmatch(s)
    if not m:
        return None
    return RGBColor(*(_clamp_channel(int(v)) for v in m.groups()))


def parse_hsl_string(s: str) -> Optional[RGBColor]:
    """'hsl(H, S%, L%)' / 'hsla(H, S%, L%, A)'."""
    m = _HSL_RE.fullmatch(s)
    if not m:
        return None
    sat = _clamp_percent(float(m.group(2)))
    light = _clamp_percent(float(m.group(3)))
    return conv.hsl_to_rgb(degrees_to_fraction(int(m.group(1))), sat / c.PERCENT_MAX, light / c.PERCENT_MAX)


def parse_named_color(s: str) -> Optional[RGBColor]:
    return resolve_color_name(s)


# Tried in order; the first grammar that accepts the text wins
STRING_PARSERS: List[Callable[[str], Optional[RGBColor]]] = [
    parse_hex_string,
    parse_rgb_string,
    parse_hsl_string,
    parse_named_color,
]


def parse_color(text) -> Optional[RGBColor]:
    """
    Resolve color text into an RGBColor.

    Accepts '#RGB', '#RRGGBB', rgb()/rgba(), hsl()/hsla() and CSS color
    names, case-insensitive with surrounding whitespace ignored. Returns
    None for anything else, including non-string input.
    """
    if not isinstance(text, str):
        return None
    s = text.strip().lower()
    if not s:
        return None
    for parser in STRING_PARSERS:
        rgb = parser(s)
        if rgb is not None:
            return rgb
    return None
