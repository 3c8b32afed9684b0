#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/core/types.py

from typing import NamedTuple, NewType

# hsl_to_rgb takes a hue fraction in [0, 1]; rgb_to_hsl returns degrees.
HueFraction = NewType("HueFraction", float)
HueDegrees = NewType("HueDegrees", float)


class RGBColor(NamedTuple):
    """8-bit sRGB triple, every channel an int in [0, 255]."""
    r: int
    g: int
    b: int


class HSLColor(NamedTuple):
    """Hue in degrees [0, 360), saturation and lightness in percent [0, 100]."""
    h: HueDegrees
    s: float
    l: float


class LABColor(NamedTuple):
    """CIE L*a*b* under the D65 reference white."""
    l: float
    a: float
    b: float


def degrees_to_fraction(h: float) -> HueFraction:
    return HueFraction((h % 360.0) / 360.0)
