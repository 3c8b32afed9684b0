#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/core/adjustment.py

from dataclasses import dataclass
from typing import Tuple

from . import config as c
from .contrast import get_contrast_ratio_rgb
from .conversions import hsl_to_rgb, rgb_to_hsl
from .luminance import get_luminance
from .types import RGBColor, degrees_to_fraction


@dataclass(frozen=True)
class ContrastAdjustment:
    """Outcome of a contrast search. `met_target` is False on a best-effort result."""
    color: RGBColor
    contrast_ratio: float
    target_ratio: float
    met_target: bool
    iterations: int


def adjust_for_contrast(
    color: Tuple[int, int, int],
    background: Tuple[int, int, int],
    target_ratio: float = c.ADJUST_DEFAULT_TARGET,
) -> ContrastAdjustment:
    """
    Step HSL lightness away from the background until target_ratio is met.

    Lighter colors get lighter and darker ones darker (equal luminance heads
    for the pole with more headroom), 5 lightness units per step for at most
    20 steps. Once lightness pins at 95 (or 5) saturation drops by 10 per
    step, and the search stops when saturation is exhausted. Never raises;
    check `met_target`.
    """
    color = RGBColor(*color)
    background = RGBColor(*background)
    ratio = get_contrast_ratio_rgb(color, background)

    if ratio >= target_ratio:
        return ContrastAdjustment(color, ratio, target_ratio, True, 0)

    lum_color = get_luminance(*color)
    lum_background = get_luminance(*background)
    if lum_color == lum_background:
        lighten = lum_background < c.CONTRAST_CROSSOVER_LUMINANCE
    else:
        lighten = lum_color > lum_background
    step = c.ADJUST_LIGHTNESS_STEP if lighten else -c.ADJUST_LIGHTNESS_STEP

    h, s, l = rgb_to_hsl(*color)
    adjusted = color
    iterations = 0

    while ratio < target_ratio and iterations < c.ADJUST_MAX_ITERATIONS:
        l = max(0, min(int(c.PERCENT_MAX), l + step))
        adjusted = hsl_to_rgb(degrees_to_fraction(h), s / c.PERCENT_MAX, l / c.PERCENT_MAX)
        ratio = get_contrast_ratio_rgb(adjusted, background)
        iterations += 1

        saturated = l >= c.ADJUST_LIGHTNESS_CEIL if lighten else l <= c.ADJUST_LIGHTNESS_FLOOR
        if saturated:
            s = max(0, s - c.ADJUST_SATURATION_STEP)
            if s <= 0:
                break

    return ContrastAdjustment(adjusted, ratio, target_ratio, ratio >= target_ratio, iterations)


def adjust_color_for_contrast(
    color: Tuple[int, int, int],
    background: Tuple[int, int, int],
    target_ratio: float = c.ADJUST_DEFAULT_TARGET,
) -> RGBColor:
    """Color-only form of adjust_for_contrast."""
    return adjust_for_contrast(color, background, target_ratio).color
