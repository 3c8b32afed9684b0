#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/logic/contrast/validator.py

from typing import Union

from contrastlab.core import config as c
from contrastlab.core.adjustment import adjust_for_contrast
from contrastlab.core.contrast import WcagLevel, get_contrast_ratio_rgb, get_required_ratio
from contrastlab.core.difference import DistanceAlgorithm, color_distance
from contrastlab.core.results import ColorInfo, ContrastRecommendation, ContrastResult
from contrastlab.core.types import RGBColor
from contrastlab.shared.parser import parse_color


def _recommend(fg: RGBColor, bg: RGBColor, required_ratio: float) -> ContrastRecommendation:
    """
    Adjust the foreground against the background and the other way round,
    then keep whichever moved less (CIEDE2000). Adjustments that reach the
    required ratio win over ones that fall short; ties go to the foreground.
    """
    fg_adj = adjust_for_contrast(fg, bg, required_ratio)
    bg_adj = adjust_for_contrast(bg, fg, required_ratio)

    candidates = [
        ("foreground", fg_adj, color_distance(fg, fg_adj.color, DistanceAlgorithm.CIEDE2000)),
        ("background", bg_adj, color_distance(bg, bg_adj.color, DistanceAlgorithm.CIEDE2000)),
    ]
    if any(adj.met_target for _, adj, _ in candidates):
        candidates = [cand for cand in candidates if cand[1].met_target]

    # min() keeps the first of equal keys, so ties stay with the foreground
    kind, adj, distance = min(candidates, key=lambda cand: cand[2])
    ratio = get_contrast_ratio_rgb(adj.color, bg if kind == "foreground" else fg)

    return ContrastRecommendation(
        type=kind,
        color=ColorInfo.from_rgb(adj.color),
        contrast_ratio=ratio,
        distance=distance,
    )


def test_contrast(
    foreground: str,
    background: str,
    wcag_level: Union[WcagLevel, str] = c.DEFAULT_WCAG_LEVEL,
    large_text: bool = c.DEFAULT_LARGE_TEXT,
    include_recommendations: bool = c.DEFAULT_INCLUDE_RECOMMENDATIONS,
) -> ContrastResult:
    """
    Check a foreground/background pair against a WCAG contrast level.

    Unparsable colors come back as an invalid result with an `error`
    message and a ratio of 0; nothing is raised for bad color text.
    """
    level = wcag_level.value if isinstance(wcag_level, WcagLevel) else str(wcag_level).upper()

    fg = parse_color(foreground)
    bg = parse_color(background)

    if fg is None or bg is None:
        return ContrastResult(
            valid=False,
            error=c.ERR_INVALID_FOREGROUND if fg is None else c.ERR_INVALID_BACKGROUND,
            contrast_ratio=0,
            wcag_level=level,
            large_text=large_text,
        )

    ratio = get_contrast_ratio_rgb(fg, bg)
    required = get_required_ratio(level, large_text)
    valid = ratio >= required

    recommendation = None
    if include_recommendations and not valid:
        recommendation = _recommend(fg, bg, required)

    return ContrastResult(
        valid=valid,
        contrast_ratio=ratio,
        wcag_level=level,
        large_text=large_text,
        required_ratio=required,
        foreground_color=ColorInfo.from_rgb(fg),
        background_color=ColorInfo.from_rgb(bg),
        recommendation=recommendation,
    )


# keep pytest from collecting the public API as a test
test_contrast.__test__ = False
