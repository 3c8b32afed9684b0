#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/core/contrast.py

from enum import Enum
from typing import Tuple, Union

from . import config as c
from .luminance import get_luminance


class WcagLevel(str, Enum):
    A = "A"
    AA = "AA"
    AAA = "AAA"


def get_contrast_ratio_rgb(c1: Tuple[int, int, int], c2: Tuple[int, int, int]) -> float:
    """
    Calculate the WCAG 2.1 contrast ratio between two specific RGB colors.

    Source: https://www.w3.org/TR/WCAG21/#dfn-contrast-ratio
    """
    y1 = get_luminance(*c1)
    y2 = get_luminance(*c2)

    l1, l2 = (y1, y2) if y1 > y2 else (y2, y1)

    return (l1 + c.WCAG_LUMINANCE_OFFSET) / (l2 + c.WCAG_LUMINANCE_OFFSET)


def get_required_ratio(level: Union[WcagLevel, str], large_text: bool = False) -> float:
    """Minimum contrast ratio for a WCAG level and text size."""
    key = level.value if isinstance(level, WcagLevel) else str(level).upper()
    if key not in c.WCAG_REQUIREMENTS:
        raise ValueError(f"unknown WCAG level: {level!r}")
    normal, large = c.WCAG_REQUIREMENTS[key]
    return large if large_text else normal


def get_wcag_levels(ratio: float) -> dict:
    """Pass/fail table for every level and text size at a given ratio."""
    return {
        "A": "Pass" if ratio >= c.WCAG_A else "Fail",
        "AA": "Pass" if ratio >= c.WCAG_AA_NORMAL else "Fail",
        "AA-Large": "Pass" if ratio >= c.WCAG_AA_LARGE else "Fail",
        "AAA": "Pass" if ratio >= c.WCAG_AAA_NORMAL else "Fail",
        "AAA-Large": "Pass" if ratio >= c.WCAG_AAA_LARGE else "Fail",
    }
