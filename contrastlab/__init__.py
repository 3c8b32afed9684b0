#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/__init__.py

__version__ = "0.1.0"

from contrastlab.core.adjustment import ContrastAdjustment, adjust_color_for_contrast, adjust_for_contrast
from contrastlab.core.contrast import WcagLevel, get_contrast_ratio_rgb, get_required_ratio
from contrastlab.core.conversions import hex_to_rgb, hsl_to_rgb, rgb_to_hex, rgb_to_hsl, rgb_to_lab, rgb_to_xyz, xyz_to_lab
from contrastlab.core.difference import (
    DistanceAlgorithm,
    color_distance,
    delta_e_cie76,
    delta_e_cie94,
    delta_e_ciede2000,
)
from contrastlab.core.graph import SimilarityGraph
from contrastlab.core.luminance import get_luminance
from contrastlab.core.results import (
    ColorInfo,
    ColorPair,
    ContrastRecommendation,
    ContrastResult,
    DistinctionRecommendation,
    DistinctionResult,
)
from contrastlab.core.types import HSLColor, LABColor, RGBColor
from contrastlab.logic.contrast.validator import test_contrast
from contrastlab.logic.distinct.validator import validate_color_distinction
from contrastlab.shared.parser import parse_color

__all__ = [
    "__version__",
    "ColorInfo",
    "ColorPair",
    "ContrastAdjustment",
    "ContrastRecommendation",
    "ContrastResult",
    "DistanceAlgorithm",
    "DistinctionRecommendation",
    "DistinctionResult",
    "HSLColor",
    "LABColor",
    "RGBColor",
    "SimilarityGraph",
    "WcagLevel",
    "adjust_color_for_contrast",
    "adjust_for_contrast",
    "color_distance",
    "delta_e_cie76",
    "delta_e_cie94",
    "delta_e_ciede2000",
    "get_contrast_ratio_rgb",
    "get_luminance",
    "get_required_ratio",
    "hex_to_rgb",
    "hsl_to_rgb",
    "parse_color",
    "rgb_to_hex",
    "rgb_to_hsl",
    "rgb_to_lab",
    "rgb_to_xyz",
    "test_contrast",
    "validate_color_distinction",
    "xyz_to_lab",
]
