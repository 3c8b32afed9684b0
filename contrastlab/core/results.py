#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/core/results.py

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from .conversions import rgb_to_hex, rgb_to_hsl
from .types import HSLColor, RGBColor
from contrastlab.shared.formatting import format_rgb


def _hsl_dict(hsl: HSLColor) -> Dict[str, float]:
    return {"h": hsl.h, "s": hsl.s, "l": hsl.l}


@dataclass(frozen=True)
class ColorInfo:
    """A resolved color in the three notations reports show."""
    hex: str
    rgb: RGBColor
    hsl: HSLColor

    @classmethod
    def from_rgb(cls, rgb: Tuple[int, int, int]) -> "ColorInfo":
        rgb = RGBColor(*rgb)
        return cls(hex=rgb_to_hex(*rgb), rgb=rgb, hsl=rgb_to_hsl(*rgb))

    def to_dict(self) -> Dict[str, Any]:
        return {"hex": self.hex, "rgb": format_rgb(*self.rgb), "hsl": _hsl_dict(self.hsl)}


@dataclass(frozen=True)
class ContrastRecommendation:
    type: str
    color: ColorInfo
    contrast_ratio: float
    distance: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "color": self.color.to_dict(),
            "contrastRatio": self.contrast_ratio,
        }


@dataclass(frozen=True)
class ContrastResult:
    valid: bool
    contrast_ratio: float
    wcag_level: str
    large_text: bool
    required_ratio: Optional[float] = None
    foreground_color: Optional[ColorInfo] = None
    background_color: Optional[ColorInfo] = None
    recommendation: Optional[ContrastRecommendation] = None
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"valid": self.valid}
        if self.error is not None:
            data["error"] = self.error
        data["contrastRatio"] = self.contrast_ratio
        data["wcagLevel"] = self.wcag_level
        data["largeText"] = self.large_text
        if self.required_ratio is not None:
            data["requiredRatio"] = self.required_ratio
        if self.foreground_color is not None:
            data["foregroundColor"] = self.foreground_color.to_dict()
        if self.background_color is not None:
            data["backgroundColor"] = self.background_color.to_dict()
        if self.recommendation is not None:
            data["recommendation"] = self.recommendation.to_dict()
        return data


@dataclass(frozen=True)
class ColorPair:
    color1: str
    color2: str
    distance: float
    sufficient: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "color1": self.color1,
            "color2": self.color2,
            "distance": self.distance,
            "sufficient": self.sufficient,
        }


@dataclass(frozen=True)
class DistinctionRecommendation:
    original_color: str
    suggested_color: str
    hsl: HSLColor

    def to_dict(self) -> Dict[str, Any]:
        return {
            "originalColor": self.original_color,
            "suggestedColor": self.suggested_color,
            "hsl": _hsl_dict(self.hsl),
        }


@dataclass(frozen=True)
class DistinctionResult:
    valid: bool
    algorithm: Optional[str] = None
    minimum_distance: Optional[float] = None
    color_pairs: Tuple[ColorPair, ...] = ()
    insufficient_pairs: Tuple[ColorPair, ...] = ()
    similar_groups: Optional[Tuple[Tuple[str, ...], ...]] = None
    recommendations: Optional[Tuple[DistinctionRecommendation, ...]] = None
    invalid_colors: Tuple[str, ...] = field(default_factory=tuple)
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"valid": self.valid}
        if self.error is not None:
            data["error"] = self.error
            data["invalidColors"] = list(self.invalid_colors)
            return data
        data["algorithm"] = self.algorithm
        data["minimumDistance"] = self.minimum_distance
        data["colorPairs"] = [p.to_dict() for p in self.color_pairs]
        data["insufficientPairs"] = [p.to_dict() for p in self.insufficient_pairs]
        if self.similar_groups:
            data["similarGroups"] = [list(g) for g in self.similar_groups]
        if self.recommendations:
            data["recommendations"] = [r.to_dict() for r in self.recommendations]
        if self.invalid_colors:
            data["invalidColors"] = list(self.invalid_colors)
        return data
