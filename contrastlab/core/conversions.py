#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/core/conversions.py

import functools
import re
from typing import Optional

from . import config as c
from .types import HSLColor, HueDegrees, HueFraction, LABColor, RGBColor, degrees_to_fraction
from contrastlab.shared.clamping import _clamp01, _clamp_channel, _round_half_up

_HEX_RE = re.compile(r"#([0-9a-f]{3}|[0-9a-f]{6})")


def hex_to_rgb(hex_code: str) -> Optional[RGBColor]:
    """Parse '#RGB' or '#RRGGBB'. Anything else (including alpha hex) is None."""
    m = _HEX_RE.fullmatch(hex_code.strip().lower())
    if not m:
        return None
    digits = m.group(1)
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return RGBColor(*(int(digits[i : i + 2], 16) for i in (0, 2, 4)))


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Convert RGB components to a lower-case '#rrggbb' string."""
    return f"#{_clamp_channel(r):02x}{_clamp_channel(g):02x}{_clamp_channel(b):02x}"


def rgb_to_hsl(r: int, g: int, b: int) -> HSLColor:
    """Convert RGB to HSL in whole degrees and percent."""
    r_f, g_f, b_f = r / c.RGB_MAX, g / c.RGB_MAX, b / c.RGB_MAX
    cmax = max(r_f, g_f, b_f)
    cmin = min(r_f, g_f, b_f)
    L = (cmax + cmin) / c.DIV_2
    if cmax == cmin:
        h = s = 0.0
    else:
        delta = cmax - cmin
        s = delta / (c.DIV_2 - cmax - cmin) if L > 0.5 else delta / (cmax + cmin)
        if cmax == r_f:
            h = (g_f - b_f) / delta + (6.0 if g_f < b_f else 0.0)
        elif cmax == g_f:
            h = (b_f - r_f) / delta + 2.0
        else:
            h = (r_f - g_f) / delta + 4.0
        h /= 6.0
    return HSLColor(
        HueDegrees(_round_half_up(h * c.HUE_MAX) % int(c.HUE_MAX)),
        _round_half_up(s * c.PERCENT_MAX),
        _round_half_up(L * c.PERCENT_MAX),
    )


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(h: HueFraction, s: float, L: float) -> RGBColor:
    """Convert HSL to RGB. All three inputs are fractions in [0, 1]."""
    h = h % c.UNIT
    s = _clamp01(s)
    L = _clamp01(L)
    if s == 0:
        r = g = b = L
    else:
        q = L * (c.UNIT + s) if L < 0.5 else L + s - L * s
        p = c.DIV_2 * L - q
        r = _hue_to_channel(p, q, h + 1 / 3)
        g = _hue_to_channel(p, q, h)
        b = _hue_to_channel(p, q, h - 1 / 3)
    return RGBColor(
        _clamp_channel(r * c.RGB_MAX),
        _clamp_channel(g * c.RGB_MAX),
        _clamp_channel(b * c.RGB_MAX),
    )


def hsl_color_to_rgb(hsl: HSLColor) -> RGBColor:
    """Convert a degrees/percent HSLColor back to RGB."""
    return hsl_to_rgb(
        degrees_to_fraction(hsl.h),
        hsl.s / c.PERCENT_MAX,
        hsl.l / c.PERCENT_MAX,
    )


def _srgb_to_linear(color_comp: int) -> float:
    """Linearize sRGB component."""
    c_norm = _clamp01(color_comp / c.RGB_MAX)
    return (
        c_norm / c.SRGB_SLOPE
        if c_norm <= c.SRGB_TO_LINEAR_TH
        else ((c_norm + c.SRGB_OFFSET) / c.SRGB_DIVISOR) ** c.SRGB_GAMMA
    )


def rgb_to_xyz(r: int, g: int, b: int) -> tuple:
    """Convert RGB to CIE XYZ (Y scaled to 100)."""
    r_lin = _srgb_to_linear(r) * c.XYZ_SCALING
    g_lin = _srgb_to_linear(g) * c.XYZ_SCALING
    b_lin = _srgb_to_linear(b) * c.XYZ_SCALING
    x = r_lin * c.M_SRGB_XYZ_X[0] + g_lin * c.M_SRGB_XYZ_X[1] + b_lin * c.M_SRGB_XYZ_X[2]
    y = r_lin * c.M_SRGB_XYZ_Y[0] + g_lin * c.M_SRGB_XYZ_Y[1] + b_lin * c.M_SRGB_XYZ_Y[2]
    z = r_lin * c.M_SRGB_XYZ_Z[0] + g_lin * c.M_SRGB_XYZ_Z[1] + b_lin * c.M_SRGB_XYZ_Z[2]
    return x, y, z


def _xyz_f(t: float) -> float:
    """Helper function for XYZ to LAB."""
    return t ** c.LAB_POW if t > c.LAB_E else (c.LAB_K * t) + c.LAB_OFFSET


def xyz_to_lab(x: float, y: float, z: float) -> LABColor:
    """Convert XYZ to CIE LAB."""
    x_r = _xyz_f(x / c.D65_X)
    y_r = _xyz_f(y / c.D65_Y)
    z_r = _xyz_f(z / c.D65_Z)
    L = (c.LAB_L_MULT * y_r) - c.LAB_L_SUB
    a = c.LAB_A_MULT * (x_r - y_r)
    b = c.LAB_B_MULT * (y_r - z_r)
    return LABColor(L, a, b)


def rgb_to_lab(r: int, g: int, b: int) -> LABColor:
    """Direct RGB to LAB conversion."""
    return xyz_to_lab(*rgb_to_xyz(r, g, b))


# Apply LRU caching to all functions in this module
for _name, _obj in list(globals().items()):
    if callable(_obj) and getattr(_obj, "__module__", None) == __name__ and not isinstance(_obj, type):
        globals()[_name] = functools.lru_cache(maxsize=c.LRU_CACHE_SIZE)(_obj)
