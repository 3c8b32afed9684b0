#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/core/difference.py

import math
from enum import Enum
from typing import Callable, Dict, Tuple, Union

from . import config as c
from .conversions import rgb_to_lab
from .types import LABColor
from contrastlab.shared.logger import log


class DistanceAlgorithm(str, Enum):
    CIE76 = "CIE76"
    CIE94 = "CIE94"
    CIEDE2000 = "CIEDE2000"


def delta_e_cie76(lab1: LABColor, lab2: LABColor) -> float:
    """Plain Euclidean distance in L*a*b*."""
    L1, a1, b1 = lab1
    L2, a2, b2 = lab2
    return math.sqrt((L1 - L2) ** c.EXP_2 + (a1 - a2) ** c.EXP_2 + (b1 - b2) ** c.EXP_2)


def delta_e_cie94(lab1: LABColor, lab2: LABColor) -> float:
    """
    Calculate the CIE94 color difference (graphic arts weights).
    The first color is the reference: S_C and S_H scale with its chroma.
    """
    L1, a1, b1 = lab1
    L2, a2, b2 = lab2
    k_L, k_C, k_H = c.K_FACTORS

    C1 = math.hypot(a1, b1)
    C2 = math.hypot(a2, b2)

    delta_L = L1 - L2
    delta_C = C1 - C2
    delta_a = a1 - a2
    delta_b = b1 - b2

    # radicand can dip below zero for near-identical hues
    delta_H = math.sqrt(max(0.0, delta_a ** c.EXP_2 + delta_b ** c.EXP_2 - delta_C ** c.EXP_2))

    S_L = c.UNIT
    S_C = c.UNIT + c.CIE94_K1 * C1
    S_H = c.UNIT + c.CIE94_K2 * C1

    return math.sqrt(
        (delta_L / (k_L * S_L)) ** c.EXP_2 +
        (delta_C / (k_C * S_C)) ** c.EXP_2 +
        (delta_H / (k_H * S_H)) ** c.EXP_2
    )


def _prime_hue(a_prime: float, b: float) -> float:
    """Hue angle of (a', b*) in degrees, [0, 360)."""
    return math.degrees(math.atan2(b, a_prime)) % c.DEG_360


def _hue_delta(h1: float, h2: float, chroma_product: float) -> float:
    """Signed h2 - h1 the short way round the circle; 0 when either color is achromatic."""
    if chroma_product == 0:
        return 0.0
    diff = h2 - h1
    if diff > c.DEG_180:
        return diff - c.DEG_360
    if diff < -c.DEG_180:
        return diff + c.DEG_360
    return diff


def _hue_mean(h1: float, h2: float, chroma_product: float) -> float:
    """Circular mean of two hues; the plain sum when either color is achromatic."""
    total = h1 + h2
    if chroma_product == 0:
        return total
    if abs(h1 - h2) <= c.DEG_180:
        return total / c.DIV_2
    if total < c.DEG_360:
        return (total + c.DEG_360) / c.DIV_2
    return (total - c.DEG_360) / c.DIV_2


def delta_e_ciede2000(lab1: LABColor, lab2: LABColor) -> float:
    """
    CIEDE2000 color difference (ΔE00) between two CIE LAB colors.

    Follows the published formula term for term, including the G rescaling
    of a*, the circular hue mean and the blue-region rotation term R_T.

    Source: Sharma, G., Wu, W., & Dalal, E. N. (2005).
    """
    L1, a1, b1 = lab1
    L2, a2, b2 = lab2
    k_L, k_C, k_H = c.K_FACTORS

    C_bar_7 = ((math.hypot(a1, b1) + math.hypot(a2, b2)) / c.DIV_2) ** c.EXP_7
    G = c.G_FACTOR * (c.UNIT - math.sqrt(C_bar_7 / (C_bar_7 + c.POW7_25)))
    a1_p = (c.UNIT + G) * a1
    a2_p = (c.UNIT + G) * a2

    C1_p = math.hypot(a1_p, b1)
    C2_p = math.hypot(a2_p, b2)
    h1_p = _prime_hue(a1_p, b1)
    h2_p = _prime_hue(a2_p, b2)
    chroma_product = C1_p * C2_p

    dL_p = L2 - L1
    dC_p = C2_p - C1_p
    dh_p = _hue_delta(h1_p, h2_p, chroma_product)
    dH_p = c.DIV_2 * math.sqrt(chroma_product) * math.sin(math.radians(dh_p) / c.DIV_2)

    L_bar_p = (L1 + L2) / c.DIV_2
    C_bar_p = (C1_p + C2_p) / c.DIV_2
    h_bar_p = _hue_mean(h1_p, h2_p, chroma_product)

    T = (
        c.UNIT
        - c.T_K1 * math.cos(math.radians(h_bar_p - c.T_OFFSET_1))
        + c.T_K2 * math.cos(math.radians(c.DIV_2 * h_bar_p))
        + c.T_K3 * math.cos(math.radians(c.T_MUL_3 * h_bar_p + c.T_OFFSET_2))
        - c.T_K4 * math.cos(math.radians(c.T_MUL_4 * h_bar_p - c.T_OFFSET_3))
    )

    lightness_sq = (L_bar_p - c.L_OFFSET) ** c.EXP_2
    S_L = c.UNIT + c.S_L_K * lightness_sq / math.sqrt(c.S_L_DIV + lightness_sq)
    S_C = c.UNIT + c.S_C_K * C_bar_p
    S_H = c.UNIT + c.S_H_K * C_bar_p * T

    C_bar_p_7 = C_bar_p ** c.EXP_7
    rotation = c.RT_D30 * math.exp(-(((h_bar_p - c.RT_H_OFFSET) / c.RT_DIV) ** c.EXP_2))
    R_T = -c.DIV_2 * math.sqrt(C_bar_p_7 / (C_bar_p_7 + c.POW7_25)) * math.sin(math.radians(c.DIV_2 * rotation))

    l_term = dL_p / (k_L * S_L)
    c_term = dC_p / (k_C * S_C)
    h_term = dH_p / (k_H * S_H)
    return math.sqrt(l_term ** c.EXP_2 + c_term ** c.EXP_2 + h_term ** c.EXP_2 + R_T * c_term * h_term)


DISTANCE_FUNCTIONS: Dict[DistanceAlgorithm, Callable[[LABColor, LABColor], float]] = {
    DistanceAlgorithm.CIE76: delta_e_cie76,
    DistanceAlgorithm.CIE94: delta_e_cie94,
    DistanceAlgorithm.CIEDE2000: delta_e_ciede2000,
}


def resolve_algorithm(name: Union[DistanceAlgorithm, str], strict: bool = False) -> DistanceAlgorithm:
    """
    Map an algorithm name onto DistanceAlgorithm.

    Unknown names fall back to CIEDE2000 with a warning; with strict=True
    they raise ValueError instead.
    """
    if isinstance(name, DistanceAlgorithm):
        return name
    try:
        return DistanceAlgorithm(str(name).upper())
    except ValueError:
        if strict:
            raise ValueError(f"unknown distance algorithm: {name!r}") from None
        log("warning", f"unknown distance algorithm '{name}', using {DistanceAlgorithm.CIEDE2000.value}")
        return DistanceAlgorithm.CIEDE2000


def color_distance(
    rgb1: Tuple[int, int, int],
    rgb2: Tuple[int, int, int],
    algorithm: Union[DistanceAlgorithm, str] = DistanceAlgorithm.CIEDE2000,
) -> float:
    """Perceptual distance between two RGB colors, measured in LAB."""
    func = DISTANCE_FUNCTIONS[resolve_algorithm(algorithm)]
    return func(rgb_to_lab(*rgb1), rgb_to_lab(*rgb2))
