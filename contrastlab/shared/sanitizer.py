#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/shared/sanitizer.py

import argparse
import math
import re

from contrastlab.core import config as c
from contrastlab.core.difference import DistanceAlgorithm


def _sanitize_for_log(value) -> str:
    """
    Cleans up the input value for safe terminal logging by removing
    excessive whitespace and newlines.
    """
    if value is None:
        return ""
    return " ".join(str(value).split())


def _parse_finite_float(value: str) -> float:
    """
    Parses a finite float from a string after trimming whitespace.
    Returns None for anything float() rejects, or for inf and nan.
    """
    if value is None:
        return None
    try:
        val = float(str(value).strip())
    except ValueError:
        return None
    if not math.isfinite(val):
        return None
    return val


def _extract_alnum_upper(value: str) -> str:
    """Keeps letters and digits only, upper-cased. 'cie-de-2000' -> 'CIEDE2000'."""
    if value is None:
        return ""
    return "".join(re.findall(r"[0-9A-Z]", str(value).upper()))


# ==========================================
# CLI Argument Type Handlers (Validators)
# ==========================================

def handle_color_text(v: str) -> str:
    """
    Validator for color arguments. Only blank input is rejected here;
    grammar errors are reported by the checks themselves.
    """
    cleaned = _sanitize_for_log(v)
    if not cleaned:
        raise argparse.ArgumentTypeError("empty color value")
    return cleaned


def handle_wcag_level(v: str) -> str:
    cleaned = _extract_alnum_upper(v)
    if cleaned not in c.WCAG_REQUIREMENTS:
        raw = _sanitize_for_log(v)
        choices = ", ".join(c.WCAG_REQUIREMENTS)
        raise argparse.ArgumentTypeError(f"invalid WCAG level: '{raw}' (choose from {choices})")
    return cleaned


def handle_algorithm(v: str) -> str:
    """The CLI rejects unknown algorithms instead of falling back."""
    cleaned = _extract_alnum_upper(v)
    valid = [algo.value for algo in DistanceAlgorithm]
    if cleaned not in valid:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(
            f"invalid distance algorithm: '{raw}' (choose from {', '.join(valid)})"
        )
    return cleaned


def handle_float_range(min_v: float, max_v: float):
    """
    Factory function returning a validator that ensures a float
    is clamped within a specific [min_v, max_v] range.
    """
    def validator(v: str) -> float:
        val = _parse_finite_float(v)

        if val is None:
            raw = _sanitize_for_log(v)
            raise argparse.ArgumentTypeError(f"invalid float value: '{raw}'")

        if val < min_v:
            val = min_v
        elif val > max_v:
            val = max_v
        return val
    return validator


# ==========================================
# Central Mapping for Argparse types
# ==========================================

INPUT_HANDLERS = {
    "color": handle_color_text,
    "wcag_level": handle_wcag_level,
    "algorithm": handle_algorithm,
    "minimum_distance": handle_float_range(0.0, c.MIN_DISTANCE_MAX),
}
