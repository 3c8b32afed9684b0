#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/shared/clamping.py

import math


def _clamp01(v: float) -> float:
    if v != v:
        return 0.0
    return max(0.0, min(1.0, v))


def _clamp_percent(v: float) -> float:
    if v != v:
        return 0.0
    return max(0.0, min(100.0, v))


def _round_half_up(v: float) -> int:
    """Round .5 away from zero for positives, matching CSS/JS channel rounding."""
    return int(math.floor(v + 0.5))


def _clamp_channel(v: float) -> int:
    if v != v:
        return 0
    return max(0, min(255, _round_half_up(v)))
