#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/shared/formatting.py


def format_rgb(r: int, g: int, b: int) -> str:
    return f"rgb({r}, {g}, {b})"


def format_colorspace(fmt: str, *args) -> str:
    """
    Format color values into standard CSS-like string representations.

    Args:
        fmt (str): The colorspace ('rgb', 'hsl' or 'lab').
        *args: The numeric values corresponding to the colorspace channels.
            HSL saturation and lightness are expected in percent.

    Returns:
        str: A formatted string ready for CLI output or display.
    """
    if fmt == 'rgb':
        return format_rgb(*args)
    elif fmt == 'hsl':
        h, s, l = args
        return f"hsl({h}, {s}%, {l}%)"
    elif fmt == 'lab':
        return f"lab({args[0]:.4f} {args[1]:.4f} {args[2]:.4f})"

    return ""


def format_ratio(ratio: float) -> str:
    return f"{ratio:.2f}:1"
