#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/logic/parse/engine.py

import argparse
import json
from typing import Any, Dict, Optional

from contrastlab.core.conversions import rgb_to_lab
from contrastlab.core.luminance import get_luminance
from contrastlab.core.results import ColorInfo
from contrastlab.shared.logger import log
from contrastlab.shared.naming import get_name_for_rgb
from contrastlab.shared.parser import parse_color
from .renderer import render_parse_info


def describe_color(text: str) -> Optional[Dict[str, Any]]:
    """Every notation the checks use for one color, or None if it does not parse."""
    rgb = parse_color(text)
    if rgb is None:
        return None
    lab = rgb_to_lab(*rgb)
    info = ColorInfo.from_rgb(rgb).to_dict()
    info["input"] = text
    info["name"] = get_name_for_rgb(rgb)
    info["lab"] = {"l": lab.l, "a": lab.a, "b": lab.b}
    info["luminance"] = get_luminance(*rgb)
    return info


def run(args: argparse.Namespace) -> int:
    info = describe_color(args.color)
    if info is None:
        log("error", f"unrecognized color '{args.color}'")
        return 1

    if args.json:
        print(json.dumps(info, indent=2))
    else:
        render_parse_info(info)
    return 0
