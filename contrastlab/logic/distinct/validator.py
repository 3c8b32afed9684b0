#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/logic/distinct/validator.py

from typing import List, Sequence, Union

from contrastlab.core import config as c
from contrastlab.core.conversions import hsl_color_to_rgb, rgb_to_hex, rgb_to_hsl, rgb_to_lab
from contrastlab.core.difference import DISTANCE_FUNCTIONS, DistanceAlgorithm, resolve_algorithm
from contrastlab.core.graph import SimilarityGraph
from contrastlab.core.results import ColorPair, DistinctionRecommendation, DistinctionResult
from contrastlab.core.types import HSLColor, HueDegrees, RGBColor
from contrastlab.shared.parser import parse_color


def suggest_distinct_color(rgb: RGBColor) -> HSLColor:
    """
    Single-pass replacement for a color that sits too close to others.

    Rotates the hue by 30 degrees, lifts weak saturation and pulls extreme
    lightness back toward the 30-70 band. The result is not re-checked
    against the rest of the palette.
    """
    h, s, l = rgb_to_hsl(*rgb)
    h = (h + c.DISTINCT_HUE_SHIFT) % int(c.HUE_MAX)
    if s < c.DISTINCT_SAT_MIN:
        s = min(int(c.PERCENT_MAX), s + c.DISTINCT_SAT_BOOST)
    if l < c.DISTINCT_LIGHT_LOW:
        l = min(c.DISTINCT_LIGHT_HIGH, l + c.DISTINCT_LIGHT_PUSH)
    elif l > c.DISTINCT_LIGHT_HIGH:
        l = max(c.DISTINCT_LIGHT_LOW, l - c.DISTINCT_LIGHT_PUSH)
    return HSLColor(HueDegrees(h), s, l)


def _pick_representative(group: List[int], graph: SimilarityGraph) -> int:
    """
    Group member with the most insufficient pairs; ties by input order.
    A component holds every edge of its members, so graph degree is the
    in-group count.
    """
    return min(group, key=lambda vertex: (-graph.degree(vertex), vertex))


def validate_color_distinction(
    colors: Sequence[str],
    minimum_distance: float = c.DEFAULT_MINIMUM_DISTANCE,
    algorithm: Union[DistanceAlgorithm, str] = c.DEFAULT_ALGORITHM,
    group_similar_colors: bool = c.DEFAULT_GROUP_SIMILAR_COLORS,
    include_recommendations: bool = c.DEFAULT_INCLUDE_RECOMMENDATIONS,
) -> DistinctionResult:
    """
    Check that every pair of colors is at least minimum_distance apart.

    Pairs are measured in input order over the colors that parse; the
    rest are reported in `invalid_colors`. Colors linked (directly or
    transitively) by too-small distances are grouped, and each group gets
    one hue-shifted replacement suggestion.
    """
    algo = resolve_algorithm(algorithm)
    distance_fn = DISTANCE_FUNCTIONS[algo]

    parsed = [(text, parse_color(text)) for text in colors]
    valid = [(text, rgb) for text, rgb in parsed if rgb is not None]
    invalid = tuple(text for text, rgb in parsed if rgb is None)

    if len(valid) < 2:
        return DistinctionResult(
            valid=False,
            error=c.ERR_TOO_FEW_COLORS,
            invalid_colors=invalid,
        )

    labs = [rgb_to_lab(*rgb) for _, rgb in valid]

    pairs = []
    edges = []
    for i in range(len(valid)):
        for j in range(i + 1, len(valid)):
            distance = distance_fn(labs[i], labs[j])
            sufficient = distance >= minimum_distance
            pairs.append(ColorPair(valid[i][0], valid[j][0], distance, sufficient))
            if not sufficient:
                edges.append((i, j))

    insufficient = tuple(pair for pair in pairs if not pair.sufficient)

    graph = SimilarityGraph.from_edges(len(valid), edges)
    groups: List[List[int]] = []
    if group_similar_colors and edges:
        groups = graph.connected_components(min_size=2)

    # suggestions come from groups, so none without grouping
    recommendations = []
    if include_recommendations:
        for group in groups:
            chosen = _pick_representative(group, graph)
            hsl = suggest_distinct_color(valid[chosen][1])
            recommendations.append(
                DistinctionRecommendation(
                    original_color=valid[chosen][0],
                    suggested_color=rgb_to_hex(*hsl_color_to_rgb(hsl)),
                    hsl=hsl,
                )
            )

    return DistinctionResult(
        valid=not insufficient,
        algorithm=algo.value,
        minimum_distance=minimum_distance,
        color_pairs=tuple(pairs),
        insufficient_pairs=insufficient,
        similar_groups=tuple(tuple(valid[v][0] for v in group) for group in groups) or None,
        recommendations=tuple(recommendations) or None,
        invalid_colors=invalid,
    )
