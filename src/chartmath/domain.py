"""
Domain calculation: the [min, max] extent of data along one axis.
"""

import logging
import math
from typing import Dict, Iterable, Sequence

from .convert import Accessor, make_accessor, safe_convert_matrix
from .types import Domain, HeatmapCell, Point, PolarPoint

logger = logging.getLogger(__name__)

DEFAULT_DOMAIN: Domain = (0.0, 1.0)
PADDING_RATIO = 0.1


def compute_domain(points: Sequence, accessor: Accessor = 'y', add_padding: bool = True) -> Domain:
    """
    Derive the (min, max) domain of one field of a point set.

    Args:
        points: Sequence of points (any objects the accessor understands)
        accessor: Callable or attribute name extracting the numeric field
        add_padding: Pad both ends by 10% of the span (1 when the span is 0)

    Returns:
        (min, max) tuple; (0, 1) for empty input

    Examples:
        compute_domain(points, 'x', add_padding=False)  # exact time axis
        compute_domain(points, lambda p: p.y)           # padded value axis
    """
    if len(points) == 0:
        return DEFAULT_DOMAIN

    get = make_accessor(accessor)
    values = [float(get(p)) for p in points]
    lo, hi = min(values), max(values)

    if not add_padding:
        return (lo, hi)

    padding = (hi - lo) * PADDING_RATIO
    if padding == 0:
        logger.debug("Collapsed domain at %s, padding by 1", lo)
        padding = 1.0
    return (lo - padding, hi + padding)


def radius_domain(points: Sequence[PolarPoint], headroom: float = 1.1) -> Domain:
    """Radial domain of a polar series: anchored at or below 0, max scaled by headroom."""
    if len(points) == 0:
        return DEFAULT_DOMAIN
    radii = [p.radius for p in points]
    return (min(min(radii), 0.0), max(radii) * headroom)


def cell_domain(cells: Sequence[HeatmapCell]) -> Domain:
    """Unpadded value domain of heatmap cells."""
    if len(cells) == 0:
        return DEFAULT_DOMAIN
    values = [c.value for c in cells]
    return (min(values), max(values))


def matrix_domain(matrix: Iterable[Iterable[float]]) -> Domain:
    """Unpadded value domain of a 2D matrix."""
    values = [v for row in safe_convert_matrix(matrix) for v in row]
    if not values:
        return DEFAULT_DOMAIN
    return (min(values), max(values))


def nice_number(value: float, round_result: bool) -> float:
    """Closest 1/2/5 x 10^k to value (rounded) or the next one up (not rounded)."""
    if value <= 0:
        return 1.0
    exponent = math.floor(math.log10(value))
    fraction = value / 10 ** exponent
    if round_result:
        if fraction < 1.5:
            nice = 1
        elif fraction < 3:
            nice = 2
        elif fraction < 7:
            nice = 5
        else:
            nice = 10
    else:
        if fraction <= 1:
            nice = 1
        elif fraction <= 2:
            nice = 2
        elif fraction <= 5:
            nice = 5
        else:
            nice = 10
    return nice * 10 ** exponent


def nice_bounds(points: Sequence[Point], tick_count: int = 5) -> Dict[str, float]:
    """
    Bounds padded by 5% and snapped outward to a nice tick step.

    Returns:
        Dict with x_min, x_max, y_min, y_max
    """
    if tick_count < 2:
        raise ValueError(f"tick_count must be >= 2, got {tick_count}")

    if len(points) == 0:
        raw = {'x': (0.0, 1.0), 'y': (0.0, 1.0)}
    else:
        raw = {}
        for axis in ('x', 'y'):
            lo, hi = compute_domain(points, axis, add_padding=False)
            # all-equal values widen by 1 so the bounds never collapse
            pad = (hi - lo) * 0.05 or 1.0
            raw[axis] = (lo - pad, hi + pad)

    bounds = {}
    for axis, (lo, hi) in raw.items():
        span = nice_number(hi - lo, round_result=False)
        step = nice_number(span / (tick_count - 1), round_result=True)
        bounds[f'{axis}_min'] = math.floor(lo / step) * step
        bounds[f'{axis}_max'] = math.ceil(hi / step) * step
    return bounds
