"""
Point decimation for render-budget control.

Strategies:
- stride: keep every k-th sample, k = ceil(n / max_points). Fast and
  predictable but not shape-preserving: short spikes between kept samples
  are dropped.
- lttb: Largest-Triangle-Three-Buckets (Steinarsson, 2013). Keeps the first
  and last points and, per bucket, the point forming the largest triangle
  with its neighbours. Preserves visual shape.
- minmax: per bucket, the lowest and highest sample in x order. Preserves
  the envelope (peaks and troughs).
- auto: lttb.

Every strategy returns at most max_points points, and returns the input
list itself when it already fits.
"""

import logging
import math
from typing import Dict, List, Literal, Sequence

logger = logging.getLogger(__name__)

DecimationStrategy = Literal['stride', 'lttb', 'minmax', 'auto']

STRATEGIES = ('stride', 'lttb', 'minmax', 'auto')


def stride_decimation(points: Sequence, max_points: int) -> List:
    """Keep indices divisible by ceil(len / max_points)."""
    threshold = math.ceil(len(points) / max_points)
    return [p for i, p in enumerate(points) if i % threshold == 0]


def lttb(points: Sequence, max_points: int) -> List:
    """
    Largest-Triangle-Three-Buckets downsampling.

    Args:
        points: Ordered points with x and y attributes
        max_points: Target number of points

    Returns:
        Downsampled list, first and last points always kept
    """
    n = len(points)
    if max_points >= n:
        return list(points)
    if max_points == 1:
        return [points[0]]
    if max_points == 2:
        return [points[0], points[-1]]

    sampled = [points[0]]
    bucket_size = (n - 2) / (max_points - 2)
    a = 0

    for i in range(max_points - 2):
        # average of the next bucket is the third triangle vertex
        avg_start = math.floor((i + 1) * bucket_size) + 1
        avg_end = min(math.floor((i + 2) * bucket_size) + 1, n)
        avg_x = avg_y = 0.0
        for p in points[avg_start:avg_end]:
            avg_x += p.x
            avg_y += p.y
        avg_len = avg_end - avg_start
        if avg_len > 0:
            avg_x /= avg_len
            avg_y /= avg_len
        else:
            avg_x, avg_y = points[-1].x, points[-1].y

        range_start = math.floor(i * bucket_size) + 1
        range_end = math.floor((i + 1) * bucket_size) + 1
        ax, ay = points[a].x, points[a].y

        max_area = -1.0
        next_a = range_start
        for j in range(range_start, range_end):
            area = abs((ax - avg_x) * (points[j].y - ay) - (ax - points[j].x) * (avg_y - ay)) * 0.5
            if area > max_area:
                max_area = area
                next_a = j

        sampled.append(points[next_a])
        a = next_a

    sampled.append(points[-1])
    return sampled


def min_max_decimation(points: Sequence, max_points: int) -> List:
    """
    Keep the minimum and maximum y of each bucket, in x order.

    Uses max_points // 2 buckets so the result never exceeds max_points.
    """
    n = len(points)
    if max_points >= n:
        return list(points)
    if max_points == 1:
        return [points[0]]

    buckets = max_points // 2
    bucket_size = n / buckets
    sampled = []
    for i in range(buckets):
        start = math.floor(i * bucket_size)
        end = min(math.floor((i + 1) * bucket_size), n)
        if start >= end:
            continue
        low = high = points[start]
        for p in points[start + 1:end]:
            if p.y < low.y:
                low = p
            if p.y > high.y:
                high = p
        if low is high:
            sampled.append(low)
        elif low.x < high.x:
            sampled.extend((low, high))
        else:
            sampled.extend((high, low))
    return sampled


def decimate(points: Sequence, max_points: int, strategy: DecimationStrategy = 'stride') -> Sequence:
    """
    Reduce an ordered point sequence to at most max_points points.

    Args:
        points: Ordered points (x/y attributes needed for lttb and minmax)
        max_points: Render budget, at least 1
        strategy: 'stride' (default), 'lttb', 'minmax' or 'auto'

    Returns:
        The input unchanged when it fits, otherwise a new list

    Examples:
        decimate(points, 500)
        decimate(points, 500, strategy='lttb')
    """
    if max_points < 1:
        raise ValueError(f"max_points must be >= 1, got {max_points}")
    if strategy not in STRATEGIES:
        raise ValueError(f"Unknown decimation strategy: {strategy}")
    if len(points) <= max_points:
        return points

    if strategy == 'auto':
        strategy = 'lttb'
    logger.debug("Decimating %d points to %d with %s", len(points), max_points, strategy)

    if strategy == 'lttb':
        return lttb(points, max_points)
    if strategy == 'minmax':
        return min_max_decimation(points, max_points)
    return stride_decimation(points, max_points)


def decimation_stats(original: Sequence, decimated: Sequence) -> Dict[str, float]:
    """Point counts before/after and how much was removed."""
    original_count = len(original)
    decimated_count = len(decimated)
    return {
        'original_count': original_count,
        'decimated_count': decimated_count,
        'reduction_ratio': original_count / decimated_count if decimated_count else 0.0,
        'compression_percent': (1 - decimated_count / original_count) * 100 if original_count else 0.0,
    }
