"""
Histogram binning: bin-count rules and bin construction.

Bin-count rules:
- sturges: ceil(log2(n) + 1), suited to roughly normal data
- scott: bin width 3.5 * sigma / n^(1/3), suited to continuous data
- freedman-diaconis: bin width 2 * IQR / n^(1/3), robust to outliers
- sqrt: ceil(sqrt(n)), simple general purpose rule
- auto: freedman-diaconis above 100 samples, sturges otherwise
"""

import bisect
import logging
import math
import statistics
from typing import List, Literal, Optional, Sequence, Union

from .convert import safe_convert
from .types import Bin, Point

logger = logging.getLogger(__name__)

BinMethod = Literal['sturges', 'scott', 'freedman-diaconis', 'sqrt', 'auto']
BinSpec = Union[int, Sequence[float], None]

BIN_METHODS = ('sturges', 'scott', 'freedman-diaconis', 'sqrt', 'auto')
AUTO_THRESHOLD = 100


def _is_count(value) -> bool:
    if isinstance(value, bool):
        return False
    if hasattr(value, 'item') and callable(getattr(value, 'item')) and not hasattr(value, '__len__'):
        value = value.item()
    return isinstance(value, int)


def _width_rule(spread: float, width_factor: float, n: int, data_range: float) -> int:
    if spread <= 0 or data_range <= 0:
        return 1
    bin_width = width_factor * spread / n ** (1 / 3)
    return max(1, math.ceil(data_range / bin_width))


def select_bin_count(data, method: Union[BinMethod, int] = 'auto') -> int:
    """
    Choose a histogram bin count.

    Args:
        data: Array-like samples
        method: One of BIN_METHODS, or an explicit bin count used verbatim

    Returns:
        Bin count, at least 1

    Examples:
        select_bin_count(range(1, 11), 'sturges')  # 5
        select_bin_count(samples, 'freedman-diaconis')
        select_bin_count(samples, 12)              # 12
    """
    if _is_count(method):
        count = int(method)
        if count < 1:
            raise ValueError(f"Bin count must be >= 1, got {count}")
        return count
    if method not in BIN_METHODS:
        raise ValueError(f"Unknown bin method: {method}")

    values = safe_convert(data)
    n = len(values)
    if n == 0:
        return 1

    if method == 'auto':
        method = 'freedman-diaconis' if n > AUTO_THRESHOLD else 'sturges'

    if method == 'sturges':
        return math.ceil(math.log2(n) + 1)
    if method == 'sqrt':
        return math.ceil(math.sqrt(n))

    data_range = max(values) - min(values)
    if method == 'scott':
        return _width_rule(statistics.pstdev(values), 3.5, n, data_range)

    # freedman-diaconis: quartiles by position in the sorted sample, not interpolated
    ordered = sorted(values)
    iqr = ordered[math.floor(n * 0.75)] - ordered[math.floor(n * 0.25)]
    return _width_rule(iqr, 2.0, n, data_range)


def _edges_for(values: List[float], count: int) -> List[float]:
    lo, hi = min(values), max(values)
    if lo == hi:
        logger.debug("All samples equal %s, widening bin range by 0.5 each side", lo)
        lo, hi = lo - 0.5, hi + 0.5
    width = (hi - lo) / count
    edges = [lo + i * width for i in range(count)]
    edges.append(hi)
    return edges


def _validate_edges(edges: List[float]) -> None:
    if len(edges) < 2:
        raise ValueError("Bin edges must contain at least two values")
    for left, right in zip(edges, edges[1:]):
        if not left < right:
            raise ValueError(f"Bin edges must be strictly increasing, got {left} before {right}")


def build_bins(data, bins: BinSpec = None, cumulative: bool = False,
               normalize: bool = False, method: Union[BinMethod, int] = 'auto') -> List[Bin]:
    """
    Bin samples into a histogram.

    Args:
        data: Array-like samples
        bins: Bin count, explicit edge sequence, or None to pick with method
        cumulative: Running totals; density becomes the running fraction
        normalize: Counts divided by the total; density untouched
        method: Bin-count rule used when bins is None

    Returns:
        List of Bin, empty for empty data

    Bins built from a count split [min, max] evenly; a value's bin is
    floor((value - min) / width), clamped so the maximum lands in the last
    bin. With explicit edges a value falls in [e_i, e_i+1) (the last bin is
    closed) and values outside the edges are not counted.

    Examples:
        build_bins(samples)                    # auto bin count
        build_bins(samples, 20, cumulative=True)
        build_bins(samples, [0, 1, 2, 5, 10])  # custom edges
    """
    if cumulative and normalize:
        raise ValueError("cumulative and normalize are mutually exclusive")

    values = safe_convert(data)
    if not values:
        return []

    if bins is None or _is_count(bins):
        count = select_bin_count(values, method if bins is None else bins)
        edges = _edges_for(values, count)
        lo, width = edges[0], (edges[-1] - edges[0]) / count
        counts = [0] * count
        for value in values:
            index = math.floor((value - lo) / width)
            counts[min(max(index, 0), count - 1)] += 1
    else:
        edges = safe_convert(bins)
        _validate_edges(edges)
        count = len(edges) - 1
        counts = [0] * count
        for value in values:
            if value < edges[0] or value > edges[-1]:
                continue
            index = bisect.bisect_right(edges, value) - 1
            counts[min(index, count - 1)] += 1

    total = sum(counts)
    result = []
    running = 0
    for i in range(count):
        x0, x1 = edges[i], edges[i + 1]
        bin_count = counts[i]
        density = bin_count / ((x1 - x0) * total) if total else 0.0
        if cumulative:
            running += bin_count
            bin_count = running
            density = running / total if total else 0.0
        elif normalize:
            bin_count = bin_count / total if total else 0.0
        result.append(Bin(x0, x1, bin_count, density))
    return result


def bin_values(bins: Sequence[Bin], mode: str = 'count', total: Optional[float] = None) -> List[float]:
    """
    Bar heights for a histogram display mode.

    Args:
        bins: Bins from build_bins()
        mode: 'count', 'density', or 'frequency' (count / total)
        total: Sample total for 'frequency'; defaults to the sum of counts
    """
    if mode == 'count':
        return [b.count for b in bins]
    if mode == 'density':
        return [b.density for b in bins]
    if mode == 'frequency':
        if total is None:
            total = sum(b.count for b in bins)
        return [b.count / total if total else 0.0 for b in bins]
    raise ValueError(f"Unknown histogram mode: {mode}")


def normal_curve(data, num_points: int = 100) -> List[Point]:
    """
    Normal probability density fitted to the samples, for a density overlay.

    Sampled over mean +/- 4 sigma. Empty or constant data gives no curve.
    """
    if num_points < 2:
        raise ValueError(f"num_points must be >= 2, got {num_points}")
    values = safe_convert(data)
    if not values:
        return []
    mean = statistics.fmean(values)
    sigma = statistics.pstdev(values)
    if sigma == 0:
        return []

    start = mean - 4 * sigma
    step = 8 * sigma / (num_points - 1)
    norm = 1 / (sigma * math.sqrt(2 * math.pi))
    curve = []
    for i in range(num_points):
        x = start + i * step
        z = (x - mean) / sigma
        curve.append(Point(x, norm * math.exp(-0.5 * z * z)))
    return curve
