"""
ChartFrame: the coordinate mapping of one chart render, as an explicit value.

Built once per render from the data and a ChartConfig, then passed to
whatever needs to place marks (grid, axes, series, tooltips).
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .binning import build_bins
from .config import AxisConfig, ChartConfig
from .decimation import decimate
from .domain import compute_domain
from .formatting import format_tick
from .scales import Scale, build_scale
from .ticks import generate_ticks
from .types import Bin, Domain, Range

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChartFrame:
    """Scales plus the domains and pixel ranges they were built from."""
    x_scale: Scale
    y_scale: Scale
    x_domain: Domain
    y_domain: Domain
    x_range: Range
    y_range: Range
    x_axis: AxisConfig = AxisConfig()
    y_axis: AxisConfig = AxisConfig()

    def project(self, point) -> Tuple[float, float]:
        """Pixel position of a point."""
        return self.x_scale(point.x), self.y_scale(point.y)

    def project_all(self, points: Sequence) -> List[Tuple[float, float]]:
        return [self.project(p) for p in points]

    def invert(self, px: float, py: float) -> Tuple[float, float]:
        """Data coordinates under a pixel position."""
        return self.x_scale.invert(px), self.y_scale.invert(py)

    def _axis(self, axis: str):
        if axis == 'x':
            return self.x_axis, self.x_domain
        if axis == 'y':
            return self.y_axis, self.y_domain
        raise ValueError(f"Unknown axis: {axis}")

    def ticks(self, axis: str = 'x') -> List[float]:
        """Tick values of an axis; empty when the axis asks for no ticks."""
        config, domain = self._axis(axis)
        if config.ticks == 0:
            return []
        return generate_ticks(domain, config.ticks, config.scale)

    def tick_labels(self, axis: str = 'x') -> List[str]:
        config, _ = self._axis(axis)
        return [format_tick(t, config.formatter) for t in self.ticks(axis)]

    def contains(self, px: float, py: float) -> bool:
        """Whether a pixel position lies inside the plotting area."""
        x_lo, x_hi = sorted(self.x_range)
        y_lo, y_hi = sorted(self.y_range)
        return x_lo <= px <= x_hi and y_lo <= py <= y_hi


def _axis_domain(points: Sequence, accessor: str, axis: AxisConfig, default_padding: bool) -> Domain:
    if axis.domain != 'auto':
        lo, hi = axis.domain
        return (float(lo), float(hi))
    padding = default_padding if axis.padding is None else axis.padding
    return compute_domain(points, accessor, add_padding=padding)


def build_frame(points: Sequence, config: Optional[ChartConfig] = None) -> ChartFrame:
    """
    Build the frame of one render.

    Args:
        points: All points plotted in the chart (every series)
        config: Chart configuration; defaults to ChartConfig()

    Returns:
        ChartFrame with x mapped left to right and y bottom to top

    The x domain is unpadded by default (exact bounds, e.g. time axes) and
    the y domain padded; AxisConfig.padding and AxisConfig.domain override.
    """
    config = config or ChartConfig()
    margin = config.margin

    x_domain = _axis_domain(points, 'x', config.x_axis, default_padding=False)
    y_domain = _axis_domain(points, 'y', config.y_axis, default_padding=True)
    x_range = (float(margin.left), float(config.width - margin.right))
    y_range = (float(config.height - margin.bottom), float(margin.top))

    logger.debug("Frame x %s -> %s, y %s -> %s", x_domain, x_range, y_domain, y_range)
    return ChartFrame(
        x_scale=build_scale(x_domain, x_range, config.x_axis.scale),
        y_scale=build_scale(y_domain, y_range, config.y_axis.scale),
        x_domain=x_domain,
        y_domain=y_domain,
        x_range=x_range,
        y_range=y_range,
        x_axis=config.x_axis,
        y_axis=config.y_axis,
    )


def prepare_series(points: Sequence, config: Optional[ChartConfig] = None) -> Sequence:
    """Apply the configured render budget (max_points/decimation) to a series."""
    config = config or ChartConfig()
    if config.max_points is None:
        return points
    return decimate(points, config.max_points, config.decimation)


def prepare_bins(data, config: Optional[ChartConfig] = None, cumulative: bool = False,
                 normalize: bool = False) -> List[Bin]:
    """Histogram bins of data using the configured bin_method (a rule name or a count)."""
    config = config or ChartConfig()
    return build_bins(data, cumulative=cumulative, normalize=normalize, method=config.bin_method)
