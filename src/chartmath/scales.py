"""
Scales map a data value onto a pixel coordinate.

A scale is a frozen, callable value: it closes over (domain, range, type)
and holds no other state, so one instance can be shared freely.
"""

import logging
import math
from dataclasses import dataclass
from typing import Literal

from .types import Domain, Range

logger = logging.getLogger(__name__)

ScaleType = Literal['linear', 'log']

SCALE_TYPES = ('linear', 'log')
LOG_FLOOR = 1e-4


def _log10(value: float, floor: float) -> float:
    return math.log10(value if value > 0 else floor)


@dataclass(frozen=True)
class Scale:
    """Callable domain -> range mapping. Build with build_scale()."""
    domain: Domain
    range: Range
    type: ScaleType = 'linear'
    log_floor: float = LOG_FLOOR

    def _bounds(self):
        d0, d1 = self.domain
        if self.type == 'log':
            return _log10(d0, self.log_floor), _log10(d1, self.log_floor)
        return d0, d1

    @property
    def degenerate(self) -> bool:
        lo, hi = self._bounds()
        return lo == hi

    def __call__(self, value: float) -> float:
        r0, r1 = self.range
        lo, hi = self._bounds()
        if lo == hi:
            return (r0 + r1) / 2
        v = _log10(value, self.log_floor) if self.type == 'log' else value
        return r0 + ((r1 - r0) / (hi - lo)) * (v - lo)

    def invert(self, pixel: float) -> float:
        """Map a range coordinate back to a domain value."""
        r0, r1 = self.range
        lo, hi = self._bounds()
        if lo == hi or r0 == r1:
            return self.domain[0]
        v = lo + ((hi - lo) / (r1 - r0)) * (pixel - r0)
        return 10 ** v if self.type == 'log' else v


def build_scale(domain: Domain, range: Range, type: ScaleType = 'linear',
                log_floor: float = LOG_FLOOR) -> Scale:
    """
    Build a linear or logarithmic scale.

    Args:
        domain: (d0, d1) data extent
        range: (r0, r1) output extent; may be inverted (r0 > r1) for Y axes
        type: 'linear' or 'log'
        log_floor: Substitute for non-positive values under a log scale,
                   used for both the domain endpoints and evaluated values

    Returns:
        Scale callable

    A degenerate domain (d0 == d1, or equal after the log floor) maps every
    value to the midpoint of the range.

    Examples:
        x = build_scale((0, 100), (60, 300))
        y = build_scale((1, 1e4), (190, 20), 'log')
        x(50)  # 180.0
    """
    if type not in SCALE_TYPES:
        raise ValueError(f"Unknown scale type: {type}")
    if log_floor <= 0:
        raise ValueError(f"log_floor must be positive, got {log_floor}")

    scale = Scale((float(domain[0]), float(domain[1])), (float(range[0]), float(range[1])), type, log_floor)
    if scale.degenerate:
        logger.debug("Degenerate %s domain %s, mapping to range midpoint", type, domain)
    return scale


def invert_scale(scale: Scale):
    """Return the inverse (range -> domain) of a scale as a plain function."""
    return scale.invert
