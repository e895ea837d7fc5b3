"""
Tick values for axis labelling.
"""

import math
from typing import List

from .domain import nice_number
from .scales import LOG_FLOOR, SCALE_TYPES
from .types import Domain


def generate_ticks(domain: Domain, count: int = 5, scale_type: str = 'linear',
                   log_floor: float = LOG_FLOOR) -> List[float]:
    """
    Evenly spaced ticks from domain[0] to domain[1], both included.

    Args:
        domain: (min, max) tick extent
        count: Number of ticks, at least 2
        scale_type: 'linear', or 'log' for geometric spacing
        log_floor: Substitute for non-positive endpoints under 'log'

    Returns:
        List of count tick values

    Examples:
        generate_ticks((0, 100), 5)         # [0, 25, 50, 75, 100]
        generate_ticks((1, 1000), 4, 'log') # [1, 10, 100, 1000]
    """
    if count < 2:
        raise ValueError(f"Tick count must be >= 2, got {count}")
    if scale_type not in SCALE_TYPES:
        raise ValueError(f"Unknown scale type: {scale_type}")

    lo, hi = domain
    if scale_type == 'log':
        log_lo = math.log10(lo if lo > 0 else log_floor)
        log_hi = math.log10(hi if hi > 0 else log_floor)
        step = (log_hi - log_lo) / (count - 1)
        return [10 ** (log_lo + i * step) for i in range(count)]

    step = (hi - lo) / (count - 1)
    return [lo + i * step for i in range(count)]


def nice_ticks(domain: Domain, count: int = 5) -> List[float]:
    """
    Ticks on a round 1/2/5 x 10^k step covering the domain.

    The first tick is at or below domain[0], the last at or above domain[1].
    A collapsed domain yields a single tick.
    """
    if count < 2:
        raise ValueError(f"Tick count must be >= 2, got {count}")
    lo, hi = domain
    if lo == hi:
        return [lo]

    step = nice_number((hi - lo) / (count - 1), round_result=False)
    first = math.floor(lo / step)
    last = math.ceil(hi / step)
    ticks = []
    for k in range(first, last + 1):
        tick = k * step
        # snap float drift such as -4.4e-16 to zero
        if abs(tick) < step * 1e-9:
            tick = 0.0
        ticks.append(tick)
    return ticks


def angular_ticks(count: int = 12) -> List[float]:
    """Angles in degrees splitting the full circle into count sectors."""
    if count < 1:
        raise ValueError(f"Angular tick count must be >= 1, got {count}")
    return [i * 360 / count for i in range(count)]
