"""
Plain value types shared by every chart computation.
All of them are frozen: produced once, never mutated.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

Domain = Tuple[float, float]
Range = Tuple[float, float]
RGB = Tuple[float, float, float]


@dataclass(frozen=True)
class Point:
    """A single (x, y) sample."""
    x: float
    y: float


@dataclass(frozen=True)
class PolarPoint:
    """Angle/radius sample. The angle unit is chosen by the caller."""
    angle: float
    radius: float


@dataclass(frozen=True)
class Bin:
    """Histogram bin covering [x0, x1) (the last bin of a histogram is closed)."""
    x0: float
    x1: float
    count: float
    density: float

    @property
    def width(self) -> float:
        return self.x1 - self.x0

    @property
    def center(self) -> float:
        return (self.x0 + self.x1) / 2


@dataclass(frozen=True)
class Trendline:
    """Fitted line y = slope * x + intercept."""
    slope: float
    intercept: float
    r2: float = 1.0


@dataclass(frozen=True)
class HeatmapCell:
    """Heatmap cell in grid coordinates with optional annotation text."""
    x: int
    y: int
    value: float
    text: Optional[str] = None
