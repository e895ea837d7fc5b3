"""
Polar and hexagonal-grid coordinate transforms.

Angles are measured in degrees, counter-clockwise from the positive x axis;
pixel y grows downwards, hence the sign flip on the y component.
"""

import math
from dataclasses import dataclass
from typing import List, Literal, Sequence, Tuple

from .types import PolarPoint

Direction = Literal['clockwise', 'counterclockwise']
AngleUnit = Literal['degrees', 'radians']

DIRECTIONS = ('clockwise', 'counterclockwise')
SQRT3 = math.sqrt(3)


def to_radians(degrees: float) -> float:
    return degrees * math.pi / 180


def to_degrees(angle: float, unit: AngleUnit = 'degrees') -> float:
    """Express an angle given in unit as degrees."""
    if unit == 'radians':
        return angle * 180 / math.pi
    if unit == 'degrees':
        return angle
    raise ValueError(f"Unknown angle unit: {unit}")


def polar_to_cartesian(angle: float, radius: float, center_x: float, center_y: float,
                       start_angle: float = 90.0, direction: Direction = 'clockwise') -> Tuple[float, float]:
    """
    Convert a polar (angle, radius) pair to pixel coordinates.

    Args:
        angle: Angle in degrees, measured from start_angle
        radius: Distance from the center in pixels
        center_x, center_y: Pixel position of the pole
        start_angle: Screen angle of angle 0 (90 = straight up)
        direction: Winding of increasing angles

    Returns:
        (x, y) pixel tuple

    Example:
        polar_to_cartesian(0, 10, 50, 50)  # (50.0, 40.0)
    """
    if direction == 'clockwise':
        adjusted = start_angle - angle
    elif direction == 'counterclockwise':
        adjusted = start_angle + angle
    else:
        raise ValueError(f"Unknown direction: {direction}")
    rad = to_radians(adjusted)
    return center_x + radius * math.cos(rad), center_y - radius * math.sin(rad)


@dataclass(frozen=True)
class PolarFrame:
    """Fixed polar layout: pole position, angle origin, winding and angle unit."""
    center_x: float
    center_y: float
    start_angle: float = 90.0
    direction: Direction = 'clockwise'
    angle_unit: AngleUnit = 'degrees'

    def __post_init__(self):
        if self.direction not in DIRECTIONS:
            raise ValueError(f"Unknown direction: {self.direction}")
        if self.angle_unit not in ('degrees', 'radians'):
            raise ValueError(f"Unknown angle unit: {self.angle_unit}")

    def to_cartesian(self, angle: float, radius: float) -> Tuple[float, float]:
        return polar_to_cartesian(to_degrees(angle, self.angle_unit), radius,
                                  self.center_x, self.center_y, self.start_angle, self.direction)

    def project(self, points: Sequence[PolarPoint], radius_scale=None) -> List[Tuple[float, float]]:
        """Pixel positions of polar points, radii passed through radius_scale if given."""
        result = []
        for p in points:
            r = radius_scale(p.radius) if radius_scale is not None else p.radius
            result.append(self.to_cartesian(p.angle, r))
        return result


def hex_position(col: int, row: int, radius: float) -> Tuple[float, float]:
    """
    Center of a flat-top hexagon cell in an offset-column honeycomb.

    Columns are 1.5 * radius apart, rows sqrt(3) * radius apart, and odd
    columns are shifted down by half a row.
    """
    hex_height = radius * SQRT3
    cx = col * radius * 1.5
    cy = row * hex_height + (hex_height / 2 if col % 2 == 1 else 0.0)
    return cx, cy


def hexagon_vertices(cx: float, cy: float, size: float, gap: float = 0.0) -> List[Tuple[float, float]]:
    """Six corners of a flat-top hexagon, starting at 0 degrees; gap shrinks it by a fraction."""
    radius = size * (1 - gap)
    vertices = []
    for i in range(6):
        angle = math.pi / 3 * i
        vertices.append((cx + radius * math.cos(angle), cy + radius * math.sin(angle)))
    return vertices
