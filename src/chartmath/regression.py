"""
Ordinary least-squares trendlines.
"""

from typing import List, Sequence

from .types import Domain, Point, Trendline


def linear_regression(points: Sequence) -> Trendline:
    """
    Fit y = slope * x + intercept by ordinary least squares.

    Args:
        points: At least two points with x and y attributes, not all at the same x

    Returns:
        Trendline with slope, intercept and coefficient of determination r2
        (1.0 when every y is equal)

    Example:
        linear_regression([Point(0, 0), Point(1, 2), Point(2, 4)])
        # Trendline(slope=2.0, intercept=0.0, r2=1.0)
    """
    n = len(points)
    if n < 2:
        raise ValueError(f"Linear regression needs at least 2 points, got {n}")
    first_x = points[0].x
    if all(p.x == first_x for p in points):
        raise ValueError("Linear regression is undefined when all x values are equal")

    # centred sums: n*sum(x^2) - sum(x)^2 cancels badly for clustered x
    x_mean = sum(p.x for p in points) / n
    y_mean = sum(p.y for p in points) / n
    sxx = sum((p.x - x_mean) ** 2 for p in points)
    sxy = sum((p.x - x_mean) * (p.y - y_mean) for p in points)

    slope = sxy / sxx
    intercept = y_mean - slope * x_mean

    ss_total = sum((p.y - y_mean) ** 2 for p in points)
    ss_residual = sum((p.y - (slope * p.x + intercept)) ** 2 for p in points)
    r2 = 1.0 if ss_total == 0 else 1 - ss_residual / ss_total

    return Trendline(slope, intercept, r2)


def predict(trendline: Trendline, x: float) -> float:
    return trendline.slope * x + trendline.intercept


def trendline_points(trendline: Trendline, x_domain: Domain) -> List[Point]:
    """End points of the trendline across an x domain, ready to be scaled."""
    x0, x1 = x_domain
    return [Point(x0, predict(trendline, x0)), Point(x1, predict(trendline, x1))]
