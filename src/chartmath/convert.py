"""
Input normalisation for chart computations.
Accepts plain Python sequences as well as numpy arrays and scalars without
importing numpy: anything exposing a callable ``item()`` is unwrapped.
"""

from typing import Any, Callable, Iterable, List, Optional, Sequence, Union

from .types import HeatmapCell, Point, PolarPoint

Accessor = Union[str, Callable[[Any], float]]


def safe_float(val: Any) -> float:
    """Convert a Python or numpy scalar to float, booleans become 0/1."""
    if hasattr(val, 'item') and callable(getattr(val, 'item')):
        val = val.item()
    if isinstance(val, bool):
        return float(int(val))
    try:
        return float(val)
    except (TypeError, ValueError):
        raise ValueError(f"Expected a numeric value, got {val!r}")


def safe_convert(arr: Iterable[Any]) -> List[float]:
    """Convert an array-like of numbers to a list of floats."""
    return [safe_float(val) for val in arr]


def safe_convert_matrix(matrix: Iterable[Iterable[Any]]) -> List[List[float]]:
    """
    Convert a 2D array-like to a rectangular list of float rows.

    Raises:
        ValueError: If rows have different lengths
    """
    result = [safe_convert(row) for row in matrix]
    if result:
        cols = len(result[0])
        for i, row in enumerate(result):
            if len(row) != cols:
                raise ValueError(f"Matrix must be rectangular: row {i} has {len(row)} columns, expected {cols}")
    return result


def make_accessor(accessor: Accessor) -> Callable[[Any], float]:
    """Turn an attribute name ('x', 'y', 'radius', ...) or a callable into a callable."""
    if callable(accessor):
        return accessor
    if isinstance(accessor, str):
        return lambda p: getattr(p, accessor)
    raise ValueError(f"Accessor must be a callable or attribute name, got {accessor!r}")


def to_points(x, y=None) -> List[Point]:
    """
    Build Points from x/y array-likes.

    Args:
        x: Array-like x values, or the y values when y is None
           (x is then generated as 0..n-1)
        y: Array-like y values (optional)

    Returns:
        List of Point

    Examples:
        to_points([0, 1, 2], [3, 4, 5])
        to_points([3, 4, 5])  # x = [0, 1, 2]
    """
    if y is None:
        y_values = safe_convert(x)
        x_values = [float(i) for i in range(len(y_values))]
    else:
        x_values = safe_convert(x)
        y_values = safe_convert(y)
        if len(x_values) != len(y_values):
            raise ValueError("x and y arrays must have the same length")
    return [Point(xv, yv) for xv, yv in zip(x_values, y_values)]


def to_polar_points(angles, radii) -> List[PolarPoint]:
    """Build PolarPoints from angle/radius array-likes."""
    angle_values = safe_convert(angles)
    radius_values = safe_convert(radii)
    if len(angle_values) != len(radius_values):
        raise ValueError("Angle and radius arrays must have the same length")
    return [PolarPoint(a, r) for a, r in zip(angle_values, radius_values)]


def matrix_to_cells(matrix, annotations: Optional[Sequence[Sequence[Any]]] = None) -> List[HeatmapCell]:
    """
    Flatten a 2D matrix into heatmap cells, row by row.

    Args:
        matrix: 2D array-like of values
        annotations: Optional 2D array of text, same shape as matrix

    Returns:
        List of HeatmapCell with x = column index, y = row index
    """
    clean_matrix = safe_convert_matrix(matrix)
    rows = len(clean_matrix)
    cols = len(clean_matrix[0]) if rows else 0

    clean_annotations = None
    if annotations is not None:
        clean_annotations = [
            [str(val.item()) if hasattr(val, 'item') and callable(getattr(val, 'item')) else str(val) for val in row]
            for row in annotations
        ]
        if len(clean_annotations) != rows:
            raise ValueError(f"Annotations matrix must have same dimensions as data matrix: got {len(clean_annotations)} rows, expected {rows}")
        for i, row in enumerate(clean_annotations):
            if len(row) != cols:
                raise ValueError(f"Annotations matrix must have same dimensions as data matrix: row {i} has {len(row)} columns, expected {cols}")

    cells = []
    for y in range(rows):
        for x in range(cols):
            text = clean_annotations[y][x] if clean_annotations is not None else None
            cells.append(HeatmapCell(x, y, clean_matrix[y][x], text))
    return cells


def grid_shape(cells: Sequence[HeatmapCell]):
    """Return (width, height) of the grid spanned by the cells."""
    if not cells:
        return 0, 0
    return max(c.x for c in cells) + 1, max(c.y for c in cells) + 1
