"""
Scientific colormaps for heatmaps, colorbars and density colouring.

Palettes are data: ordered (stop, rgb) control points with channels in
[0, 1]. The perceptually uniform family (viridis, plasma, inferno, magma,
cividis) follows van der Walt & Smith (2015); the diverging coolwarm follows
Moreland (2009).

Usage:
    map_value_to_color(42, 0, 100)              # '#21908c'-ish, viridis
    map_value_to_color(0.3, -1, 1, 'coolwarm')
    generate_gradient_css('plasma', 'to bottom')
    text_color_for('#21908c')                  # '#000000' or '#ffffff'
    get_colormap('viridis').show()             # Jupyter swatch
"""

import bisect
import logging
from dataclasses import dataclass
from typing import Dict, List, Literal, Sequence, Tuple, Union

from .types import RGB

logger = logging.getLogger(__name__)

# Optional imports for Jupyter notebook support
try:
    import ipywidgets as widgets
    from IPython.display import display
    JUPYTER_AVAILABLE = True
except ImportError:
    widgets = None
    display = None
    JUPYTER_AVAILABLE = False

UseCase = Literal['sequential', 'diverging', 'cyclic', 'qualitative']
Color = Union[str, Tuple[int, int, int]]

DEFAULT_COLORMAP = 'viridis'
LUMINANCE_MIDPOINT = 128


@dataclass(frozen=True)
class Colormap:
    """
    Named, ordered list of (stop, rgb) control points.

    Stops are monotonic in [0, 1]; rgb channels are floats in [0, 1].
    Calling the colormap with t in [0, 1] returns a hex colour.
    """
    name: str
    stops: Tuple[Tuple[float, RGB], ...]
    perceptually_uniform: bool = True
    colorblind_friendly: bool = True
    use_case: UseCase = 'sequential'

    def __post_init__(self):
        if not self.stops:
            raise ValueError(f"Colormap {self.name!r} needs at least one stop")
        positions = [p for p, _ in self.stops]
        if positions != sorted(positions):
            raise ValueError(f"Colormap {self.name!r} stops must be increasing")

    @property
    def positions(self) -> List[float]:
        return [p for p, _ in self.stops]

    @property
    def colors(self) -> List[str]:
        """Control-point colours as hex strings, in stop order."""
        return [rgb_to_hex(rgb) for _, rgb in self.stops]

    def rgb_at(self, t: float) -> RGB:
        """Interpolated rgb (0-1 channels) at t, clamped into [0, 1]."""
        t = max(0.0, min(1.0, t))
        positions = self.positions
        if len(self.stops) == 1 or t <= positions[0]:
            return self.stops[0][1]
        if t >= positions[-1]:
            return self.stops[-1][1]

        i = min(bisect.bisect_right(positions, t) - 1, len(positions) - 2)
        (p0, c0), (p1, c1) = self.stops[i], self.stops[i + 1]
        fraction = (t - p0) / (p1 - p0) if p1 > p0 else 0.0
        return interpolate_rgb(c0, c1, fraction)

    def __call__(self, t: float) -> str:
        return rgb_to_hex(self.rgb_at(t))

    def gradient_css(self, direction: str = "to right") -> str:
        stops = [f"{rgb_to_hex(rgb)} {_percent(p)}%" for p, rgb in self.stops]
        return f"linear-gradient({direction}, {', '.join(stops)})"

    def _repr_html_(self):
        """Enable direct display of a swatch in Jupyter notebooks via display()."""
        return (f'<div title="{self.name}" style="width: 256px; height: 24px; '
                f'border: 1px solid #ddd; background: {self.gradient_css()};"></div>')

    def show(self, width: int = 256, height: int = 24):
        """
        Display the colormap as a gradient swatch using ipywidgets HTML (if available).

        Returns:
            ipywidgets.HTML widget if Jupyter is available, otherwise None
        """
        if not JUPYTER_AVAILABLE:
            logger.warning("Jupyter not available, cannot display colormap %r", self.name)
            return None
        html_content = f"""
        <div style="width: {width}px; height: {height}px; margin: 10px 0;
                    border: 1px solid #ddd; background: {self.gradient_css()};">
        </div>
        """
        widget = widgets.HTML(value=html_content)
        display(widget)
        return widget


def _percent(position: float) -> str:
    value = position * 100
    return str(int(value)) if value == int(value) else f"{value:g}"


def _even(colors: Sequence[RGB]) -> Tuple[Tuple[float, RGB], ...]:
    last = len(colors) - 1
    if last == 0:
        return ((0.0, tuple(colors[0])),)
    return tuple((i / last, tuple(c)) for i, c in enumerate(colors))


def interpolate_rgb(c1: RGB, c2: RGB, t: float) -> RGB:
    """Linear per-channel interpolation between two rgb triples."""
    return (
        c1[0] + (c2[0] - c1[0]) * t,
        c1[1] + (c2[1] - c1[1]) * t,
        c1[2] + (c2[2] - c1[2]) * t,
    )


def rgb_to_hex(rgb: RGB) -> str:
    """Convert rgb with [0, 1] channels to '#rrggbb' (halves round up)."""
    return '#' + ''.join(f"{min(255, max(0, int(c * 255 + 0.5))):02x}" for c in rgb)


def hex_to_rgb(color: str) -> Tuple[int, int, int]:
    """Parse '#rrggbb' or '#rgb' into 0-255 channels."""
    value = color.lstrip('#')
    if len(value) == 3:
        value = ''.join(ch * 2 for ch in value)
    if len(value) != 6:
        raise ValueError(f"Invalid hex color: {color!r}")
    try:
        return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)
    except ValueError:
        raise ValueError(f"Invalid hex color: {color!r}")


VIRIDIS = [
    (0.267004, 0.004874, 0.329415),
    (0.282623, 0.140926, 0.457517),
    (0.253935, 0.265254, 0.529983),
    (0.206756, 0.371758, 0.553117),
    (0.163625, 0.471133, 0.558148),
    (0.127568, 0.566949, 0.550556),
    (0.134692, 0.658636, 0.517649),
    (0.266941, 0.748751, 0.440573),
    (0.477504, 0.821444, 0.318195),
    (0.741388, 0.873449, 0.149561),
    (0.993248, 0.906157, 0.143936),
]

PLASMA = [
    (0.050383, 0.029803, 0.527975),
    (0.285282, 0.010800, 0.611852),
    (0.478334, 0.009384, 0.651908),
    (0.613995, 0.069008, 0.645839),
    (0.738051, 0.130588, 0.618237),
    (0.848955, 0.212395, 0.567237),
    (0.933254, 0.326841, 0.491861),
    (0.982854, 0.467370, 0.400107),
    (0.994847, 0.621543, 0.312756),
    (0.968262, 0.784841, 0.281413),
    (0.940015, 0.975158, 0.131326),
]

INFERNO = [
    (0.001462, 0.000466, 0.013866),
    (0.100930, 0.050157, 0.125209),
    (0.258234, 0.038571, 0.229339),
    (0.421970, 0.033480, 0.263453),
    (0.582773, 0.093867, 0.227140),
    (0.730419, 0.198367, 0.158595),
    (0.857015, 0.331663, 0.116655),
    (0.951541, 0.489922, 0.133806),
    (0.988362, 0.666213, 0.240273),
    (0.973416, 0.846245, 0.428334),
    (0.988362, 0.998364, 0.644924),
]

MAGMA = [
    (0.001462, 0.000466, 0.013866),
    (0.075504, 0.038006, 0.135932),
    (0.195683, 0.050717, 0.287462),
    (0.347003, 0.067296, 0.404944),
    (0.520222, 0.121570, 0.443329),
    (0.683546, 0.216906, 0.436418),
    (0.833067, 0.339767, 0.398290),
    (0.947897, 0.494024, 0.374299),
    (0.997879, 0.674132, 0.423429),
    (0.996096, 0.856179, 0.570363),
    (0.987053, 0.991438, 0.749504),
]

CIVIDIS = [
    (0.000000, 0.135112, 0.304751),
    (0.141093, 0.202117, 0.370838),
    (0.283072, 0.265920, 0.415701),
    (0.433029, 0.328834, 0.443611),
    (0.586699, 0.391834, 0.460157),
    (0.740123, 0.456485, 0.470779),
    (0.883875, 0.525014, 0.486080),
    (0.983871, 0.603091, 0.523689),
    (0.998364, 0.703545, 0.595561),
    (0.999877, 0.825593, 0.703479),
    (0.999877, 0.983871, 0.843848),
]

TURBO = [
    (0.18995, 0.07176, 0.23217),
    (0.13840, 0.25264, 0.64148),
    (0.13658, 0.42883, 0.85676),
    (0.23127, 0.57708, 0.95328),
    (0.43139, 0.70044, 0.98359),
    (0.64922, 0.79700, 0.92960),
    (0.84504, 0.85959, 0.81020),
    (0.97105, 0.87473, 0.63803),
    (0.99324, 0.80643, 0.40504),
    (0.92557, 0.67031, 0.20084),
    (0.73340, 0.49450, 0.05939),
]

JET = [
    (0.0, 0.0, 0.5),
    (0.0, 0.0, 1.0),
    (0.0, 0.5, 1.0),
    (0.0, 1.0, 1.0),
    (0.5, 1.0, 0.5),
    (1.0, 1.0, 0.0),
    (1.0, 0.5, 0.0),
    (1.0, 0.0, 0.0),
    (0.5, 0.0, 0.0),
]

THERMAL = [
    (0.0, 0.0, 0.0),
    (0.3, 0.0, 0.5),
    (0.6, 0.0, 0.8),
    (0.9, 0.3, 0.9),
    (1.0, 0.6, 0.8),
    (1.0, 0.9, 0.6),
    (1.0, 1.0, 1.0),
]

COOLWARM = [
    (0.230, 0.299, 0.754),
    (0.483, 0.565, 0.863),
    (0.706, 0.745, 0.902),
    (0.865, 0.865, 0.865),
    (0.902, 0.722, 0.651),
    (0.863, 0.502, 0.396),
    (0.706, 0.016, 0.150),
]

GREENS = [
    (0.968627, 0.988235, 0.960784),
    (0.898039, 0.960784, 0.878431),
    (0.780392, 0.913725, 0.752941),
    (0.631373, 0.850980, 0.607843),
    (0.454902, 0.768627, 0.462745),
    (0.254902, 0.670588, 0.364706),
    (0.137255, 0.545098, 0.270588),
    (0.000000, 0.427451, 0.172549),
    (0.000000, 0.266667, 0.105882),
]

BLUES = [
    (0.968627, 0.984314, 1.000000),
    (0.870588, 0.921569, 0.968627),
    (0.776471, 0.858824, 0.937255),
    (0.619608, 0.792157, 0.882353),
    (0.419608, 0.682353, 0.839216),
    (0.258824, 0.572549, 0.776471),
    (0.129412, 0.443137, 0.709804),
    (0.031373, 0.317647, 0.611765),
    (0.031373, 0.188235, 0.419608),
]

REDS = [
    (1.000000, 0.960784, 0.941176),
    (0.996078, 0.878431, 0.823529),
    (0.988235, 0.733333, 0.631373),
    (0.988235, 0.572549, 0.447059),
    (0.984314, 0.415686, 0.290196),
    (0.937255, 0.231373, 0.172549),
    (0.796078, 0.094118, 0.113725),
    (0.647059, 0.058824, 0.082353),
    (0.403922, 0.000000, 0.050980),
]

GRAYS = [
    (1.0, 1.0, 1.0),
    (0.875, 0.875, 0.875),
    (0.75, 0.75, 0.75),
    (0.625, 0.625, 0.625),
    (0.5, 0.5, 0.5),
    (0.375, 0.375, 0.375),
    (0.25, 0.25, 0.25),
    (0.125, 0.125, 0.125),
    (0.0, 0.0, 0.0),
]

COLORMAPS: Dict[str, Colormap] = {
    'viridis': Colormap('viridis', _even(VIRIDIS)),
    'plasma': Colormap('plasma', _even(PLASMA)),
    'inferno': Colormap('inferno', _even(INFERNO)),
    'magma': Colormap('magma', _even(MAGMA)),
    'cividis': Colormap('cividis', _even(CIVIDIS)),
    'turbo': Colormap('turbo', _even(TURBO), colorblind_friendly=False),
    'jet': Colormap('jet', _even(JET), perceptually_uniform=False, colorblind_friendly=False),
    'thermal': Colormap('thermal', _even(THERMAL)),
    'coolwarm': Colormap('coolwarm', _even(COOLWARM), use_case='diverging'),
    'greens': Colormap('greens', _even(GREENS)),
    'blues': Colormap('blues', _even(BLUES)),
    'reds': Colormap('reds', _even(REDS)),
    'grays': Colormap('grays', _even(GRAYS)),
    # spectral, rdbu and rdylgn reuse the turbo and coolwarm control points
    'spectral': Colormap('spectral', _even(TURBO), colorblind_friendly=False),
    'rdbu': Colormap('rdbu', _even(COOLWARM), use_case='diverging'),
    'rdylgn': Colormap('rdylgn', _even(COOLWARM), use_case='diverging'),
}

CATEGORICAL_BASE = [
    '#3b82f6',  # blue
    '#ef4444',  # red
    '#10b981',  # green
    '#f59e0b',  # amber
    '#8b5cf6',  # purple
    '#ec4899',  # pink
    '#14b8a6',  # teal
    '#f97316',  # orange
    '#6366f1',  # indigo
    '#84cc16',  # lime
]

NAMED_COLORS = {
    'white': '#ffffff',
    'black': '#000000',
    'red': '#ef4444',
    'blue': '#3b82f6',
    'green': '#10b981',
    'orange': '#f97316',
    'purple': '#8b5cf6',
    'yellow': '#f59e0b',
}


def get_colormap(name: Union[str, Colormap] = DEFAULT_COLORMAP) -> Colormap:
    """Look up a registered colormap by name (a Colormap passes through)."""
    if isinstance(name, Colormap):
        return name
    try:
        return COLORMAPS[name]
    except KeyError:
        raise ValueError(f"Unknown colormap: {name}. Available: {', '.join(COLORMAPS)}")


def _color_to_rgb(color: Color) -> RGB:
    if isinstance(color, str):
        color = hex_to_rgb(NAMED_COLORS.get(color.lower(), color))
    r, g, b = color
    return (r / 255, g / 255, b / 255)


def colormap_from_colors(colors: Sequence[Color], name: str = 'custom',
                         use_case: UseCase = 'sequential') -> Colormap:
    """
    Build an evenly spaced colormap from colours.

    Args:
        colors: Hex strings, named colours ('white', 'red', ...) or 0-255 rgb tuples
        name: Name carried by the colormap (not registered)

    Examples:
        colormap_from_colors(['white', 'red'])
        colormap_from_colors(['#3b82f6', 'white', '#ef4444'], use_case='diverging')
    """
    if not colors:
        raise ValueError("Colormap needs at least one color")
    return Colormap(name, _even([_color_to_rgb(c) for c in colors]), use_case=use_case)


def normalize_value(value: float, vmin: float, vmax: float) -> float:
    """(value - vmin) / (vmax - vmin) clamped to [0, 1]; 0 for a collapsed domain."""
    if vmax == vmin:
        return 0.0
    return max(0.0, min(1.0, (value - vmin) / (vmax - vmin)))


def map_normalized(t: float, colormap: Union[str, Colormap] = DEFAULT_COLORMAP) -> str:
    """Hex colour for an already normalised t in [0, 1]."""
    return get_colormap(colormap)(t)


def map_value_to_color(value: float, vmin: float, vmax: float,
                       colormap: Union[str, Colormap] = DEFAULT_COLORMAP) -> str:
    """
    Hex colour for a value within [vmin, vmax].

    Values outside the domain clamp to the end colours; a collapsed domain
    (vmin == vmax) maps everything to the first colour.
    """
    return get_colormap(colormap)(normalize_value(value, vmin, vmax))


def generate_gradient_css(colormap: Union[str, Colormap] = DEFAULT_COLORMAP,
                          direction: str = "to right") -> str:
    """
    CSS linear-gradient string listing the control points in order.

    Example:
        generate_gradient_css('grays')
        # 'linear-gradient(to right, #ffffff 0%, #dfdfdf 12.5%, ..., #000000 100%)'
    """
    return get_colormap(colormap).gradient_css(direction)


def luminance(color: Color) -> float:
    """Perceived brightness 0.299r + 0.587g + 0.114b on 0-255 channels."""
    r, g, b = hex_to_rgb(NAMED_COLORS.get(color.lower(), color)) if isinstance(color, str) else color
    return 0.299 * r + 0.587 * g + 0.114 * b


def text_color_for(color: Color) -> str:
    """Legible overlay text colour: black on light backgrounds, white on dark."""
    return '#000000' if luminance(color) > LUMINANCE_MIDPOINT else '#ffffff'


def categorical_palette(count: int) -> List[str]:
    """Distinct colours for count categories; cycles once the base set runs out."""
    if count < 0:
        raise ValueError(f"Palette size must be >= 0, got {count}")
    return [CATEGORICAL_BASE[i % len(CATEGORICAL_BASE)] for i in range(count)]


def density_color(nearby: int, max_density: int = 20) -> str:
    """Blue (sparse) to red (dense) 'rgb(r, g, b)' for a neighbour count."""
    ratio = min(nearby / max_density, 1.0) if max_density > 0 else 1.0
    r = int(ratio * 239 + (1 - ratio) * 59)
    g = int((1 - ratio) * 130 + ratio * 68)
    b = int((1 - ratio) * 246 + ratio * 68)
    return f"rgb({r}, {g}, {b})"


def neighbor_counts(points: Sequence, x_scale, y_scale, radius: float = 30.0) -> List[int]:
    """For each point, how many other points lie within radius pixels."""
    projected = [(x_scale(p.x), y_scale(p.y)) for p in points]
    radius_sq = radius * radius
    counts = []
    for i, (px, py) in enumerate(projected):
        nearby = 0
        for j, (qx, qy) in enumerate(projected):
            if i != j and (px - qx) ** 2 + (py - qy) ** 2 < radius_sq:
                nearby += 1
        counts.append(nearby)
    return counts
