"""
Chart configuration shared by every chart type.
"""

from dataclasses import MISSING, dataclass, field, fields
from typing import Any, Callable, Dict, Optional, Tuple, Union

from .binning import BIN_METHODS
from .colormaps import get_colormap
from .decimation import STRATEGIES
from .scales import SCALE_TYPES


@dataclass(frozen=True)
class Margin:
    """Pixel margins around the plotting area."""
    top: float = 20
    right: float = 20
    bottom: float = 50
    left: float = 60


@dataclass(frozen=True)
class AxisConfig:
    """
    One axis: label, domain override, scale type and tick count.

    domain is 'auto' (derived from data) or an explicit (min, max).
    padding overrides the axis default (x unpadded, y padded) when set.
    """
    label: Optional[str] = None
    domain: Union[str, Tuple[float, float]] = 'auto'
    scale: str = 'linear'
    ticks: int = 5
    padding: Optional[bool] = None
    formatter: Optional[Callable[[float], str]] = None

    def __post_init__(self):
        if self.scale not in SCALE_TYPES:
            raise ValueError(f"Unknown scale type: {self.scale}")
        if self.ticks != 0 and self.ticks < 2:
            raise ValueError(f"Axis ticks must be 0 (no ticks) or >= 2, got {self.ticks}")
        if isinstance(self.domain, str):
            if self.domain != 'auto':
                raise ValueError(f"Axis domain must be 'auto' or (min, max), got {self.domain!r}")
        elif len(self.domain) != 2:
            raise ValueError(f"Axis domain must be 'auto' or (min, max), got {self.domain!r}")


@dataclass(frozen=True)
class ChartConfig:
    """Shared configuration for chart dimensions, axes and data processing."""
    width: int = 320
    height: int = 240
    title: Optional[str] = None
    x_axis: AxisConfig = field(default_factory=AxisConfig)
    y_axis: AxisConfig = field(default_factory=AxisConfig)
    margin: Margin = field(default_factory=Margin)
    colormap: str = 'viridis'
    bin_method: Union[str, int] = 'auto'
    max_points: Optional[int] = None
    decimation: str = 'stride'

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Chart size must be positive, got {self.width}x{self.height}")
        if self.inner_width <= 0 or self.inner_height <= 0:
            raise ValueError("Margins leave no room for the plotting area")
        get_colormap(self.colormap)
        if isinstance(self.bin_method, str) and self.bin_method not in BIN_METHODS:
            raise ValueError(f"Unknown bin method: {self.bin_method}")
        if self.decimation not in STRATEGIES:
            raise ValueError(f"Unknown decimation strategy: {self.decimation}")
        if self.max_points is not None and self.max_points < 1:
            raise ValueError(f"max_points must be >= 1, got {self.max_points}")

    @property
    def inner_width(self) -> float:
        return self.width - self.margin.left - self.margin.right

    @property
    def inner_height(self) -> float:
        return self.height - self.margin.top - self.margin.bottom

    def to_options(self, **kwargs) -> Dict[str, Any]:
        """
        Build an options dictionary (camelCase keys) for a renderer.

        Only options that differ from their defaults are included, so the
        renderer's own defaults apply otherwise; kwargs are merged last.

        Example:
            ChartConfig(width=640, title="Latency").to_options(legendPosition='right')
            # {'width': 640, 'title': 'Latency', 'legendPosition': 'right'}
        """
        defaults = {f.name: f.default for f in fields(self) if f.default is not MISSING}
        default_axis = AxisConfig()
        options = {}
        if self.width != defaults['width']:
            options['width'] = self.width
        if self.height != defaults['height']:
            options['height'] = self.height
        if self.title is not None:
            options['title'] = self.title
        for prefix, axis in (('x', self.x_axis), ('y', self.y_axis)):
            if axis.label is not None:
                options[f'{prefix}Label'] = axis.label
            if axis.ticks != default_axis.ticks:
                options[f'{prefix}ticks'] = axis.ticks
            if axis.scale != default_axis.scale:
                options[f'{prefix}Scale'] = axis.scale
        if self.colormap != defaults['colormap']:
            options['colormap'] = self.colormap

        # Add any additional kwargs
        options.update(kwargs)
        return options
