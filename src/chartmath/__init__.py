"""
chartmath - the computation engine behind 2D charts

Pure numeric layer shared by line, scatter, histogram, heatmap, polar and
xy-plot charts: turns raw data into pixel positions, tick labels, bin
statistics, decimated samples, colours and regression lines. No rendering.

Features:
- Domains: padded/unpadded extents, radial and heatmap domains, nice bounds
- Scales: linear and log scales, invertible, safe on degenerate domains
- Ticks: evenly spaced, log-spaced, "nice" and angular ticks
- Formatting: compact K/M/exponential labels, time labels
- Histograms: sturges, scott, freedman-diaconis, sqrt and auto bin rules;
  cumulative and normalized bins; normal-curve overlays
- Decimation: stride, LTTB and min-max downsampling
- Colormaps: viridis family and friends, CSS gradients, legible text colours
- Polar and hex-grid coordinate transforms
- Least-squares trendlines

Usage:
    import chartmath as cm

    points = cm.to_points(x_values, y_values)
    frame = cm.build_frame(points, cm.ChartConfig(width=640, height=400))
    frame.project(points[0])        # pixel (x, y)
    frame.tick_labels('y')          # ['0.00', '2.5K', ...]

    bins = cm.build_bins(samples, method='freedman-diaconis')
    cm.map_value_to_color(7.5, 0, 10, 'plasma')
    cm.linear_regression(points)
"""

from .binning import bin_values, build_bins, normal_curve, select_bin_count
from .colormaps import (
    COLORMAPS, Colormap, categorical_palette, colormap_from_colors, density_color,
    generate_gradient_css, get_colormap, map_normalized, map_value_to_color,
    neighbor_counts, text_color_for,
)
from .config import AxisConfig, ChartConfig, Margin
from .convert import matrix_to_cells, to_points, to_polar_points
from .decimation import decimate, decimation_stats, lttb, min_max_decimation
from .domain import cell_domain, compute_domain, matrix_domain, nice_bounds, radius_domain
from .formatting import format_date, format_tick, format_time, format_value
from .frame import ChartFrame, build_frame, prepare_bins, prepare_series
from .logging_config import setup_logging
from .polar import PolarFrame, hex_position, hexagon_vertices, polar_to_cartesian
from .regression import linear_regression, predict, trendline_points
from .scales import Scale, build_scale, invert_scale
from .ticks import angular_ticks, generate_ticks, nice_ticks
from .types import Bin, HeatmapCell, Point, PolarPoint, Trendline

__version__ = "0.1.0"
__author__ = "Tim Nelson"

__all__ = [
    'Point', 'PolarPoint', 'Bin', 'Trendline', 'HeatmapCell',
    'to_points', 'to_polar_points', 'matrix_to_cells',
    'compute_domain', 'radius_domain', 'cell_domain', 'matrix_domain', 'nice_bounds',
    'Scale', 'build_scale', 'invert_scale',
    'generate_ticks', 'nice_ticks', 'angular_ticks',
    'format_value', 'format_tick', 'format_time', 'format_date',
    'select_bin_count', 'build_bins', 'bin_values', 'normal_curve',
    'decimate', 'lttb', 'min_max_decimation', 'decimation_stats',
    'Colormap', 'COLORMAPS', 'get_colormap', 'map_value_to_color', 'map_normalized',
    'generate_gradient_css', 'text_color_for', 'colormap_from_colors',
    'categorical_palette', 'density_color', 'neighbor_counts',
    'polar_to_cartesian', 'PolarFrame', 'hex_position', 'hexagon_vertices',
    'linear_regression', 'predict', 'trendline_points',
    'Margin', 'AxisConfig', 'ChartConfig', 'ChartFrame', 'build_frame', 'prepare_series',
    'prepare_bins',
    'setup_logging',
]
