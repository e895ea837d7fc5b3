import pytest

from chartmath import colormaps
from chartmath.colormaps import (
    COLORMAPS, Colormap, categorical_palette, colormap_from_colors, density_color,
    generate_gradient_css, get_colormap, hex_to_rgb, luminance, map_normalized,
    map_value_to_color, neighbor_counts, rgb_to_hex, text_color_for,
)
from chartmath.types import Point


@pytest.mark.parametrize("name", sorted(COLORMAPS))
def test_endpoints_match_first_and_last_control_points(name):
    colors = get_colormap(name).colors
    assert map_value_to_color(-2, -2, 8, name) == colors[0]
    assert map_value_to_color(8, -2, 8, name) == colors[-1]


def test_out_of_domain_values_clamp():
    colors = get_colormap('viridis').colors
    assert map_value_to_color(-100, 0, 1) == colors[0]
    assert map_value_to_color(100, 0, 1) == colors[-1]


def test_collapsed_domain_maps_to_first_color():
    assert map_value_to_color(5, 5, 5, 'plasma') == get_colormap('plasma').colors[0]


def test_control_points_are_hit_exactly():
    # grays has 9 stops; t = 0.5 is the middle stop
    assert map_value_to_color(50, 0, 100, 'grays') == '#808080'
    assert map_normalized(0.125, 'grays') == '#dfdfdf'


def test_interpolates_between_stops():
    cmap = colormap_from_colors(['#000000', '#ffffff'])
    assert cmap(0.5) == '#808080'
    assert cmap(0.25) == '#404040'


def test_explicit_stop_positions():
    cmap = Colormap('edge', ((0.0, (0.0, 0.0, 0.0)), (0.8, (1.0, 0.0, 0.0)), (1.0, (1.0, 1.0, 1.0))))
    assert cmap(0.4) == '#800000'
    assert cmap(0.9) == '#ff8080'


def test_stops_must_be_increasing():
    with pytest.raises(ValueError):
        Colormap('bad', ((0.5, (0, 0, 0)), (0.2, (1, 1, 1))))
    with pytest.raises(ValueError):
        Colormap('empty', ())


def test_unknown_colormap_raises():
    with pytest.raises(ValueError, match="Unknown colormap"):
        map_value_to_color(0.5, 0, 1, 'rainbow')


def test_gradient_css_lists_stops_in_order():
    cmap = colormap_from_colors(['black', 'white'])
    assert generate_gradient_css(cmap, 'to bottom') == 'linear-gradient(to bottom, #000000 0%, #ffffff 100%)'

    css = generate_gradient_css('grays')
    assert css.startswith('linear-gradient(to right, #ffffff 0%, #dfdfdf 12.5%')
    assert css.endswith('#000000 100%)')


@pytest.mark.parametrize("color,expected", [
    ('#ffffff', '#000000'),
    ('#000000', '#ffffff'),
    ((200, 200, 200), '#000000'),
    ((100, 100, 100), '#ffffff'),
    ('#fde725', '#000000'),
    ('#440154', '#ffffff'),
])
def test_text_color_for(color, expected):
    assert text_color_for(color) == expected


def test_luminance_weights():
    assert luminance((255, 0, 0)) == pytest.approx(0.299 * 255)
    assert luminance('#00ff00') == pytest.approx(0.587 * 255)


def test_hex_helpers():
    assert hex_to_rgb('#3b82f6') == (59, 130, 246)
    assert hex_to_rgb('#fff') == (255, 255, 255)
    assert rgb_to_hex((1.0, 0.0, 0.5)) == '#ff0080'
    with pytest.raises(ValueError):
        hex_to_rgb('#12345')
    with pytest.raises(ValueError):
        hex_to_rgb('#gggggg')


def test_categorical_palette():
    assert categorical_palette(3) == ['#3b82f6', '#ef4444', '#10b981']
    twelve = categorical_palette(12)
    assert len(twelve) == 12
    assert twelve[10] == twelve[0]


def test_density_color_ends():
    assert density_color(0) == 'rgb(59, 130, 246)'
    assert density_color(20) == 'rgb(239, 68, 68)'
    assert density_color(500) == 'rgb(239, 68, 68)'


def test_neighbor_counts():
    points = [Point(0, 0), Point(10, 0), Point(100, 100)]
    identity = lambda v: v
    assert neighbor_counts(points, identity, identity, radius=30) == [1, 1, 0]


def test_repr_html_is_a_gradient_swatch():
    assert 'linear-gradient' in get_colormap('magma')._repr_html_()


def test_show_without_jupyter_returns_none(monkeypatch):
    monkeypatch.setattr(colormaps, 'JUPYTER_AVAILABLE', False)
    assert get_colormap('viridis').show() is None
