import logging
import math

import pytest

from chartmath.scales import LOG_FLOOR, build_scale, invert_scale


def test_linear_scale_maps_endpoints():
    scale = build_scale((0, 10), (0, 100))
    assert scale(0) == pytest.approx(0)
    assert scale(10) == pytest.approx(100)
    assert scale(5) == pytest.approx(50)


def test_linear_scale_supports_inverted_range():
    scale = build_scale((-10, 110), (190, 20))
    assert scale(-10) == pytest.approx(190)
    assert scale(110) == pytest.approx(20)
    assert scale(50) == pytest.approx(105)


@pytest.mark.parametrize("domain,rng", [((0, 10), (0, 100)), ((-3, 7), (400, 50)), ((1e3, 2e3), (0, 1))])
def test_linear_round_trip(domain, rng):
    scale = build_scale(domain, rng)
    inverse = invert_scale(scale)
    assert scale(domain[0]) == pytest.approx(rng[0])
    assert scale(domain[1]) == pytest.approx(rng[1])
    for value in (domain[0], (domain[0] + domain[1]) / 2, domain[1]):
        assert inverse(scale(value)) == pytest.approx(value)


def test_degenerate_linear_domain_maps_to_range_midpoint(caplog):
    caplog.set_level(logging.DEBUG, logger="chartmath.scales")
    scale = build_scale((3, 3), (0, 100))
    assert scale.degenerate
    assert scale(3) == 50
    assert scale(-1000) == 50
    assert not math.isnan(scale(7))
    assert "Degenerate" in caplog.text


def test_log_scale_is_linear_in_log_space():
    scale = build_scale((1, 1000), (0, 300), 'log')
    assert scale(1) == pytest.approx(0)
    assert scale(10) == pytest.approx(100)
    assert scale(1000) == pytest.approx(300)


def test_log_scale_floors_non_positive_domain_and_values():
    scale = build_scale((0, 100), (0, 100), 'log', log_floor=1)
    assert scale(1) == pytest.approx(0)
    assert scale(0) == pytest.approx(0)
    assert scale(-5) == pytest.approx(0)
    assert scale(10) == pytest.approx(50)


def test_log_scale_default_floor_is_consistent():
    scale = build_scale((0, 1), (0, 400), 'log')
    assert scale(-3) == scale(LOG_FLOOR)
    assert scale(LOG_FLOOR) == pytest.approx(0)
    assert math.isfinite(scale(0))


def test_log_scale_round_trip():
    scale = build_scale((1, 1e4), (190, 20), 'log')
    assert scale.invert(scale(100)) == pytest.approx(100)


def test_unknown_scale_type_raises():
    with pytest.raises(ValueError):
        build_scale((0, 1), (0, 1), 'time')


def test_scales_are_independent():
    a = build_scale((0, 1), (0, 10))
    b = build_scale((0, 1), (0, 20))
    assert a(1) == 10
    assert b(1) == 20
    assert a(1) == 10
