import pytest

from chartmath.ticks import angular_ticks, generate_ticks, nice_ticks


def test_linear_ticks_include_both_ends():
    assert generate_ticks((0, 100), 5) == pytest.approx([0, 25, 50, 75, 100])


def test_log_ticks_are_geometric():
    assert generate_ticks((1, 1000), 4, 'log') == pytest.approx([1, 10, 100, 1000])


def test_log_ticks_floor_non_positive_start():
    ticks = generate_ticks((0, 100), 3, 'log', log_floor=1)
    assert ticks == pytest.approx([1, 10, 100])


@pytest.mark.parametrize("count", [0, 1])
def test_tick_count_below_two_raises(count):
    with pytest.raises(ValueError):
        generate_ticks((0, 1), count)


def test_unknown_scale_type_raises():
    with pytest.raises(ValueError):
        generate_ticks((0, 1), 5, 'sqrt')


def test_nice_ticks_use_round_steps():
    assert nice_ticks((0, 97), 5) == pytest.approx([0, 50, 100])
    ticks = nice_ticks((-0.3, 0.7), 6)
    assert ticks[0] <= -0.3
    assert ticks[-1] >= 0.7
    assert 0.0 in ticks


def test_nice_ticks_on_collapsed_domain():
    assert nice_ticks((4, 4)) == [4]


def test_angular_ticks():
    assert angular_ticks(4) == [0, 90, 180, 270]
    assert len(angular_ticks()) == 12
    with pytest.raises(ValueError):
        angular_ticks(0)
