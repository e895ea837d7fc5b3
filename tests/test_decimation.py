import pytest

from chartmath.decimation import decimate, decimation_stats, lttb, min_max_decimation
from chartmath.types import Point


def _series(n):
    return [Point(i, (i * 7) % 13) for i in range(n)]


def test_noop_when_within_budget():
    points = _series(10)
    assert decimate(points, 10) is points
    assert decimate(points, 50, strategy='lttb') is points


def test_stride_keeps_every_kth_sample():
    points = _series(10)
    result = decimate(points, 3)
    assert [p.x for p in result] == [0, 4, 8]


@pytest.mark.parametrize("strategy", ['stride', 'lttb', 'minmax', 'auto'])
@pytest.mark.parametrize("n,max_points", [(11, 10), (100, 7), (1000, 3), (1001, 250), (50, 1), (50, 2)])
def test_result_never_exceeds_budget(strategy, n, max_points):
    assert len(decimate(_series(n), max_points, strategy)) <= max_points


def test_lttb_keeps_end_points_and_spike():
    points = [Point(i, 0.0) for i in range(101)]
    points[50] = Point(50, 100.0)
    result = lttb(points, 10)
    assert len(result) == 10
    assert result[0] == points[0]
    assert result[-1] == points[-1]
    assert Point(50, 100.0) in result
    # uniform stride aliases the same spike away
    assert Point(50, 100.0) not in decimate(points, 10)


def test_min_max_keeps_envelope():
    points = [Point(i, float(i % 10)) for i in range(100)]
    points[33] = Point(33, -50.0)
    result = min_max_decimation(points, 20)
    ys = [p.y for p in result]
    assert min(ys) == -50.0
    assert max(ys) == 9.0
    assert [p.x for p in result] == sorted(p.x for p in result)


def test_invalid_arguments_raise():
    with pytest.raises(ValueError):
        decimate(_series(5), 0)
    with pytest.raises(ValueError):
        decimate(_series(5), 2, strategy='random')


def test_decimation_stats():
    original = _series(1000)
    decimated = decimate(original, 100)
    stats = decimation_stats(original, decimated)
    assert stats['original_count'] == 1000
    assert stats['decimated_count'] == 100
    assert stats['reduction_ratio'] == pytest.approx(10)
    assert stats['compression_percent'] == pytest.approx(90)
