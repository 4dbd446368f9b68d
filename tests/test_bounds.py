import pytest

from airspace3d.bounds import FLT_MAX, Bounds, bounds_of


def test_default_bounds_is_empty():
    box = Bounds()
    assert box.min == (FLT_MAX, FLT_MAX, FLT_MAX)
    assert box.max == (-FLT_MAX, -FLT_MAX, -FLT_MAX)
    assert box.center == (0.0, 0.0, 0.0)
    assert box.is_empty


def test_merge_into_empty_takes_other():
    box = Bounds()
    other = Bounds(min=(-1.0, -2.0, -3.0), max=(4.0, 5.0, 6.0))
    box.merge(other)
    assert box.min == other.min
    assert box.max == other.max
    assert not box.is_empty


def test_merge_takes_componentwise_extremes():
    box = Bounds(min=(0.0, 5.0, -1.0), max=(2.0, 7.0, 1.0))
    box.merge(Bounds(min=(1.0, -3.0, 0.0), max=(9.0, 6.0, 0.5)))
    assert box.min == (0.0, -3.0, -1.0)
    assert box.max == (9.0, 7.0, 1.0)


def test_merge_keeps_center():
    box = Bounds(min=(0.0, 0.0, 0.0), max=(1.0, 1.0, 1.0), center=(7.0, 7.0, 7.0))
    box.merge(Bounds(min=(-5.0, -5.0, -5.0), max=(5.0, 5.0, 5.0)))
    assert box.center == (7.0, 7.0, 7.0)


def test_merge_with_empty_is_identity():
    box = Bounds(min=(1.0, 2.0, 3.0), max=(4.0, 5.0, 6.0))
    box.merge(Bounds())
    assert box.min == (1.0, 2.0, 3.0)
    assert box.max == (4.0, 5.0, 6.0)


def test_bounds_of_points_encloses_all():
    points = [(1.0, -2.0, 3.0), (-4.0, 5.0, 0.0), (2.0, 2.0, 9.0)]
    box = bounds_of(points)
    for point in points:
        for axis in range(3):
            assert box.min[axis] <= point[axis] <= box.max[axis]
    assert box.min == (-4.0, -2.0, 0.0)
    assert box.max == (2.0, 5.0, 9.0)


def test_bounds_of_center_is_midpoint():
    box = bounds_of([(0.0, 0.0, 0.0), (2.0, 4.0, 6.0)])
    assert box.center == pytest.approx((1.0, 2.0, 3.0))


def test_bounds_of_no_points():
    box = bounds_of([])
    assert box.is_empty
    assert box.center == (0.0, 0.0, 0.0)