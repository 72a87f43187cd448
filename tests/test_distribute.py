import pytest

from squircle import (Corner, RoundedRectangle, Side, distribute_and_normalize,
                      get_adjacents)


def rectangle(width, height, tl, tr, br, bl) -> RoundedRectangle:
    return RoundedRectangle(width=width,
                            height=height,
                            top_left_corner_radius=tl,
                            top_right_corner_radius=tr,
                            bottom_right_corner_radius=br,
                            bottom_left_corner_radius=bl)


def test_adjacents_are_symmetric():
    for corner in Corner:
        for adjacent in get_adjacents(corner):
            back = {a.corner: a.side for a in get_adjacents(adjacent.corner)}
            assert back[corner] == adjacent.side


def test_side_length():
    assert Side.TOP.length(40, 100) == 40
    assert Side.BOTTOM.length(40, 100) == 40
    assert Side.LEFT.length(40, 100) == 100
    assert Side.RIGHT.length(40, 100) == 100


def test_competing_top_corners_are_clamped():
    corners = distribute_and_normalize(rectangle(40, 100, 40, 40, 0, 0))
    assert corners.top_left.radius == 20
    assert corners.top_right.radius == 20
    assert corners.top_left.rounding_and_smoothing_budget == 20
    assert corners.top_right.rounding_and_smoothing_budget == 20
    assert corners.bottom_left.radius == 0
    assert corners.bottom_right.radius == 0
    assert corners.bottom_left.rounding_and_smoothing_budget == 0
    assert corners.bottom_right.rounding_and_smoothing_budget == 0


def test_all_zero_radii():
    corners = distribute_and_normalize(rectangle(100, 50, 0, 0, 0, 0))
    for corner in Corner:
        assert corners[corner].radius == 0
        assert corners[corner].rounding_and_smoothing_budget == 0


def test_equal_radii_split_sides_evenly():
    corners = distribute_and_normalize(rectangle(100, 100, 10, 10, 10, 10))
    for corner in Corner:
        assert corners[corner].radius == 10
        assert corners[corner].rounding_and_smoothing_budget == 50


def test_equal_radii_on_wide_rectangle():
    corners = distribute_and_normalize(rectangle(200, 100, 20, 20, 20, 20))
    for corner in Corner:
        assert corners[corner].radius == 20
        assert corners[corner].rounding_and_smoothing_budget == 50


def test_single_rounded_corner_takes_the_shorter_side():
    corners = distribute_and_normalize(rectangle(200, 100, 0, 500, 0, 0))
    assert corners.top_right.rounding_and_smoothing_budget == 100
    assert corners.top_right.radius == 100
    # neighbours only get what is left
    assert corners.top_left.rounding_and_smoothing_budget == 0
    assert corners.bottom_right.rounding_and_smoothing_budget == 0


def test_later_corners_take_the_leftover():
    corners = distribute_and_normalize(rectangle(200, 100, 10, 20, 30, 5))
    # bottom right goes first, limited by the right side
    assert corners.bottom_right.rounding_and_smoothing_budget == \
        pytest.approx(60)
    assert corners.top_right.rounding_and_smoothing_budget == \
        pytest.approx(40)
    assert corners.top_left.rounding_and_smoothing_budget == \
        pytest.approx(200 / 3)
    assert corners.bottom_left.rounding_and_smoothing_budget == \
        pytest.approx(100 / 3)
    # both vertical sides are fully handed out
    right = (corners.top_right.rounding_and_smoothing_budget +
             corners.bottom_right.rounding_and_smoothing_budget)
    left = (corners.top_left.rounding_and_smoothing_budget +
            corners.bottom_left.rounding_and_smoothing_budget)
    assert right == pytest.approx(100)
    assert left == pytest.approx(100)


@pytest.mark.parametrize("width, height, radii", [
    (100, 100, (10, 20, 30, 40)),
    (40, 100, (40, 40, 0, 0)),
    (300, 80, (200, 5, 0, 60)),
    (50, 50, (1000, 1000, 1000, 999)),
    (120, 60, (0, 0, 0, 25)),
])
def test_no_side_is_overclaimed(width, height, radii):
    rect = rectangle(width, height, *radii)
    corners = distribute_and_normalize(rect)
    for corner in Corner:
        normalized = corners[corner]
        assert normalized.radius <= rect.radius(corner)
        assert normalized.radius <= normalized.rounding_and_smoothing_budget
        for adjacent in get_adjacents(corner):
            side_length = adjacent.side.length(width, height)
            other = corners[adjacent.corner]
            assert normalized.rounding_and_smoothing_budget <= side_length
            assert (normalized.rounding_and_smoothing_budget +
                    other.rounding_and_smoothing_budget
                    <= side_length + 1e-9)
