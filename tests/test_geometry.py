from __future__ import annotations

from cargo_packer.geometry import (
    boxes_overlap,
    bounds_at,
    find_layout_violations,
    fits_in_container,
    placement_bounds,
)
from cargo_packer.models import Container, PlacedBox


def test_boxes_overlap_overlapping() -> None:
    """Test that overlapping boxes are detected."""
    # Box a: (0, 0, 0) to (2, 2, 2)
    a = (0.0, 0.0, 0.0, 2.0, 2.0, 2.0)
    # Box b: (1, 1, 1) to (3, 3, 3) - overlaps with a
    b = (1.0, 1.0, 1.0, 3.0, 3.0, 3.0)

    assert boxes_overlap(a, b) is True


def test_boxes_overlap_not_overlapping() -> None:
    """Test that non-overlapping boxes are detected."""
    # Box a: (0, 0, 0) to (1, 1, 1)
    a = (0.0, 0.0, 0.0, 1.0, 1.0, 1.0)
    # Box b: (2, 2, 2) to (3, 3, 3) - does not overlap with a
    b = (2.0, 2.0, 2.0, 3.0, 3.0, 3.0)

    assert boxes_overlap(a, b) is False


def test_touching_faces_do_not_overlap() -> None:
    a = (0.0, 0.0, 0.0, 5.0, 5.0, 5.0)
    for b in [
        (5.0, 0.0, 0.0, 10.0, 5.0, 5.0),
        (0.0, 5.0, 0.0, 5.0, 10.0, 5.0),
        (0.0, 0.0, 5.0, 5.0, 5.0, 10.0),
    ]:
        assert boxes_overlap(a, b) is False
        assert boxes_overlap(b, a) is False


def test_separated_on_one_axis_only() -> None:
    # same x and y ranges, apart along z
    a = (0.0, 0.0, 0.0, 4.0, 4.0, 1.0)
    b = (0.0, 0.0, 1.5, 4.0, 4.0, 3.0)
    assert boxes_overlap(a, b) is False


def test_contained_box_overlaps() -> None:
    outer = (0.0, 0.0, 0.0, 10.0, 10.0, 10.0)
    inner = (2.0, 2.0, 2.0, 3.0, 3.0, 3.0)
    assert boxes_overlap(outer, inner) is True
    assert boxes_overlap(inner, outer) is True


def test_bounds_put_height_on_y_and_width_on_z() -> None:
    p = PlacedBox(x=1, y=2, z=3, length=4, width=5, height=6)
    assert placement_bounds(p) == (1.0, 2.0, 3.0, 5.0, 8.0, 8.0)
    assert bounds_at(0, 0, 0, (4.0, 5.0, 6.0)) == (0, 0, 0, 4.0, 6.0, 5.0)


def test_fits_in_container_tolerance() -> None:
    container = Container(length=10, width=10, height=10)
    assert fits_in_container(0, 0, 0, (10.0, 10.0, 10.0), container)
    assert fits_in_container(0, 0, 0, (10.0000001, 10.0, 10.0), container)
    assert not fits_in_container(0, 0, 0, (10.001, 10.0, 10.0), container)
    # height is checked against the y extent, width against z
    tall = Container(length=10, width=2, height=8)
    assert fits_in_container(0, 0, 0, (10.0, 2.0, 8.0), tall)
    assert not fits_in_container(0, 0, 0, (10.0, 8.0, 2.0), tall)


def test_find_layout_violations() -> None:
    container = Container(length=10, width=10, height=10)
    good = [
        PlacedBox(x=0, y=0, z=0, length=5, width=5, height=5),
        PlacedBox(x=5, y=0, z=0, length=5, width=5, height=5),
    ]
    assert find_layout_violations(container, good) == []

    bad = good + [
        PlacedBox(x=4, y=0, z=0, length=2, width=2, height=2),
        PlacedBox(x=8, y=8, z=8, length=5, width=1, height=1),
    ]
    problems = find_layout_violations(container, bad)
    assert "box 3 extends beyond the container" in problems
    assert "box 0 overlaps box 2" in problems
    assert "box 1 overlaps box 2" in problems
    assert len(problems) == 3


def test_find_layout_violations_negative_corner() -> None:
    container = Container(length=10, width=10, height=10)
    # model_construct skips the ge=0 check, as a hand-edited layout might
    stray = PlacedBox.model_construct(x=-1, y=0, z=0, length=1, width=1, height=1)

    assert find_layout_violations(container, [stray]) == ["box 0 has a negative corner (-1, 0, 0)"]
