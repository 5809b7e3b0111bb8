"""Geometry utilities for container packing."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from .models import Container, Dimensions, PlacedBox

# Absorbs float rounding when a box ends exactly on a container wall.
BOUNDARY_EPS = 1e-6

Bounds = tuple[float, float, float, float, float, float]


def boxes_overlap(a: Bounds, b: Bounds) -> bool:
    """
    Axis-aligned bounding box (AABB) overlap test.

    a, b are bounds: (x1, y1, z1, x2, y2, z2)

    The boxes are apart when they are separated along at least one axis.
    Touching faces/edges (ax2 == bx1) is NOT considered overlap.
    No tolerance is applied here.
    """
    ax1, ay1, az1, ax2, ay2, az2 = a
    bx1, by1, bz1, bx2, by2, bz2 = b

    return not (
        ax2 <= bx1 or bx2 <= ax1
        or ay2 <= by1 or by2 <= ay1
        or az2 <= bz1 or bz2 <= az1
    )


def bounds_at(x: float, y: float, z: float, dims: "Dimensions") -> Bounds:
    """Bounds of a box with oriented dims (L, W, H) at corner (x, y, z); H is vertical (y)."""
    L, W, H = dims
    return (x, y, z, x + L, y + H, z + W)


def placement_bounds(p: "PlacedBox") -> Bounds:
    return bounds_at(float(p.x), float(p.y), float(p.z), (float(p.length), float(p.width), float(p.height)))


def fits_in_container(x: float, y: float, z: float, dims: "Dimensions", container: "Container") -> bool:
    """Far-wall check with BOUNDARY_EPS slack. Does not check the minimum corner."""
    L, W, H = dims
    return (
        x + L <= float(container.length) + BOUNDARY_EPS
        and y + H <= float(container.height) + BOUNDARY_EPS
        and z + W <= float(container.width) + BOUNDARY_EPS
    )


def find_layout_violations(container: "Container", placements: Iterable["PlacedBox"]) -> list[str]:
    """
    Re-check a finished layout, e.g. one read back from an export file.

    Returns one message per box outside the container and per overlapping pair.
    An empty list means the layout is valid.
    """
    placements = list(placements)
    problems: list[str] = []

    for i, p in enumerate(placements):
        if p.x < 0 or p.y < 0 or p.z < 0:
            problems.append(f"box {i} has a negative corner ({p.x}, {p.y}, {p.z})")
        elif not fits_in_container(p.x, p.y, p.z, (p.length, p.width, p.height), container):
            problems.append(f"box {i} extends beyond the container")

    bounds = [placement_bounds(p) for p in placements]
    for i in range(len(bounds)):
        for j in range(i + 1, len(bounds)):
            if boxes_overlap(bounds[i], bounds[j]):
                problems.append(f"box {i} overlaps box {j}")

    return problems
