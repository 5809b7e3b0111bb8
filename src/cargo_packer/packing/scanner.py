"""
Placement scanner: first-fit search for one box.

Positions are integer grid points with x <= L-1, y <= H-1, z <= W-1, ranked by
(z, y, x) and then by orientation index. The first candidate that stays inside
the container and overlaps no placed box wins.

scan_unit_grid walks every grid point. find_placement returns the same answer
but only visits coordinates where the lowest feasible position can be:
0 or the (ceiled) far face of a placed box that still overlaps on the outer axes.
"""

from __future__ import annotations

import math
from typing import Iterable, Optional, Sequence

from cargo_packer.geometry import BOUNDARY_EPS, Bounds, bounds_at, boxes_overlap, fits_in_container, placement_bounds
from cargo_packer.models import Container, Dimensions, PlacedBox
from cargo_packer.packing.cancel import CancelToken
from cargo_packer.packing.orientations import orientations_6


def grid_size(extent: float) -> int:
    """Number of integer positions p >= 0 with p <= extent - 1."""
    return max(0, math.floor(float(extent) - 1) + 1)


def _placed(x: int, y: int, z: int, dims: Dimensions) -> PlacedBox:
    L, W, H = dims
    return PlacedBox(x=float(x), y=float(y), z=float(z), length=L, width=W, height=H)


def scan_unit_grid(
    dims: Dimensions,
    container: Container,
    placed: Sequence[PlacedBox],
    cancel: Optional[CancelToken] = None,
) -> PlacedBox | None:
    """Reference scan: every grid point, z outermost, x innermost."""
    orients = orientations_6(dims)
    bounds = [placement_bounds(p) for p in placed]

    for z in range(grid_size(container.width)):
        if cancel is not None:
            cancel.raise_if_cancelled()
        for y in range(grid_size(container.height)):
            for x in range(grid_size(container.length)):
                for o in orients:
                    if not fits_in_container(x, y, z, o, container):
                        continue
                    cand = bounds_at(x, y, z, o)
                    if not any(boxes_overlap(cand, b) for b in bounds):
                        return _placed(x, y, z, o)
    return None


def _candidates(size: int, ends: Iterable[float]) -> list[int]:
    points = {0} if size > 0 else set()
    for end in ends:
        p = math.ceil(end)
        if p < size:
            points.add(p)
    return sorted(points)


def _lowest_position(
    o: Dimensions,
    container: Container,
    bounds: list[Bounds],
    stop_z: Optional[int],
    cancel: Optional[CancelToken],
) -> tuple[int, int, int] | None:
    """Lowest (z, y, x) where orientation o fits, or None. Gives up past stop_z."""
    L, W, H = o
    nx = grid_size(container.length)
    ny = grid_size(container.height)
    nz = grid_size(container.width)
    for z in _candidates(nz, (b[5] for b in bounds)):
        if stop_z is not None and z > stop_z:
            return None
        if cancel is not None:
            cancel.raise_if_cancelled()
        if not z + W <= float(container.width) + BOUNDARY_EPS:
            return None

        # boxes the candidate can still hit along z
        in_z = [b for b in bounds if z + W > b[2] and b[5] > z]

        for y in _candidates(ny, (b[4] for b in in_z)):
            if not y + H <= float(container.height) + BOUNDARY_EPS:
                break
            in_zy = [b for b in in_z if y + H > b[1] and b[4] > y]

            for x in _candidates(nx, (b[3] for b in in_zy)):
                if not fits_in_container(x, y, z, o, container):
                    break
                cand = bounds_at(x, y, z, o)
                if not any(boxes_overlap(cand, b) for b in in_zy):
                    return (z, y, x)
    return None


def find_placement(
    dims: Dimensions,
    container: Container,
    placed: Sequence[PlacedBox],
    cancel: Optional[CancelToken] = None,
) -> PlacedBox | None:
    """
    First-fit placement for a box with unrotated dims (L, W, H).

    Returns the PlacedBox scan_unit_grid would return, or None when the box
    fits nowhere. Not fitting is a normal outcome, not an error.
    """
    bounds = [placement_bounds(p) for p in placed]
    best: tuple[int, int, int] | None = None
    best_dims: Dimensions | None = None
    tried: set[Dimensions] = set()

    for o in orientations_6(dims):
        # an identical earlier orientation already had its chance
        if o in tried:
            continue
        tried.add(o)

        hit = _lowest_position(o, container, bounds, best[0] if best else None, cancel)
        if hit is not None and (best is None or hit < best):
            best, best_dims = hit, o

    if best is None or best_dims is None:
        return None
    z, y, x = best
    return _placed(x, y, z, best_dims)
