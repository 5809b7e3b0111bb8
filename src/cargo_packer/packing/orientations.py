from __future__ import annotations

from cargo_packer.models import Dimensions


def orientations_6(dims: Dimensions) -> list[Dimensions]:
    """
    Return the 6 axis-aligned orientations of a box as oriented dims (L, W, H).

    Order matters: the scanner keeps the first orientation that fits at a position.
      0:(W,L,H) 1:(L,W,H) 2:(H,W,L) 3:(W,H,L) 4:(H,L,W) 5:(L,H,W)
    Duplicates (cubes, square faces) are kept so indices stay stable.
    """
    L, W, H = (float(d) for d in dims)
    return [
        (W, L, H),
        (L, W, H),
        (H, W, L),
        (W, H, L),
        (H, L, W),
        (L, H, W),
    ]
