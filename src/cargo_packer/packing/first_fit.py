# src/cargo_packer/packing/first_fit.py

from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional, Sequence

from cargo_packer.metrics import compute_metrics
from cargo_packer.models import BoxInstance, BoxSpec, Container, Dimensions, PackingResult, PlacedBox
from cargo_packer.packing.cancel import CancelToken
from cargo_packer.packing.instances import expand_instances, sort_by_volume
from cargo_packer.packing.scanner import find_placement

logger = logging.getLogger(__name__)

Scanner = Callable[[Dimensions, Container, Sequence[PlacedBox], Optional[CancelToken]], Optional[PlacedBox]]


def _check_inputs(container: Container, specs: list[BoxSpec]) -> None:
    # Models built with model_construct() skip pydantic validation.
    for name in ("length", "width", "height"):
        if not float(getattr(container, name)) > 0:
            raise ValueError(f"container {name} must be positive, got {getattr(container, name)!r}")
    for i, spec in enumerate(specs):
        for name in ("length", "width", "height"):
            if not float(getattr(spec, name)) > 0:
                raise ValueError(f"box spec {i}: {name} must be positive, got {getattr(spec, name)!r}")
        if spec.count < 0:
            raise ValueError(f"box spec {i}: count cannot be negative, got {spec.count!r}")


def pack_boxes(
    container: Container,
    specs: Iterable[BoxSpec],
    cancel: Optional[CancelToken] = None,
    scanner: Scanner = find_placement,
) -> PackingResult:
    """
    Greedy first-fit packer.
    - Expands specs into instances, largest volume first (stable on ties)
    - Accepts the FIRST feasible (z, y, x, orientation) for each instance
    - Places each instance at most once, never moves it afterwards
    - Instances that fit nowhere go to `unplaced`; the run always completes
    - Deterministic (no randomness)

    Raises ValueError for non-positive dimensions or negative counts and
    PackingCancelled when `cancel` is set during the run.
    """
    specs = list(specs)
    _check_inputs(container, specs)

    instances = sort_by_volume(expand_instances(specs))
    logger.debug(
        "pack_boxes: %d instances into %s x %s x %s",
        len(instances), container.length, container.width, container.height,
    )

    placements: list[PlacedBox] = []
    unplaced: list[BoxInstance] = []

    for box in instances:
        if cancel is not None:
            cancel.raise_if_cancelled()

        placed = scanner(box.dimensions, container, placements, cancel)
        if placed is None:
            logger.warning("Box does not fit anywhere: %s", box.dimensions)
            unplaced.append(box)
            continue

        logger.debug("Box %s placed at (%s, %s, %s)", box.dimensions, placed.x, placed.y, placed.z)
        placements.append(placed)

    total_volume, container_volume, used_volume, utilization = compute_metrics(container, instances, placements)

    logger.info(
        "placed=%d, unplaced=%d, utilization=%.4f",
        len(placements), len(unplaced), utilization,
    )

    return PackingResult(
        placements=placements,
        unplaced=unplaced,
        total_volume=total_volume,
        container_volume=container_volume,
        used_volume=used_volume,
        utilization=utilization,
    )
