from __future__ import annotations

from typing import Iterable

from cargo_packer.models import BoxInstance, Container, PackingResult, PlacedBox


def compute_metrics(
    container: Container,
    instances: Iterable[BoxInstance],
    placements: Iterable[PlacedBox],
) -> tuple[float, float, float, float]:
    """Return (total requested volume, container volume, used volume, utilization)."""
    total_volume = sum(b.volume for b in instances)
    used_volume = sum(p.volume for p in placements)
    container_volume = container.volume
    utilization = 0.0 if container_volume == 0 else used_volume / container_volume
    return float(total_volume), container_volume, float(used_volume), utilization


def _num(value: float) -> str:
    return f"{value:,.0f}" if float(value).is_integer() else f"{value:,.2f}"


def format_summary(result: PackingResult, unit: str = "cm") -> str:
    """One status line, e.g. for the CLI or the API response."""
    return (
        f"Packing done: placed {result.placed_count}, unplaced {result.unplaced_count}; "
        f"total box volume {_num(result.total_volume)} {unit}³; "
        f"container volume {_num(result.container_volume)} {unit}³; "
        f"used volume {_num(result.used_volume)} {unit}³; "
        f"utilization {result.utilization * 100:.2f}%"
    )
