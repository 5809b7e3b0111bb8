from __future__ import annotations

from typing import Iterable

from cargo_packer.models import BoxInstance, BoxSpec


def expand_instances(specs: Iterable[BoxSpec]) -> list[BoxInstance]:
    """Turn each spec into `count` instances, keeping spec order. count=0 adds nothing."""
    instances: list[BoxInstance] = []
    for spec in specs:
        for _ in range(spec.count):
            instances.append(
                BoxInstance(
                    length=spec.length,
                    width=spec.width,
                    height=spec.height,
                    label=spec.label,
                )
            )
    return instances


def sort_by_volume(instances: Iterable[BoxInstance]) -> list[BoxInstance]:
    # sorted() is stable: equal volumes keep expansion order
    return sorted(instances, key=lambda b: b.volume, reverse=True)
