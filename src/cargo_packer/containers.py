# src/cargo_packer/containers.py
from __future__ import annotations

from cargo_packer.models import Container

# Internal usable dims in centimetres. length runs along x, height is vertical.
CONTAINER_PRESETS_CM: dict[str, dict[str, float]] = {
    "DEFAULT": {"length": 1200, "width": 235, "height": 269},
    "20":      {"length": 590,  "width": 235, "height": 239},
    "20HC":    {"length": 589,  "width": 233, "height": 270},
    "40":      {"length": 1203, "width": 235, "height": 239},
    "40HC":    {"length": 1203, "width": 235, "height": 269},
    "45HC":    {"length": 1355, "width": 235, "height": 269},
}


def get_container_dims(preset: str) -> dict[str, float]:
    key = preset.strip().upper()
    if key not in CONTAINER_PRESETS_CM:
        raise ValueError(f"Unknown container_preset '{preset}'. Valid: {sorted(CONTAINER_PRESETS_CM.keys())}")
    return dict(CONTAINER_PRESETS_CM[key])


def get_container(preset: str) -> Container:
    return Container(**get_container_dims(preset))
