"""Data schemas for input/output operations."""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field, TypeAdapter, model_validator

from cargo_packer.containers import get_container
from cargo_packer.models import BoxSpec, Container, PackingResult, PlacedBox


class _ContainerChoice(BaseModel):
    """An explicit container or a preset name, never both."""
    container: Optional[Container] = Field(default=None, description="Explicit container dimensions")
    container_preset: Optional[str] = Field(default=None, description="Preset name, e.g. 40HC")

    @model_validator(mode="after")
    def _one_container(self):
        if self.container is not None and self.container_preset is not None:
            raise ValueError("give either 'container' or 'container_preset', not both")
        if self.container_preset is not None:
            # raises ValueError for unknown names
            get_container(self.container_preset)
        return self

    def resolve_container(self, default_preset: str = "DEFAULT") -> Container:
        if self.container is not None:
            return self.container
        return get_container(self.container_preset or default_preset)


class PackRequest(_ContainerChoice):
    """A packing request: the container and the box specs."""
    boxes: List[BoxSpec] = Field(default_factory=list, description="Box specifications")


class VerifyRequest(_ContainerChoice):
    """A stored layout to re-check. The container must be given."""
    placements: List[PlacedBox] = Field(default_factory=list, description="Placed boxes in placement order")

    @model_validator(mode="after")
    def _container_given(self) -> "VerifyRequest":
        if self.container is None and self.container_preset is None:
            raise ValueError("give 'container' or 'container_preset'")
        return self


_placements_adapter = TypeAdapter(List[PlacedBox])


def load_request(path: Path) -> PackRequest:
    """
    Read a request file. A bare JSON array is taken as the box list
    (the shape of the original boxes text field).
    """
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if isinstance(data, list):
        data = {"boxes": data}
    return PackRequest.model_validate(data)


def placements_to_json(placements: List[PlacedBox]) -> list[dict[str, float]]:
    return [p.model_dump() for p in placements]


def dump_placements(result: PackingResult, path: str | Path = "placed.json") -> Path:
    """Write placements as a JSON array in placement order. Overwrites the file."""
    output_path = Path(path).resolve()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(placements_to_json(result.placements), f, indent=2)
    return output_path


def load_placements(path: str | Path) -> list[PlacedBox]:
    """Read an exported layout; accepts length/width/height or l/w/h keys."""
    return _placements_adapter.validate_json(Path(path).read_bytes())
