from __future__ import annotations

from typing import Optional, Tuple

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from cargo_packer.geometry import Bounds, placement_bounds

# (length, width, height) of an unrotated or oriented box
Dimensions = Tuple[float, float, float]


class Container(BaseModel):
    """Container interior. length runs along x, height along y (vertical), width along z."""

    model_config = ConfigDict(frozen=True)

    length: float = Field(gt=0, validation_alias=AliasChoices("length", "L"), description="x extent")
    width: float = Field(gt=0, validation_alias=AliasChoices("width", "W"), description="z extent")
    height: float = Field(gt=0, validation_alias=AliasChoices("height", "H"), description="y extent (vertical)")

    @property
    def volume(self) -> float:
        return float(self.length) * float(self.width) * float(self.height)


class BoxSpec(BaseModel):
    """Template for `count` identical boxes."""

    length: float = Field(gt=0, validation_alias=AliasChoices("length", "l"), description="Length of the box")
    width: float = Field(gt=0, validation_alias=AliasChoices("width", "w"), description="Width of the box")
    height: float = Field(gt=0, validation_alias=AliasChoices("height", "h"), description="Height of the box")
    count: int = Field(default=1, ge=0, description="Number of identical boxes")
    label: Optional[str] = Field(default=None, description="Free text used in reports")

    @property
    def dimensions(self) -> Dimensions:
        return (float(self.length), float(self.width), float(self.height))


class BoxInstance(BaseModel):
    """One concrete box waiting to be placed."""

    model_config = ConfigDict(frozen=True)

    length: float = Field(gt=0)
    width: float = Field(gt=0)
    height: float = Field(gt=0)
    label: Optional[str] = None

    @property
    def dimensions(self) -> Dimensions:
        return (float(self.length), float(self.width), float(self.height))

    @property
    def volume(self) -> float:
        return float(self.length) * float(self.width) * float(self.height)


class PlacedBox(BaseModel):
    """
    A placed box: minimum corner plus the oriented extents.

    Occupies [x, x+length) x [y, y+height) x [z, z+width).
    """

    model_config = ConfigDict(frozen=True)

    x: float = Field(ge=0, description="X coordinate of the minimum corner")
    y: float = Field(ge=0, description="Y (vertical) coordinate of the minimum corner")
    z: float = Field(ge=0, description="Z coordinate of the minimum corner")
    length: float = Field(gt=0, validation_alias=AliasChoices("length", "l"))
    width: float = Field(gt=0, validation_alias=AliasChoices("width", "w"))
    height: float = Field(gt=0, validation_alias=AliasChoices("height", "h"))

    @property
    def volume(self) -> float:
        return float(self.length) * float(self.width) * float(self.height)

    @property
    def bounds(self) -> Bounds:
        return placement_bounds(self)


class PackingResult(BaseModel):
    """Result of one packing run. `placements` is in processing order."""

    placements: list[PlacedBox] = Field(default_factory=list)
    unplaced: list[BoxInstance] = Field(default_factory=list)
    total_volume: float = 0.0
    container_volume: float = 0.0
    used_volume: float = 0.0
    utilization: float = 0.0

    @property
    def placed_count(self) -> int:
        return len(self.placements)

    @property
    def unplaced_count(self) -> int:
        return len(self.unplaced)
