"""Define classes to represent primitive 3D shapes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Union


class PrimitiveShape(Protocol):
    """Protocol for primitive shapes."""

    @property
    def type_name(self) -> str:
        """Name of the primitive's shape type (e.g., "box")."""
        ...

    def to_dimensions(self) -> list[float]:
        """Convert the primitive shape into a list of its dimensions."""
        ...


@dataclass(frozen=True)
class Box:
    """Box primitive shape with (x,y,z) dimensions (in meters)."""

    x_m: float
    y_m: float
    z_m: float

    @property
    def type_name(self) -> str:
        """Name of the primitive's shape type."""
        return "box"

    def to_dimensions(self) -> list[float]:
        """Convert the box into a list of its (x,y,z) dimensions."""
        return [self.x_m, self.y_m, self.z_m]


@dataclass(frozen=True)
class Sphere:
    """Sphere primitive shape with a radius (in meters)."""

    radius_m: float

    @property
    def type_name(self) -> str:
        """Name of the primitive's shape type."""
        return "sphere"

    def to_dimensions(self) -> list[float]:
        """Convert the sphere into a list containing its radius."""
        return [self.radius_m]


@dataclass(frozen=True)
class Cylinder:
    """Cylinder primitive shape with a height and radius (in meters)."""

    height_m: float
    radius_m: float

    @property
    def type_name(self) -> str:
        """Name of the primitive's shape type."""
        return "cylinder"

    def to_dimensions(self) -> list[float]:
        """Convert the cylinder into a list of its dimensions."""
        return [self.height_m, self.radius_m]


AnyPrimitive = Union[Box, Sphere, Cylinder]


def create_primitive_shape(data: dict[str, str | float]) -> AnyPrimitive:
    """Create a primitive shape from its type and parameters."""
    shape_type = data.get("type")
    if shape_type is None:
        raise KeyError(f"Cannot construct PrimitiveShape without 'type' key: {data}")

    if shape_type == "box":
        return Box(x_m=float(data["x"]), y_m=float(data["y"]), z_m=float(data["z"]))

    if shape_type == "sphere":
        return Sphere(radius_m=float(data["radius"]))

    if shape_type == "cylinder":
        return Cylinder(height_m=float(data["height"]), radius_m=float(data["radius"]))

    raise ValueError(f"Unknown primitive shape type: {shape_type}")
