"""Define Pydantic models for validating pick-and-place YAML configuration files."""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator
from typing_extensions import Annotated

from moveit_pick_place.io.yaml_utils import load_yaml_data

if TYPE_CHECKING:
    from pathlib import Path

# =============================================================================
# Pose Schemata
# =============================================================================

XYZ = Tuple[float, float, float]
"""A three-tuple of floats representing a position or offset (meters)."""

XYZ_RPY = Tuple[float, float, float, float, float, float]
"""A six-tuple of floats representing an SE(3) pose."""


class Pose3DDictSchema(BaseModel):
    """Schema for specifying a Pose3D as a dictionary."""

    xyz_rpy: XYZ_RPY
    frame: str

    model_config = ConfigDict(extra="forbid")


Pose3DSchema = Union[XYZ_RPY, Pose3DDictSchema]
"""A Pose3D is a 6-tuple (in the planning frame) or a dict with `xyz_rpy` and `frame`."""

# =============================================================================
# Primitive Shape Schemata
# =============================================================================


class BoxPrimitiveSchema(BaseModel):
    """Schema for a 3D box primitive."""

    type: Literal["box"]
    x: float = Field(gt=0, description="X dimension size (meters)")
    y: float = Field(gt=0, description="Y dimension size (meters)")
    z: float = Field(gt=0, description="Z dimension size (meters)")

    model_config = ConfigDict(extra="forbid")


class SpherePrimitiveSchema(BaseModel):
    """Schema for a sphere primitive shape."""

    type: Literal["sphere"]
    radius: float = Field(gt=0, description="Radius (meters)")

    model_config = ConfigDict(extra="forbid")


class CylinderPrimitiveSchema(BaseModel):
    """Schema for a cylinder primitive shape."""

    type: Literal["cylinder"]
    height: float = Field(gt=0, description="Height (meters)")
    radius: float = Field(gt=0, description="Radius (meters)")

    model_config = ConfigDict(extra="forbid")


PrimitiveShapeSchema = Annotated[
    Union[BoxPrimitiveSchema, SpherePrimitiveSchema, CylinderPrimitiveSchema],
    Field(discriminator="type"),
]

# =============================================================================
# Pick-and-Place Schemata
# =============================================================================


class GroupsSchema(BaseModel):
    """Schema naming the two planning groups and the end-effector link."""

    arm: str = "ur5_arm"
    gripper: str = "gripper"
    ee_link: str = "ee_link"

    model_config = ConfigDict(extra="forbid")


class NamedTargetsSchema(BaseModel):
    """Schema naming the preset configurations used by the sequence."""

    home: str = "home"
    gripper_open: str = "open"
    gripper_closed: str = "closed"

    model_config = ConfigDict(extra="forbid")


class ObjectSchema(BaseModel):
    """Schema for the object to be picked, added to the scene as a collision object."""

    name: str = Field(default="blue_box", min_length=1)
    shape: PrimitiveShapeSchema = Field(
        default_factory=lambda: BoxPrimitiveSchema(type="box", x=0.06, y=0.06, z=0.06),
    )
    pose: Pose3DSchema = (0.3, 0.5, 1.045 - 1.21, 0.0, 0.0, 0.0)

    model_config = ConfigDict(extra="forbid")


class GraspSchema(BaseModel):
    """Schema for the gripper links that touch the object and the link that carries it."""

    allowed_links: List[str] = Field(
        default_factory=lambda: [
            "robotiq_85_left_finger_tip_link",
            "robotiq_85_right_finger_tip_link",
        ],
    )
    attach_link: str = "robotiq_85_right_finger_tip_link"
    touch_links: List[str] = Field(default_factory=lambda: ["robotiq_85_left_finger_tip_link"])

    model_config = ConfigDict(extra="forbid")


class WaypointsSchema(BaseModel):
    """Schema for the end-effector waypoints visited during the sequence."""

    pre_grasp: XYZ = (0.3, 0.5, 0.2)
    grasp_descent_m: float = Field(default=0.2, ge=0)
    transport_offset: XYZ = (-0.6, 0.0, 0.2)
    place_descent_m: float = Field(default=0.14, ge=0)

    model_config = ConfigDict(extra="forbid")


class TimingSchema(BaseModel):
    """Schema for delays and timeouts used while waiting on the planning scene."""

    settle_s: float = Field(default=0.1, ge=0, description="Pause after each scene edit (seconds)")
    scene_timeout_s: float = Field(default=10.0, gt=0, description="Scene update timeout (seconds)")

    model_config = ConfigDict(extra="forbid")


class PickPlaceConfigSchema(BaseModel):
    """Schema for a complete pick-and-place configuration file."""

    groups: GroupsSchema = Field(default_factory=GroupsSchema)
    named_targets: NamedTargetsSchema = Field(default_factory=NamedTargetsSchema)
    object: ObjectSchema = Field(default_factory=ObjectSchema)
    grasp: GraspSchema = Field(default_factory=GraspSchema)
    waypoints: WaypointsSchema = Field(default_factory=WaypointsSchema)
    timing: TimingSchema = Field(default_factory=TimingSchema)
    planning_frame: Optional[str] = Field(
        default=None,
        description="Frame of the object pose (if None, use the arm's planning frame)",
    )

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def check_attach_link_allowed(self) -> PickPlaceConfigSchema:
        """Validate that the link carrying the object is allowed to touch it."""
        if self.grasp.attach_link not in self.grasp.allowed_links:
            raise ValueError(
                f"Attach link '{self.grasp.attach_link}' must be one of the allowed links: "
                f"{self.grasp.allowed_links}.",
            )
        return self

    @classmethod
    def validate_yaml(cls, yaml_path: Path) -> PickPlaceConfigSchema:
        """Validate a pick-and-place config YAML file and return the resulting schema.

        An empty file is valid and yields the default configuration.

        :param yaml_path: Path to a YAML file to be validated by the schema
        :return: Validated PickPlaceConfigSchema instance
        """
        yaml_data = load_yaml_data(yaml_path) or {}

        try:
            return PickPlaceConfigSchema.model_validate(yaml_data)
        except ValidationError as v_err:
            raise RuntimeError(f"Validation error in {yaml_path}: {v_err}") from v_err
