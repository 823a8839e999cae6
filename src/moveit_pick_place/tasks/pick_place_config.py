"""Define the configuration of the pick-and-place sequence."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from moveit_pick_place.collision_models import AnyPrimitive, Box, create_primitive_shape
from moveit_pick_place.io.pydantic_schemata import PickPlaceConfigSchema, Pose3DDictSchema
from moveit_pick_place.kinematics import Point3D, Pose3D
from moveit_pick_place.scene import AllowedCollisionEntry, AttachmentRecord, ObstacleDescriptor

if TYPE_CHECKING:
    from pathlib import Path


@dataclass(frozen=True)
class PickPlaceConfig:
    """Names, geometry, and waypoints for one run of the pick-and-place sequence.

    The defaults reproduce the UR5 + Robotiq 85 demo: a 6 cm box is picked up at
    (0.3, 0.5) and put down 0.6 m away along the negative x-axis.
    """

    arm_group: str = "ur5_arm"
    gripper_group: str = "gripper"
    ee_link: str = "ee_link"

    home_target: str = "home"
    open_target: str = "open"
    closed_target: str = "closed"

    object_name: str = "blue_box"
    object_shape: AnyPrimitive = field(default_factory=lambda: Box(0.06, 0.06, 0.06))
    object_xyz_rpy: tuple[float, ...] = (0.3, 0.5, 1.045 - 1.21, 0.0, 0.0, 0.0)
    object_frame: str | None = None
    """Frame of the object pose (if None, the arm's planning frame is used)."""

    allowed_links: tuple[str, ...] = (
        "robotiq_85_left_finger_tip_link",
        "robotiq_85_right_finger_tip_link",
    )
    attach_link: str = "robotiq_85_right_finger_tip_link"
    touch_links: tuple[str, ...] = ("robotiq_85_left_finger_tip_link",)

    pre_grasp: Point3D = Point3D(0.3, 0.5, 0.2)
    grasp_descent_m: float = 0.2
    transport_offset: Point3D = Point3D(-0.6, 0.0, 0.2)
    place_descent_m: float = 0.14

    settle_s: float = 0.1
    scene_timeout_s: float = 10.0

    @classmethod
    def from_schema(cls, schema: PickPlaceConfigSchema) -> PickPlaceConfig:
        """Construct a configuration from a validated configuration schema."""
        pose_data = schema.object.pose
        if isinstance(pose_data, Pose3DDictSchema):
            xyz_rpy = tuple(pose_data.xyz_rpy)
            object_frame = pose_data.frame
        else:
            xyz_rpy = tuple(pose_data)
            object_frame = schema.planning_frame

        return cls(
            arm_group=schema.groups.arm,
            gripper_group=schema.groups.gripper,
            ee_link=schema.groups.ee_link,
            home_target=schema.named_targets.home,
            open_target=schema.named_targets.gripper_open,
            closed_target=schema.named_targets.gripper_closed,
            object_name=schema.object.name,
            object_shape=create_primitive_shape(schema.object.shape.model_dump()),
            object_xyz_rpy=xyz_rpy,
            object_frame=object_frame,
            allowed_links=tuple(schema.grasp.allowed_links),
            attach_link=schema.grasp.attach_link,
            touch_links=tuple(schema.grasp.touch_links),
            pre_grasp=Point3D.from_sequence(schema.waypoints.pre_grasp),
            grasp_descent_m=schema.waypoints.grasp_descent_m,
            transport_offset=Point3D.from_sequence(schema.waypoints.transport_offset),
            place_descent_m=schema.waypoints.place_descent_m,
            settle_s=schema.timing.settle_s,
            scene_timeout_s=schema.timing.scene_timeout_s,
        )

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> PickPlaceConfig:
        """Load a configuration from a YAML file (missing fields take their default values)."""
        return cls.from_schema(PickPlaceConfigSchema.validate_yaml(yaml_path))

    def to_yaml_data(self) -> dict[str, Any]:
        """Convert the configuration into a dictionary matching the YAML configuration schema."""
        pose = self.object_pose_data()

        shape_type = self.object_shape.type_name
        shape_data: dict[str, Any] = {"type": shape_type}
        shape_data.update(zip(_SHAPE_FIELDS[shape_type], self.object_shape.to_dimensions()))

        return {
            "groups": {
                "arm": self.arm_group,
                "gripper": self.gripper_group,
                "ee_link": self.ee_link,
            },
            "named_targets": {
                "home": self.home_target,
                "gripper_open": self.open_target,
                "gripper_closed": self.closed_target,
            },
            "object": {"name": self.object_name, "shape": shape_data, "pose": pose},
            "grasp": {
                "allowed_links": list(self.allowed_links),
                "attach_link": self.attach_link,
                "touch_links": list(self.touch_links),
            },
            "waypoints": {
                "pre_grasp": list(self.pre_grasp),
                "grasp_descent_m": self.grasp_descent_m,
                "transport_offset": list(self.transport_offset),
                "place_descent_m": self.place_descent_m,
            },
            "timing": {"settle_s": self.settle_s, "scene_timeout_s": self.scene_timeout_s},
        }

    def object_pose_data(self) -> list[float] | dict[str, Any]:
        """Express the object pose as YAML data: a list, or a dict if the frame is configured."""
        if self.object_frame is None:
            return list(self.object_xyz_rpy)
        return {"xyz_rpy": list(self.object_xyz_rpy), "frame": self.object_frame}

    def make_obstacle(self, planning_frame: str) -> ObstacleDescriptor:
        """Build the descriptor of the object to be picked.

        :param planning_frame: Frame used for the object pose if the config doesn't specify one
        """
        pose = Pose3D.from_yaml_data(self.object_pose_data(), default_frame=planning_frame)
        return ObstacleDescriptor(self.object_name, self.object_shape, pose)

    def make_allowed_entries(self) -> list[AllowedCollisionEntry]:
        """Build the object-gripper pairs that are permitted to collide."""
        return [AllowedCollisionEntry(self.object_name, link) for link in self.allowed_links]

    def make_attachment(self) -> AttachmentRecord:
        """Build the record attaching the object to the gripper once it is grasped."""
        return AttachmentRecord(self.object_name, self.attach_link, self.touch_links)


_SHAPE_FIELDS = {
    "box": ("x", "y", "z"),
    "sphere": ("radius",),
    "cylinder": ("height", "radius"),
}
"""Names of the YAML fields holding each primitive's dimensions, in `to_dimensions()` order."""
