"""Define a class to represent poses in 3D space."""

from __future__ import annotations

from dataclasses import dataclass, replace

from moveit_pick_place.kinematics.point3d import Point3D
from moveit_pick_place.kinematics.rotations import EulerRPY, Quaternion

DEFAULT_FRAME = "world"


@dataclass(frozen=True)
class Pose3D:
    """A position and orientation in 3D space."""

    position: Point3D
    orientation: Quaternion
    ref_frame: str = DEFAULT_FRAME

    @classmethod
    def identity(cls, ref_frame: str = DEFAULT_FRAME) -> Pose3D:
        """Construct a Pose3D corresponding to the identity transformation."""
        return Pose3D(Point3D.identity(), Quaternion.identity(), ref_frame)

    @classmethod
    def from_xyz_rpy(
        cls,
        x: float = 0.0,
        y: float = 0.0,
        z: float = 0.0,
        roll_rad: float = 0.0,
        pitch_rad: float = 0.0,
        yaw_rad: float = 0.0,
        ref_frame: str = DEFAULT_FRAME,
    ) -> Pose3D:
        """Construct a Pose3D from the given XYZ coordinates and Euler RPY angles.

        :param x: Translation along the x-axis
        :param y: Translation along the y-axis
        :param z: Translation along the z-axis
        :param roll_rad: Fixed-frame roll angle (radians) about the x-axis
        :param pitch_rad: Fixed-frame pitch angle (radians) about the y-axis
        :param yaw_rad: Fixed-frame yaw angle (radians) about the z-axis
        :param ref_frame: Reference frame of the constructed pose
        :return: Constructed Pose3D instance
        """
        position = Point3D(x, y, z)
        orientation = EulerRPY(roll_rad, pitch_rad, yaw_rad).to_quaternion()

        return Pose3D(position, orientation, ref_frame)

    @classmethod
    def from_list(cls, xyz_rpy: list[float], ref_frame: str = DEFAULT_FRAME) -> Pose3D:
        """Construct a Pose3D from the given list of XYZ-RPY data.

        :param xyz_rpy: List of six floats specifying (x, y, z, roll, pitch, yaw)
        :param ref_frame: Reference frame of the constructed Pose3D
        :return: Constructed Pose3D instance
        """
        if len(xyz_rpy) != 6:
            raise ValueError(f"Cannot construct Pose3D from list of length {len(xyz_rpy)}.")
        x, y, z, roll, pitch, yaw = xyz_rpy
        return Pose3D.from_xyz_rpy(x, y, z, roll, pitch, yaw, ref_frame)

    def to_list(self) -> list[float]:
        """Convert the Pose3D into a list of the form [x, y, z, roll (radians), pitch, yaw]."""
        x, y, z = self.position
        roll_rad, pitch_rad, yaw_rad = self.orientation.to_euler_rpy()
        return [x, y, z, roll_rad, pitch_rad, yaw_rad]

    @classmethod
    def from_yaml_data(cls, pose_data: dict | list, default_frame: str = DEFAULT_FRAME) -> Pose3D:
        """Construct a Pose3D instance from data imported from YAML.

        :param pose_data: Dictionary or list of YAML data representing a 3D pose
        :param default_frame: Default frame used for the pose, if the YAML doesn't provide one
        :return: Constructed Pose3D instance
        :raises TypeError: If the given YAML data has an unsupported type
        """
        if isinstance(pose_data, dict):
            pose_list = pose_data["xyz_rpy"]
            ref_frame = pose_data["frame"]
        elif isinstance(pose_data, list):
            pose_list = pose_data
            ref_frame = default_frame
        else:
            raise TypeError(f"Cannot load Pose3D from YAML data of type {type(pose_data)}")

        return Pose3D.from_list(pose_list, ref_frame)

    def with_position(self, position: Point3D) -> Pose3D:
        """Return a copy of this pose moved to the given position (orientation is unchanged)."""
        return replace(self, position=position)

    def with_frame(self, ref_frame: str) -> Pose3D:
        """Return a copy of this pose expressed with the given reference frame name."""
        return replace(self, ref_frame=ref_frame)

    def translated(self, dx: float = 0.0, dy: float = 0.0, dz: float = 0.0) -> Pose3D:
        """Return a copy of this pose shifted by the given offsets in its reference frame."""
        return self.with_position(self.position + Point3D(dx, dy, dz))

    def approx_equal(self, other: Pose3D, rtol: float = 1e-05, atol: float = 1e-08) -> bool:
        """Evaluate whether another Pose3D is approximately equal to this one."""
        return (
            self.ref_frame == other.ref_frame
            and self.position.approx_equal(other.position, rtol=rtol, atol=atol)
            and self.orientation.approx_equal(other.orientation, rtol=rtol, atol=atol)
        )
