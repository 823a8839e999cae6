"""Unit tests for Pose3D, a class representing poses in 3D space."""

import hypothesis.strategies as st
import pytest
from hypothesis import given

from moveit_pick_place.kinematics import Point3D, Pose3D

from .hypothesis_strategies import positions, poses


@given(poses())
def test_pose3d_to_list_and_back(pose: Pose3D) -> None:
    """Verify that any Pose3D is unchanged after converting to and from an equivalent list."""
    # Arrange/Act - Given a 3D pose, convert to and from a list of [x, y, z, roll, pitch, yaw]
    pose_list = pose.to_list()
    result_pose = Pose3D.from_list(pose_list, ref_frame=pose.ref_frame)

    # Assert - Expect that the list has length six and the resulting Pose3D equals the original
    assert len(pose_list) == 6, "Expected pose list of the form [x, y, z, roll, pitch, yaw]"
    assert pose.approx_equal(result_pose, atol=1e-06)


def test_pose3d_from_yaml_dict_uses_given_frame() -> None:
    """Verify that a pose given as a dict takes the frame named in the dict."""
    # Arrange/Act - Load a pose from a dict, providing a different default frame
    pose_data = {"xyz_rpy": [0.3, 0.5, -0.165, 0.0, 0.0, 1.57], "frame": "table"}
    pose = Pose3D.from_yaml_data(pose_data, default_frame="base_link")

    # Assert - Expect the frame from the dict, not the default
    assert pose.ref_frame == "table"
    assert pose.approx_equal(Pose3D.from_xyz_rpy(0.3, 0.5, -0.165, yaw_rad=1.57, ref_frame="table"))


@given(poses(), positions())
def test_pose3d_with_position_keeps_orientation(pose: Pose3D, position: Point3D) -> None:
    """Verify that moving a pose to a new position leaves its orientation and frame unchanged."""
    # Arrange/Act - Move the pose to the given position
    result = pose.with_position(position)

    # Assert - Expect the new position with the original orientation and frame
    assert result.position == position
    assert result.orientation == pose.orientation
    assert result.ref_frame == pose.ref_frame


@given(poses(), st.floats(min_value=-1.0, max_value=1.0))
def test_pose3d_translated_along_z(pose: Pose3D, dz: float) -> None:
    """Verify that translating a pose along z changes only its z-coordinate."""
    # Arrange/Act - Shift the pose along the z-axis of its frame
    result = pose.translated(dz=dz)

    # Assert - Expect that only the z-coordinate changed
    assert result.position.x == pose.position.x
    assert result.position.y == pose.position.y
    assert result.position.z == pytest.approx(pose.position.z + dz)
    assert result.orientation == pose.orientation


def test_pose3d_from_yaml_list_uses_default_frame() -> None:
    """Verify that a pose given as a list of six floats takes the default frame."""
    # Arrange/Act - Load a pose from a list, providing a default frame
    pose = Pose3D.from_yaml_data([0.3, 0.5, -0.165, 0.0, 0.0, 0.0], default_frame="base_link")

    # Assert - Expect the given position, identity orientation, and default frame
    assert pose.ref_frame == "base_link"
    assert pose.approx_equal(Pose3D.from_xyz_rpy(0.3, 0.5, -0.165, ref_frame="base_link"))


def test_pose3d_from_unsupported_yaml_data_raises_error() -> None:
    """Verify that loading a pose from a string raises a TypeError."""
    # Arrange/Act/Assert - Expect that unsupported YAML data raises an error
    with pytest.raises(TypeError):
        Pose3D.from_yaml_data("0.3 0.5 0.2")  # type: ignore[arg-type]
