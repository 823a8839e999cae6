"""Unit tests for classes representing 3D rotations and orientations."""

import numpy as np
import pytest
from hypothesis import given

from moveit_pick_place.kinematics import EulerRPY, Quaternion

from .hypothesis_strategies import angles_rad, quaternions


@given(quaternions())
def test_quaternion_is_normalized(quat: Quaternion) -> None:
    """Verify that every constructed Quaternion has unit norm."""
    # Arrange/Act/Assert - Given a constructed quaternion, expect that its norm is one
    assert np.linalg.norm(quat.to_array()) == pytest.approx(1.0)


@given(quaternions())
def test_quaternion_to_euler_rpy_and_back(quat: Quaternion) -> None:
    """Verify that any Quaternion is unchanged after converting to and from Euler angles."""
    # Arrange/Act - Given a unit quaternion, convert to and from Euler RPY angles
    euler_rpy = quat.to_euler_rpy()
    result_quat = euler_rpy.to_quaternion()

    # Assert - Expect that the resulting quaternion equals the original (modulo negation)
    assert quat.approx_equal(result_quat, atol=1e-07)


@given(quaternions())
def test_quaternion_equals_its_negation(quat: Quaternion) -> None:
    """Verify that a Quaternion is considered equal to its negation."""
    # Arrange - Negate each component of the quaternion
    negated = Quaternion(-quat.x, -quat.y, -quat.z, -quat.w)

    # Act/Assert - Expect that both quaternions express the same rotation
    assert quat.approx_equal(negated)


@given(angles_rad())
def test_yaw_rotation_to_quaternion(yaw_rad: float) -> None:
    """Verify that a pure yaw rotation becomes a quaternion about the z-axis."""
    # Arrange/Act - Convert a rotation about the z-axis into a quaternion
    quat = EulerRPY(0.0, 0.0, yaw_rad).to_quaternion()

    # Assert - Expect that the quaternion has no x or y component
    expected = Quaternion(0.0, 0.0, np.sin(yaw_rad / 2), np.cos(yaw_rad / 2))
    assert quat.approx_equal(expected, atol=1e-07)


def test_zero_quaternion_raises_error() -> None:
    """Verify that attempting to construct an all-zero Quaternion raises a ValueError."""
    # Arrange/Act/Assert - Expect that constructing an all-zero Quaternion will raise an error
    with pytest.raises(ValueError, match="zero"):
        _ = Quaternion(0.0, 0.0, 0.0, 0.0)


def test_euler_rpy_from_wrong_length_sequence_raises_error() -> None:
    """Verify that EulerRPY cannot be constructed from a sequence of four values."""
    # Arrange/Act/Assert - Expect that a sequence of the wrong length raises an error
    with pytest.raises(ValueError, match="3 values"):
        EulerRPY.from_sequence([0.0, 0.0, 0.0, 1.0])
