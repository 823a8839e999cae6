"""Unit tests for Point3D, a class representing positions in 3D space."""

import pytest
from hypothesis import given

from moveit_pick_place.kinematics import Point3D

from .hypothesis_strategies import positions


@given(positions())
def test_point3d_to_sequence_and_back(point: Point3D) -> None:
    """Verify that any Point3D is unchanged after converting to and from a tuple."""
    # Arrange/Act - Given a 3D point, convert to and from a tuple of coordinates
    result = Point3D.from_sequence(tuple(point))

    # Assert - Expect that the resulting point equals the original
    assert result == point


@given(positions(), positions())
def test_point3d_addition_is_componentwise(a: Point3D, b: Point3D) -> None:
    """Verify that adding two points adds their coordinates."""
    # Arrange/Act - Add the two points
    result = a + b

    # Assert - Expect that each coordinate is the sum of the coordinates
    assert result.to_array() == pytest.approx(a.to_array() + b.to_array())


def test_point3d_from_wrong_length_sequence_raises_error() -> None:
    """Verify that a Point3D cannot be constructed from a sequence of two values."""
    # Arrange/Act/Assert - Expect that a sequence of the wrong length raises an error
    with pytest.raises(ValueError, match="3 values"):
        Point3D.from_sequence([1.0, 2.0])
