"""Define strategies for generating data for property-based testing."""

import hypothesis.strategies as st

from moveit_pick_place.kinematics import Point3D, Pose3D, Quaternion
from moveit_pick_place.scene import AllowedCollisionEntry


@st.composite
def angles_rad(draw: st.DrawFn) -> float:
    """Generate random angles (in radians)."""
    return draw(st.floats(min_value=-10e2, max_value=10e2, allow_infinity=False, allow_nan=False))


@st.composite
def positions(draw: st.DrawFn) -> Point3D:
    """Generate random (x,y,z) points."""
    x = draw(st.floats(min_value=-10e3, max_value=10e3, allow_infinity=False, allow_nan=False))
    y = draw(st.floats(min_value=-10e3, max_value=10e3, allow_infinity=False, allow_nan=False))
    z = draw(st.floats(min_value=-10e3, max_value=10e3, allow_infinity=False, allow_nan=False))
    return Point3D(x, y, z)


@st.composite
def quaternions(draw: st.DrawFn) -> Quaternion:
    """Generate random unit quaternions."""
    x = draw(st.floats(min_value=-10.0, max_value=10.0, allow_infinity=False, allow_nan=False))
    y = draw(st.floats(min_value=-10.0, max_value=10.0, allow_infinity=False, allow_nan=False))
    z = draw(st.floats(min_value=-10.0, max_value=10.0, allow_infinity=False, allow_nan=False))
    return Quaternion(x, y, z, w=1.0)


@st.composite
def poses(draw: st.DrawFn) -> Pose3D:
    """Generate random relative poses in 3D space."""
    position = draw(positions())
    orientation = draw(quaternions())
    ref_frame = draw(st.text())
    return Pose3D(position, orientation, ref_frame)


@st.composite
def body_names(draw: st.DrawFn) -> str:
    """Generate random names of bodies in a planning scene."""
    return draw(st.text(alphabet="abcdefghijklmnopqrstuvwxyz_0123456789", min_size=1, max_size=12))


@st.composite
def allowed_entries(draw: st.DrawFn) -> AllowedCollisionEntry:
    """Generate random pairs of bodies allowed to collide."""
    return AllowedCollisionEntry(draw(body_names()), draw(body_names()))
