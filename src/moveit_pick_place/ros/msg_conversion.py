"""Define functions to convert between the package's data structures and ROS messages."""

from __future__ import annotations

from geometry_msgs.msg import Point, Pose, PoseStamped
from geometry_msgs.msg import Quaternion as QuaternionMsg
from moveit_msgs.msg import AllowedCollisionEntry as AllowedCollisionEntryMsg
from moveit_msgs.msg import AllowedCollisionMatrix as AllowedCollisionMatrixMsg
from moveit_msgs.msg import AttachedCollisionObject, CollisionObject
from shape_msgs.msg import SolidPrimitive

from moveit_pick_place.collision_models import AnyPrimitive, Box, Cylinder, Sphere
from moveit_pick_place.kinematics import DEFAULT_FRAME, Point3D, Pose3D, Quaternion
from moveit_pick_place.scene import AllowedCollisionMatrix, AttachmentRecord, ObstacleDescriptor


def point_to_msg(point: Point3D) -> Point:
    """Convert the given point into a geometry_msgs/Point message."""
    return Point(point.x, point.y, point.z)


def point_from_msg(point_msg: Point) -> Point3D:
    """Construct a Point3D from a geometry_msgs/Point message."""
    return Point3D(point_msg.x, point_msg.y, point_msg.z)


def quaternion_to_msg(q: Quaternion) -> QuaternionMsg:
    """Convert the given quaternion into a geometry_msgs/Quaternion message."""
    return QuaternionMsg(q.x, q.y, q.z, q.w)


def quaternion_from_msg(q_msg: QuaternionMsg) -> Quaternion:
    """Construct a Quaternion from a geometry_msgs/Quaternion message."""
    return Quaternion(q_msg.x, q_msg.y, q_msg.z, q_msg.w)


def pose_to_msg(pose: Pose3D) -> Pose:
    """Convert the given pose into a geometry_msgs/Pose message."""
    return Pose(point_to_msg(pose.position), quaternion_to_msg(pose.orientation))


def pose_to_stamped_msg(pose: Pose3D) -> PoseStamped:
    """Convert the given pose into a geometry_msgs/PoseStamped message."""
    msg = PoseStamped()
    msg.header.frame_id = pose.ref_frame
    msg.pose = pose_to_msg(pose)
    return msg


def pose_from_msg(pose_msg: Pose | PoseStamped) -> Pose3D:
    """Construct a Pose3D from a geometry_msgs/Pose or geometry_msgs/PoseStamped message.

    :param pose_msg: ROS message representing a pose or time-stamped pose
    :return: Constructed Pose3D instance
    :raises TypeError: If the given message is neither a geometry_msgs/Pose nor PoseStamped
    """
    if isinstance(pose_msg, Pose):
        frame_id = DEFAULT_FRAME
        pose = pose_msg
    elif isinstance(pose_msg, PoseStamped):
        frame_id = pose_msg.header.frame_id
        pose = pose_msg.pose  # Extract just the Pose from the PoseStamped
    else:
        raise TypeError(f"Received unexpected ROS message type: {type(pose_msg)}")

    return Pose3D(point_from_msg(pose.position), quaternion_from_msg(pose.orientation), frame_id)


def primitive_shape_type_to_integer(shape: AnyPrimitive) -> int:
    """Get the shape_msgs/SolidPrimitive integer type for the given type of primitive shape."""
    if isinstance(shape, Box):
        return SolidPrimitive.BOX
    if isinstance(shape, Sphere):
        return SolidPrimitive.SPHERE
    if isinstance(shape, Cylinder):
        return SolidPrimitive.CYLINDER

    raise ValueError(f"Unrecognized type of primitive shape: {shape}")


def primitive_shape_to_msg(shape: AnyPrimitive) -> SolidPrimitive:
    """Convert a primitive geometric shape into a shape_msgs/SolidPrimitive message."""
    msg = SolidPrimitive()
    msg.type = primitive_shape_type_to_integer(shape)
    msg.dimensions = shape.to_dimensions()
    return msg


def make_collision_object_msg(obstacle: ObstacleDescriptor) -> CollisionObject:
    """Construct a moveit_msgs/CollisionObject message adding the given obstacle to the world."""
    msg = CollisionObject()
    msg.header.frame_id = obstacle.pose.ref_frame
    msg.id = obstacle.name

    # The primitive is centered on the object frame, so its pose is given directly
    msg.pose = pose_to_msg(Pose3D.identity(ref_frame=obstacle.pose.ref_frame))
    msg.primitives = [primitive_shape_to_msg(obstacle.shape)]
    msg.primitive_poses = [pose_to_msg(obstacle.pose)]

    msg.operation = CollisionObject.ADD
    return msg


def make_remove_object_msg(name: str) -> CollisionObject:
    """Construct a moveit_msgs/CollisionObject message removing the named world object."""
    msg = CollisionObject()
    msg.id = name
    msg.operation = CollisionObject.REMOVE
    return msg


def make_attached_collision_object_msg(attachment: AttachmentRecord) -> AttachedCollisionObject:
    """Construct a moveit_msgs/AttachedCollisionObject message for the given attachment.

    The message carries no geometry, so MoveIt moves the existing world object onto the link.
    """
    msg = AttachedCollisionObject()
    msg.link_name = attachment.link_name
    msg.touch_links = list(attachment.touch_links)
    msg.object.id = attachment.object_name
    msg.object.operation = CollisionObject.ADD
    return msg


def acm_from_msg(acm_msg: AllowedCollisionMatrixMsg) -> AllowedCollisionMatrix:
    """Construct an AllowedCollisionMatrix from a moveit_msgs/AllowedCollisionMatrix message."""
    rows = [list(entry.enabled) for entry in acm_msg.entry_values]
    defaults = dict(zip(acm_msg.default_entry_names, acm_msg.default_entry_values))
    return AllowedCollisionMatrix.from_rows(list(acm_msg.entry_names), rows, defaults)


def acm_to_msg(acm: AllowedCollisionMatrix) -> AllowedCollisionMatrixMsg:
    """Convert an AllowedCollisionMatrix into a moveit_msgs/AllowedCollisionMatrix message."""
    msg = AllowedCollisionMatrixMsg()
    msg.entry_names = acm.entry_names
    msg.entry_values = [AllowedCollisionEntryMsg(enabled=row) for row in acm.to_rows()]

    defaults = acm.default_entries
    msg.default_entry_names = list(defaults.keys())
    msg.default_entry_values = list(defaults.values())
    return msg
