"""Define a class to edit and query the MoveIt planning scene."""

from __future__ import annotations

import threading
import time
from typing import TYPE_CHECKING

import rospy
from moveit_commander import PlanningSceneInterface
from moveit_msgs.msg import PlanningScene as PlanningSceneMsg
from moveit_msgs.msg import PlanningSceneComponents
from moveit_msgs.srv import ApplyPlanningScene, GetPlanningScene

from moveit_pick_place.scene import PlanningScene
from moveit_pick_place.ros.msg_conversion import (
    acm_from_msg,
    acm_to_msg,
    make_attached_collision_object_msg,
    make_collision_object_msg,
    make_remove_object_msg,
    pose_from_msg,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from moveit_pick_place.kinematics import Pose3D
    from moveit_pick_place.scene import (
        AllowedCollisionEntry,
        AllowedCollisionMatrix,
        AttachmentRecord,
        ObstacleDescriptor,
    )


class MoveItPlanningScene(PlanningScene):
    """An interface to the planning scene maintained by MoveIt's move_group node.

    Edits are sent as diffs through the `apply_planning_scene` service, which blocks until
    move_group has applied them.
    """

    def __init__(self, planning_frame: str, ns: str = "", timeout_s: float = 10.0) -> None:
        """Connect to the planning scene services of move_group.

        :param planning_frame: Frame in which the scene is expressed (the arm's planning frame)
        :param ns: Namespace of the move_group node (defaults to the root namespace)
        :param timeout_s: Duration (seconds) to wait for services and for scene updates
        :raises RuntimeError: If the planning scene services are unavailable
        """
        self._planning_frame = planning_frame
        self._timeout_s = timeout_s
        self.planning_scene = PlanningSceneInterface(ns=ns)

        self._get_scene = rospy.ServiceProxy(f"{ns}/get_planning_scene", GetPlanningScene)
        self._apply_scene = rospy.ServiceProxy(f"{ns}/apply_planning_scene", ApplyPlanningScene)
        for service in (self._get_scene, self._apply_scene):
            try:
                service.wait_for_service(timeout=timeout_s)
            except rospy.ROSException as error:
                error_msg = f"Couldn't find ROS service '{service.resolved_name}' in time!"
                rospy.logerr(error_msg)
                raise RuntimeError(error_msg) from error

        self._acm_lock = threading.Lock()

    @property
    def planning_frame(self) -> str:
        """Retrieve the name of the frame in which the scene is expressed."""
        return self._planning_frame

    def _apply_diff(self, diff: PlanningSceneMsg) -> bool:
        """Apply the given planning scene diff through move_group's service."""
        diff.is_diff = True
        diff.robot_state.is_diff = True
        response = self._apply_scene(diff)
        if not response.success:
            rospy.logerr("MoveIt rejected a planning scene diff.")
        return bool(response.success)

    def apply_collision_objects(self, obstacles: Iterable[ObstacleDescriptor]) -> bool:
        """Add the given obstacles to the world, replacing objects with the same names."""
        obstacles = list(obstacles)
        diff = PlanningSceneMsg()
        diff.world.collision_objects = [make_collision_object_msg(o) for o in obstacles]
        self._apply_diff(diff)

        all_added = True
        for obstacle in obstacles:
            added = self._wait_until(lambda n=obstacle.name: n in self.known_object_names())
            if not added:
                rospy.logwarn(f"'{obstacle.name}' did not appear in the MoveIt planning scene.")
            all_added = all_added and added

        return all_added

    def remove_collision_objects(self, names: Iterable[str]) -> bool:
        """Remove the named world objects; objects attached to the robot are left untouched."""
        names = list(names)
        diff = PlanningSceneMsg()
        diff.world.collision_objects = [make_remove_object_msg(name) for name in names]
        self._apply_diff(diff)

        attached = self.attached_object_names()
        for name in names:
            if name in attached:
                rospy.logwarn(f"'{name}' is attached to the robot, so it stays in the scene.")

        return self._wait_until(lambda: not set(names) & self.known_object_names())

    def apply_attached_collision_object(self, attachment: AttachmentRecord) -> bool:
        """Attach the named world object to a robot link as described by the given record."""
        diff = PlanningSceneMsg()
        diff.robot_state.attached_collision_objects = [
            make_attached_collision_object_msg(attachment),
        ]
        self._apply_diff(diff)

        attached = self._wait_until(lambda: attachment.object_name in self.attached_object_names())
        if not attached:
            rospy.logwarn(f"'{attachment.object_name}' was not attached to the robot in time.")
        return attached

    def get_allowed_collision_matrix(self) -> AllowedCollisionMatrix:
        """Retrieve the current allowed collision matrix from move_group."""
        components = PlanningSceneComponents(
            components=PlanningSceneComponents.ALLOWED_COLLISION_MATRIX,
        )
        response = self._get_scene(components)
        return acm_from_msg(response.scene.allowed_collision_matrix)

    def allow_collisions(self, entries: Iterable[AllowedCollisionEntry]) -> AllowedCollisionMatrix:
        """Permit collisions between each given pair as a single read-modify-write of the matrix.

        The lock covers reading the matrix, editing it, and applying the diff, so that
        concurrent edits from this process cannot interleave.

        :return: The matrix read back from move_group after the edit
        """
        with self._acm_lock:
            acm = self.get_allowed_collision_matrix()
            acm.allow(entries)

            diff = PlanningSceneMsg()
            diff.allowed_collision_matrix = acm_to_msg(acm)
            if not self._apply_diff(diff):
                rospy.logwarn("The allowed collision matrix was left unchanged.")

            return self.get_allowed_collision_matrix()

    def known_object_names(self) -> set[str]:
        """Retrieve the names of all world (unattached) objects in the scene."""
        return set(self.planning_scene.get_known_object_names())

    def attached_object_names(self) -> set[str]:
        """Retrieve the names of all objects attached to the robot."""
        return set(self.planning_scene.get_attached_objects().keys())

    def get_object_pose(self, name: str) -> Pose3D | None:
        """Look up the pose of the named world object (None if it isn't in the world)."""
        pose_msgs = self.planning_scene.get_object_poses([name])
        if name not in pose_msgs:
            return None
        return pose_from_msg(pose_msgs[name]).with_frame(self._planning_frame)

    def _wait_until(self, condition: Callable[[], bool]) -> bool:
        """Wait until the given condition on the planning scene holds.

        :returns: True if the condition holds before the timeout, otherwise False
        """
        end_time = time.time() + self._timeout_s
        while time.time() < end_time:
            if condition():
                return True
            time.sleep(0.1)

        return False
