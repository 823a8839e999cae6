"""Define a class to plan for and move a planning group using MoveIt."""

from __future__ import annotations

from typing import TYPE_CHECKING, Tuple

import rospy
from moveit_commander import MoveGroupCommander, RobotCommander
from moveit_msgs.msg import MoveItErrorCodes, RobotTrajectory

from moveit_pick_place.robots import PlanningGroup, PlanResult
from moveit_pick_place.ros.msg_conversion import pose_from_msg, pose_to_stamped_msg

if TYPE_CHECKING:
    from moveit_pick_place.kinematics import Configuration, Pose3D

MoveItResult = Tuple[bool, RobotTrajectory, float, MoveItErrorCodes]
"""Boolean success, trajectory message, planning time (s), and error codes.

Reference: https://tinyurl.com/moveit-noetic-plan
"""


class MoveItPlanningGroup(PlanningGroup):
    """A MoveIt-based interface for a planning group."""

    def __init__(self, name: str, wait_for_servers_s: float = 30.0) -> None:
        """Connect to MoveIt's move_group node for the named planning group.

        :param name: Name of the planning group (as defined in the robot's SRDF)
        :param wait_for_servers_s: Duration (seconds) to wait for move_group's action servers
        :raises RuntimeError: If the group cannot be loaded (e.g., move_group isn't running)
        """
        super().__init__(name)

        try:
            self.move_group = MoveGroupCommander(name, wait_for_servers=wait_for_servers_s)
        except RuntimeError as error:
            rospy.logerr(f"Unable to load planning group '{name}': {error}")
            raise RuntimeError(f"Couldn't connect to MoveIt planning group '{name}'.") from error

        self._robot_commander = RobotCommander()
        rospy.loginfo(f"[{self.name}] Planning frame: {self.move_group.get_planning_frame()}")

    @property
    def planning_frame(self) -> str:
        """Retrieve the name of the frame in which the group plans."""
        return self.move_group.get_planning_frame()

    @property
    def joint_model_group_names(self) -> list[str]:
        """Retrieve the names of all planning groups defined for the robot."""
        return list(self._robot_commander.get_group_names())

    def get_named_target_values(self, target_name: str) -> Configuration:
        """Look up a named preset configuration of the group from the robot's SRDF.

        :raises KeyError: If the group has no preset with the given name
        """
        if target_name not in self.move_group.get_named_targets():
            raise KeyError(f"Group '{self.name}' has no named target '{target_name}'.")
        return dict(self.move_group.get_named_target_values(target_name))

    def set_joint_value_target(self, configuration: Configuration) -> None:
        """Set a joint-space target for the next planning request."""
        self.move_group.set_joint_value_target(configuration)

    def set_pose_target(self, pose: Pose3D) -> None:
        """Set an end-effector pose target for the next planning request."""
        self.move_group.set_pose_target(pose_to_stamped_msg(pose))

    def get_current_pose(self, link_name: str) -> Pose3D:
        """Retrieve the current pose of the named link in the planning frame."""
        return pose_from_msg(self.move_group.get_current_pose(link_name))

    def plan(self) -> PlanResult:
        """Compute a plan from the current state to the current target."""
        self.move_group.set_start_state_to_current_state()
        result: MoveItResult = self.move_group.plan()
        success, _, planning_time_s, error_code = result

        outcome_desc = "succeeded" if success else "failed"
        rospy.loginfo(f"[{self.name}] Motion planning {outcome_desc} after {planning_time_s:.3f} s")

        if not success:
            rospy.logerr(f"[{self.name}] Motion planning error code: {error_code.val}.")

        return PlanResult(bool(success), float(planning_time_s), int(error_code.val))

    def move(self) -> bool:
        """Plan to the current target and execute the result, blocking until motion ends."""
        success = self.move_group.go(wait=True)
        self.move_group.stop()  # Ensure there's no residual movement
        return bool(success)
