"""Define the fixed pick-and-place sequence run against a planning scene and two planning groups."""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

from moveit_pick_place.io.logging import console, log_info, log_warn
from moveit_pick_place.io.tables import render_acm_table
from moveit_pick_place.tasks.outcome import StepOutcome

if TYPE_CHECKING:
    from moveit_pick_place.kinematics import Pose3D
    from moveit_pick_place.robots import PlanningGroup
    from moveit_pick_place.scene import ObstacleDescriptor, PlanningScene
    from moveit_pick_place.tasks.pick_place_config import PickPlaceConfig

MOTION_STEPS = (
    "home",
    "approach",
    "open_gripper",
    "descend",
    "close_gripper",
    "transport",
    "lower",
    "release",
)
"""Names of the motion steps, in the order they are requested."""

SCENE_STEPS = ("add_object", "allow_collisions", "attach_object", "remove_object")
"""Names of the scene edits, in the order they are requested."""


class PickAndPlaceTask:
    """Scripted pick-and-place: add an object, grasp it, carry it, release it, and remove it.

    Every motion step sets a target, requests a plan, logs whether planning succeeded, and then
    moves. The planning result never changes what happens next: there are no retries and no
    early exits, so a failed plan is followed by a move request all the same.
    """

    def __init__(
        self,
        arm: PlanningGroup,
        gripper: PlanningGroup,
        scene: PlanningScene,
        config: PickPlaceConfig,
    ) -> None:
        """Initialize the task with the services it drives.

        :param arm: Planning group moving the end-effector
        :param gripper: Planning group opening and closing the gripper
        :param scene: Shared planning scene used for collision checking
        :param config: Names, geometry, and waypoints used by the sequence
        """
        self.arm = arm
        self.gripper = gripper
        self.scene = scene
        self.config = config

    def run(self) -> list[StepOutcome]:
        """Run the full sequence once, in order.

        :return: Outcome of each scene edit and motion step, in the order they were requested
        """
        cfg = self.config
        outcomes: list[StepOutcome] = []

        obstacle = cfg.make_obstacle(self.scene.planning_frame)
        outcomes.append(self.add_object(obstacle))
        outcomes.append(self.allow_collisions())

        log_info(f"Available planning groups: {', '.join(self.arm.joint_model_group_names)}")

        outcomes.append(self.move_to_named_target(self.arm, "home", cfg.home_target))

        # Keep the end-effector's current orientation for every pose target
        current_pose = self.arm.get_current_pose(cfg.ee_link)
        target = current_pose.with_position(cfg.pre_grasp)
        outcomes.append(self.move_to_pose("approach", target))

        outcomes.append(self.move_to_named_target(self.gripper, "open_gripper", cfg.open_target))

        target = target.translated(dz=-cfg.grasp_descent_m)
        outcomes.append(self.move_to_pose("descend", target))

        outcomes.append(
            self.move_to_named_target(self.gripper, "close_gripper", cfg.closed_target),
        )
        outcomes.append(self.attach_object())

        offset = cfg.transport_offset
        target = target.translated(dx=offset.x, dy=offset.y, dz=offset.z)
        outcomes.append(self.move_to_pose("transport", target))

        target = target.translated(dz=-cfg.place_descent_m)
        outcomes.append(self.move_to_pose("lower", target))

        outcomes.append(self.move_to_named_target(self.gripper, "release", cfg.open_target))
        outcomes.append(self.remove_object())

        return outcomes

    def add_object(self, obstacle: ObstacleDescriptor) -> StepOutcome:
        """Add the object to be picked into the planning scene."""
        added = self.scene.apply_collision_objects([obstacle])
        log_info(f"Added '{obstacle.name}' into the world at {obstacle.pose.position}.")
        self._settle()

        message = (
            f"Object '{obstacle.name}' added to the world."
            if added
            else f"Object '{obstacle.name}' did not appear in the world in time."
        )
        return StepOutcome("add_object", added, message)

    def allow_collisions(self) -> StepOutcome:
        """Permit collisions between the object and the gripper surfaces that grasp it."""
        entries = self.config.make_allowed_entries()
        acm = self.scene.allow_collisions(entries)

        names = [self.config.object_name, *self.config.allowed_links]
        console.print(render_acm_table(acm, names=names))
        self._settle()

        # The scene returns its matrix as it stands after the edit
        allowed = all(entry in acm.allowed_pairs() for entry in entries)
        links = ", ".join(self.config.allowed_links)
        if not allowed:
            log_warn(f"Collisions with '{self.config.object_name}' were not allowed by the scene.")

        message = (
            f"Collisions allowed between '{self.config.object_name}' and: {links}."
            if allowed
            else f"Scene rejected collisions between '{self.config.object_name}' and: {links}."
        )
        return StepOutcome("allow_collisions", allowed, message)

    def attach_object(self) -> StepOutcome:
        """Attach the grasped object to the gripper so that it moves with the arm."""
        attachment = self.config.make_attachment()
        attached = self.scene.apply_attached_collision_object(attachment)
        log_info(f"Attached '{attachment.object_name}' to link '{attachment.link_name}'.")

        return StepOutcome(
            "attach_object",
            attached,
            f"'{attachment.object_name}' attached to '{attachment.link_name}'.",
        )

    def remove_object(self) -> StepOutcome:
        """Remove the object from the world."""
        log_info(f"Removing '{self.config.object_name}' from the world.")
        removed = self.scene.remove_collision_objects([self.config.object_name])

        return StepOutcome(
            "remove_object",
            removed,
            f"World object '{self.config.object_name}' removed.",
        )

    def move_to_named_target(
        self,
        group: PlanningGroup,
        step: str,
        target_name: str,
    ) -> StepOutcome:
        """Move the given group to one of its named preset configurations.

        :raises KeyError: If the group has no preset with the given name
        """
        group.set_joint_value_target(group.get_named_target_values(target_name))
        return self._plan_and_move(group, step, f"named target '{target_name}'")

    def move_to_pose(self, step: str, target: Pose3D) -> StepOutcome:
        """Move the arm's end-effector to the given pose."""
        self.arm.set_pose_target(target)
        x, y, z = target.position
        return self._plan_and_move(self.arm, step, f"pose ({x:.3f}, {y:.3f}, {z:.3f})")

    def _plan_and_move(self, group: PlanningGroup, step: str, target_desc: str) -> StepOutcome:
        result = group.plan()
        suffix = "" if result.success else " FAILED"
        log_info(f"[{group.name}] Plan for step '{step}' toward {target_desc}{suffix}")

        # Move regardless of the planning result
        executed = group.move()
        if not executed:
            log_warn(f"[{group.name}] Execution of step '{step}' reported failure.")

        outcome_desc = (
            f"planning succeeded after {result.planning_time_s:.3f} s"
            if result.success
            else f"planning failed (error code {result.error_code})"
        )
        if not executed:
            outcome_desc += "; execution failed"

        return StepOutcome(step, result.success, f"{group.name} -> {target_desc}: {outcome_desc}")

    def _settle(self) -> None:
        if self.config.settle_s > 0:
            time.sleep(self.config.settle_s)
