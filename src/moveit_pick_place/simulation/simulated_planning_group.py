"""Implement an interface for a simulated planning group."""

from __future__ import annotations

from typing import TYPE_CHECKING

from moveit_pick_place.io.logging import log_info
from moveit_pick_place.kinematics import Pose3D
from moveit_pick_place.robots import PlanningGroup, PlanResult

if TYPE_CHECKING:
    from collections.abc import Iterable

    from moveit_pick_place.kinematics import Configuration

FAILURE_ERROR_CODE = 99999
"""MoveIt's generic FAILURE error code, reported for simulated planning failures."""


class SimulatedPlanningGroup(PlanningGroup):
    """A planning group that moves instantly to its targets, used for dry runs and testing.

    Plans always succeed unless their (1-based) call index is listed in `failing_plans`.
    """

    def __init__(
        self,
        name: str,
        named_targets: dict[str, Configuration],
        *,
        ee_link: str,
        ee_pose: Pose3D,
        group_names: Iterable[str] = (),
        failing_plans: Iterable[int] = (),
    ) -> None:
        """Initialize the simulated planning group.

        :param name: Name of the planning group
        :param named_targets: Map from preset names (e.g., "home") to joint configurations
        :param ee_link: Name of the link whose pose is tracked as the end-effector
        :param ee_pose: Initial pose of the end-effector link
        :param group_names: Names of all planning groups on the simulated robot
        :param failing_plans: 1-based indices of plan() calls that should report failure
        """
        super().__init__(name)
        self._named_targets = {k: dict(v) for k, v in named_targets.items()}
        self._ee_link = ee_link
        self._group_names = list(group_names) or [name]
        self._failing_plans = set(failing_plans)
        self._plan_count = 0

        self.ee_pose = ee_pose
        self.configuration: Configuration = {}
        self.target: Configuration | Pose3D | None = None

        self.calls: list[tuple[str, object]] = []
        """Log of every call made on the group, with its argument (if any)."""

    @property
    def joint_model_group_names(self) -> list[str]:
        """Retrieve the names of all planning groups defined for the simulated robot."""
        return list(self._group_names)

    def get_named_target_values(self, target_name: str) -> Configuration:
        """Look up a named preset configuration of the group.

        :raises KeyError: If the group has no preset with the given name
        """
        if target_name not in self._named_targets:
            raise KeyError(f"Group '{self.name}' has no named target '{target_name}'.")
        return dict(self._named_targets[target_name])

    def set_joint_value_target(self, configuration: Configuration) -> None:
        """Set a joint-space target for the next planning request."""
        self.calls.append(("set_joint_value_target", dict(configuration)))
        self.target = dict(configuration)

    def set_pose_target(self, pose: Pose3D) -> None:
        """Set an end-effector pose target for the next planning request."""
        self.calls.append(("set_pose_target", pose))
        self.target = pose

    def get_current_pose(self, link_name: str) -> Pose3D:
        """Retrieve the current pose of the end-effector link.

        :raises KeyError: If the named link isn't the tracked end-effector link
        """
        if link_name != self._ee_link:
            raise KeyError(f"Simulated group '{self.name}' only tracks link '{self._ee_link}'.")
        return self.ee_pose

    def plan(self) -> PlanResult:
        """Report a plan toward the current target (failing on the configured call indices)."""
        self._plan_count += 1
        self.calls.append(("plan", self._plan_count))

        if self._plan_count in self._failing_plans:
            return PlanResult(success=False, error_code=FAILURE_ERROR_CODE)
        return PlanResult(success=True)

    def move(self) -> bool:
        """Jump to the current target instantly."""
        self.calls.append(("move", self.target))

        if isinstance(self.target, Pose3D):
            self.ee_pose = self.target
        elif self.target is not None:
            self.configuration.update(self.target)

        log_info(f"[Simulated {self.name}] Reached target {self.target}.")
        return True
